import enum

from sqlalchemy import Boolean, Column, Enum, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from ..database import Base


class TalkType(str, enum.Enum):
    talk = "talk"
    demo = "demo"


class TalkLevel(str, enum.Enum):
    beginner = "beginner"
    advanced = "advanced"


class Event(Base):
    __tablename__ = "events"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(100), nullable=False)
    description = Column(String, default="")
    type = Column(Enum(TalkType), nullable=False, default=TalkType.talk)
    level = Column(Enum(TalkLevel), nullable=False, default=TalkLevel.beginner)
    is_selected = Column(Boolean, nullable=False, default=False)
    # Copy of the creator's username, stamped once at creation
    author_name = Column(String(50), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)

    owner = relationship("User", back_populates="events")

    def __repr__(self):
        return f"<Event(id={self.id}, title='{self.title}', selected={self.is_selected})>"
