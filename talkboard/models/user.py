from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from ..database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(50), unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)

    # Lookup only, deleting a user never touches its events
    events = relationship("Event", back_populates="owner", passive_deletes="all")

    def __repr__(self):
        return f"<User(id={self.id}, username='{self.username}')>"
