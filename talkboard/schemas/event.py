from pydantic import BaseModel, ConfigDict, Field

from ..models.event import TalkLevel, TalkType


class EventDraft(BaseModel):
    title: str = Field(max_length=100)
    description: str = ""
    type: TalkType = TalkType.talk
    level: TalkLevel = TalkLevel.beginner
    is_selected: bool = False


class EventUpdate(EventDraft):
    """Full record sent back by the edit form, addressed by id."""

    id: int


class EventOut(BaseModel):
    id: int
    title: str
    description: str
    type: TalkType
    level: TalkLevel
    is_selected: bool
    author_name: str
    user_id: int

    model_config = ConfigDict(from_attributes=True)
