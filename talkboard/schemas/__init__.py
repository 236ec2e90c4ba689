from .user import UserCreate, UserUpdate, UserOut
from .event import EventDraft, EventUpdate, EventOut

__all__ = [
    "UserCreate",
    "UserUpdate",
    "UserOut",
    "EventDraft",
    "EventUpdate",
    "EventOut",
]
