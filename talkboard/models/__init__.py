from ..database import Base
from .user import User
from .event import Event, TalkType, TalkLevel

# This list helps when you do "from talkboard.models import *"
__all__ = ["Base", "User", "Event", "TalkType", "TalkLevel"]
