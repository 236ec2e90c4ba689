from .auth import router as auth_router
from .events import router as events_router
from .profile import router as profile_router
from .api import router as api_router

__all__ = ["auth_router", "events_router", "profile_router", "api_router"]
