import logging
from typing import Optional

from fastapi import FastAPI
from fastapi_pagination import add_pagination
from starlette.middleware.sessions import SessionMiddleware

from .config import Settings, settings as default_settings
from .database import init_db
from .logger import setup_logging
from .routes import api_router, auth_router, events_router, profile_router
from .sessions import SessionManager

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    setup_logging("DEBUG" if settings.DEBUG else settings.LOG_LEVEL, settings.LOG_DIR)

    init_db()

    app = FastAPI(title="Talkboard", debug=settings.DEBUG)

    # The cookie only carries the session token, identities stay in app.state.sessions
    app.add_middleware(SessionMiddleware, secret_key=settings.SECRET_KEY,
                       session_cookie=settings.SESSION_COOKIE, max_age=settings.SESSION_TTL_SECONDS)
    app.state.sessions = SessionManager(ttl_seconds=settings.SESSION_TTL_SECONDS)

    app.include_router(auth_router)
    app.include_router(events_router)
    app.include_router(profile_router)
    app.include_router(api_router)
    add_pagination(app)

    logger.info("talkboard ready (database=%s)", settings.DATABASE_URL.split("://", 1)[0])
    return app


app = create_app()
