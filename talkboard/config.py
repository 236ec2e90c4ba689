from pathlib import Path
from typing import Optional

from fastapi.templating import Jinja2Templates
from pydantic_settings import BaseSettings, SettingsConfigDict

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


class Settings(BaseSettings):
    SECRET_KEY: str
    DATABASE_URL: str = "sqlite:///./talkboard.db"
    DEBUG: bool = False

    SESSION_TTL_SECONDS: int = 8 * 60 * 60
    SESSION_COOKIE: str = "talkboard_session"
    BCRYPT_ROUNDS: int = 12

    LOG_LEVEL: str = "INFO"
    LOG_DIR: Optional[str] = None

    # tell Pydantic to read from the .env file
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()

# Shared templates instance
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
