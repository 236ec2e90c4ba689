import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from . import models
from .errors import DuplicateUsername, NotFound

logger = logging.getLogger(__name__)


class CredentialStore:
    """User rows, looked up by id or by username."""

    def __init__(self, db: Session):
        self.db = db

    def find_by_username(self, username: str) -> Optional[models.User]:
        return self.db.query(models.User).filter(models.User.username == username).first()

    def get(self, user_id: int) -> Optional[models.User]:
        return self.db.get(models.User, user_id)

    def exists(self, username: str) -> bool:
        return self.find_by_username(username) is not None

    def add(self, username: str, hashed_password: str) -> models.User:
        user = models.User(username=username, hashed_password=hashed_password)
        self.db.add(user)
        self._commit(username)
        self.db.refresh(user)
        logger.info("user registered id=%s username=%s", user.id, user.username)
        return user

    def update(self, user_id: int, username: str, hashed_password: Optional[str] = None) -> models.User:
        user = self.get(user_id)
        if user is None:
            raise NotFound("User not found.", user_id=user_id)
        user.username = username
        if hashed_password is not None:
            user.hashed_password = hashed_password
        self._commit(username)
        self.db.refresh(user)
        return user

    def _commit(self, username: str) -> None:
        try:
            self.db.commit()
        except IntegrityError as e:
            # The unique column catches what the lookup missed under a race
            self.db.rollback()
            raise DuplicateUsername(username=username) from e
