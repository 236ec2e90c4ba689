import logging
from typing import Iterable, List

from sqlalchemy.orm import Session

from . import models
from .errors import NotFound
from .schemas import EventDraft, EventUpdate

logger = logging.getLogger(__name__)


class EventRegistry:
    """Event rows. Callers are expected to have been authorized already."""

    def __init__(self, db: Session):
        self.db = db

    def create(self, draft: EventDraft, creator_username: str, owner_user_id: int) -> models.Event:
        event = models.Event(
            title=draft.title,
            description=draft.description,
            type=draft.type,
            level=draft.level,
            is_selected=draft.is_selected,
            author_name=creator_username,
            user_id=owner_user_id,
        )
        self.db.add(event)
        self.db.commit()
        self.db.refresh(event)
        logger.info("event created id=%s author=%s", event.id, event.author_name)
        return event

    def list(self) -> List[models.Event]:
        return self.db.query(models.Event).order_by(models.Event.id).all()

    def get(self, event_id: int) -> models.Event:
        event = self.db.get(models.Event, event_id)
        if event is None:
            raise NotFound(event_id=event_id)
        return event

    def update(self, record: EventUpdate) -> models.Event:
        event = self.get(record.id)
        event.title = record.title
        event.description = record.description
        event.type = record.type
        event.level = record.level
        event.is_selected = record.is_selected
        self.db.commit()
        self.db.refresh(event)
        logger.info("event updated id=%s", event.id)
        return event

    def toggle_select(self, event_id: int) -> models.Event:
        event = self.get(event_id)
        event.is_selected = not event.is_selected
        self.db.commit()
        self.db.refresh(event)
        logger.info("event id=%s selected=%s", event.id, event.is_selected)
        return event

    def delete(self, event_id: int) -> None:
        event = self.get(event_id)
        self.db.delete(event)
        self.db.commit()
        logger.info("event deleted id=%s", event_id)


def selected(events: Iterable[models.Event]) -> List[models.Event]:
    return [e for e in events if e.is_selected]


def authored_by(events: Iterable[models.Event], username: str) -> List[models.Event]:
    return [e for e in events if e.author_name == username]
