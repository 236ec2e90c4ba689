from fastapi import APIRouter, Depends
from fastapi.responses import RedirectResponse
from fastapi_pagination import Page
from fastapi_pagination.ext.sqlalchemy import paginate
from sqlalchemy import select
from sqlalchemy.orm import Session

from .. import models
from ..database import get_db
from ..errors import NotAuthenticated
from ..guard import Action
from ..orchestrator import RequestOrchestrator, get_orchestrator
from ..schemas import EventOut

router = APIRouter(prefix="/api")


@router.get("/events", response_model=Page[EventOut])
def events_page(db: Session = Depends(get_db), orchestrator: RequestOrchestrator = Depends(get_orchestrator)):
    try:
        orchestrator.require_user(Action.LIST_EVENTS)
    except NotAuthenticated:
        return RedirectResponse(url="/login")
    return paginate(db, select(models.Event).order_by(models.Event.id),
                    transformer=lambda events: [EventOut.model_validate(e) for e in events])
