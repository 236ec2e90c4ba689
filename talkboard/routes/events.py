from fastapi import APIRouter, Depends, Request, Form, status
from fastapi.responses import HTMLResponse, RedirectResponse
from pydantic import ValidationError

from ..config import templates
from ..errors import NotAuthenticated
from ..guard import Action
from ..models import TalkLevel, TalkType
from ..orchestrator import RequestOrchestrator, get_orchestrator
from ..schemas import EventDraft, EventUpdate
from ..utils import pop_messages

router = APIRouter()


def _redirect(url: str) -> RedirectResponse:
    return RedirectResponse(url=url, status_code=status.HTTP_303_SEE_OTHER)


@router.get("/", response_class=HTMLResponse)
def home(request: Request, orchestrator: RequestOrchestrator = Depends(get_orchestrator)):
    try:
        view = orchestrator.home()
    except NotAuthenticated:
        return RedirectResponse(url="/login")

    error, success = pop_messages(request.session)
    return templates.TemplateResponse(request, "index.html", {
        "title": "Home",
        "user": view.user,
        "next_events": view.next_events,
        "user_events": view.user_events,
        "error_message": error,
        "success_message": success,
    })


@router.get("/events", response_class=HTMLResponse)
def list_events(request: Request, orchestrator: RequestOrchestrator = Depends(get_orchestrator)):
    try:
        view = orchestrator.list_events()
    except NotAuthenticated:
        return RedirectResponse(url="/login")

    error, success = pop_messages(request.session)
    return templates.TemplateResponse(request, "listEvents.html", {
        "title": "Events",
        "user": view.user,
        "events": view.events,
        "talk_types": list(TalkType),
        "talk_levels": list(TalkLevel),
        "error_message": error,
        "success_message": success,
    })


@router.get("/newEvent", response_class=HTMLResponse)
def add_event_page(request: Request, orchestrator: RequestOrchestrator = Depends(get_orchestrator)):
    try:
        user = orchestrator.require_user(Action.CREATE_EVENT)
    except NotAuthenticated:
        return RedirectResponse(url="/login")

    error, success = pop_messages(request.session)
    return templates.TemplateResponse(request, "addEvent.html", {
        "title": "Add Event",
        "user": user,
        "talk_types": list(TalkType),
        "talk_levels": list(TalkLevel),
        "error_message": error,
        "success_message": success,
    })


@router.post("/newEvent")
def new_event(
        request: Request,
        title: str = Form(""),
        description: str = Form(""),
        type: str = Form(TalkType.talk.value),
        level: str = Form(TalkLevel.beginner.value),
        is_selected: bool = Form(False),
        orchestrator: RequestOrchestrator = Depends(get_orchestrator)
):
    try:
        draft = EventDraft(title=title, description=description, type=type, level=level, is_selected=is_selected)
    except ValidationError as e:
        request.session["error"] = f"Validation Error: {e.error_count()} invalid field(s)."
        return _redirect("/newEvent")
    return _redirect(orchestrator.create_event(draft).redirect_to)


@router.post("/updateEvent")
def update_event(
        request: Request,
        id: int = Form(...),
        title: str = Form(""),
        description: str = Form(""),
        type: str = Form(TalkType.talk.value),
        level: str = Form(TalkLevel.beginner.value),
        is_selected: bool = Form(False),
        orchestrator: RequestOrchestrator = Depends(get_orchestrator)
):
    try:
        record = EventUpdate(id=id, title=title, description=description, type=type, level=level,
                             is_selected=is_selected)
    except ValidationError as e:
        request.session["error"] = f"Validation Error: {e.error_count()} invalid field(s)."
        return _redirect("/events")
    return _redirect(orchestrator.update_event(record).redirect_to)


@router.post("/selectEvent/{event_id}")
def select_event(event_id: int, orchestrator: RequestOrchestrator = Depends(get_orchestrator)):
    return _redirect(orchestrator.toggle_select(event_id).redirect_to)


@router.post("/deleteEvent")
def delete_event(id: int = Form(...), orchestrator: RequestOrchestrator = Depends(get_orchestrator)):
    return _redirect(orchestrator.delete_event(id).redirect_to)
