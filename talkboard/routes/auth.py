from fastapi import APIRouter, Depends, Request, Form, status
from fastapi.responses import HTMLResponse, RedirectResponse
from pydantic import ValidationError

from ..config import templates
from ..orchestrator import RequestOrchestrator, get_orchestrator
from ..schemas import UserCreate
from ..utils import pop_messages

router = APIRouter()


@router.get("/register", response_class=HTMLResponse)
def register_page(request: Request):
    error, success = pop_messages(request.session)
    return templates.TemplateResponse(request, "register.html", {
        "title": "Register", "user": None, "error_message": error, "success_message": success
    })


@router.post("/register")
def register(request: Request, username: str = Form(...), password: str = Form(...),
             orchestrator: RequestOrchestrator = Depends(get_orchestrator)):
    try:
        form = UserCreate(username=username, password=password)
    except ValidationError:
        request.session["error"] = "Username and password are required."
        return RedirectResponse(url="/register", status_code=status.HTTP_303_SEE_OTHER)
    outcome = orchestrator.register(form)
    return RedirectResponse(url=outcome.redirect_to, status_code=status.HTTP_303_SEE_OTHER)


@router.get("/login", response_class=HTMLResponse)
def login_page(request: Request):
    error, success = pop_messages(request.session)
    return templates.TemplateResponse(request, "login.html", {
        "title": "Login", "user": None, "error_message": error, "success_message": success
    })


@router.post("/login")
def login(username: str = Form(...), password: str = Form(...),
          orchestrator: RequestOrchestrator = Depends(get_orchestrator)):
    outcome = orchestrator.login(username, password)
    return RedirectResponse(url=outcome.redirect_to, status_code=status.HTTP_303_SEE_OTHER)


@router.get("/logout")
def logout(orchestrator: RequestOrchestrator = Depends(get_orchestrator)):
    outcome = orchestrator.logout()
    return RedirectResponse(url=outcome.redirect_to, status_code=status.HTTP_303_SEE_OTHER)
