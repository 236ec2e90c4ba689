from typing import Optional

from fastapi import APIRouter, Depends, Request, Form, status
from fastapi.responses import HTMLResponse, RedirectResponse
from pydantic import ValidationError

from ..config import templates
from ..errors import NotAuthenticated
from ..orchestrator import RequestOrchestrator, get_orchestrator
from ..schemas import UserOut, UserUpdate
from ..utils import pop_messages

router = APIRouter()


@router.get("/profile", response_class=HTMLResponse)
def profile(request: Request, orchestrator: RequestOrchestrator = Depends(get_orchestrator)):
    try:
        user = orchestrator.profile()
    except NotAuthenticated:
        return RedirectResponse(url="/login")

    error, success = pop_messages(request.session)
    return templates.TemplateResponse(request, "profile.html", {
        "title": "Profile",
        "user": UserOut.model_validate(user),
        "error_message": error,
        "success_message": success,
    })


@router.post("/updateProfile")
def update_profile(
        request: Request,
        id: int = Form(...),
        username: str = Form(...),
        password: Optional[str] = Form(None),
        orchestrator: RequestOrchestrator = Depends(get_orchestrator)
):
    try:
        update = UserUpdate(id=id, username=username, password=password or None)
    except ValidationError:
        request.session["error"] = "Username is required."
        return RedirectResponse(url="/profile", status_code=status.HTTP_303_SEE_OTHER)
    outcome = orchestrator.update_profile(update)
    return RedirectResponse(url=outcome.redirect_to, status_code=status.HTTP_303_SEE_OTHER)
