import logging
from dataclasses import dataclass
from typing import Callable, List, MutableMapping, Optional

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from . import models
from .auth import PasswordVerifier, get_password_verifier
from .credentials import CredentialStore
from .database import get_db
from .errors import DuplicateUsername, NotAuthenticated, RegistrationFailed, TalkboardError
from .guard import Action, AuthorizationGuard
from .registry import EventRegistry, authored_by, selected
from .schemas import EventDraft, EventUpdate, UserCreate, UserUpdate
from .sessions import Identity, SessionManager
from .utils import sanitize_input

logger = logging.getLogger(__name__)

LANDING = "/"
LOGIN = "/login"


@dataclass(frozen=True)
class Outcome:
    ok: bool
    redirect_to: str


@dataclass
class HomeView:
    user: models.User
    next_events: List[models.Event]
    user_events: List[models.Event]


@dataclass
class EventsView:
    user: models.User
    events: List[models.Event]


class RequestOrchestrator:
    """Runs one client action: resolve session, authorize, dispatch.

    Mutating actions never raise the error taxonomy; they return an Outcome
    holding the redirect target and leave a flash message in the client
    state.
    """

    def __init__(self, db: Session, sessions: SessionManager, client_state: MutableMapping,
                 verifier: PasswordVerifier, guard: Optional[AuthorizationGuard] = None):
        self.sessions = sessions
        self.client_state = client_state
        self.verifier = verifier
        self.guard = guard or AuthorizationGuard()
        self.credentials = CredentialStore(db)
        self.registry = EventRegistry(db)

    # identity

    def current_identity(self) -> Optional[Identity]:
        return self.sessions.resolve_session(self.client_state)

    def require_user(self, action: Action, target_user_id: Optional[int] = None) -> models.User:
        identity = self.current_identity()
        self.guard.authorize(identity, action, target_user_id).raise_for_deny()
        user = self.credentials.get(identity.user_id)
        if user is None:
            # The row behind a live session is gone
            self.sessions.end_session(self.client_state)
            raise NotAuthenticated()
        return user

    # views

    def home(self) -> HomeView:
        user = self.require_user(Action.LIST_EVENTS)
        events = self.registry.list()
        return HomeView(user=user, next_events=selected(events), user_events=authored_by(events, user.username))

    def list_events(self) -> EventsView:
        user = self.require_user(Action.LIST_EVENTS)
        return EventsView(user=user, events=self.registry.list())

    def profile(self) -> models.User:
        return self.require_user(Action.VIEW_PROFILE)

    # actions

    def register(self, form: UserCreate) -> Outcome:
        def run():
            username = sanitize_input(form.username)
            if not username:
                raise TalkboardError("Username is required.")
            # Check then insert, the unique column backs up concurrent registrations
            if self.credentials.exists(username):
                raise DuplicateUsername(username=username)
            hashed = self.verifier.hash(form.password)
            self.credentials.add(username, hashed)
            self.client_state["success"] = "Account created. Please log in."

        return self._run("register", run, success=LOGIN, failure="/register")

    def login(self, username: str, password: str) -> Outcome:
        def run():
            # Stored usernames are sanitized
            identity = self.sessions.authenticate(self.credentials, self.verifier,
                                                  sanitize_input(username), password)
            self.sessions.purge_expired()
            self.sessions.start_session(self.client_state, identity)
            logger.info("login ok user_id=%s", identity.user_id)

        return self._run("login", run, success=LANDING, failure=LOGIN)

    def logout(self) -> Outcome:
        decision = self.guard.authorize(self.current_identity(), Action.LOGOUT)
        if decision.allowed:
            self.sessions.end_session(self.client_state)
        return Outcome(ok=True, redirect_to=LOGIN)

    def create_event(self, draft: EventDraft) -> Outcome:
        def run():
            user = self.require_user(Action.CREATE_EVENT)
            clean = self._clean(draft)
            event = self.registry.create(clean, creator_username=user.username, owner_user_id=user.id)
            self.client_state["success"] = f"'{event.title}' created."

        return self._run("create_event", run, success=LANDING, failure="/newEvent")

    def update_event(self, record: EventUpdate) -> Outcome:
        def run():
            self.require_user(Action.UPDATE_EVENT)
            self.registry.update(self._clean(record))
            self.client_state["success"] = "Event updated."

        return self._run("update_event", run, success=LANDING, failure="/events")

    def toggle_select(self, event_id: int) -> Outcome:
        def run():
            self.require_user(Action.TOGGLE_SELECT)
            self.registry.toggle_select(event_id)

        return self._run("toggle_select", run, success=LANDING, failure="/events")

    def delete_event(self, event_id: int) -> Outcome:
        def run():
            self.require_user(Action.DELETE_EVENT)
            self.registry.delete(event_id)
            self.client_state["success"] = "Event deleted."

        return self._run("delete_event", run, success=LANDING, failure="/events")

    def update_profile(self, update: UserUpdate) -> Outcome:
        def run():
            user = self.require_user(Action.UPDATE_PROFILE, target_user_id=update.id)
            username = sanitize_input(update.username)
            if not username:
                raise TalkboardError("Username is required.")
            other = self.credentials.find_by_username(username)
            if other is not None and other.id != user.id:
                raise DuplicateUsername(username=username)
            hashed = None
            if update.password:
                try:
                    hashed = self.verifier.hash(update.password)
                except RegistrationFailed as e:
                    raise TalkboardError("Password could not be changed. Please try again.") from e
            user = self.credentials.update(user.id, username, hashed)
            self.sessions.rebind(self.client_state, Identity(user_id=user.id, username=user.username))
            self.client_state["success"] = "Profile updated."

        return self._run("update_profile", run, success=LANDING, failure="/profile")

    # helpers

    def _run(self, action: str, fn: Callable[[], None], success: str, failure: str) -> Outcome:
        try:
            fn()
        except NotAuthenticated:
            logger.info("%s denied: not authenticated", action)
            return Outcome(ok=False, redirect_to=LOGIN)
        except TalkboardError as e:
            logger.info("%s failed: %s %s", action, e.code, e.context)
            self.client_state["error"] = e.user_message
            return Outcome(ok=False, redirect_to=failure)
        return Outcome(ok=True, redirect_to=success)

    @staticmethod
    def _clean(draft):
        title = sanitize_input(draft.title) or "Untitled Talk"
        return draft.model_copy(update={"title": title, "description": sanitize_input(draft.description)})


def get_sessions(request: Request) -> SessionManager:
    return request.app.state.sessions


def get_orchestrator(request: Request, db: Session = Depends(get_db),
                     sessions: SessionManager = Depends(get_sessions)) -> RequestOrchestrator:
    return RequestOrchestrator(db, sessions, request.session, get_password_verifier())
