import enum
from dataclasses import dataclass
from typing import Optional

from .errors import Forbidden, NotAuthenticated
from .sessions import Identity


class Action(str, enum.Enum):
    LOGOUT = "logout"
    LIST_EVENTS = "list_events"
    CREATE_EVENT = "create_event"
    UPDATE_EVENT = "update_event"
    TOGGLE_SELECT = "toggle_select"
    DELETE_EVENT = "delete_event"
    VIEW_PROFILE = "view_profile"
    UPDATE_PROFILE = "update_profile"


class DenyReason(str, enum.Enum):
    NOT_AUTHENTICATED = "not_authenticated"
    FORBIDDEN = "forbidden"


@dataclass(frozen=True)
class Decision:
    allowed: bool
    reason: Optional[DenyReason] = None

    def raise_for_deny(self) -> None:
        if self.allowed:
            return
        if self.reason is DenyReason.FORBIDDEN:
            raise Forbidden()
        raise NotAuthenticated()


ALLOW = Decision(allowed=True)


class AuthorizationGuard:
    """Decides whether an identity may perform an action.

    Every action needs an identity. Only profile updates are tied to
    ownership; events may be changed by any logged-in user.
    """

    def authorize(self, identity: Optional[Identity], action: Action,
                  target_user_id: Optional[int] = None) -> Decision:
        if identity is None:
            return Decision(allowed=False, reason=DenyReason.NOT_AUTHENTICATED)
        if action is Action.UPDATE_PROFILE and identity.user_id != target_user_id:
            return Decision(allowed=False, reason=DenyReason.FORBIDDEN)
        return ALLOW
