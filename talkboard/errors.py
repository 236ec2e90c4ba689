from typing import Any, Dict, Optional


class TalkboardError(Exception):
    """Base class for failures the request layer turns into a redirect."""

    code = "talkboard_error"
    user_message = "Something went wrong. Please try again."

    def __init__(self, user_message: Optional[str] = None, **context: Any):
        if user_message is not None:
            self.user_message = user_message
        self.context: Dict[str, Any] = context
        super().__init__(self.code)


class NotAuthenticated(TalkboardError):
    code = "not_authenticated"
    user_message = "Please log in to continue."


class Forbidden(TalkboardError):
    code = "forbidden"
    user_message = "You are not allowed to do that."


class InvalidCredentials(TalkboardError):
    code = "invalid_credentials"
    user_message = "Invalid username or password. Please try again."


class DuplicateUsername(TalkboardError):
    code = "duplicate_username"
    user_message = "Username already exists."


class NotFound(TalkboardError):
    code = "not_found"
    user_message = "Event not found."


class RegistrationFailed(TalkboardError):
    code = "registration_failed"
    user_message = "Registration failed. Please try again."
