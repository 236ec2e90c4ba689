import logging
import secrets
import threading
import time
from dataclasses import dataclass
from typing import Dict, MutableMapping, Optional, Tuple

from .auth import PasswordVerifier
from .credentials import CredentialStore
from .errors import InvalidCredentials

logger = logging.getLogger(__name__)

TOKEN_KEY = "session_token"


@dataclass(frozen=True)
class Identity:
    user_id: int
    username: str


class SessionManager:
    """Maps session tokens to identities, each with an idle expiry.

    The token is the only thing stored in the client's session state (the
    signed cookie mapping); the identity it stands for stays server side.
    """

    def __init__(self, ttl_seconds: int = 8 * 60 * 60):
        self.ttl_seconds = ttl_seconds
        self._bindings: Dict[str, Tuple[Identity, float]] = {}
        self._lock = threading.Lock()

    def authenticate(self, credentials: CredentialStore, verifier: PasswordVerifier,
                     username: str, password: str) -> Identity:
        user = credentials.find_by_username(username)
        if user is None or not verifier.verify(password, user.hashed_password):
            raise InvalidCredentials(username=username)
        return Identity(user_id=user.id, username=user.username)

    def start_session(self, client_state: MutableMapping, identity: Identity) -> str:
        token = secrets.token_urlsafe(32)
        with self._lock:
            old = client_state.get(TOKEN_KEY)
            if old is not None:
                self._bindings.pop(old, None)
            self._bindings[token] = (identity, time.time() + self.ttl_seconds)
        client_state[TOKEN_KEY] = token
        logger.info("session started user_id=%s", identity.user_id)
        return token

    def resolve_session(self, client_state: MutableMapping) -> Optional[Identity]:
        token = client_state.get(TOKEN_KEY)
        if token is None:
            return None
        now = time.time()
        with self._lock:
            entry = self._bindings.get(token)
            if entry is None:
                identity = None
            elif entry[1] <= now:
                del self._bindings[token]
                identity = None
                logger.info("session expired user_id=%s", entry[0].user_id)
            else:
                identity = entry[0]
                self._bindings[token] = (identity, now + self.ttl_seconds)
        if identity is None:
            client_state.pop(TOKEN_KEY, None)
        return identity

    def rebind(self, client_state: MutableMapping, identity: Identity) -> None:
        token = client_state.get(TOKEN_KEY)
        with self._lock:
            if token in self._bindings:
                self._bindings[token] = (identity, self._bindings[token][1])

    def end_session(self, client_state: MutableMapping) -> None:
        token = client_state.pop(TOKEN_KEY, None)
        if token is None:
            return
        with self._lock:
            entry = self._bindings.pop(token, None)
        if entry is not None:
            logger.info("session ended user_id=%s", entry[0].user_id)

    def purge_expired(self) -> int:
        now = time.time()
        with self._lock:
            expired = [t for t, (_, expires_at) in self._bindings.items() if expires_at <= now]
            for t in expired:
                del self._bindings[t]
        return len(expired)

    def __len__(self):
        with self._lock:
            return len(self._bindings)
