import logging

import bcrypt

from .config import settings
from .errors import RegistrationFailed

logger = logging.getLogger(__name__)


class PasswordVerifier:
    """One-way hashing of passwords with bcrypt.

    ``verify`` leaves the comparison to ``bcrypt.checkpw`` so the check runs
    in constant time with respect to the stored digest.
    """

    def __init__(self, rounds: int = 12):
        self.rounds = rounds

    def hash(self, plaintext: str) -> str:
        try:
            digest = bcrypt.hashpw(plaintext.encode("utf-8"), bcrypt.gensalt(rounds=self.rounds))
        except (ValueError, TypeError) as e:
            logger.warning("password hashing failed: %s", type(e).__name__)
            raise RegistrationFailed() from e
        return digest.decode("ascii")

    def verify(self, plaintext: str, hashed: str) -> bool:
        if not plaintext or not hashed:
            return False
        try:
            return bcrypt.checkpw(plaintext.encode("utf-8"), hashed.encode("ascii"))
        except (ValueError, TypeError):
            # Malformed digest or a password bcrypt refuses: not a match
            return False


def get_password_verifier() -> PasswordVerifier:
    return PasswordVerifier(rounds=settings.BCRYPT_ROUNDS)


def get_password_hash(password: str) -> str:
    return get_password_verifier().hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return get_password_verifier().verify(plain_password, hashed_password)
