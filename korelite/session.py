"""In-memory HTTP sessions carrying single-use CSRF tokens."""

from __future__ import annotations

import hmac
import time
from dataclasses import dataclass

from .util import generate_random_string

MAX_SESSIONS = 1000
CSRF_TOKEN_SIZE = 32
SESSION_ID_SIZE = 16
CSRF_TOKEN_LIFETIME = 3600


class SessionLimitError(RuntimeError):
    """Raised when the session store is full."""


@dataclass
class CsrfToken:
    """A CSRF token, the time it was issued and whether it was spent."""

    token: str
    created: float
    used: bool = False


@dataclass
class Session:
    """One client session."""

    session_id: str
    csrf: CsrfToken
    last_access: float
    user_data: str | None = None


class SessionStore:
    """A bounded collection of sessions."""

    def __init__(self, max_sessions: int = MAX_SESSIONS) -> None:
        if max_sessions < 0:
            raise ValueError("max_sessions must not be negative")
        self.max_sessions = max_sessions
        self._sessions: list[Session] = []

    def __len__(self) -> int:
        return len(self._sessions)

    def create(self) -> Session:
        """Create, store and return a new session with a fresh CSRF token."""
        if len(self._sessions) >= self.max_sessions:
            raise SessionLimitError(f"session limit of {self.max_sessions} reached")
        now = time.time()
        session = Session(
            session_id=generate_random_string(SESSION_ID_SIZE * 2),
            csrf=CsrfToken(generate_random_string(CSRF_TOKEN_SIZE * 2), now),
            last_access=now,
        )
        self._sessions.append(session)
        return session

    def find(self, session_id: str) -> Session | None:
        """Return the session with *session_id*, or ``None``."""
        return next((s for s in self._sessions if s.session_id == session_id), None)


def validate_csrf_token(
    session: Session | None, token: str | None, now: float | None = None
) -> bool:
    """Check *token* against the session's CSRF token and spend it on success.

    A token is rejected once it is older than an hour or has already been used.
    """
    if session is None or token is None:
        return False
    if now is None:
        now = time.time()
    if now - session.csrf.created > CSRF_TOKEN_LIFETIME:
        return False
    if session.csrf.used:
        return False
    if hmac.compare_digest(session.csrf.token.encode(), token.encode()):
        session.csrf.used = True
        return True
    return False