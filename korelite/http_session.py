"""Binding sessions to HTTP requests through the session cookie."""

from __future__ import annotations

from http.cookies import CookieError, SimpleCookie

from .session import Session, SessionStore

SESSION_COOKIE = "sessionid"


def get_session_from_request(store: SessionStore, cookie_header: str | None) -> Session | None:
    """Return the session named by the request's ``Cookie`` header, if any."""
    if not cookie_header:
        return None
    cookie = SimpleCookie()
    try:
        cookie.load(cookie_header)
    except CookieError:
        return None
    morsel = cookie.get(SESSION_COOKIE)
    if morsel is None:
        return None
    return store.find(morsel.value)


def session_cookie_header(session: Session) -> str:
    """Return the ``Set-Cookie`` value that hands *session* to the client."""
    return f"{SESSION_COOKIE}={session.session_id}; Path=/"