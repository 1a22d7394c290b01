from korelite.http_session import get_session_from_request, session_cookie_header
from korelite.session import SessionStore


def test_session_found_from_cookie():
    store = SessionStore()
    session = store.create()
    assert get_session_from_request(store, f"sessionid={session.session_id}") is session


def test_session_found_among_other_cookies():
    store = SessionStore()
    store.create()
    session = store.create()
    header = f"theme=dark; sessionid={session.session_id}; lang=cs"
    assert get_session_from_request(store, header) is session


def test_missing_cookie_gives_none():
    store = SessionStore()
    store.create()
    assert get_session_from_request(store, "theme=dark") is None
    assert get_session_from_request(store, "") is None
    assert get_session_from_request(store, None) is None


def test_unknown_session_id_gives_none():
    store = SessionStore()
    store.create()
    assert get_session_from_request(store, "sessionid=deadbeef") is None


def test_cookie_header_value():
    session = SessionStore().create()
    assert session_cookie_header(session) == f"sessionid={session.session_id}; Path=/"


def test_cookie_header_round_trip():
    store = SessionStore()
    session = store.create()
    name_value = session_cookie_header(session).split(";")[0]
    assert get_session_from_request(store, name_value) is session