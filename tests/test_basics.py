"""Basic unit tests for the lovenest package."""

from lovenest import (
    AsyncLoveNest,
    LoveNest,
    LoveNestError,
    RequestError,
    AuthError,
    SessionError,
    TOKEN_KEY,
    __version__,
)
from lovenest.transport.http import json_body


def test_version():
    assert __version__ == "0.1.0"


def test_public_exports():
    assert LoveNest is not None
    assert AsyncLoveNest is not None
    assert TOKEN_KEY == "lovenest_token"


def test_error_hierarchy():
    assert issubclass(RequestError, LoveNestError)
    assert issubclass(AuthError, LoveNestError)
    assert issubclass(SessionError, LoveNestError)


def test_error_attributes():
    err = LoveNestError(code="test_code", message="something broke")
    assert err.code == "test_code"
    assert str(err) == "something broke"
    assert err.details is None

    req = RequestError("invalid token", status_code=401)
    assert req.code == "http_error"
    assert req.status_code == 401
    assert req.message == "invalid token"

    err_with_details = SessionError("bad session", details={"id": "123"})
    assert err_with_details.code == "session_error"
    assert err_with_details.details == {"id": "123"}


def test_json_body_camel_cases_and_drops_none():
    body = json_body(display_name="Alice", nickname=None, is_all_day=False, partner1_nickname="Al")
    assert body == {"displayName": "Alice", "isAllDay": False, "partner1Nickname": "Al"}
