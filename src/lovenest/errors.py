"""
LoveNest error types.

Every failed API call surfaces as a RequestError carrying a human-readable
message; callers decide how to present it.
"""

from typing import Any, Optional


class LoveNestError(Exception):
    def __init__(self, code: str, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details


class RequestError(LoveNestError):
    """A failed API call: server-reported error, network failure or unparseable body."""

    def __init__(
        self,
        message: str,
        code: str = "http_error",
        status_code: Optional[int] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(code, message, details)
        self.status_code = status_code


class AuthError(LoveNestError):
    def __init__(self, message: str, code: str = "auth_error"):
        super().__init__(code, message)


class SessionError(LoveNestError):
    def __init__(self, message: str, code: str = "session_error", details: Optional[dict[str, Any]] = None):
        super().__init__(code, message, details)
