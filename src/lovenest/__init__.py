"""
lovenest: LoveNest SDK for Python.

Async REST client for the LoveNest couples app: memories, calendar,
wishlists, bucket list, journal and partner invitations.
"""

from lovenest.client import LoveNest, AsyncLoveNest
from lovenest.auth import AuthAPI
from lovenest.session import SessionContext, SessionState
from lovenest.token_store import TokenStore, FileTokenStore, MemoryTokenStore, TOKEN_KEY
from lovenest.errors import LoveNestError, RequestError, AuthError, SessionError

__version__ = "0.1.0"
__all__ = [
    "LoveNest",
    "AsyncLoveNest",
    "AuthAPI",
    "SessionContext",
    "SessionState",
    "TokenStore",
    "FileTokenStore",
    "MemoryTokenStore",
    "TOKEN_KEY",
    "LoveNestError",
    "RequestError",
    "AuthError",
    "SessionError",
]
