"""
Session context: who is logged in, and whether they have a linked partner.

The identity held here is a cache: it is rebuilt from the stored token and a
GET /auth/me round trip, and is never trusted without a token in the store.

States:
  UNINITIALIZED --initialize()--> ANONYMOUS (no token, or /auth/me failed)
  UNINITIALIZED --initialize()--> AUTHENTICATED (token accepted)
  ANONYMOUS --login()/register()/accept_invite()--> AUTHENTICATED
  AUTHENTICATED --logout()--> ANONYMOUS, token cleared
  AUTHENTICATED --refresh() fails--> ANONYMOUS, token kept

Only logout() removes the token. A failed refresh may be a network blip, and
the credential could still be good.
"""

import enum
import logging
from typing import Optional

from lovenest.auth import AuthAPI
from lovenest.errors import RequestError, SessionError
from lovenest.models.user import AuthResponse, Partner, User
from lovenest.token_store import TokenStore

logger = logging.getLogger(__name__)


class SessionState(str, enum.Enum):
    UNINITIALIZED = "uninitialized"
    ANONYMOUS = "anonymous"
    AUTHENTICATED = "authenticated"


class SessionContext:
    def __init__(self, auth: AuthAPI, token_store: TokenStore):
        self._auth = auth
        self._tokens = token_store
        self.state = SessionState.UNINITIALIZED
        self.user: Optional[User] = None
        self.partner: Optional[Partner] = None

    @property
    def is_authenticated(self) -> bool:
        return self.state is SessionState.AUTHENTICATED and self._tokens.get() is not None

    @property
    def is_linked(self) -> bool:
        return self.is_authenticated and self.partner is not None

    def require_user(self) -> User:
        if not self.is_authenticated or self.user is None:
            raise SessionError("Not logged in", code="not_authenticated")
        return self.user

    async def initialize(self) -> SessionState:
        """Restore the session from a stored token, if any."""
        if self._tokens.get() is None:
            self._set_anonymous()
            return self.state
        return await self.refresh()

    async def refresh(self) -> SessionState:
        """Re-query the server for the current identity.

        A failure leaves the session anonymous but does not propagate and
        does not touch the stored token.
        """
        try:
            me = await self._auth.get_me()
        except RequestError as e:
            logger.info("Session refresh failed (%s): %s", e.code, e.message)
            self._set_anonymous()
            return self.state
        self.user = me.user
        self.partner = me.partner
        self.state = SessionState.AUTHENTICATED
        return self.state

    async def login(self, email: str, password: str) -> Optional[User]:
        """Log in, then refresh to pick up the partner.

        Returns None when the follow-up refresh fails: the token is stored but
        the session is ANONYMOUS until a later refresh() succeeds.
        """
        result = await self._auth.login(email, password)
        self._set_authenticated(result)
        # /auth/login does not include the partner
        await self.refresh()
        return self.user

    async def register(
        self,
        email: str,
        password: str,
        display_name: str,
        nickname: Optional[str] = None,
        birthday: Optional[str] = None,
    ) -> User:
        result = await self._auth.register(email, password, display_name, nickname=nickname, birthday=birthday)
        self._set_authenticated(result)
        return result.user

    async def accept_invite(
        self,
        invite_token: str,
        email: str,
        password: str,
        display_name: str,
        nickname: Optional[str] = None,
        birthday: Optional[str] = None,
    ) -> Optional[User]:
        """Like login(): None if the account was created but the refresh failed."""
        result = await self._auth.accept_invite(
            invite_token, email, password, display_name, nickname=nickname, birthday=birthday,
        )
        self._set_authenticated(result)
        # the new account is already linked; fetch the inviter as partner
        await self.refresh()
        return self.user

    async def logout(self) -> None:
        """Log out locally no matter what the server says."""
        try:
            await self._auth.logout()
        except RequestError as e:
            logger.info("Logout request failed (%s): %s", e.code, e.message)
        self._set_anonymous()

    def _set_authenticated(self, result: AuthResponse) -> None:
        self.user = result.user
        self.partner = None
        self.state = SessionState.AUTHENTICATED

    def _set_anonymous(self) -> None:
        self.user = None
        self.partner = None
        self.state = SessionState.ANONYMOUS
