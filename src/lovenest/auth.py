"""
Auth API: accounts, partner invitations and couple settings.

register, login and accept_invite are the credential-issuing calls: they
return an AuthResponse whose token the HTTP layer has already written to the
token store.
"""

from typing import Any, Optional, TypeVar

from pydantic import BaseModel, ValidationError

from lovenest.errors import RequestError
from lovenest.models.user import AuthResponse, InviteInfo, InviteResponse, MeResponse
from lovenest.transport.http import HttpClient, json_body

M = TypeVar("M", bound=BaseModel)


def _parse(model: type[M], data: Any) -> M:
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise RequestError("Invalid response from server", code="invalid_response") from e


class AuthAPI:
    def __init__(self, http: HttpClient):
        self._http = http

    async def register(
        self,
        email: str,
        password: str,
        display_name: str,
        nickname: Optional[str] = None,
        birthday: Optional[str] = None,
    ) -> AuthResponse:
        """Create an account and start a session."""
        data = await self._http.post("/auth/register", json_body(
            email=email, password=password, display_name=display_name,
            nickname=nickname, birthday=birthday,
        ))
        return _parse(AuthResponse, data)

    async def login(self, email: str, password: str) -> AuthResponse:
        data = await self._http.post("/auth/login", {"email": email, "password": password})
        return _parse(AuthResponse, data)

    async def logout(self) -> Any:
        """End the session on the server.

        The local token is cleared once the request settles, whether it
        succeeded or not; a failed request is still raised afterwards.
        """
        try:
            return await self._http.post("/auth/logout")
        finally:
            self._http.token_store.clear()

    async def get_me(self) -> MeResponse:
        data = await self._http.get("/auth/me")
        return _parse(MeResponse, data)

    async def update_profile(
        self,
        display_name: Optional[str] = None,
        nickname: Optional[str] = None,
        birthday: Optional[str] = None,
        avatar: Optional[str] = None,
    ) -> dict[str, Any]:
        return await self._http.put("/auth/update", json_body(
            display_name=display_name, nickname=nickname, birthday=birthday, avatar=avatar,
        ))

    async def send_invite(self, email: str) -> InviteResponse:
        """Invite a partner by email. When the email could not be sent the response still carries the invite URL."""
        data = await self._http.post("/auth/invite", {"email": email})
        return _parse(InviteResponse, data)

    async def validate_invite(self, token: str) -> InviteInfo:
        data = await self._http.get(f"/auth/invite/{token}")
        return _parse(InviteInfo, data)

    async def accept_invite(
        self,
        token: str,
        email: str,
        password: str,
        display_name: str,
        nickname: Optional[str] = None,
        birthday: Optional[str] = None,
    ) -> AuthResponse:
        """Create the partner account from an invitation and start its session."""
        data = await self._http.post(f"/auth/accept-invite/{token}", json_body(
            email=email, password=password, display_name=display_name,
            nickname=nickname, birthday=birthday,
        ))
        return _parse(AuthResponse, data)

    async def update_couple(
        self,
        couple_name: Optional[str] = None,
        anniversary: Optional[str] = None,
        partner1_nickname: Optional[str] = None,
        partner2_nickname: Optional[str] = None,
    ) -> dict[str, Any]:
        return await self._http.put("/auth/couple", json_body(
            couple_name=couple_name, anniversary=anniversary,
            partner1_nickname=partner1_nickname, partner2_nickname=partner2_nickname,
        ))
