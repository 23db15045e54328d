"""
Account models: /auth/* responses.
"""

from typing import Any, Optional
from pydantic import Field

from lovenest.models.common import LoveNestModel


class Couple(LoveNestModel):
    id: Optional[str] = Field(default=None, alias="_id")
    couple_name: Optional[str] = None
    anniversary: Optional[str] = None
    partner1_nickname: Optional[str] = None
    partner2_nickname: Optional[str] = None


class User(LoveNestModel):
    id: str = Field(alias="_id")
    email: str
    display_name: str = ""
    nickname: Optional[str] = None
    avatar: Optional[str] = None
    birthday: Optional[str] = None
    is_linked: bool = False
    couple_id: Optional[Any] = None  # id string, or the populated couple record

    @property
    def couple(self) -> Optional[Couple]:
        if isinstance(self.couple_id, dict):
            return Couple.model_validate(self.couple_id)
        return None


class Partner(LoveNestModel):
    """The second account of the couple, once an invite has been accepted."""
    id: str = Field(alias="_id")
    display_name: str = ""
    email: str = ""
    avatar: Optional[str] = None
    nickname: Optional[str] = None


class AuthResponse(LoveNestModel):
    """register / login / accept-invite payload: the only responses that issue a credential."""
    user: User
    token: Optional[str] = None
    message: Optional[str] = None


class MeResponse(LoveNestModel):
    user: User
    partner: Optional[Partner] = None


class InviteResponse(LoveNestModel):
    email_sent: bool = False
    invite_url: Optional[str] = None
    message: Optional[str] = None


class InviteInfo(LoveNestModel):
    """GET /auth/invite/:token: who sent the invitation."""
    inviter: Optional[Partner] = None
    email: Optional[str] = None
