"""
Wishlist models.
"""

from typing import Optional
from pydantic import Field

from lovenest.models.common import LoveNestModel, UserRef

PRIORITIES = ("low", "medium", "high")


class WishlistItem(LoveNestModel):
    id: str = Field(alias="_id")
    title: str
    description: Optional[str] = None
    link: Optional[str] = None
    image_url: Optional[str] = None
    priority: str = "medium"
    is_fulfilled: bool = False
    fulfilled_by: Optional[str] = None
    user_id: Optional[UserRef] = None


class WishlistItems(LoveNestModel):
    items: list[WishlistItem] = []
