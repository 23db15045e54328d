"""
Shared model base: server records use camelCase keys and Mongo-style ``_id``.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class LoveNestModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")


class UserRef(LoveNestModel):
    """Populated author/owner reference embedded in other records."""
    id: Optional[str] = Field(default=None, alias="_id")
    display_name: str = ""
    avatar: Optional[str] = None


class Pagination(LoveNestModel):
    page: int = 1
    total: int = 0
    pages: int = 1

    @property
    def has_more(self) -> bool:
        return self.page < self.pages
