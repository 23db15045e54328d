"""
Memory models: photo/video gallery.
"""

from typing import Optional
from pydantic import Field

from lovenest.models.common import LoveNestModel, Pagination, UserRef


class Memory(LoveNestModel):
    id: str = Field(alias="_id")
    type: str = "image"  # "image" | "video"
    url: str = ""
    thumbnail_url: Optional[str] = None
    caption: str = ""
    date_taken: Optional[str] = None
    tags: list[str] = []
    uploaded_by: Optional[UserRef] = None


class MemoryPage(LoveNestModel):
    memories: list[Memory] = []
    pagination: Optional[Pagination] = None
