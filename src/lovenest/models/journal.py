"""
Journal models.
"""

from typing import Optional
from pydantic import Field

from lovenest.models.common import LoveNestModel, Pagination, UserRef

MOODS = ("happy", "love", "neutral", "sad", "custom")


class JournalEntry(LoveNestModel):
    id: str = Field(alias="_id")
    title: str
    content: str = ""
    mood: Optional[str] = None
    mood_emoji: Optional[str] = None
    mood_scale: Optional[int] = None
    date: Optional[str] = None
    author_id: Optional[UserRef] = None


class JournalPage(LoveNestModel):
    entries: list[JournalEntry] = []
    pagination: Optional[Pagination] = None
