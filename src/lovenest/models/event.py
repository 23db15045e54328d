"""
Calendar event models.
"""

from typing import Optional
from pydantic import Field

from lovenest.models.common import LoveNestModel

EVENT_TYPES = ("date", "birthday", "anniversary", "custom")


class Event(LoveNestModel):
    id: str = Field(alias="_id")
    title: str
    description: str = ""
    date: str
    time: str = ""
    location: str = ""
    is_all_day: bool = False
    is_recurring: bool = False
    event_type: str = "custom"


class EventList(LoveNestModel):
    events: list[Event] = []
