"""
Events REST API: the shared calendar.
"""

from __future__ import annotations

from typing import Any, Optional

from lovenest.transport.http import HttpClient, json_body


class EventsAPI:
    def __init__(self, http: HttpClient):
        self._http = http

    async def list(
        self, month: Optional[int] = None, year: Optional[int] = None, event_type: Optional[str] = None,
    ) -> dict[str, Any]:
        """List events, optionally for one month (1-12) of a year."""
        return await self._http.get("/events", params={"month": month, "year": year, "eventType": event_type})

    async def upcoming(self, limit: int = 5) -> dict[str, Any]:
        return await self._http.get("/events/upcoming", params={"limit": limit})

    async def get(self, event_id: str) -> dict[str, Any]:
        return await self._http.get(f"/events/{event_id}")

    async def create(
        self,
        title: str,
        date: str,
        description: Optional[str] = None,
        time: Optional[str] = None,
        location: Optional[str] = None,
        is_all_day: Optional[bool] = None,
        is_recurring: Optional[bool] = None,
        event_type: Optional[str] = None,
    ) -> dict[str, Any]:
        return await self._http.post("/events", json_body(
            title=title, date=date, description=description, time=time, location=location,
            is_all_day=is_all_day, is_recurring=is_recurring, event_type=event_type,
        ))

    async def update(self, event_id: str, **fields: Any) -> dict[str, Any]:
        """Partial update; keyword names are snake_case (``is_all_day=True``)."""
        return await self._http.put(f"/events/{event_id}", json_body(**fields))

    async def delete(self, event_id: str) -> Any:
        return await self._http.delete(f"/events/{event_id}")
