"""
Journal REST API.
"""

from __future__ import annotations

from typing import Any, Optional

from lovenest.transport.http import HttpClient, json_body


class JournalAPI:
    def __init__(self, http: HttpClient):
        self._http = http

    async def list(
        self, page: Optional[int] = None, limit: Optional[int] = None, author: Optional[str] = None,
    ) -> dict[str, Any]:
        return await self._http.get("/journal", params={"page": page, "limit": limit, "author": author})

    async def get(self, entry_id: str) -> dict[str, Any]:
        return await self._http.get(f"/journal/{entry_id}")

    async def create(
        self,
        title: str,
        content: str,
        mood: Optional[str] = None,
        mood_emoji: Optional[str] = None,
        mood_scale: Optional[int] = None,
        date: Optional[str] = None,
        attachments: Optional[list[str]] = None,
    ) -> dict[str, Any]:
        return await self._http.post("/journal", json_body(
            title=title, content=content, mood=mood, mood_emoji=mood_emoji,
            mood_scale=mood_scale, date=date, attachments=attachments,
        ))

    async def update(self, entry_id: str, **fields: Any) -> dict[str, Any]:
        return await self._http.put(f"/journal/{entry_id}", json_body(**fields))

    async def delete(self, entry_id: str) -> Any:
        return await self._http.delete(f"/journal/{entry_id}")
