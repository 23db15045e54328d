"""
Bucket list REST API: personal and shared goals.
"""

from __future__ import annotations

from typing import Any, Optional

from lovenest.transport.http import HttpClient, json_body


class BucketlistAPI:
    def __init__(self, http: HttpClient):
        self._http = http

    async def list(self) -> dict[str, Any]:
        """All visible items plus completion stats."""
        return await self._http.get("/bucketlist")

    async def personal(self) -> dict[str, Any]:
        return await self._http.get("/bucketlist/personal")

    async def shared(self) -> dict[str, Any]:
        return await self._http.get("/bucketlist/shared")

    async def add(
        self,
        title: str,
        type: str = "personal",
        description: Optional[str] = None,
        target_date: Optional[str] = None,
    ) -> dict[str, Any]:
        return await self._http.post("/bucketlist", json_body(
            title=title, description=description, type=type, target_date=target_date,
        ))

    async def update(self, item_id: str, **fields: Any) -> dict[str, Any]:
        return await self._http.put(f"/bucketlist/{item_id}", json_body(**fields))

    async def delete(self, item_id: str) -> Any:
        return await self._http.delete(f"/bucketlist/{item_id}")

    async def complete(self, item_id: str) -> dict[str, Any]:
        return await self._http.post(f"/bucketlist/{item_id}/complete")

    async def uncomplete(self, item_id: str) -> dict[str, Any]:
        return await self._http.post(f"/bucketlist/{item_id}/uncomplete")
