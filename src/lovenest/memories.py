"""
Memories REST API: the shared photo/video gallery.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, Union

from lovenest.transport.http import HttpClient, file_field, json_body


class MemoriesAPI:
    def __init__(self, http: HttpClient):
        self._http = http

    async def list(
        self, page: Optional[int] = None, limit: Optional[int] = None, type: Optional[str] = None,
    ) -> dict[str, Any]:
        """List memories, newest first. ``type`` filters to "image" or "video"."""
        return await self._http.get("/memories", params={"page": page, "limit": limit, "type": type})

    async def get(self, memory_id: str) -> dict[str, Any]:
        return await self._http.get(f"/memories/{memory_id}")

    async def upload(
        self,
        file_path: Union[str, Path],
        caption: str = "",
        date_taken: Optional[str] = None,
    ) -> dict[str, Any]:
        """Upload an image or video. Multipart form: file, caption, dateTaken."""
        return await self._http.upload_file(
            "/memories",
            fields={"caption": caption, "dateTaken": date_taken},
            files={"file": file_field(file_path)},
        )

    async def update(
        self,
        memory_id: str,
        caption: Optional[str] = None,
        date_taken: Optional[str] = None,
        tags: Optional[list[str]] = None,
    ) -> dict[str, Any]:
        return await self._http.put(f"/memories/{memory_id}", json_body(
            caption=caption, date_taken=date_taken, tags=tags,
        ))

    async def delete(self, memory_id: str) -> Any:
        return await self._http.delete(f"/memories/{memory_id}")
