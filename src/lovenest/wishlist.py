"""
Wishlist REST API: each partner's list, fulfilled by the other.

Items with a picture go through the multipart ``*_with_image`` methods;
everything else is JSON.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, Union

from lovenest.transport.http import HttpClient, file_field, json_body


class WishlistAPI:
    def __init__(self, http: HttpClient):
        self._http = http

    async def list_all(self) -> dict[str, Any]:
        return await self._http.get("/wishlist")

    async def mine(self) -> dict[str, Any]:
        return await self._http.get("/wishlist/mine")

    async def partner(self) -> dict[str, Any]:
        return await self._http.get("/wishlist/partner")

    async def add(
        self,
        title: str,
        description: Optional[str] = None,
        link: Optional[str] = None,
        image_url: Optional[str] = None,
        priority: Optional[str] = None,
    ) -> dict[str, Any]:
        return await self._http.post("/wishlist", json_body(
            title=title, description=description, link=link, image_url=image_url, priority=priority,
        ))

    async def add_with_image(
        self,
        title: str,
        image_path: Union[str, Path],
        description: Optional[str] = None,
        link: Optional[str] = None,
        priority: Optional[str] = None,
    ) -> dict[str, Any]:
        return await self._http.upload_file(
            "/wishlist",
            fields=json_body(title=title, description=description, link=link, priority=priority),
            files={"image": file_field(image_path)},
        )

    async def update(self, item_id: str, **fields: Any) -> dict[str, Any]:
        return await self._http.put(f"/wishlist/{item_id}", json_body(**fields))

    async def update_with_image(self, item_id: str, image_path: Union[str, Path], **fields: Any) -> dict[str, Any]:
        return await self._http.upload_file(
            f"/wishlist/{item_id}",
            fields=json_body(**fields),
            files={"image": file_field(image_path)},
            method="PUT",
        )

    async def delete(self, item_id: str) -> Any:
        return await self._http.delete(f"/wishlist/{item_id}")

    async def fulfill(self, item_id: str) -> dict[str, Any]:
        """Mark a partner's wish as granted."""
        return await self._http.post(f"/wishlist/{item_id}/fulfill")

    async def unfulfill(self, item_id: str) -> dict[str, Any]:
        return await self._http.post(f"/wishlist/{item_id}/unfulfill")
