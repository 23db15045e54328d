"""
REST HTTP client for the LoveNest API.

Two call sites, chosen by the caller:
  request()      JSON body (or none)
  upload_file()  multipart body, boundary set by httpx

Both attach the stored bearer token, parse the body as JSON whatever the
status, and capture any ``token`` field a response carries into the token
store before returning.
"""

import json
import logging
import mimetypes
from pathlib import Path
from typing import Any, Mapping, Optional, Union

import httpx
from pydantic.alias_generators import to_camel

from lovenest.errors import RequestError
from lovenest.token_store import TokenStore

logger = logging.getLogger(__name__)

USER_AGENT = "lovenest-sdk/0.1.0"
DEFAULT_TIMEOUT = 30.0
GENERIC_ERROR = "Something went wrong"
UPLOAD_ERROR = "Upload failed"

FileField = tuple[str, bytes, str]


def file_field(path: Union[str, Path]) -> FileField:
    """Read a local file into an httpx multipart tuple: (filename, content, content type)."""
    p = Path(path)
    content_type = mimetypes.guess_type(p.name)[0] or "application/octet-stream"
    return p.name, p.read_bytes(), content_type


def _form_value(value: Any) -> str:
    """Render a plain multipart field the way a browser form would: strings as-is, the rest as JSON."""
    return value if isinstance(value, str) else json.dumps(value)


def _clean(values: Optional[Mapping[str, Any]]) -> Optional[dict[str, Any]]:
    if values is None:
        return None
    return {k: v for k, v in values.items() if v is not None}


class HttpClient:
    def __init__(
        self,
        base_url: str,
        token_store: TokenStore,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self._base_url = base_url.rstrip("/")
        self._tokens = token_store
        # The client's cookie jar carries any server session cookie between calls.
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            headers={"User-Agent": USER_AGENT, "Accept": "application/json"},
            timeout=timeout,
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def token_store(self) -> TokenStore:
        return self._tokens

    def _auth_headers(self) -> dict[str, str]:
        headers: dict[str, str] = {}
        token = self._tokens.get()
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    async def request(
        self,
        endpoint: str,
        method: str = "GET",
        body: Optional[Any] = None,
        headers: Optional[Mapping[str, str]] = None,
        params: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        """Send a JSON request and return the parsed response body."""
        request_headers = self._auth_headers()
        if body is not None:
            request_headers["Content-Type"] = "application/json"
        if headers:
            request_headers.update(headers)
        resp = await self._send(
            method, endpoint, json=body, params=_clean(params), headers=request_headers,
        )
        return self._finish(resp, GENERIC_ERROR)

    async def upload_file(
        self,
        endpoint: str,
        fields: Optional[Mapping[str, Any]] = None,
        files: Optional[Mapping[str, FileField]] = None,
        method: str = "POST",
    ) -> Any:
        """Send a multipart request (media uploads) and return the parsed response body."""
        # Plain fields travel as filename-less parts so the body is multipart even without a file.
        parts: dict[str, Any] = {k: (None, _form_value(v)) for k, v in (_clean(fields) or {}).items()}
        parts.update(files or {})
        resp = await self._send(method, endpoint, files=parts, headers=self._auth_headers())
        return self._finish(resp, UPLOAD_ERROR)

    async def get(self, path: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        return await self.request(path, "GET", params=params)

    async def post(self, path: str, body: Optional[Any] = None) -> Any:
        return await self.request(path, "POST", body=body)

    async def put(self, path: str, body: Optional[Any] = None) -> Any:
        return await self.request(path, "PUT", body=body)

    async def delete(self, path: str) -> Any:
        return await self.request(path, "DELETE")

    async def _send(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        try:
            return await self._client.request(method, path, **kwargs)
        except httpx.RequestError as e:
            logger.warning("%s %s failed: %s", method, path, e)
            raise RequestError(f"Network error: {e}", code="network_error") from e

    def _finish(self, resp: httpx.Response, fallback_message: str) -> Any:
        logger.debug("%s %s -> %s", resp.request.method, resp.request.url.path, resp.status_code)
        try:
            data = resp.json() if resp.content else None
            parsed = True
        except ValueError:
            data = None
            parsed = False

        if not resp.is_success:
            message = data.get("message") if isinstance(data, dict) else None
            raise RequestError(
                message or fallback_message,
                status_code=resp.status_code,
                details=data if isinstance(data, dict) else None,
            )
        if not parsed:
            raise RequestError(
                "Invalid response from server", code="invalid_response", status_code=resp.status_code,
            )

        if isinstance(data, dict):
            token = data.get("token")
            if isinstance(token, str) and token:
                self._tokens.set(token)
        return data

    async def close(self) -> None:
        await self._client.aclose()


def json_body(**fields: Any) -> dict[str, Any]:
    """Build a request body from snake_case keywords: camelCase keys, ``None`` values dropped."""
    return {to_camel(k): v for k, v in fields.items() if v is not None}
