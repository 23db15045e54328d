"""
LoveNest / AsyncLoveNest: main SDK clients.
"""

import asyncio
import functools
import inspect
from typing import Any, Optional

import httpx

from lovenest.auth import AuthAPI
from lovenest.bucketlist import BucketlistAPI
from lovenest.config import resolve_base_url
from lovenest.events import EventsAPI
from lovenest.journal import JournalAPI
from lovenest.memories import MemoriesAPI
from lovenest.session import SessionContext
from lovenest.token_store import FileTokenStore, TokenStore
from lovenest.transport.http import DEFAULT_TIMEOUT, HttpClient
from lovenest.wishlist import WishlistAPI


class AsyncLoveNest:
    """Async LoveNest client (primary).

    One instance per process. The token store defaults to the on-disk store
    under the config directory; pass a MemoryTokenStore for throwaway sessions.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        token_store: Optional[TokenStore] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.token_store: TokenStore = token_store if token_store is not None else FileTokenStore()
        self.http = HttpClient(resolve_base_url(base_url), self.token_store, transport=transport, timeout=timeout)

        self.auth = AuthAPI(self.http)
        self.memories = MemoriesAPI(self.http)
        self.events = EventsAPI(self.http)
        self.wishlist = WishlistAPI(self.http)
        self.bucketlist = BucketlistAPI(self.http)
        self.journal = JournalAPI(self.http)
        self.session = SessionContext(self.auth, self.token_store)

    @property
    def base_url(self) -> str:
        return self.http.base_url

    async def close(self) -> None:
        await self.http.close()

    async def __aenter__(self) -> "AsyncLoveNest":
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.close()


class _SyncProxy:
    """Runs the coroutine methods of a wrapped API object on the owner's loop."""

    def __init__(self, target: Any, run: Any):
        self._target = target
        self._run = run

    def __getattr__(self, name: str) -> Any:
        attr = getattr(self._target, name)
        if not inspect.iscoroutinefunction(attr):
            return attr

        @functools.wraps(attr)
        def call(*args: Any, **kwargs: Any) -> Any:
            return self._run(attr(*args, **kwargs))
        return call


class LoveNest:
    """Sync wrapper around AsyncLoveNest. Runs the event loop internally."""

    def __init__(self, **kwargs: Any):
        self._async = AsyncLoveNest(**kwargs)
        self._loop = asyncio.new_event_loop()
        self.auth = _SyncProxy(self._async.auth, self._run)
        self.memories = _SyncProxy(self._async.memories, self._run)
        self.events = _SyncProxy(self._async.events, self._run)
        self.wishlist = _SyncProxy(self._async.wishlist, self._run)
        self.bucketlist = _SyncProxy(self._async.bucketlist, self._run)
        self.journal = _SyncProxy(self._async.journal, self._run)
        self.session = _SyncProxy(self._async.session, self._run)

    def _run(self, coro: Any) -> Any:
        return self._loop.run_until_complete(coro)

    @property
    def token_store(self) -> TokenStore:
        return self._async.token_store

    def close(self) -> None:
        self._run(self._async.close())
        self._loop.close()

    def __enter__(self) -> "LoveNest":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()
