"""Async HTTP client shared by the registry, manifest and heartbeat adapters.

Requests pass the rate limiter first, then the retrying transport. When the
configuration asks for it, responses are stored in the sqlite cache of the data
directory (used for the launchpad listing, which changes a few times a year).
"""

from __future__ import annotations

from json import JSONDecodeError, loads
from logging import getLogger
from typing import TYPE_CHECKING

import httpx
from aiolimiter import AsyncLimiter
from hishel import AsyncSqliteStorage, FilterPolicy
from hishel import Response as HishelCacheResponse
from hishel._policies import BaseFilter
from hishel.httpx import AsyncCacheClient
from httpx_retries import Retry, RetryTransport

from launchsync.config.http_resilience import CacheConfig, RateLimit, ResilienceConfig, RetryPolicy
from launchsync.config.storage import get_http_cache_path

if TYPE_CHECKING:
    from collections.abc import Mapping
    from types import TracebackType

    from launchsync.config.http_resilience import ShouldCacheHook

__all__ = [
    "CacheConfig",
    "RateLimit",
    "ResilienceConfig",
    "ResilientClient",
    "RetryPolicy",
]

log = getLogger(__name__)


def _build_retry(policy: RetryPolicy) -> Retry:
    return Retry(
        total=policy.total,
        backoff_factor=policy.backoff_factor,
        max_backoff_wait=policy.max_backoff_wait,
        respect_retry_after_header=policy.respect_retry_after_header,
        allowed_methods=tuple(policy.allowed_methods),
        status_forcelist=tuple(policy.status_forcelist),
        retry_on_exceptions=policy.retry_on_exceptions,
    )


def _build_client(config: ResilienceConfig) -> httpx.AsyncClient:
    transport = RetryTransport(retry=_build_retry(config.retry))
    base_url = config.base_url or ""
    headers = dict(config.default_headers or {})

    storage, policy = _build_cache_components(config.cache)
    if storage is None:
        return httpx.AsyncClient(
            base_url=base_url,
            timeout=config.timeout_seconds,
            headers=headers,
            transport=transport,
        )
    log.debug("Response cache enabled for %s", config.name)
    return AsyncCacheClient(
        base_url=base_url,
        timeout=config.timeout_seconds,
        headers=headers,
        transport=transport,
        storage=storage,
        policy=policy,
    )


class ResilientClient:
    """Rate-limited, retrying ``httpx`` client for one collaborator."""

    def __init__(self, config: ResilienceConfig) -> None:
        self.config = config
        self._limiter: AsyncLimiter | None = (
            AsyncLimiter(config.ratelimit.max_calls, config.ratelimit.per_seconds)
            if config.ratelimit
            else None
        )
        self._client = _build_client(config)

    async def __aenter__(self) -> ResilientClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def request(
        self,
        method: str,
        url: str,
        *,
        json: object = None,
        headers: Mapping[str, str] | None = None,
    ) -> httpx.Response:
        if self._limiter is None:
            return await self._client.request(method, url, json=json, headers=headers)
        async with self._limiter:
            return await self._client.request(method, url, json=json, headers=headers)

    async def get(self, url: str, *, headers: Mapping[str, str] | None = None) -> httpx.Response:
        return await self.request("GET", url, headers=headers)

    async def post(
        self,
        url: str,
        *,
        json: object = None,
        headers: Mapping[str, str] | None = None,
    ) -> httpx.Response:
        return await self.request("POST", url, json=json, headers=headers)

    async def patch(
        self,
        url: str,
        *,
        json: object = None,
        headers: Mapping[str, str] | None = None,
    ) -> httpx.Response:
        return await self.request("PATCH", url, json=json, headers=headers)


class _ShouldCacheResponseFilter(BaseFilter[HishelCacheResponse]):
    """Hishel response filter that stores a response only if its JSON body qualifies."""

    def __init__(self, predicate: ShouldCacheHook) -> None:
        self._predicate = predicate

    def needs_body(self) -> bool:
        return True

    def apply(self, item: HishelCacheResponse, body: bytes | None) -> bool:  # noqa: ARG002
        if body is None:
            return True
        try:
            payload = loads(body.decode("utf-8"))
        except (UnicodeDecodeError, JSONDecodeError):
            return False
        return bool(self._predicate(payload))


def _build_cache_components(
    config: CacheConfig | None,
) -> tuple[AsyncSqliteStorage | None, FilterPolicy | None]:
    if config is None or not config.enabled:
        return None, None

    storage = AsyncSqliteStorage(
        database_path=config.sqlite_path or str(get_http_cache_path()),
        default_ttl=config.default_ttl_seconds,
    )
    policy: FilterPolicy | None = None
    if config.should_cache is not None:
        policy = FilterPolicy(response_filters=[_ShouldCacheResponseFilter(config.should_cache)])
    return storage, policy
