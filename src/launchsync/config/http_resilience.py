"""HTTP behaviour of the registry, manifest and heartbeat clients.

Each collaborator gets one ``ResilienceConfig``: a request timeout, a retry policy,
an optional client-side rate limit and an optional on-disk response cache.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import httpx

if TYPE_CHECKING:
    from collections.abc import Mapping

type ShouldCacheHook = Callable[[object], bool]


@dataclass(slots=True, frozen=True)
class RetryPolicy:
    """Transport-level retries with exponential backoff.

    Registry patches replace whole fields, so PATCH is retried like the reads.
    """

    total: int = 3
    backoff_factor: float = 0.5
    max_backoff_wait: float = 30.0
    respect_retry_after_header: bool = True
    allowed_methods: frozenset[str] = field(
        default_factory=lambda: frozenset({"GET", "PATCH", "POST"})
    )
    status_forcelist: frozenset[int] = field(
        default_factory=lambda: frozenset({429, 500, 502, 503, 504})
    )
    retry_on_exceptions: tuple[type[httpx.HTTPError], ...] = (
        httpx.TimeoutException,
        httpx.NetworkError,
        httpx.RemoteProtocolError,
    )


@dataclass(slots=True, frozen=True)
class RateLimit:
    max_calls: int
    per_seconds: float


@dataclass(slots=True, frozen=True)
class CacheConfig:
    """Sqlite response cache; ``should_cache`` sees the decoded JSON body."""

    enabled: bool = True
    sqlite_path: str | None = None
    default_ttl_seconds: float | None = None
    should_cache: ShouldCacheHook | None = None


@dataclass(slots=True, frozen=True)
class ResilienceConfig:
    name: str
    base_url: str | None = None
    timeout_seconds: float = 30.0
    retry: RetryPolicy = field(default_factory=RetryPolicy)
    ratelimit: RateLimit | None = None
    cache: CacheConfig | None = None
    default_headers: Mapping[str, str] | None = None
