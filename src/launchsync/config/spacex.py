"""SpaceX launch registry configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import optional_env_var, require_env_var
from .http_resilience import CacheConfig, RateLimit, ResilienceConfig, RetryPolicy

DEFAULT_SPACEX_API_URL = "https://api.spacexdata.com/v4"
SPACEX_TIMEOUT_SECONDS = 20.0
LAUNCHPAD_CACHE_TTL_SECONDS = 24 * 60 * 60.0


def _is_launchpad_listing(payload: object) -> bool:
    return isinstance(payload, list) and bool(payload)


@dataclass(frozen=True, slots=True)
class SpaceXConfig:
    """Registry endpoints plus the key used to authorise patches."""

    api_key: str | None
    resilience: ResilienceConfig
    directory_resilience: ResilienceConfig

    @property
    def base_url(self) -> str:
        return self.resilience.base_url or DEFAULT_SPACEX_API_URL


def get_spacex_config(*, require_key: bool = True) -> SpaceXConfig:
    """Build the registry configuration from ``SPACEX_*`` environment variables.

    The API key is only needed for patching; read-only passes (``--dry-run``)
    can skip it with ``require_key=False``.
    """

    base_url = (optional_env_var("SPACEX_API_URL") or DEFAULT_SPACEX_API_URL).rstrip("/")
    api_key = require_env_var("SPACEX_KEY") if require_key else optional_env_var("SPACEX_KEY")

    resilience = ResilienceConfig(
        name="spacex",
        base_url=base_url,
        timeout_seconds=SPACEX_TIMEOUT_SECONDS,
        ratelimit=RateLimit(max_calls=5, per_seconds=1.0),
        retry=RetryPolicy(total=3),
    )
    directory_resilience = ResilienceConfig(
        name="spacex-launchpads",
        base_url=base_url,
        timeout_seconds=SPACEX_TIMEOUT_SECONDS,
        retry=RetryPolicy(total=3),
        cache=CacheConfig(
            default_ttl_seconds=LAUNCHPAD_CACHE_TTL_SECONDS,
            should_cache=_is_launchpad_listing,
        ),
    )
    return SpaceXConfig(
        api_key=api_key,
        resilience=resilience,
        directory_resilience=directory_resilience,
    )
