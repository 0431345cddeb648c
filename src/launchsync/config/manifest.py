"""Launch manifest (subreddit wiki) configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from launchsync import __version__

from .env import optional_env_var
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy

DEFAULT_MANIFEST_URL = "https://old.reddit.com/r/spacex/wiki/launches/manifest"
DEFAULT_MANIFEST_SELECTOR = "body > div.content > div > div > table:nth-child(7) > tbody"
MANIFEST_TIMEOUT_SECONDS = 15.0


@dataclass(frozen=True, slots=True)
class ManifestConfig:
    url: str
    selector: str
    resilience: ResilienceConfig


def get_manifest_config() -> ManifestConfig:
    url = optional_env_var("MANIFEST_URL") or DEFAULT_MANIFEST_URL
    selector = optional_env_var("MANIFEST_SELECTOR") or DEFAULT_MANIFEST_SELECTOR
    resilience = ResilienceConfig(
        name="manifest",
        timeout_seconds=MANIFEST_TIMEOUT_SECONDS,
        ratelimit=RateLimit(max_calls=1, per_seconds=2.0),
        retry=RetryPolicy(total=3),
        default_headers={"User-Agent": f"launchsync/{__version__}"},
    )
    return ManifestConfig(url=url, selector=selector, resilience=resilience)
