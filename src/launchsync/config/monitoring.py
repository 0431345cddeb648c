"""Heartbeat configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import optional_env_var
from .http_resilience import ResilienceConfig, RetryPolicy

HEALTHCHECK_TIMEOUT_SECONDS = 10.0


@dataclass(frozen=True, slots=True)
class HealthcheckConfig:
    url: str | None
    resilience: ResilienceConfig


def get_healthcheck_config() -> HealthcheckConfig:
    return HealthcheckConfig(
        url=optional_env_var("UPCOMING_HEALTHCHECK"),
        resilience=ResilienceConfig(
            name="healthcheck",
            timeout_seconds=HEALTHCHECK_TIMEOUT_SECONDS,
            retry=RetryPolicy(total=2),
        ),
    )
