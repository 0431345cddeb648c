"""Heartbeat adapter pinging a health-check URL after a successful pass."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from launchsync.adapters.http_resilience import ResilientClient
from launchsync.config.monitoring import get_healthcheck_config

if TYPE_CHECKING:
    from collections.abc import Callable

    from launchsync.config.http_resilience import ResilienceConfig
    from launchsync.config.monitoring import HealthcheckConfig

log = getLogger(__name__)


def _default_client_factory(config: ResilienceConfig) -> ResilientClient:
    return ResilientClient(config)


@dataclass(slots=True)
class HttpHeartbeat:
    config: HealthcheckConfig = field(default_factory=get_healthcheck_config)
    client_factory: Callable[[ResilienceConfig], ResilientClient] = field(
        default=_default_client_factory
    )

    def __call__(self) -> None:
        url = self.config.url
        if url is None:
            log.debug("No health-check URL configured; skipping heartbeat")
            return
        asyncio.run(self._ping_async(url))

    async def _ping_async(self, url: str) -> None:
        async with self.client_factory(self.config.resilience) as client:
            response = await client.get(url)
            response.raise_for_status()
