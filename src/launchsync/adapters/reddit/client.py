"""Manifest loader for the subreddit launch wiki."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from launchsync.adapters.http_resilience import ResilientClient
from launchsync.config.manifest import get_manifest_config

from .parser import extract_manifest_rows

if TYPE_CHECKING:
    from collections.abc import Callable

    from launchsync.config.http_resilience import ResilienceConfig
    from launchsync.config.manifest import ManifestConfig
    from launchsync.domain.model import ManifestRow

log = getLogger(__name__)


def _default_client_factory(config: ResilienceConfig) -> ResilientClient:
    return ResilientClient(config)


@dataclass(slots=True)
class RedditManifestLoader:
    config: ManifestConfig = field(default_factory=get_manifest_config)
    client_factory: Callable[[ResilienceConfig], ResilientClient] = field(
        default=_default_client_factory
    )

    def __call__(self) -> list[ManifestRow]:
        html = asyncio.run(self._fetch_page_async())
        rows = extract_manifest_rows(html, selector=self.config.selector)
        log.info("Loaded %s manifest rows from %s", len(rows), self.config.url)
        return rows

    async def _fetch_page_async(self) -> str:
        async with self.client_factory(self.config.resilience) as client:
            response = await client.get(self.config.url)
            response.raise_for_status()
            return response.text
