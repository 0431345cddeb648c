from __future__ import annotations

from typing import TYPE_CHECKING

import httpx

from launchsync.adapters.http_resilience import ResilienceConfig, ResilientClient

if TYPE_CHECKING:
    from collections.abc import Callable


def make_client_factory(
    handler: Callable[[httpx.Request], httpx.Response],
) -> Callable[[ResilienceConfig], ResilientClient]:
    async def async_handler(request: httpx.Request) -> httpx.Response:
        return handler(request)

    def factory(resilience: ResilienceConfig) -> ResilientClient:
        client = ResilientClient(resilience)
        client._client = httpx.AsyncClient(  # noqa: SLF001  # type: ignore[reportPrivateUsage]
            base_url=resilience.base_url or "",
            headers=dict(resilience.default_headers or {}),
            transport=httpx.MockTransport(async_handler),
        )
        return client

    return factory
