"""HTTP client for the launch registry (SpaceX-API v4)."""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING

import httpx
from pydantic import TypeAdapter, ValidationError

from launchsync.adapters.http_resilience import ResilientClient
from launchsync.domain.errors import RegistryError, UnknownSiteError

from .schema import LaunchpadDocument, LaunchQueryResponse
from .translator import to_launch_patch, to_site_identity, to_snapshot

if TYPE_CHECKING:
    from collections.abc import Callable

    from launchsync.config.http_resilience import ResilienceConfig
    from launchsync.config.spacex import SpaceXConfig
    from launchsync.domain.model import RegistrySnapshot, SiteIdentity, UpdateInstruction

log = getLogger(__name__)

LAUNCH_QUERY_BODY = {
    "options": {
        "pagination": False,
        "sort": {"flight_number": "asc"},
    },
}
API_KEY_HEADER = "spacex-key"

_LAUNCHPAD_LIST = TypeAdapter(list[LaunchpadDocument])


class SpaceXRegistry:
    """Query and patch launches in the registry."""

    def __init__(
        self,
        *,
        config: SpaceXConfig,
        client_factory: Callable[[ResilienceConfig], ResilientClient] | None = None,
    ) -> None:
        self._config = config
        self._resilience = config.resilience
        self._client_factory = client_factory or ResilientClient

    def query(self) -> RegistrySnapshot:
        return asyncio.run(self._query_async())

    def update(self, instruction: UpdateInstruction) -> None:
        asyncio.run(self._update_async(instruction))

    async def _query_async(self) -> RegistrySnapshot:
        async with self._client_factory(self._resilience) as client:
            try:
                response = await client.post("/launches/query", json=LAUNCH_QUERY_BODY)
                response.raise_for_status()
                payload = LaunchQueryResponse.model_validate(response.json())
            except httpx.HTTPError as exc:
                raise RegistryError(f"Launch query failed: {exc}") from exc
            except (ValidationError, ValueError) as exc:
                raise RegistryError(f"Unexpected launch query payload: {exc}") from exc

        snapshot = to_snapshot(payload)
        log.debug(
            "Registry snapshot: %s upcoming, %s completed",
            len(snapshot.upcoming),
            len(snapshot.completed),
        )
        return snapshot

    async def _update_async(self, instruction: UpdateInstruction) -> None:
        if not self._config.api_key:
            raise RegistryError("Missing SPACEX_KEY; cannot patch launches")
        patch = to_launch_patch(instruction)
        async with self._client_factory(self._resilience) as client:
            try:
                response = await client.patch(
                    f"/launches/{instruction.target_record_id}",
                    json=patch.model_dump(mode="json"),
                    headers={API_KEY_HEADER: self._config.api_key},
                )
                response.raise_for_status()
            except httpx.HTTPError as exc:
                raise RegistryError(
                    f"Patch of launch {instruction.record_name} "
                    f"({instruction.target_record_id}) failed: {exc}"
                ) from exc


class SpaceXSiteDirectory:
    """Launchpad directory backed by ``GET /launchpads``.

    The listing is fetched once per instance; the HTTP layer additionally caches it
    across runs according to the resilience cache settings.
    """

    def __init__(
        self,
        *,
        config: SpaceXConfig,
        client_factory: Callable[[ResilienceConfig], ResilientClient] | None = None,
    ) -> None:
        self._resilience = config.directory_resilience
        self._client_factory = client_factory or ResilientClient
        self._sites: dict[str, SiteIdentity] | None = None

    def lookup(self, facility: str) -> SiteIdentity:
        if self._sites is None:
            self._sites = asyncio.run(self._fetch_sites_async())
        try:
            return self._sites[facility]
        except KeyError:
            msg = "Facility missing from site directory"
            raise UnknownSiteError(facility, reason=msg) from None

    async def _fetch_sites_async(self) -> dict[str, SiteIdentity]:
        async with self._client_factory(self._resilience) as client:
            try:
                response = await client.get("/launchpads")
                response.raise_for_status()
                documents = _LAUNCHPAD_LIST.validate_python(response.json())
            except httpx.HTTPError as exc:
                raise RegistryError(f"Launchpad listing failed: {exc}") from exc
            except (ValidationError, ValueError) as exc:
                raise RegistryError(f"Unexpected launchpad payload: {exc}") from exc
        return {document.name: to_site_identity(document) for document in documents}

