"""Ports for reading and patching the launch registry."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from launchsync.domain.model import RegistrySnapshot, SiteIdentity, UpdateInstruction


@runtime_checkable
class RegistryQuery(Protocol):
    """Return every registry record, partitioned into upcoming and completed."""

    def __call__(self) -> RegistrySnapshot: ...


@runtime_checkable
class RegistryUpdater(Protocol):
    """Apply one update instruction to the registry."""

    def __call__(self, instruction: UpdateInstruction) -> None: ...


@runtime_checkable
class SiteDirectory(Protocol):
    """Look up a canonical launch facility by name."""

    def lookup(self, facility: str) -> SiteIdentity: ...


__all__ = ["RegistryQuery", "RegistryUpdater", "SiteDirectory"]
