"""Public interface for the launch registry adapter."""

from __future__ import annotations

from .client import SpaceXRegistry, SpaceXSiteDirectory
from .schema import LaunchDocument, LaunchpadDocument, LaunchPatch, LaunchQueryResponse
from .translator import to_launch_patch, to_registry_record, to_snapshot

__all__ = [
    "LaunchDocument",
    "LaunchPatch",
    "LaunchQueryResponse",
    "LaunchpadDocument",
    "SpaceXRegistry",
    "SpaceXSiteDirectory",
    "to_launch_patch",
    "to_registry_record",
    "to_snapshot",
]
