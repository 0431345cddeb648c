"""Domain port definitions for adapters."""

from __future__ import annotations

from .manifest import ManifestLoader
from .monitoring import Heartbeat
from .registry import RegistryQuery, RegistryUpdater, SiteDirectory

__all__ = [
    "Heartbeat",
    "ManifestLoader",
    "RegistryQuery",
    "RegistryUpdater",
    "SiteDirectory",
]
