"""Resolve manifest launch site labels to canonical launch facilities.

The manifest writes launch sites as short pad labels, sometimes two of them when a
mission could fly from either pad (``SLC-40 / LC-39A``). Labels map to exactly one
facility through a closed table: compound labels resolve to the first listed,
primary pad. New spellings are supported by extending the table, never by changing
the lookup.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from launchsync.domain.errors import UnknownSiteError
from launchsync.domain.model import SiteIdentity

if TYPE_CHECKING:
    from collections.abc import Mapping

    from launchsync.domain.ports import SiteDirectory

CCAFS_SLC_40: Final = "CCAFS SLC 40"
KSC_LC_39A: Final = "KSC LC 39A"
VAFB_SLC_4E: Final = "VAFB SLC 4E"
STARBASE: Final = "STLS"

LAUNCHPAD_LABELS: Final[Mapping[str, str]] = MappingProxyType(
    {
        "SLC-40": CCAFS_SLC_40,
        "SLC-40 / LC-39A": CCAFS_SLC_40,
        "SLC-40 / BC": CCAFS_SLC_40,
        "SLC-40, LC-39A": CCAFS_SLC_40,
        "LC-39A": KSC_LC_39A,
        "LC-39A / BC": KSC_LC_39A,
        "LC-39A / SLC-40": KSC_LC_39A,
        "SLC-4E": VAFB_SLC_4E,
        "BC": STARBASE,
        "BC / LC-39A": STARBASE,
        "BC / SLC-40": STARBASE,
    }
)

# Registry launchpad ids and IANA zones as published by the launch registry.
BUILTIN_SITES: Final[Mapping[str, SiteIdentity]] = MappingProxyType(
    {
        CCAFS_SLC_40: SiteIdentity(
            canonical_id="5e9e4501f509094ba4566f84",
            timezone_name="America/New_York",
            facility=CCAFS_SLC_40,
        ),
        KSC_LC_39A: SiteIdentity(
            canonical_id="5e9e4502f509094188566f88",
            timezone_name="America/New_York",
            facility=KSC_LC_39A,
        ),
        VAFB_SLC_4E: SiteIdentity(
            canonical_id="5e9e4502f509092b78566f87",
            timezone_name="America/Los_Angeles",
            facility=VAFB_SLC_4E,
        ),
        STARBASE: SiteIdentity(
            canonical_id="5e9e3032383ecb6bb234e7ca",
            timezone_name="America/Chicago",
            facility=STARBASE,
        ),
    }
)


@dataclass(frozen=True, slots=True)
class SnapshotSiteDirectory:
    """Site directory backed by a fixed mapping of facility name to identity."""

    sites: Mapping[str, SiteIdentity] = field(default_factory=lambda: BUILTIN_SITES)

    def lookup(self, facility: str) -> SiteIdentity:
        try:
            return self.sites[facility]
        except KeyError:
            msg = "Facility missing from site directory"
            raise UnknownSiteError(facility, reason=msg) from None


@dataclass(frozen=True, slots=True)
class LaunchpadResolver:
    """Map raw manifest site labels to ``SiteIdentity`` values."""

    directory: SiteDirectory = field(default_factory=SnapshotSiteDirectory)
    labels: Mapping[str, str] = field(default_factory=lambda: LAUNCHPAD_LABELS)

    def facility_for(self, label: str) -> str:
        try:
            return self.labels[label.strip()]
        except KeyError:
            raise UnknownSiteError(label) from None

    def resolve(self, label: str) -> SiteIdentity:
        return self.directory.lookup(self.facility_for(label))

    def with_labels(self, extra: Mapping[str, str]) -> LaunchpadResolver:
        """Return a resolver that also knows the ``extra`` label spellings."""

        merged = {**self.labels, **extra}
        return LaunchpadResolver(directory=self.directory, labels=MappingProxyType(merged))


def resolve_launchpad(label: str, *, directory: SiteDirectory | None = None) -> SiteIdentity:
    resolver = LaunchpadResolver(directory=directory or SnapshotSiteDirectory())
    return resolver.resolve(label)


__all__ = [
    "BUILTIN_SITES",
    "CCAFS_SLC_40",
    "KSC_LC_39A",
    "LAUNCHPAD_LABELS",
    "STARBASE",
    "VAFB_SLC_4E",
    "LaunchpadResolver",
    "SnapshotSiteDirectory",
    "resolve_launchpad",
]
