"""Translate registry documents to domain records and instructions to patches."""

from __future__ import annotations

from datetime import UTC
from typing import TYPE_CHECKING

from launchsync.domain.model import RegistryRecord, RegistrySnapshot, SiteIdentity

from .schema import LaunchPatch

if TYPE_CHECKING:
    from datetime import datetime

    from launchsync.domain.model import UpdateInstruction

    from .schema import LaunchDocument, LaunchpadDocument, LaunchQueryResponse


def format_utc(instant: datetime) -> str:
    """Render ``instant`` as the registry stores ``date_utc`` (``...T14:10:00.000Z``)."""

    rendered = instant.astimezone(UTC).isoformat(timespec="milliseconds")
    return rendered.replace("+00:00", "Z")


def format_local(local_time: datetime) -> str:
    return local_time.isoformat(timespec="seconds")


def to_registry_record(document: LaunchDocument) -> RegistryRecord:
    return RegistryRecord(
        id=document.id,
        name=document.name,
        sequence_number=document.flight_number,
        is_upcoming=document.upcoming,
        is_auto_update_eligible=document.auto_update,
        instant=document.date_utc.astimezone(UTC) if document.date_utc else None,
        precision=document.date_precision,
        site_id=document.launchpad,
        is_tentative=document.tbd,
    )


def to_snapshot(response: LaunchQueryResponse) -> RegistrySnapshot:
    return RegistrySnapshot.from_records([to_registry_record(doc) for doc in response.docs])


def to_site_identity(document: LaunchpadDocument) -> SiteIdentity:
    return SiteIdentity(
        canonical_id=document.id,
        timezone_name=document.timezone,
        facility=document.name,
    )


def to_launch_patch(instruction: UpdateInstruction) -> LaunchPatch:
    return LaunchPatch(
        flight_number=instruction.sequence_number,
        date_unix=int(instruction.instant.timestamp()),
        date_utc=format_utc(instruction.instant),
        date_local=format_local(instruction.local_time),
        date_precision=instruction.precision,
        launchpad=instruction.site.canonical_id,
        tbd=instruction.is_tentative,
    )
