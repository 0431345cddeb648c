"""Value objects exchanged between the manifest, the registry and the engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from datetime import datetime

    from .enums import DatePrecision

MANIFEST_ROW_LIMIT: Final[int] = 30


@dataclass(frozen=True, slots=True)
class ManifestRow:
    """One manifest table row; the three cells always come from the same row."""

    raw_date: str
    payload_label: str
    site_label: str
    row_index: int


@dataclass(frozen=True, slots=True)
class RegistryRecord:
    """Canonical launch entry as stored by the registry.

    The optional trailing fields mirror what the registry currently holds for the
    values the engine recomputes. They are only used to tell real changes apart from
    no-op patches in the logs.
    """

    id: str
    name: str
    sequence_number: int
    is_upcoming: bool
    is_auto_update_eligible: bool = False
    instant: datetime | None = None
    precision: DatePrecision | None = None
    site_id: str | None = None
    is_tentative: bool | None = None


@dataclass(frozen=True, slots=True)
class RegistrySnapshot:
    """Registry records split into upcoming and completed launches."""

    upcoming: tuple[RegistryRecord, ...] = ()
    completed: tuple[RegistryRecord, ...] = ()

    @classmethod
    def from_records(cls, records: list[RegistryRecord]) -> RegistrySnapshot:
        ordered = sorted(records, key=lambda record: record.sequence_number)
        return cls(
            upcoming=tuple(record for record in ordered if record.is_upcoming),
            completed=tuple(record for record in ordered if not record.is_upcoming),
        )

    @property
    def eligible(self) -> tuple[RegistryRecord, ...]:
        return tuple(record for record in self.upcoming if record.is_auto_update_eligible)


@dataclass(frozen=True, slots=True)
class SiteIdentity:
    canonical_id: str
    timezone_name: str
    facility: str | None = None


@dataclass(frozen=True, slots=True)
class ParsedDate:
    """Normalized manifest date.

    ``precision`` is transmitted next to ``instant`` and is never derived from it:
    a year-precision date still resolves to an instant (January 1st, 00:00 UTC).
    """

    instant: datetime
    precision: DatePrecision
    is_tentative: bool
    local_time: datetime


@dataclass(frozen=True, slots=True)
class UpdateInstruction:
    """Patch proposed for one matched (row, record) pair."""

    target_record_id: str
    record_name: str
    row_index: int
    sequence_number: int
    date: ParsedDate
    site: SiteIdentity

    @property
    def instant(self) -> datetime:
        return self.date.instant

    @property
    def local_time(self) -> datetime:
        return self.date.local_time

    @property
    def precision(self) -> DatePrecision:
        return self.date.precision

    @property
    def is_tentative(self) -> bool:
        return self.date.is_tentative

    def changes(self, record: RegistryRecord) -> bool:
        """Return whether applying this instruction would alter ``record``."""

        return (
            record.sequence_number != self.sequence_number
            or record.instant != self.instant
            or record.precision != self.precision
            or record.site_id != self.site.canonical_id
            or record.is_tentative != self.is_tentative
        )


@dataclass(frozen=True, slots=True)
class SequenceLedger:
    """Immutable record of every sequence number assigned during a pass."""

    assigned: tuple[int, ...] = field(default_factory=tuple)

    def record(self, sequence_number: int) -> SequenceLedger:
        return SequenceLedger(assigned=(*self.assigned, sequence_number))

    def duplicates(self) -> tuple[int, ...]:
        seen: set[int] = set()
        repeated: list[int] = []
        for number in self.assigned:
            if number in seen and number not in repeated:
                repeated.append(number)
            seen.add(number)
        return tuple(repeated)
