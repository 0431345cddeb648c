"""Plan registry updates for one manifest snapshot.

Every auto-update eligible upcoming record is compared against every manifest row.
Each match is evaluated into either an ``UpdateInstruction`` or a ``RowFailure``;
the error policy then decides once, for the whole pass, whether the first failure
aborts planning or whether failures are collected next to the instructions.
Planning has no side effects on the registry, so a rejected plan never leaves the
registry half patched.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from launchsync.domain.errors import (
    DateFormatError,
    DuplicateSequenceError,
    ReconciliationError,
    UnknownSiteError,
)
from launchsync.domain.model import (
    MANIFEST_ROW_LIMIT,
    DuplicatePolicy,
    ErrorPolicy,
    SequenceLedger,
    UpdateInstruction,
)

from .dates import localize, parse_launch_date
from .launchpads import LaunchpadResolver
from .matching import matches
from .ordering import assign_sequence, derive_base_sequence

if TYPE_CHECKING:
    from collections.abc import Iterable

    from launchsync.domain.model import ManifestRow, RegistryRecord, RegistrySnapshot

log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RowFailure:
    """A matched row whose date or site could not be interpreted."""

    record: RegistryRecord
    row: ManifestRow
    error: ReconciliationError


type RowOutcome = UpdateInstruction | RowFailure


@dataclass(frozen=True, slots=True)
class ReconciliationPlan:
    base_sequence: int
    instructions: tuple[UpdateInstruction, ...] = ()
    failures: tuple[RowFailure, ...] = ()
    ledger: SequenceLedger = SequenceLedger()

    @property
    def duplicates(self) -> tuple[int, ...]:
        return self.ledger.duplicates()


def truncate_rows(rows: Iterable[ManifestRow]) -> list[ManifestRow]:
    """Keep the near-term manifest window, in row order."""

    ordered = sorted(rows, key=lambda row: row.row_index)
    return [row for row in ordered if row.row_index < MANIFEST_ROW_LIMIT]


def evaluate_row(
    record: RegistryRecord,
    row: ManifestRow,
    *,
    base_sequence: int,
    ledger: SequenceLedger,
    resolver: LaunchpadResolver,
) -> tuple[RowOutcome, SequenceLedger]:
    """Turn one matched row into an instruction, threading the sequence ledger."""

    try:
        parsed = parse_launch_date(row.raw_date)
        site = resolver.resolve(row.site_label)
        parsed = localize(parsed, site.timezone_name)
    except (DateFormatError, UnknownSiteError) as exc:
        return RowFailure(record=record, row=row, error=exc), ledger

    sequence_number, ledger = assign_sequence(base_sequence, row.row_index, ledger)
    instruction = UpdateInstruction(
        target_record_id=record.id,
        record_name=record.name,
        row_index=row.row_index,
        sequence_number=sequence_number,
        date=parsed,
        site=site,
    )
    return instruction, ledger


def plan_reconciliation(
    rows: Iterable[ManifestRow],
    snapshot: RegistrySnapshot,
    *,
    resolver: LaunchpadResolver | None = None,
    error_policy: ErrorPolicy = ErrorPolicy.ABORT,
    duplicate_policy: DuplicatePolicy = DuplicatePolicy.WARN,
) -> ReconciliationPlan:
    """Match manifest rows to eligible records and compute their updates."""

    active_resolver = resolver or LaunchpadResolver()
    window = truncate_rows(rows)
    first_label = window[0].payload_label if window else None
    base_sequence = derive_base_sequence(snapshot.completed, first_label)
    log.debug("Base sequence number %s (first manifest row %r)", base_sequence, first_label)

    ledger = SequenceLedger()
    instructions: list[UpdateInstruction] = []
    failures: list[RowFailure] = []
    records_by_row: dict[int, list[str]] = defaultdict(list)

    for record in snapshot.eligible:
        matched_rows: list[int] = []
        for row in window:
            if not matches(record.name, row.payload_label):
                continue
            matched_rows.append(row.row_index)
            records_by_row[row.row_index].append(record.name)

            outcome, ledger = evaluate_row(
                record,
                row,
                base_sequence=base_sequence,
                ledger=ledger,
                resolver=active_resolver,
            )
            if isinstance(outcome, RowFailure):
                if error_policy is ErrorPolicy.ABORT:
                    raise outcome.error
                log.warning(
                    "Skipping row %s for %s: %s", row.row_index, record.name, outcome.error
                )
                failures.append(outcome)
                continue
            instructions.append(outcome)

        if len(matched_rows) > 1:
            log.warning("Launch %s matched several manifest rows: %s", record.name, matched_rows)

    for row_index, names in records_by_row.items():
        if len(names) > 1:
            log.warning("Manifest row %s matched several launches: %s", row_index, names)

    plan = ReconciliationPlan(
        base_sequence=base_sequence,
        instructions=tuple(instructions),
        failures=tuple(failures),
        ledger=ledger,
    )
    check_duplicates(plan, policy=duplicate_policy)
    return plan


def check_duplicates(plan: ReconciliationPlan, *, policy: DuplicatePolicy) -> None:
    duplicates = plan.duplicates
    if not duplicates:
        return
    if policy is DuplicatePolicy.REJECT:
        raise DuplicateSequenceError(duplicates)
    log.warning("Duplicate sequence numbers assigned: %s", list(duplicates))


__all__ = [
    "ReconciliationPlan",
    "RowFailure",
    "RowOutcome",
    "check_duplicates",
    "evaluate_row",
    "plan_reconciliation",
    "truncate_rows",
]
