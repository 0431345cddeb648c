"""Run one reconciliation pass against the registry ports."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from launchsync.domain.model import DuplicatePolicy, ErrorPolicy

from .driver import ReconciliationPlan, plan_reconciliation

if TYPE_CHECKING:
    from launchsync.domain.model import RegistryRecord, UpdateInstruction
    from launchsync.domain.ports import Heartbeat, ManifestLoader, RegistryQuery, RegistryUpdater

    from .launchpads import LaunchpadResolver

log = getLogger(__name__)


@dataclass(slots=True)
class ReconciliationResult:
    """Outcome of a completed pass."""

    plan: ReconciliationPlan
    applied: int = 0
    changed: int = 0
    heartbeat_sent: bool = False


def run_reconciliation_pass(
    *,
    query_registry: RegistryQuery,
    load_manifest: ManifestLoader,
    update_registry: RegistryUpdater,
    resolver: LaunchpadResolver | None = None,
    heartbeat: Heartbeat | None = None,
    error_policy: ErrorPolicy = ErrorPolicy.ABORT,
    duplicate_policy: DuplicatePolicy = DuplicatePolicy.WARN,
    dry_run: bool = False,
) -> ReconciliationResult:
    """Fetch both sides, plan updates, apply them one by one and signal success.

    Any error propagates and aborts the pass. The heartbeat only fires once every
    instruction has been applied and no matched row was skipped.
    """

    snapshot = query_registry()
    rows = load_manifest()
    log.info(
        "Reconciling %s manifest rows against %s upcoming launches (%s eligible)",
        len(rows),
        len(snapshot.upcoming),
        len(snapshot.eligible),
    )

    plan = plan_reconciliation(
        rows,
        snapshot,
        resolver=resolver,
        error_policy=error_policy,
        duplicate_policy=duplicate_policy,
    )
    result = ReconciliationResult(plan=plan)

    records = {record.id: record for record in snapshot.upcoming}
    for instruction in plan.instructions:
        changed = _log_instruction(instruction, record=records.get(instruction.target_record_id))
        if changed:
            result.changed += 1
        if dry_run:
            continue
        update_registry(instruction)
        result.applied += 1

    if dry_run:
        log.info("Dry run: %s instructions planned, none applied", len(plan.instructions))
        return result

    if plan.failures:
        log.warning("Withholding heartbeat: %s matched rows were skipped", len(plan.failures))
    elif heartbeat is not None:
        heartbeat()
        result.heartbeat_sent = True

    log.info(
        "Reconciliation finished: applied=%s, changed=%s, failures=%s",
        result.applied,
        result.changed,
        len(plan.failures),
    )
    return result


def _log_instruction(
    instruction: UpdateInstruction,
    *,
    record: RegistryRecord | None,
) -> bool:
    changed = record is None or instruction.changes(record)
    log.info(
        "launch=%s flight_number=%s date_utc=%s date_local=%s precision=%s "
        "launchpad=%s tbd=%s changed=%s",
        instruction.record_name,
        instruction.sequence_number,
        instruction.instant.isoformat(),
        instruction.local_time.isoformat(),
        instruction.precision,
        instruction.site.canonical_id,
        instruction.is_tentative,
        changed,
    )
    return changed
