from __future__ import annotations

import logging
from datetime import UTC, datetime

import pytest

from launchsync.domain.errors import DateFormatError, DuplicateSequenceError, UnknownSiteError
from launchsync.domain.model import DatePrecision, DuplicatePolicy, ErrorPolicy, RegistrySnapshot
from launchsync.domain.reconciliation import (
    LaunchpadResolver,
    RowFailure,
    plan_reconciliation,
)
from launchsync.domain.reconciliation.launchpads import BUILTIN_SITES, CCAFS_SLC_40
from tests.helpers.records import make_record, make_rows, make_snapshot

MANIFEST = (
    ("2021 Jan 20", "GPS III SV05", "SLC-40"),
    ("2021 Jan 24", "Transporter-1", "SLC-40"),
    ("2021 Feb", "Starlink 22", "LC-39A"),
    ("2021 Feb 16 [03:59]", "Starlink 24", "SLC-40"),
    ("2021 Q1", "CRS-22", "LC-39A"),
    ("2021 Mar", "Starlink 23", "SLC-40"),
)


@pytest.fixture
def snapshot() -> RegistrySnapshot:
    return make_snapshot(
        make_record("Sentinel-6", 118, upcoming=False),
        make_record("Turksat 5A", 119, upcoming=False),
        make_record("Starlink 23", 130, record_id="starlink-23"),
        make_record("CRS-22", 131, auto_update=False),
    )


def test_matched_row_produces_a_complete_instruction(
    snapshot: RegistrySnapshot, resolver: LaunchpadResolver
) -> None:
    plan = plan_reconciliation(make_rows(*MANIFEST), snapshot, resolver=resolver)

    assert plan.base_sequence == 120
    assert plan.failures == ()
    assert len(plan.instructions) == 1
    instruction = plan.instructions[0]
    assert instruction.target_record_id == "starlink-23"
    assert instruction.row_index == 5
    assert instruction.sequence_number == 125
    assert instruction.precision is DatePrecision.MONTH
    assert instruction.instant == datetime(2021, 3, 1, tzinfo=UTC)
    assert instruction.is_tentative is False
    assert instruction.site == BUILTIN_SITES[CCAFS_SLC_40]
    assert str(instruction.local_time.tzinfo) == "America/New_York"


def test_planning_is_deterministic_and_idempotent(
    snapshot: RegistrySnapshot, resolver: LaunchpadResolver
) -> None:
    rows = make_rows(*MANIFEST)
    first = plan_reconciliation(rows, snapshot, resolver=resolver)
    instruction = first.instructions[0]

    synced = make_snapshot(
        *snapshot.completed,
        make_record(
            "Starlink 23",
            instruction.sequence_number,
            record_id="starlink-23",
            instant=instruction.instant,
            precision=instruction.precision,
            site_id=instruction.site.canonical_id,
            tentative=instruction.is_tentative,
        ),
    )
    second = plan_reconciliation(rows, synced, resolver=resolver)

    assert second.instructions == first.instructions
    synced_record = synced.upcoming[0]
    assert not second.instructions[0].changes(synced_record)
    assert instruction.changes(snapshot.upcoming[0])


def test_base_keeps_latest_completed_number_while_still_listed(resolver: LaunchpadResolver) -> None:
    snapshot = make_snapshot(
        make_record("Mission X", 100, upcoming=False),
        make_record("Mission Z", 140),
    )
    rows = make_rows(
        ("2021 Jan 20", "Mission X", "SLC-40"),
        ("2021 Feb", "Filler A", "SLC-40"),
        ("2021 Feb", "Filler B", "SLC-40"),
        ("2021 Mar 3", "Mission Z", "SLC-4E"),
    )

    plan = plan_reconciliation(rows, snapshot, resolver=resolver)

    assert plan.base_sequence == 100
    assert [i.sequence_number for i in plan.instructions] == [103]


def test_empty_manifest_and_empty_registry(resolver: LaunchpadResolver) -> None:
    plan = plan_reconciliation([], RegistrySnapshot(), resolver=resolver)

    assert plan.base_sequence == 1
    assert plan.instructions == ()


def test_unmatched_rows_are_never_parsed(resolver: LaunchpadResolver) -> None:
    snapshot = make_snapshot(make_record("Crew-2", 120))
    rows = make_rows(
        ("whenever", "Mystery payload", "Somewhere"),
        ("2021 Apr 22 [10:11]", "Crew-2", "LC-39A"),
    )

    plan = plan_reconciliation(rows, snapshot, resolver=resolver)

    assert [i.sequence_number for i in plan.instructions] == [2]
    assert plan.instructions[0].precision is DatePrecision.HOUR


def test_rows_beyond_the_window_are_ignored(resolver: LaunchpadResolver) -> None:
    filler = [("2021", f"Filler {n}", "SLC-40") for n in range(30)]
    rows = make_rows(*filler, ("2021 Sep 15", "Inspiration4", "LC-39A"))
    snapshot = make_snapshot(make_record("Inspiration4", 150))

    plan = plan_reconciliation(rows, snapshot, resolver=resolver)

    assert plan.instructions == ()


def test_bad_date_aborts_by_default(resolver: LaunchpadResolver) -> None:
    snapshot = make_snapshot(make_record("Transporter-1", 121))
    rows = make_rows(("sometime soon", "Transporter-1", "SLC-40"))

    with pytest.raises(DateFormatError):
        plan_reconciliation(rows, snapshot, resolver=resolver)


def test_unknown_site_aborts_by_default(resolver: LaunchpadResolver) -> None:
    snapshot = make_snapshot(make_record("Transporter-1", 121))
    rows = make_rows(("2021 Jan 24", "Transporter-1", "Boca Chica"))

    with pytest.raises(UnknownSiteError):
        plan_reconciliation(rows, snapshot, resolver=resolver)


def test_date_errors_are_reported_before_site_errors(resolver: LaunchpadResolver) -> None:
    snapshot = make_snapshot(make_record("Transporter-1", 121))
    rows = make_rows(("sometime soon", "Transporter-1", "Boca Chica"))

    with pytest.raises(DateFormatError):
        plan_reconciliation(rows, snapshot, resolver=resolver)


def test_collect_policy_keeps_good_rows(resolver: LaunchpadResolver) -> None:
    snapshot = make_snapshot(
        make_record("Transporter-1", 121, record_id="t1"),
        make_record("CRS-22", 122, record_id="crs22"),
    )
    rows = make_rows(
        ("2021 Jan 24", "Transporter-1", "Boca Chica"),
        ("2021 Q2", "CRS-22", "LC-39A"),
    )

    plan = plan_reconciliation(
        rows, snapshot, resolver=resolver, error_policy=ErrorPolicy.COLLECT
    )

    assert [i.target_record_id for i in plan.instructions] == ["crs22"]
    assert len(plan.failures) == 1
    failure = plan.failures[0]
    assert isinstance(failure, RowFailure)
    assert failure.record.id == "t1"
    assert failure.row.row_index == 0
    assert isinstance(failure.error, UnknownSiteError)


def test_duplicate_numbers_are_warned_about(
    resolver: LaunchpadResolver, caplog: pytest.LogCaptureFixture
) -> None:
    snapshot = make_snapshot(
        make_record("SXM-7", 121, record_id="sxm-7-a"),
        make_record("SXM-7", 122, record_id="sxm-7-b"),
    )
    rows = make_rows(("2021 Jun 6", "SXM-7", "SLC-40"))

    with caplog.at_level(logging.WARNING):
        plan = plan_reconciliation(rows, snapshot, resolver=resolver)

    assert plan.duplicates == (1,)
    assert [i.target_record_id for i in plan.instructions] == ["sxm-7-a", "sxm-7-b"]
    assert "Duplicate sequence numbers" in caplog.text
    assert "matched several launches" in caplog.text


def test_duplicate_numbers_can_be_rejected(resolver: LaunchpadResolver) -> None:
    snapshot = make_snapshot(
        make_record("SXM-7", 121, record_id="sxm-7-a"),
        make_record("SXM-7", 122, record_id="sxm-7-b"),
    )
    rows = make_rows(("2021 Jun 6", "SXM-7", "SLC-40"))

    with pytest.raises(DuplicateSequenceError) as exc:
        plan_reconciliation(
            rows, snapshot, resolver=resolver, duplicate_policy=DuplicatePolicy.REJECT
        )

    assert exc.value.duplicates == (1,)


def test_record_matching_several_rows_is_tolerated(
    resolver: LaunchpadResolver, caplog: pytest.LogCaptureFixture
) -> None:
    snapshot = make_snapshot(make_record("Crew-2", 121))
    rows = make_rows(
        ("2021 Apr 22", "Crew-2", "LC-39A"),
        ("2021 Apr 23", "Crew-2 backup opportunity", "LC-39A"),
    )

    with caplog.at_level(logging.WARNING):
        plan = plan_reconciliation(rows, snapshot, resolver=resolver)

    assert [i.sequence_number for i in plan.instructions] == [1, 2]
    assert plan.duplicates == ()
    assert "matched several manifest rows" in caplog.text
