from __future__ import annotations

import pytest

from launchsync.app import reconcile_manifest
from launchsync.config import MissingConfigurationError
from launchsync.domain.model import (
    ManifestRow,
    RegistrySnapshot,
    SiteIdentity,
    UpdateInstruction,
)
from launchsync.domain.reconciliation import SnapshotSiteDirectory
from launchsync.domain.reconciliation.launchpads import KSC_LC_39A
from tests.helpers.records import make_record, make_rows, make_snapshot


def _rows() -> list[ManifestRow]:
    return make_rows(("2021 Apr 22 [10:11]", "Crew-2", "LC-39A"))


def _snapshot() -> RegistrySnapshot:
    return make_snapshot(
        make_record("Crew-1", 110, upcoming=False),
        make_record("Crew-2", 120, record_id="crew-2"),
    )


def test_reconcile_manifest_wires_injected_ports() -> None:
    applied: list[UpdateInstruction] = []
    pings: list[bool] = []
    directory = SnapshotSiteDirectory(
        sites={KSC_LC_39A: SiteIdentity(canonical_id="pad-39a", timezone_name="America/New_York")}
    )

    result = reconcile_manifest(
        query_registry=_snapshot,
        update_registry=applied.append,
        load_manifest=_rows,
        site_directory=directory,
        heartbeat=lambda: pings.append(True),
    )

    assert [i.target_record_id for i in applied] == ["crew-2"]
    assert applied[0].sequence_number == 111
    assert applied[0].site.canonical_id == "pad-39a"
    assert pings == [True]
    assert result.heartbeat_sent is True


def test_reconcile_manifest_dry_run_skips_patches() -> None:
    applied: list[UpdateInstruction] = []
    pings: list[bool] = []

    result = reconcile_manifest(
        dry_run=True,
        query_registry=_snapshot,
        update_registry=applied.append,
        load_manifest=_rows,
        offline_sites=True,
        heartbeat=lambda: pings.append(True),
    )

    assert applied == []
    assert pings == []
    assert len(result.plan.instructions) == 1


def test_reconcile_manifest_requires_key_for_patching(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SPACEX_KEY", raising=False)

    with pytest.raises(MissingConfigurationError, match="SPACEX_KEY"):
        reconcile_manifest(
            load_manifest=_rows,
            offline_sites=True,
            heartbeat=lambda: None,
        )
