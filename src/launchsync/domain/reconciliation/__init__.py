"""Reconciliation engine for the launch manifest.

Layered flow of one pass:
1) read the registry snapshot and the manifest rows
2) match eligible upcoming launches to manifest rows by name
3) parse the matched row's date and resolve its launch site
4) number the row from the manifest order
5) apply the resulting update instructions, then signal the heartbeat
"""

from __future__ import annotations

from .dates import clean_date_text, parse_launch_date
from .driver import ReconciliationPlan, RowFailure, plan_reconciliation
from .launchpads import LAUNCHPAD_LABELS, LaunchpadResolver, SnapshotSiteDirectory
from .matching import matches, partial_match
from .ordering import assign_sequence, derive_base_sequence
from .service import ReconciliationResult, run_reconciliation_pass

__all__ = [
    "LAUNCHPAD_LABELS",
    "LaunchpadResolver",
    "ReconciliationPlan",
    "ReconciliationResult",
    "RowFailure",
    "SnapshotSiteDirectory",
    "assign_sequence",
    "clean_date_text",
    "derive_base_sequence",
    "matches",
    "parse_launch_date",
    "partial_match",
    "plan_reconciliation",
    "run_reconciliation_pass",
]
