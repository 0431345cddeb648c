"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from launchsync.adapters.healthcheck import HttpHeartbeat
from launchsync.adapters.reddit import RedditManifestLoader
from launchsync.adapters.spacex import SpaceXRegistry, SpaceXSiteDirectory
from launchsync.config import get_spacex_config
from launchsync.domain.model import DuplicatePolicy, ErrorPolicy
from launchsync.domain.reconciliation import (
    LaunchpadResolver,
    ReconciliationResult,
    SnapshotSiteDirectory,
    run_reconciliation_pass,
)

if TYPE_CHECKING:
    from launchsync.domain.ports import (
        Heartbeat,
        ManifestLoader,
        RegistryQuery,
        RegistryUpdater,
        SiteDirectory,
    )

log = getLogger(__name__)


def reconcile_manifest(
    *,
    dry_run: bool = False,
    error_policy: ErrorPolicy = ErrorPolicy.ABORT,
    duplicate_policy: DuplicatePolicy = DuplicatePolicy.WARN,
    offline_sites: bool = False,
    query_registry: RegistryQuery | None = None,
    update_registry: RegistryUpdater | None = None,
    load_manifest: ManifestLoader | None = None,
    site_directory: SiteDirectory | None = None,
    heartbeat: Heartbeat | None = None,
) -> ReconciliationResult:
    """Reconcile the launch manifest against the registry using the configured adapters."""

    if query_registry is None or update_registry is None:
        registry = SpaceXRegistry(config=get_spacex_config(require_key=not dry_run))
        query_registry = query_registry or registry.query
        update_registry = update_registry or registry.update

    if site_directory is None:
        site_directory = (
            SnapshotSiteDirectory()
            if offline_sites
            else SpaceXSiteDirectory(config=get_spacex_config(require_key=False))
        )

    log.info(
        "Starting manifest reconciliation: dry_run=%s, errors=%s, duplicates=%s, sites=%s",
        dry_run,
        error_policy,
        duplicate_policy,
        type(site_directory).__name__,
    )

    return run_reconciliation_pass(
        query_registry=query_registry,
        load_manifest=load_manifest or RedditManifestLoader(),
        update_registry=update_registry,
        resolver=LaunchpadResolver(directory=site_directory),
        heartbeat=heartbeat or HttpHeartbeat(),
        error_policy=error_policy,
        duplicate_policy=duplicate_policy,
        dry_run=dry_run,
    )
