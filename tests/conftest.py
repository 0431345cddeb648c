from __future__ import annotations

import pytest

from launchsync.config.http_resilience import ResilienceConfig
from launchsync.config.spacex import SpaceXConfig
from launchsync.domain.reconciliation import LaunchpadResolver, SnapshotSiteDirectory

SPACEX_TEST_URL = "https://registry.test/v4"


@pytest.fixture(autouse=True)
def isolated_data_dir(
    monkeypatch: pytest.MonkeyPatch, tmp_path_factory: pytest.TempPathFactory
) -> None:
    monkeypatch.setenv("LAUNCHSYNC_DATA_DIR", str(tmp_path_factory.mktemp("launchsync-data")))


@pytest.fixture
def resolver() -> LaunchpadResolver:
    return LaunchpadResolver(directory=SnapshotSiteDirectory())


@pytest.fixture
def spacex_config() -> SpaceXConfig:
    return SpaceXConfig(
        api_key="test-key",
        resilience=ResilienceConfig(name="spacex", base_url=SPACEX_TEST_URL),
        directory_resilience=ResilienceConfig(name="spacex-launchpads", base_url=SPACEX_TEST_URL),
    )
