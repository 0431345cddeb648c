"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_var, require_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .http_resilience import CacheConfig, RateLimit, ResilienceConfig, RetryPolicy
from .logging import configure_logging
from .manifest import ManifestConfig, get_manifest_config
from .monitoring import HealthcheckConfig, get_healthcheck_config
from .spacex import SpaceXConfig, get_spacex_config
from .storage import StorageConfig, get_http_cache_path, get_storage_config

__all__ = [
    "CacheConfig",
    "ConfigurationError",
    "HealthcheckConfig",
    "ManifestConfig",
    "MissingConfigurationError",
    "RateLimit",
    "ResilienceConfig",
    "RetryPolicy",
    "SpaceXConfig",
    "StorageConfig",
    "configure_logging",
    "get_healthcheck_config",
    "get_http_cache_path",
    "get_manifest_config",
    "get_spacex_config",
    "get_storage_config",
    "optional_env_var",
    "require_env_var",
    "require_env_vars",
]
