"""Errors raised while building launchsync configuration from the environment."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


class ConfigurationError(RuntimeError):
    """Raised when the environment cannot configure a reconciliation pass."""


class MissingConfigurationError(ConfigurationError):
    """Raised when required variables (``SPACEX_KEY`` for patching) are unset or blank."""

    def __init__(self, names: Iterable[str]) -> None:
        self.names = tuple(sorted(names))
        super().__init__(f"Missing configuration for: {', '.join(self.names)}")
