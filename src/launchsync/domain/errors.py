"""Errors raised by a reconciliation pass.

Every error here is fatal to the pass that raised it. Messages quote the offending
manifest text so that formatting drift can be diagnosed from the log alone.
"""

from __future__ import annotations


class ReconciliationError(RuntimeError):
    """Base class for reconciliation failures."""


class DocumentStructureError(ReconciliationError):
    """Raised when the manifest table is missing or has an unexpected shape."""


class DateFormatError(ReconciliationError):
    """Raised when no known date pattern matches a manifest date cell."""

    def __init__(self, cleaned: str, *, raw: str | None = None) -> None:
        message = f"No date match: {cleaned!r}"
        if raw is not None and raw != cleaned:
            message += f" (raw cell {raw!r})"
        super().__init__(message)
        self.cleaned = cleaned
        self.raw = raw


class UnknownSiteError(ReconciliationError):
    """Raised when a launch site label is outside the known label set."""

    def __init__(self, label: str, *, reason: str = "No launchpad match") -> None:
        super().__init__(f"{reason}: {label!r}")
        self.label = label


class RegistryError(ReconciliationError):
    """Raised when querying or patching the launch registry fails."""


class DuplicateSequenceError(ReconciliationError):
    """Raised when one pass assigns the same sequence number to several rows."""

    def __init__(self, duplicates: tuple[int, ...]) -> None:
        numbers = ", ".join(str(number) for number in duplicates)
        super().__init__(f"Duplicate sequence numbers assigned: {numbers}")
        self.duplicates = duplicates
