"""Port for loading the human-edited launch manifest."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from launchsync.domain.model import ManifestRow


@runtime_checkable
class ManifestLoader(Protocol):
    """Callable port returning manifest rows in table order.

    Implementations truncate to ``MANIFEST_ROW_LIMIT`` rows and raise
    ``DocumentStructureError`` when the manifest table cannot be located.
    """

    def __call__(self) -> list[ManifestRow]: ...


__all__ = ["ManifestLoader"]
