"""Port for signalling a completed reconciliation pass."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Heartbeat(Protocol):
    def __call__(self) -> None: ...


__all__ = ["Heartbeat"]
