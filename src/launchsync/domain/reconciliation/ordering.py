"""Sequence (flight) number recomputation from manifest row order."""

from __future__ import annotations

from typing import TYPE_CHECKING

from launchsync.domain.model import SequenceLedger

from .matching import partial_match

if TYPE_CHECKING:
    from collections.abc import Sequence

    from launchsync.domain.model import RegistryRecord

FIRST_SEQUENCE_NUMBER = 1


def derive_base_sequence(
    completed: Sequence[RegistryRecord],
    first_payload_label: str | None,
) -> int:
    """Return the sequence number of manifest row zero.

    If the latest completed launch is still listed as the first manifest row, row
    zero keeps its number; otherwise the manifest has moved past it and row zero is
    the next number.
    """

    if not completed:
        return FIRST_SEQUENCE_NUMBER
    latest = max(completed, key=lambda record: record.sequence_number)
    if first_payload_label is not None and partial_match(latest.name, first_payload_label):
        return latest.sequence_number
    return latest.sequence_number + 1


def assign_sequence(
    base: int,
    row_index: int,
    ledger: SequenceLedger,
) -> tuple[int, SequenceLedger]:
    """Number the row at ``row_index`` and return it with the extended ledger."""

    if row_index < 0:
        raise ValueError(f"Row index must be non-negative, got {row_index}")
    sequence_number = base + row_index
    return sequence_number, ledger.record(sequence_number)


__all__ = ["FIRST_SEQUENCE_NUMBER", "assign_sequence", "derive_base_sequence"]
