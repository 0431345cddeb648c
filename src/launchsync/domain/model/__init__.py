"""Domain model for manifest reconciliation."""

from __future__ import annotations

from .enums import DatePrecision, DuplicatePolicy, ErrorPolicy
from .records import (
    MANIFEST_ROW_LIMIT,
    ManifestRow,
    ParsedDate,
    RegistryRecord,
    RegistrySnapshot,
    SequenceLedger,
    SiteIdentity,
    UpdateInstruction,
)

__all__ = [
    "MANIFEST_ROW_LIMIT",
    "DatePrecision",
    "DuplicatePolicy",
    "ErrorPolicy",
    "ManifestRow",
    "ParsedDate",
    "RegistryRecord",
    "RegistrySnapshot",
    "SequenceLedger",
    "SiteIdentity",
    "UpdateInstruction",
]
