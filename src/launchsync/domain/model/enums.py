"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class DatePrecision(StrEnum):
    """Coarsest time unit that could be read from a manifest date cell."""

    HOUR = "hour"
    DAY = "day"
    MONTH = "month"
    HALF = "half"
    QUARTER = "quarter"
    YEAR = "year"


class ErrorPolicy(StrEnum):
    """What the driver does when a matched row cannot be evaluated."""

    ABORT = "abort"
    COLLECT = "collect"


class DuplicatePolicy(StrEnum):
    """What the driver does when two rows produce the same sequence number."""

    WARN = "warn"
    REJECT = "reject"
