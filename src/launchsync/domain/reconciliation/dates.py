"""Date precision parsing for manifest date cells.

Manifest dates are free text such as ``2020 Nov 4 [14:10]``, ``~2021 Q2`` or
``TBD 2021 H2``. Parsing happens in three steps:

1. the tentative flag is read from the raw cell (``TBD``/``TBA`` anywhere),
2. noise words and range suffixes (``/ ...``) are stripped,
3. the cleaned text is matched against an ordered table of date shapes; the first
   shape that matches decides the precision and builds the UTC instant.

Half and quarter shapes come first because their token embeds a digit. Both are
stored at the start of their window: ``Q3`` is July 1st, ``H2`` is the start of
Q3, ``H1`` the start of Q1.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Final
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from launchsync.domain.errors import DateFormatError, UnknownSiteError
from launchsync.domain.model import DatePrecision, ParsedDate

if TYPE_CHECKING:
    from collections.abc import Callable

_TENTATIVE_PATTERN: Final = re.compile(r"tbd|tba", re.IGNORECASE)
# Extend when people add unexpected decorations to manifest dates.
_NOISE_PATTERN: Final = re.compile(r"~|early|mid|late|end|tbd|tba", re.IGNORECASE)
_RANGE_SEPARATOR: Final = "/"

_MONTH_NAMES: Final = (
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
)
_MONTH_TOKEN: Final = r"(?P<month>[a-z]{3,9})"
_YEAR_TOKEN: Final = r"(?P<year>[0-9]{4})"
_DAY_TOKEN: Final = r"(?P<day>[0-9]{1,2})"
_TIME_TOKEN: Final = r"\[?\s*(?P<hour>[0-9]{2}):(?P<minute>[0-9]{2})\s*\]?"


def is_tentative(raw: str) -> bool:
    return _TENTATIVE_PATTERN.search(raw) is not None


def clean_date_text(raw: str) -> str:
    """Strip noise words and keep only the first part of a date range."""

    without_noise = _NOISE_PATTERN.sub(" ", raw)
    return without_noise.split(_RANGE_SEPARATOR)[0].strip()


def _month_number(token: str) -> int:
    lowered = token.lower()
    for number, name in enumerate(_MONTH_NAMES, start=1):
        if name.startswith(lowered):
            return number
    raise ValueError(f"Unknown month name: {token}")


def _year(match: re.Match[str]) -> int:
    return int(match["year"])


def _build_quarter(match: re.Match[str]) -> datetime:
    quarter = int(match["quarter"])
    return datetime(_year(match), 3 * (quarter - 1) + 1, 1, tzinfo=UTC)


def _build_half(match: re.Match[str]) -> datetime:
    # H1 starts with Q1, H2 starts with Q3
    month = 1 if match["half"] == "1" else 7
    return datetime(_year(match), month, 1, tzinfo=UTC)


def _build_hour(match: re.Match[str]) -> datetime:
    return datetime(
        _year(match),
        _month_number(match["month"]),
        int(match["day"]),
        int(match["hour"]),
        int(match["minute"]),
        tzinfo=UTC,
    )


def _build_day(match: re.Match[str]) -> datetime:
    return datetime(_year(match), _month_number(match["month"]), int(match["day"]), tzinfo=UTC)


def _build_month(match: re.Match[str]) -> datetime:
    return datetime(_year(match), _month_number(match["month"]), 1, tzinfo=UTC)


def _build_year(match: re.Match[str]) -> datetime:
    return datetime(_year(match), 1, 1, tzinfo=UTC)


@dataclass(frozen=True, slots=True)
class DateShape:
    """One recognised date layout and how to turn it into a UTC instant."""

    precision: DatePrecision
    pattern: re.Pattern[str]
    build: Callable[[re.Match[str]], datetime]

    def match(self, text: str) -> re.Match[str] | None:
        return self.pattern.fullmatch(text)


def _shape(
    precision: DatePrecision,
    pattern: str,
    build: Callable[[re.Match[str]], datetime],
) -> DateShape:
    return DateShape(
        precision=precision,
        pattern=re.compile(pattern, re.IGNORECASE),
        build=build,
    )


DATE_SHAPES: Final[tuple[DateShape, ...]] = (
    _shape(DatePrecision.QUARTER, rf"{_YEAR_TOKEN}\s*Q(?P<quarter>[1-4])", _build_quarter),
    _shape(DatePrecision.HALF, rf"{_YEAR_TOKEN}\s*H(?P<half>[12])", _build_half),
    _shape(
        DatePrecision.HOUR,
        rf"{_YEAR_TOKEN}\s*{_MONTH_TOKEN}\s*{_DAY_TOKEN}\s*{_TIME_TOKEN}",
        _build_hour,
    ),
    _shape(DatePrecision.DAY, rf"{_YEAR_TOKEN}\s*{_MONTH_TOKEN}\s*{_DAY_TOKEN}", _build_day),
    _shape(DatePrecision.MONTH, rf"{_YEAR_TOKEN}\s*{_MONTH_TOKEN}", _build_month),
    _shape(DatePrecision.YEAR, _YEAR_TOKEN, _build_year),
)


def localize(parsed: ParsedDate, timezone: str) -> ParsedDate:
    """Return ``parsed`` with ``local_time`` rendered in ``timezone``."""

    try:
        zone = ZoneInfo(timezone)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise UnknownSiteError(timezone, reason="Unknown site timezone") from exc
    return replace(parsed, local_time=parsed.instant.astimezone(zone))


def parse_launch_date(raw: str, *, timezone: str = "UTC") -> ParsedDate:
    """Parse a manifest date cell into a UTC instant plus its precision.

    Raises ``DateFormatError`` with the cleaned text when no shape matches, or when
    the matched components do not form a calendar date (``2020 Feb 30``).
    """

    tentative = is_tentative(raw)
    cleaned = clean_date_text(raw)

    for shape in DATE_SHAPES:
        match = shape.match(cleaned)
        if match is None:
            continue
        try:
            instant = shape.build(match)
        except ValueError as exc:
            raise DateFormatError(cleaned, raw=raw) from exc
        parsed = ParsedDate(
            instant=instant,
            precision=shape.precision,
            is_tentative=tentative,
            local_time=instant,
        )
        return localize(parsed, timezone)

    raise DateFormatError(cleaned, raw=raw)


__all__ = [
    "DATE_SHAPES",
    "DateShape",
    "clean_date_text",
    "is_tentative",
    "localize",
    "parse_launch_date",
]
