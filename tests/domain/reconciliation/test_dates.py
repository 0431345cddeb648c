from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from launchsync.domain.errors import DateFormatError, UnknownSiteError
from launchsync.domain.model import DatePrecision
from launchsync.domain.reconciliation import clean_date_text, parse_launch_date
from launchsync.domain.reconciliation.dates import is_tentative


@pytest.mark.parametrize(
    ("raw", "precision", "expected"),
    [
        ("2020 Nov 4 [14:10]", DatePrecision.HOUR, datetime(2020, 11, 4, 14, 10, tzinfo=UTC)),
        ("2020 Nov 4 14:10", DatePrecision.HOUR, datetime(2020, 11, 4, 14, 10, tzinfo=UTC)),
        ("2020 Nov 4", DatePrecision.DAY, datetime(2020, 11, 4, tzinfo=UTC)),
        ("2020 November 4", DatePrecision.DAY, datetime(2020, 11, 4, tzinfo=UTC)),
        ("2021 Mar", DatePrecision.MONTH, datetime(2021, 3, 1, tzinfo=UTC)),
        ("2021 Q2", DatePrecision.QUARTER, datetime(2021, 4, 1, tzinfo=UTC)),
        ("2020 Q4", DatePrecision.QUARTER, datetime(2020, 10, 1, tzinfo=UTC)),
        ("2021 H1", DatePrecision.HALF, datetime(2021, 1, 1, tzinfo=UTC)),
        ("2021 H2", DatePrecision.HALF, datetime(2021, 7, 1, tzinfo=UTC)),
        ("2022", DatePrecision.YEAR, datetime(2022, 1, 1, tzinfo=UTC)),
    ],
)
def test_parse_launch_date_recognises_each_shape(
    raw: str, precision: DatePrecision, expected: datetime
) -> None:
    parsed = parse_launch_date(raw)

    assert parsed.precision is precision
    assert parsed.instant == expected
    assert parsed.is_tentative is False


def test_year_precision_still_yields_an_instant() -> None:
    parsed = parse_launch_date("2022")

    assert parsed.precision is DatePrecision.YEAR
    assert parsed.instant.tzinfo is not None
    assert parsed.local_time == parsed.instant


@pytest.mark.parametrize(
    "raw",
    ["2020 Nov 4 ~", "~2020 Nov 4", "early 2020 Nov 4", "2020 Nov 4 / Nov 5", "Late 2020 Nov 4"],
)
def test_noise_and_ranges_do_not_change_the_result(raw: str) -> None:
    assert parse_launch_date(raw) == parse_launch_date("2020 Nov 4")


def test_tentative_flag_is_read_from_raw_cell() -> None:
    parsed = parse_launch_date("TBD 2021 H2")

    assert parsed.is_tentative is True
    assert parsed.precision is DatePrecision.HALF
    assert parsed.instant == datetime(2021, 7, 1, tzinfo=UTC)


def test_tba_suffix_marks_month_as_tentative() -> None:
    parsed = parse_launch_date("2021 Mar TBA")

    assert parsed.is_tentative is True
    assert parsed.precision is DatePrecision.MONTH


def test_clean_date_text_strips_noise_words() -> None:
    assert clean_date_text("Mid 2021 Q2") == "2021 Q2"
    assert clean_date_text("2020 Dec 6 / Dec 7") == "2020 Dec 6"
    assert is_tentative("2021 tbd")
    assert not is_tentative("2021 Q3")


def test_local_time_uses_site_timezone() -> None:
    parsed = parse_launch_date("2020 Nov 4 [14:10]", timezone="America/New_York")

    assert parsed.instant == datetime(2020, 11, 4, 14, 10, tzinfo=UTC)
    assert parsed.local_time.utcoffset() == timedelta(hours=-5)
    assert parsed.local_time.hour == 9
    assert parsed.local_time == parsed.instant


@pytest.mark.parametrize("raw", ["soon", "2020 Foo 4", "NET spring", ""])
def test_unrecognised_dates_raise_with_cleaned_text(raw: str) -> None:
    with pytest.raises(DateFormatError) as exc:
        parse_launch_date(raw)

    assert exc.value.cleaned == clean_date_text(raw)


def test_impossible_calendar_date_raises() -> None:
    with pytest.raises(DateFormatError) as exc:
        parse_launch_date("2020 Feb 30")

    assert "2020 Feb 30" in str(exc.value)


def test_unknown_timezone_is_reported_as_site_error() -> None:
    with pytest.raises(UnknownSiteError):
        parse_launch_date("2020 Nov 4", timezone="Mars/Jezero")
