"""Tests for the date utilities."""

from datetime import datetime, timezone

import pytest

from jira_dashboard.utils.date import (
    INVALID_DATE,
    format_locale_date,
    format_locale_datetime,
    parse_date,
)


def test_parse_date_iso():
    assert parse_date("2024-03-09T08:07:06") == datetime(2024, 3, 9, 8, 7, 6)


def test_parse_date_with_offset():
    parsed = parse_date("2024-03-09T08:07:06.000+0000")
    assert parsed == datetime(2024, 3, 9, 8, 7, 6, tzinfo=timezone.utc)


@pytest.mark.parametrize("value", [1704067200000, "1704067200000", 1704067200000.0])
def test_parse_date_epoch_millis(value):
    assert parse_date(value) == datetime(2024, 1, 1, tzinfo=timezone.utc)


def test_parse_date_year_only_string_is_a_year():
    assert parse_date("2024") == datetime(2024, 1, 1)
    assert format_locale_date("2024") == "1/1/2024"


def test_parse_date_compact_date_string():
    assert parse_date("20240309") == datetime(2024, 3, 9)


def test_parse_date_empty():
    assert parse_date(None) is None
    assert parse_date("") is None


@pytest.mark.parametrize("value", ["yesterday-ish", True])
def test_parse_date_invalid(value):
    with pytest.raises(ValueError):
        parse_date(value)


def test_format_locale_date():
    assert format_locale_date("2024-12-31T23:59:59") == "12/31/2024"
    assert format_locale_date("garbage") == INVALID_DATE


def test_format_locale_datetime():
    assert format_locale_datetime("2024-07-04T12:30:00") == "7/4/2024, 12:30:00 PM"
    assert format_locale_datetime("2024-07-04T09:05:03") == "7/4/2024, 9:05:03 AM"
    assert format_locale_datetime("") == INVALID_DATE
