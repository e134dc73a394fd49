# tests/conftest.py
from __future__ import annotations

import calendar
from datetime import datetime
from zoneinfo import ZoneInfo

import pytest
from loguru import logger

from caltrunc import CalendarContext, CalendarTruncator


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)
    yield


@pytest.fixture(autouse=True)
def _clear_caltrunc_env(monkeypatch):
    for key in ("CALTRUNC_TIMEZONE", "CALTRUNC_LOCALE", "CALTRUNC_FIRST_WEEKDAY"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def utc():
    return ZoneInfo("UTC")


@pytest.fixture
def sunday_context():
    """UTC, weeks start on Sunday."""
    return CalendarContext.of("UTC", first_weekday=calendar.SUNDAY)


@pytest.fixture
def sunday_truncator(sunday_context):
    return CalendarTruncator(sunday_context)


@pytest.fixture
def wednesday_afternoon(utc):
    """Wednesday 2023-06-14 15:42:07.250"""
    return datetime(2023, 6, 14, 15, 42, 7, 250000, tzinfo=utc)


@pytest.fixture(
    params=[
        ("UTC", calendar.MONDAY),
        ("America/New_York", calendar.SUNDAY),
        ("Europe/Berlin", calendar.MONDAY),
        ("Asia/Kolkata", calendar.SATURDAY),
        ("Australia/Lord_Howe", calendar.WEDNESDAY),
    ],
    ids=lambda p: f"{p[0]}-{calendar.day_abbr[p[1]]}",
)
def context(request):
    tz_key, first_weekday = request.param
    return CalendarContext.of(tz_key, first_weekday=first_weekday)


@pytest.fixture
def sample_instants():
    """Instants spread over the year, including DST-adjacent days and leap day."""
    utc = ZoneInfo("UTC")
    return [
        datetime(2023, 6, 14, 15, 42, 7, 250000, tzinfo=utc),
        datetime(2024, 2, 29, 23, 59, 59, 999999, tzinfo=utc),
        datetime(2024, 1, 1, 0, 0, 0, tzinfo=utc),
        datetime(2023, 3, 26, 12, 30, 0, 1, tzinfo=utc),
        datetime(2023, 11, 5, 18, 15, 45, 500000, tzinfo=utc),
        datetime(2023, 12, 31, 23, 0, 0, tzinfo=utc),
        datetime(2000, 7, 4, 4, 4, 4, 4, tzinfo=utc),
    ]
