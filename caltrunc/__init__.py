#!filepath: caltrunc/__init__.py

from .utils.logger import Logging, logs
from .utils.errors import CalendarError, InvalidCalendarContext, InvalidInstant
from .utils.datetime_utils import DateTimeUtils
from .core import (
    DEFAULT_CONTEXT,
    AmbiguousPolicy,
    CalendarContext,
    CalendarFields,
    CalendarTruncator,
    CalendarUnit,
    current_unix_timestamp_millis,
    current_unix_timestamp_seconds,
    now,
    start_of_date,
    start_of_day,
    start_of_hour,
    start_of_minute,
    start_of_month,
    start_of_second,
    start_of_week,
    start_of_year,
    truncate,
    wait_till_next_millis,
    wait_till_next_second,
)
from .config import AppConfig

__version__ = "0.1.0"

# alias
datetime_utils = DateTimeUtils

__all__ = [
    "logs", "Logging",
    "CalendarError", "InvalidInstant", "InvalidCalendarContext",
    "datetime_utils", "DateTimeUtils",
    "AppConfig",
    "DEFAULT_CONTEXT", "CalendarContext", "CalendarFields",
    "CalendarUnit", "AmbiguousPolicy", "CalendarTruncator",
    "start_of_second", "start_of_minute", "start_of_hour", "start_of_day",
    "start_of_date", "start_of_month", "start_of_year", "start_of_week",
    "truncate",
    "now", "current_unix_timestamp_millis", "current_unix_timestamp_seconds",
    "wait_till_next_millis", "wait_till_next_second",
]
