#!filepath: caltrunc/core/__init__.py
from .units import AmbiguousPolicy, CalendarUnit
from .context import DEFAULT_CONTEXT, CalendarContext, CalendarFields
from .truncator import (
    CalendarTruncator,
    start_of_date,
    start_of_day,
    start_of_hour,
    start_of_minute,
    start_of_month,
    start_of_second,
    start_of_week,
    start_of_year,
    truncate,
)
from .clock import (
    current_unix_timestamp_millis,
    current_unix_timestamp_seconds,
    now,
    wait_till_next_millis,
    wait_till_next_second,
)
