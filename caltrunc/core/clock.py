#!filepath: caltrunc/core/clock.py
"""
System clock readers.

The wait helpers sleep towards the next tick in bounded steps instead of
spinning on the clock.
"""
from __future__ import annotations

import time
from datetime import datetime
from typing import Optional

from caltrunc.core.context import DEFAULT_CONTEXT, CalendarContext
from caltrunc.utils.logger import logs

MAX_SLEEP = 0.1


def now(context: Optional[CalendarContext] = None) -> datetime:
    """Current time as an aware datetime in the context timezone."""
    ctx = context if context is not None else DEFAULT_CONTEXT
    return datetime.now(ctx.tz)


def current_unix_timestamp_millis() -> int:
    return time.time_ns() // 1_000_000


def current_unix_timestamp_seconds() -> int:
    return time.time_ns() // 1_000_000_000


def wait_till_next_millis(current_millis: int, max_sleep: float = MAX_SLEEP) -> int:
    """Block until the millisecond clock is past ``current_millis``; return the new reading."""
    nxt = current_unix_timestamp_millis()
    while nxt <= current_millis:
        remaining = (current_millis + 1 - nxt) / 1_000
        time.sleep(min(remaining, max_sleep))
        nxt = current_unix_timestamp_millis()
    return nxt


def wait_till_next_second(current_second: int, max_sleep: float = MAX_SLEEP) -> int:
    """Block until the second clock is past ``current_second``; return the new reading."""
    nxt = current_unix_timestamp_seconds()
    if nxt <= current_second:
        logs.debug(f"[Clock] waiting for second > {current_second} (now {nxt})")
    while nxt <= current_second:
        remaining = ((current_second + 1) * 1_000 - current_unix_timestamp_millis()) / 1_000
        time.sleep(min(max(remaining, 0.0), max_sleep))
        nxt = current_unix_timestamp_seconds()
    return nxt
