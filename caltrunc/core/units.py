#!filepath: caltrunc/core/units.py
from enum import Enum


class CalendarUnit(str, Enum):
    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    MONTH = "month"
    YEAR = "year"
    WEEK = "week"


class AmbiguousPolicy(str, Enum):
    """
    What compose() does with a wall time that occurs twice (DST fall-back):
    - FOLD:  keep the occurrence carried by the decomposed fields
    - RAISE: refuse it with InvalidInstant
    """

    FOLD = "fold"
    RAISE = "raise"
