#!filepath: caltrunc/utils/errors.py
class CalendarError(RuntimeError):
    """Base class for every error raised by caltrunc."""


class InvalidInstant(CalendarError, ValueError):
    """
    Raised when a point in time cannot be decomposed into, or recomposed from,
    calendar fields under a CalendarContext (out of range, DST gap, ambiguous
    wall time under the "raise" policy, unparseable input).
    """


class InvalidCalendarContext(CalendarError, ValueError):
    """
    Raised for an unusable calendar context: unknown timezone key or locale,
    first weekday outside 0..6, unknown ambiguity policy.
    """
