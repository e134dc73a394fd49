#!filepath: caltrunc/core/truncator.py
"""
Truncate an instant down to the start of a calendar unit.

Every coarser unit is computed from the next finer one:

    second -> minute -> hour -> day -> month -> year
                                day -> week

so ``start_of_minute(start_of_second(t)) == start_of_minute(t)`` holds by
construction.

    >>> from datetime import datetime
    >>> from zoneinfo import ZoneInfo
    >>> t = datetime(2023, 6, 14, 15, 42, 7, 250000, tzinfo=ZoneInfo("UTC"))
    >>> start_of_hour(t).isoformat()
    '2023-06-14T15:00:00+00:00'
"""
from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime, timedelta
from typing import Optional, Union

from caltrunc.core.context import DEFAULT_CONTEXT, CalendarContext
from caltrunc.core.units import CalendarUnit
from caltrunc.utils.errors import InvalidInstant


class CalendarTruncator:
    """Stateless truncation under one CalendarContext."""

    def __init__(self, context: Optional[CalendarContext] = None):
        self.context = context if context is not None else DEFAULT_CONTEXT

    def __repr__(self) -> str:
        return f"CalendarTruncator(context={self.context!r})"

    def _reset(self, t: datetime, **values) -> datetime:
        fields = self.context.decompose(t)
        return self.context.compose(replace(fields, **values))

    # ================================================================
    # cascade
    # ================================================================
    def start_of_second(self, t: datetime) -> datetime:
        return self._reset(t, microsecond=0)

    def start_of_minute(self, t: datetime) -> datetime:
        return self._reset(self.start_of_second(t), second=0)

    def start_of_hour(self, t: datetime) -> datetime:
        return self._reset(self.start_of_minute(t), minute=0)

    def start_of_day(self, t: datetime) -> datetime:
        return self._reset(self.start_of_hour(t), hour=0)

    def start_of_date(self, t: datetime) -> datetime:
        """Alias of start_of_day."""
        return self.start_of_day(t)

    def start_of_month(self, t: datetime) -> datetime:
        return self._reset(self.start_of_day(t), day=1)

    def start_of_year(self, t: datetime) -> datetime:
        return self._reset(self.start_of_month(t), month=1)

    def start_of_week(self, t: datetime) -> datetime:
        """
        Step back from the day of ``t``, one calendar day at a time, until the
        weekday is the context's first day of week (at most 6 steps), then
        return that day's start.

        Only the midnight of the resulting day is composed, so a skipped
        midnight on a day passed over does not matter.
        """
        ctx = self.context
        fields = ctx.decompose(self.start_of_hour(t))
        day = date(fields.year, fields.month, fields.day)
        for _ in range(7):
            if day.weekday() == ctx.first_weekday:
                break
            try:
                day -= timedelta(days=1)
            except OverflowError as e:
                raise InvalidInstant(f"week start of {t!r} is out of range") from e
        else:
            raise InvalidInstant(f"no weekday {ctx.first_weekday} within a week before {t!r}")

        if day != date(fields.year, fields.month, fields.day):
            fields = replace(fields, fold=0)
        return ctx.compose(
            replace(fields, year=day.year, month=day.month, day=day.day, weekday=day.weekday(), hour=0)
        )

    # ================================================================
    # dispatch
    # ================================================================
    def truncate(self, t: datetime, unit: Union[CalendarUnit, str]) -> datetime:
        method = getattr(self, _METHODS[CalendarUnit(unit)])
        return method(t)


_METHODS = {
    CalendarUnit.SECOND: "start_of_second",
    CalendarUnit.MINUTE: "start_of_minute",
    CalendarUnit.HOUR: "start_of_hour",
    CalendarUnit.DAY: "start_of_day",
    CalendarUnit.MONTH: "start_of_month",
    CalendarUnit.YEAR: "start_of_year",
    CalendarUnit.WEEK: "start_of_week",
}

_default_truncator = CalendarTruncator()


def _truncator(context: Optional[CalendarContext]) -> CalendarTruncator:
    if context is None:
        return _default_truncator
    return CalendarTruncator(context)


# ================================================================
# module-level helpers (default context: UTC, weeks start on Monday)
# ================================================================
def start_of_second(t: datetime, context: Optional[CalendarContext] = None) -> datetime:
    return _truncator(context).start_of_second(t)


def start_of_minute(t: datetime, context: Optional[CalendarContext] = None) -> datetime:
    return _truncator(context).start_of_minute(t)


def start_of_hour(t: datetime, context: Optional[CalendarContext] = None) -> datetime:
    return _truncator(context).start_of_hour(t)


def start_of_day(t: datetime, context: Optional[CalendarContext] = None) -> datetime:
    return _truncator(context).start_of_day(t)


start_of_date = start_of_day


def start_of_month(t: datetime, context: Optional[CalendarContext] = None) -> datetime:
    return _truncator(context).start_of_month(t)


def start_of_year(t: datetime, context: Optional[CalendarContext] = None) -> datetime:
    return _truncator(context).start_of_year(t)


def start_of_week(t: datetime, context: Optional[CalendarContext] = None) -> datetime:
    return _truncator(context).start_of_week(t)


def truncate(
    t: datetime,
    unit: Union[CalendarUnit, str],
    context: Optional[CalendarContext] = None,
) -> datetime:
    """Dispatch on ``unit``; an unknown unit name raises ValueError."""
    return _truncator(context).truncate(t, unit)
