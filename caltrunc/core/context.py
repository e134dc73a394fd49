#!filepath: caltrunc/core/context.py
"""
CalendarContext: the timezone and week rules used to turn an instant into
calendar fields and back.

Instants are timezone-aware ``datetime`` objects. A naive datetime is read as
wall time in the context timezone.
"""
from __future__ import annotations

import calendar
from dataclasses import dataclass, field, replace
from datetime import date, datetime, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from babel import Locale, UnknownLocaleError

from caltrunc.core.units import AmbiguousPolicy
from caltrunc.utils.errors import InvalidCalendarContext, InvalidInstant
from caltrunc.utils.logger import logs

UTC = ZoneInfo("UTC")


@dataclass(frozen=True)
class CalendarFields:
    """Decomposed wall-clock fields. weekday: Monday=0 .. Sunday=6."""

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    microsecond: int
    weekday: int
    fold: int = 0


@dataclass(frozen=True)
class CalendarContext:
    tz: tzinfo = UTC
    first_weekday: int = calendar.MONDAY
    ambiguous: AmbiguousPolicy = AmbiguousPolicy.FOLD
    name: str = field(default="", compare=False)

    def __post_init__(self):
        if not isinstance(self.tz, tzinfo):
            raise InvalidCalendarContext(f"tz must be a tzinfo, got {type(self.tz).__name__}")
        if isinstance(self.first_weekday, bool) or not isinstance(self.first_weekday, int):
            raise InvalidCalendarContext(f"first_weekday must be an int, got {self.first_weekday!r}")
        if not 0 <= self.first_weekday <= 6:
            raise InvalidCalendarContext(f"first_weekday out of range 0..6: {self.first_weekday}")
        try:
            policy = AmbiguousPolicy(self.ambiguous)
        except ValueError:
            raise InvalidCalendarContext(f"unknown ambiguous policy: {self.ambiguous!r}") from None
        # frozen dataclass: normalise the policy in place
        object.__setattr__(self, "ambiguous", policy)
        if not self.name:
            object.__setattr__(self, "name", str(self.tz))

    # ================================================================
    # constructors
    # ================================================================
    @classmethod
    def of(
        cls,
        timezone_key: str = "UTC",
        first_weekday: int = calendar.MONDAY,
        ambiguous: AmbiguousPolicy | str = AmbiguousPolicy.FOLD,
    ) -> CalendarContext:
        """Context for an IANA timezone key, e.g. ``CalendarContext.of("Europe/Paris")``."""
        return cls(
            tz=_zone(timezone_key),
            first_weekday=first_weekday,
            ambiguous=ambiguous,
            name=timezone_key,
        )

    @classmethod
    def for_locale(
        cls,
        locale: str,
        timezone_key: str = "UTC",
        ambiguous: AmbiguousPolicy | str = AmbiguousPolicy.FOLD,
    ) -> CalendarContext:
        """
        First day of week from CLDR data for ``locale`` ("en_US" -> Sunday,
        "de_DE" -> Monday). Both "_" and "-" separators are accepted.
        """
        try:
            loc = Locale.parse(locale.replace("-", "_"))
        except (UnknownLocaleError, ValueError) as e:
            logs.debug(f"[CalendarContext] unknown locale {locale!r}: {e}")
            raise InvalidCalendarContext(f"unknown locale: {locale!r}") from e

        return cls.of(timezone_key, first_weekday=loc.first_week_day, ambiguous=ambiguous)

    @classmethod
    def from_config(cls, cfg) -> CalendarContext:
        """Build from a CalendarConfig. An explicit first_weekday wins over the locale."""
        if cfg.first_weekday is not None:
            return cls.of(cfg.timezone, first_weekday=cfg.first_weekday, ambiguous=cfg.ambiguous)
        if cfg.locale:
            return cls.for_locale(cfg.locale, cfg.timezone, ambiguous=cfg.ambiguous)
        return cls.of(cfg.timezone, ambiguous=cfg.ambiguous)

    # ================================================================
    # field decomposition / recomposition
    # ================================================================
    def localize(self, t: datetime) -> datetime:
        """Express ``t`` in the context timezone."""
        if not isinstance(t, datetime):
            raise TypeError(f"expected datetime, got {type(t).__name__}")
        if t.tzinfo is None:
            return t.replace(tzinfo=self.tz)
        try:
            return t.astimezone(self.tz)
        except (OverflowError, ValueError) as e:
            logs.debug(f"[CalendarContext] cannot express {t!r} in {self.name}: {e}")
            raise InvalidInstant(f"{t!r} is outside the range of {self.name}") from e

    def decompose(self, t: datetime) -> CalendarFields:
        local = self.localize(t)
        return CalendarFields(
            year=local.year,
            month=local.month,
            day=local.day,
            hour=local.hour,
            minute=local.minute,
            second=local.second,
            microsecond=local.microsecond,
            weekday=local.weekday(),
            fold=local.fold,
        )

    def compose(self, fields: CalendarFields) -> datetime:
        """
        Rebuild an aware datetime from wall-clock fields.

        Raises InvalidInstant for impossible fields, for wall times skipped by
        a DST transition, and for repeated wall times under AmbiguousPolicy.RAISE.
        """
        try:
            wall = datetime(
                fields.year,
                fields.month,
                fields.day,
                fields.hour,
                fields.minute,
                fields.second,
                fields.microsecond,
                tzinfo=self.tz,
                fold=fields.fold,
            )
            back = wall.astimezone(timezone.utc).astimezone(self.tz)
        except (OverflowError, ValueError) as e:
            logs.debug(f"[CalendarContext] cannot compose {fields} in {self.name}: {e}")
            raise InvalidInstant(f"invalid calendar fields for {self.name}: {fields}") from e

        # naive comparison: aware datetimes sharing a tzinfo ignore the offset
        if back.replace(tzinfo=None) != wall.replace(tzinfo=None):
            logs.debug(f"[CalendarContext] {wall.replace(tzinfo=None)} skipped in {self.name}")
            raise InvalidInstant(
                f"{wall.replace(tzinfo=None).isoformat()} does not exist in {self.name}"
            )

        if wall.replace(fold=1 - wall.fold).utcoffset() == wall.utcoffset():
            return wall.replace(fold=0)

        if self.ambiguous is AmbiguousPolicy.RAISE:
            logs.debug(f"[CalendarContext] {wall.replace(tzinfo=None)} ambiguous in {self.name}")
            raise InvalidInstant(
                f"{wall.replace(tzinfo=None).isoformat()} is ambiguous in {self.name}"
            )
        return wall

    # ================================================================
    # calendar arithmetic
    # ================================================================
    def add_days(self, t: datetime, delta: int) -> datetime:
        """Move ``delta`` calendar days, keeping the wall-clock time."""
        f = self.decompose(t)
        try:
            d = date(f.year, f.month, f.day) + timedelta(days=delta)
        except OverflowError as e:
            raise InvalidInstant(f"{t!r} {delta:+d} days is out of range") from e

        return self.compose(
            replace(f, year=d.year, month=d.month, day=d.day, weekday=d.weekday(), fold=0)
        )

    def weekday(self, t: datetime) -> int:
        return self.localize(t).weekday()


def _zone(key: str) -> ZoneInfo:
    try:
        return ZoneInfo(key)
    except (ZoneInfoNotFoundError, ValueError, TypeError, OSError) as e:
        raise InvalidCalendarContext(f"unknown timezone: {key!r}") from e


DEFAULT_CONTEXT = CalendarContext()
