#!filepath: caltrunc/utils/datetime_utils.py
from __future__ import annotations

from datetime import datetime, timedelta, tzinfo
from typing import Optional, Union
from zoneinfo import ZoneInfo

from caltrunc.utils.errors import InvalidInstant


class DateTimeUtils:
    """Turn loosely typed time values into aware datetimes."""

    UTC = ZoneInfo("UTC")
    EPOCH = datetime(1970, 1, 1, tzinfo=UTC)

    # digits of an epoch integer -> microseconds per unit
    INT_SCALES = {
        10: 1_000_000,   # s
        13: 1_000,       # ms
        16: 1,           # us
    }
    NS_DIGITS = 19

    STR_FORMATS = [
        "%Y-%m-%d %H:%M:%S.%f",
        "%Y-%m-%d %H:%M:%S",
        "%Y/%m/%d %H:%M:%S.%f",
        "%Y/%m/%d %H:%M:%S",
        "%Y%m%d%H%M%S",
        "%Y-%m-%d",
        "%Y/%m/%d",
    ]

    # ================================================================
    # parse() accepts datetime / epoch int / float seconds / string
    # ================================================================
    @classmethod
    def parse(cls, ts: Union[int, float, str, datetime], tz: Optional[tzinfo] = None) -> datetime:
        """
        Naive values are read as wall time in ``tz`` (default UTC); aware
        values and epoch numbers are converted to ``tz``.

        >>> DateTimeUtils.parse(1686757327250).isoformat()
        '2023-06-14T15:42:07.250000+00:00'
        """
        tz = tz or cls.UTC

        if isinstance(ts, datetime):
            return ts.astimezone(tz) if ts.tzinfo else ts.replace(tzinfo=tz)

        if isinstance(ts, bool):
            raise TypeError(f"unsupported time type: {type(ts)}")

        if isinstance(ts, int):
            return cls._from_epoch_int(ts, tz)

        if isinstance(ts, float):
            try:
                return datetime.fromtimestamp(ts, tz)
            except (OverflowError, OSError, ValueError) as e:
                raise InvalidInstant(f"epoch seconds out of range: {ts}") from e

        if isinstance(ts, str):
            return cls._from_string(ts.strip(), tz)

        raise TypeError(f"unsupported time type: {type(ts)}")

    @classmethod
    def _from_epoch_int(cls, ts: int, tz: tzinfo) -> datetime:
        digits = len(str(abs(ts)))
        if digits == cls.NS_DIGITS:
            micros = ts // 1_000
        elif digits in cls.INT_SCALES:
            micros = ts * cls.INT_SCALES[digits]
        else:
            raise InvalidInstant(f"unrecognised integer timestamp: {ts}")

        try:
            return (cls.EPOCH + timedelta(microseconds=micros)).astimezone(tz)
        except OverflowError as e:
            raise InvalidInstant(f"integer timestamp out of range: {ts}") from e

    @classmethod
    def _from_string(cls, s: str, tz: tzinfo) -> datetime:
        # epoch digits given as text (e.g. from the command line); checked first
        # because "%Y%m%d%H%M%S" also matches some 10-digit strings
        if s.isdigit() and (len(s) in cls.INT_SCALES or len(s) == cls.NS_DIGITS):
            return cls._from_epoch_int(int(s), tz)

        for fmt in cls.STR_FORMATS:
            try:
                return datetime.strptime(s, fmt).replace(tzinfo=tz)
            except ValueError:
                pass

        # ISO 8601, optionally with an offset or a Z suffix
        iso = s[:-1] + "+00:00" if s.endswith(("Z", "z")) else s
        try:
            parsed = datetime.fromisoformat(iso)
        except ValueError:
            raise InvalidInstant(f"cannot parse time string: {s!r}") from None
        return cls.parse(parsed, tz)
