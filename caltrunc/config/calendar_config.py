#!filepath: caltrunc/config/calendar_config.py
from typing import Optional

from pydantic import BaseModel, Field

from caltrunc.core.units import AmbiguousPolicy


class CalendarConfig(BaseModel):
    timezone: str = "UTC"
    # Monday=0 .. Sunday=6; wins over locale when both are set
    first_weekday: Optional[int] = Field(default=None, ge=0, le=6)
    locale: Optional[str] = None
    ambiguous: AmbiguousPolicy = AmbiguousPolicy.FOLD
