#!filepath: caltrunc/config/app_config.py
import os

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel

from .log_config import LogConfig
from .calendar_config import CalendarConfig
from caltrunc.utils.logger import logs

# environment variable -> calendar field
ENV_OVERRIDES = {
    "CALTRUNC_TIMEZONE": "timezone",
    "CALTRUNC_LOCALE": "locale",
    "CALTRUNC_FIRST_WEEKDAY": "first_weekday",
}


def project_root() -> str:
    """
    caltrunc/config/app_config.py -> caltrunc/config -> caltrunc -> project_root
    """
    return os.path.abspath(os.path.join(os.path.dirname(__file__), "../../"))


def default_config_path() -> str:
    return os.path.join(os.path.dirname(os.path.abspath(__file__)), "base.yml")


class AppConfig(BaseModel):
    log: LogConfig = LogConfig()
    calendar: CalendarConfig = CalendarConfig()

    @classmethod
    def load(cls, path: str | None = None) -> "AppConfig":
        """
        Load YAML config + .env
        - default: the packaged caltrunc/config/base.yml
        - CALTRUNC_* environment variables override the calendar section
        """
        load_dotenv(os.path.join(project_root(), ".env"))

        if path is None:
            path = default_config_path()

        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        if not isinstance(raw, dict):
            raise ValueError(f"Config file must contain a mapping, got {type(raw).__name__}: {path}")

        calendar = raw.get("calendar") or {}
        if not isinstance(calendar, dict):
            raise ValueError(f"'calendar' section must be a mapping, got {type(calendar).__name__}: {path}")

        calendar = dict(calendar)
        for env_key, field_name in ENV_OVERRIDES.items():
            value = os.getenv(env_key)
            if value:
                calendar[field_name] = value
        raw["calendar"] = calendar

        cfg = cls(**raw)
        logs.debug(f"[AppConfig] loaded {path} calendar={cfg.calendar.model_dump()}")
        return cfg
