#!filepath: caltrunc/config/__init__.py
from .app_config import AppConfig
from .calendar_config import CalendarConfig
from .log_config import LogConfig
