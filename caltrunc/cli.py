#!filepath: caltrunc/cli.py
from typing import Optional

import typer
from pydantic import ValidationError
from rich import print
from rich.markup import escape

from caltrunc import __version__
from caltrunc.config import AppConfig, CalendarConfig
from caltrunc.core import CalendarContext, CalendarTruncator, CalendarUnit, now as clock_now
from caltrunc.utils.datetime_utils import DateTimeUtils
from caltrunc.utils.errors import CalendarError
from caltrunc.utils.logger import Logging

app = typer.Typer(help="caltrunc: truncate instants to calendar units")

# reported in red with exit code 1, without a traceback
USER_ERRORS = (CalendarError, ValidationError, ValueError, OSError)


def _context(
    config: Optional[str],
    tz: Optional[str],
    locale: Optional[str],
    first_weekday: Optional[int],
) -> CalendarContext:
    """Command-line options win over the (optional) config file."""
    cfg = AppConfig.load(config)
    Logging.from_config(cfg.log)

    calendar = cfg.calendar
    updates = {}
    if tz is not None:
        updates["timezone"] = tz
    if locale is not None:
        updates["locale"] = locale
        updates["first_weekday"] = None
    if first_weekday is not None:
        updates["first_weekday"] = first_weekday
    if updates:
        calendar = CalendarConfig.model_validate({**calendar.model_dump(), **updates})
    return CalendarContext.from_config(calendar)


@app.command()
def version():
    print(f"v{__version__}")


@app.command()
def now(
    tz: Optional[str] = typer.Option(None, "--tz", help="IANA timezone key"),
    config: Optional[str] = typer.Option(None, "--config", help="YAML config file"),
):
    """
    Print the current time in the configured timezone.
    """
    try:
        ctx = _context(config, tz, None, None)
    except USER_ERRORS as e:
        print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(code=1)
    print(clock_now(ctx).isoformat())


@app.command()
def truncate(
    value: str,
    unit: CalendarUnit = typer.Option(CalendarUnit.DAY, "--unit", "-u"),
    tz: Optional[str] = typer.Option(None, "--tz", help="IANA timezone key"),
    locale: Optional[str] = typer.Option(None, "--locale", help="locale for the first day of week"),
    first_weekday: Optional[int] = typer.Option(None, "--first-weekday", min=0, max=6),
    config: Optional[str] = typer.Option(None, "--config", help="YAML config file"),
):
    """
    Truncate VALUE (epoch s/ms/us/ns or a date-time string) to the start of UNIT.
    """
    try:
        ctx = _context(config, tz, locale, first_weekday)
        instant = DateTimeUtils.parse(value, ctx.tz)
        result = CalendarTruncator(ctx).truncate(instant, unit)
    except USER_ERRORS as e:
        print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    print(result.isoformat())


if __name__ == "__main__":
    app()

# python -m caltrunc.cli truncate "2023-06-14 15:42:07.250" --unit week --locale en_US
