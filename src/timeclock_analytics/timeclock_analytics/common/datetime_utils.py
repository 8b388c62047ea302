from __future__ import annotations

import re
from datetime import date, datetime, time
from typing import Optional

# DD-MM-YYYY HH:MM, used by text logs and per-event HTML rows.
_DASH_DATETIME = re.compile(r"(\d{2})-(\d{2})-(\d{4}) (\d{2}):(\d{2})", re.ASCII)
# DD/MM/YYYY, used by daily-summary HTML rows.
_SLASH_DATE = re.compile(r"(\d{2})/(\d{2})/(\d{4})", re.ASCII)
_CLOCK_TIME = re.compile(r"(\d{2}):(\d{2})", re.ASCII)


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_clock_time(value: str) -> time:
    """Parse HH:MM string into time."""
    return datetime.strptime(value.strip(), "%H:%M").time()


def parse_dash_datetime(value: str) -> Optional[datetime]:
    """Parse ``DD-MM-YYYY HH:MM``; None when the text does not match."""
    m = _DASH_DATETIME.fullmatch(value.strip())
    if not m:
        return None
    day, month, year, hours, minutes = (int(g) for g in m.groups())
    try:
        return datetime(year, month, day, hours, minutes)
    except ValueError:
        return None


def parse_slash_date_time(date_text: str, time_text: str) -> Optional[datetime]:
    """Combine a ``DD/MM/YYYY`` date cell with a ``HH:MM`` time cell."""
    dm = _SLASH_DATE.fullmatch(date_text.strip())
    tm = _CLOCK_TIME.fullmatch(time_text.strip())
    if not dm or not tm:
        return None
    day, month, year = (int(g) for g in dm.groups())
    hours, minutes = (int(g) for g in tm.groups())
    try:
        return datetime(year, month, day, hours, minutes)
    except ValueError:
        return None


def minutes_of_day(value: datetime | time) -> int:
    return value.hour * 60 + value.minute


def format_clock_time(value: Optional[time | datetime]) -> Optional[str]:
    if value is None:
        return None
    return value.strftime("%H:%M")
