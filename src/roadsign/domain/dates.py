"""Calendar helpers shared by the expiry engine and the schedule grid.

Upstream records carry dates either as ISO-8601 strings or as ``date``/
``datetime`` objects; everything is normalized to :class:`datetime.date` here
so the engines never do arithmetic on half-parsed values.
"""

from __future__ import annotations

import re
from datetime import date, datetime

from dateutil.parser import isoparse
from dateutil.relativedelta import relativedelta

from ..exceptions import InvalidDateError, InvalidTimeError

DateLike = date | datetime | str

_TIME_RE = re.compile(r"^(\d{1,2}):(\d{2})(?::\d{2})?$")


def to_date(value: DateLike) -> date:
    """Normalize ``value`` to a calendar date.

    Datetimes keep their own calendar day (no timezone conversion). Strings
    are parsed as ISO-8601; anything else raises :class:`InvalidDateError`.
    """

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise InvalidDateError(value)
        try:
            return isoparse(text).date()
        except (ValueError, OverflowError) as exc:
            raise InvalidDateError(value) from exc
    raise InvalidDateError(value)


def to_moment(value: DateLike) -> datetime | date:
    """Normalize an evaluation instant, keeping time-of-day when present."""

    if isinstance(value, (datetime, date)):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            parsed = isoparse(text)
        except (ValueError, OverflowError) as exc:
            raise InvalidDateError(value) from exc
        if len(text) == 10:
            return parsed.date()
        return parsed
    raise InvalidDateError(value)


def add_years(day: date, years: int) -> date:
    """Advance ``day`` by whole calendar years.

    Feb 29 lands on Feb 28 when the target year is not a leap year.
    """

    return day + relativedelta(years=years)


def wall_clock(moment: datetime) -> datetime:
    """Return ``moment`` as a naive wall-clock reading in its own zone."""

    return moment.replace(tzinfo=None)


def to_minutes(value: str) -> int:
    """Convert an ``HH:mm`` string to minutes after midnight."""

    match = _TIME_RE.match(value.strip()) if isinstance(value, str) else None
    if match is None:
        raise InvalidTimeError(value)
    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 24 or minutes > 59 or (hours == 24 and minutes):
        raise InvalidTimeError(value)
    return hours * 60 + minutes


def format_minutes(total: int) -> str:
    """Render minutes after midnight as ``HH:mm``."""

    hours, minutes = divmod(total, 60)
    return f"{hours:02d}:{minutes:02d}"


__all__ = [
    "DateLike",
    "add_years",
    "format_minutes",
    "to_date",
    "to_minutes",
    "to_moment",
    "wall_clock",
]
