"""Resolution of AirParif date tokens into calendar dates."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from typing import Any, Callable

from airparif.errors import DateParseError, UnexpectedDate
from airparif.json_access import dump

Clock = Callable[[], date]

ABSOLUTE_DATE_FORMAT = "%d/%m/%Y"

DAY_OFFSETS = {
    "hier": -1,
    "jour": 0,
    "demain": 1,
}


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


def resolve_day_token(token: str, today: Clock = utc_today) -> date:
    """Map ``hier``/``jour``/``demain`` to yesterday, today or tomorrow."""

    offset = DAY_OFFSETS.get(token) if isinstance(token, str) else None
    if offset is None:
        raise UnexpectedDate(token)
    return today() + timedelta(days=offset)


def resolve_json_day(value: Any, today: Clock = utc_today) -> date:
    """Same as :func:`resolve_day_token` for a parsed JSON value.

    Anything but one of the three token strings raises :class:`UnexpectedDate`
    carrying the JSON dump of ``value``.
    """

    if not isinstance(value, str) or value not in DAY_OFFSETS:
        raise UnexpectedDate(dump(value))
    return resolve_day_token(value, today)


def parse_absolute_date(text: str) -> date:
    try:
        return datetime.strptime(text, ABSOLUTE_DATE_FORMAT).date()
    except ValueError as error:
        raise DateParseError(text, error) from error


__all__ = [
    "ABSOLUTE_DATE_FORMAT",
    "Clock",
    "DAY_OFFSETS",
    "parse_absolute_date",
    "resolve_day_token",
    "resolve_json_day",
    "utc_today",
]
