"""Formatting of points in time."""

from __future__ import annotations

from datetime import datetime, timezone, tzinfo
from zoneinfo import ZoneInfo


def _as_utc(instant: datetime | float | int) -> datetime:
    if isinstance(instant, datetime):
        return instant if instant.tzinfo is not None else instant.replace(tzinfo=timezone.utc)
    return datetime.fromtimestamp(float(instant), tz=timezone.utc)


def format_instant(instant: datetime | float | int, pattern: str, zone: str | tzinfo | None = None) -> str:
    """Render ``instant`` with a ``strftime`` ``pattern`` in ``zone``.

    ``zone`` is an IANA name or a ``tzinfo``; the local system zone is used
    when omitted. Naive datetimes are read as UTC and numbers as epoch
    seconds.
    """

    moment = _as_utc(instant)
    if zone is None:
        local = moment.astimezone()
    else:
        local = moment.astimezone(ZoneInfo(zone) if isinstance(zone, str) else zone)
    return local.strftime(pattern)
