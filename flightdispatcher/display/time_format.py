"""Mini README: Render UTC instants for the departures table.

Structure:
    * TimeMode - local (device), airport (airport zone) or zulu (UTC).
    * resolve_zone - turn an IANA name or "+05:30" token into a tzinfo.
    * zone_from_local_time - derive a zone token from a feed local time.
    * format_time - the table's time cell ("Feb 23, 09:10 PM", "Feb 23, 21:10Z").
    * minutes_to_hmm / day_night_icon - smaller cell helpers.

An airport zone that cannot be resolved silently falls back to the device
zone. ``None`` instants render as ``PLACEHOLDER``.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone, tzinfo
from enum import Enum
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

PLACEHOLDER = "—"
SUN = "☀️"
MOON = "\U0001f319"
MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

_OFFSET_TOKEN = re.compile(r"^([+-])(\d{2}):(\d{2})$")
_TRAILING_OFFSET = re.compile(r"([+-])(\d{2}):(\d{2})$")


class TimeMode(str, Enum):
    """Clock used to render table times."""

    LOCAL = "local"
    AIRPORT = "airport"
    ZULU = "zulu"

    @classmethod
    def from_str(cls, value: str) -> "TimeMode":
        """Coerce arbitrary casing into a valid mode."""

        try:
            return cls(value.strip().lower())
        except (ValueError, AttributeError) as error:
            raise ValueError(f"Unsupported time mode: {value}") from error


def resolve_zone(token: Optional[str]) -> Optional[tzinfo]:
    """Return a tzinfo for an IANA name or ``±HH:MM`` token, else ``None``."""

    if not token or not token.strip():
        return None
    token = token.strip()
    match = _OFFSET_TOKEN.match(token)
    if match:
        sign, hours, minutes = match.groups()
        offset = timedelta(hours=int(hours), minutes=int(minutes))
        return timezone(-offset if sign == "-" else offset)
    if token.upper() in {"UTC", "Z"}:
        return timezone.utc
    try:
        return ZoneInfo(token)
    except (ZoneInfoNotFoundError, ValueError):
        LOGGER.debug("Unknown timezone %r; using device zone", token)
        return None


def zone_from_local_time(local_text: Optional[str]) -> Optional[str]:
    """Derive a zone token from a trailing ``±HH:MM`` offset.

    Whole-hour offsets map to ``Etc/GMT`` names, whose sign is inverted by
    POSIX convention (``+02:00`` is ``Etc/GMT-2``). Zero maps to ``UTC``.
    Offsets with minutes keep the literal token, which :func:`resolve_zone`
    understands.
    """

    if not local_text:
        return None
    match = _TRAILING_OFFSET.search(local_text.strip())
    if not match:
        return None
    sign, hours, minutes = match.groups()
    if int(hours) == 0 and int(minutes) == 0:
        return "UTC"
    if int(minutes) == 0:
        return f"Etc/GMT{'-' if sign == '+' else '+'}{int(hours)}"
    return f"{sign}{hours}:{minutes}"


def _in_zone(instant: datetime, zone: Optional[tzinfo]) -> datetime:
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    # astimezone() without an argument converts to the device zone
    return instant.astimezone(zone) if zone is not None else instant.astimezone()


def _render(moment: datetime, hour12: bool) -> str:
    day = f"{MONTHS[moment.month - 1]} {moment.day:02d}"
    if not hour12:
        return f"{day}, {moment.hour:02d}:{moment.minute:02d}"
    hour = moment.hour % 12 or 12
    suffix = "AM" if moment.hour < 12 else "PM"
    return f"{day}, {hour:02d}:{moment.minute:02d} {suffix}"


def format_time(
    instant: Optional[datetime],
    mode: TimeMode | str = TimeMode.LOCAL,
    zone: Optional[str] = None,
    hour12: bool = True,
) -> str:
    """Render ``instant`` in the requested clock."""

    if instant is None:
        return PLACEHOLDER
    if not isinstance(mode, TimeMode):
        mode = TimeMode.from_str(mode)

    if mode is TimeMode.ZULU:
        return _render(_in_zone(instant, timezone.utc), hour12=False) + "Z"
    if mode is TimeMode.AIRPORT:
        return _render(_in_zone(instant, resolve_zone(zone)), hour12)
    return _render(_in_zone(instant, None), hour12)


def minutes_to_hmm(minutes: Optional[int]) -> str:
    """Format a duration as ``H:MM``."""

    if minutes is None:
        return PLACEHOLDER
    return f"{minutes // 60}:{minutes % 60:02d}"


def day_night_icon(instant: Optional[datetime], zone: Optional[str] = None) -> str:
    """Sun between 06:00 and 19:59 in ``zone`` (device zone fallback), else moon."""

    if instant is None:
        return ""
    hour = _in_zone(instant, resolve_zone(zone)).hour
    return SUN if 6 <= hour < 20 else MOON
