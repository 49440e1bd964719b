"""Mini README: Presentation helpers for the departures table.

Times, countdowns and durations are turned into display strings here and
nowhere else, so the aggregation code never handles placeholders.
"""

from .due_time import DueTime, DueTimeClassifier, Urgency, classify_due, minutes_until
from .time_format import (
    PLACEHOLDER,
    TimeMode,
    day_night_icon,
    format_time,
    minutes_to_hmm,
    resolve_zone,
    zone_from_local_time,
)

__all__ = [
    "DueTime",
    "DueTimeClassifier",
    "PLACEHOLDER",
    "TimeMode",
    "Urgency",
    "classify_due",
    "day_night_icon",
    "format_time",
    "minutes_to_hmm",
    "minutes_until",
    "resolve_zone",
    "zone_from_local_time",
]
