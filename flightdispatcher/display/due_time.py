"""Mini README: Countdown labels for scheduled departures.

``classify_due`` turns a departure instant into the short label shown
under the departure time ("in 45m", "in 2h 5m", "12m ago", "departed") and
an urgency bucket the table uses to colour it.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from ..utils import round_half_up

DEPARTED_AFTER_MINUTES = 60
URGENT_WITHIN_MINUTES = 30
WARNING_WITHIN_MINUTES = 90


class Urgency(str, Enum):
    MUTED = "muted"
    URGENT = "urgent"
    WARNING = "warning"
    NORMAL = "normal"


@dataclass(frozen=True, slots=True)
class DueTime:
    label: str
    urgency: Urgency

    def as_dict(self) -> dict:
        return {"label": self.label, "urgency": self.urgency.value}


def _aware(moment: datetime) -> datetime:
    return moment if moment.tzinfo is not None else moment.replace(tzinfo=timezone.utc)


def minutes_until(departure: datetime, now: datetime) -> int:
    """Whole minutes from ``now`` to ``departure``, rounded half up."""

    return round_half_up((_aware(departure) - _aware(now)).total_seconds() / 60)


def classify_due(departure: Optional[datetime], now: datetime) -> Optional[DueTime]:
    """Return the countdown label and urgency, or ``None`` without a departure."""

    if departure is None:
        return None
    diff = minutes_until(departure, now)

    if diff < -DEPARTED_AFTER_MINUTES:
        return DueTime("departed", Urgency.MUTED)
    if diff < 0:
        return DueTime(f"{abs(diff)}m ago", Urgency.MUTED)
    if diff < URGENT_WITHIN_MINUTES:
        return DueTime(f"in {diff}m", Urgency.URGENT)
    if diff < WARNING_WITHIN_MINUTES:
        return DueTime(f"in {diff}m", Urgency.WARNING)
    hours, minutes = divmod(diff, 60)
    label = f"in {hours}h {minutes}m" if minutes else f"in {hours}h"
    return DueTime(label, Urgency.NORMAL)


class DueTimeClassifier:
    """Classify departures against a fixed reference clock."""

    def __init__(self, now: datetime) -> None:
        self.now = _aware(now)

    def classify(self, departure: Optional[datetime]) -> Optional[DueTime]:
        return classify_due(departure, self.now)
