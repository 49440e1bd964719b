"""Mini README: Rounding helper used for minute arithmetic.

Python's ``round`` rounds halves to even, which would make a 30.5 minute
countdown read "in 30m" while an estimate of 337.5 minutes read 338. The
board rounds every half up instead.
"""

from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves towards positive infinity."""

    return int(math.floor(value + 0.5))
