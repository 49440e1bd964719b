"""Mini README: Small helpers shared across the dispatcher subsystems."""

from .rounding import round_half_up

__all__ = ["round_half_up"]
