"""Mini README: Air traffic control presence helpers."""

from .vatsim import POSITIONS, positions_by_airport

__all__ = ["POSITIONS", "positions_by_airport"]
