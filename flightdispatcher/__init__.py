"""Mini README: Core package initializer for the flight dispatcher.

The package turns an airport's raw departures feed into a board of
international flights with estimated block times, urgency countdowns,
SimBrief deep links and antimeridian-safe great-circle routes. Subpackages:
``geodesy``, ``schedule``, ``display``, ``simbrief``, ``airports``,
``atc``, ``preferences`` and ``interface``.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
