"""Mini README: Deep links into the SimBrief dispatch planner."""

from .links import SimBriefLinkBuilder, flight_digits, simbrief_date, simbrief_link

__all__ = ["SimBriefLinkBuilder", "flight_digits", "simbrief_date", "simbrief_link"]
