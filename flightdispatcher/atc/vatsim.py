"""Mini README: Online ATC presence from a VATSIM data snapshot.

``positions_by_airport`` reduces the network's controller list to the
airport positions the board shows as badges next to each airport, e.g.
``{"LLBG": ["TWR", "APP"]}``. Fetching the snapshot and refreshing it on
a timer is the client's job.
"""

from __future__ import annotations

import re
from typing import Any, Dict, List

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

POSITIONS = ("DEL", "GND", "TWR", "APP", "DEP", "CTR", "FSS")
_AIRPORT_PREFIX = re.compile(r"^[A-Z]{4}$")


def positions_by_airport(snapshot: Any) -> Dict[str, List[str]]:
    """Map ICAO codes to the position suffixes staffed there, in feed order."""

    controllers = snapshot.get("controllers") if isinstance(snapshot, dict) else None
    if not isinstance(controllers, list):
        return {}

    atc: Dict[str, List[str]] = {}
    for controller in controllers:
        callsign = controller.get("callsign") if isinstance(controller, dict) else None
        if not isinstance(callsign, str):
            continue
        parts = callsign.split("_")
        if len(parts) < 2:
            continue
        icao, suffix = parts[0], parts[-1]
        if not _AIRPORT_PREFIX.match(icao) or suffix not in POSITIONS:
            continue
        atc.setdefault(icao, []).append(suffix)
    LOGGER.debug("ATC online at %s airports", len(atc))
    return atc
