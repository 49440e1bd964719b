"""Mini README: User preferences and their load/merge/save lifecycle.

Structure:
    * AircraftProfile - a SimBrief aircraft (base type and saved airframe).
    * UserPreferences - default airport, last searched airport, aircraft list.
    * PreferenceStore - JSON file persistence with defaults merging.

The board receives ``UserPreferences`` as a plain value; only the HTTP and
CLI layers talk to the store.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from ..airports import clean_icao
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


class AircraftProfile(BaseModel):
    """Aircraft handed to SimBrief; blank fields are left out of the link."""

    name: str
    base_type: str = Field("", description="ICAO type designator, e.g. A359.")
    airframe_id: str = Field("", description="SimBrief saved-airframe internal id.")


def _default_aircraft() -> List[AircraftProfile]:
    return [
        AircraftProfile(
            name="A359 iniBuilds",
            base_type="A359",
            airframe_id="1289435_1771861149220",
        )
    ]


class UserPreferences(BaseModel):
    """Per-user settings for the departure board."""

    default_airport: str = "LLBG"
    last_airport: Optional[str] = None
    active_aircraft_index: int = Field(0, ge=0)
    aircraft: List[AircraftProfile] = Field(default_factory=_default_aircraft)

    @field_validator("default_airport", "last_airport", mode="before")
    @classmethod
    def _normalise_code(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return str(value).strip().upper()

    @property
    def active_aircraft(self) -> Optional[AircraftProfile]:
        if self.active_aircraft_index < len(self.aircraft):
            return self.aircraft[self.active_aircraft_index]
        return None

    @property
    def initial_airport(self) -> str:
        """Airport to pre-fill: the last search, else the configured default."""

        return self.last_airport or self.default_airport

    def merged(self, overrides: Dict[str, Any]) -> "UserPreferences":
        """Return a copy with ``overrides`` applied and validated."""

        return UserPreferences.model_validate({**self.model_dump(), **overrides})


class PreferenceStore:
    """Persist :class:`UserPreferences` as JSON."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def load(self) -> UserPreferences:
        """Defaults merged with the saved file; unreadable files yield defaults."""

        defaults = UserPreferences()
        if not self.path.exists():
            return defaults
        try:
            saved = json.loads(self.path.read_text(encoding="utf-8"))
            if not isinstance(saved, dict):
                raise ValueError("preferences file must contain a JSON object")
            return defaults.merged(saved)
        except (OSError, ValueError, ValidationError) as error:
            LOGGER.warning("Ignoring unreadable preferences at %s: %s", self.path, error)
            return defaults

    def save(self, preferences: UserPreferences) -> UserPreferences:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(preferences.model_dump_json(indent=2), encoding="utf-8")
        LOGGER.debug("Saved preferences to %s", self.path)
        return preferences

    def remember_airport(self, code: str) -> UserPreferences:
        """Record the last searched airport; invalid codes are ignored."""

        preferences = self.load()
        icao = clean_icao(code)
        if not icao:
            return preferences
        return self.save(preferences.merged({"last_airport": icao}))
