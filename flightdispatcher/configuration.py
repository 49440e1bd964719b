"""Mini README: Centralised runtime configuration for the flight dispatcher.

Structure:
    * DispatcherSettings - pydantic settings model read from the environment.
    * get_settings - cached accessor so validation runs once per process.

Usage:
    Variables use the ``FLIGHTDISPATCHER_`` prefix (for example
    ``FLIGHTDISPATCHER_INTERFACE_PORT=8080``) and may also be placed in a
    ``.env`` file. User-facing preferences such as the saved aircraft list
    live in :mod:`flightdispatcher.preferences`, not here.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_DATA = Path(__file__).parent / "data"


class DispatcherSettings(BaseSettings):
    """Runtime configuration for the dispatcher service and CLI."""

    model_config = SettingsConfigDict(
        env_prefix="FLIGHTDISPATCHER_",
        env_file=".env",
        case_sensitive=False,
    )

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    data_directory: Path = Field(
        Path("data"),
        description="Directory holding per-user state such as saved preferences.",
    )
    airports_file: Path = Field(
        PACKAGE_DATA / "airports.json",
        description="ICAO keyed airport reference data.",
    )
    preferences_file: Optional[Path] = Field(
        None,
        description="Preference JSON file; defaults to <data_directory>/preferences.json.",
    )
    interface_host: str = Field(
        "0.0.0.0",
        description="Network interface for the HTTP service to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Port the HTTP service exposes.",
        ge=1,
        le=65535,
    )
    route_segments: int = Field(
        80,
        description="Number of great-circle segments used when drawing a route.",
        ge=1,
    )

    @field_validator("data_directory", mode="before")
    @classmethod
    def _expand_path(cls, value: str | Path) -> Path:
        """Expand user directories and make sure the directory exists."""

        path = Path(value).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path

    @property
    def resolved_preferences_file(self) -> Path:
        """Return the preference file location, falling back to the data directory."""

        if self.preferences_file is not None:
            return Path(self.preferences_file).expanduser()
        return self.data_directory / "preferences.json"


@lru_cache()
def get_settings() -> DispatcherSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return DispatcherSettings()
