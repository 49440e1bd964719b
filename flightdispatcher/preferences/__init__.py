"""Mini README: Saved user preferences (aircraft, default airport)."""

from .store import AircraftProfile, PreferenceStore, UserPreferences

__all__ = ["AircraftProfile", "PreferenceStore", "UserPreferences"]
