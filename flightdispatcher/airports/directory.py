"""Mini README: In-memory airport directory keyed by ICAO code.

Structure:
    * AirportRecord - immutable reference data for one airport.
    * SearchResult - trimmed record returned by the search endpoint.
    * AirportDirectory - lookup, batch lookup and free-text search.
    * get_airport_directory - cached loader for ``airports.json``.

The JSON file maps ICAO codes to ``{lat, lon, city, country, name, tz}``.
Records that cannot be parsed are skipped with a warning so one bad row
never hides the rest of the table.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional

from ..configuration import get_settings
from ..geodesy import GeoPoint
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

_ICAO_PATTERN = re.compile(r"^[A-Z]{4}$")
MIN_QUERY_LENGTH = 2
DEFAULT_SEARCH_LIMIT = 8


def clean_icao(value: Optional[str]) -> str:
    """Return the upper-cased ICAO code, or an empty string when invalid."""

    code = (value or "").strip().upper()
    return code if _ICAO_PATTERN.match(code) else ""


@dataclass(frozen=True, slots=True)
class AirportRecord:
    """Reference data for a single airport."""

    icao: str
    latitude: float
    longitude: float
    city: str
    country: str
    name: str
    timezone: Optional[str] = None

    @property
    def point(self) -> GeoPoint:
        return GeoPoint(self.latitude, self.longitude)

    def as_dict(self) -> Dict[str, object]:
        """Export using the field names of the airports table."""

        return {
            "lat": self.latitude,
            "lon": self.longitude,
            "city": self.city,
            "country": self.country,
            "name": self.name,
            "tz": self.timezone,
        }


@dataclass(frozen=True, slots=True)
class SearchResult:
    icao: str
    name: str
    city: str
    country: str


class AirportDirectory:
    """Read-only airport table with lookup and search helpers."""

    def __init__(self, airports: Iterable[AirportRecord]) -> None:
        self._by_icao: Dict[str, AirportRecord] = {}
        for record in airports:
            # keep first occurrence
            self._by_icao.setdefault(record.icao.upper(), record)
        LOGGER.debug("Initialised AirportDirectory with %s airports", len(self._by_icao))

    @classmethod
    def from_mapping(cls, raw: Mapping[str, object]) -> "AirportDirectory":
        """Build a directory from the decoded ``airports.json`` object."""

        records: List[AirportRecord] = []
        for code, item in raw.items():
            icao = clean_icao(code)
            if not icao or not isinstance(item, Mapping):
                LOGGER.warning("Skipping airport entry %r: invalid code or payload", code)
                continue
            try:
                records.append(
                    AirportRecord(
                        icao=icao,
                        latitude=float(item["lat"]),
                        longitude=float(item["lon"]),
                        city=str(item.get("city") or "").strip(),
                        country=str(item.get("country") or "").strip().upper(),
                        name=str(item.get("name") or "").strip(),
                        timezone=(str(item["tz"]).strip() or None) if item.get("tz") else None,
                    )
                )
            except (KeyError, TypeError, ValueError) as error:
                LOGGER.warning("Skipping airport entry %s: %s", icao, error)
        return cls(records)

    @classmethod
    def from_file(cls, path: Path) -> "AirportDirectory":
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
        if not isinstance(raw, dict):
            raise ValueError("airports.json must contain a JSON object keyed by ICAO code")
        LOGGER.info("Loading airport table from %s", path)
        return cls.from_mapping(raw)

    def __len__(self) -> int:
        return len(self._by_icao)

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and code.strip().upper() in self._by_icao

    def get(self, code: Optional[str]) -> Optional[AirportRecord]:
        """Return the airport for ``code`` (case-insensitive) or ``None``."""

        return self._by_icao.get((code or "").strip().upper())

    def lookup_many(self, codes: Iterable[str]) -> Dict[str, Optional[AirportRecord]]:
        """Resolve several ICAO codes at once; unknown codes map to ``None``."""

        valid = [clean_icao(code) for code in codes]
        valid = [code for code in valid if code]
        if not valid:
            raise ValueError("No valid ICAO codes supplied")
        return {code: self._by_icao.get(code) for code in valid}

    def search(self, query: str, *, limit: int = DEFAULT_SEARCH_LIMIT) -> List[SearchResult]:
        """Match ICAO prefixes first, then airport names and cities."""

        text = (query or "").strip()
        if len(text) < MIN_QUERY_LENGTH:
            return []
        upper = text.upper()
        lower = text.lower()

        icao_hits: List[SearchResult] = []
        name_hits: List[SearchResult] = []
        for icao, record in self._by_icao.items():
            result = SearchResult(icao=icao, name=record.name, city=record.city, country=record.country)
            if icao.startswith(upper):
                icao_hits.append(result)
            elif lower in record.name.lower() or lower in record.city.lower():
                name_hits.append(result)

        icao_hits.sort(key=lambda hit: (hit.icao != upper, hit.icao))
        return (icao_hits + name_hits)[:limit]


@lru_cache()
def get_airport_directory(path: Optional[Path] = None) -> AirportDirectory:
    """Return a cached directory loaded from ``path`` or the configured file."""

    if path is None:
        path = get_settings().airports_file
    return AirportDirectory.from_file(path)
