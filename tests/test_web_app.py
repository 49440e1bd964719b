"""Mini README: HTTP level tests for the FastAPI application factory."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from flightdispatcher.airports import AirportDirectory
from flightdispatcher.configuration import get_settings
from flightdispatcher.interface import create_application
from flightdispatcher.preferences import PreferenceStore

AIRPORTS = {
    "LLBG": {"lat": 32.0114, "lon": 34.8867, "city": "Tel Aviv", "country": "IL", "name": "Ben Gurion", "tz": "Asia/Jerusalem"},
    "EGLL": {"lat": 51.4706, "lon": -0.4619, "city": "London", "country": "GB", "name": "Heathrow", "tz": "Europe/London"},
    "RJTT": {"lat": 35.5523, "lon": 139.7798, "city": "Tokyo", "country": "JP", "name": "Haneda", "tz": "Asia/Tokyo"},
    "KLAX": {"lat": 33.9416, "lon": -118.4085, "city": "Los Angeles", "country": "US", "name": "Los Angeles Intl", "tz": "America/Los_Angeles"},
}

FEED = {
    "departures": [
        {
            "departure": {"scheduledTime": {"utc": "2026-02-23 21:10", "local": "2026-02-23 23:10+02:00"}},
            "arrival": {"airport": {"icao": "EGLL", "countryCode": "GB"}},
            "number": "LY 315",
            "airline": {"icao": "ELY"},
        }
    ]
}


@pytest.fixture()
def client(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[TestClient]:
    monkeypatch.setenv("FLIGHTDISPATCHER_DATA_DIRECTORY", str(tmp_path / "state"))
    monkeypatch.setenv("FLIGHTDISPATCHER_ROUTE_SEGMENTS", "20")
    get_settings.cache_clear()
    app = create_application(
        airports=AirportDirectory.from_mapping(AIRPORTS),
        store=PreferenceStore(tmp_path / "preferences.json"),
    )
    yield TestClient(app)
    get_settings.cache_clear()


def test_airport_lookup(client: TestClient) -> None:
    response = client.get("/airports", params={"icaos": "llbg, zzzz"})

    assert response.status_code == 200
    body = response.json()
    assert body["LLBG"]["city"] == "Tel Aviv"
    assert body["LLBG"]["tz"] == "Asia/Jerusalem"
    assert body["ZZZZ"] is None


def test_airport_lookup_rejects_invalid_codes(client: TestClient) -> None:
    response = client.get("/airports", params={"icaos": "12,AB"})

    assert response.status_code == 400


def test_airport_search(client: TestClient) -> None:
    assert client.get("/airports/search", params={"q": "L"}).json() == []

    hits = client.get("/airports/search", params={"q": "heath"}).json()
    assert [hit["icao"] for hit in hits] == ["EGLL"]


def test_departures_board_and_last_airport(client: TestClient) -> None:
    response = client.post("/departures/llbg", params={"mode": "zulu"}, json=FEED)

    assert response.status_code == 200
    body = response.json()
    assert body["count"] == 1
    assert body["origin"]["icao"] == "LLBG"
    line = body["lines"][0]
    assert line["departure_text"] == "Feb 23, 21:10Z"
    assert line["arrival_is_estimate"] is True
    assert line["simbrief_url"].startswith("https://dispatch.simbrief.com/options/custom?orig=LLBG&dest=EGLL")
    assert body["destinations"][0]["icao"] == "EGLL"

    assert client.get("/preferences").json()["last_airport"] == "LLBG"


def test_departures_rejects_invalid_code(client: TestClient) -> None:
    response = client.post("/departures/12", json=FEED)

    assert response.status_code == 400


def test_route_crossing_the_antimeridian(client: TestClient) -> None:
    response = client.get("/route", params={"origin": "RJTT", "destination": "KLAX"})

    assert response.status_code == 200
    segments = response.json()["segments"]
    assert len(segments) == 2
    assert sum(len(segment) for segment in segments) == 23


def test_route_unknown_airport(client: TestClient) -> None:
    response = client.get("/route", params={"origin": "RJTT", "destination": "ZZZZ"})

    assert response.status_code == 404


def test_atc_positions(client: TestClient) -> None:
    snapshot = {"controllers": [{"callsign": "LLBG_TWR"}, {"callsign": "LLLL_CTR"}, {"callsign": "LLBG_APP"}]}

    assert client.post("/atc", json=snapshot).json() == {"LLBG": ["TWR", "APP"], "LLLL": ["CTR"]}


def test_preferences_round_trip(client: TestClient) -> None:
    payload = client.get("/preferences").json()
    payload["default_airport"] = "egll"
    payload["aircraft"].append({"name": "B738", "base_type": "B738", "airframe_id": ""})
    payload["active_aircraft_index"] = 1

    saved = client.put("/preferences", json=payload)

    assert saved.status_code == 200
    reloaded = client.get("/preferences").json()
    assert reloaded["default_airport"] == "EGLL"
    assert reloaded["aircraft"][1]["base_type"] == "B738"
    assert reloaded["active_aircraft_index"] == 1
