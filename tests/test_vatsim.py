"""Mini README: Tests for reducing a VATSIM snapshot to airport positions."""

from __future__ import annotations

from flightdispatcher.atc import positions_by_airport


def test_positions_by_airport_filters_callsigns() -> None:
    snapshot = {
        "controllers": [
            {"callsign": "LLBG_TWR"},
            {"callsign": "LLBG_APP"},
            {"callsign": "LLBG_ATIS"},
            {"callsign": "EGLL_N_APP"},
            {"callsign": "LON_CTR"},
            {"callsign": "OBSERVER"},
            {"callsign": "llbg_GND"},
            {"callsign": None},
            "not-a-controller",
        ]
    }

    assert positions_by_airport(snapshot) == {"LLBG": ["TWR", "APP"], "EGLL": ["APP"]}


def test_positions_by_airport_handles_empty_payloads() -> None:
    assert positions_by_airport({}) == {}
    assert positions_by_airport({"controllers": None}) == {}
    assert positions_by_airport([]) == {}
