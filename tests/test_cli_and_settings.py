"""Mini README: Tests for settings, logging levels and the board command."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterator

import pytest
from typer.testing import CliRunner

from dispatcher_cli import cli
from flightdispatcher.configuration import DispatcherSettings, get_settings
from flightdispatcher.logging_utils import configure_for_environment, get_logger, level_for_environment

FEED = {
    "departures": [
        {
            "departure": {"scheduledTime": {"utc": "2026-02-23 21:10"}},
            "arrival": {"airport": {"icao": "EGLL", "countryCode": "GB"}},
            "number": "LY 315",
            "airline": {"icao": "ELY"},
        },
        {
            "departure": {"scheduledTime": {"utc": "2026-02-23 21:30"}},
            "arrival": {"airport": {"icao": "LLER", "countryCode": "IL"}},
            "number": "LY 7",
        },
    ]
}


@pytest.fixture()
def isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    monkeypatch.setenv("FLIGHTDISPATCHER_DATA_DIRECTORY", str(tmp_path / "state"))
    monkeypatch.setenv("FLIGHTDISPATCHER_ENVIRONMENT", "production")
    get_settings.cache_clear()
    yield tmp_path
    get_settings.cache_clear()


def test_level_for_environment() -> None:
    assert level_for_environment("Development") == logging.DEBUG
    assert level_for_environment("production") == logging.INFO


def test_configure_for_environment_reuses_one_handler() -> None:
    root = logging.getLogger()
    previous = root.level
    try:
        assert configure_for_environment("development") == logging.DEBUG
        handlers = list(root.handlers)
        get_logger("flightdispatcher.tests")

        assert configure_for_environment("production") == logging.INFO
        assert root.level == logging.INFO
        assert root.handlers == handlers
    finally:
        root.setLevel(previous)


def test_settings_read_environment(isolated_settings: Path) -> None:
    settings = get_settings()

    assert settings.environment == "production"
    assert settings.data_directory.is_dir()
    assert settings.resolved_preferences_file == settings.data_directory / "preferences.json"
    assert settings.airports_file.name == "airports.json"


def test_every_setting_is_consumed_by_the_service() -> None:
    assert set(DispatcherSettings.model_fields) == {
        "environment",
        "data_directory",
        "airports_file",
        "preferences_file",
        "interface_host",
        "interface_port",
        "route_segments",
    }


def test_board_command_prints_international_rows(isolated_settings: Path) -> None:
    feed_file = isolated_settings / "feed.json"
    feed_file.write_text(json.dumps(FEED), encoding="utf-8")

    result = CliRunner().invoke(cli, ["board", str(feed_file), "--icao", "llbg", "--mode", "zulu"])

    assert result.exit_code == 0, result.output
    assert "LY 315" in result.output
    assert "LY 7" not in result.output
    assert "Feb 23, 21:10Z" in result.output
    assert "Showing 1 international flights" in result.output
    saved = json.loads(get_settings().resolved_preferences_file.read_text(encoding="utf-8"))
    assert saved["last_airport"] == "LLBG"


def test_board_command_rejects_invalid_code(isolated_settings: Path) -> None:
    feed_file = isolated_settings / "feed.json"
    feed_file.write_text(json.dumps(FEED), encoding="utf-8")

    result = CliRunner().invoke(cli, ["board", str(feed_file), "--icao", "12"])

    assert result.exit_code != 0
