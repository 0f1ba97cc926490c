"""
Tests for the command line interface.
"""

import json

import pendulum
import pytest
from typer.testing import CliRunner

from photoslotfinder.cli.app import app

runner = CliRunner()

ROSTER = {
    "photographers": [
        {
            "id": "1",
            "name": "Otto Crawford",
            "availabilities": [
                {"starts": "2020-11-25T08:00:00.000Z", "ends": "2020-11-25T16:00:00.000Z"},
                {"starts": "2020-11-26T08:00:00.000Z", "ends": "2020-11-26T08:30:00.000Z"},
            ],
            "bookings": [
                {"id": "1", "starts": "2020-11-25T08:30:00.000Z", "ends": "2020-11-25T09:30:00.000Z"},
            ],
        },
        {
            "id": "2",
            "name": "Jens Mills",
            "availabilities": [
                {"starts": "2020-11-25T08:00:00.000Z", "ends": "2020-11-25T16:00:00.000Z"},
            ],
            "bookings": [
                {"id": "2", "starts": "2020-11-25T09:00:00.000Z", "ends": "2020-11-25T13:30:00.000Z"},
            ],
        },
    ]
}


@pytest.fixture
def roster_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    path = tmp_path / "roster.json"
    path.write_text(json.dumps(ROSTER), encoding="utf-8")
    return path


def _read_output(path):
    return json.loads(path.read_text(encoding="utf-8"))


def test_find_writes_output_next_to_input(roster_file):
    result = runner.invoke(app, ["find", str(roster_file)])

    assert result.exit_code == 0, result.output
    assert "Successfully saved output in" in result.output

    data = _read_output(roster_file.with_name("roster.json.output"))
    assert [entry["photographer"]["id"] for entry in data] == ["1", "2"]
    assert pendulum.parse(data[0]["timeSlot"]["starts"]) == pendulum.datetime(2020, 11, 25, 9, 30, tz="UTC")
    assert pendulum.parse(data[1]["timeSlot"]["starts"]) == pendulum.datetime(2020, 11, 25, 13, 30, tz="UTC")
    assert pendulum.parse(data[1]["timeSlot"]["ends"]) == pendulum.datetime(2020, 11, 25, 15, tz="UTC")


def test_find_with_duration_and_output(roster_file, tmp_path):
    output = tmp_path / "slots.json"

    result = runner.invoke(app, ["find", str(roster_file), "--duration", "60", "--output", str(output)])

    assert result.exit_code == 0, result.output
    data = _read_output(output)
    # Jens now fits into the hour before his booking
    assert len(data) == 2
    assert pendulum.parse(data[1]["timeSlot"]["starts"]) == pendulum.datetime(2020, 11, 25, 8, tz="UTC")
    assert pendulum.parse(data[1]["timeSlot"]["ends"]) == pendulum.datetime(2020, 11, 25, 9, tz="UTC")


def test_find_debug_prints_tables(roster_file):
    result = runner.invoke(app, ["find", str(roster_file), "--debug"])

    assert result.exit_code == 0, result.output
    assert "Otto Crawford" in result.output
    assert "Available time slots" in result.output


def test_find_uses_configured_duration(roster_file, tmp_path):
    config = tmp_path / "custom.yaml"
    config.write_text("defaults:\n  duration_minutes: 400\n", encoding="utf-8")

    result = runner.invoke(app, ["find", str(roster_file), "--config", str(config)])

    assert result.exit_code == 0, result.output
    assert "No free 400-minute slots found" in result.output
    assert _read_output(roster_file.with_name("roster.json.output")) == []


def test_find_missing_input_fails(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(app, ["find", str(tmp_path / "missing.json")])

    assert result.exit_code == 1
    assert "Error" in result.output


def test_find_rejects_zero_duration(roster_file):
    result = runner.invoke(app, ["find", str(roster_file), "--duration", "0"])

    assert result.exit_code != 0


def test_find_invalid_config_fails(roster_file, tmp_path):
    config = tmp_path / "bad.yaml"
    config.write_text("defaults:\n  duration_minutes: -5\n", encoding="utf-8")

    result = runner.invoke(app, ["find", str(roster_file), "--config", str(config)])

    assert result.exit_code == 1


def test_show_prints_roster(roster_file):
    result = runner.invoke(app, ["show", str(roster_file)])

    assert result.exit_code == 0, result.output
    assert "Otto Crawford" in result.output
    assert "Jens Mills" in result.output
    assert "booking" in result.output


def test_version():
    from photoslotfinder import __version__

    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert __version__ in result.output
