"""
Tests for the command-line runner.
"""

from datetime import date
from unittest.mock import patch

import pytest

from wasteless.app_factory import create_facade, create_repository
from wasteless.main import build_parser, main, run_command

ADDRESS = "436 Victoria Ave"


@pytest.fixture
def facade():
    return create_facade(create_repository(date(2025, 10, 15)))


def run(facade, *argv):
    return run_command(facade, build_parser().parse_args(list(argv)))


def test_next_command(facade, capsys):
    exit_code = run(facade, "next", "--address", ADDRESS, "--at", "2025-10-15T09:00")

    output = capsys.readouterr().out
    assert exit_code == 0
    assert "Red: Mon, Oct 20" in output
    assert "Days until next collection: 5" in output


def test_upcoming_command(facade, capsys):
    exit_code = run(facade, "upcoming", "--suburb", "Chatswood", "--at", "2025-10-15T09:00", "--weeks", "1")

    output = capsys.readouterr().out.splitlines()
    assert exit_code == 0
    assert output == [
        "Mon, Oct 20 - Red bin (General Waste)",
        "Mon, Oct 20 - Yellow bin (Recycling)",
        "Mon, Oct 20 - Green bin (Garden Organics)",
    ]


def test_calendar_command(facade, capsys):
    run(facade, "calendar", "--address", ADDRESS, "--at", "2025-10-13T00:00", "--weeks", "1")

    output = capsys.readouterr().out.splitlines()
    assert output == ["2025-10-13: Red, Yellow, Green", "2025-10-20: Red, Yellow"]


def test_calendar_command_defaults_to_eight_weeks(facade, capsys):
    run(facade, "calendar", "--address", ADDRESS, "--at", "2025-10-13T00:00")

    output = capsys.readouterr().out.splitlines()
    assert len(output) == 9
    assert output[-1] == "2025-12-08: Red, Yellow, Green"


def test_zero_weeks_lists_no_upcoming_collections(facade, capsys):
    exit_code = run(facade, "upcoming", "--address", ADDRESS, "--at", "2025-10-13T00:00", "--weeks", "0")

    assert exit_code == 0
    assert capsys.readouterr().out == ""


def test_validate_command(facade, capsys):
    run(facade, "validate", "--address", ADDRESS)
    assert capsys.readouterr().out.strip() == "Schedule is complete."


def test_remind_command(facade, capsys):
    run(facade, "remind", "--address", ADDRESS, "--at", "2025-10-19T18:00")
    assert capsys.readouterr().out.startswith("Reminder: Put out your Red, Yellow, Green bin(s) tonight!")


def test_remind_command_when_not_due(facade, capsys):
    run(facade, "remind", "--address", ADDRESS, "--at", "2025-10-19T10:00")
    assert capsys.readouterr().out.strip() == "No reminder due."


def test_unknown_address_fails(facade, capsys):
    exit_code = run(facade, "next", "--address", "436 Victria Ave")

    output = capsys.readouterr().out
    assert exit_code == 1
    assert "No schedule found" in output
    assert "Did you mean: 436 Victoria Ave" in output


def test_suburbs_command(facade, capsys):
    run(facade, "suburbs")
    assert capsys.readouterr().out.splitlines() == ["Bondi Junction", "Chatswood", "Parramatta"]


def test_bulky_command(facade, capsys):
    run(facade, "bulky", "--at", "2025-10-15T09:00")

    output = capsys.readouterr().out
    assert "City of Sydney Bulky Waste Collection: Fri, Nov 14 (Quarterly - Booking Required)" in output


def test_export_command_writes_file(facade, tmp_path, capsys):
    target = tmp_path / "bins.ics"
    exit_code = run(facade, "export", "--address", ADDRESS, "--at", "2025-10-13T00:00", "--output", str(target))

    assert exit_code == 0
    assert target.read_bytes().startswith(b"BEGIN:VCALENDAR")


def test_export_command_unknown_address(facade, capsys):
    assert run(facade, "export", "--address", "1 Nowhere Rd") == 1


@patch("wasteless.main.initialize_app")
@patch("wasteless.main.create_facade")
def test_main_wires_facade(mock_create_facade, mock_initialize_app, facade, capsys):
    mock_create_facade.return_value = facade

    exit_code = main(["suburbs"])

    assert exit_code == 0
    mock_initialize_app.assert_called_once()
    mock_create_facade.assert_called_once()
