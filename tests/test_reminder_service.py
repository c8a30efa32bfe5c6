"""
Unit tests for the ReminderService.
"""

from datetime import date, datetime

import pytest

from schedule_engine.models import (BulkyWaste, CollectionFrequency,
                                    RecurringBin, Weekday)
from schedule_engine.services.reminder_service import ReminderService

SUNDAY_EVENING = datetime(2025, 10, 19, 18, 0)
SUNDAY_MORNING = datetime(2025, 10, 19, 10, 0)


def make_bin(bin_type, description, frequency=CollectionFrequency.WEEKLY):
    return RecurringBin(
        schedule_name=f"Chatswood {bin_type} Bin Collection",
        bin_type=bin_type,
        bin_description=description,
        address="436 Victoria Ave",
        suburb="Chatswood",
        collection_day=Weekday.MONDAY,
        frequency=frequency,
        next_collection_date=date(2025, 10, 20),
    )


@pytest.fixture
def monday_bins():
    return [
        make_bin("Red", "General Waste"),
        make_bin("Yellow", "Recycling"),
        make_bin("Green", "Garden Organics", CollectionFrequency.FORTNIGHTLY),
    ]


@pytest.fixture
def service():
    return ReminderService(reminder_hour=17)


class TestShouldRemind:
    """Tests for when the evening-before reminder fires."""

    def test_evening_before_collection(self, service, monday_bins):
        assert service.should_remind(monday_bins, SUNDAY_EVENING) is True

    def test_morning_before_collection(self, service, monday_bins):
        assert service.should_remind(monday_bins, SUNDAY_MORNING) is False

    def test_reminder_hour_is_inclusive(self, service, monday_bins):
        assert service.should_remind(monday_bins, datetime(2025, 10, 19, 17, 0)) is True
        assert service.should_remind(monday_bins, datetime(2025, 10, 19, 16, 59)) is False

    def test_two_days_before_collection(self, service, monday_bins):
        assert service.should_remind(monday_bins, datetime(2025, 10, 18, 20, 0)) is False

    def test_evening_of_collection_day(self, service, monday_bins):
        assert service.should_remind(monday_bins, datetime(2025, 10, 20, 19, 0)) is False

    def test_no_schedules(self, service):
        assert service.should_remind([], SUNDAY_EVENING) is False

    def test_custom_reminder_hour(self, monday_bins):
        late_service = ReminderService(reminder_hour=19)
        assert late_service.should_remind(monday_bins, SUNDAY_EVENING) is False
        assert late_service.should_remind(monday_bins, datetime(2025, 10, 19, 19, 30)) is True


class TestReminderMessage:
    """Tests for the reminder text."""

    def test_message_names_bins_and_date(self, service, monday_bins):
        message = service.reminder_message(monday_bins, SUNDAY_EVENING)

        assert message == (
            "Reminder: Put out your Red, Yellow, Green bin(s) tonight! "
            "Collection is tomorrow (Monday, October 20)."
        )

    def test_message_is_empty_when_not_due(self, service, monday_bins):
        assert service.reminder_message(monday_bins, SUNDAY_MORNING) == ""

    def test_message_accepts_iterators(self, service, monday_bins):
        message = service.reminder_message(iter(monday_bins), SUNDAY_EVENING)
        assert "tomorrow" in message


class TestValidate:
    """Tests for the mandatory bin type check."""

    def test_complete_schedule(self, service, monday_bins):
        result = service.validate(monday_bins, "436 Victoria Ave")

        assert result.is_valid is True
        assert result.validation_message() == "Schedule is complete."

    def test_missing_green_bin(self, service, monday_bins):
        result = service.validate(monday_bins[:2])

        assert result.is_valid is False
        assert result.missing_bin_types == ["Green (Garden Organics)"]
        assert result.validation_message() == "Missing schedules for: Green (Garden Organics)"

    def test_bin_types_ignore_case(self, service):
        schedules = [
            make_bin("red", "General Waste"),
            make_bin("YELLOW", "Recycling"),
            make_bin("gReEn", "Garden Organics"),
        ]
        assert service.validate(schedules).is_valid is True

    def test_bulky_waste_does_not_count(self, service):
        bulky = BulkyWaste(
            schedule_name="City of Sydney Bulky Waste Collection",
            council="City of Sydney",
            requires_booking=True,
            next_collection_date=date(2025, 11, 14),
        )
        result = service.validate([bulky])

        assert result.is_valid is False
        assert result.missing_bin_types == [
            "Red (General Waste)",
            "Yellow (Recycling)",
            "Green (Garden Organics)",
        ]
