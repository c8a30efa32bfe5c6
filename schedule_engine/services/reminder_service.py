"""
This module defines the ReminderService, which validates schedule sets and
decides when to remind a household to put its bins out.
"""

import logging
from datetime import datetime, timedelta
from typing import Iterable, Optional

from ..aggregation import all_next, next_categories
from ..config import REMINDER_HOUR, REQUIRED_BIN_TYPES
from ..models import RecurringBin, ScheduleEntity, ValidationResult
from ..recurrence import as_datetime

logger = logging.getLogger(__name__)


def validate_schedules(
    schedules: Iterable[ScheduleEntity], address: Optional[str] = None
) -> ValidationResult:
    """
    Checks that the Red, Yellow and Green bins are all present, ignoring case.

    Bulky-waste entries do not count towards completeness.
    """
    bin_types = {s.bin_type.lower() for s in schedules if isinstance(s, RecurringBin)}
    result = ValidationResult(address=address)
    for bin_type, label in REQUIRED_BIN_TYPES:
        if bin_type.lower() not in bin_types:
            result.is_valid = False
            result.missing_bin_types.append(label)
    return result


class ReminderService:
    """Handles the evening-before reminder for upcoming collections."""

    def __init__(self, reminder_hour: int = REMINDER_HOUR):
        self.reminder_hour = reminder_hour

    def validate(
        self, schedules: Iterable[ScheduleEntity], address: Optional[str] = None
    ) -> ValidationResult:
        result = validate_schedules(schedules, address)
        if not result.is_valid:
            logger.info(
                f"Schedule for '{address}' is incomplete, missing {result.missing_bin_types}."
            )
        return result

    def should_remind(self, schedules: Iterable[ScheduleEntity], now: datetime) -> bool:
        """
        Decides whether a reminder is due.

        A reminder is due when the earliest next collection, counted from the
        start of today, is tomorrow and the current hour is at or past the
        reminder hour.

        Args:
            schedules: The schedules of one address or suburb.
            now: The current local time.

        Returns:
            True if the reminder should be shown.
        """
        now = as_datetime(now)
        next_dates = all_next(schedules, now.date())
        if not next_dates:
            return False

        earliest = min(next_dates.values())
        is_tomorrow = earliest == now.date() + timedelta(days=1)
        is_evening = now.hour >= self.reminder_hour
        return is_tomorrow and is_evening

    def reminder_message(self, schedules: Iterable[ScheduleEntity], now: datetime) -> str:
        """Builds the reminder text, or an empty string when no reminder is due."""
        schedules = list(schedules)
        if not self.should_remind(schedules, now):
            return ""

        today = as_datetime(now).date()
        bin_types = next_categories(schedules, today)
        if not bin_types:
            return ""

        collection_date = min(all_next(schedules, today).values())
        bin_list = ", ".join(bin_types)
        return (
            f"Reminder: Put out your {bin_list} bin(s) tonight! "
            f"Collection is tomorrow ({collection_date:%A, %B} {collection_date.day})."
        )
