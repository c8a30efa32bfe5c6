"""
This module defines the central facade for the collection schedule application.
"""

import logging
from datetime import date, datetime
from typing import List, Optional

from . import aggregation
from .config import CALENDAR_HORIZON_WEEKS, DEFAULT_HORIZON_WEEKS, REQUIRED_BIN_TYPES
from .ical_export import build_ical
from .recurrence import Instant, as_datetime, compute_next, describe_frequency
from .services.address_service import AddressService
from .services.reminder_service import ReminderService
from .services.schedule_service import ScheduleService

logger = logging.getLogger(__name__)

NOT_SCHEDULED = "Not scheduled"


class WasteScheduleFacade:
    """
    The central entry point for the collection schedule application.
    It orchestrates the various services to answer high-level queries.

    Every query is computed fresh from the directory; callers refresh a view
    by calling the query again.
    """

    def __init__(
        self,
        schedule_service: ScheduleService,
        reminder_service: ReminderService,
        address_service: AddressService,
    ):
        self.schedule_service = schedule_service
        self.reminder_service = reminder_service
        self.address_service = address_service

    def lookup_schedule(
        self,
        address: Optional[str] = None,
        suburb: Optional[str] = None,
        now: Optional[datetime] = None,
        weeks: int = DEFAULT_HORIZON_WEEKS,
        calendar_weeks: int = CALENDAR_HORIZON_WEEKS,
    ) -> dict:
        """
        Builds the complete schedule summary for an address or a suburb.

        The address takes precedence when both are given. Only the displayed
        schedule list is sorted; every date calculation uses directory order.

        Args:
            address: Part of a street address.
            suburb: The exact suburb name.
            now: The current local time, defaults to now.
            weeks: How many weeks of upcoming collections to list.
            calendar_weeks: How many weeks the collection calendar covers.

        Returns:
            A dictionary with the schedules, next collections, upcoming
            collections, calendar, validation and reminder state. The
            "status" entry describes the outcome, including failures.
        """
        has_address = bool(address and address.strip())
        has_suburb = bool(suburb and suburb.strip())
        if not has_address and not has_suburb:
            return self._empty_summary("Enter an address to view collection schedule")

        now = as_datetime(now or datetime.now())
        lookup_key = address if has_address else suburb

        try:
            if has_address:
                schedules = self.schedule_service.get_schedules_by_address(address)
            else:
                schedules = self.schedule_service.get_schedules_by_suburb(suburb)

            if not schedules:
                summary = self._empty_summary("No schedule found")
                summary["validation_message"] = (
                    "No schedule found for this address/suburb. Please try another."
                )
                if has_address:
                    summary["suggestions"] = self.address_service.find_address_matches(address)
                return summary

            validation = self.reminder_service.validate(schedules, lookup_key)
            next_dates = aggregation.all_next(schedules, now)
            show_reminder = self.reminder_service.should_remind(schedules, now)

            summary = self._empty_summary("Schedule loaded successfully")
            summary.update(
                {
                    "lookup": lookup_key,
                    "is_valid": validation.is_valid,
                    "validation_message": validation.validation_message(),
                    "missing_bin_types": validation.missing_bin_types,
                    "schedules": sorted(schedules, key=lambda s: s.bin_type),
                    "next_collections": next_dates,
                    "next_bin_dates": {
                        bin_type: self._format_date(next_dates.get(bin_type))
                        for bin_type, _ in REQUIRED_BIN_TYPES
                    },
                    "days_until_next_collection": aggregation.days_until_any(schedules, now),
                    "next_collection_bins": ", ".join(
                        aggregation.next_categories(schedules, now)
                    ),
                    "upcoming": aggregation.upcoming_collections(schedules, now, weeks),
                    "calendar": aggregation.build_calendar(schedules, now, calendar_weeks),
                    "show_reminder": show_reminder,
                    "reminder_message": (
                        self.reminder_service.reminder_message(schedules, now)
                        if show_reminder
                        else ""
                    ),
                    "bulky_waste": self.get_bulky_waste_overview(now),
                }
            )
            logger.info(f"Loaded {len(schedules)} schedules for '{lookup_key}'.")
            return summary
        except Exception as e:
            logger.exception(f"Failed to load schedule for '{lookup_key}': {e}")
            return self._empty_summary(f"Error loading schedule: {e}")

    def get_bulky_waste_overview(self, now: Optional[Instant] = None) -> List[dict]:
        """Lists every council's bulky-waste schedule with its next collection."""
        now = now or datetime.now()
        return [
            {
                "id": schedule.id,
                "schedule_name": schedule.schedule_name,
                "council": schedule.council,
                "requires_booking": schedule.requires_booking,
                "next_collection": compute_next(schedule, now),
                "frequency": describe_frequency(schedule),
            }
            for schedule in self.schedule_service.get_bulky_waste_schedules()
        ]

    def get_available_suburbs(self) -> List[str]:
        """Retrieves the suburbs that have bin schedules."""
        try:
            return self.schedule_service.repository.list_suburbs()
        except Exception as e:
            logger.exception(f"Failed to list suburbs: {e}")
            return []

    def export_calendar(
        self,
        address: str,
        start: Optional[Instant] = None,
        weeks: int = CALENDAR_HORIZON_WEEKS,
    ) -> Optional[bytes]:
        """
        Exports an address's collection calendar as an iCal document.

        Returns:
            The iCal content, or None if the address has no schedules.
        """
        start = start or datetime.now()
        calendar = self.schedule_service.generate_collection_calendar(address, start, weeks)
        if not calendar:
            logger.warning(f"No collections to export for address '{address}'.")
            return None
        return build_ical(calendar, f"Bin collections - {address}")

    @staticmethod
    def _format_date(value: Optional[date]) -> str:
        if value is None:
            return NOT_SCHEDULED
        return f"{value:%a, %b} {value.day}"

    @staticmethod
    def _empty_summary(status: str) -> dict:
        return {
            "status": status,
            "lookup": None,
            "is_valid": False,
            "validation_message": "",
            "missing_bin_types": [],
            "schedules": [],
            "next_collections": {},
            "next_bin_dates": {},
            "days_until_next_collection": aggregation.NO_COLLECTION,
            "next_collection_bins": "",
            "upcoming": [],
            "calendar": {},
            "show_reminder": False,
            "reminder_message": "",
            "bulky_waste": [],
            "suggestions": [],
        }
