"""
This module defines the ScheduleService, which answers collection questions
for an address or suburb by resolving it against the schedule directory.
"""
import logging
from datetime import date, timedelta
from typing import Dict, List, Optional

from .. import aggregation
from ..config import CALENDAR_HORIZON_WEEKS, DEFAULT_HORIZON_WEEKS
from ..models import (BulkyWaste, RecurringBin, ScheduleEntity,
                      UpcomingCollection, ValidationResult)
from ..recurrence import Instant, as_datetime, compute_next
from .reminder_service import validate_schedules
from .schedule_repository import InMemoryScheduleRepository

# Get a logger instance for this module
logger = logging.getLogger(__name__)


class ScheduleService:
    """Handles schedule lookups and the date calculations built on them."""

    def __init__(self, repository: InMemoryScheduleRepository):
        self.repository = repository

    # --- Lookups ---

    def get_schedules_by_address(self, address: Optional[str]) -> List[RecurringBin]:
        """
        Finds all bin schedules for an address.

        Args:
            address: Part of the street address, matched ignoring case.

        Returns:
            The matching schedules, or an empty list for a blank address or
            when nothing matches.
        """
        if not address or not address.strip():
            return []
        schedules = self.repository.find_by_address(address)
        if schedules:
            logger.info(f"Found {len(schedules)} schedules for address '{address}'.")
        else:
            logger.warning(f"No schedules found for address '{address}'.")
        return schedules

    def get_schedules_by_suburb(self, suburb: Optional[str]) -> List[RecurringBin]:
        """Finds all bin schedules for a suburb, or an empty list for a blank suburb."""
        if not suburb or not suburb.strip():
            return []
        schedules = self.repository.find_by_suburb(suburb)
        if not schedules:
            logger.warning(f"No schedules found for suburb '{suburb}'.")
        return schedules

    def get_bulky_waste_schedules(self) -> List[BulkyWaste]:
        return self.repository.list_bulky_waste()

    # --- Next collection ---

    def calculate_next_collection(
        self, schedule: Optional[ScheduleEntity], from_instant: Instant
    ) -> date:
        """Calculates the next collection date of one schedule."""
        return compute_next(schedule, from_instant)

    def get_next_collection_for_bin_type(
        self, address: str, bin_type: str, from_instant: Instant
    ) -> Optional[date]:
        """Returns the next collection of a bin type at an address, or None if it has no such bin."""
        schedules = self.get_schedules_by_address(address)
        return aggregation.next_for_category(schedules, bin_type, from_instant)

    def get_all_next_collections(self, address: str, from_instant: Instant) -> Dict[str, date]:
        return aggregation.all_next(self.get_schedules_by_address(address), from_instant)

    # --- Upcoming collections ---

    def get_upcoming_collections_for_address(
        self, address: str, start: Instant, number_of_weeks: int = DEFAULT_HORIZON_WEEKS
    ) -> List[UpcomingCollection]:
        schedules = self.get_schedules_by_address(address)
        return aggregation.upcoming_collections(schedules, start, number_of_weeks)

    def get_upcoming_collections_for_suburb(
        self, suburb: str, start: Instant, number_of_weeks: int = DEFAULT_HORIZON_WEEKS
    ) -> List[UpcomingCollection]:
        schedules = self.get_schedules_by_suburb(suburb)
        return aggregation.upcoming_collections(schedules, start, number_of_weeks)

    # --- Calendar ---

    def generate_collection_calendar(
        self, address: str, start: Instant, number_of_weeks: int = CALENDAR_HORIZON_WEEKS
    ) -> Dict[date, List[UpcomingCollection]]:
        """Groups an address's upcoming collections by date."""
        schedules = self.get_schedules_by_address(address)
        return aggregation.build_calendar(schedules, start, number_of_weeks)

    def get_collections_for_date(self, address: str, day: Instant) -> List[UpcomingCollection]:
        """Returns the collections at an address that fall on the given day."""
        target = as_datetime(day).date()
        window = self.get_upcoming_collections_for_address(
            address, target - timedelta(days=7), 2
        )
        return [c for c in window if c.date == target]

    def is_collection_day(self, address: str, day: Instant) -> bool:
        return len(self.get_collections_for_date(address, day)) > 0

    # --- Days until ---

    def get_days_until_next_collection(
        self, address: str, bin_type: str, from_instant: Instant
    ) -> int:
        """Counts the days until a bin type is next collected, -1 if the address has no such bin."""
        next_date = self.get_next_collection_for_bin_type(address, bin_type, from_instant)
        return aggregation.days_until(next_date, from_instant)

    def get_days_until_next_any_collection(self, address: str, from_instant: Instant) -> int:
        schedules = self.get_schedules_by_address(address)
        return aggregation.days_until_any(schedules, from_instant)

    def get_next_collection_bin_types(self, address: str, from_instant: Instant) -> List[str]:
        schedules = self.get_schedules_by_address(address)
        return aggregation.next_categories(schedules, from_instant)

    # --- Validation ---

    def validate_schedule_for_address(self, address: str) -> ValidationResult:
        """Checks that an address has Red, Yellow and Green bin schedules."""
        return validate_schedules(self.get_schedules_by_address(address), address)
