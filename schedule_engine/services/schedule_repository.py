"""
This module defines the in-memory directory of collection schedules.
"""

import logging
from dataclasses import replace
from typing import Dict, Iterable, List, Optional

from ..exceptions import DuplicateIdentifierError, InvalidArgumentError
from ..models import BulkyWaste, RecurringBin, ScheduleEntity

logger = logging.getLogger(__name__)


class InMemoryScheduleRepository:
    """Holds schedule entities keyed by the identifier assigned on creation."""

    def __init__(self, schedules: Optional[Iterable[ScheduleEntity]] = None):
        self._schedules: Dict[int, ScheduleEntity] = {}
        self._next_id = 1
        for schedule in schedules or []:
            self.add(schedule)

    def add(self, schedule: ScheduleEntity) -> ScheduleEntity:
        """
        Stores a new schedule and assigns its identifier.

        Args:
            schedule: A schedule without an identifier.

        Returns:
            The stored schedule, carrying its new identifier.

        Raises:
            InvalidArgumentError: If no schedule is given.
            DuplicateIdentifierError: If the schedule already has an identifier.
        """
        if schedule is None:
            raise InvalidArgumentError("Cannot add an empty schedule.")
        if schedule.id is not None:
            raise DuplicateIdentifierError(
                f"Schedule '{schedule.schedule_name}' already has identifier {schedule.id}."
            )
        stored = replace(schedule, id=self._next_id)
        self._schedules[stored.id] = stored
        self._next_id += 1
        logger.debug(f"Added schedule {stored.id} ('{stored.schedule_name}').")
        return stored

    def update(self, schedule: ScheduleEntity) -> None:
        """Replaces the schedule stored under the same identifier."""
        if schedule.id not in self._schedules:
            logger.warning(f"Cannot update schedule {schedule.id}: no such identifier.")
            return
        self._schedules[schedule.id] = schedule

    def delete(self, schedule_id: int) -> None:
        """Removes a schedule. Unknown identifiers are ignored."""
        if self._schedules.pop(schedule_id, None) is None:
            logger.warning(f"Cannot delete schedule {schedule_id}: no such identifier.")

    def get_by_id(self, schedule_id: int) -> Optional[ScheduleEntity]:
        return self._schedules.get(schedule_id)

    def get_all(self) -> List[ScheduleEntity]:
        return list(self._schedules.values())

    def count(self) -> int:
        return len(self._schedules)

    def find_by_address(self, address: str) -> List[RecurringBin]:
        """Finds bin schedules whose address contains the text, ignoring case."""
        needle = address.lower()
        return [
            s
            for s in self._schedules.values()
            if isinstance(s, RecurringBin) and s.address and needle in s.address.lower()
        ]

    def find_by_suburb(self, suburb: str) -> List[RecurringBin]:
        """Finds bin schedules for exactly this suburb."""
        return [
            s
            for s in self._schedules.values()
            if isinstance(s, RecurringBin) and s.suburb == suburb
        ]

    def list_bulky_waste(self) -> List[BulkyWaste]:
        return [s for s in self._schedules.values() if isinstance(s, BulkyWaste)]

    def list_suburbs(self) -> List[str]:
        """Returns the distinct suburbs with bin schedules, sorted by name."""
        return sorted({s.suburb for s in self._schedules.values() if isinstance(s, RecurringBin)})

    def list_addresses(self) -> List[str]:
        """Returns the distinct addresses with bin schedules, in insertion order."""
        addresses = {}
        for s in self._schedules.values():
            if isinstance(s, RecurringBin) and s.address:
                addresses.setdefault(s.address, None)
        return list(addresses)
