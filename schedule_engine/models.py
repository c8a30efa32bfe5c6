"""
This module defines the data models for the collection schedule engine.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum, IntEnum
from typing import List, Optional, Union

from .exceptions import InvalidArgumentError

BULKY_WASTE_CATEGORY = "Bulky Waste"


class Weekday(IntEnum):
    """Day of the week, numbered like ``date.weekday()``."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @property
    def label(self) -> str:
        return self.name.capitalize()


class CollectionFrequency(Enum):
    """Interval policy of a recurring bin collection."""

    WEEKLY = "Weekly"
    FORTNIGHTLY = "Fortnightly"
    MONTHLY = "Monthly"
    QUARTERLY = "Quarterly"


@dataclass(frozen=True)
class RecurringBin:
    """A bin collected on a fixed weekday at a fixed interval."""

    schedule_name: str
    bin_type: str
    bin_description: str
    address: str
    suburb: str
    collection_day: Weekday
    frequency: CollectionFrequency
    next_collection_date: date
    id: Optional[int] = None

    def __post_init__(self):
        if self.next_collection_date.weekday() != self.collection_day:
            raise InvalidArgumentError(
                f"Next collection date {self.next_collection_date} of '{self.schedule_name}' "
                f"is not a {Weekday(self.collection_day).label}."
            )

    @property
    def category(self) -> str:
        return self.bin_type


@dataclass(frozen=True)
class BulkyWaste:
    """A council's quarterly bulky-waste collection."""

    schedule_name: str
    council: str
    requires_booking: bool
    next_collection_date: date
    id: Optional[int] = None

    @property
    def category(self) -> str:
        return BULKY_WASTE_CATEGORY


ScheduleEntity = Union[RecurringBin, BulkyWaste]


@dataclass(frozen=True)
class UpcomingCollection:
    """A single occurrence of a schedule, with the details needed to display it."""

    date: date
    bin_type: str
    bin_description: str
    frequency: str
    collection_day: str
    address: str = ""

    def __str__(self) -> str:
        return f"{self.date:%a, %b} {self.date.day} - {self.bin_type} bin ({self.bin_description})"


@dataclass
class ValidationResult:
    """Outcome of checking a schedule set for the mandatory bin types."""

    address: Optional[str]
    is_valid: bool = True
    missing_bin_types: List[str] = field(default_factory=list)

    def validation_message(self) -> str:
        if self.is_valid:
            return "Schedule is complete."
        return f"Missing schedules for: {', '.join(self.missing_bin_types)}"
