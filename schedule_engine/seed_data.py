"""
This module builds the static schedule fixtures the directory starts with.
"""

from datetime import date, timedelta
from typing import List

from .models import (BulkyWaste, CollectionFrequency, RecurringBin,
                     ScheduleEntity, Weekday)

SUBURB_COLLECTIONS = [
    ("Chatswood", "436 Victoria Ave", Weekday.MONDAY),
    ("Bondi Junction", "123 Oxford St", Weekday.WEDNESDAY),
    ("Parramatta", "159 Church St", Weekday.FRIDAY),
]

BIN_TYPES = [
    ("Red", "General Waste", CollectionFrequency.WEEKLY),
    ("Yellow", "Recycling", CollectionFrequency.WEEKLY),
    ("Green", "Garden Organics", CollectionFrequency.FORTNIGHTLY),
]

COUNCILS = [
    ("City of Sydney", True),
    ("Willoughby City Council", False),
    ("Parramatta City Council", True),
]

BULKY_WASTE_LEAD_DAYS = 30


def next_weekday_after(today: date, weekday: Weekday) -> date:
    """Returns the first date strictly after today that falls on the weekday."""
    days_ahead = (weekday - today.weekday() + 7) % 7
    return today + timedelta(days=days_ahead or 7)


def build_seed_schedules(today: date) -> List[ScheduleEntity]:
    """
    Creates the bin schedules of every seeded suburb and the councils'
    bulky-waste schedules, anchored relative to today. Identifiers are left
    unset for the repository to assign.
    """
    schedules: List[ScheduleEntity] = []
    for suburb, address, weekday in SUBURB_COLLECTIONS:
        anchor = next_weekday_after(today, weekday)
        for bin_type, description, frequency in BIN_TYPES:
            schedules.append(
                RecurringBin(
                    schedule_name=f"{suburb} {bin_type} Bin Collection",
                    bin_type=bin_type,
                    bin_description=description,
                    address=address,
                    suburb=suburb,
                    collection_day=weekday,
                    frequency=frequency,
                    next_collection_date=anchor,
                )
            )

    for council, requires_booking in COUNCILS:
        schedules.append(
            BulkyWaste(
                schedule_name=f"{council} Bulky Waste Collection",
                council=council,
                requires_booking=requires_booking,
                next_collection_date=today + timedelta(days=BULKY_WASTE_LEAD_DAYS),
            )
        )
    return schedules
