"""
This module merges the occurrences of several schedules into combined views.

The input is any sequence of schedules sharing a lookup key, usually every
bin at one address. Each call copies the sequence it is given, so callers may
keep using their own list afterwards.
"""

from datetime import date
from typing import Dict, Iterable, List, Optional

from .models import BulkyWaste, RecurringBin, ScheduleEntity, UpcomingCollection
from .recurrence import (Instant, as_datetime, collection_weekday, compute_next,
                         describe_frequency, enumerate_upcoming)

NO_COLLECTION = -1


def _description(schedule: ScheduleEntity) -> str:
    if isinstance(schedule, RecurringBin):
        return schedule.bin_description
    if isinstance(schedule, BulkyWaste):
        return schedule.council
    return ""


def _location(schedule: ScheduleEntity) -> str:
    if isinstance(schedule, RecurringBin):
        return schedule.address
    if isinstance(schedule, BulkyWaste):
        return schedule.council
    return ""


def all_next(schedules: Iterable[ScheduleEntity], from_instant: Instant) -> Dict[str, date]:
    """
    Maps each category to its next collection date.

    When two schedules share a category label the one iterated last wins.
    """
    result = {}
    for schedule in list(schedules):
        result[schedule.category] = compute_next(schedule, from_instant)
    return result


def next_for_category(
    schedules: Iterable[ScheduleEntity], category: str, from_instant: Instant
) -> Optional[date]:
    """Returns the next date of the first schedule in the given category, or None."""
    wanted = category.lower()
    for schedule in list(schedules):
        if schedule.category.lower() == wanted:
            return compute_next(schedule, from_instant)
    return None


def days_until(collection_date: Optional[date], from_instant: Instant) -> int:
    """Counts whole days from the reference day to a collection, -1 if there is none."""
    if collection_date is None:
        return NO_COLLECTION
    return (collection_date - as_datetime(from_instant).date()).days


def days_until_any(schedules: Iterable[ScheduleEntity], from_instant: Instant) -> int:
    next_dates = all_next(schedules, from_instant)
    if not next_dates:
        return NO_COLLECTION
    return days_until(min(next_dates.values()), from_instant)


def next_categories(schedules: Iterable[ScheduleEntity], from_instant: Instant) -> List[str]:
    """Lists every category whose next collection falls on the earliest date."""
    next_dates = all_next(schedules, from_instant)
    if not next_dates:
        return []
    earliest = min(next_dates.values())
    return [category for category, when in next_dates.items() if when == earliest]


def upcoming_collections(
    schedules: Iterable[ScheduleEntity], from_instant: Instant, horizon_weeks: int
) -> List[UpcomingCollection]:
    """
    Expands every schedule over the horizon into one date-ordered list.

    The sort is stable, so collections on the same day keep the order of the
    schedules they came from.
    """
    collections = []
    for schedule in list(schedules):
        frequency = describe_frequency(schedule)
        description = _description(schedule)
        location = _location(schedule)
        for occurrence in enumerate_upcoming(schedule, from_instant, horizon_weeks):
            collections.append(
                UpcomingCollection(
                    date=occurrence,
                    bin_type=schedule.category,
                    bin_description=description,
                    frequency=frequency,
                    collection_day=collection_weekday(schedule, occurrence),
                    address=location,
                )
            )
    return sorted(collections, key=lambda c: c.date)


def build_calendar(
    schedules: Iterable[ScheduleEntity], from_instant: Instant, horizon_weeks: int
) -> Dict[date, List[UpcomingCollection]]:
    """Groups the upcoming collections by calendar date, earliest date first."""
    calendar: Dict[date, List[UpcomingCollection]] = {}
    for collection in upcoming_collections(schedules, from_instant, horizon_weeks):
        calendar.setdefault(collection.date, []).append(collection)
    return calendar
