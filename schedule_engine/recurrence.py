"""
This module computes the occurrences of recurring collection schedules.

It provides the next-occurrence calculation and the bounded enumeration of
upcoming occurrences for both schedule variants. All functions are pure:
they only read the schedule and the reference instant they are given.
"""

from datetime import date, datetime, time, timedelta
from typing import List, Optional, Union

from dateutil.relativedelta import relativedelta

from .config import BULKY_WASTE_MAX_OCCURRENCES
from .exceptions import InvalidArgumentError
from .models import BulkyWaste, CollectionFrequency, RecurringBin, ScheduleEntity

Instant = Union[datetime, date]

BULKY_WASTE_INTERVAL = relativedelta(months=3)

_INTERVALS = {
    CollectionFrequency.WEEKLY: relativedelta(days=7),
    CollectionFrequency.FORTNIGHTLY: relativedelta(days=14),
    CollectionFrequency.MONTHLY: relativedelta(months=1),
    CollectionFrequency.QUARTERLY: relativedelta(months=3),
}


def as_datetime(instant: Instant) -> datetime:
    """
    Normalizes a reference instant to a naive local datetime.

    A plain date is read as midnight of that day. Time zone information is
    dropped, all arithmetic happens on a single local calendar.
    """
    if isinstance(instant, datetime):
        return instant.replace(tzinfo=None)
    if isinstance(instant, date):
        return datetime.combine(instant, time.min)
    raise InvalidArgumentError(f"Expected a date or datetime, got {type(instant).__name__}")


def _start_of(day: date) -> datetime:
    return datetime.combine(day, time.min)


def interval_of(schedule: ScheduleEntity) -> relativedelta:
    """Returns the spacing between two consecutive occurrences of a schedule."""
    if isinstance(schedule, RecurringBin):
        return _INTERVALS[schedule.frequency]
    if isinstance(schedule, BulkyWaste):
        return BULKY_WASTE_INTERVAL
    raise InvalidArgumentError(f"Unsupported schedule type: {type(schedule).__name__}")


def _next_weekday(schedule: RecurringBin, from_dt: datetime) -> date:
    delta = (schedule.collection_day - from_dt.weekday() + 7) % 7
    # Later on the collection day itself counts as already collected
    if delta == 0 and from_dt.time() != time.min:
        delta = 7
    return from_dt.date() + timedelta(days=delta)


def _next_quarter(schedule: BulkyWaste, from_dt: datetime) -> date:
    candidate = schedule.next_collection_date
    while _start_of(candidate) <= from_dt:
        candidate = candidate + BULKY_WASTE_INTERVAL
    return candidate


def compute_next(schedule: Optional[ScheduleEntity], from_instant: Instant) -> date:
    """
    Calculates the next date a schedule fires on or after a reference instant.

    For a recurring bin this is the nearest date on its collection weekday,
    regardless of the interval: midnight on the collection day returns that
    day, any later time on it returns the following week. For bulky waste the
    anchor date is stepped forward by quarters until it lies strictly after
    the reference instant.

    Args:
        schedule: The schedule to evaluate.
        from_instant: The reference date or datetime.

    Returns:
        The next collection date.

    Raises:
        InvalidArgumentError: If no schedule is given.
    """
    if schedule is None:
        raise InvalidArgumentError("A schedule is required to calculate the next collection.")

    from_dt = as_datetime(from_instant)
    if isinstance(schedule, RecurringBin):
        return _next_weekday(schedule, from_dt)
    if isinstance(schedule, BulkyWaste):
        return _next_quarter(schedule, from_dt)
    raise InvalidArgumentError(f"Unsupported schedule type: {type(schedule).__name__}")


def enumerate_upcoming(
    schedule: Optional[ScheduleEntity], from_instant: Instant, horizon_weeks: int
) -> List[date]:
    """
    Lists the occurrences of a schedule within a horizon.

    The sequence starts at ``compute_next`` and advances by the schedule's
    interval while the date is no later than ``from_instant`` plus the horizon.
    Bulky waste is additionally capped at four occurrences. A horizon of zero
    weeks or less yields an empty list.
    """
    if schedule is None:
        raise InvalidArgumentError("A schedule is required to list upcoming collections.")
    if horizon_weeks <= 0:
        return []

    from_dt = as_datetime(from_instant)
    end = from_dt + timedelta(weeks=horizon_weeks)
    step = interval_of(schedule)
    limit = BULKY_WASTE_MAX_OCCURRENCES if isinstance(schedule, BulkyWaste) else None

    occurrences = []
    current = compute_next(schedule, from_dt)
    while _start_of(current) <= end:
        if limit is not None and len(occurrences) >= limit:
            break
        occurrences.append(current)
        current = current + step
    return occurrences


def describe_frequency(schedule: ScheduleEntity) -> str:
    """Returns a display label for how often a schedule fires."""
    if isinstance(schedule, RecurringBin):
        return schedule.frequency.value
    if isinstance(schedule, BulkyWaste):
        if schedule.requires_booking:
            return "Quarterly - Booking Required"
        return "Quarterly"
    raise InvalidArgumentError(f"Unsupported schedule type: {type(schedule).__name__}")


def collection_weekday(schedule: ScheduleEntity, occurrence: date) -> str:
    """Returns the weekday name a schedule is collected on."""
    if isinstance(schedule, RecurringBin):
        return schedule.collection_day.label
    return f"{occurrence:%A}"
