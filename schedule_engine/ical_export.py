"""
This module provides functionality for exporting collection calendars as iCal files.

It uses the icalendar library to build the iCal document.
"""
import logging
import re
from datetime import date
from typing import Dict, List

from icalendar import Calendar, Event

from .config import ICAL_PRODID, ICAL_UID_DOMAIN
from .models import UpcomingCollection

# Get a logger instance for this module
logger = logging.getLogger(__name__)

uid_unsafe_pattern = re.compile(r"[^a-z0-9]+")


def event_uid(collection: UpcomingCollection) -> str:
    """
    Builds a UID that stays the same for the same collection across exports.

    The address is part of the UID, so bins of the same type at different
    addresses never collide.
    """
    label = f"{collection.address} {collection.bin_type} {collection.bin_description}"
    slug = uid_unsafe_pattern.sub("-", label.lower())
    return f"{collection.date:%Y%m%d}-{slug.strip('-')}@{ICAL_UID_DOMAIN}"


def build_ical(calendar: Dict[date, List[UpcomingCollection]], name: str) -> bytes:
    """
    Renders a date-keyed collection calendar as an iCal document.

    Args:
        calendar: Collections grouped by date.
        name: The calendar name shown by calendar clients.

    Returns:
        The serialized iCal content.
    """
    cal = Calendar()
    cal.add("prodid", ICAL_PRODID)
    cal.add("version", "2.0")
    cal.add("x-wr-calname", name)

    count = 0
    for day, collections in calendar.items():
        for collection in collections:
            event = Event()
            event.add("uid", event_uid(collection))
            event.add("dtstart", day)
            event.add("summary", f"{collection.bin_type} bin ({collection.bin_description})")
            event.add("description", collection.frequency)
            cal.add_component(event)
            count += 1

    logger.info(f"Exported {count} collections to iCal calendar '{name}'.")
    return cal.to_ical()
