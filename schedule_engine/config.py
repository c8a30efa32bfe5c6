"""
This module contains configuration settings for the application.
"""
import os
import logging


def parse_log_level(name: str) -> int:
    """Maps a level name in any case to its number, falling back to INFO."""
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.INFO


# Logging
LOG_LEVEL = parse_log_level(os.environ.get("WASTELESS_LOG_LEVEL", "INFO"))
LOG_DB_PATH = os.environ.get("WASTELESS_LOG_DB_PATH")

# Reminder fires the evening before a collection, from this hour on
REMINDER_HOUR = int(os.environ.get("WASTELESS_REMINDER_HOUR", 17))

# Horizons in weeks
DEFAULT_HORIZON_WEEKS = int(os.environ.get("WASTELESS_DEFAULT_HORIZON_WEEKS", 4))
CALENDAR_HORIZON_WEEKS = int(os.environ.get("WASTELESS_CALENDAR_HORIZON_WEEKS", 8))

# Bulky waste runs quarterly, so a year holds at most four collections
BULKY_WASTE_MAX_OCCURRENCES = 4

# Address suggestions
FUZZY_MATCH_SCORE_CUTOFF = int(os.environ.get("WASTELESS_FUZZY_MATCH_SCORE_CUTOFF", 80))
FUZZY_MATCH_LIMIT = int(os.environ.get("WASTELESS_FUZZY_MATCH_LIMIT", 5))

# Bin types every address must have, with the label used in validation messages
REQUIRED_BIN_TYPES = (
    ("Red", "Red (General Waste)"),
    ("Yellow", "Yellow (Recycling)"),
    ("Green", "Green (Garden Organics)"),
)

# iCalendar export
ICAL_PRODID = "-//WasteLess//Collection Calendar//EN"
ICAL_UID_DOMAIN = "wasteless.local"
