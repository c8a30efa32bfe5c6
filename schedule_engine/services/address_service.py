"""
This module defines the AddressService for suggesting known addresses.
"""
import logging
from typing import List

from thefuzz import process

from ..config import FUZZY_MATCH_LIMIT, FUZZY_MATCH_SCORE_CUTOFF
from .schedule_repository import InMemoryScheduleRepository

# Get a logger instance for this module
logger = logging.getLogger(__name__)


class AddressService:
    """Handles address matching against the schedule directory."""

    def __init__(
        self,
        repository: InMemoryScheduleRepository,
        score_cutoff: int = FUZZY_MATCH_SCORE_CUTOFF,
        limit: int = FUZZY_MATCH_LIMIT,
    ):
        """
        Initializes the AddressService.

        Args:
            repository: The schedule directory to take known addresses from.
            score_cutoff: Minimum fuzzy score (0-100) for a suggestion.
            limit: Maximum number of fuzzy suggestions.
        """
        self.repository = repository
        self.score_cutoff = score_cutoff
        self.limit = limit

    def find_address_matches(self, query: str) -> List[str]:
        """
        Finds known addresses for a query, first trying an exact match,
        then a substring match, then falling back to fuzzy matching.
        """
        if not query or not query.strip():
            return []

        normalized = query.lower().strip()
        addresses = self.repository.list_addresses()

        exact = [a for a in addresses if a.lower() == normalized]
        if exact:
            return exact

        partial = [a for a in addresses if normalized in a.lower()]
        if partial:
            return partial

        matches = process.extractBests(
            query, addresses, limit=self.limit, score_cutoff=self.score_cutoff
        )
        if not matches:
            logger.info(f"No address suggestions for '{query}'.")
            return []

        logger.info(f"Found {len(matches)} fuzzy address matches for '{query}'.")
        return [match for match, score in matches]
