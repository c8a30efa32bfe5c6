"""
This module defines custom exceptions for the collection schedule engine.
"""


class InvalidArgumentError(ValueError):
    """Raised when a required schedule argument is missing or malformed."""

    pass


class DuplicateIdentifierError(InvalidArgumentError):
    """Raised when an entity that already has an identifier is added again."""

    pass
