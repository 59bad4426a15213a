"""
Command API used by the front end.
"""

from .book import ContactBook, VALIDATION_MESSAGES, parse_confirmation
from .results import CommandResult, Status

__all__ = [
    "ContactBook",
    "VALIDATION_MESSAGES",
    "parse_confirmation",
    "CommandResult",
    "Status",
]
