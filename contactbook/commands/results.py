"""
Result values returned by the command API.

File: commands/results.py
Author: Contact Book maintainers
Created: 2026-10-13
Last Modified: 2026-10-15
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..models import Contact


class Status(str, Enum):
    OK = "ok"
    VALIDATION_ERROR = "validation_error"
    NOT_FOUND = "not_found"
    CANCELLED = "cancelled"
    IO_ERROR = "io_error"


@dataclass
class CommandResult:
    """Outcome of one command."""

    status: Status
    message: str = ""
    field: Optional[str] = None  # Set for VALIDATION_ERROR
    contact: Optional[Contact] = None
    saved: bool = False  # Whether the follow-up flush reached the disk

    @property
    def ok(self) -> bool:
        return self.status is Status.OK

    @classmethod
    def validation_error(cls, field: str, message: str) -> "CommandResult":
        return cls(Status.VALIDATION_ERROR, message=message, field=field)

    @classmethod
    def not_found(cls, message: str = "Contact not found!") -> "CommandResult":
        return cls(Status.NOT_FOUND, message=message)
