"""
Command API over the contact store.

``ContactBook`` is the session object the front end talks to. It owns the
in-memory store, validates input before it is written, and flushes the store
to disk after every change. Problems come back as ``CommandResult`` values;
nothing here raises on bad input or I/O failure.

Usage:
    >>> with ContactBook.open(BookConfig.from_env()) as book:
    ...     book.add_contact(name="Ada", phone="+441234567890", email="ada@example.org")

File: commands/book.py
Author: Contact Book maintainers
Created: 2026-10-13
Last Modified: 2026-10-18
"""

import logging
from datetime import date
from pathlib import Path
from typing import Callable, List, Optional

from ..config import BookConfig
from ..models import (
    DEFAULT_CATEGORY,
    FIELD_ORDER,
    Contact,
    is_valid_category,
    is_valid_date,
    is_valid_email,
    is_valid_phone,
    validate_contact_fields,
)
from ..storage import LoadResult, SaveResult, export_csv, load_contacts, save_contacts
from ..store import ContactStore
from .results import CommandResult, Status

log = logging.getLogger(__name__)

VALIDATION_MESSAGES = {
    "name": "Name cannot be empty!",
    "phone": "Invalid phone number format! Please enter 8-15 digits with optional '+' at start.",
    "email": "Invalid email format! Please enter a valid email address (e.g., user@domain.com).",
    "birthday": "Invalid date format! Please use DD/MM/YYYY format or leave empty.",
    "category": "Invalid category! Please choose from: Personal, Work, Family, or Other.",
}

NOT_SAVED_WARNING = "Your changes may not have been saved!"


def parse_confirmation(answer: str) -> bool:
    """Only 'y' or 'Y' confirm a destructive action."""
    return answer in ("y", "Y")


class ContactBook:
    """
    One address-book session: ``open -> commands* -> close``.

    Args:
        config: File locations
        store: Initial contents; normally supplied by ``open``
        today: Clock used for birthday validation
    """

    def __init__(
        self,
        config: BookConfig,
        store: Optional[ContactStore] = None,
        today: Callable[[], date] = date.today,
    ):
        self.config = config
        self.store = store if store is not None else ContactStore()
        self.today = today
        self.load_result: Optional[LoadResult] = None

    @classmethod
    def open(cls, config: BookConfig, today: Callable[[], date] = date.today) -> "ContactBook":
        """Load the store file (or start empty) and return a ready session."""
        result = load_contacts(config.data_path)
        book = cls(config, ContactStore(result.contacts), today=today)
        book.load_result = result
        return book

    def close(self) -> SaveResult:
        """Final flush at the end of the session."""
        return self.flush()

    def __enter__(self) -> "ContactBook":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def flush(self) -> SaveResult:
        return save_contacts(self.config.data_path, self.store)

    # --- Queries ------------------------------------------------------------

    def list_contacts(self) -> List[Contact]:
        return self.store.all()

    def search(self, text: str) -> List[Contact]:
        """Contacts whose name contains ``text`` (case-sensitive)."""
        return self.store.find_containing(text)

    def filter_by_category(self, category: str) -> List[Contact]:
        return self.store.filter_by_category(category)

    def find(self, name: str) -> Optional[Contact]:
        return self.store.find_by_name(name)

    # --- Mutations ----------------------------------------------------------

    def add_contact(
        self,
        name: str,
        phone: str,
        email: str,
        address: str = "",
        birthday: str = "",
        notes: str = "",
        category: str = "",
    ) -> CommandResult:
        """
        Validate and append a new contact, then flush.

        A blank category becomes Personal.

        Returns:
            OK with the new contact, or VALIDATION_ERROR naming the first bad
            field
        """
        fields = {
            "name": name,
            "phone": phone,
            "email": email,
            "address": address,
            "birthday": birthday,
            "notes": notes,
            "category": category or DEFAULT_CATEGORY,
        }
        bad_field = validate_contact_fields(fields, current_year=self._current_year())
        if bad_field is not None:
            log.info(f"Rejected new contact: invalid {bad_field}")
            return CommandResult.validation_error(bad_field, VALIDATION_MESSAGES[bad_field])

        contact = Contact(**fields)
        self.store.add(contact)
        return self._flushed(CommandResult(Status.OK, "Contact added successfully!", contact=contact))

    def edit_contact(self, name: str, /, **fields: str) -> CommandResult:
        """
        Update the first contact named ``name``.

        Empty values keep the current field. Every non-empty value is
        validated before anything is changed.

        Returns:
            OK with the updated contact, NOT_FOUND, or VALIDATION_ERROR
        """
        unknown = set(fields) - set(FIELD_ORDER)
        if unknown:
            raise ValueError(f"Unknown contact fields: {', '.join(sorted(unknown))}")

        if not self.store:
            return CommandResult.not_found("No contacts to edit!")
        if self.store.find_by_name(name) is None:
            return CommandResult.not_found()

        bad_field = self._first_invalid_update(fields)
        if bad_field is not None:
            log.info(f"Rejected edit of '{name}': invalid {bad_field}")
            return CommandResult.validation_error(bad_field, VALIDATION_MESSAGES[bad_field])

        contact = self.store.update(name, **fields)
        return self._flushed(CommandResult(Status.OK, "Contact updated successfully!", contact=contact))

    def delete_contact(self, name: str, confirmed: bool) -> CommandResult:
        """
        Remove the first contact named ``name`` if ``confirmed``.

        Returns:
            OK with the removed contact, NOT_FOUND, or CANCELLED
        """
        if not self.store:
            return CommandResult.not_found("No contacts to delete!")
        if self.store.find_by_name(name) is None:
            return CommandResult.not_found()
        if not confirmed:
            return CommandResult(Status.CANCELLED, "Deletion cancelled.")

        contact = self.store.remove(name)
        return self._flushed(CommandResult(Status.OK, "Contact deleted successfully!", contact=contact))

    def sort_by_name(self) -> CommandResult:
        self.store.sort_by_name()
        return self._flushed(CommandResult(Status.OK, "Contacts sorted by name!"))

    def export_csv(self, path: Optional[Path] = None) -> CommandResult:
        """Write a CSV snapshot to ``path`` (default: configured csv_path)."""
        target = Path(path) if path is not None else self.config.csv_path
        result = export_csv(target, self.store)
        if not result.ok:
            return CommandResult(Status.IO_ERROR, f"Error: Could not create CSV file! ({result.error})")
        return CommandResult(
            Status.OK,
            f"Contacts exported to '{target}' successfully!",
            saved=True,
        )

    # --- Internal helpers ---------------------------------------------------

    def _current_year(self) -> int:
        return self.today().year

    def _first_invalid_update(self, fields: dict) -> Optional[str]:
        checks = (
            ("phone", is_valid_phone),
            ("email", is_valid_email),
            ("birthday", lambda v: is_valid_date(v, self._current_year())),
            ("category", is_valid_category),
        )
        for field_name, predicate in checks:
            value = fields.get(field_name)
            if value and not predicate(value):
                return field_name
        return None

    def _flushed(self, result: CommandResult) -> CommandResult:
        saved = self.flush()
        result.saved = saved.ok
        if not saved.ok:
            result.message = f"{result.message} {NOT_SAVED_WARNING}".strip()
        return result
