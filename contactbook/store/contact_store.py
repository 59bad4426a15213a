"""
In-memory contact store.

Ordered list of contacts with linear-scan lookups. Duplicate names are
allowed; operations keyed by name act on the first match only. The store
never touches the disk, flushing is the caller's job.

File: store/contact_store.py
Author: Contact Book maintainers
Created: 2026-10-12
Last Modified: 2026-10-18
"""

import logging
from typing import Iterable, Iterator, List, Optional

from ..models import Contact, FIELD_ORDER

log = logging.getLogger(__name__)


class ContactStore:
    """Ordered collection of Contacts for the current session."""

    def __init__(self, contacts: Optional[Iterable[Contact]] = None):
        self._contacts: List[Contact] = list(contacts) if contacts else []

    def __len__(self) -> int:
        return len(self._contacts)

    def __iter__(self) -> Iterator[Contact]:
        return iter(self._contacts)

    def __bool__(self) -> bool:
        return bool(self._contacts)

    def all(self) -> List[Contact]:
        """Snapshot of every contact in store order."""
        return list(self._contacts)

    def add(self, contact: Contact) -> None:
        """Append a contact. No validation is done here."""
        self._contacts.append(contact)
        log.debug(f"Added contact '{contact.name}' ({len(self._contacts)} total)")

    def find_by_name(self, name: str) -> Optional[Contact]:
        """Return the first contact whose name equals ``name`` exactly."""
        index = self._index_of(name)
        return self._contacts[index] if index is not None else None

    def find_containing(self, substring: str) -> List[Contact]:
        """Case-sensitive substring search on names, store order preserved."""
        return [c for c in self._contacts if substring in c.name]

    def filter_by_category(self, category: str) -> List[Contact]:
        """Contacts whose category matches exactly."""
        return [c for c in self._contacts if c.category == category]

    def update(self, name: str, /, **fields: Optional[str]) -> Optional[Contact]:
        """
        Overwrite fields of the first contact named ``name``.

        Empty or None values leave the existing field unchanged.

        Args:
            name: Exact name of the contact to update
            **fields: Any of the seven contact fields

        Returns:
            The updated contact, or None if no contact has that name
        """
        unknown = set(fields) - set(FIELD_ORDER)
        if unknown:
            raise ValueError(f"Unknown contact fields: {', '.join(sorted(unknown))}")

        contact = self.find_by_name(name)
        if contact is None:
            return None

        for field_name in FIELD_ORDER:
            value = fields.get(field_name)
            if value:
                setattr(contact, field_name, value)
        return contact

    def remove(self, name: str) -> Optional[Contact]:
        """Remove and return the first contact named ``name``."""
        index = self._index_of(name)
        if index is None:
            return None
        return self._contacts.pop(index)

    def sort_by_name(self) -> None:
        """Stable ascending sort by code point order of the name."""
        self._contacts.sort(key=lambda c: c.name)

    def _index_of(self, name: str) -> Optional[int]:
        for i, contact in enumerate(self._contacts):
            if contact.name == name:
                return i
        return None
