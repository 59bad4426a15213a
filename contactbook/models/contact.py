"""
Contact record model.

File: models/contact.py
Author: Contact Book maintainers
Created: 2026-10-12
Last Modified: 2026-10-16
"""

from enum import Enum
from typing import List, Sequence

from pydantic import BaseModel, ConfigDict, Field


class Category(str, Enum):
    """Fixed set of contact classifications."""

    PERSONAL = "Personal"
    WORK = "Work"
    FAMILY = "Family"
    OTHER = "Other"


DEFAULT_CATEGORY = Category.PERSONAL.value

# Persistence and CSV order depend on this tuple, do not reorder
FIELD_ORDER = ("name", "phone", "email", "address", "birthday", "notes", "category")


class Contact(BaseModel):
    """
    One address-book entry.

    Format rules (phone, email, birthday, category) are enforced by the
    validators in ``models.validation`` when records are written, not here.
    Records read back from disk are accepted as-is.
    """
    model_config = ConfigDict(validate_assignment=True, extra="ignore")

    name: str = Field(..., description="Display name, not guaranteed unique")
    phone: str = Field("", description="International phone number, 8-15 digits")
    email: str = Field("", description="Email address (local@domain.tld)")
    address: str = Field("", description="Free-form postal address")
    birthday: str = Field("", description="DD/MM/YYYY, empty when unset")
    notes: str = Field("", description="Free-form notes")
    category: str = Field(DEFAULT_CATEGORY, description="Personal, Work, Family or Other")

    def fields_in_order(self) -> List[str]:
        """Return the seven field values in persistence order."""
        return [getattr(self, name) for name in FIELD_ORDER]

    @classmethod
    def from_fields(cls, values: Sequence[str]) -> "Contact":
        """Build a Contact from seven values in persistence order."""
        if len(values) != len(FIELD_ORDER):
            raise ValueError(
                f"Expected {len(FIELD_ORDER)} field values, got {len(values)}"
            )
        return cls(**dict(zip(FIELD_ORDER, values)))
