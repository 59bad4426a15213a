"""
Record model for the contact book: the Contact shape and its validators.
"""

from .contact import Category, Contact, DEFAULT_CATEGORY, FIELD_ORDER
from .validation import (
    is_leap_year,
    is_valid_category,
    is_valid_date,
    is_valid_email,
    is_valid_phone,
    validate_contact_fields,
)

__all__ = [
    "Category",
    "Contact",
    "DEFAULT_CATEGORY",
    "FIELD_ORDER",
    "is_leap_year",
    "is_valid_category",
    "is_valid_date",
    "is_valid_email",
    "is_valid_phone",
    "validate_contact_fields",
]
