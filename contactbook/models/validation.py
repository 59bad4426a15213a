"""
Field validators for contact records.

All predicates are total: any input (including non-string values, empty
strings and control characters) yields True or False, never an exception.

``is_valid_date`` depends on the current calendar year. Callers that need a
deterministic answer (tests, replays) pass ``current_year`` explicitly.

File: models/validation.py
Author: Contact Book maintainers
Created: 2026-10-12
Last Modified: 2026-10-16
"""

import re
from datetime import date
from typing import Any, Mapping, Optional

from .contact import Category

# ASCII-only digit classes so that e.g. Arabic-Indic digits are rejected
PHONE_PATTERN = re.compile(r"\+?[1-9][0-9]{7,14}")
EMAIL_PATTERN = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")
DATE_PATTERN = re.compile(r"(0[1-9]|[12][0-9]|3[01])/(0[1-9]|1[0-2])/([0-9]{4})")

DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

VALID_CATEGORIES = frozenset(c.value for c in Category)


def is_leap_year(year: int) -> bool:
    """Gregorian leap year rule."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def is_valid_phone(text: Any) -> bool:
    """
    Check an international phone number.

    Optional leading '+', then 8-15 digits with a non-zero first digit.

    Examples:
        >>> is_valid_phone("+123456789012345")
        True
        >>> is_valid_phone("+1234567")
        False
        >>> is_valid_phone("0123456789")
        False
    """
    if not isinstance(text, str):
        return False
    return PHONE_PATTERN.fullmatch(text) is not None


def is_valid_email(text: Any) -> bool:
    """Check a simplified local@domain.tld address."""
    if not isinstance(text, str):
        return False
    return EMAIL_PATTERN.fullmatch(text) is not None


def is_valid_date(text: Any, current_year: Optional[int] = None) -> bool:
    """
    Check a DD/MM/YYYY birthday.

    Args:
        text: Candidate date. Empty string means "no birthday" and is valid.
        current_year: Latest acceptable year. Defaults to the local calendar
            year at call time, which makes the result time-dependent.

    Returns:
        True if the date is empty or a real calendar date not after
        ``current_year``
    """
    if not isinstance(text, str):
        return False
    if text == "":
        return True

    match = DATE_PATTERN.fullmatch(text)
    if match is None:
        return False

    day, month, year = (int(part) for part in match.groups())

    if current_year is None:
        current_year = date.today().year
    if year > current_year:
        return False

    max_day = DAYS_IN_MONTH[month - 1]
    if month == 2 and is_leap_year(year):
        max_day = 29
    return day <= max_day


def is_valid_category(text: Any) -> bool:
    """Case-sensitive membership test against the four categories."""
    return isinstance(text, str) and text in VALID_CATEGORIES


def validate_contact_fields(
    fields: Mapping[str, Any],
    current_year: Optional[int] = None,
) -> Optional[str]:
    """
    Find the first invalid field of a complete contact.

    Args:
        fields: Mapping with at least name, phone, email; birthday and
            category are checked when present
        current_year: Passed through to ``is_valid_date``

    Returns:
        Name of the first failing field, or None when every field is valid
    """
    name = fields.get("name")
    if not isinstance(name, str) or name == "":
        return "name"
    if not is_valid_phone(fields.get("phone")):
        return "phone"
    if not is_valid_email(fields.get("email")):
        return "email"
    if not is_valid_date(fields.get("birthday", ""), current_year):
        return "birthday"
    if "category" in fields and not is_valid_category(fields["category"]):
        return "category"
    return None
