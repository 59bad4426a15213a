"""
One-way CSV snapshot of the contact store.

Column order differs from the binary layout: Category comes right after Name.
Values with commas, quotes or line breaks are quoted, everything else is
written bare.

File: storage/csv_export.py
Author: Contact Book maintainers
Created: 2026-10-13
Last Modified: 2026-10-16
"""

import csv
import logging
from pathlib import Path
from typing import Iterable, List

from ..models import Contact
from .common import TEXT_ENCODING, SaveResult

log = logging.getLogger(__name__)

CSV_HEADER = ["Name", "Category", "Phone", "Email", "Address", "Birthday", "Notes"]


def contact_to_row(contact: Contact) -> List[str]:
    """Contact fields in CSV column order."""
    return [
        contact.name,
        contact.category,
        contact.phone,
        contact.email,
        contact.address,
        contact.birthday,
        contact.notes,
    ]


def export_csv(path: Path, contacts: Iterable[Contact]) -> SaveResult:
    """
    Write contacts to a CSV file, replacing any existing file.

    Args:
        path: Output file
        contacts: Contacts in store order

    Returns:
        SaveResult with ok=False and the error message if the file could not
        be written
    """
    path = Path(path)
    count = 0

    try:
        with open(path, "w", encoding=TEXT_ENCODING, newline="") as f:
            writer = csv.writer(f, lineterminator="\n")
            writer.writerow(CSV_HEADER)
            for contact in contacts:
                writer.writerow(contact_to_row(contact))
                count += 1
    except (OSError, UnicodeEncodeError) as e:
        log.error(f"Could not create CSV file {path}: {e}")
        return SaveResult(ok=False, path=path, count=0, error=str(e))

    log.info(f"Exported {count} contacts to {path}")
    return SaveResult(ok=True, path=path, count=count)
