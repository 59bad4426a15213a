"""
Console rendering of contacts.

File: cli/formatting.py
Author: Contact Book maintainers
Created: 2026-10-14
Last Modified: 2026-10-18
"""

import logging
from typing import List

import phonenumbers
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..models import Contact

log = logging.getLogger(__name__)


def format_phone_for_display(phone: str, default_region: str = "US") -> str:
    """
    Pretty-print a stored phone number in international format.

    The stored value is returned unchanged when phonenumbers cannot make
    sense of it.

    Examples:
        >>> format_phone_for_display("+442071234567")
        '+44 20 7123 4567'
        >>> format_phone_for_display("")
        ''
    """
    if not phone:
        return ""

    try:
        parsed = phonenumbers.parse(phone, default_region)
    except phonenumbers.NumberParseException as e:
        log.debug(f"Could not parse phone number '{phone}': {e}")
        return phone

    if not phonenumbers.is_possible_number(parsed):
        return phone
    return phonenumbers.format_number(parsed, phonenumbers.PhoneNumberFormat.INTERNATIONAL)


def contact_panel(contact: Contact, default_region: str = "US") -> Panel:
    """Detail card for one contact."""
    table = Table(box=None, show_header=False, padding=(0, 1))
    table.add_column("Field", style="cyan", width=9)
    table.add_column("Value", style="white")

    table.add_row("Name", f"[bold]{escape(contact.name)}[/]")
    table.add_row("Category", escape(contact.category))
    table.add_row("Phone", escape(format_phone_for_display(contact.phone, default_region)))
    table.add_row("Email", escape(contact.email))
    table.add_row("Address", escape(contact.address))
    table.add_row("Birthday", escape(contact.birthday))
    table.add_row("Notes", escape(contact.notes))

    return Panel(table, title="Contact Details", title_align="left", border_style="dim")


def contacts_table(contacts: List[Contact], default_region: str = "US") -> Table:
    """Compact one-row-per-contact overview."""
    table = Table(box=box.ROUNDED, show_header=True, header_style="bold")
    table.add_column("#", style="dim", width=4)
    table.add_column("Name", style="cyan")
    table.add_column("Phone", style="white")
    table.add_column("Email", style="white")
    table.add_column("Category", style="yellow")

    for i, contact in enumerate(contacts, 1):
        table.add_row(
            str(i),
            escape(contact.name),
            escape(format_phone_for_display(contact.phone, default_region)),
            escape(contact.email),
            escape(contact.category),
        )
    return table


def show_contacts(
    console: Console,
    contacts: List[Contact],
    title: str,
    default_region: str = "US",
    details: bool = True,
) -> None:
    """Print an overview table, followed by a card per contact if ``details``."""
    console.print(f"\n[bold]{title}[/]")
    console.print(contacts_table(contacts, default_region))
    if details:
        for contact in contacts:
            console.print(contact_panel(contact, default_region))
