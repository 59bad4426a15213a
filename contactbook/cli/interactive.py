"""
Interactive menu for the contact book.

Prompts for input, re-asks until a field is valid, and hands everything to
``ContactBook``. All persistence and validation rules live in the command
API; this module only talks to the user.

File: cli/interactive.py
Author: Contact Book maintainers
Created: 2026-10-14
Last Modified: 2026-10-18
"""

import logging
from typing import Callable, Dict, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from ..commands import VALIDATION_MESSAGES, CommandResult, ContactBook, Status, parse_confirmation
from ..models import (
    DEFAULT_CATEGORY,
    is_valid_category,
    is_valid_date,
    is_valid_email,
    is_valid_phone,
)
from .formatting import show_contacts

log = logging.getLogger(__name__)

MENU_OPTIONS = {
    "1": "Add Contact",
    "2": "View All Contacts",
    "3": "Search Contact",
    "4": "Edit Contact",
    "5": "Delete Contact",
    "6": "Sort Contacts by Name",
    "7": "Filter Contacts by Category",
    "8": "Export Contacts to CSV",
    "9": "Exit",
}


def show_menu(console: Console):
    """Display the main menu."""
    console.print()
    console.print(
        Panel.fit(
            "[bold cyan]Contact Management System[/]",
            border_style="cyan",
        )
    )

    table = Table(box=box.ROUNDED, show_header=False)
    table.add_column("Option", style="cyan", width=4)
    table.add_column("Action", style="white")

    for key, name in MENU_OPTIONS.items():
        table.add_row(key, name)

    console.print(table)


def ask_until_valid(
    console: Console,
    label: str,
    is_valid: Callable[[str], bool],
    error: str,
    allow_empty: bool = False,
) -> str:
    """Prompt repeatedly until ``is_valid`` accepts the answer."""
    while True:
        value = Prompt.ask(label, default="", show_default=False)
        if allow_empty and value == "":
            return value
        if is_valid(value):
            return value
        console.print(f"[red]{error}[/]")


def report(console: Console, result: CommandResult):
    """Print a command result in the colour matching its status."""
    if result.status is Status.OK:
        style = "green" if result.saved else "yellow"
    elif result.status is Status.CANCELLED:
        style = "dim"
    else:
        style = "red"
    console.print(f"[{style}]{escape(result.message)}[/]")


def add_contact(book: ContactBook, console: Console):
    """Prompt for a new contact and store it."""
    current_year = book.today().year

    name = ask_until_valid(console, "Enter Name", lambda v: v != "", "Name cannot be empty! Please try again.")
    phone = ask_until_valid(console, "Enter Phone Number (E.g., +1234567890)", is_valid_phone, VALIDATION_MESSAGES["phone"])
    email = ask_until_valid(console, "Enter Email", is_valid_email, VALIDATION_MESSAGES["email"])
    address = Prompt.ask("Enter Address (optional)", default="", show_default=False)
    birthday = ask_until_valid(
        console,
        "Enter Birthday (DD/MM/YYYY) (optional - press Enter to skip)",
        lambda v: is_valid_date(v, current_year),
        VALIDATION_MESSAGES["birthday"],
        allow_empty=True,
    )
    notes = Prompt.ask("Enter Notes (optional)", default="", show_default=False)
    category = ask_until_valid(
        console,
        "Enter Category (Personal/Work/Family/Other)",
        is_valid_category,
        VALIDATION_MESSAGES["category"],
        allow_empty=True,
    ) or DEFAULT_CATEGORY

    result = book.add_contact(
        name=name,
        phone=phone,
        email=email,
        address=address,
        birthday=birthday,
        notes=notes,
        category=category,
    )
    report(console, result)


def view_contacts(book: ContactBook, console: Console):
    contacts = book.list_contacts()
    if not contacts:
        console.print("[dim]No contacts found![/]")
        return
    show_contacts(console, contacts, "Contact List", book.config.default_region)


def search_contacts(book: ContactBook, console: Console):
    if not book.list_contacts():
        console.print("[dim]No contacts to search![/]")
        return

    term = Prompt.ask("Enter name to search", default="", show_default=False)
    matches = book.search(term)
    if not matches:
        console.print("[dim]No matching contacts found![/]")
        return
    show_contacts(console, matches, "Search Results", book.config.default_region)


def edit_contact(book: ContactBook, console: Console):
    """Prompt for replacement values; Enter keeps the current one."""
    if not book.list_contacts():
        console.print("[dim]No contacts to edit![/]")
        return

    name = Prompt.ask("Enter name of contact to edit", default="", show_default=False)
    if book.find(name) is None:
        console.print("[red]Contact not found![/]")
        return

    current_year = book.today().year
    keep = " (press enter to keep current)"
    updates: Dict[str, str] = {
        "name": Prompt.ask(f"Enter new name{keep}", default="", show_default=False),
        "phone": ask_until_valid(console, f"Enter new phone{keep}", is_valid_phone, VALIDATION_MESSAGES["phone"], allow_empty=True),
        "email": ask_until_valid(console, f"Enter new email{keep}", is_valid_email, VALIDATION_MESSAGES["email"], allow_empty=True),
        "address": Prompt.ask(f"Enter new address{keep}", default="", show_default=False),
        "birthday": ask_until_valid(
            console,
            f"Enter new birthday{keep}",
            lambda v: is_valid_date(v, current_year),
            VALIDATION_MESSAGES["birthday"],
            allow_empty=True,
        ),
        "notes": Prompt.ask(f"Enter new notes{keep}", default="", show_default=False),
        "category": ask_until_valid(console, f"Enter new category{keep}", is_valid_category, VALIDATION_MESSAGES["category"], allow_empty=True),
    }

    report(console, book.edit_contact(name, **updates))


def delete_contact(book: ContactBook, console: Console):
    if not book.list_contacts():
        console.print("[dim]No contacts to delete![/]")
        return

    name = Prompt.ask("Enter name of contact to delete", default="", show_default=False)
    if book.find(name) is None:
        console.print("[red]Contact not found![/]")
        return

    answer = Prompt.ask("Are you sure you want to delete this contact? (y/n)", default="", show_default=False)
    report(console, book.delete_contact(name, confirmed=parse_confirmation(answer)))


def sort_contacts(book: ContactBook, console: Console):
    report(console, book.sort_by_name())


def filter_contacts(book: ContactBook, console: Console):
    if not book.list_contacts():
        console.print("[dim]No contacts to filter![/]")
        return

    category = Prompt.ask("Enter category to filter (Personal/Work/Family/Other)", default="", show_default=False)
    matches = book.filter_by_category(category)
    if not matches:
        console.print(f"[dim]No contacts found in category '{escape(category)}'![/]")
        return
    show_contacts(console, matches, f"Contacts in category '{escape(category)}'", book.config.default_region)


def export_contacts(book: ContactBook, console: Console):
    report(console, book.export_csv())


ACTIONS: Dict[str, Callable[[ContactBook, Console], None]] = {
    "1": add_contact,
    "2": view_contacts,
    "3": search_contacts,
    "4": edit_contact,
    "5": delete_contact,
    "6": sort_contacts,
    "7": filter_contacts,
    "8": export_contacts,
}


def run_menu(book: ContactBook, console: Optional[Console] = None) -> int:
    """
    Main interaction loop.

    Returns:
        Process exit code (always 0)
    """
    console = console or Console()

    while True:
        try:
            show_menu(console)
            choice = Prompt.ask(
                "Enter your choice",
                choices=list(MENU_OPTIONS.keys()),
                show_choices=False,
            )
        except (EOFError, KeyboardInterrupt):
            console.print("\n[dim]Goodbye![/]")
            return 0

        if choice == "9":
            console.print("\n[bold]Thank you for using Contact Management System![/]")
            console.print("[dim]Goodbye![/]")
            return 0

        try:
            ACTIONS[choice](book, console)
        except (EOFError, KeyboardInterrupt):
            console.print("\n[dim]Cancelled.[/]")
