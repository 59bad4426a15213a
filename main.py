"""
Main entry point for the Contact Book.

Interactive menu by default; a single action can also be run directly:

Usage:
    >>> python main.py
    >>> python main.py list
    >>> python main.py search Ali
    >>> python main.py export --csv out/contacts.csv
    >>> python main.py --data-file ~/contacts.dat filter Work

File: main.py
Author: Contact Book maintainers
Created: 2026-10-14
Last Modified: 2026-10-18
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape

from contactbook import __version__
from contactbook.cli import run_menu, show_contacts
from contactbook.cli.interactive import report
from contactbook.commands import ContactBook
from contactbook.config import BookConfig
from contactbook.logging_setup import configure_logging

console = Console()
log = logging.getLogger(__name__)

COMMANDS = ("list", "search", "filter", "sort", "export")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Contact Management System")
    parser.add_argument(
        "command",
        nargs="?",
        choices=COMMANDS,
        help="Run a single action instead of the interactive menu",
    )
    parser.add_argument(
        "argument",
        nargs="?",
        default="",
        help="Search text (search) or category (filter)",
    )
    parser.add_argument(
        "--data-file",
        type=str,
        help="Path to the binary contacts file (default: contacts.dat)",
    )
    parser.add_argument(
        "--csv",
        type=str,
        help="Output path for export (default: contacts.csv)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Also print log records to the terminal",
    )
    return parser


def run_command(book: ContactBook, command: str, argument: str = "", csv_path: Optional[str] = None) -> int:
    """Run one non-interactive action against an open book."""
    region = book.config.default_region

    if command == "list":
        contacts = book.list_contacts()
        if not contacts:
            console.print("[dim]No contacts found![/]")
        else:
            show_contacts(console, contacts, "Contact List", region, details=False)
    elif command == "search":
        matches = book.search(argument)
        if not matches:
            console.print("[dim]No matching contacts found![/]")
        else:
            show_contacts(console, matches, "Search Results", region, details=False)
    elif command == "filter":
        matches = book.filter_by_category(argument)
        if not matches:
            console.print(f"[dim]No contacts found in category '{escape(argument)}'![/]")
        else:
            show_contacts(console, matches, f"Contacts in category '{escape(argument)}'", region, details=False)
    elif command == "sort":
        report(console, book.sort_by_name())
    elif command == "export":
        report(console, book.export_csv(Path(csv_path) if csv_path else None))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point with interactive menu."""
    load_dotenv()
    args = build_parser().parse_args(argv)

    config = BookConfig.from_env()
    if args.data_file:
        config.data_path = Path(args.data_file).expanduser()

    log_file = configure_logging(config.log_dir, config.log_level, console=args.verbose)
    log.info(f"Starting contact book {__version__} with {config.to_dict()}")

    book = ContactBook.open(config)

    loaded = book.load_result
    if loaded is not None and loaded.corrupted:
        console.print(f"[red]Error loading from file:[/] {escape(loaded.error or '')}")
        if loaded.backup_path:
            console.print(f"[yellow]The contacts file might be corrupted. Backup created as {escape(str(loaded.backup_path))}[/]")
        else:
            console.print("[yellow]The contacts file might be corrupted and no backup could be made.[/]")
        console.print("[dim]Starting with an empty address book.[/]")
    elif book.list_contacts():
        console.print(f"[dim]Loaded {len(book.list_contacts())} contacts successfully![/]")

    try:
        if args.command:
            return run_command(book, args.command, args.argument, args.csv)

        console.print("[bold]Welcome to Contact Management System[/]")
        console.print(f"[dim]Version {__version__}[/]")
        return run_menu(book, console)
    finally:
        saved = book.close()
        if not saved.ok:
            console.print(f"[red]Error saving to file:[/] {escape(saved.error or '')}")
            console.print("[yellow]Your changes may not have been saved![/]")
        if log_file is not None:
            log.info(f"Session ended, log written to {log_file}")
        else:
            log.info("Session ended")


if __name__ == "__main__":
    sys.exit(main())
