"""
Text front end for the contact book.
"""

from .formatting import contact_panel, contacts_table, format_phone_for_display, show_contacts
from .interactive import MENU_OPTIONS, run_menu

__all__ = [
    "contact_panel",
    "contacts_table",
    "format_phone_for_display",
    "show_contacts",
    "MENU_OPTIONS",
    "run_menu",
]
