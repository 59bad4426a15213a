"""
In-memory contact storage.
"""

from .contact_store import ContactStore

__all__ = [
    "ContactStore",
]
