"""
Common storage constants and result types

File: storage/common.py
Author: Contact Book maintainers
Created: 2026-10-12
Last Modified: 2026-10-14
"""

from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field

from ..models import Contact

DEFAULT_DATA_FILE = Path("contacts.dat")
DEFAULT_CSV_FILE = Path("contacts.csv")
BACKUP_SUFFIX = ".backup"
TEXT_ENCODING = "utf-8"


class CorruptionError(Exception):
    """Store file is structurally inconsistent."""


def backup_path_for(path: Path) -> Path:
    """``contacts.dat`` -> ``contacts.dat.backup``"""
    return path.with_name(path.name + BACKUP_SUFFIX)


class SaveResult(BaseModel):
    """Outcome of writing a file."""

    ok: bool = Field(..., description="True if the whole file was written")
    path: Path = Field(..., description="Target file")
    count: int = Field(0, description="Number of contacts written", ge=0)
    error: Optional[str] = Field(None, description="Error message if writing failed")


class LoadResult(BaseModel):
    """Outcome of reading the store file."""

    contacts: List[Contact] = Field(default_factory=list, description="Loaded contacts, empty on failure")
    corrupted: bool = Field(False, description="True if the file existed but could not be decoded")
    backup_path: Optional[Path] = Field(None, description="Copy of the unreadable file, if one was made")
    error: Optional[str] = Field(None, description="Reason the file was rejected")


__all__ = [
    "DEFAULT_DATA_FILE",
    "DEFAULT_CSV_FILE",
    "BACKUP_SUFFIX",
    "TEXT_ENCODING",
    "CorruptionError",
    "backup_path_for",
    "SaveResult",
    "LoadResult",
]
