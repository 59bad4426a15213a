"""
Binary persistence for the contact store.

File layout (all integers are 8-byte unsigned, native byte order):

    count
    repeated ``count`` times, for each of the seven fields in FIELD_ORDER:
        length
        ``length`` bytes of UTF-8 text

There are no delimiters, escapes or version markers. Bytes after the last
declared record are ignored.

Neither ``save_contacts`` nor ``load_contacts`` raise on I/O or data
problems: failures are logged and reported through the returned result so the
session can carry on with its in-memory state.

File: storage/codec.py
Author: Contact Book maintainers
Created: 2026-10-12
Last Modified: 2026-10-17
"""

import logging
import shutil
import struct
from pathlib import Path
from typing import Iterable, List, Optional

from pydantic import ValidationError

from ..models import Contact, FIELD_ORDER
from .common import (
    TEXT_ENCODING,
    CorruptionError,
    LoadResult,
    SaveResult,
    backup_path_for,
)

log = logging.getLogger(__name__)

# "=" -> native byte order, standard (8-byte) size, no alignment padding
WORD = struct.Struct("=Q")


def encode_contacts(contacts: Iterable[Contact]) -> bytes:
    """Serialize contacts to the binary store layout."""
    contacts = list(contacts)
    chunks = [WORD.pack(len(contacts))]
    for contact in contacts:
        for value in contact.fields_in_order():
            raw = value.encode(TEXT_ENCODING)
            chunks.append(WORD.pack(len(raw)))
            chunks.append(raw)
    return b"".join(chunks)


def decode_contacts(data: bytes) -> List[Contact]:
    """
    Parse the binary store layout.

    Raises:
        CorruptionError: on premature end of data or undecodable field text
    """
    view = memoryview(data)
    offset = 0

    def read_word(what: str) -> int:
        nonlocal offset
        if offset + WORD.size > len(view):
            raise CorruptionError(f"Unexpected end of data while reading {what} at byte {offset}")
        (value,) = WORD.unpack_from(view, offset)
        offset += WORD.size
        return value

    count = read_word("record count")
    contacts: List[Contact] = []

    for index in range(count):
        values = []
        for field_name in FIELD_ORDER:
            length = read_word(f"length of {field_name} in record {index}")
            if length > len(view) - offset:
                raise CorruptionError(
                    f"Unexpected end of data while reading {field_name} in record {index}: "
                    f"need {length} bytes, {len(view) - offset} left"
                )
            raw = bytes(view[offset:offset + length])
            offset += length
            try:
                values.append(raw.decode(TEXT_ENCODING))
            except UnicodeDecodeError as e:
                raise CorruptionError(f"Field {field_name} in record {index} is not valid text: {e}") from e

        try:
            contacts.append(Contact.from_fields(values))
        except ValidationError as e:
            raise CorruptionError(f"Record {index} could not be built: {e}") from e

    if offset < len(view):
        log.debug(f"Ignoring {len(view) - offset} trailing bytes after {count} records")

    return contacts


def save_contacts(path: Path, contacts: Iterable[Contact]) -> SaveResult:
    """
    Write the whole store file.

    The data goes to a temporary sibling first and is then moved over the
    target, so readers never see a half-written file.

    Args:
        path: Store file path
        contacts: Contacts in store order

    Returns:
        SaveResult with ok=False and the error message if writing failed
    """
    path = Path(path)
    contacts = list(contacts)
    tmp = path.with_name(path.name + ".tmp")

    try:
        payload = encode_contacts(contacts)
        path.parent.mkdir(parents=True, exist_ok=True)
        with tmp.open("wb") as f:
            f.write(payload)
        tmp.replace(path)
    except (OSError, UnicodeEncodeError) as e:
        log.error(f"Error saving contacts to {path}: {e}")
        log.warning("Your changes may not have been saved!")
        _discard(tmp)
        return SaveResult(ok=False, path=path, count=0, error=str(e))

    log.info(f"Saved {len(contacts)} contacts to {path}")
    return SaveResult(ok=True, path=path, count=len(contacts))


def load_contacts(path: Path) -> LoadResult:
    """
    Read the store file.

    A missing file is the first-run case and yields an empty result without
    any warning. A file that exists but cannot be read or decoded is copied to
    ``<name>.backup`` (best effort) and an empty result is returned.

    Args:
        path: Store file path

    Returns:
        LoadResult with the contacts, or the corruption details
    """
    path = Path(path)
    if not path.exists():
        log.info(f"No store file at {path}, starting with an empty address book")
        return LoadResult()

    try:
        contacts = decode_contacts(path.read_bytes())
    except (OSError, CorruptionError) as e:
        log.error(f"Error loading contacts from {path}: {e}")
        log.warning("The contacts file might be corrupted. Creating backup...")
        backup = create_backup(path)
        return LoadResult(corrupted=True, backup_path=backup, error=str(e))

    log.info(f"Loaded {len(contacts)} contacts from {path}")
    return LoadResult(contacts=contacts)


def create_backup(path: Path) -> Optional[Path]:
    """
    Copy ``path`` byte-for-byte to its ``.backup`` sibling.

    Overwrites any earlier backup. Returns the backup path, or None if the
    copy failed.
    """
    backup = backup_path_for(path)
    try:
        shutil.copyfile(path, backup)
    except OSError as e:
        log.error(f"Failed to create backup of {path}: {e}")
        return None
    log.info(f"Backup created as {backup}")
    return backup


def _discard(tmp: Path) -> None:
    try:
        tmp.unlink()
    except FileNotFoundError:
        pass
    except OSError as e:
        log.debug(f"Could not remove temporary file {tmp}: {e}")
