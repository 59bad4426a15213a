"""
Persistence codec: binary store file, corruption backup and CSV export.
"""

from .codec import (
    create_backup,
    decode_contacts,
    encode_contacts,
    load_contacts,
    save_contacts,
)
from .common import (
    BACKUP_SUFFIX,
    DEFAULT_CSV_FILE,
    DEFAULT_DATA_FILE,
    CorruptionError,
    LoadResult,
    SaveResult,
    backup_path_for,
)
from .csv_export import CSV_HEADER, contact_to_row, export_csv

__all__ = [
    "create_backup",
    "decode_contacts",
    "encode_contacts",
    "load_contacts",
    "save_contacts",
    "BACKUP_SUFFIX",
    "DEFAULT_CSV_FILE",
    "DEFAULT_DATA_FILE",
    "CorruptionError",
    "LoadResult",
    "SaveResult",
    "backup_path_for",
    "CSV_HEADER",
    "contact_to_row",
    "export_csv",
]
