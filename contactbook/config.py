"""
Runtime configuration for the contact book.

Values come from environment variables (a ``.env`` file is loaded by the
entry point), falling back to the defaults below.

File: config.py
Author: Contact Book maintainers
Created: 2026-10-13
Last Modified: 2026-10-16
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional

from .storage import DEFAULT_CSV_FILE, DEFAULT_DATA_FILE, backup_path_for


@dataclass
class BookConfig:
    """File locations and logging options for one session."""

    # Files
    data_path: Path = field(default_factory=lambda: DEFAULT_DATA_FILE)
    csv_path: Path = field(default_factory=lambda: DEFAULT_CSV_FILE)

    # Logging
    log_dir: Path = field(default_factory=lambda: Path("logs"))
    log_level: str = "INFO"

    # Display only, stored phone numbers are never rewritten
    default_region: str = "US"

    def __post_init__(self):
        # Ensure paths are Path objects
        if isinstance(self.data_path, str):
            self.data_path = Path(self.data_path)
        if isinstance(self.csv_path, str):
            self.csv_path = Path(self.csv_path)
        if isinstance(self.log_dir, str):
            self.log_dir = Path(self.log_dir)
        self.log_level = self.log_level.upper()

    @property
    def backup_path(self) -> Path:
        return backup_path_for(self.data_path)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "BookConfig":
        """Build a config from CONTACTBOOK_* environment variables."""
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            data_path=Path(env.get("CONTACTBOOK_DATA_FILE", defaults.data_path)),
            csv_path=Path(env.get("CONTACTBOOK_CSV_FILE", defaults.csv_path)),
            log_dir=Path(env.get("CONTACTBOOK_LOG_DIR", defaults.log_dir)),
            log_level=env.get("CONTACTBOOK_LOG_LEVEL", defaults.log_level),
            default_region=env.get("CONTACTBOOK_PHONE_REGION", defaults.default_region),
        )

    def to_dict(self) -> dict:
        return {
            "data_path": str(self.data_path),
            "csv_path": str(self.csv_path),
            "backup_path": str(self.backup_path),
            "log_dir": str(self.log_dir),
            "log_level": self.log_level,
            "default_region": self.default_region,
        }
