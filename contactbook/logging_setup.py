"""
Logging configuration, called once by the entry point.

File: logging_setup.py
Author: Contact Book maintainers
Created: 2026-10-13
Last Modified: 2026-10-18
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(message)s"


def configure_logging(log_dir: Path, level: str = "INFO", console: bool = False) -> Optional[Path]:
    """
    Send log records to a dated file in ``log_dir``.

    The interactive front end talks to the user through rich, so the stream
    handler is only attached when ``console`` is True, or when the log file
    cannot be opened.

    Returns:
        Path of the log file, or None if logging fell back to the terminal
    """
    log_dir = Path(log_dir)
    log_file: Optional[Path] = log_dir / f"contactbook_{datetime.now().strftime('%Y-%m-%d')}.log"

    handlers: List[logging.Handler] = []
    file_error = None
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    except OSError as e:
        file_error = e
        log_file = None

    if console or file_error is not None:
        stream = logging.StreamHandler()
        if not console:
            # Fallback only, keep INFO chatter out of the menu
            stream.setLevel(logging.WARNING)
        handlers.append(stream)

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )

    if file_error is not None:
        logging.getLogger(__name__).warning(
            f"Could not open log file in {log_dir}, logging to the terminal instead: {file_error}"
        )
    return log_file
