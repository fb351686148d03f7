from __future__ import annotations

"""
Logging Settings.

Settings accepted by configure_logging and the translation of textual
level names (as typed on the command line or in config files) to the
numeric constants of the logging module.
"""

import logging
from dataclasses import dataclass
from typing import Optional

DEFAULT_LEVEL: int = logging.WARNING


@dataclass(frozen=True)
class LoggingConfig:
    """
    Immutable settings for one logging session.

    Attributes:
        level: Level name ('DEBUG', 'INFO', ...). Unknown names fall back to WARNING.
        console: Echo records on stderr. stdout is reserved for --list and --dump-config.
        log_file: Optional rotating file receiving the same records.
        max_bytes: Size that triggers a rollover of the log file.
        backup_count: Rolled-over files kept next to the active one.
        redact: Mask registered secret values in every record.
    """
    level: str = "WARNING"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 512 * 1024
    backup_count: int = 2
    redact: bool = True

    console_fmt: str = "fuzzel-pass: %(levelname)s | %(message)s"
    file_fmt: str = "%(asctime)s [%(process)d] %(levelname)-8s %(name)s: %(message)s"
    datefmt: str = "%Y-%m-%dT%H:%M:%S"


def resolve_level(name: Optional[str]) -> int:
    """
    Turn a level name into its numeric value.

    'WARN' is accepted as an alias. Empty or unknown names give DEFAULT_LEVEL.
    """
    if not name:
        return DEFAULT_LEVEL
    value = logging.getLevelName(str(name).strip().upper())
    return value if isinstance(value, int) else DEFAULT_LEVEL
