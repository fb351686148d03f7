from __future__ import annotations

"""
Handler Factories and Filters.

Builds the stderr and rotating file sinks fed by the queue listener, and
the filter that keeps secret values out of every emitted record.
"""

import logging
import os
import sys
import threading
from logging.handlers import RotatingFileHandler
from typing import Optional, Set

from fuzzel_pass.infra.logging.config import LoggingConfig

REDACTED: str = "******"
MIN_SECRET_LENGTH: int = 4

# Marks handlers owned by this package on the root logger
OWNED_MARK: str = "_fuzzel_pass_owned"


def mark_owned(handler: logging.Handler) -> logging.Handler:
    setattr(handler, OWNED_MARK, True)
    return handler


def is_owned(handler: logging.Handler) -> bool:
    return bool(getattr(handler, OWNED_MARK, False))


class SecretFilter(logging.Filter):
    """
    Replaces registered secret values with a fixed mask.

    The record is rendered once and its arguments dropped, so the mask also
    covers values passed as %-style arguments. Each line of a multi-line
    value is masked on its own; values or lines shorter than
    MIN_SECRET_LENGTH are not masked.
    """

    def __init__(self) -> None:
        super().__init__()
        self._secrets: Set[str] = set()
        self._lock = threading.Lock()

    def register(self, value: str) -> None:
        parts = {value} | set(value.split("\n"))
        with self._lock:
            self._secrets.update(p for p in parts if len(p.strip()) >= MIN_SECRET_LENGTH)

    def clear(self) -> None:
        with self._lock:
            self._secrets.clear()

    def filter(self, record: logging.LogRecord) -> bool:
        with self._lock:
            secrets = sorted(self._secrets, key=len, reverse=True)
        if not secrets:
            return True

        message = record.getMessage()
        for secret in secrets:
            message = message.replace(secret, REDACTED)
        record.msg = message
        record.args = None
        return True


def build_console_handler(cfg: LoggingConfig, level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(cfg.console_fmt))
    return mark_owned(handler)


def build_file_handler(cfg: LoggingConfig, level: int) -> Optional[logging.Handler]:
    """
    Open the rotating log file described by cfg.

    A file that cannot be opened is reported on stderr and skipped; the
    selection itself must not fail because of diagnostics.

    Returns:
        Optional[logging.Handler]: The handler, or None if the file is unusable.
    """
    if not cfg.log_file:
        return None

    path = os.path.abspath(cfg.log_file)
    try:
        os.makedirs(os.path.dirname(path), exist_ok=True)
        handler = RotatingFileHandler(
            path,
            maxBytes=max(0, int(cfg.max_bytes)),
            backupCount=max(0, int(cfg.backup_count)),
            encoding="utf-8",
        )
    except OSError as e:
        sys.stderr.write(f"fuzzel-pass: WARNING | Log file '{path}' unavailable: {e}\n")
        return None

    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(cfg.file_fmt, datefmt=cfg.datefmt))
    return mark_owned(handler)
