from __future__ import annotations

"""
Logging Lifecycle.

One QueueHandler on the root logger feeds a QueueListener thread that owns
the real handlers. The listener must be stopped (shutdown_logging) before
the process exits so queued records are written out before the exit code
is returned to the launcher.
"""

import atexit
import logging
import queue
import sys
from dataclasses import dataclass, field
from logging.handlers import QueueHandler, QueueListener
from typing import List, Optional

from fuzzel_pass.infra.logging.config import LoggingConfig, resolve_level
from fuzzel_pass.infra.logging.handlers import (
    SecretFilter,
    build_console_handler,
    build_file_handler,
    is_owned,
    mark_owned,
)


@dataclass
class _LoggingState:
    listener: Optional[QueueListener] = None
    handlers: List[logging.Handler] = field(default_factory=list)
    secret_filter: SecretFilter = field(default_factory=SecretFilter)
    configured: bool = False


_state = _LoggingState()

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Install the queue-backed handler chain on the root logger.

    A second call is ignored unless force is set, in which case the
    previous chain is flushed and replaced.

    Args:
        cfg: Settings for this session.
        force: Replace an existing configuration.

    Returns:
        logging.Logger: The root logger.
    """
    root = logging.getLogger()
    if _state.configured and not force:
        return root

    shutdown_logging()
    level = resolve_level(cfg.level)
    root.setLevel(level)

    handlers: List[logging.Handler] = []
    if cfg.console:
        handlers.append(build_console_handler(cfg, level))
    file_handler = build_file_handler(cfg, level)
    if file_handler is not None:
        handlers.append(file_handler)

    if not handlers:
        return root

    if cfg.redact:
        for handler in handlers:
            handler.addFilter(_state.secret_filter)

    try:
        records: queue.Queue[logging.LogRecord] = queue.Queue()
        listener = QueueListener(records, *handlers, respect_handler_level=True)
        listener.start()
    except RuntimeError as e:
        # No listener thread: attach the handlers directly
        sys.stderr.write(f"fuzzel-pass: WARNING | Logging runs synchronously: {e}\n")
        for handler in handlers:
            root.addHandler(handler)
        _state.handlers = handlers
        _state.configured = True
        return root

    root.addHandler(mark_owned(QueueHandler(records)))
    _state.listener = listener
    _state.handlers = handlers
    _state.configured = True
    return root


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def register_secret(value: str) -> None:
    """Mask value in every record emitted from now until shutdown_logging."""
    _state.secret_filter.register(value)


def is_configured() -> bool:
    return _state.configured


def active_listener() -> Optional[QueueListener]:
    return _state.listener


def shutdown_logging() -> None:
    """
    Drain the queue, close our handlers and forget registered secrets.

    Safe to call any number of times.
    """
    listener, _state.listener = _state.listener, None
    if listener is not None:
        listener.stop()

    root = logging.getLogger()
    for handler in list(root.handlers):
        if is_owned(handler):
            root.removeHandler(handler)
    for handler in _state.handlers:
        handler.close()

    _state.handlers = []
    _state.secret_filter.clear()
    _state.configured = False


atexit.register(shutdown_logging)
