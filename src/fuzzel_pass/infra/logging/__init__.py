from __future__ import annotations

from .config import LoggingConfig, resolve_level
from .core import (
    active_listener,
    configure_logging,
    get_logger,
    is_configured,
    register_secret,
    shutdown_logging,
)
from .handlers import REDACTED, SecretFilter, is_owned

__all__ = [
    "LoggingConfig",
    "REDACTED",
    "SecretFilter",
    "active_listener",
    "configure_logging",
    "get_logger",
    "is_configured",
    "is_owned",
    "register_secret",
    "resolve_level",
    "shutdown_logging",
]
