from __future__ import annotations

"""
Configuration Validation Service.

Checks a raw configuration (file contents merged with command-line
overrides) against the known keys before collaborators are built from it.
Every key has a coercer; a value that cannot be coerced is replaced by its
default and reported, or raises when strict mode is requested.
"""

import logging
import re
import shlex
from typing import Any, Callable, Dict, List, Tuple, Type

from fuzzel_pass.domain.config import get_default_config

logger = logging.getLogger(__name__)

_SGR_RX = re.compile(r"^\d+(;\d+)*$")
_TRUE_WORDS = frozenset({"true", "1", "yes", "on"})
_FALSE_WORDS = frozenset({"false", "0", "no", "off"})


class _Rejected(Exception):
    """A value the coercer cannot accept; carries the error type for strict mode."""

    def __init__(self, reason: str, error_type: Type[Exception] = TypeError):
        super().__init__(reason)
        self.reason = reason
        self.error_type = error_type


class _Report:
    """Collects problems, or raises on the first one in strict mode."""

    def __init__(self, strict: bool):
        self.strict = strict
        self.warnings: List[str] = []

    def problem(self, message: str, error_type: Type[Exception] = TypeError) -> None:
        if self.strict:
            raise error_type(message)
        self.warnings.append(message)

# -----------------------------------------------------------------------------
# COERCERS
# -----------------------------------------------------------------------------

def _text(value: Any) -> str:
    if not isinstance(value, str):
        raise _Rejected(f"expected str, received {type(value).__name__}")
    return value.strip()


def _flag(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        word = value.strip().lower()
        if word in _TRUE_WORDS:
            return True
        if word in _FALSE_WORDS:
            return False
    raise _Rejected(f"expected bool, received {value!r}")


def _argv(value: Any) -> List[str]:
    """Accept ["prog", "arg"] or a shell-style "prog arg" string."""
    if isinstance(value, str):
        try:
            return shlex.split(value)
        except ValueError as e:
            raise _Rejected(str(e), ValueError) from e
    if isinstance(value, (list, tuple)) and all(isinstance(x, str) for x in value):
        return [x for x in value if x]
    raise _Rejected(f"expected list of str, received {type(value).__name__}")


def _required_argv(value: Any) -> List[str]:
    argv = _argv(value)
    if not argv:
        raise _Rejected("command cannot be empty", ValueError)
    return argv


def _sgr_code(value: Any) -> str:
    code = _text(value)
    if not _SGR_RX.match(code):
        raise _Rejected(f"'{code}' is not an SGR colour code", ValueError)
    return code


_SCHEMA: Dict[str, Callable[[Any], Any]] = {
    "pass_command": _required_argv,
    "picker_command": _required_argv,
    "type_command": _required_argv,
    "clipboard_command": _argv,
    "password_store_dir": _text,
    "directory_color": _sgr_code,
    "type_mode": _flag,
}

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(config: Any, *, strict: bool = False) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize a configuration dictionary.

    Args:
        config: Raw configuration data.
        strict: Raise TypeError/ValueError on the first problem instead of
                falling back to defaults.

    Returns:
        Tuple[Dict[str, Any], List[str]]: The normalized configuration and
                                          the warnings collected on the way.
    """
    report = _Report(strict)
    defaults = get_default_config()

    if not isinstance(config, dict):
        report.problem(f"Configuration must be a JSON object, not {type(config).__name__}; using defaults.")
        return defaults, report.warnings

    for key in sorted(k for k in config if k not in _SCHEMA):
        report.problem(f"Unknown config key '{key}' ignored.", ValueError)

    clean: Dict[str, Any] = {}
    for key, coerce in _SCHEMA.items():
        if config.get(key) is None:
            clean[key] = defaults[key]
            continue
        try:
            clean[key] = coerce(config[key])
        except _Rejected as e:
            report.problem(f"Invalid '{key}': {e.reason}; using default.", e.error_type)
            clean[key] = defaults[key]

    if report.warnings:
        logger.debug(f"Configuration normalized with {len(report.warnings)} warning(s).")
    return clean, report.warnings
