from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Resolves the per-user application directory holding the persistent
configuration and optional log files.
"""

import logging
import os

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

UNIX_APP_DIR_NAME = ".fuzzel_pass"
CONFIG_FILE_NAME = "config.json"
LOG_FILE_NAME = "fuzzel_pass.log"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Return ~/.fuzzel_pass, creating it when possible.

    A directory that cannot be created (read-only home) is still returned;
    callers writing into it handle the resulting OSError themselves.
    """
    path = os.path.abspath(os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME))
    try:
        os.makedirs(path, mode=0o700, exist_ok=True)
    except OSError as e:
        logger.debug(f"Cannot create data directory {path}: {e}")
    return path


def get_default_config_path() -> str:
    """Return the absolute path of the persisted configuration file."""
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)


def get_default_log_path() -> str:
    """Return the absolute path of the default diagnostic log file."""
    return os.path.join(get_user_data_dir(), "logs", LOG_FILE_NAME)


def normalize_path(path: str) -> str:
    """Expand '~' and environment variables, then make the path absolute."""
    return os.path.abspath(os.path.expandvars(os.path.expanduser(path)))
