from __future__ import annotations

"""
Configuration Domain Management.

Handles the persistent JSON configuration holding the external commands
and delivery preferences. Missing or corrupted files fall back to the
defaults.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from fuzzel_pass.domain.constants import DEFAULT_DIRECTORY_COLOR
from fuzzel_pass.infra.fs import get_default_config_path

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------

def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # External tools
        "pass_command": ["pass"],
        "picker_command": ["fuzzel", "--dmenu"],
        "type_command": ["wtype", "-"],
        "clipboard_command": [],

        # Store
        "password_store_dir": "",
        "directory_color": DEFAULT_DIRECTORY_COLOR,

        # Delivery
        "type_mode": False,
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------

def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load the configuration from disk, merged over the defaults.

    Args:
        path: Configuration file. Defaults to ~/.fuzzel_pass/config.json.

    Returns:
        Dict[str, Any]: The loaded configuration or the defaults on failure.
    """
    config_file = path or get_default_config_path()
    config = get_default_config()

    if not os.path.exists(config_file):
        logger.debug(f"Config file not found at {config_file}. Using defaults.")
        return config

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config {config_file}: {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning(f"Corrupted config file {config_file}. Using defaults.")
        return config

    config.update(data)
    return config


def save_config(config: Dict[str, Any], path: Optional[str] = None) -> bool:
    """
    Persist the configuration to disk.

    Args:
        config: The configuration dictionary to save.
        path: Target file. Defaults to ~/.fuzzel_pass/config.json.

    Returns:
        bool: False if the file could not be written.
    """
    config_file = path or get_default_config_path()
    try:
        os.makedirs(os.path.dirname(os.path.abspath(config_file)), exist_ok=True)
        with open(config_file, "w", encoding="utf-8") as f:
            json.dump(config, f, ensure_ascii=False, indent=4)
        logger.debug(f"Configuration saved to {config_file}")
        return True
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")
        return False
