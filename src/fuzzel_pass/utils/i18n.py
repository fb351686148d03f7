from __future__ import annotations

"""
Message Catalogue.

User-facing strings live in JSON catalogues under interface/locales. The
locale follows the POSIX environment (LC_ALL, LC_MESSAGES, LANG) so the
tool speaks the language of the session that launched it; any key missing
from that catalogue is served from the English one.
"""

import json
import logging
import os
from typing import Any, Dict, Mapping, Optional

logger = logging.getLogger(__name__)

FALLBACK_LOCALE = "en"
LOCALES_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "interface", "locales")

_LOCALE_ENV_VARS = ("LC_ALL", "LC_MESSAGES", "LANG")


def detect_locale(environ: Optional[Mapping[str, str]] = None) -> str:
    """
    Derive a catalogue name from the locale environment.

    'es_ES.UTF-8' gives 'es'. 'C', 'POSIX' and unset variables give the
    fallback locale.
    """
    env = os.environ if environ is None else environ
    for var in _LOCALE_ENV_VARS:
        value = env.get(var, "")
        if value:
            lang = value.split(".")[0].split("@")[0].split("_")[0].lower()
            if lang in ("c", "posix"):
                return FALLBACK_LOCALE
            return lang or FALLBACK_LOCALE
    return FALLBACK_LOCALE


def _flatten(tree: Mapping[str, Any], prefix: str = "") -> Dict[str, str]:
    flat: Dict[str, str] = {}
    for key, value in tree.items():
        dotted = f"{prefix}{key}"
        if isinstance(value, Mapping):
            flat.update(_flatten(value, dotted + "."))
        elif isinstance(value, str):
            flat[dotted] = value
    return flat


def _read_catalogue(locales_dir: str, locale: str) -> Optional[Dict[str, str]]:
    path = os.path.join(locales_dir, f"{locale}.json")
    if not os.path.isfile(path):
        return None
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Message catalogue '{path}' is unreadable: {e}")
        return None
    if not isinstance(data, dict):
        logger.error(f"Message catalogue '{path}' is not a JSON object.")
        return None
    return _flatten(data)


class I18n:
    """
    Dotted-key lookup over one catalogue layered on the English one.

    Attributes:
        locale: Name of the catalogue actually in use.
        is_loaded: False when not even the fallback catalogue could be read.
    """

    def __init__(self, locale: Optional[str] = None, locales_dir: str = LOCALES_DIR):
        self._locales_dir = locales_dir
        self._messages: Dict[str, str] = {}
        self.locale = FALLBACK_LOCALE
        self.is_loaded = False
        self.load_locale(locale or detect_locale())

    def load_locale(self, locale: str) -> None:
        messages = _read_catalogue(self._locales_dir, FALLBACK_LOCALE) or {}
        self.is_loaded = bool(messages)
        self.locale = FALLBACK_LOCALE

        if locale != FALLBACK_LOCALE:
            overlay = _read_catalogue(self._locales_dir, locale)
            if overlay is None:
                logger.debug(f"No '{locale}' catalogue, using '{FALLBACK_LOCALE}'.")
            else:
                messages.update(overlay)
                self.locale = locale
                self.is_loaded = True

        self._messages = messages

    def t(self, key: str, default: str = "", **kwargs: Any) -> str:
        """
        Look up a message and interpolate str.format placeholders.

        Unknown keys return default, or the key itself when no default is
        given. A template whose placeholders do not match kwargs is
        returned unformatted.
        """
        template = self._messages.get(key) or default or key
        if not kwargs:
            return template
        try:
            return template.format(**kwargs)
        except (KeyError, IndexError, ValueError) as e:
            logger.debug(f"Message '{key}' could not be formatted: {e}")
            return template


i18n = I18n()
