from __future__ import annotations

"""
Password Entry Data Models.

Defines the typed field produced by the field parser and the lookup
helpers used when presenting fields to the picker.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Field:
    """
    A single key/value pair extracted from a password entry body.

    Attributes:
        key: Field name as written before the ':' separator.
        value: Field content. Multi-line fields keep their inner newlines.
        multiline: True if the value was read from a delimited block.
    """
    key: str
    value: str
    multiline: bool = False


# -----------------------------------------------------------------------------
# LOOKUP HELPERS
# -----------------------------------------------------------------------------

def find_field(fields: Sequence[Field], key: str) -> Optional[Field]:
    """
    Resolve a key to the first field carrying it.

    Args:
        fields: Parsed fields in entry order.
        key: Field name to look up.

    Returns:
        Optional[Field]: The first matching field, or None.
    """
    for f in fields:
        if f.key == key:
            return f
    return None


def field_keys(fields: Sequence[Field]) -> List[str]:
    """Return the field keys in entry order without duplicates."""
    seen = set()
    keys: List[str] = []
    for f in fields:
        if f.key not in seen:
            seen.add(f.key)
            keys.append(f.key)
    return keys
