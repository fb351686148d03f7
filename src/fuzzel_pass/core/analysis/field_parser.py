from __future__ import annotations

"""
Password Entry Field Parser.

Turns the body printed by 'pass show' into typed fields. The first line is
the bare secret; the remaining lines are 'key: value' pairs or multi-line
blocks. A block opens with an empty value; its first non-blank line is the
end marker chosen by the author, and the block closes when that marker
appears again.

Example:
    s3cr3t
    username: alice
    recovery codes:
    ---
    1111-2222
    3333-4444
    ---
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from fuzzel_pass.domain.constants import FIELD_SEPARATOR, PASSWORD_FIELD_KEY
from fuzzel_pass.domain.entry_models import Field
from fuzzel_pass.domain.errors import MultilineUnterminated
from fuzzel_pass.utils.text import split_lines, trim, trim_end

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PARSER STATE
# -----------------------------------------------------------------------------

@dataclass
class _Block:
    """Multi-line field being read."""
    key: str
    marker: Optional[str] = None
    lines: List[str] = field(default_factory=list)

    @property
    def buffer(self) -> str:
        return "".join(self.lines)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def parse_fields(body_text: str, password_id: str) -> List[Field]:
    """
    Parse the fields of an entry body, excluding the secret line.

    Args:
        body_text: Full entry body as printed by the store.
        password_id: Path of the entry, reported on malformed input.

    Returns:
        List[Field]: Fields in body order. Duplicate keys are kept.

    Raises:
        MultilineUnterminated: The body ends inside a multi-line block.
    """
    fields: List[Field] = []
    # None while scanning for the next field
    block: Optional[_Block] = None

    for line in split_lines(body_text)[1:]:
        if block is None:
            if FIELD_SEPARATOR not in line:
                continue

            key, _, raw_value = line.partition(FIELD_SEPARATOR)
            key = trim(key)
            if not key:
                continue

            value = trim(raw_value)
            if value:
                fields.append(Field(key=key, value=value, multiline=False))
            else:
                block = _Block(key=key)
            continue

        trimmed = trim(line)

        if block.marker is None:
            # Blank lines before the marker are not content
            if trimmed:
                block.marker = trimmed
            continue

        if trimmed == block.marker:
            fields.append(Field(key=block.key, value=block.buffer.rstrip("\n"), multiline=True))
            block = None
            continue

        block.lines.append(trim_end(line) + "\n")

    if block is not None:
        partial = Field(key=block.key, value=block.buffer, multiline=True)
        logger.debug(f"Unterminated multi-line field '{block.key}' in '{password_id}'.")
        raise MultilineUnterminated(password_id, partial)

    return fields


def parse_entry(body_text: str, password_id: str) -> List[Field]:
    """
    Parse an entry body into the full field list shown to the user.

    Prepends the synthetic 'password' field holding the first body line.

    Args:
        body_text: Full entry body as printed by the store.
        password_id: Path of the entry.

    Returns:
        List[Field]: The password field followed by the parsed fields.

    Raises:
        MultilineUnterminated: The body ends inside a multi-line block.
    """
    lines = split_lines(body_text)
    secret = lines[0] if lines else ""

    fields = parse_fields(body_text, password_id)
    return [Field(key=PASSWORD_FIELD_KEY, value=secret, multiline=False)] + fields
