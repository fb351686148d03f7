from __future__ import annotations

"""
Domain Constants.

Centralizes the markers and glyphs emitted by 'pass list' (which delegates
to 'tree -C') together with the synthetic field name used for the secret.
"""

from typing import Final

# -----------------------------------------------------------------------------
# LISTING RENDERING CONVENTIONS
# -----------------------------------------------------------------------------

ANSI_ESCAPE: Final[str] = "\x1b["

DEFAULT_DIRECTORY_COLOR: Final[str] = "01;34"
RESET_MARKER: Final[str] = "\x1b[0m"
PADDED_RESET_MARKER: Final[str] = "\x1b[00m"

NBSP: Final[str] = "\u00a0"

# Characters allowed in the leading indentation run of a listing line
INDENT_GLYPHS: Final[str] = " ├└─│"
# Subset of INDENT_GLYPHS that counts toward the indentation width
INDENT_COUNTED: Final[str] = " │"
# Characters trimmed from the start of a line to obtain its display value
BRANCH_GLYPHS: Final[str] = "└├─│"

# Fixed indentation unit used by the tree renderer
INDENT_WIDTH: Final[int] = 4

# -----------------------------------------------------------------------------
# ENTRY CONVENTIONS
# -----------------------------------------------------------------------------

PASSWORD_FIELD_KEY: Final[str] = "password"
FIELD_SEPARATOR: Final[str] = ":"
PATH_SEPARATOR: Final[str] = "/"

# -----------------------------------------------------------------------------
# PROCESS EXIT CODES
# -----------------------------------------------------------------------------

EXIT_OK: Final[int] = 0
EXIT_FAILURE: Final[int] = 1
EXIT_CANCELLED: Final[int] = 130
