from __future__ import annotations

"""
Password Listing Parser.

Rebuilds fully-qualified password paths from the indented tree printed by
'pass list'. The first line is a header; every following line contributes
one segment at a depth derived from its box-drawing prefix. Directories
only extend the path of their descendants, leaves are emitted as
'/'-joined paths in listing order.
"""

import logging
import re
from typing import List, Optional

from fuzzel_pass.core.analysis.classifiers import AnsiColorClassifier, LeafClassifier
from fuzzel_pass.domain.constants import (
    BRANCH_GLYPHS,
    INDENT_COUNTED,
    INDENT_GLYPHS,
    INDENT_WIDTH,
)
from fuzzel_pass.domain.listing_models import PathSegment, PathStack
from fuzzel_pass.utils.text import WHITESPACE, split_lines

logger = logging.getLogger(__name__)

_LEADING_BRANCH_RX = re.compile(f"^[{re.escape(WHITESPACE)}{BRANCH_GLYPHS}]+")

_DEFAULT_CLASSIFIER = AnsiColorClassifier()

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def parse_listing(text: str, classifier: Optional[LeafClassifier] = None) -> List[str]:
    """
    Convert a raw tree listing into the ordered list of leaf paths.

    Never raises: malformed indentation degrades into shorter or longer
    paths rather than an error.

    Args:
        text: Full listing output, header line included.
        classifier: Marker handling strategy. Defaults to 'tree -C' colours.

    Returns:
        List[str]: Leaf paths in listing order (possibly empty).
    """
    classifier = classifier or _DEFAULT_CLASSIFIER
    passwords: List[str] = []
    stack = PathStack()

    # Skip the header line
    for line in split_lines(text)[1:]:
        depth = get_line_indent(line, classifier)
        segment = PathSegment(
            value=strip_line(line, classifier),
            is_directory=classifier.is_directory(line),
        )
        stack.push(segment, depth)

        if not stack.top.is_directory:
            passwords.append(stack.join())

    logger.debug(f"Listing parsed: {len(passwords)} password paths.")
    return passwords


def get_line_indent(line: str, classifier: Optional[LeafClassifier] = None) -> int:
    """
    Compute the indentation depth of a listing line.

    Only spaces and vertical connectors of the leading glyph run are
    counted; corners and horizontal connectors belong to the prefix but
    not to the width.

    Args:
        line: Raw listing line.
        classifier: Marker handling strategy.

    Returns:
        int: Zero-based nesting depth.
    """
    clean = (classifier or _DEFAULT_CLASSIFIER).strip_markers(line)

    width = 0
    for ch in clean:
        if ch not in INDENT_GLYPHS:
            break
        if ch in INDENT_COUNTED:
            width += 1

    return width // INDENT_WIDTH


def strip_line(line: str, classifier: Optional[LeafClassifier] = None) -> str:
    """
    Extract the display value of a listing line.

    Removes markers, then leading whitespace and branch glyphs. Trailing
    content is kept as-is.
    """
    clean = (classifier or _DEFAULT_CLASSIFIER).strip_markers(line)
    return _LEADING_BRANCH_RX.sub("", clean, count=1)
