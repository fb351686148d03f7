from __future__ import annotations

"""
Line and Whitespace Helpers.

Tool output is newline-delimited: only '\\n' ends a line, and one '\\r'
before it is dropped. str.splitlines() and the argument-less str.strip()
also act on form feeds, information separators and Unicode line
separators, which may legitimately occur inside secrets and names.
"""

from typing import List

# Unicode White_Space; unlike str.isspace() it excludes \x1c-\x1f
WHITESPACE: str = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def split_lines(text: str) -> List[str]:
    """
    Split text on '\\n' only.

    A trailing '\\r' is removed from each line and a final newline does not
    produce an empty last line.

    Example:
        split_lines("a\\r\\nb\\x0cc\\n") == ["a", "b\\x0cc"]
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def trim(text: str) -> str:
    return text.strip(WHITESPACE)


def trim_end(text: str) -> str:
    return text.rstrip(WHITESPACE)
