from __future__ import annotations

"""
Password Listing Data Models.

Provides the structural types used by the listing parser to rebuild full
password paths from an indented tree: the per-line segment and the
depth-indexed stack holding the current nesting context.
"""

from dataclasses import dataclass, field
from typing import List

from fuzzel_pass.domain.constants import PATH_SEPARATOR

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class PathSegment:
    """
    One component of a password path, extracted from a single listing line.

    Attributes:
        value: Display text of the entry (directory or password name).
        is_directory: True if the line denotes a grouping node.
    """
    value: str
    is_directory: bool = False


@dataclass
class PathStack:
    """
    Nesting context of the listing, one segment per indentation level.

    Attributes:
        segments: Segments from the outermost directory to the current entry.
    """
    segments: List[PathSegment] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.segments)

    def truncate(self, depth: int) -> None:
        """Discard the deepest segments until at most `depth` remain."""
        while len(self.segments) > depth:
            self.segments.pop()

    def push(self, segment: PathSegment, depth: int) -> None:
        """
        Place a segment at the given indentation depth.

        Args:
            segment: Segment extracted from the current line.
            depth: Indentation depth of the current line.
        """
        self.truncate(depth)
        self.segments.append(segment)

    @property
    def top(self) -> PathSegment:
        return self.segments[-1]

    def join(self) -> str:
        """Render the full path of the current nesting context."""
        return PATH_SEPARATOR.join(s.value for s in self.segments)
