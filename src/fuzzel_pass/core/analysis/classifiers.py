from __future__ import annotations

"""
Listing Line Classifiers.

Isolates the coupling between the listing parser and the colour
conventions of the tool that rendered the listing. A classifier knows
which escape markers decorate a line and which of them flag a directory;
the parser only deals with indentation and the path stack.
"""

from abc import ABC, abstractmethod
from typing import Sequence

from fuzzel_pass.domain.constants import (
    ANSI_ESCAPE,
    DEFAULT_DIRECTORY_COLOR,
    NBSP,
    PADDED_RESET_MARKER,
    RESET_MARKER,
)


class LeafClassifier(ABC):
    """
    Abstract base class for listing line classifiers.
    """

    @abstractmethod
    def strip_markers(self, line: str) -> str:
        """
        Remove every decoration that is not part of the entry text.

        Must be idempotent.

        Args:
            line: Raw listing line.

        Returns:
            str: Line without markers.
        """
        pass

    @abstractmethod
    def is_directory(self, line: str) -> bool:
        """
        Decide whether a raw listing line denotes a grouping node.

        Args:
            line: Raw listing line, markers included.

        Returns:
            bool: True for directories, False for leaf entries.
        """
        pass


class AnsiColorClassifier(LeafClassifier):
    """
    Classifier for 'tree -C' output, where directory names are wrapped in
    a colour marker and the generic reset marker.
    """

    def __init__(self, directory_color: str = DEFAULT_DIRECTORY_COLOR) -> None:
        """
        Args:
            directory_color: SGR parameters used for directories (e.g. '01;34').
        """
        self.directory_marker = f"{ANSI_ESCAPE}{directory_color}m"
        self.reset_marker = RESET_MARKER
        self._markers: Sequence[str] = (
            self.directory_marker,
            RESET_MARKER,
            PADDED_RESET_MARKER,
        )

    def strip_markers(self, line: str) -> str:
        # Repeat until stable: removing one marker can splice another together
        previous = None
        while previous != line:
            previous = line
            for marker in self._markers:
                line = line.replace(marker, "")
        return line.replace(NBSP, " ")

    def is_directory(self, line: str) -> bool:
        return self.directory_marker in line and self.reset_marker in line
