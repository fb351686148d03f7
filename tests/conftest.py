from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Listing builders and fake collaborators shared across unit tests.
"""

import os
import sys
from typing import Any, Dict, List, Optional, Sequence

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from fuzzel_pass.core.pipeline.collaborators import Collaborators  # noqa: E402
from fuzzel_pass.domain.errors import PickCancelled  # noqa: E402

DIR = "\x1b[01;34m"
RST = "\x1b[0m"


# -----------------------------------------------------------------------------
# Listing Builders
# -----------------------------------------------------------------------------
def render_listing(tree: Dict[str, Any], header: str = "Password Store") -> str:
    """
    Render a nested dict the way 'tree -C' prints a password store.

    Dict values are directories (coloured), None values are passwords.
    """
    lines = [header]
    _render(tree, lines, "")
    return "\n".join(lines) + "\n"


def _render(tree: Dict[str, Any], lines: List[str], prefix: str) -> None:
    entries = list(tree.keys())
    for i, name in enumerate(entries):
        is_last = i == len(entries) - 1
        connector = "└── " if is_last else "├── "
        node = tree[name]
        if isinstance(node, dict):
            lines.append(f"{prefix}{connector}{DIR}{name}{RST}")
            _render(node, lines, prefix + ("    " if is_last else "│   "))
        else:
            lines.append(f"{prefix}{connector}{name}")


# -----------------------------------------------------------------------------
# Fake Collaborators
# -----------------------------------------------------------------------------
class ScriptedPicker:
    """
    Picker returning scripted answers in order. A None answer cancels.
    """

    def __init__(self, answers: Sequence[Optional[str]]):
        self.answers = list(answers)
        self.calls: List[List[str]] = []

    def __call__(self, options: Sequence[str]) -> str:
        self.calls.append(list(options))
        answer = self.answers.pop(0)
        if answer is None:
            raise PickCancelled("fake-picker", "Selection cancelled.")
        return answer


class RecordingSink:
    """Sink remembering every delivered value."""

    def __init__(self) -> None:
        self.values: List[str] = []

    def __call__(self, text: str) -> None:
        self.values.append(text)


class FakeStore:
    """In-memory listing and entry provider."""

    def __init__(self, listing: str, entries: Dict[str, str]):
        self.listing = listing
        self.entries = entries
        self.shown: List[str] = []

    def list_text(self) -> str:
        return self.listing

    def show(self, password_id: str) -> str:
        self.shown.append(password_id)
        return self.entries[password_id]


@pytest.fixture
def sample_listing() -> str:
    """Listing of a small store with nested directories."""
    return render_listing({
        "Email": {"work.com": None, "home.org": None},
        "Banking": {"cards": {"visa": None}},
        "wifi": None,
    })


@pytest.fixture
def sample_entries() -> Dict[str, str]:
    """Entry bodies keyed by password path."""
    return {
        "Email/work.com": "secret123\nusername: alice\nurl: example.com\n",
        "Email/home.org": "hunter2\nusername: bob\nnotes:\n---\nline one\nline two\n---\n",
        "Banking/cards/visa": "1234\npin: 0000\n",
        "wifi": "wpa-passphrase\n",
    }


@pytest.fixture
def make_collaborators(sample_listing, sample_entries):
    """
    Factory building Collaborators around a FakeStore and a ScriptedPicker.

    Returns a function (answers) -> (collaborators, store, picker, clipboard, typer).
    """
    def _make(answers: Sequence[Optional[str]]):
        store = FakeStore(sample_listing, sample_entries)
        picker = ScriptedPicker(answers)
        clipboard = RecordingSink()
        typer = RecordingSink()
        collaborators = Collaborators(
            listing_provider=store.list_text,
            entry_provider=store.show,
            picker=picker,
            clipboard_sink=clipboard,
            type_sink=typer,
        )
        return collaborators, store, picker, clipboard, typer

    return _make
