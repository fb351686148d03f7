from __future__ import annotations

"""
Delivery Sinks.

Final destinations of a selected value: the system clipboard (through
pyperclip, or an explicit command such as 'wl-copy') and keystroke
injection into the focused window (through 'wtype').
"""

import logging
from typing import List, Optional, Sequence

import pyperclip

from fuzzel_pass.domain.errors import CollaboratorInvocationError, PolicyViolation
from fuzzel_pass.infra.process import run_command

logger = logging.getLogger(__name__)

DEFAULT_TYPE_COMMAND: List[str] = ["wtype", "-"]


class ClipboardSink:
    """
    Clipboard delivery.

    Attributes:
        command: Optional copy command fed through stdin. When empty,
            pyperclip selects the platform clipboard mechanism.
    """

    def __init__(self, command: Optional[Sequence[str]] = None) -> None:
        self.command: List[str] = list(command or [])

    def deliver(self, text: str) -> None:
        if self.command:
            run_command(self.command, input_text=text)
            return

        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as e:
            raise CollaboratorInvocationError("clipboard", str(e)) from e
        logger.debug("Value copied with pyperclip.")


class TypeSink:
    """
    Keystroke injection into the focused window. Single-line text only.

    Attributes:
        command: Typing program reading the text from stdin.
    """

    def __init__(self, command: Optional[Sequence[str]] = None) -> None:
        self.command: List[str] = list(command or DEFAULT_TYPE_COMMAND)

    def deliver(self, text: str) -> None:
        if "\n" in text or "\r" in text:
            raise PolicyViolation("Refusing to type a multi-line value.")
        run_command(self.command, input_text=text)
