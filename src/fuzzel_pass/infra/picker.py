from __future__ import annotations

"""
Dmenu-Style Picker.

Presents newline-separated options through an external chooser such as
'fuzzel --dmenu' and reads back the chosen line. The chooser's exit status
is the only cancellation signal.
"""

import logging
from typing import List, Optional, Sequence

from fuzzel_pass.domain.errors import PickCancelled
from fuzzel_pass.infra.process import run_command, tool_name

logger = logging.getLogger(__name__)

DEFAULT_PICKER_COMMAND: List[str] = ["fuzzel", "--dmenu"]


class DmenuPicker:
    """
    Single-choice picker driven by a dmenu-compatible command.

    Attributes:
        command: Chooser program and arguments.
    """

    def __init__(self, command: Optional[Sequence[str]] = None) -> None:
        self.command: List[str] = list(command or DEFAULT_PICKER_COMMAND)

    def pick(self, options: Sequence[str]) -> str:
        """
        Let the user choose one option.

        Args:
            options: Ordered, distinct options.

        Returns:
            str: The chosen text, trimmed.

        Raises:
            PickCancelled: The chooser exited unsuccessfully or returned nothing.
            CollaboratorInvocationError: The chooser could not be run.
            CollaboratorFailureError: The chooser printed non-UTF-8 output.
        """
        out = run_command(self.command, input_text="\n".join(options), check=False)

        if not out.ok:
            raise PickCancelled(tool_name(self.command), "Selection cancelled.")

        selection = out.stdout.strip()
        if not selection:
            raise PickCancelled(tool_name(self.command), "Nothing was selected.")

        logger.debug(f"Picker returned a selection out of {len(options)} options.")
        return selection
