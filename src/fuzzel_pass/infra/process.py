from __future__ import annotations

"""
External Process Runner.

Single choke point for every interaction with an external tool. Spawns
the command, feeds optional stdin text, waits for completion without a
timeout and maps every failure mode onto the collaborator error taxonomy.
"""

import logging
import os
import subprocess
from dataclasses import dataclass
from typing import Dict, Optional, Sequence

from fuzzel_pass.domain.errors import CollaboratorFailureError, CollaboratorInvocationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandOutput:
    """
    Captured result of a finished command.

    Attributes:
        returncode: Process exit status.
        stdout: Decoded standard output.
        stderr: Decoded standard error (undecodable bytes replaced).
    """
    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0


def tool_name(command: Sequence[str]) -> str:
    """Human-readable name of a command, used in error messages."""
    return " ".join(command) if command else "<empty command>"


def run_command(
        command: Sequence[str],
        *,
        input_text: Optional[str] = None,
        env_overrides: Optional[Dict[str, str]] = None,
        check: bool = True,
) -> CommandOutput:
    """
    Run an external command to completion.

    Args:
        command: Program and arguments.
        input_text: Text written to the command's stdin, if any.
        env_overrides: Variables added to the inherited environment.
        check: If True, a non-zero exit raises CollaboratorFailureError.

    Returns:
        CommandOutput: Exit status and decoded streams.

    Raises:
        CollaboratorInvocationError: The command could not be spawned.
        CollaboratorFailureError: Non-zero exit (when check is set) or
            stdout that is not valid UTF-8.
    """
    name = tool_name(command)
    if not command:
        raise CollaboratorInvocationError(name, "No command configured.")

    env = None
    if env_overrides:
        env = os.environ.copy()
        env.update(env_overrides)

    logger.debug(f"Running external command: {name}")
    try:
        proc = subprocess.run(
            list(command),
            input=input_text.encode("utf-8") if input_text is not None else None,
            stdin=None if input_text is not None else subprocess.DEVNULL,
            capture_output=True,
            env=env,
        )
    except OSError as e:
        raise CollaboratorInvocationError(name, f"Failed to run the command: {e}") from e

    stderr = proc.stderr.decode("utf-8", errors="replace")

    if check and proc.returncode != 0:
        raise CollaboratorFailureError(
            name, f"Command exited with status {proc.returncode}.", stderr
        )

    try:
        stdout = proc.stdout.decode("utf-8")
    except UnicodeDecodeError as e:
        raise CollaboratorFailureError(name, "Output is not valid UTF-8.", stderr) from e

    return CommandOutput(returncode=proc.returncode, stdout=stdout, stderr=stderr)
