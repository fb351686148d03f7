from __future__ import annotations

"""
Error Taxonomy.

Exceptions raised by the parsers and the external collaborators, plus the
ErrorKind classification carried by stage and selection results.
"""

from enum import Enum

from fuzzel_pass.domain.entry_models import Field


class ErrorKind(Enum):
    """Classification of every way a selection run can end without delivery."""
    INVOCATION = "INVOCATION"
    TOOL_FAILURE = "TOOL_FAILURE"
    CANCELLED = "CANCELLED"
    MALFORMED_ENTRY = "MALFORMED_ENTRY"
    POLICY_VIOLATION = "POLICY_VIOLATION"
    NO_ENTRIES = "NO_ENTRIES"
    UNKNOWN_FIELD = "UNKNOWN_FIELD"


class FuzzelPassError(Exception):
    """Base class for exceptions in this package."""
    kind: ErrorKind = ErrorKind.TOOL_FAILURE

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class CollaboratorError(FuzzelPassError):
    """Failure while talking to an external tool."""

    def __init__(self, tool: str, message: str):
        super().__init__(message)
        self.tool = tool

    def __str__(self) -> str:
        if self.tool:
            return f'"{self.tool}": {self.message}'
        return super().__str__()


class CollaboratorInvocationError(CollaboratorError):
    """The tool could not be spawned or its pipes failed."""
    kind = ErrorKind.INVOCATION


class CollaboratorFailureError(CollaboratorError):
    """The tool ran but reported failure (non-zero exit, undecodable output)."""
    kind = ErrorKind.TOOL_FAILURE

    def __init__(self, tool: str, message: str, stderr: str = ""):
        super().__init__(tool, message)
        self.stderr = stderr

    def __str__(self) -> str:
        text = super().__str__()
        if self.stderr:
            return f"{text}\n{self.stderr.rstrip()}"
        return text


class PickCancelled(CollaboratorError):
    """The user dismissed the picker without choosing."""
    kind = ErrorKind.CANCELLED


class MultilineUnterminated(FuzzelPassError):
    """
    An entry opened a multi-line block that is never closed.

    Attributes:
        password_id: Path of the offending entry.
        partial_field: Field holding the key and the buffer read so far.
    """
    kind = ErrorKind.MALFORMED_ENTRY

    def __init__(self, password_id: str, partial_field: Field):
        super().__init__(
            f'Multi-line field "{partial_field.key}" in "{password_id}" is never terminated.'
        )
        self.password_id = password_id
        self.partial_field = partial_field


class PolicyViolation(FuzzelPassError):
    """A requested delivery is refused by policy."""
    kind = ErrorKind.POLICY_VIOLATION
