from __future__ import annotations

"""
Selection Domain Data Models.

Defines the result objects exchanged between the pipeline stages, the
orchestrator and the interface layer. Each stage reports success or a
classified failure as a value so the orchestrator can short-circuit
explicitly.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Optional, TypeVar

from fuzzel_pass.domain.errors import ErrorKind, FuzzelPassError

T = TypeVar("T")

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

class SelectionOutcome(Enum):
    """Terminal state of a selection run."""
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"
    FAILED = "FAILED"


@dataclass(frozen=True)
class StageResult(Generic[T]):
    """
    Result of a single pipeline stage.

    Attributes:
        ok: Flag indicating success.
        value: Stage payload when ok is True.
        error: Human-readable description of the failure.
        kind: Classification of the failure.
    """
    ok: bool
    value: Optional[T] = None
    error: str = ""
    kind: Optional[ErrorKind] = None

    @classmethod
    def success(cls, value: T) -> "StageResult[T]":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: str, kind: ErrorKind) -> "StageResult[T]":
        return cls(ok=False, error=error, kind=kind)

    @classmethod
    def from_exception(cls, exc: FuzzelPassError) -> "StageResult[T]":
        return cls(ok=False, error=str(exc), kind=exc.kind)


@dataclass(frozen=True)
class SelectionResult:
    """
    Unified result of a complete selection run.

    The delivered secret itself is never stored here.

    Attributes:
        ok: True if a value was delivered to a sink.
        outcome: Terminal state of the run.
        error: Descriptive message in case of failure or cancellation.
        kind: Classification of the failure.
        password_id: Path of the selected entry, if one was reached.
        field_key: Key of the selected field, if one was reached.
        sink: Name of the sink that received the value.
        multiline: Whether the delivered field was a multi-line block.
    """
    ok: bool
    outcome: SelectionOutcome
    error: str = ""
    kind: Optional[ErrorKind] = None

    password_id: str = ""
    field_key: str = ""
    sink: str = ""
    multiline: bool = False

    @property
    def cancelled(self) -> bool:
        return self.outcome is SelectionOutcome.CANCELLED

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        stage: StageResult[Any],
        password_id: str = "",
        field_key: str = "",
) -> SelectionResult:
    """
    Create a terminal result from a failed stage.

    Cancellation keeps its own outcome so the interface can report it
    without alarm.

    Args:
        stage: The failed stage result.
        password_id: Entry reached before the failure, if any.
        field_key: Field reached before the failure, if any.

    Returns:
        SelectionResult: An immutable failed or cancelled result.
    """
    outcome = (
        SelectionOutcome.CANCELLED
        if stage.kind is ErrorKind.CANCELLED
        else SelectionOutcome.FAILED
    )
    return SelectionResult(
        ok=False,
        outcome=outcome,
        error=stage.error,
        kind=stage.kind,
        password_id=password_id,
        field_key=field_key,
    )


def create_success_result(
        password_id: str,
        field_key: str,
        sink: str,
        multiline: bool = False,
) -> SelectionResult:
    """
    Create a successful result after the value reached its sink.

    Args:
        password_id: Path of the selected entry.
        field_key: Key of the delivered field.
        sink: Name of the sink that received the value.
        multiline: Whether the delivered field was a multi-line block.

    Returns:
        SelectionResult: An immutable success result.
    """
    return SelectionResult(
        ok=True,
        outcome=SelectionOutcome.DELIVERED,
        password_id=password_id,
        field_key=field_key,
        sink=sink,
        multiline=multiline,
    )
