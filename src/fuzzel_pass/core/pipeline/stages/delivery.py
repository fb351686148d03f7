from __future__ import annotations

"""
Delivery Stage.

Dispatches the selected value to the clipboard or to the typing sink.
Multi-line values are refused for typing before the sink is touched.
"""

import logging

from fuzzel_pass.core.pipeline.collaborators import Collaborators
from fuzzel_pass.domain.entry_models import Field
from fuzzel_pass.domain.errors import ErrorKind, FuzzelPassError
from fuzzel_pass.domain.selection_models import StageResult

logger = logging.getLogger(__name__)


def deliver_field(collaborators: Collaborators, field: Field, type_mode: bool) -> StageResult[str]:
    """
    Send a field value to its sink.

    Args:
        collaborators: External capabilities.
        field: Field to deliver.
        type_mode: Type the value instead of copying it.

    Returns:
        StageResult[str]: Name of the sink used, or a failure.
    """
    if type_mode and (field.multiline or "\n" in field.value):
        return StageResult.failure(
            f'Field "{field.key}" is multi-line and cannot be typed.',
            ErrorKind.POLICY_VIOLATION,
        )

    sink_name = "type" if type_mode else "clipboard"
    sink = collaborators.type_sink if type_mode else collaborators.clipboard_sink

    try:
        sink(field.value)
    except FuzzelPassError as e:
        return StageResult.from_exception(e)

    logger.debug(f'Field "{field.key}" delivered to {sink_name}.')
    return StageResult.success(sink_name)
