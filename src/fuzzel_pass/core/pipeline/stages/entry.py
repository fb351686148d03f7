from __future__ import annotations

"""
Entry Stage.

Reads the body of the selected entry, parses its fields and resolves the
field the user wants.
"""

import logging
from typing import List, Optional

from fuzzel_pass.core.analysis.field_parser import parse_entry
from fuzzel_pass.core.pipeline.collaborators import Collaborators
from fuzzel_pass.domain.entry_models import Field, field_keys, find_field
from fuzzel_pass.domain.errors import ErrorKind, FuzzelPassError
from fuzzel_pass.domain.selection_models import StageResult

logger = logging.getLogger(__name__)


def load_fields(collaborators: Collaborators, password_id: str) -> StageResult[List[Field]]:
    """
    Fetch and parse the entry at a path.

    Args:
        collaborators: External capabilities.
        password_id: Path of the entry.

    Returns:
        StageResult[List[Field]]: Fields led by the synthetic password
                                  field, or a failure.
    """
    try:
        body = collaborators.entry_provider(password_id)
        fields = parse_entry(body, password_id)
    except FuzzelPassError as e:
        return StageResult.from_exception(e)

    logger.debug(f"Entry '{password_id}' has {len(fields)} fields.")
    return StageResult.success(fields)


def choose_field(
        collaborators: Collaborators,
        fields: List[Field],
        field_key: Optional[str] = None,
) -> StageResult[Field]:
    """
    Resolve the field to deliver.

    Args:
        collaborators: External capabilities.
        fields: Parsed entry fields.
        field_key: Preselected key. When None, the user picks one.

    Returns:
        StageResult[Field]: The first field with the chosen key, or a
                            cancellation/failure.
    """
    key = field_key
    if key is None:
        try:
            key = collaborators.picker(field_keys(fields))
        except FuzzelPassError as e:
            return StageResult.from_exception(e)

    selected = find_field(fields, key)
    if selected is None:
        return StageResult.failure(f'The entry has no field "{key}".', ErrorKind.UNKNOWN_FIELD)

    return StageResult.success(selected)
