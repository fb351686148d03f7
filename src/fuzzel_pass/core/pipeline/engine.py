from __future__ import annotations

"""
Selection Orchestrator.

Coordinates one selection run:
1. Lists the store and lets the user pick a password (unless a path is given).
2. Reads and parses the entry.
3. Lets the user pick a field (unless a key is given).
4. Delivers the value to the clipboard or types it.

Every stage reports a StageResult; the first failure or cancellation ends
the run and no sink is touched afterwards.
"""

import logging
from typing import Optional

from fuzzel_pass.core.pipeline.collaborators import Collaborators
from fuzzel_pass.core.pipeline.stages.delivery import deliver_field
from fuzzel_pass.core.pipeline.stages.entry import choose_field, load_fields
from fuzzel_pass.core.pipeline.stages.listing import choose_password, list_passwords
from fuzzel_pass.domain.entry_models import Field
from fuzzel_pass.domain.selection_models import (
    SelectionResult,
    create_error_result,
    create_success_result,
)
from fuzzel_pass.infra.logging import register_secret

logger = logging.getLogger(__name__)


def run_selection(
        collaborators: Collaborators,
        *,
        path: Optional[str] = None,
        type_mode: bool = False,
        field_key: Optional[str] = None,
) -> SelectionResult:
    """
    Resolve a secret field and deliver it.

    Args:
        collaborators: External capabilities (real tools or fakes).
        path: Password path override. Skips the listing and the first pick.
        type_mode: Type the value instead of copying it to the clipboard.
        field_key: Field override. Skips the second pick.

    Returns:
        SelectionResult: Delivered, cancelled or failed outcome.
    """
    logger.debug("Selection run started.")

    # -------------------------------------------------------------------------
    # 1) Password path
    # -------------------------------------------------------------------------
    if path is None:
        listed = list_passwords(collaborators)
        if not listed.ok:
            return create_error_result(listed)

        chosen = choose_password(collaborators, listed.value or [])
        if not chosen.ok:
            return create_error_result(chosen)
        password_id = chosen.value or ""
    else:
        password_id = path

    # -------------------------------------------------------------------------
    # 2) Entry fields
    # -------------------------------------------------------------------------
    loaded = load_fields(collaborators, password_id)
    if not loaded.ok:
        return create_error_result(loaded, password_id=password_id)

    picked = choose_field(collaborators, loaded.value or [], field_key)
    if not picked.ok:
        return create_error_result(picked, password_id=password_id, field_key=field_key or "")
    field: Field = picked.value  # type: ignore[assignment]
    register_secret(field.value)

    # -------------------------------------------------------------------------
    # 3) Delivery
    # -------------------------------------------------------------------------
    delivered = deliver_field(collaborators, field, type_mode)
    if not delivered.ok:
        return create_error_result(delivered, password_id=password_id, field_key=field.key)

    logger.info(f'Delivered "{field.key}" of "{password_id}" to {delivered.value}.')
    return create_success_result(
        password_id=password_id,
        field_key=field.key,
        sink=delivered.value or "",
        multiline=field.multiline,
    )
