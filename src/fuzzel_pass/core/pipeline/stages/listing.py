from __future__ import annotations

"""
Listing Stage.

Fetches the store listing, parses it into password paths and lets the
user pick one of them.
"""

import logging
from typing import List

from fuzzel_pass.core.analysis.listing_parser import parse_listing
from fuzzel_pass.core.pipeline.collaborators import Collaborators
from fuzzel_pass.domain.errors import ErrorKind, FuzzelPassError
from fuzzel_pass.domain.selection_models import StageResult

logger = logging.getLogger(__name__)


def list_passwords(collaborators: Collaborators) -> StageResult[List[str]]:
    """
    Retrieve and parse the password listing.

    Args:
        collaborators: External capabilities.

    Returns:
        StageResult[List[str]]: Leaf paths, or a failure. An empty store is
                                reported as NO_ENTRIES.
    """
    try:
        text = collaborators.listing_provider()
    except FuzzelPassError as e:
        logger.debug(f"Listing retrieval failed: {e}")
        return StageResult.from_exception(e)

    paths = parse_listing(text, collaborators.classifier)
    if not paths:
        return StageResult.failure("The password store contains no entries.", ErrorKind.NO_ENTRIES)

    return StageResult.success(paths)


def choose_password(collaborators: Collaborators, paths: List[str]) -> StageResult[str]:
    """
    Let the user pick one password path.

    Args:
        collaborators: External capabilities.
        paths: Candidate paths in listing order.

    Returns:
        StageResult[str]: The chosen path, or a cancellation/failure.
    """
    try:
        selection = collaborators.picker(paths)
    except FuzzelPassError as e:
        return StageResult.from_exception(e)

    logger.debug(f"Password selected: {selection}")
    return StageResult.success(selection)
