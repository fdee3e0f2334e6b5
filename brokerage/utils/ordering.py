"""
Validation for full-list reorder requests.
"""

import uuid
from typing import List

from brokerage.utils.exceptions import BadRequestError


def validate_full_order(current_ids: List[uuid.UUID], requested_ids: List[uuid.UUID], label: str) -> None:
    """
    Check that a requested order is a permutation of the current ids.

    Args:
        current_ids: Ids that exist now
        requested_ids: Ids in the requested display order
        label: Resource name used in error messages

    Raises:
        BadRequestError: On duplicates, missing ids or foreign ids
    """
    if len(set(requested_ids)) != len(requested_ids):
        raise BadRequestError(f"Duplicate {label} ids in order")

    current, requested = set(current_ids), set(requested_ids)
    missing = current - requested
    foreign = requested - current
    if missing or foreign:
        raise BadRequestError(
            f"Order must list every {label} id exactly once "
            f"({len(missing)} missing, {len(foreign)} unknown)"
        )
