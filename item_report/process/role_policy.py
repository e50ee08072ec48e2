# Path: item_report/process/role_policy.py
"""
Role Policy

Applies the role-based visibility rules to input items and
aggregates the total of what remains visible.

Rules:
    ADMIN  - sees every item; items above PRIORITY_THRESHOLD are
             flagged as priority
    USER   - sees only items at or below STANDARD_USER_VALUE_LIMIT,
             never flagged
    other  - sees nothing

Values that are not numbers never raise: administrators see them
unflagged, standard users do not see them, and totals skip them.

The caller's sequence and items are never modified.
"""

from typing import Iterable, List

from constants import (
    PRIORITY_THRESHOLD,
    STANDARD_USER_VALUE_LIMIT,
    UserRole,
)
from core.logger.ipo_logging import get_process_logger

from .item_models import Item, Number, ProcessedItem, User


logger = get_process_logger('role_policy')


def apply_role_policy(user: User, items: Iterable[Item]) -> List[ProcessedItem]:
    """
    Filter and annotate items for the acting user.

    Args:
        user: Acting user
        items: Input items, in display order

    Returns:
        New list of ProcessedItem in input order
    """
    role = user.user_role

    if role is UserRole.ADMIN:
        processed = [_annotate_priority(item) for item in items]
    elif role is UserRole.USER:
        processed = [
            ProcessedItem.from_item(item)
            for item in items
            if _is_number(item.value)
            and item.value <= STANDARD_USER_VALUE_LIMIT
        ]
    else:
        logger.debug(f"Unrecognized role {user.role!r}: no items visible")
        processed = []

    logger.debug(
        f"Role policy for {user.name} ({user.role}): "
        f"{len(processed)} items visible"
    )
    return processed


def calculate_total(items: Iterable[Item]) -> Number:
    """
    Sum item values.

    Args:
        items: Items to aggregate (the rows that will be rendered)

    Returns:
        Sum of numeric values, 0 for no items
    """
    return sum((item.value for item in items if _is_number(item.value)), 0)


def _annotate_priority(item: Item) -> ProcessedItem:
    """Copy an item, flagging it when above the priority threshold."""
    return ProcessedItem.from_item(
        item,
        priority=_is_number(item.value) and item.value > PRIORITY_THRESHOLD,
    )


def _is_number(value) -> bool:
    # bool is an int subclass, not an amount
    return isinstance(value, (int, float)) and not isinstance(value, bool)


__all__ = ['apply_role_policy', 'calculate_total']
