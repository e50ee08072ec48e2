# Path: item_report/process/item_models.py
"""
Item Models

Format-agnostic records flowing through report generation.
The role policy produces ProcessedItem rows; formatters consume them.

All records are frozen: processing builds new values instead of
mutating what the caller passed in.
"""

from dataclasses import dataclass
from typing import Any, Optional, Union

from constants import UserRole


Number = Union[int, float]


@dataclass(frozen=True)
class Item:
    """
    Single input record.

    Attributes:
        id: Opaque identifier
        name: Display text
        value: Numeric magnitude
    """
    id: Any
    name: str
    value: Number


@dataclass(frozen=True)
class ProcessedItem(Item):
    """
    Item after the role policy has been applied.

    Attributes:
        priority: Presentation hint set for administrators when the
                  value exceeds the priority threshold
    """
    priority: bool = False

    @classmethod
    def from_item(cls, item: Item, priority: bool = False) -> 'ProcessedItem':
        """Copy an Item into a ProcessedItem."""
        return cls(id=item.id, name=item.name, value=item.value, priority=priority)


@dataclass(frozen=True)
class User:
    """
    Acting user.

    Attributes:
        name: Display text
        role: Raw role as supplied by the caller
    """
    name: str
    role: Any = None

    @property
    def user_role(self) -> Optional[UserRole]:
        """Recognized role, or None when the role is unknown."""
        return UserRole.from_value(self.role)


__all__ = ['Item', 'ProcessedItem', 'User', 'Number']
