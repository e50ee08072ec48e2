# Path: item_report/tests/fixtures/sample_data.py
"""
Sample Data Generators for Testing

Provides functions to generate sample test data for various scenarios.
"""

from typing import Optional


def create_item_record(
    item_id=1,
    name: str = 'Item',
    value=100,
) -> dict:
    """
    Create a sample item record.

    Args:
        item_id: Item identifier
        name: Display name
        value: Numeric value

    Returns:
        Dictionary representing an item
    """
    return {'id': item_id, 'name': name, 'value': value}


def create_user_record(name: str = 'Ana', role: Optional[str] = 'ADMIN') -> dict:
    """Create a sample user record."""
    return {'name': name, 'role': role}


def create_input_document(
    user_name: str = 'Ana',
    role: Optional[str] = 'ADMIN',
    values: Optional[list] = None,
) -> dict:
    """
    Create a complete input document.

    Items are named 'A', 'B', ... with ids 1, 2, ...

    Args:
        user_name: Acting user's name
        role: Acting user's role
        values: Item values, in order

    Returns:
        Dictionary with 'user' and 'items'
    """
    if values is None:
        values = [200, 1500]

    items = [
        create_item_record(i, chr(ord('A') + i - 1), value)
        for i, value in enumerate(values, 1)
    ]
    return {
        'user': create_user_record(user_name, role),
        'items': items,
    }
