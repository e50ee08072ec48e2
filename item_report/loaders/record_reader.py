# Path: item_report/loaders/record_reader.py
"""
Record Reader for item_report

Reads user and item records supplied by the caller and builds the
typed records consumed by the report generator.

Records are taken as-is: missing fields fall back to empty defaults
and no value is validated. Input dictionaries are never modified.

Expected JSON layout:
    {
        "user":  {"name": "Ana", "role": "ADMIN"},
        "items": [{"id": 1, "name": "A", "value": 200}, ...]
    }
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional

from constants import RecordKeys
from core.logger.ipo_logging import get_input_logger
from process.item_models import Item, User


@dataclass
class RecordSet:
    """
    User and items loaded from one input document.

    Attributes:
        user: Acting user
        items: Items in document order
        source: File the records were read from, if any
    """
    user: User
    items: List[Item] = field(default_factory=list)
    source: Optional[Path] = None


class RecordReader:
    """
    Reader for user/item input records.

    Example:
        reader = RecordReader()

        records = reader.load_file(Path('input.json'))
        if records:
            text = generator.generate_report('CSV', records.user, records.items)
    """

    def __init__(self):
        self.logger = get_input_logger('record_reader')

    def load_file(self, path: Path) -> Optional[RecordSet]:
        """
        Load user and items from a JSON file.

        Args:
            path: Path to the input document

        Returns:
            RecordSet or None if failed to load
        """
        if not path.exists():
            self.logger.error(f"Input file not found: {path}")
            return None

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            self.logger.error(f"Invalid JSON in {path}: {e}")
            return None
        except OSError as e:
            self.logger.error(f"Failed to read {path}: {e}")
            return None

        records = self.parse_document(data)
        records.source = path

        self.logger.info(
            f"Loaded {len(records.items)} items for {records.user.name} from {path}"
        )
        return records

    def parse_document(self, data: dict) -> RecordSet:
        """
        Build a RecordSet from a parsed document.

        Args:
            data: Dictionary with 'user' and 'items' keys

        Returns:
            RecordSet
        """
        return RecordSet(
            user=self.read_user(data.get(RecordKeys.USER, {})),
            items=self.read_items(data.get(RecordKeys.ITEMS, [])),
        )

    def read_user(self, data: dict) -> User:
        """Build a User from a record dictionary."""
        return User(
            name=data.get(RecordKeys.NAME, ''),
            role=data.get(RecordKeys.ROLE),
        )

    def read_items(self, records: Iterable[dict]) -> List[Item]:
        """Build Items from record dictionaries, keeping their order."""
        return [self.read_item(record) for record in records]

    def read_item(self, data: dict) -> Item:
        """Build an Item from a record dictionary."""
        return Item(
            id=data.get(RecordKeys.ID),
            name=data.get(RecordKeys.NAME, ''),
            value=data.get(RecordKeys.VALUE, 0),
        )


__all__ = ['RecordReader', 'RecordSet']
