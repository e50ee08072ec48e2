# Path: item_report/loaders/__init__.py
"""
item_report Loaders Package

Readers for caller-supplied input records.

Data Sources:
    - records: JSON documents holding one user and a list of items

Example:
    from loaders import RecordReader

    reader = RecordReader()
    records = reader.load_file(Path('input.json'))
"""

from .record_reader import RecordReader, RecordSet

__all__ = [
    'RecordReader',
    'RecordSet',
]
