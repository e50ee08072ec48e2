# Path: item_report/process/__init__.py
"""
Process Layer for item_report

The PROCESS layer holds the business rules of report generation:
- item_models - Item, ProcessedItem and User records
- role_policy - role-based filtering, priority flagging, totals

Follows the IPO pattern:
- Read from INPUT layer (loaders)
- Process data (filtering, annotation, aggregation)
- Prepare for OUTPUT layer (formatters, report generator)
"""

from process.item_models import Item, ProcessedItem, User
from process.role_policy import apply_role_policy, calculate_total

__all__ = [
    'Item',
    'ProcessedItem',
    'User',
    'apply_role_policy',
    'calculate_total',
]
