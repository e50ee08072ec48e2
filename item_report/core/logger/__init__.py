# Path: item_report/core/logger/__init__.py
"""
item_report Logger Package

IPO-aware logging for the report generation system.

Provides separate log streams for:
- INPUT layer (record reader, CLI)
- PROCESS layer (role policy, aggregation)
- OUTPUT layer (formatters, report generator)
"""

from .ipo_logging import (
    setup_ipo_logging,
    get_input_logger,
    get_process_logger,
    get_output_logger,
)

__all__ = [
    'setup_ipo_logging',
    'get_input_logger',
    'get_process_logger',
    'get_output_logger',
]
