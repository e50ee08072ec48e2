# Path: item_report/output/__init__.py
"""
Output Module for item_report

Renders processed items as human-readable and machine-readable reports.

Architecture:
    ReportGenerator - Main entry point for report generation
    get_formatter   - Selects the formatter for a report type token

Report generation flow:
    (type, User, Items) -> [Role Policy] -> ProcessedItems -> [Formatter] -> str

Usage:
    from output import ReportGenerator

    generator = ReportGenerator()
    print(generator.generate_report('HTML', user, items))
"""

# Report generator
from .report_generator import ReportGenerator

# Formatters and selector
from .formatters import (
    BaseFormatter,
    UnsupportedReportTypeError,
    CsvFormatter,
    HtmlFormatter,
    get_formatter,
    get_available_formats,
)


__all__ = [
    # Generator
    'ReportGenerator',
    # Formatters
    'BaseFormatter',
    'UnsupportedReportTypeError',
    'CsvFormatter',
    'HtmlFormatter',
    'get_formatter',
    'get_available_formats',
]
