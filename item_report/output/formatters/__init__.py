# Path: item_report/output/formatters/__init__.py
"""
Report Formatters

Each formatter renders report fragments in a specific output syntax.
Formatters are format-specific; they know nothing about the role
rules that decide which items are shown.
"""

from .base_formatter import BaseFormatter, UnsupportedReportTypeError
from .csv_formatter import CsvFormatter
from .html_formatter import HtmlFormatter
from .formatter_selector import get_formatter, get_available_formats

__all__ = [
    'BaseFormatter',
    'UnsupportedReportTypeError',
    'CsvFormatter',
    'HtmlFormatter',
    'get_formatter',
    'get_available_formats',
]
