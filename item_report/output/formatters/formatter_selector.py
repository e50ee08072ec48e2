# Path: item_report/output/formatters/formatter_selector.py
"""
Formatter Selector

Maps a report type token to a formatter instance.

The set of formats is closed: each ReportType member has exactly one
formatter class, and any other token is rejected.
"""

from typing import Dict, List, Type

from constants import ReportType

from .base_formatter import BaseFormatter, UnsupportedReportTypeError
from .csv_formatter import CsvFormatter
from .html_formatter import HtmlFormatter


_FORMATTERS: Dict[ReportType, Type[BaseFormatter]] = {
    ReportType.CSV: CsvFormatter,
    ReportType.HTML: HtmlFormatter,
}


def get_formatter(report_type) -> BaseFormatter:
    """
    Get a formatter instance for a report type token.

    Args:
        report_type: 'CSV' or 'HTML' (case-sensitive), or a ReportType

    Returns:
        New formatter instance

    Raises:
        UnsupportedReportTypeError: If the token matches no formatter
    """
    try:
        key = ReportType(report_type)
    except ValueError:
        raise UnsupportedReportTypeError(report_type) from None
    return _FORMATTERS[key]()


def get_available_formats() -> List[str]:
    """Return list of recognized report type tokens."""
    return [report_type.value for report_type in _FORMATTERS]


__all__ = ['get_formatter', 'get_available_formats']
