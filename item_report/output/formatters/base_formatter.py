# Path: item_report/output/formatters/base_formatter.py
"""
Base Formatter

Abstract base class for report formatters.

A report is rendered in three phases: one header, one row per
processed item, one footer. Every phase receives the acting user so
the coordinator never special-cases a formatter; each formatter uses
only the arguments it needs.

Formatters know nothing about business rules. The priority flag on a
ProcessedItem is decided upstream; formatters only read it.
"""

from abc import ABC, abstractmethod

from process.item_models import Number, ProcessedItem, User


class UnsupportedReportTypeError(ValueError):
    """Raised when a report type token matches no formatter."""

    def __init__(self, report_type):
        self.report_type = report_type
        super().__init__(f"Unsupported report type: {report_type}")


class BaseFormatter(ABC):
    """
    Abstract base for report formatters.

    Subclasses render fragments in one output syntax. All methods are
    pure functions of their arguments.
    """

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Report type token for this format (e.g., 'CSV')."""

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """File extension including dot (e.g., '.csv')."""

    @abstractmethod
    def format_header(self, user: User) -> str:
        """
        Render the report header.

        Args:
            user: Acting user

        Returns:
            Header fragment
        """

    @abstractmethod
    def format_row(self, item: ProcessedItem, user: User) -> str:
        """
        Render one item row.

        Args:
            item: Processed item to render
            user: Acting user

        Returns:
            Row fragment
        """

    @abstractmethod
    def format_footer(self, total: Number, user: User) -> str:
        """
        Render the report footer.

        Args:
            total: Sum of values over the rendered rows
            user: Acting user

        Returns:
            Footer fragment
        """

    def format_value(self, value) -> str:
        """Format a value for report output."""
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        return str(value)


__all__ = ['BaseFormatter', 'UnsupportedReportTypeError']
