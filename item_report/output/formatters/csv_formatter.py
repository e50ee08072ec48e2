# Path: item_report/output/formatters/csv_formatter.py
"""
CSV Formatter

Renders the report as comma-delimited text for spreadsheet import.

Field values are written verbatim: a name containing the delimiter
shifts the columns of its row. The footer keeps the legacy three-field
layout (value, empty, empty) even though the header has four columns.
"""

from constants import CSV_COLUMNS, CSV_DELIMITER, CSV_TOTAL_LABEL, ReportType
from process.item_models import Number, ProcessedItem, User

from .base_formatter import BaseFormatter


class CsvFormatter(BaseFormatter):
    """Renders report as CSV."""

    @property
    def format_name(self) -> str:
        return ReportType.CSV.value

    @property
    def file_extension(self) -> str:
        return '.csv'

    def format_header(self, user: User) -> str:
        return CSV_DELIMITER.join(CSV_COLUMNS) + '\n'

    def format_row(self, item: ProcessedItem, user: User) -> str:
        fields = [
            str(item.id),
            str(item.name),
            self.format_value(item.value),
            str(user.name),
        ]
        return CSV_DELIMITER.join(fields) + '\n'

    def format_footer(self, total: Number, user: User) -> str:
        label_line = self._footer_line(CSV_TOTAL_LABEL)
        total_line = self._footer_line(self.format_value(total))
        return f"\n{label_line}\n{total_line}\n"

    def _footer_line(self, first: str) -> str:
        """Build a footer line: one value followed by two empty fields."""
        return CSV_DELIMITER.join([first, '', ''])


__all__ = ['CsvFormatter']
