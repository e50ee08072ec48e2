# Path: item_report/output/formatters/html_formatter.py
"""
HTML Formatter

Renders the report as a single HTML document holding one table.
Rows flagged as priority are rendered in bold.
"""

from constants import (
    HTML_COLUMNS,
    HTML_PRIORITY_STYLE,
    HTML_TITLE,
    HTML_TOTAL_LABEL,
    HTML_USER_LABEL,
    ReportType,
)
from process.item_models import Number, ProcessedItem, User

from .base_formatter import BaseFormatter


class HtmlFormatter(BaseFormatter):
    """Renders report as HTML."""

    @property
    def format_name(self) -> str:
        return ReportType.HTML.value

    @property
    def file_extension(self) -> str:
        return '.html'

    def format_header(self, user: User) -> str:
        """Open the document and table, naming the acting user."""
        columns = ''.join(f"<th>{label}</th>" for label in HTML_COLUMNS)
        lines = [
            "<html><body>",
            f"<h1>{HTML_TITLE}</h1>",
            f"<h2>{HTML_USER_LABEL}: {user.name}</h2>",
            "<table>",
            f"<tr>{columns}</tr>",
        ]
        return '\n'.join(lines) + '\n'

    def format_row(self, item: ProcessedItem, user: User) -> str:
        """Render one table row; the user is not shown per row."""
        style = f' style="{HTML_PRIORITY_STYLE}"' if item.priority else ''
        cells = ''.join(
            f"<td>{value}</td>"
            for value in (item.id, item.name, self.format_value(item.value))
        )
        return f"<tr{style}>{cells}</tr>\n"

    def format_footer(self, total: Number, user: User) -> str:
        """Close the table and document with the total line."""
        lines = [
            "</table>",
            f"<h3>{HTML_TOTAL_LABEL}: {self.format_value(total)}</h3>",
            "</body></html>",
        ]
        return '\n'.join(lines) + '\n'


__all__ = ['HtmlFormatter']
