# Path: item_report/output/report_generator.py
"""
Report Generator

Coordinator for report generation. Applies the role policy, computes
the total and delegates every fragment of the output to the selected
formatter. It holds no formatting knowledge of its own.

Architecture:
    (type, User, Items)  ->  [Role Policy]  ->  ProcessedItems  ->  [Formatter]  ->  str

Usage:
    from output import ReportGenerator

    generator = ReportGenerator()
    text = generator.generate_report('CSV', user, items)
"""

from typing import Iterable

from core.logger.ipo_logging import get_output_logger
from process.item_models import Item, User
from process.role_policy import apply_role_policy, calculate_total

from .formatters import get_formatter


logger = get_output_logger('report_generator')


class ReportGenerator:
    """
    Generates item reports for a user.

    Stateless: one instance may serve any number of calls, including
    concurrent ones.

    Example:
        generator = ReportGenerator()
        csv_text = generator.generate_report('CSV', user, items)
        html_text = generator.generate_report('HTML', user, items)
    """

    def generate_report(self, report_type, user: User, items: Iterable[Item]) -> str:
        """
        Render a report.

        The formatter is resolved before any item is processed, so an
        unknown report type fails without doing any work.

        Args:
            report_type: Report type token ('CSV' or 'HTML')
            user: Acting user
            items: Input items, in display order

        Returns:
            Rendered report with surrounding whitespace removed

        Raises:
            UnsupportedReportTypeError: If report_type matches no formatter
        """
        formatter = get_formatter(report_type)

        processed = apply_role_policy(user, items)
        total = calculate_total(processed)

        parts = [formatter.format_header(user)]
        parts.extend(formatter.format_row(item, user) for item in processed)
        parts.append(formatter.format_footer(total, user))

        logger.info(
            f"Generated {formatter.format_name} report for {user.name}: "
            f"{len(processed)} rows, total {total}"
        )
        return ''.join(parts).strip()


__all__ = ['ReportGenerator']
