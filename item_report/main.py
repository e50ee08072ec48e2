#!/usr/bin/env python3
# Path: item_report/main.py
"""
item_report - Main Entry Point

Renders a role-aware item report from a JSON input document.

Data Flow:
    INPUT:   JSON document with one user and a list of items
    PROCESS: Role policy (filtering, priority flags) and total
    OUTPUT:  CSV or HTML report on stdout or in a file

Usage:
    python main.py input.json                  # Default report type
    python main.py input.json --type HTML      # HTML report
    python main.py input.json -o reports/      # Write into a directory

Without --output, reports go to ITEM_REPORT_REPORTS_DIR when it is set,
otherwise to stdout.

Prerequisites:
    - Configured .env file (optional)
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

# Ensure item_report root is in path
sys.path.insert(0, str(Path(__file__).parent))

from config_loader import ConfigLoader
from core.logger import setup_ipo_logging, get_input_logger
from loaders import RecordReader
from output import (
    ReportGenerator,
    UnsupportedReportTypeError,
    get_available_formats,
    get_formatter,
)
from constants import STATUS_OK, STATUS_FAIL, MENU_HEADER


def print_banner() -> None:
    """Print application banner."""
    print(MENU_HEADER, file=sys.stderr)
    print("  ITEM_REPORT - Role-Aware Item Reports", file=sys.stderr)
    print(MENU_HEADER, file=sys.stderr)


def initialize_system() -> ConfigLoader:
    """
    Initialize item_report system components.

    Returns:
        ConfigLoader instance
    """
    config = ConfigLoader()

    setup_ipo_logging(
        log_dir=config.get('log_dir'),
        log_level=config.get('log_level', 'INFO'),
        console_output=config.get('log_console', True)
    )

    return config


def resolve_output_path(output: Path, user_name, extension: str) -> Path:
    """
    Resolve where a report is written.

    Args:
        output: File path, or existing directory
        user_name: Acting user's name (used for directory output)
        extension: Formatter file extension

    Returns:
        Path to the report file
    """
    if output.is_dir():
        safe_name = str(user_name).replace(' ', '_') or 'anonymous'
        return output / f"report_{safe_name}{extension}"
    return output


def run(
    input_path: Path,
    report_type: str,
    config: ConfigLoader,
    logger,
    output: Optional[Path] = None,
) -> int:
    """
    Generate one report.

    Args:
        input_path: JSON input document
        report_type: Report type token
        config: Configuration loader
        logger: Logger instance
        output: Optional file or directory to write into (stdout if None)

    Returns:
        Exit code (0 for success)
    """
    records = RecordReader().load_file(input_path)
    if records is None:
        print(f"{STATUS_FAIL} Could not read input: {input_path}", file=sys.stderr)
        return 1

    generator = ReportGenerator()
    report = generator.generate_report(report_type, records.user, records.items)

    if output is None:
        print(report)
        return 0

    extension = get_formatter(report_type).file_extension
    target = resolve_output_path(output, records.user.name, extension)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(report, encoding=config.get('output_encoding', 'utf-8'))

    logger.info(f"Wrote {report_type} report: {target}")
    print(f"{STATUS_OK} Report written: {target}", file=sys.stderr)
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """
    Main entry point for item_report.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        description='item_report - Role-Aware Item Reports',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py input.json                Report in the default format
  python main.py input.json --type HTML    HTML report on stdout
  python main.py input.json -o out.csv     Write report to a file
        """
    )

    parser.add_argument(
        'input',
        type=Path,
        help='JSON document with "user" and "items"'
    )

    parser.add_argument(
        '--type', '-t',
        dest='report_type',
        type=str,
        help=f"Report type: {', '.join(get_available_formats())}"
    )

    parser.add_argument(
        '--output', '-o',
        type=Path,
        help='Write report to this file or directory (default: reports_dir, else stdout)'
    )

    parser.add_argument(
        '--quiet', '-q',
        action='store_true',
        help='Suppress banner'
    )

    args = parser.parse_args(argv)

    if not args.quiet:
        print_banner()

    try:
        config = initialize_system()
        logger = get_input_logger('main')

        report_type = args.report_type or config.get('default_report_type')

        output = args.output
        if output is None and config.get('reports_dir'):
            output = config.get('reports_dir')
            output.mkdir(parents=True, exist_ok=True)

        return run(args.input, report_type, config, logger, output)

    except UnsupportedReportTypeError as e:
        print(f"{STATUS_FAIL} Error: {e}", file=sys.stderr)
        get_input_logger('main').error(f"Rejected report type: {e.report_type}")
        return 1

    except OSError as e:
        print(f"{STATUS_FAIL} Could not write report: {e}", file=sys.stderr)
        return 1

    except KeyboardInterrupt:
        print("\n[Interrupted]", file=sys.stderr)
        return 130


if __name__ == '__main__':
    sys.exit(main())
