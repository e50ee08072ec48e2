# Path: item_report/constants.py
"""
System-Wide Constants for item_report

Central repository for all constant values used across the system.
NO HARDCODED VALUES in module code - all constants defined here.

Constants are organized by category:
- Business Thresholds
- User Roles
- Report Types
- Report Layout Labels
- Record Keys
- Status Codes
"""

from enum import Enum
from typing import Final, Optional


# ==============================================================================
# BUSINESS THRESHOLDS
# ==============================================================================

# Items strictly above this value are flagged as priority for administrators
PRIORITY_THRESHOLD: Final[int] = 1000

# Standard users only see items at or below this value
STANDARD_USER_VALUE_LIMIT: Final[int] = 500


# ==============================================================================
# USER ROLES
# ==============================================================================

class UserRole(str, Enum):
    """
    Roles recognized by the visibility rules.

    Any other role string is an unrecognized role: it is not an error,
    it simply sees no items.
    """
    ADMIN = 'ADMIN'
    USER = 'USER'

    @classmethod
    def from_value(cls, value) -> Optional['UserRole']:
        """
        Resolve a raw role string.

        Args:
            value: Role as supplied by the caller

        Returns:
            UserRole member, or None for an unrecognized role
        """
        try:
            return cls(value)
        except ValueError:
            return None


# ==============================================================================
# REPORT TYPES
# ==============================================================================

class ReportType(str, Enum):
    """Supported report formats (tokens are case-sensitive)."""
    CSV = 'CSV'
    HTML = 'HTML'


DEFAULT_REPORT_TYPE: Final[str] = ReportType.CSV.value


# ==============================================================================
# REPORT LAYOUT LABELS
# ==============================================================================

# Delimited text
CSV_DELIMITER: Final[str] = ','
CSV_COLUMNS: Final[tuple[str, ...]] = ('ID', 'NOME', 'VALOR', 'USUARIO')
CSV_TOTAL_LABEL: Final[str] = 'Total'

# Markup
HTML_TITLE: Final[str] = 'Relatório'
HTML_USER_LABEL: Final[str] = 'Usuário'
HTML_COLUMNS: Final[tuple[str, ...]] = ('ID', 'Nome', 'Valor')
HTML_TOTAL_LABEL: Final[str] = 'Total'
HTML_PRIORITY_STYLE: Final[str] = 'font-weight:bold;'


# ==============================================================================
# RECORD KEYS
# ==============================================================================

class RecordKeys:
    """
    Standard JSON keys for input records.

    Used for consistent parsing of user and item records.
    """
    # Top level
    USER: Final[str] = 'user'
    ITEMS: Final[str] = 'items'

    # User
    NAME: Final[str] = 'name'
    ROLE: Final[str] = 'role'

    # Item
    ID: Final[str] = 'id'
    VALUE: Final[str] = 'value'


# ==============================================================================
# DISPLAY FORMATTING
# ==============================================================================

MENU_WIDTH: Final[int] = 60
MENU_HEADER: Final[str] = '=' * MENU_WIDTH

# Status indicators (ASCII only - no emojis)
STATUS_OK: Final[str] = '[OK]'
STATUS_FAIL: Final[str] = '[FAIL]'


# ==============================================================================
# LOGGING CATEGORIES
# ==============================================================================

class LogCategory(str, Enum):
    """
    IPO logging categories for item_report.
    """
    INPUT = 'input'
    PROCESS = 'process'
    OUTPUT = 'output'


# ==============================================================================
# EXPORTS
# ==============================================================================

__all__ = [
    # Enums
    'UserRole',
    'ReportType',
    'LogCategory',

    # Thresholds
    'PRIORITY_THRESHOLD',
    'STANDARD_USER_VALUE_LIMIT',
    'DEFAULT_REPORT_TYPE',

    # Layout
    'CSV_DELIMITER',
    'CSV_COLUMNS',
    'CSV_TOTAL_LABEL',
    'HTML_TITLE',
    'HTML_USER_LABEL',
    'HTML_COLUMNS',
    'HTML_TOTAL_LABEL',
    'HTML_PRIORITY_STYLE',

    # Key classes
    'RecordKeys',

    # Display
    'MENU_WIDTH',
    'MENU_HEADER',
    'STATUS_OK',
    'STATUS_FAIL',
]
