# Path: item_report/config_loader.py
"""
Configuration Loader for item_report

Loads configuration from .env file for the report generation system.
Singleton pattern ensures consistent configuration across all components.

NO hardcoded paths, NO magic numbers.
All configuration comes from environment variables.
"""

import os
from typing import Optional, Any
from pathlib import Path
from dotenv import load_dotenv

from constants import DEFAULT_REPORT_TYPE


# ==============================================================================
# DEFAULT CONFIGURATION VALUES
# ==============================================================================

# Logging Defaults
DEFAULT_LOG_LEVEL: str = 'INFO'

# Output Defaults
DEFAULT_OUTPUT_ENCODING: str = 'utf-8'


class ConfigLoader:
    """
    Singleton configuration loader for item_report.

    Loads configuration from environment variables with type
    conversion and sensible defaults.

    Example:
        config = ConfigLoader()
        log_dir = config.get('log_dir')  # Returns Path object or None
        report_type = config.get('default_report_type')  # Returns str
    """

    _instance: Optional['ConfigLoader'] = None
    _initialized: bool = False

    def __new__(cls) -> 'ConfigLoader':
        """Ensure only one instance exists (singleton pattern)."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """
        Initialize configuration loader.

        Only runs once due to singleton pattern. Loads .env file
        on first instantiation.
        """
        if ConfigLoader._initialized:
            return

        # item_report/config_loader.py -> .env is in same directory
        current_file = Path(__file__).resolve()
        project_root = current_file.parent
        env_path = project_root / '.env'

        if env_path.exists():
            load_dotenv(dotenv_path=env_path, interpolate=True)

        self._config = self._load_configuration()
        ConfigLoader._initialized = True

    def _load_configuration(self) -> dict[str, Any]:
        """
        Load all configuration from environment.

        Returns:
            Dictionary of configuration values with proper types
        """
        config = {
            # ================================================================
            # LOGGING CONFIGURATION
            # ================================================================
            'log_dir': self._get_path('ITEM_REPORT_LOG_DIR'),
            'log_level': self._get_env('ITEM_REPORT_LOG_LEVEL', DEFAULT_LOG_LEVEL),
            'log_console': self._get_bool('ITEM_REPORT_LOG_CONSOLE', True),

            # ================================================================
            # OUTPUT CONFIGURATION
            # ================================================================
            'reports_dir': self._get_path('ITEM_REPORT_REPORTS_DIR'),
            'default_report_type': self._get_env(
                'ITEM_REPORT_DEFAULT_TYPE', DEFAULT_REPORT_TYPE
            ),
            'output_encoding': self._get_env(
                'ITEM_REPORT_OUTPUT_ENCODING', DEFAULT_OUTPUT_ENCODING
            ),
        }

        return config

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key.

        Args:
            key: Configuration key
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        return self._config.get(key, default)

    def _get_path(self, key: str, required: bool = False) -> Optional[Path]:
        """
        Get path from environment variable.

        Args:
            key: Environment variable name
            required: If True, raise error when missing

        Returns:
            Path object or None

        Raises:
            ValueError: If required and missing
        """
        value = os.getenv(key)

        if not value:
            if required:
                raise ValueError(f"Required path not configured: {key}")
            return None

        # Handle variable interpolation
        if '${' in value:
            value = os.path.expandvars(value)

        return Path(value)

    def _get_env(self, key: str, default: str = '') -> str:
        """Get string environment variable."""
        return os.getenv(key, default)

    def _get_bool(self, key: str, default: bool) -> bool:
        """Get boolean environment variable."""
        value = os.getenv(key)
        if value is None:
            return default
        return value.lower() in ('true', '1', 'yes', 'on')

    def __repr__(self) -> str:
        """String representation showing key settings."""
        return (
            f"ConfigLoader("
            f"log_level={self._config.get('log_level')}, "
            f"default_report_type={self._config.get('default_report_type')})"
        )


__all__ = ['ConfigLoader']
