# Path: item_report/tests/unit/test_config_loader.py
"""
Unit Tests for ConfigLoader

Tests the configuration loading functionality including:
- Environment variable parsing
- Type conversion methods
- Singleton pattern
- Default value handling
"""

import os
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

# Add item_report to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))


class TestConfigLoaderBasics:
    """Test basic ConfigLoader functionality."""

    def test_singleton_pattern(self, mock_env_vars, reset_singletons):
        """ConfigLoader should return same instance."""
        from config_loader import ConfigLoader

        config1 = ConfigLoader()
        config2 = ConfigLoader()

        assert config1 is config2

    def test_get_returns_value(self, mock_env_vars, reset_singletons):
        """get() should return configured value."""
        from config_loader import ConfigLoader

        config = ConfigLoader()
        assert config.get('log_level') == 'DEBUG'

    def test_get_returns_default_for_missing(self, mock_env_vars, reset_singletons):
        """get() should return default for missing keys."""
        from config_loader import ConfigLoader

        config = ConfigLoader()
        result = config.get('nonexistent_key', 'default_value')

        assert result == 'default_value'

    def test_repr_shows_settings(self, mock_env_vars, reset_singletons):
        from config_loader import ConfigLoader

        assert 'default_report_type=HTML' in repr(ConfigLoader())


class TestConfigLoaderTypeConversion:
    """Test type conversion methods."""

    def test_get_path_returns_path_object(self, mock_env_vars, reset_singletons):
        """Path values should be converted to Path objects."""
        from config_loader import ConfigLoader

        config = ConfigLoader()

        assert isinstance(config.get('log_dir'), Path)
        assert isinstance(config.get('reports_dir'), Path)

    def test_get_bool_true(self, mock_env_vars, reset_singletons):
        from config_loader import ConfigLoader

        with patch.dict(os.environ, {'ITEM_REPORT_LOG_CONSOLE': 'yes'}):
            config = ConfigLoader()

        assert config.get('log_console') is True

    def test_get_bool_false(self, mock_env_vars, reset_singletons):
        from config_loader import ConfigLoader

        assert ConfigLoader().get('log_console') is False

    def test_report_type_from_env(self, mock_env_vars, reset_singletons):
        from config_loader import ConfigLoader

        assert ConfigLoader().get('default_report_type') == 'HTML'


class TestConfigLoaderDefaults:
    """Test defaults when variables are unset."""

    def _clean_env(self):
        return {
            key: value for key, value in os.environ.items()
            if not key.startswith('ITEM_REPORT_')
        }

    def test_defaults(self, reset_singletons):
        from config_loader import ConfigLoader

        with patch.dict(os.environ, self._clean_env(), clear=True):
            config = ConfigLoader()

        assert config.get('log_dir') is None
        assert config.get('reports_dir') is None
        assert config.get('log_level') == 'INFO'
        assert config.get('log_console') is True
        assert config.get('default_report_type') == 'CSV'
        assert config.get('output_encoding') == 'utf-8'

    def test_required_path_missing_raises(self, reset_singletons):
        from config_loader import ConfigLoader

        with patch.dict(os.environ, self._clean_env(), clear=True):
            config = ConfigLoader()
            with pytest.raises(ValueError, match='ITEM_REPORT_MISSING'):
                config._get_path('ITEM_REPORT_MISSING', required=True)

    def test_path_interpolation(self, reset_singletons):
        from config_loader import ConfigLoader

        env = dict(self._clean_env(), REPORT_BASE='/srv/data',
                   ITEM_REPORT_REPORTS_DIR='${REPORT_BASE}/reports')
        with patch.dict(os.environ, env, clear=True):
            config = ConfigLoader()

        assert config.get('reports_dir') == Path('/srv/data/reports')
