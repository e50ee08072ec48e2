# Path: item_report/tests/conftest.py
"""
Pytest Configuration and Shared Fixtures for item_report

Provides common test fixtures used across all test modules.
"""

import json
import os
import sys
import tempfile
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

# Add item_report and tests to path for imports
ITEM_REPORT_ROOT = Path(__file__).parent.parent
TESTS_ROOT = Path(__file__).parent
sys.path.insert(0, str(ITEM_REPORT_ROOT))
sys.path.insert(0, str(TESTS_ROOT))

from fixtures.sample_data import create_input_document


# ==============================================================================
# ENVIRONMENT FIXTURES
# ==============================================================================

@pytest.fixture
def mock_env_vars(tmp_path):
    """Provide mock environment variables for testing."""
    env_vars = {
        'ITEM_REPORT_LOG_DIR': str(tmp_path / 'logs'),
        'ITEM_REPORT_LOG_LEVEL': 'DEBUG',
        'ITEM_REPORT_LOG_CONSOLE': 'false',
        'ITEM_REPORT_REPORTS_DIR': str(tmp_path / 'reports'),
        'ITEM_REPORT_DEFAULT_TYPE': 'HTML',
    }

    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


# ==============================================================================
# SAMPLE DATA FIXTURES
# ==============================================================================

@pytest.fixture
def admin_user():
    """Administrator user."""
    from process.item_models import User
    return User(name='Ana', role='ADMIN')


@pytest.fixture
def standard_user():
    """Standard user."""
    from process.item_models import User
    return User(name='Bruno', role='USER')


@pytest.fixture
def guest_user():
    """User with a role outside the recognized set."""
    from process.item_models import User
    return User(name='Carla', role='GUEST')


@pytest.fixture
def sample_items():
    """Items straddling both thresholds, in a fixed order."""
    from process.item_models import Item
    return [
        Item(id=1, name='A', value=200),
        Item(id=2, name='B', value=1500),
        Item(id=3, name='C', value=500),
        Item(id=4, name='D', value=1000),
        Item(id=5, name='E', value=501),
    ]


@pytest.fixture
def sample_document():
    """Provide a sample input document."""
    return create_input_document()


# ==============================================================================
# FILE CREATION FIXTURES
# ==============================================================================

@pytest.fixture
def create_input_file(temp_dir, sample_document):
    """Create an input document file in the test directory."""
    input_path = temp_dir / 'input.json'
    with open(input_path, 'w', encoding='utf-8') as f:
        json.dump(sample_document, f, indent=2)
    return input_path


# ==============================================================================
# MOCK FIXTURES
# ==============================================================================

@pytest.fixture
def mock_config():
    """Create a mock ConfigLoader for testing."""
    config = MagicMock()
    config.get.side_effect = lambda key, default=None: {
        'log_dir': None,
        'log_level': 'INFO',
        'log_console': False,
        'default_report_type': 'CSV',
        'output_encoding': 'utf-8',
    }.get(key, default)
    return config


# ==============================================================================
# UTILITY FIXTURES
# ==============================================================================

@pytest.fixture
def reset_singletons():
    """Reset any singleton instances between tests."""
    from config_loader import ConfigLoader
    ConfigLoader._instance = None
    ConfigLoader._initialized = False

    yield

    ConfigLoader._instance = None
    ConfigLoader._initialized = False
