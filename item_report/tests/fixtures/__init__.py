# Path: item_report/tests/fixtures/__init__.py
"""Sample data generators shared by the test suite."""
