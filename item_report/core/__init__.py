# Path: item_report/core/__init__.py
"""
item_report Core Package

Core utilities for the report generation system.

Submodules:
    - logger: IPO-aware logging system
"""
