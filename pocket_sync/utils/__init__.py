"""
Utility functions and helpers for Pocket Sync.

This module contains shared utilities:
- Console output, user notices and logging setup
"""

from . import console_utils

__all__ = [
    'console_utils'
]
