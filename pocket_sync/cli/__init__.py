"""
Command-line interface for Pocket Sync.

This module provides the main CLI entry point and command handling.
"""

from .main import PocketSyncCLI

__all__ = [
    'PocketSyncCLI'
]
