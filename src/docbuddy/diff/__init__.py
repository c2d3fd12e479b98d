"""
Diff Handling

This module scans unified diff patches for candidate lines and
resolves review comment positions.
"""

from .scanner import DiffScanner, split_patch
from .position import PositionResolver

__all__ = ['DiffScanner', 'PositionResolver', 'split_patch']
