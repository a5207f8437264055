"""
Data loading and parsing module.

This package handles all file I/O and document parsing.
"""

from .loader import DataLoader
from .parser import RecordParser

__all__ = ["DataLoader", "RecordParser"]
