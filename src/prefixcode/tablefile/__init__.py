"""Table file utilities for prefixcode.

This module provides loading and dumping of prefix tables stored as
``<element> <bits>`` text lines.
"""

from __future__ import annotations

from .config import TableFileConfig
from .reader import dump_table, load_table, parse_line, read_entries

__all__ = [
    "TableFileConfig",
    "load_table",
    "dump_table",
    "parse_line",
    "read_entries",
]
