"""Pydantic models for prefixcode.

This module provides the TableEntry model used to validate table file entries.
"""

from __future__ import annotations

from .entry import UINT32_MAX, TableEntry

__all__ = [
    "TableEntry",
    "UINT32_MAX",
]
