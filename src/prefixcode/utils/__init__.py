"""Utility functions for prefixcode.

This module provides size and code-shape calculations.
"""

from __future__ import annotations

from .sizing import average_code_length, encoded_bits, encoded_size, is_complete, kraft_sum

__all__ = [
    "encoded_bits",
    "encoded_size",
    "kraft_sum",
    "is_complete",
    "average_code_length",
]
