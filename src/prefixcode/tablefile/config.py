"""Configuration for table file loading.

This module provides the configuration dataclass that controls how
``<element> <bits>`` table files are read.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..models.entry import UINT32_MAX


@dataclass
class TableFileConfig:
    """Options for reading table files.

    Attributes:
        encoding: Text encoding used when opening a path (default "utf-8").
        comment_prefix: Lines starting with this prefix (after leading
            whitespace) are skipped. None disables comments. Default "#".
        skip_blank_lines: Ignore lines holding only whitespace (default True).
            When False a blank line is a format error.
        max_element: Largest accepted element value (default 2**32 - 1).
        max_code_length: Longest accepted codeword, or None for no bound.

    Examples:
        ```python
        from prefixcode.tablefile import TableFileConfig, load_table

        # Byte-valued alphabet with short codes
        config = TableFileConfig(max_element=255, max_code_length=16)
        table = load_table("tree.txt", config)
        ```
    """

    encoding: str = "utf-8"
    comment_prefix: str | None = "#"
    skip_blank_lines: bool = True

    # Entry bounds
    max_element: int = UINT32_MAX
    max_code_length: int | None = None

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if not self.encoding:
            raise ValueError("encoding must be a non-empty string")

        if self.comment_prefix is not None and (
            not self.comment_prefix or self.comment_prefix[0] in "01 \t"
        ):
            raise ValueError(f"Invalid comment_prefix: {self.comment_prefix!r}")

        if not 0 <= self.max_element <= UINT32_MAX:
            raise ValueError(f"max_element must be 0-{UINT32_MAX}, got {self.max_element}")

        if self.max_code_length is not None and self.max_code_length < 1:
            raise ValueError(f"max_code_length must be >= 1, got {self.max_code_length}")
