"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from prefixcode import PrefixTable


@pytest.fixture
def sample_table() -> PrefixTable[int]:
    """Table with codewords {2: "0", 3: "10", 4: "11"}."""
    table: PrefixTable[int] = PrefixTable()
    table.insert(2, "0")
    table.insert(3, "10")
    table.insert(4, "11")
    return table


@pytest.fixture
def sample_table_lines() -> list[str]:
    """Table file lines matching sample_table."""
    return ["2 0\n", "3 10\n", "4 11\n"]


@pytest.fixture
def sample_table_file(tmp_path: Path, sample_table_lines: list[str]) -> Path:
    """Table file on disk matching sample_table."""
    path = tmp_path / "tree.txt"
    path.write_text("".join(sample_table_lines), encoding="utf-8")
    return path
