"""Reading and writing prefix tables in text form.

File format, one entry per line:

    30 0
    888 10
    999 11

Each line holds an unsigned element and its codeword as a '0'/'1' string,
separated by whitespace.
"""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from ..exceptions import PrefixCodeError, TableFormatError
from ..models.entry import TableEntry
from ..table import PrefixTable
from .config import TableFileConfig

logger = logging.getLogger(__name__)

TableSource = Union[str, os.PathLike, Iterable[str]]

_LINE_RE = re.compile(r"\s*(\d+)\s+([01]+)\s*")


def parse_line(
    line: str, config: TableFileConfig | None = None, line_number: int | None = None
) -> TableEntry:
    """Parse a single ``<element> <bits>`` line.

    Args:
        line: Line of text (trailing newline allowed)
        config: Bounds to apply; defaults to TableFileConfig()
        line_number: Line number reported in errors

    Returns:
        Validated entry

    Raises:
        TableFormatError: If the line is malformed or out of bounds
    """
    config = config or TableFileConfig()

    match = _LINE_RE.fullmatch(line)
    if match is None:
        raise TableFormatError(
            f"Expected '<element> <bits>', got {line.rstrip()!r}", line_number
        )

    try:
        return TableEntry.model_validate(
            {"element": match.group(1), "code": match.group(2)},
            context={
                "max_element": config.max_element,
                "max_code_length": config.max_code_length,
            },
        )
    except ValidationError as e:
        messages = "; ".join(error["msg"] for error in e.errors())
        raise TableFormatError(f"Invalid entry {line.strip()!r}: {messages}", line_number) from e


def read_entries(
    lines: Iterable[str], config: TableFileConfig | None = None
) -> Iterator[TableEntry]:
    """Yield validated entries from table file lines.

    Blank and comment lines are skipped according to ``config``.

    Raises:
        TableFormatError: On the first malformed line, with its line number
    """
    for _line_number, entry in _numbered_entries(lines, config or TableFileConfig()):
        yield entry


def _numbered_entries(
    lines: Iterable[str], config: TableFileConfig
) -> Iterator[tuple[int, TableEntry]]:
    for line_number, line in enumerate(lines, 1):
        stripped = line.strip()
        if not stripped and config.skip_blank_lines:
            continue
        if config.comment_prefix is not None and stripped.startswith(config.comment_prefix):
            continue

        yield line_number, parse_line(line, config, line_number)


def load_table(source: TableSource, config: TableFileConfig | None = None) -> PrefixTable[int]:
    """Build a PrefixTable from a table file.

    On any error the partially built table is cleared before the exception
    propagates, so no half-loaded table escapes.

    Args:
        source: Path to a table file, or an iterable of lines
        config: Loader options

    Returns:
        Populated table

    Raises:
        TableFormatError: If a line is malformed or an entry is rejected by
            the table (duplicate element or prefix conflict)
        OSError: If the file cannot be opened

    Example:
        >>> table = load_table(["2 0", "3 10", "4 11"])
        >>> table.decode("0010101100")
        [2, 2, 3, 3, 4, 2, 2]
    """
    config = config or TableFileConfig()

    if isinstance(source, (str, os.PathLike)):
        path = Path(source)
        with path.open("r", encoding=config.encoding) as f:
            table = _load_lines(f, config)
        logger.info("Loaded %d entries from %s", len(table), path)
        return table

    return _load_lines(source, config)


def _load_lines(lines: Iterable[str], config: TableFileConfig) -> PrefixTable[int]:
    table: PrefixTable[int] = PrefixTable()

    try:
        for line_number, entry in _numbered_entries(lines, config):
            try:
                table.insert(entry.element, entry.codeword())
            except PrefixCodeError as e:
                raise TableFormatError(str(e), line_number) from e
    except TableFormatError as e:
        logger.debug("Error reading table (%s), clearing table", e)
        table.clear()
        raise

    return table


def dump_table(table: PrefixTable[int], path: str | os.PathLike | None = None) -> str:
    """Render a table in file format, optionally writing it to ``path``.

    Entries are written in insertion order.

    Returns:
        The rendered text
    """
    text = "".join(
        f"{TableEntry(element=element, code=str(code)).to_line()}\n"
        for element, code in table.items()
    )

    if path is not None:
        Path(path).write_text(text, encoding="utf-8")

    return text
