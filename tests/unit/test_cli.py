"""Tests for CLI tool."""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path

import pytest

from prefixcode.cli.main import main


def _run(*args: str) -> subprocess.CompletedProcess[str]:
    return subprocess.run(
        [sys.executable, "-m", "prefixcode.cli.main", *args],
        capture_output=True,
        text=True,
    )


def test_cli_help() -> None:
    """Test CLI --help flag."""
    result = _run("--help")
    assert result.returncode == 0
    assert "prefixcode: Prefix Code Tables" in result.stdout
    assert "--decode" in result.stdout


def test_cli_version() -> None:
    """Test CLI --version flag."""
    result = _run("--version")
    assert result.returncode == 0
    assert "prefixcode 0.1.0" in result.stdout


def test_cli_no_args() -> None:
    """Test CLI with no arguments (should show help)."""
    result = _run()
    assert result.returncode == 0
    assert "prefixcode: Prefix Code Tables" in result.stdout


def test_cli_decode(sample_table_file: Path) -> None:
    """Test decoding a bit string."""
    result = _run("--table", str(sample_table_file), "--decode", "0010101100")
    assert result.returncode == 0
    assert result.stdout.strip() == "2 2 3 3 4 2 2"


def test_cli_decode_truncated(sample_table_file: Path) -> None:
    """Test partial output and exit code on truncated input."""
    result = _run("--table", str(sample_table_file), "--decode", "00101011001")
    assert result.returncode == 1
    assert result.stdout.strip() == "2 2 3 3 4 2 2"
    assert "Error decoding" in result.stderr


def test_cli_encode(sample_table_file: Path) -> None:
    """Test encoding elements."""
    result = _run("--table", str(sample_table_file), "--encode", "2,2,3,3,4,2,2")
    assert result.returncode == 0
    assert result.stdout.strip() == "0010101100"


def test_cli_encode_hex(sample_table_file: Path) -> None:
    """Test encoding to packed hex."""
    result = _run("--table", str(sample_table_file), "--encode", "2,2,3,3,4,2,2", "--hex")
    assert result.returncode == 0
    assert result.stdout.strip() == "2b00 (10 bits)"


def test_cli_encode_unknown(sample_table_file: Path) -> None:
    """Test partial output on an unknown element."""
    result = _run("--table", str(sample_table_file), "--encode", "3,4,9")
    assert result.returncode == 1
    assert result.stdout.strip() == "1011"
    assert "Error encoding" in result.stderr


def test_cli_decode_hex(sample_table_file: Path) -> None:
    """Test decoding packed hex input."""
    result = _run("--table", str(sample_table_file), "--decode-hex", "2b00", "--bits", "10")
    assert result.returncode == 0
    assert result.stdout.strip() == "2 2 3 3 4 2 2"


def test_cli_inspect(sample_table_file: Path) -> None:
    """Test the table summary."""
    result = _run("--table", str(sample_table_file), "--inspect")
    assert result.returncode == 0
    assert "3 entries loaded." in result.stdout
    assert "Code is complete" in result.stdout


def test_cli_missing_file() -> None:
    """Test CLI with a missing table file."""
    result = _run("--table", "nonexistent.txt", "--inspect")
    assert result.returncode == 1
    assert "not found" in result.stderr.lower()


def test_cli_bad_table(tmp_path: Path) -> None:
    """Test CLI with a conflicting table file."""
    path = tmp_path / "bad.txt"
    path.write_text("2 0\n3 01\n", encoding="utf-8")

    result = _run("--table", str(path), "--inspect")
    assert result.returncode == 1
    assert "line 2" in result.stderr


def test_main_in_process(
    sample_table_file: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Test calling main() directly with an argv list."""
    assert main(["--table", str(sample_table_file), "--decode", "110"]) == 0
    assert capsys.readouterr().out.strip() == "4 2"


def test_main_invalid_elements(
    sample_table_file: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Test a non-numeric element list."""
    assert main(["--table", str(sample_table_file), "--encode", "2,x"]) == 1
    assert "Invalid element list" in capsys.readouterr().err


def test_cli_example_table() -> None:
    """Test CLI with the bundled example table."""
    example_file = Path("examples/tree.txt")
    if not example_file.exists():
        pytest.skip("Example file not found")

    result = _run("--table", str(example_file), "--decode", "0110")
    assert result.returncode == 0
    assert result.stdout.strip() == "2 4 2"


def test_cli_max_element(sample_table_file: Path, tmp_path: Path) -> None:
    """Test --max-element bounds the elements accepted from the table."""
    path = tmp_path / "wide.txt"
    path.write_text("2 0\n300 1\n", encoding="utf-8")

    result = _run("--table", str(path), "--max-element", "255", "--inspect")
    assert result.returncode == 1
    assert "Error loading table" in result.stderr
    assert "line 2" in result.stderr

    result = _run("--table", str(sample_table_file), "--max-element", "4", "--decode", "0110")
    assert result.returncode == 0
    assert result.stdout.strip() == "2 4 2"


def test_cli_hex_requires_encode(sample_table_file: Path) -> None:
    """Test --hex is rejected outside --encode."""
    result = _run("--table", str(sample_table_file), "--decode", "0110", "--hex")
    assert result.returncode == 2
    assert "--hex can only be used with --encode" in result.stderr


def test_main_hex_with_inspect(
    sample_table_file: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Test --hex with --inspect is a usage error."""
    with pytest.raises(SystemExit) as exc_info:
        main(["--table", str(sample_table_file), "--inspect", "--hex"])

    assert exc_info.value.code == 2
    assert "--hex can only be used with --encode" in capsys.readouterr().err
