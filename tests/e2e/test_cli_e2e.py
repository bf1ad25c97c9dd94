from __future__ import annotations

"""
End-to-End (E2E) CLI Tests.

Invokes the entry point script in a subprocess and validates exit codes,
stdout/stderr content and both rendering modes against a real directory.
"""

import json
import os
import subprocess
import sys
from pathlib import Path
from typing import List

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
SRC_DIR = PROJECT_ROOT / "src"
ENTRY_POINT = SRC_DIR / "betterls" / "main.py"


def run_cli(args: List[str], home: Path) -> subprocess.CompletedProcess[str]:
    """
    Execute the CLI in a separate process.

    The home and data directories point to a scratch folder so that
    no real user preferences are read or written.

    Args:
        args: Command line arguments (excluding interpreter and script).
        home: Scratch directory used as the user home.

    Returns:
        subprocess.CompletedProcess: Return code, stdout and stderr.
    """
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_DIR) + os.pathsep + env.get("PYTHONPATH", "")
    env["HOME"] = str(home)
    env["USERPROFILE"] = str(home)
    env["LOCALAPPDATA"] = str(home)

    return subprocess.run(
        [sys.executable, str(ENTRY_POINT)] + args,
        env=env,
        capture_output=True,
        text=True,
        encoding="utf-8",
    )


def test_cli_table_output(tmp_path: Path, sample_listing: Path) -> None:
    """TC-01: A table with headers and every entry is printed (Exit Code 0)."""
    result = run_cli([str(sample_listing)], tmp_path)

    assert result.returncode == 0, f"CLI failed with stderr: {result.stderr}"
    for token in ("Name", "Type", "Size", "Last Modified", "a.txt", "File", "10B", "sub", "Directory", "2.00KB"):
        assert token in result.stdout
    assert "\x1b[" not in result.stdout, "Redirected output must not contain ANSI codes."


def test_cli_json_output(tmp_path: Path, sample_listing: Path) -> None:
    """TC-02: --json prints records in enumeration order with public field names."""
    result = run_cli([str(sample_listing), "--json"], tmp_path)

    assert result.returncode == 0, result.stderr
    data = json.loads(result.stdout)

    assert [d["name"] for d in data] == os.listdir(sample_listing)
    by_name = {d["name"]: d for d in data}
    assert (by_name["a.txt"]["ftype"], by_name["a.txt"]["size"]) == ("File", "10B")
    assert (by_name["sub"]["ftype"], by_name["sub"]["size"]) == ("Directory", "2.00KB")
    assert set(by_name["sub"]) == {"name", "ftype", "size", "modified"}


def test_cli_empty_folder(tmp_path: Path) -> None:
    """TC-03: An empty folder prints the notice and succeeds."""
    empty = tmp_path / "empty"
    empty.mkdir()

    result = run_cli([str(empty)], tmp_path)

    assert result.returncode == 0
    assert result.stdout.strip() == "The folder is empty"


def test_cli_missing_path(tmp_path: Path) -> None:
    """TC-04: A missing path prints the dedicated message and exits with 2."""
    result = run_cli([str(tmp_path / "missing")], tmp_path)

    assert result.returncode == 2
    assert result.stdout.strip() == "Path does not exist."


def test_cli_debug_logs_to_stderr(tmp_path: Path, sample_listing: Path) -> None:
    """TC-05: --debug diagnostics go to stderr and never pollute the JSON."""
    result = run_cli([str(sample_listing), "--json", "--debug"], tmp_path)

    assert result.returncode == 0
    json.loads(result.stdout)
    assert "DEBUG |" in result.stderr


def test_cli_help_message(tmp_path: Path) -> None:
    """TC-06: Verify help message is displayed (smoke test for argparse)."""
    result = run_cli(["--help"], tmp_path)

    assert result.returncode == 0
    assert "usage: betterls" in result.stdout
    assert "--json" in result.stdout
