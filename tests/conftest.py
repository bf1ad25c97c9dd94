from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared filesystem fixtures used across unit and integration tests.
3. Isolation of the user data directory from the real home folder.
"""

import os
import sys
from pathlib import Path
from typing import Iterator
from unittest.mock import patch

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def isolated_user_data_dir(tmp_path: Path) -> Iterator[Path]:
    """Redirect persisted preferences to a per-test directory."""
    data_dir = tmp_path / "user_data"
    with patch("betterls.domain.config.get_user_data_dir", return_value=str(data_dir)):
        yield data_dir


@pytest.fixture
def sample_listing(tmp_path: Path) -> Path:
    """
    Create a small directory to list.

    Structure:
    /listing
      a.txt        (10 bytes)
      /sub
        data.bin   (2048 bytes)
    """
    root = tmp_path / "listing"
    root.mkdir()
    (root / "a.txt").write_bytes(b"x" * 10)
    (root / "sub").mkdir()
    (root / "sub" / "data.bin").write_bytes(b"\0" * 2048)
    return root


@pytest.fixture
def needs_permissions() -> None:
    """Skip tests that rely on permission bits being enforced."""
    if os.name == "nt":
        pytest.skip("POSIX permission bits are not enforced on Windows.")
    if hasattr(os, "geteuid") and os.geteuid() == 0:
        pytest.skip("Permission checks are bypassed when running as root.")
