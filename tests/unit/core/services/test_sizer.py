from __future__ import annotations

"""
Unit tests for the Directory Size Service.

Verifies emptiness probing, recursive aggregation, symlink safety and
resilience against unreadable branches.
"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from betterls.core.services.sizer import directory_size, is_dir_empty


def _symlink_or_skip(target: str, link: Path, is_dir: bool = False) -> None:
    """Create a symlink, skipping the test where the platform refuses."""
    try:
        os.symlink(target, link, target_is_directory=is_dir)
    except (OSError, NotImplementedError) as e:
        pytest.skip(f"Symlinks unavailable: {e}")


# -----------------------------------------------------------------------------
# EMPTINESS PROBE
# -----------------------------------------------------------------------------

def test_is_dir_empty_true_for_new_directory(tmp_path: Path) -> None:
    """TC-01: A freshly created directory has no entries."""
    assert is_dir_empty(str(tmp_path)) is True


def test_is_dir_empty_false_with_single_empty_subdirectory(tmp_path: Path) -> None:
    """TC-02: Any entry counts, even an empty subdirectory."""
    (tmp_path / "child").mkdir()
    assert is_dir_empty(str(tmp_path)) is False


def test_is_dir_empty_false_with_hidden_file(tmp_path: Path) -> None:
    """TC-03: Hidden entries are entries too."""
    (tmp_path / ".hidden").write_text("")
    assert is_dir_empty(str(tmp_path)) is False


def test_is_dir_empty_propagates_missing_path(tmp_path: Path) -> None:
    """TC-04: A vanished path raises instead of reading as empty."""
    with pytest.raises(OSError):
        is_dir_empty(str(tmp_path / "missing"))


def test_is_dir_empty_propagates_not_a_directory(tmp_path: Path) -> None:
    """TC-05: A regular file is not a directory to probe."""
    f = tmp_path / "file.txt"
    f.write_text("data")
    with pytest.raises(OSError):
        is_dir_empty(str(f))


def test_is_dir_empty_propagates_permission_denied(tmp_path: Path, needs_permissions: None) -> None:
    """TC-06: An unreadable directory raises PermissionError."""
    locked = tmp_path / "locked"
    locked.mkdir()
    (locked / "secret").write_text("x")
    locked.chmod(0o000)
    try:
        with pytest.raises(PermissionError):
            is_dir_empty(str(locked))
    finally:
        locked.chmod(0o755)


# -----------------------------------------------------------------------------
# RECURSIVE AGGREGATION
# -----------------------------------------------------------------------------

def test_directory_size_sums_nested_files(tmp_path: Path) -> None:
    """TC-07: 500 bytes at the top plus 300 bytes one level down is 800."""
    (tmp_path / "top.bin").write_bytes(b"a" * 500)
    (tmp_path / "nested").mkdir()
    (tmp_path / "nested" / "inner.bin").write_bytes(b"b" * 300)

    assert directory_size(str(tmp_path)) == 800


def test_directory_size_empty_tree_is_zero(tmp_path: Path) -> None:
    """TC-08: Directories alone contribute nothing."""
    (tmp_path / "a" / "b" / "c").mkdir(parents=True)
    assert directory_size(str(tmp_path)) == 0


def test_directory_size_handles_deep_nesting(tmp_path: Path) -> None:
    """TC-09: Deep trees are walked without re-entering the function."""
    current = tmp_path
    for _ in range(60):
        current = current / "d"
    try:
        current.mkdir(parents=True)
    except OSError as e:
        pytest.skip(f"Filesystem refused deep nesting: {e}")
    (current / "leaf.bin").write_bytes(b"z" * 7)

    walk = directory_size
    with patch("betterls.core.services.sizer.directory_size", side_effect=AssertionError):
        assert walk(str(tmp_path)) == 7


def test_directory_size_does_not_follow_symlink_to_ancestor(tmp_path: Path) -> None:
    """TC-10: A link back to an ancestor is counted as a link, not traversed."""
    (tmp_path / "data.bin").write_bytes(b"x" * 100)
    sub = tmp_path / "sub"
    sub.mkdir()
    _symlink_or_skip("..", sub / "loop", is_dir=True)

    link_len = os.lstat(sub / "loop").st_size
    assert directory_size(str(tmp_path)) == 100 + link_len


def test_directory_size_does_not_count_link_target_content(tmp_path: Path) -> None:
    """TC-11: A link to a large file adds only the link record length."""
    outside = tmp_path / "outside"
    outside.mkdir()
    big = outside / "big.bin"
    big.write_bytes(b"x" * 4096)

    measured = tmp_path / "measured"
    measured.mkdir()
    _symlink_or_skip(str(big), measured / "link.bin")

    assert directory_size(str(measured)) == os.lstat(measured / "link.bin").st_size
    assert directory_size(str(measured)) < 4096


def test_directory_size_skips_unreadable_branch(tmp_path: Path, needs_permissions: None) -> None:
    """TC-12: A locked subdirectory contributes zero without aborting."""
    (tmp_path / "visible.bin").write_bytes(b"v" * 50)
    locked = tmp_path / "locked"
    locked.mkdir()
    (locked / "hidden.bin").write_bytes(b"h" * 1000)
    locked.chmod(0o000)
    try:
        assert directory_size(str(tmp_path)) == 50
    finally:
        locked.chmod(0o755)


def test_directory_size_of_unreadable_root_is_zero(tmp_path: Path) -> None:
    """TC-13: A missing root yields zero rather than raising."""
    assert directory_size(str(tmp_path / "missing")) == 0
