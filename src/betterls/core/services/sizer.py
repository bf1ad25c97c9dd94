from __future__ import annotations

"""
Directory Size Service.

Computes recursive directory sizes with a symlink-safe traversal and
provides a cheap emptiness probe used to skip full traversals.
"""

import logging
import os
import stat
from typing import List

logger = logging.getLogger(__name__)


# ==============================================================================
# PUBLIC API
# ==============================================================================

def is_dir_empty(path: str) -> bool:
    """
    Check whether a directory has no entries at all.

    Only the first entry is requested, so the cost does not depend on
    the directory size.

    Args:
        path: Directory to probe.

    Returns:
        bool: True if the directory contains nothing.

    Raises:
        OSError: If the directory cannot be opened or read.
    """
    with os.scandir(path) as it:
        return next(it, None) is None


def directory_size(path: str) -> int:
    """
    Sum the byte length of everything reachable beneath a directory.

    Entry metadata is read without following symbolic links: links are
    counted as their own link record and never traversed, so link cycles
    and shared targets cannot inflate or loop the walk. Branches that
    cannot be read contribute zero.

    Args:
        path: Root directory of the computation.

    Returns:
        int: Total size in bytes.
    """
    total = 0
    pending: List[str] = [path]

    while pending:
        current = pending.pop()
        try:
            with os.scandir(current) as it:
                for entry in it:
                    try:
                        st = entry.stat(follow_symlinks=False)
                    except OSError as e:
                        logger.debug(f"Skipping unreadable entry '{entry.path}': {e}")
                        continue

                    if stat.S_ISDIR(st.st_mode):
                        pending.append(entry.path)
                    else:
                        total += st.st_size
        except OSError as e:
            logger.debug(f"Skipping unreadable directory '{current}': {e}")

    return total
