from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Wraps the host filesystem API for path existence checks, user path
expansion and resolution of the per-user application data directory.
"""

import os
from typing import Optional

from betterls.domain.constants import APP_NAME

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = APP_NAME
UNIX_APP_DIR_NAME = f".{APP_NAME}"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir(create: bool = True) -> str:
    """
    Resolve the OS-specific directory for persistent application data.

    Standards:
    - Windows: %LOCALAPPDATA%/betterls
    - Linux/Mac: ~/.betterls

    Args:
        create: Create the directory if it does not exist yet.

    Returns:
        str: Absolute path to the application data directory.
    """
    path = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        path = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    if create:
        try:
            os.makedirs(path, exist_ok=True)
        except OSError:
            pass

    return os.path.abspath(path)


def normalize_path(path: Optional[str], fallback: str = ".") -> str:
    """
    Expand user and environment shortcuts in a path.

    Paths coming from the shell are already expanded; this covers values
    read from the persisted configuration. Relative paths stay relative so
    that listings report exactly what the user asked for.

    Args:
        path: Raw path string.
        fallback: Path used when the input is empty.

    Returns:
        str: Expanded path.
    """
    p = (path or "").strip() or fallback
    return os.path.expandvars(os.path.expanduser(p))

# -----------------------------------------------------------------------------
# FILESYSTEM VALIDATION API
# -----------------------------------------------------------------------------

def path_exists(path: str) -> bool:
    """
    Check whether a path exists, distinguishing absence from failure.

    Unlike os.path.exists, errors other than "not found" are not folded
    into False: a path that cannot be checked (a parent without search
    permission, or a regular file used as a directory) raises so the
    caller can report it separately.

    Args:
        path: Path to test. Symbolic links are followed.

    Returns:
        bool: True if the path exists.

    Raises:
        OSError: If the check itself cannot be performed.
    """
    try:
        os.stat(path)
    except FileNotFoundError:
        return False
    except ValueError as e:
        raise OSError(f"Invalid path {path!r}: {e}") from e
    return True
