from __future__ import annotations

"""
Configuration Validation Service.

Normalizes configuration dictionaries coming from the CLI or from the
persisted preferences file: coerces loosely typed values, injects
defaults for missing keys and collects warnings for anything discarded.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from betterls.domain.config import get_default_config
from betterls.infra.logging.config import _LEVEL_MAP

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize a configuration dictionary.

    Args:
        config: Raw configuration data.
        strict: Raise on invalid values instead of falling back.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Normalized configuration and the
                                          warnings produced while coercing.

    Raises:
        TypeError: In strict mode, on a value of the wrong type.
        ValueError: In strict mode, on a value out of range.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update({k: v for k, v in config.items() if k in defaults})

    merged["path"] = _as_str(merged["path"], defaults["path"], "path", warnings, strict)
    merged["log_file"] = _as_str(merged["log_file"], "", "log_file", warnings, strict)
    merged["json_output"] = _as_bool(merged["json_output"], defaults["json_output"], "json_output", warnings, strict)
    merged["json_indent"] = _as_optional_indent(merged["json_indent"], warnings, strict)
    merged["log_level"] = _as_level(merged["log_level"], defaults["log_level"], warnings, strict)

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Validate and strip string inputs; empty values take the fallback."""
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip()
        return v if v else fallback

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce numbers and common keywords into booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y", "on"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n", "off"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_optional_indent(value: Any, warnings: List[str], strict: bool) -> Optional[int]:
    """Accept None or a non-negative int (numeric strings are converted)."""
    if value is None:
        return None

    if isinstance(value, str) and not strict:
        s = value.strip()
        if not s:
            return None
        if s.isdigit():
            warnings.append(f"Field 'json_indent' converted from '{value}' to {int(s)}.")
            return int(s)

    if isinstance(value, int) and not isinstance(value, bool):
        if value >= 0:
            return value
        msg = f"Invalid field 'json_indent': must be >= 0, received {value}."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Using compact output.")
        return None

    msg = f"Invalid field 'json_indent': expected int, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using compact output.")
    return None


def _as_level(value: Any, fallback: str, warnings: List[str], strict: bool) -> str:
    """Normalize a logging level name to upper case."""
    level = _as_str(value, fallback, "log_level", warnings, strict).upper()
    if level in _LEVEL_MAP:
        return level

    msg = f"Invalid field 'log_level': unknown level '{value}'."
    if strict:
        raise ValueError(msg)
    warnings.append(f"{msg} Using {fallback}.")
    return fallback
