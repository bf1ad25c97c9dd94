from __future__ import annotations

"""
Logging Core.

Idempotent setup of the root logger. Handlers are attached directly to
the root: the tool is single-threaded and short-lived, so records are
written synchronously.
"""

import logging
from typing import List

from betterls.infra.logging.config import _LEVEL_MAP, LoggingConfig
from betterls.infra.logging.handlers import (
    _create_console_handler,
    _create_rotating_file_handler,
    _is_our_handler,
)

_CONFIGURED_FLAG_ATTR: str = "_betterls_configured"


# ==============================================================================
# PUBLIC API
# ==============================================================================

def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Configure the root logger once.

    Later calls are no-ops unless force is set, in which case the
    handlers installed by a previous call are closed and replaced.
    Handlers added by third parties are left untouched.

    Args:
        cfg: Logging settings.
        force: Re-initialize even if already configured.

    Returns:
        logging.Logger: The root logger.
    """
    root = logging.getLogger()

    if getattr(root, _CONFIGURED_FLAG_ATTR, False) and not force:
        return root

    level_int = _parse_level(cfg.level)
    root.setLevel(level_int)
    _remove_our_handlers(root)

    handlers: List[logging.Handler] = []

    if cfg.console:
        handlers.append(_create_console_handler(level_int, logging.Formatter(cfg.console_fmt)))

    if cfg.log_file:
        fh = _create_rotating_file_handler(
            cfg.log_file,
            level_int,
            logging.Formatter(cfg.file_fmt, datefmt=cfg.datefmt),
            cfg.max_bytes,
            cfg.backup_count,
        )
        if fh:
            handlers.append(fh)

    for h in handlers:
        root.addHandler(h)

    setattr(root, _CONFIGURED_FLAG_ATTR, True)
    return root


def get_logger(name: str) -> logging.Logger:
    """Return a named logger (usually __name__)."""
    return logging.getLogger(name)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _parse_level(level: str) -> int:
    """Convert a level name to its numeric constant, defaulting to WARNING."""
    if not level:
        return logging.WARNING
    return _LEVEL_MAP.get(str(level).strip().upper(), logging.WARNING)


def _remove_our_handlers(root: logging.Logger) -> None:
    """Detach and close every handler this package installed."""
    for h in list(root.handlers):
        if _is_our_handler(h):
            root.removeHandler(h)
            h.close()
