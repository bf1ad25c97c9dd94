from __future__ import annotations

"""
Directory Metadata Collector.

Builds one descriptive record per direct child of a directory. Every
per-entry failure has a fallback (placeholder name, zero size, empty date
or omission) so that a single bad entry never aborts the whole listing.
"""

import logging
import os
import stat
from datetime import datetime, timezone
from typing import Iterator, List

from betterls.core.services.sizer import directory_size, is_dir_empty
from betterls.core.units import format_size
from betterls.domain.constants import MODIFIED_DATE_FORMAT, UNREADABLE_NAME, ZERO_SIZE
from betterls.domain.listing_models import EntryKind, EntryOutcome, EntryRecord, EntrySkipped

logger = logging.getLogger(__name__)


# ==============================================================================
# PUBLIC API
# ==============================================================================

def collect_entries(path: str) -> List[EntryRecord]:
    """
    List the direct children of a directory as display records.

    Records keep the order in which the filesystem enumerates entries.
    Entries that could not be inspected are logged and left out.

    Args:
        path: Directory to list.

    Returns:
        List[EntryRecord]: One record per readable entry. Enumeration stops
                           early, keeping what was read, if the directory
                           itself fails; it is empty if it cannot be opened.
    """
    records: List[EntryRecord] = []
    skipped = 0

    try:
        for outcome in scan_entries(path):
            if isinstance(outcome, EntrySkipped):
                skipped += 1
                logger.debug(f"Entry omitted '{outcome.path}': {outcome.error}")
                continue
            records.append(outcome)
    except OSError as e:
        logger.warning(f"Unable to enumerate '{path}': {e}")
        return records

    logger.debug(f"Collected {len(records)} entries from '{path}' ({skipped} omitted)")
    return records


def scan_entries(path: str) -> Iterator[EntryOutcome]:
    """
    Inspect each direct child of a directory.

    Metadata follows symbolic links, so a link to a directory is listed
    as a directory and a dangling link yields an EntrySkipped outcome.

    Args:
        path: Directory to enumerate.

    Yields:
        EntryOutcome: A record, or the reason the entry was skipped.

    Raises:
        OSError: If the directory itself cannot be opened or iterated.
    """
    with os.scandir(path) as it:
        for entry in it:
            yield _inspect_entry(entry)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _inspect_entry(entry: os.DirEntry) -> EntryOutcome:
    """Build the record for a single entry or report why it is skipped."""
    try:
        st = entry.stat()
    except OSError as e:
        return EntrySkipped(path=entry.path, error=str(e))

    if stat.S_ISDIR(st.st_mode):
        kind = EntryKind.DIRECTORY
        size = _directory_size_label(entry.path)
    else:
        kind = EntryKind.FILE
        size = format_size(st.st_size)

    return EntryRecord(
        name=_display_name(entry.name),
        kind=kind,
        size=size,
        modified=_format_modified(st.st_mtime),
    )


def _display_name(name: str) -> str:
    """Return the name if it is valid text, otherwise a placeholder."""
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return UNREADABLE_NAME
    return name


def _directory_size_label(path: str) -> str:
    """Size label for a subdirectory; unreadable directories count as empty."""
    try:
        if is_dir_empty(path):
            return ZERO_SIZE
    except OSError as e:
        logger.debug(f"Cannot read directory '{path}': {e}")
        return ZERO_SIZE
    return format_size(directory_size(path))


def _format_modified(mtime: float) -> str:
    """Format a modification timestamp in UTC, or '' if it is out of range."""
    try:
        dt = datetime.fromtimestamp(mtime, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return ""
    return MODIFIED_DATE_FORMAT.format(dt=dt)
