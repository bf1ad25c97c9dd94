from __future__ import annotations

"""
Directory Listing Data Models.

Defines the immutable records produced by the metadata collector and
consumed by the presentation layer, plus the per-entry outcome type used
to carry enumeration failures alongside successful records.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Union

# -----------------------------------------------------------------------------
# ENTRY CLASSIFICATION
# -----------------------------------------------------------------------------

class EntryKind(Enum):
    """Type of a listed entry."""
    FILE = "file"
    DIRECTORY = "directory"

    def __str__(self) -> str:
        return _KIND_LABELS[self]


_KIND_LABELS: Dict[EntryKind, str] = {
    EntryKind.FILE: "File",
    EntryKind.DIRECTORY: "Directory",
}

# -----------------------------------------------------------------------------
# LISTING RECORDS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class EntryRecord:
    """
    Descriptive record for one direct child of a listed directory.

    Attributes:
        name: Base name of the entry.
        kind: File or Directory.
        size: Human-readable size (binary units).
        modified: Formatted last-modification date, or empty if unknown.
    """
    name: str
    kind: EntryKind
    size: str
    modified: str

    def to_dict(self) -> Dict[str, str]:
        """Serializable form using the public JSON field names."""
        return {
            "name": self.name,
            "ftype": str(self.kind),
            "size": self.size,
            "modified": self.modified,
        }


@dataclass(frozen=True)
class EntrySkipped:
    """
    An entry that could not be inspected and is left out of the listing.

    Attributes:
        path: Filesystem path of the entry.
        error: Description of the underlying failure.
    """
    path: str
    error: str


EntryOutcome = Union[EntryRecord, EntrySkipped]
