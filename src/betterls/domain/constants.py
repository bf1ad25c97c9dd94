from __future__ import annotations

"""
Domain Constants.

Centralizes application identity, versioning and the fixed display
values shared by the listing core and the presentation layer.
"""

APP_NAME = "betterls"
APP_VERSION = "0.1.0"
CURRENT_CONFIG_VERSION = "1.0.0"

# Substitute for entry names that cannot be represented as text
UNREADABLE_NAME = "???"

# Size reported for empty or unreadable directories
ZERO_SIZE = "0B"

# Short weekday, space-padded day, short month, 2-digit year (e.g. "Mon  3 Jun 24")
MODIFIED_DATE_FORMAT = "{dt:%a} {dt.day:>2} {dt:%b} {dt:%y}"
