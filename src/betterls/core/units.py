from __future__ import annotations

"""
Byte Unit Formatting.

Converts raw byte counts into short human-readable strings using
binary (1024-based) magnitudes.
"""

KB = 1024
MB = 1024 * KB
GB = 1024 * MB


def format_size(size: int) -> str:
    """
    Render a byte count as B, KB, MB or GB.

    Each tier starts at its inclusive lower bound: exactly 1024 bytes is
    "1.00KB". Scaled values keep two decimals; plain bytes are integral.

    Args:
        size: Non-negative byte count.

    Returns:
        str: Formatted magnitude with its unit suffix (e.g. "2.00KB").
    """
    if size >= GB:
        return f"{size / GB:.2f}GB"
    if size >= MB:
        return f"{size / MB:.2f}MB"
    if size >= KB:
        return f"{size / KB:.2f}KB"
    return f"{size}B"
