"""Timestamp helpers for log directory naming."""

from datetime import datetime


def now() -> str:
    """
    Current local time as a compact, filesystem-safe stamp.

    Example:
        now()
        # "20250301_142530"
    """
    return datetime.now().strftime("%Y%m%d_%H%M%S")
