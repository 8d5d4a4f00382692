"""
Shared utilities for practicum.

Common functionality used across contexts:
- Logger setup with provenance
- Timestamps for log directories
"""

from practicum.utils.timestamp import now

__all__ = ["now"]
