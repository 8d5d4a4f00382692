"""
Extraction context logger.

Provides logging interface for the extraction context with automatic [extract] prefix.
All extraction modules should import from this module, not from loguru directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[extract]"


# Wrapper functions with automatic [extract] prefix


def _log_debug(message: str) -> None:
    """Log debug message with [extract] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level extraction logging helpers


def log_default_used(parser_name: str, raw_value: str, default) -> None:
    """Log a parser falling back to its default value."""
    _log_debug(f"{parser_name}: unrecognized {raw_value!r}, using default {default!r}")


def log_unresolved_partial_date(field_name: str, partial_date: str) -> None:
    """Log a year-elided date that had no year to borrow."""
    _log_debug(f"{field_name}: no known year for partial date '{partial_date}', left as-is")
