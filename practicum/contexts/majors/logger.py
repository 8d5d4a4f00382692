"""
Majors context logger.

Provides logging interface for the majors context with automatic [majors] prefix.
All majors modules should import from this module, not from loguru directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[majors]"


# Wrapper functions with automatic [majors] prefix


def _log_debug(message: str) -> None:
    """Log debug message with [majors] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [majors] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


# High-level matcher logging helpers


def log_tier_match(atomic_input: str, tier: str, added: int) -> None:
    """Log which tier matched an atomic input and how many majors it contributed."""
    _log_debug(f"'{atomic_input}' matched {tier} tier (+{added} majors)")


def log_correction(atomic_input: str, corrected: str, distance: int) -> None:
    """Log a fuzzy correction accepted by the fallback tier."""
    _log_debug(f"'{atomic_input}' corrected to '{corrected}' (distance {distance})")


def log_unmapped(atomic_input: str) -> None:
    """Log an input that no tier could resolve (kept verbatim)."""
    _log_warning(f"'{atomic_input}' did not resolve to a known major, likely misspelled or unmapped")
