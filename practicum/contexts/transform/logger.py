"""
Transform context logger.

Provides logging interface for the transform context with automatic [transform] prefix.
All transform modules and scripts should import from this module, not from
utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from practicum.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[transform]"


def setup_transform_logger(log_dir: Path, input_path: Path, quiet: bool = False) -> Path:
    """
    Setup logger for a transform run.

    Args:
        log_dir: Directory for this run
        input_path: Raw postings file being processed (recorded in provenance)
        quiet: Only echo errors to the console

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="transform",
        log_dir=log_dir,
        extra_provenance={"Input": input_path},
        console_level="ERROR" if quiet else "INFO",
    )


# Wrapper functions with automatic [transform] prefix


def _log_info(message: str) -> None:
    """Log info message with [transform] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [transform] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [transform] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [transform] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level transform logging helpers


def log_skipped_field(record_id, key: str, reason: str) -> None:
    """Log a raw field left out of the transformed record."""
    _log_debug(f"record {record_id}: skipped '{key}' ({reason})")


def log_record_failure(record_id, error: Exception) -> None:
    """Log a record that hit a fail-fast extraction error."""
    _log_error(f"record {record_id}: {type(error).__name__}: {error}")


def log_batch_start(total: int, output_path: Path) -> None:
    """Log the size of a batch and where its records go."""
    _log_info(f"transforming {total} records -> {output_path}")


def log_batch_result(total: int, failed: int, elapsed_time: float) -> None:
    """Log the outcome of a batch run."""
    if failed:
        _log_error(f"{failed}/{total} records failed ({elapsed_time:.2f}s)")
    else:
        _log_success(f"{total} records transformed ({elapsed_time:.2f}s)")
