"""
Run logging for practicum scripts.

Library modules never attach sinks; they log through their context wrapper
(contexts/{context}/logger.py). A script calls setup_logger() once per run to
send everything to a run log file and the important lines to the console.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

import practicum

# Console colors per level; INFO/DEBUG keep loguru's defaults
LEVEL_COLORS = {
    "WARNING": "<yellow>",
    "ERROR": "<red>",
    "CRITICAL": "<bold><red>",
}

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "{time:HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"


def setup_logger(
    context_name: str,
    log_dir: Path,
    extra_provenance: Optional[dict] = None,
    console_level: str = "INFO",
) -> Path:
    """
    Route loguru output for one run to {log_dir}/{context_name}.log and stdout.

    The file gets every DEBUG trace (skipped fields, tier matches, defaults used);
    the console only gets console_level and above. A provenance header opens the log.

    Args:
        context_name: Log file stem (e.g., "transform")
        log_dir: Run directory, created if missing
        extra_provenance: Run inputs to record in the header (e.g., {"Input": path})
        console_level: Lowest level echoed to stdout; "ERROR" for --quiet runs

    Returns:
        Path to the run log file
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()

    for level_name, color in LEVEL_COLORS.items():
        logger.level(level_name, color=color)

    # Postings are Korean text
    logger.add(log_file, format=FILE_FORMAT, level="DEBUG", encoding="utf-8")
    logger.add(sys.stdout, format=CONSOLE_FORMAT, level=console_level, colorize=True)

    log_provenance(extra_provenance)

    return log_file


def log_provenance(extra_context: Optional[dict] = None) -> None:
    """Write the run header: command, working directory, Python and package versions."""
    logger.info("=" * 80)
    logger.info(f"Command: {' '.join(sys.argv)}")
    logger.info(f"Working directory: {Path.cwd()}")
    logger.info(f"Python: {sys.version.split()[0]} | practicum: {practicum.__version__}")

    for key, value in (extra_context or {}).items():
        logger.info(f"{key}: {value}")

    logger.info("=" * 80)
