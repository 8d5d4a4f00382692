#!/usr/bin/env python3
"""
Transform a file of raw scraped postings into normalized records.

Reads a JSON list of raw postings, runs every posting through the record
transformer and writes the processed list next to the input (raw-data ->
processed-data) unless an output path is given.

Usage:
    python scripts/process_postings.py data/raw-data.json
    python scripts/process_postings.py data/raw-data.json -o /tmp/processed.json
    python scripts/process_postings.py data/raw-data.json --strict
"""

import json
import os
import time
from pathlib import Path

import typer
from dotenv import load_dotenv

from practicum.contexts.extraction import ExtractionError
from practicum.contexts.transform import load_field_mapping, transform_record
from practicum.contexts.transform.logger import (
    log_batch_result,
    log_batch_start,
    setup_transform_logger,
)
from practicum.utils.timestamp import now

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

app = typer.Typer(help="Normalize scraped internship postings.")


def default_output_path(input_path: Path) -> Path:
    """raw-data.json -> processed-data.json; other names get a .processed suffix."""
    if "raw-data" in input_path.name:
        return input_path.with_name(input_path.name.replace("raw-data", "processed-data"))
    return input_path.with_name(f"{input_path.stem}.processed{input_path.suffix}")


@app.command()
def main(
    input_path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Raw postings JSON"),
    output: Path = typer.Option(None, "--output", "-o", help="Where to write processed records"),
    strict: bool = typer.Option(
        False, "--strict", help="Abort on the first record that fails to transform"
    ),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress non-error output"),
):
    """
    Transform raw postings and write the processed records.

    Records that raise a fail-fast extraction error (malformed working hours,
    non-numeric id) are logged and left out, unless --strict is given.
    """
    log_dir = LOGS_PATH / f"process_{now()}"
    log_file = setup_transform_logger(log_dir, input_path, quiet=quiet)

    raw_postings = json.loads(input_path.read_text(encoding="utf-8"))
    if not isinstance(raw_postings, list):
        typer.secho("ERROR: input must be a JSON list of postings", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    for i, raw in enumerate(raw_postings, 1):
        if not isinstance(raw, dict):
            typer.secho(
                f"ERROR: posting {i} is {type(raw).__name__}, expected a JSON object",
                fg=typer.colors.RED,
                err=True,
            )
            raise typer.Exit(code=1)

    mapping = load_field_mapping()
    output_path = output or default_output_path(input_path)
    log_batch_start(len(raw_postings), output_path)

    start = time.time()
    processed = []
    failed = 0

    for i, raw in enumerate(raw_postings, 1):
        try:
            processed.append(transform_record(raw, mapping))
        except ExtractionError as error:
            failed += 1
            if strict:
                typer.secho(f"ERROR: posting {i}: {error}", fg=typer.colors.RED, err=True)
                raise typer.Exit(code=1)

    log_batch_result(len(raw_postings), failed, time.time() - start)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(processed, ensure_ascii=False, indent=2), encoding="utf-8")

    if not quiet:
        typer.echo(f"Wrote {len(processed)} records to {output_path}")
        typer.echo(f"Log: {log_file}")

    if failed:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
