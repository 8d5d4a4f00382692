#!/usr/bin/env python3
"""
Show how a major selection string is tokenized and resolved.

Usage:
    python scripts/resolve_majors.py "컴퓨터소프트웨어학부, 전자공학 등"
    python scripts/resolve_majors.py "이공계열" --verbose
"""

import sys

import typer
from loguru import logger

from practicum.contexts.majors import normalize_selection, resolve_majors
from practicum.contexts.majors.taxonomy import all_majors

app = typer.Typer(help="Debug major selection matching.")


@app.command()
def main(
    selection: str = typer.Argument(..., help="Raw 모집전공 text"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show per-tier matcher traces"),
):
    """Print candidate tokens and the canonical majors they resolve to."""
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING", format="{message}")

    tokens = normalize_selection(selection)
    majors = resolve_majors(tokens)
    known = set(all_majors())

    typer.echo("=== Tokens ===")
    for token in tokens:
        typer.echo(f"  {token}")

    typer.echo(f"\n=== Majors ({len(majors)}) ===")
    for major in majors:
        if major in known or major == "무관":
            typer.echo(f"  {major}")
        else:
            typer.secho(f"  {major}  (unmapped)", fg=typer.colors.YELLOW)


if __name__ == "__main__":
    app()
