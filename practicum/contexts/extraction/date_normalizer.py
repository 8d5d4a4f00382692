"""
Date and time normalization for the Extraction context.

Postings write dates as "2023.01.02", "23. 01. 02", "~23.01.10" or, when the year is
obvious to a human reader, just "01.10". standardize_dates() rewrites all of them to
ISO form, borrowing the year of the most recent full date for year-elided ones.

The borrowed year is scan state local to a single call. It flows across the fields
of one mapping (in key order) and never across calls.
"""

import re
from dataclasses import dataclass
from typing import Optional

from practicum.contexts.extraction.exceptions import InvalidFormatError
from practicum.contexts.extraction.logger import log_unresolved_partial_date


@dataclass(frozen=True)
class DatePatterns:
    """
    Regex patterns for date-like substrings.
    """

    # "2023 . 01 . 02" -> "2023.01.02"
    DOT_SPACING: re.Pattern = re.compile(r"\s*\.\s*")

    # Full date (optionally "~"-prefixed) or partial MM.DD, digit runs bounded.
    # Full is tried first at every position.
    DATE_LIKE: re.Pattern = re.compile(
        r"(?<!\d)(?P<tilde>~?)(?P<year>\d{2,4})\.(?P<month>\d{2})\.(?P<day>\d{2})(?!\d)"
        r"|(?<!\d)(?P<p_month>\d{2})\.(?P<p_day>\d{2})(?!\d)"
    )

    # "9시 30분", "09시30분"
    HOUR_MINUTE: re.Pattern = re.compile(r"(\d{1,2})시\s*(\d{1,2})분")


def expand_year(year: str) -> str:
    """Expand a 2-digit year to 20YY; longer years are kept."""
    return f"20{year}" if len(year) == 2 else year


def collapse_dot_spacing(value: str) -> str:
    """Remove whitespace around "." separators and trim."""
    return DatePatterns.DOT_SPACING.sub(".", value).strip()


def rewrite_dates(value: str, last_known_year: Optional[str], field_name: str = "") -> tuple[str, Optional[str]]:
    """
    Rewrite every date-like substring of one value, left to right.

    Args:
        value: Field text with dot spacing already collapsed
        last_known_year: Year carried over from earlier fields, if any
        field_name: Field key, for logging only

    Returns:
        (rewritten value, last known year after this value)
    """
    year_state = last_known_year

    def replace(match: re.Match) -> str:
        nonlocal year_state

        if match.group("year"):
            year = expand_year(match.group("year"))
            year_state = year
            return f"{match.group('tilde')}{year}-{match.group('month')}-{match.group('day')}"

        if year_state is None:
            log_unresolved_partial_date(field_name, match.group(0))
            return match.group(0)

        return f"{year_state}-{match.group('p_month')}-{match.group('p_day')}"

    rewritten = DatePatterns.DATE_LIKE.sub(replace, value)
    return rewritten, year_state


def standardize_dates(parsed: dict) -> dict:
    """
    Rewrite all dates in a mapping's string values to YYYY-MM-DD.

    Pass 1 collapses dot spacing in every string value. Pass 2 walks the keys in
    insertion order and rewrites:
    - full dates "YY.MM.DD" / "YYYY.MM.DD" -> "YYYY-MM-DD" (sets the known year)
    - tilde dates "~YY.MM.DD" -> "~YYYY-MM-DD" (sets the known year)
    - partial dates "MM.DD" -> "<known year>-MM-DD", untouched while no year is known

    Non-string values are left alone. Applying this twice gives the same result.

    Args:
        parsed: Mapping of field name to value; updated in place

    Returns:
        The same mapping

    Example:
        >>> standardize_dates({"a": "2023.03.04", "b": "01.02"})
        {'a': '2023-03-04', 'b': '2023-01-02'}
    """
    for key, value in parsed.items():
        if isinstance(value, str):
            parsed[key] = collapse_dot_spacing(value)

    last_known_year = None
    for key, value in parsed.items():
        if not isinstance(value, str):
            continue
        parsed[key], last_known_year = rewrite_dates(value, last_known_year, field_name=key)

    return parsed


def convert_to_iso8601(time: str, field_name: Optional[str] = None) -> str:
    """
    Convert a "H시 M분" phrase to "HH:MM".

    Args:
        time: Time phrase (e.g., "9시 30분")
        field_name: Record key for error context

    Returns:
        Zero-padded "HH:MM"

    Raises:
        InvalidFormatError: If the phrase is missing or not in "H시 M분" form
    """
    match = DatePatterns.HOUR_MINUTE.search(time) if time else None
    if not match:
        raise InvalidFormatError(
            f"Invalid time format: {time!r}", field_name=field_name, raw_value=time
        )

    hour, minute = match.groups()
    return f"{hour.zfill(2)}:{minute.zfill(2)}"
