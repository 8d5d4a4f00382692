"""
Generic ordered-pattern section extraction for the Extraction context.

The extractor knows nothing about specific posting fields; callers pass one of the
ordered tables from section_patterns.py.
"""

import re
from typing import Iterable

SectionTable = Iterable[tuple[str, re.Pattern]]


def extract_sections(text: str, ordered_patterns: SectionTable) -> dict[str, str]:
    """
    Extract named sections from a block of text.

    Args:
        text: Paragraph text containing labelled sections
        ordered_patterns: (name, pattern) pairs in document order; each pattern has
            one capture group bounded by the next section's marker

    Returns:
        Dict of section name to trimmed text. Sections whose pattern did not match,
        or matched only whitespace, are omitted.

    Example:
        >>> extract_sections("*인원 : 2명", QualificationPatterns.ORDERED)
        {'recruitCount': '2명'}
    """
    sections = {}

    for name, pattern in ordered_patterns:
        match = pattern.search(text)
        if not match or not match.group(1):
            continue

        value = match.group(1).strip()
        if value:
            sections[name] = value

    return sections
