"""
Extraction Context

Responsibilities:
- Splits loosely formatted posting paragraphs into named sections
- Normalizes dates, times, currency and grade eligibility into canonical forms
- Defines the error taxonomy for fail-fast extraction paths

Owns: Section markers, field parsers, date normalization
Never: Maps raw posting keys or decides which parser a field goes to
"""

from practicum.contexts.extraction.date_normalizer import (
    convert_to_iso8601,
    standardize_dates,
)
from practicum.contexts.extraction.exceptions import (
    ExtractionError,
    InvalidFormatError,
    InvalidIdentifierError,
)
from practicum.contexts.extraction.qualifications import (
    handle_qualifications,
    parse_qualifications,
)
from practicum.contexts.extraction.section_extractor import extract_sections

__all__ = [
    # Generic extraction
    "extract_sections",
    "standardize_dates",
    "convert_to_iso8601",
    # Qualifications (feeds back into majors context)
    "parse_qualifications",
    "handle_qualifications",
    # Errors
    "ExtractionError",
    "InvalidFormatError",
    "InvalidIdentifierError",
]
