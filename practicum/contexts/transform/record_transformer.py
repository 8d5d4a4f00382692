"""
Raw posting -> normalized record transformation.

Each raw posting is a flat mapping from the portal's Korean field labels to
values. transform_record() renames keys via the field mapping config, drops
excluded fields and placeholders, and routes every remaining value to its parser.

Routing has three kinds of entries:
- FIELD_PARSERS: value -> parsed value stored under the same key
- FIELD_HANDLERS: (record, value) -> writes one or more keys into the record
- DEFERRED_HANDLERS: like FIELD_HANDLERS but run after every other field, so they
  see the final state of the record (qualifications backfill empty majors)

Values without a route are trimmed. Non-string values pass through untouched.
"""

from typing import Callable, Iterable, Optional

from practicum.contexts.extraction.date_normalizer import standardize_dates
from practicum.contexts.extraction.exceptions import ExtractionError
from practicum.contexts.extraction.field_parsers import (
    clean_currency,
    clean_generic_value,
    normalize_deadline_time,
    parse_identifier,
    parse_internship_details,
    parse_internship_name,
    parse_internship_period,
    parse_interview_info,
    parse_organization_name,
    parse_selection_info,
    parse_status,
    parse_working_days,
    parse_working_hours,
)
from practicum.contexts.extraction.qualifications import handle_qualifications
from practicum.contexts.majors import handle_majors
from practicum.contexts.transform.field_mapping import FieldMapping, load_field_mapping
from practicum.contexts.transform.logger import log_record_failure, log_skipped_field

# =============================================================================
# ROUTING TABLE
# =============================================================================


def _standardize_single_date(value: str) -> str:
    return standardize_dates({"date": value})["date"]


def _handle_internship_name(record: dict, value: str) -> None:
    """Keep the program name and merge its year/semester/programType."""
    record["internshipName"] = value.strip()
    record.update(parse_internship_name(value))


def _handle_working_hours(record: dict, value: str) -> None:
    record.update(parse_working_hours(value))


FIELD_PARSERS: dict[str, Callable] = {
    "organizationName": parse_organization_name,
    "status": parse_status,
    "applicationDeadline": _standardize_single_date,
    "deadlineTime": normalize_deadline_time,
    "internshipPeriod": parse_internship_period,
    "organizationSupportAmount": clean_currency,
    "majors": handle_majors,
    "selectionInfo": parse_selection_info,
    "internshipDetails": parse_internship_details,
    "interviewInfo": parse_interview_info,
    "workingDays": parse_working_days,
}

FIELD_HANDLERS: dict[str, Callable] = {
    "internshipName": _handle_internship_name,
    "workingHours": _handle_working_hours,
}

DEFERRED_HANDLERS: dict[str, Callable] = {
    "qualifications": handle_qualifications,
}

IDENTIFIER_KEY = "id"


# =============================================================================
# TRANSFORMATION
# =============================================================================


def _route(record: dict, key: str, value) -> None:
    """Parse one field into the record."""
    if key == IDENTIFIER_KEY:
        record[key] = parse_identifier(value, field_name=key)
    elif not isinstance(value, str):
        record[key] = value
    elif key in FIELD_HANDLERS:
        FIELD_HANDLERS[key](record, value)
    elif key in FIELD_PARSERS:
        record[key] = FIELD_PARSERS[key](value)
    else:
        record[key] = clean_generic_value(value)


def transform_record(raw: dict, mapping: Optional[FieldMapping] = None) -> dict:
    """
    Transform one raw posting into a normalized record.

    Args:
        raw: Raw posting (portal label -> value)
        mapping: Field mapping to use (defaults to load_field_mapping())

    Returns:
        Normalized record keyed by canonical names

    Raises:
        InvalidFormatError: Malformed working hours
        InvalidIdentifierError: Non-numeric record id
    """
    if mapping is None:
        mapping = load_field_mapping()

    record = {}
    deferred = []
    record_id = raw.get(IDENTIFIER_KEY, "?")

    try:
        for raw_key, value in raw.items():
            key = mapping.canonical_key(raw_key)

            if mapping.is_excluded(key):
                log_skipped_field(record_id, raw_key, "excluded")
                continue
            if mapping.is_invalid(value):
                log_skipped_field(record_id, raw_key, f"placeholder {value!r}")
                continue

            if key in DEFERRED_HANDLERS and isinstance(value, str):
                deferred.append((key, value))
                continue

            _route(record, key, value)

        for key, value in deferred:
            DEFERRED_HANDLERS[key](record, value)

    except ExtractionError as error:
        log_record_failure(record_id, error)
        raise

    return record


def transform_records(raws: Iterable[dict], mapping: Optional[FieldMapping] = None) -> list[dict]:
    """Transform a batch of raw postings; the first fail-fast error aborts the batch."""
    if mapping is None:
        mapping = load_field_mapping()
    return [transform_record(raw, mapping) for raw in raws]
