"""
Structured field parsers for the Extraction context.

Small, single-field consumers. Apart from parse_working_hours() and
parse_identifier(), every parser returns a defined default on input it does not
recognize instead of raising:

- normalize_deadline_time -> "24:00" (no explicit cutoff, end of day)
- clean_currency          -> {"period": "월", "amount": 0}
- parse_selection_info    -> []
"""

import re
from dataclasses import dataclass
from typing import Any

from practicum.contexts.extraction.date_normalizer import convert_to_iso8601, standardize_dates
from practicum.contexts.extraction.exceptions import InvalidFormatError, InvalidIdentifierError
from practicum.contexts.extraction.logger import log_default_used
from practicum.contexts.extraction.section_extractor import extract_sections
from practicum.contexts.extraction.section_patterns import (
    InternshipDetailPatterns,
    InterviewPatterns,
)

# =============================================================================
# PATTERNS
# =============================================================================

ALL_GRADES = [1, 2, 3, 4]
END_OF_DAY = "24:00"
DEFAULT_PERIOD = "월"
CLOSED_STATUS = "접수마감"


@dataclass(frozen=True)
class FieldPatterns:
    """
    Regex patterns for single-value posting fields.
    """

    # "1,2학년", "3학년"
    GRADES: re.Pattern = re.compile(r"(\d+(?:,\d+)*)학년")

    # "월 500,000 원", "주 120,000원", "500,000원"
    CURRENCY: re.Pattern = re.compile(r"(월|주)?\s*([\d,]+)\s*원")

    # "2024년도 1학기 단기 현장실습"
    PROGRAM_YEAR: re.Pattern = re.compile(r"(\d{4})년도")
    SEMESTER: re.Pattern = re.compile(r"(1학기|여름학기|2학기|겨울학기)")
    PROGRAM_TYPE: re.Pattern = re.compile(r"(단기|장기)\s*현장실습")


# Deadline phrasings, tried in order: "17시까지", "17시 30분까지", "17:30까지"
DEADLINE_PATTERNS = (
    re.compile(r"(\d{1,2})시까지"),
    re.compile(r"(\d{1,2})시\s*(\d{1,2})분까지"),
    re.compile(r"(\d{1,2}):(\d{1,2})까지"),
)


# =============================================================================
# SCALAR FIELDS
# =============================================================================


def clean_generic_value(value: str) -> str:
    """Trim a free-text value."""
    return value.strip()


def parse_status(status: str) -> bool:
    """True while the posting accepts applications, False once it reads "접수마감"."""
    return status.strip() != CLOSED_STATUS


def parse_organization_name(value: str) -> str:
    """
    Organization name without the branch suffix.

    Example:
        >>> parse_organization_name("(주)한빛소프트 / 서울지사")
        '(주)한빛소프트'
    """
    return value.split("/")[0].strip()


def parse_identifier(value: Any, field_name: str = "id") -> int:
    """
    Coerce a record identifier to an int.

    Raises:
        InvalidIdentifierError: If the value is not an int or a string of digits
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return value

    if isinstance(value, str) and value.strip().isdecimal():
        return int(value.strip())

    raise InvalidIdentifierError(
        f"Invalid id value: {value!r}", field_name=field_name, raw_value=value
    )


def parse_selection_info(selection_info: str) -> list[int]:
    """
    Grade levels eligible to apply.

    Returns:
        [1, 2, 3, 4] when grades are unrestricted ("무관"), the listed grades
        for "1,2학년"-style text, otherwise []

    Example:
        >>> parse_selection_info("1,2학년 대상")
        [1, 2]
    """
    if "무관" in selection_info:
        return list(ALL_GRADES)

    match = FieldPatterns.GRADES.search(selection_info)
    if not match:
        log_default_used("parse_selection_info", selection_info, [])
        return []

    return [int(grade) for grade in match.group(1).split(",")]


def clean_currency(value: str) -> dict:
    """
    Parse a stipend such as "월 500,000 원".

    Returns:
        {"period": "월" | "주", "amount": int}; {"period": "월", "amount": 0}
        when the value is not a won amount
    """
    match = FieldPatterns.CURRENCY.fullmatch(value)
    digits = match.group(2).replace(",", "") if match else ""

    if not digits:
        log_default_used("clean_currency", value, 0)
        return {"period": DEFAULT_PERIOD, "amount": 0}

    return {"period": match.group(1) or DEFAULT_PERIOD, "amount": int(digits)}


def normalize_deadline_time(time: str) -> str:
    """
    Normalize an application cutoff time to "HH:MM".

    Returns:
        "HH:MM", or "24:00" for empty or unrecognized input (no explicit cutoff)

    Example:
        >>> normalize_deadline_time("12시 30분까지")
        '12:30'
    """
    if not time:
        return END_OF_DAY

    for pattern in DEADLINE_PATTERNS:
        match = pattern.search(time)
        if match:
            hour, minute = (match.groups() + ("0",))[:2]
            return f"{hour.zfill(2)}:{minute.zfill(2)}"

    log_default_used("normalize_deadline_time", time, END_OF_DAY)
    return END_OF_DAY


# =============================================================================
# SCHEDULE FIELDS
# =============================================================================


def parse_working_hours(value: str) -> dict[str, str]:
    """
    Parse "9시 00분 ~ 18시 00분" into start and end hours.

    Returns:
        {"workStartHour": "09:00", "workEndHour": "18:00"}

    Raises:
        InvalidFormatError: If either endpoint is missing or malformed
    """
    parts = [part.strip() for part in value.split("~")]
    if len(parts) != 2:
        raise InvalidFormatError(
            "Working hours must be a '~'-separated range", field_name="workingHours", raw_value=value
        )

    start, end = parts
    return {
        "workStartHour": convert_to_iso8601(start, field_name="workingHours"),
        "workEndHour": convert_to_iso8601(end, field_name="workingHours"),
    }


def parse_working_days(value: str) -> list[str]:
    """Split "월 화 수 목 금" into individual days."""
    return value.split()


def parse_internship_period(period: str) -> dict:
    """
    Split "2024.07.01 ~ 2024.08.31" into ISO start and end dates.

    A missing end yields endDate None.
    """
    start, _, end = period.partition("~")
    dates = {"startDate": start.strip(), "endDate": end.strip() or None}
    return standardize_dates(dates)


def parse_internship_name(name: str) -> dict:
    """
    Pull program year, semester and type out of a program name.

    Example:
        >>> parse_internship_name("2024년도 여름학기 단기 현장실습")
        {'year': 2024, 'semester': '여름학기', 'programType': '단기'}
    """
    parsed = {}

    year_match = FieldPatterns.PROGRAM_YEAR.search(name)
    if year_match:
        parsed["year"] = int(year_match.group(1))

    semester_match = FieldPatterns.SEMESTER.search(name)
    if semester_match:
        parsed["semester"] = semester_match.group(1)

    program_type_match = FieldPatterns.PROGRAM_TYPE.search(name)
    if program_type_match:
        parsed["programType"] = program_type_match.group(1)

    return parsed


# =============================================================================
# PARAGRAPH FIELDS
# =============================================================================


def parse_internship_details(details: str) -> dict[str, str]:
    """Split the 실습내용 block into job title, goals, overview, guidance and outcomes."""
    return extract_sections(details, InternshipDetailPatterns.ORDERED)


def parse_interview_info(info: str) -> dict[str, str]:
    """
    Split the 면접정보 block and normalize its dates.

    Dates are standardized across sub-fields in document order, so a result date
    written as "01.20" borrows the year of the submission period above it.
    """
    cleaned = InterviewPatterns.BULLET.sub("", info)
    return standardize_dates(extract_sections(cleaned, InterviewPatterns.ORDERED))
