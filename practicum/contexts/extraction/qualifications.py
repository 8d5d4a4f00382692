"""
Qualifications (자격사항) parsing.

The qualifications block repeats the recruiting major in free text. Its major
section is tokenized like the primary 모집전공 field and, when a posting leaves that
field empty, resolved into the record's canonical majors.
"""

from practicum.contexts.extraction.section_extractor import extract_sections
from practicum.contexts.extraction.section_patterns import QualificationPatterns
from practicum.contexts.majors import normalize_selection, resolve_majors


def parse_qualifications(text: str) -> dict:
    """
    Parse a qualifications block into its sub-fields.

    Args:
        text: Raw 자격사항 text

    Returns:
        Dict with any of "major" (list of candidate tokens), "recruitCount",
        "grade", "credit", "competence", "etc" (trimmed strings)

    Example:
        >>> parse_qualifications("*전공 : 컴퓨터소프트웨어학부\\n*인원 : 2명")
        {'major': ['컴퓨터소프트웨어학부'], 'recruitCount': '2명'}
    """
    qualifications = extract_sections(text, QualificationPatterns.ORDERED)

    if "major" in qualifications:
        qualifications["major"] = normalize_selection(qualifications["major"])

    return qualifications


def handle_qualifications(record: dict, text: str) -> None:
    """
    Parse qualifications into a record, backfilling its majors if empty.

    Sets record["qualifications"]. When record["majors"] is missing or empty and
    the qualifications name a major, record["majors"] becomes the resolved list.

    Args:
        record: Transformed record being built (updated in place)
        text: Raw 자격사항 text
    """
    qualifications = parse_qualifications(text)
    record["qualifications"] = qualifications

    if not record.get("majors") and qualifications.get("major"):
        record["majors"] = resolve_majors(qualifications["major"])
