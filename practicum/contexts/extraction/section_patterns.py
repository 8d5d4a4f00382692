"""
Section markers for posting paragraph extraction.

Each posting field that packs several labelled sub-fields into one paragraph
(자격사항, 실습내용, 면접정보) gets an ordered table of (name, pattern) pairs. A
pattern captures from its label up to the NEXT label in the table, so tables must
list sections in the order they appear on the portal.

Pattern classes follow the convention:
- Dataclasses with frozen=True for immutability
- Class-level constants for patterns
- Helper functions that build or use these patterns
"""

import re
from dataclasses import dataclass
from typing import Optional

# =============================================================================
# PATTERN BUILDER
# =============================================================================


def bounded_section(label: str, next_marker: Optional[str] = None) -> re.Pattern:
    """
    Build a pattern capturing a labelled section up to the next marker.

    The capture is lazy and stops right before next_marker, or at end of input
    when next_marker is None or never appears.

    Args:
        label: Regex for the section label (without the colon)
        next_marker: Regex for the following section's marker

    Returns:
        Compiled pattern with one capture group

    Example:
        >>> bounded_section("인원", r"\\*학년").search("인원 : 2명\\n*학년 : 3").group(1)
        '2명\\n'
    """
    boundary = rf"(?:{next_marker}|\Z)" if next_marker else r"\Z"
    return re.compile(rf"{label}\s*:\s*([\s\S]*?)(?={boundary})")


def single_line_section(label: str) -> re.Pattern:
    """Build a pattern capturing a labelled section up to the end of its line."""
    return re.compile(rf"{label}\s*:\s*([^\n]+)")


# =============================================================================
# QUALIFICATIONS (자격사항)
# =============================================================================


@dataclass(frozen=True)
class QualificationPatterns:
    """
    Sub-fields of the qualifications block.

    Example block:
        *전공 : 컴퓨터소프트웨어학부
        *인원 : 2명
        *학년 : 3,4학년
        *학점/평점 : 3.0 이상
        *요구 역량 : Python
        *기타사항 : 없음
    """

    ORDERED: tuple = (
        ("major", bounded_section(r"전공", r"\*인원")),
        ("recruitCount", bounded_section(r"인원", r"\*학년")),
        ("grade", bounded_section(r"학년", r"\*학점/평점")),
        ("credit", bounded_section(r"학점/평점", r"\*요구 역량")),
        ("competence", bounded_section(r"요구\s*역량", r"\*기타사항")),
        ("etc", bounded_section(r"기타사항")),
    )


# =============================================================================
# INTERNSHIP DETAILS (실습내용)
# =============================================================================


@dataclass(frozen=True)
class InternshipDetailPatterns:
    """
    Sub-fields of the internship description block. Markers sit at line starts.
    """

    ORDERED: tuple = (
        ("jobTitle", bounded_section(r"\*직무명", r"\n\*교육목표")),
        ("goals", bounded_section(r"\*교육목표", r"\n\*직무 개요")),
        ("jobOverview", bounded_section(r"\*직무\s*개요", r"\n\*운영/ 지도 계획")),
        ("operationGuidance", bounded_section(r"\*운영/ 지도 계획", r"\n\*목표 성과물")),
        ("targetOutcomes", bounded_section(r"\*목표\s*성과물")),
    )


# =============================================================================
# INTERVIEW INFO (면접정보)
# =============================================================================


@dataclass(frozen=True)
class InterviewPatterns:
    """
    Sub-fields of the interview schedule block, applied after "*" bullets are removed.

    Results are announced twice: after document screening (서류 합격발표) and
    after the interview (최종 합격발표).
    """

    # Bullet characters removed before matching
    BULLET: re.Pattern = re.compile(r"\*")

    ORDERED: tuple = (
        ("interviewType", single_line_section(r"면접\s*유형")),
        ("applicationSubmissionPeriod", bounded_section(r"서류\s*접수\s*기간", r"서류\s*합격")),
        (
            "applicationResultsAnnouncement",
            bounded_section(r"서류\s*합격\s*발표", r"면접\s*일|최종\s*합격"),
        ),
        ("interviewDate", bounded_section(r"면접\s*일", r"최종\s*합격")),
        ("finalResultsAnnouncement", single_line_section(r"최종\s*합격\s*발표")),
    )
