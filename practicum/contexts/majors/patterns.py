"""
Regex patterns and word lists for major selection parsing.

Pattern classes follow the same convention as extraction/section_patterns.py:
- Dataclasses with frozen=True for immutability
- Class-level constants for patterns
- Helper functions live in the modules that use these patterns
"""

import re
from dataclasses import dataclass

# =============================================================================
# SELECTION NORMALIZATION
# =============================================================================

# Any of these anywhere in a selection means "no major restriction"
NO_CONSTRAINT_PHRASES = ("무관", "모든 계열", "모든 학과", "모든과")

# Abbreviations that must survive splitting (the "/" would otherwise cut them)
SPECIAL_TOKENS = ("S/W",)

# Leftover pieces that carry no major information
PLACEHOLDER_TOKENS = {"계열", "학과, 학부, 과", "+ 창업"}


@dataclass(frozen=True)
class SelectionPatterns:
    """
    Patterns for cleaning a free-text major selection into candidate tokens.
    """

    # ASCII boundaries only: Hangul next to the token still counts as a boundary ("S/W학과")
    SPECIAL_TOKEN: re.Pattern = re.compile(
        r"(?<![A-Za-z0-9_])("
        + "|".join(re.escape(t) for t in SPECIAL_TOKENS)
        + r")(?![A-Za-z0-9_])",
        re.IGNORECASE,
    )

    # "- ", "• ", "*"
    BULLET: re.Pattern = re.compile(r"[-•*]\s*")

    # comma | slash | " 및 " | bullet operator | newline | whitespace run
    SEPARATOR: re.Pattern = re.compile(r",|/| 및 |∙|\n|\s+")

    # Everything after "등" (etc.) or "관련" (related) is non-specific
    TRAILING_QUALIFIER: re.Pattern = re.compile(r"등|관련")

    PARENTHESES: re.Pattern = re.compile(r"[()]")


# =============================================================================
# MATCHING
# =============================================================================


@dataclass(frozen=True)
class MatchPatterns:
    """
    Patterns used by the hierarchical matcher.
    """

    # Pre-pass split of candidate tokens
    TOKEN_SPLIT: re.Pattern = re.compile(r"[,\s]+")

    # Pre-pass strip: department / division / major / studies
    UNIT_MORPHEMES: re.Pattern = re.compile(r"학과|학부|전공|학")

    # Strip applied to canonical names in the major and fuzzy tiers
    UNIT_SUFFIXES: re.Pattern = re.compile(r"학과|학부|전공")


# Field groups are named "...계열"; colleges are named "...대학"
FIELD_GROUP_SUFFIX = "계열"
COLLEGE_SUFFIX = "대학"

# Largest edit distance accepted by the fuzzy tier
MAX_CORRECTION_DISTANCE = 1
