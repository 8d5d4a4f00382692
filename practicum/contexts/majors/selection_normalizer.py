"""
Major selection normalizer for the Majors context.

Turns the free-text "모집전공" (recruiting majors) value of a posting into a flat
list of candidate unit-name tokens. Tokens are not validated here; the matcher
decides what they resolve to.

Design principle: Normalize BEFORE matching. Everything that is purely textual
(bullets, separators, "etc." tails, parentheses) is handled in this module so the
matcher only deals with unit names.
"""

from practicum.contexts.majors.patterns import (
    NO_CONSTRAINT_PHRASES,
    PLACEHOLDER_TOKENS,
    SelectionPatterns,
)
from practicum.contexts.majors.taxonomy import UNSPECIFIED


def is_unconstrained(selection: str) -> bool:
    """Check whether a selection accepts any major (e.g. "전공 무관", "모든 계열")."""
    return any(phrase in selection for phrase in NO_CONSTRAINT_PHRASES)


def extract_special_tokens(selection: str) -> tuple[list[str], str]:
    """
    Pull standalone special tokens (e.g. "S/W") out of a selection.

    Args:
        selection: Raw selection text

    Returns:
        (special tokens in order of appearance, remaining text with them removed)
    """
    specials = []

    def take(match) -> str:
        specials.append(match.group(0).strip())
        return ""

    remainder = SelectionPatterns.SPECIAL_TOKEN.sub(take, selection)
    return specials, remainder


def clean_piece(piece: str) -> str:
    """
    Clean a single split piece.

    Cuts the piece at "등"/"관련" and drops parentheses (not their contents).

    Example:
        >>> clean_piece("(컴퓨터)공학 관련")
        '컴퓨터공학'
    """
    head = SelectionPatterns.TRAILING_QUALIFIER.split(piece, maxsplit=1)[0]
    return SelectionPatterns.PARENTHESES.sub("", head).strip()


def normalize_selection(selection: str) -> list[str]:
    """
    Clean and split a major selection string into candidate tokens.

    Steps:
    1. Short-circuit to ["무관"] on any no-constraint phrase
    2. Extract special tokens (S/W) before splitting
    3. Replace bullet markers with spaces
    4. Split on , / " 및 " ∙ newline and whitespace
    5. Cut "등"/"관련" tails, drop parentheses, trim
    6. Drop empties and placeholder pieces

    Args:
        selection: Raw "모집전공" text

    Returns:
        Special tokens followed by cleaned pieces. Duplicates are kept.

    Example:
        >>> normalize_selection("경영학부, 경제금융학부 등")
        ['경영학부', '경제금융학부']
        >>> normalize_selection("전공 무관")
        ['무관']
    """
    if is_unconstrained(selection):
        return [UNSPECIFIED]

    specials, remainder = extract_special_tokens(selection)

    remainder = SelectionPatterns.BULLET.sub(" ", remainder)

    cleaned = []
    for piece in SelectionPatterns.SEPARATOR.split(remainder):
        token = clean_piece(piece)
        if token and token not in PLACEHOLDER_TOKENS:
            cleaned.append(token)

    return specials + cleaned
