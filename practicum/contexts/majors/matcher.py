"""
Hierarchical major matcher for the Majors context.

Resolves candidate tokens (see selection_normalizer.py) to canonical major names
using tiered rules, broadest first:

1. Sentinel     "무관" short-circuits the whole call
2. Special      cross-cutting categories (전산, 의료바이오, ...)
3. Field group  related-college groups (이공계열, 상경계열, ...)
4. College      college names without the "대학" suffix
5. Major        prefix containment on suffix-stripped, case-folded names
6. Fuzzy        Levenshtein distance <= 1, only when tiers 2-5 all missed

Tiers are non-exclusive: one input may contribute majors from several tiers.
Tiers 2-4 compare case-sensitively while tiers 5-6 fold case. The asymmetry is
kept for compatibility with previously published records ("SW" reaches the
software college through tier 3, "sw" does not).
"""

from typing import Iterable, Optional

from rapidfuzz.distance import Levenshtein

from practicum.contexts.majors.logger import log_correction, log_tier_match, log_unmapped
from practicum.contexts.majors.patterns import (
    COLLEGE_SUFFIX,
    FIELD_GROUP_SUFFIX,
    MAX_CORRECTION_DISTANCE,
    MatchPatterns,
)
from practicum.contexts.majors.selection_normalizer import normalize_selection
from practicum.contexts.majors.taxonomy import (
    COLLEGES,
    RELATED_COLLEGES,
    SPECIAL_CATEGORIES,
    UNSPECIFIED,
    all_majors,
    majors_for_colleges,
)


def _strip_unit_suffixes(name: str) -> str:
    """Drop 학과/학부/전공 and case-fold, as compared in tiers 5 and 6."""
    return MatchPatterns.UNIT_SUFFIXES.sub("", name).lower()


# (canonical name, comparison form) for the fuzzy tier, colleges first
_CORRECTION_POOL = tuple((major, _strip_unit_suffixes(major)) for major in all_majors())


def prepare_inputs(tokens: Iterable[str]) -> list[str]:
    """
    Split tokens into atomic inputs and strip unit morphemes.

    Example:
        >>> prepare_inputs(["경영학부, 수학과", "전산 전공"])
        ['경영', '수', '전산']
    """
    atomic_inputs = []
    for token in tokens:
        for part in MatchPatterns.TOKEN_SPLIT.split(token):
            stripped = MatchPatterns.UNIT_MORPHEMES.sub("", part).strip()
            if stripped:
                atomic_inputs.append(stripped)
    return atomic_inputs


# =============================================================================
# TIERS
# =============================================================================


def match_special_categories(atomic_input: str) -> list[str]:
    """Tier 2: category name contains the input or the input contains it."""
    matched = []
    for category, majors in SPECIAL_CATEGORIES.items():
        if atomic_input in category or category in atomic_input:
            matched.extend(majors)
    return matched


def match_field_groups(atomic_input: str) -> list[str]:
    """Tier 3: group name contains the input, or the input contains the bare group stem."""
    matched = []
    for group, colleges in RELATED_COLLEGES.items():
        stem = group.replace(FIELD_GROUP_SUFFIX, "")
        if atomic_input in group or stem in atomic_input:
            matched.extend(majors_for_colleges(colleges))
    return matched


def match_colleges(atomic_input: str) -> list[str]:
    """Tier 4: the input mentions a college name without its "대학" suffix."""
    matched = []
    for college, majors in COLLEGES.items():
        if college.replace(COLLEGE_SUFFIX, "") in atomic_input:
            matched.extend(majors)
    return matched


def match_majors(atomic_input: str) -> list[str]:
    """Tier 5: prefix containment in either direction, suffixes stripped, case-folded."""
    normalized_input = _strip_unit_suffixes(atomic_input)
    matched = []
    for majors in COLLEGES.values():
        for major in majors:
            normalized_major = _strip_unit_suffixes(major)
            if normalized_major.startswith(normalized_input) or normalized_input.startswith(
                normalized_major
            ):
                matched.append(major)
    return matched


def correct_major(atomic_input: str) -> Optional[tuple[str, int]]:
    """
    Tier 6: closest known major within MAX_CORRECTION_DISTANCE edits.

    Ties keep the earliest major in pool order (colleges, then special categories).

    Returns:
        (major, distance) or None if nothing is close enough
    """
    normalized_input = _strip_unit_suffixes(atomic_input)

    best_match = None
    best_distance = MAX_CORRECTION_DISTANCE + 1
    for major, normalized_major in _CORRECTION_POOL:
        distance = Levenshtein.distance(normalized_input, normalized_major)
        if distance < best_distance:
            best_match = major
            best_distance = distance

    if best_match is None:
        return None
    return best_match, best_distance


_EXACT_TIERS = (
    ("special", match_special_categories),
    ("field group", match_field_groups),
    ("college", match_colleges),
    ("major", match_majors),
)


# =============================================================================
# ENTRY POINTS
# =============================================================================


def resolve_majors(tokens: Iterable[str]) -> list[str]:
    """
    Resolve candidate tokens to canonical major names.

    Args:
        tokens: Candidate tokens, usually from normalize_selection()

    Returns:
        Unique major names in first-seen order. ["무관"] if any atomic input is the
        sentinel (earlier partial results are discarded). Inputs no tier resolves are
        kept verbatim so callers can flag them.

    Example:
        >>> resolve_majors(["기계공학"])
        ['기계공학부']
        >>> resolve_majors(["기계공학", "무관"])
        ['무관']
    """
    # dict keeps insertion order and uniqueness
    related = {}

    for atomic_input in prepare_inputs(tokens):
        if atomic_input == UNSPECIFIED:
            return [UNSPECIFIED]

        found = False
        for tier_name, tier in _EXACT_TIERS:
            matched = tier(atomic_input)
            if matched:
                related.update(dict.fromkeys(matched))
                log_tier_match(atomic_input, tier_name, len(matched))
                found = True

        if found:
            continue

        correction = correct_major(atomic_input)
        if correction:
            major, distance = correction
            related[major] = None
            log_correction(atomic_input, major, distance)
        else:
            related[atomic_input] = None
            log_unmapped(atomic_input)

    return list(related)


def handle_majors(selection: str) -> list[str]:
    """
    Resolve a raw "모집전공" value to canonical majors.

    Args:
        selection: Raw major selection text from a posting

    Returns:
        Canonical major names (see resolve_majors)
    """
    return resolve_majors(normalize_selection(selection))
