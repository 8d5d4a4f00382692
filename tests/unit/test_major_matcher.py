"""Unit tests for the hierarchical major matcher."""

import pytest

from practicum.contexts.majors.matcher import (
    correct_major,
    handle_majors,
    match_colleges,
    match_field_groups,
    match_majors,
    match_special_categories,
    prepare_inputs,
    resolve_majors,
)
from practicum.contexts.majors.taxonomy import COLLEGES, SPECIAL_CATEGORIES, majors_for_colleges

SOFTWARE_MAJORS = list(COLLEGES["소프트웨어대학"])


@pytest.mark.unit
def test_prepare_inputs_splits_and_strips_unit_morphemes():
    """Tokens are split on commas and whitespace and lose 학과/학부/전공/학."""
    assert prepare_inputs(["경영학부, 수학과", "전산 전공"]) == ["경영", "수", "전산"]
    assert prepare_inputs(["공과대학"]) == ["공과대"]
    assert prepare_inputs(["", "학과"]) == []


@pytest.mark.unit
class TestSentinel:
    """The "무관" sentinel short-circuits resolution."""

    def test_sentinel_alone(self):
        assert resolve_majors(["무관"]) == ["무관"]

    def test_sentinel_discards_earlier_matches(self):
        assert resolve_majors(["경영학부", "무관", "수학과"]) == ["무관"]

    def test_sentinel_after_unmapped_input(self):
        assert resolve_majors(["컴퓨터", "무관"]) == ["무관"]


@pytest.mark.unit
class TestExactTiers:
    """Special categories, field groups, colleges and majors."""

    def test_special_category(self):
        assert resolve_majors(["전산"]) == list(SPECIAL_CATEGORIES["전산"])

    def test_field_group(self):
        expected = majors_for_colleges(["공과대학", "소프트웨어대학", "자연과학대학"])
        assert resolve_majors(["이공계열"]) == expected

    def test_college(self):
        assert resolve_majors(["공과대학"]) == list(COLLEGES["공과대학"])

    def test_major_prefix(self):
        assert resolve_majors(["기계공학"]) == ["기계공학부"]

    def test_tiers_are_not_exclusive(self):
        """A major name that contains its college name pulls in the whole college."""
        majors = resolve_majors(["컴퓨터소프트웨어학부"])
        assert majors == SOFTWARE_MAJORS
        assert "컴퓨터소프트웨어학부" in majors

    def test_union_keeps_first_seen_order(self):
        majors = resolve_majors(["전산", "기계공학"])
        assert majors == list(SPECIAL_CATEGORIES["전산"]) + ["기계공학부"]

    def test_repeated_inputs_are_deduplicated(self):
        assert resolve_majors(["기계공학", "기계공학부"]) == ["기계공학부"]

    def test_empty_tokens(self):
        assert resolve_majors([]) == []


@pytest.mark.unit
class TestTierFunctions:
    """Individual tiers, applied to atomic inputs."""

    def test_match_special_categories_both_directions(self):
        assert match_special_categories("전산") == list(SPECIAL_CATEGORIES["전산"])
        assert match_special_categories("창업지원") == ["창업 경험"]
        assert match_special_categories("화학") == []

    def test_match_field_groups_by_stem(self):
        assert match_field_groups("상경") == majors_for_colleges(
            ["경제금융대학", "경영대학", "사회과학대학"]
        )

    def test_match_colleges(self):
        assert match_colleges("경영") == ["경영학부", "파이낸스경영학과"]
        assert match_colleges("기계공") == []

    def test_match_majors_folds_case(self):
        assert match_majors("기계공") == ["기계공학부"]


@pytest.mark.unit
class TestCaseSensitivity:
    """Tiers 2-4 compare case-sensitively, tiers 5-6 fold case."""

    def test_uppercase_field_group(self):
        assert resolve_majors(["SW"]) == SOFTWARE_MAJORS

    def test_lowercase_falls_through_to_passthrough(self):
        assert resolve_majors(["sw"]) == ["sw"]


@pytest.mark.unit
class TestFuzzyCorrection:
    """Distance-1 correction only when exact tiers miss."""

    def test_distance_one_is_corrected(self):
        assert correct_major("경재금융") == ("경제금융학부", 1)
        assert resolve_majors(["경재금융학부"]) == ["경제금융학부"]

    def test_distance_two_is_kept_verbatim(self):
        assert correct_major("경재금늉") is None
        assert resolve_majors(["경재금늉"]) == ["경재금늉"]

    def test_exact_match_has_distance_zero(self):
        assert correct_major("기계공") == ("기계공학부", 0)


@pytest.mark.unit
def test_resolution_is_deterministic():
    """Same input, same output, same order."""
    tokens = ["이공계열", "전산", "경재금융", "무엇"]
    first = resolve_majors(tokens)
    for _ in range(5):
        assert resolve_majors(tokens) == first


@pytest.mark.unit
def test_handle_majors_end_to_end():
    """Raw 모집전공 text is normalized then resolved."""
    assert handle_majors("경영학부, 경제금융학부 등") == [
        "경영학부",
        "파이낸스경영학과",
        "경제금융학부",
    ]
    assert handle_majors("전공 무관") == ["무관"]
    assert handle_majors("") == []
