"""Unit tests for the canonical major taxonomy tables."""

import pytest

from practicum.contexts.majors.taxonomy import (
    COLLEGES,
    RELATED_COLLEGES,
    SPECIAL_CATEGORIES,
    all_majors,
    majors_for_colleges,
)


@pytest.mark.unit
def test_all_majors_is_unique():
    """Majors listed under several tables appear once in the pool."""
    pool = all_majors()
    assert len(pool) == len(set(pool))


@pytest.mark.unit
def test_all_majors_lists_colleges_first():
    """College majors precede majors that only exist in special categories."""
    pool = all_majors()
    college_majors = [major for majors in COLLEGES.values() for major in majors]

    assert pool[0] == "반도체공학과"
    assert list(pool[: len(set(college_majors))]) == list(dict.fromkeys(college_majors))
    assert "의학과" in pool
    assert "시각디자인학과" in pool
    assert pool[-1] == "창업 경험"


@pytest.mark.unit
def test_field_groups_reference_known_colleges():
    """Every college named by a field group exists in COLLEGES."""
    for group, colleges in RELATED_COLLEGES.items():
        for college in colleges:
            assert college in COLLEGES, f"{group} references unknown college {college}"


@pytest.mark.unit
def test_tables_are_read_only():
    """Taxonomy tables cannot be modified at runtime."""
    with pytest.raises(TypeError):
        COLLEGES["새대학"] = ("새학과",)

    with pytest.raises(TypeError):
        SPECIAL_CATEGORIES["전산"] = ()


@pytest.mark.unit
def test_majors_for_colleges_keeps_order_and_skips_unknown():
    """Majors follow the order of the requested colleges; unknown names are ignored."""
    majors = majors_for_colleges(["경영대학", "없는대학", "경제금융대학"])
    assert majors == ["경영학부", "파이낸스경영학과", "경제금융학부"]
