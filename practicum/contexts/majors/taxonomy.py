"""
Canonical major taxonomy for the Majors context.

Three read-only tables describe the university's academic organization:

- COLLEGES: college name -> majors under that college
- RELATED_COLLEGES: field group (e.g. 이공계열) -> colleges in that field
- SPECIAL_CATEGORIES: cross-cutting categories (e.g. 전산) -> majors, not tied to a college

Declaration order is the iteration order used by the matcher, so results are
reproducible. The tables are wrapped in MappingProxyType over tuples and are never
mutated at runtime.
"""

from types import MappingProxyType

# =============================================================================
# COLLEGES
# =============================================================================

COLLEGES = MappingProxyType(
    {
        "공과대학": (
            "반도체공학과",
            "건축학부",
            "건축공학부",
            "건설환경공학과",
            "도시공학과",
            "자원환경공학과",
            "융합전자공학부",
            "전기ㆍ생체공학부",
            "신소재공학부",
            "화학공학과",
            "생명공학과",
            "유기나노공학과",
            "에너지공학과",
            "기계공학부",
            "원자력공학과",
            "산업공학과",
        ),
        "소프트웨어대학": (
            "데이터사이언스학부",
            "컴퓨터소프트웨어학부",
            "정보시스템학과",
            "미래자동차공학과",
        ),
        "간호대학": ("간호학과",),
        "인문과학대학": (
            "국어국문학과",
            "중어중문학과",
            "영어영문학과",
            "독어독문학과",
            "사학과",
            "철학과",
            "미래인문학융합학부",
            "대중문화·시나리오학과",
        ),
        "사회과학대학": (
            "정치외교학과",
            "사회학과",
            "미디어커뮤니케이션학과",
            "관광학부",
        ),
        "생활과학대학": (
            "의류학과",
            "식품영양학과",
            "실내건축디자인학과",
            "기능성식품학과",
        ),
        "자연과학대학": ("수학과", "물리학과", "화학과", "생명과학과"),
        "정책과학대학": ("정책학과", "행정학과"),
        "경제금융대학": ("경제금융학부",),
        "경영대학": ("경영학부", "파이낸스경영학과"),
        "사범대학": (
            "교육학과",
            "교육공학과",
            "국어교육과",
            "영어교육과",
            "수학교육과",
            "응용미술교육과",
        ),
        "국제학부": ("국제학부",),
        "음악대학": ("성악과", "작곡과", "피아노과", "관현악과", "국악과"),
        "예술체육대학": (
            "스포츠산업과학부 스포츠사이언스전공",
            "스포츠산업과학부 스포츠매니지먼트전공",
            "연극영화학과",
            "무용학과",
        ),
    }
)

# =============================================================================
# FIELD GROUPS
# =============================================================================

RELATED_COLLEGES = MappingProxyType(
    {
        "이공계열": ("공과대학", "소프트웨어대학", "자연과학대학"),
        "공학계열": ("공과대학", "소프트웨어대학"),
        "상경계열": ("경제금융대학", "경영대학", "사회과학대학"),
        "인문계열": ("인문과학대학", "사회과학대학", "사범대학"),
        "인문사회계열": ("인문과학대학", "사회과학대학", "정책과학대학", "사범대학"),
        "사회계열": ("사회과학대학", "정책과학대학"),
        "어문계열": ("인문과학대학",),
        "SW": ("소프트웨어대학",),
    }
)

# =============================================================================
# SPECIAL CATEGORIES
# =============================================================================

# Majors here may live outside COLLEGES (의학과, 시각디자인학과, 창업 경험)
SPECIAL_CATEGORIES = MappingProxyType(
    {
        "전산": (
            "컴퓨터소프트웨어학부",
            "데이터사이언스학부",
            "정보시스템학과",
            "융합전자공학부",
            "미래자동차공학과",
        ),
        "광고홍보": (
            "미디어커뮤니케이션학과",
            "대중문화·시나리오학과",
            "경영학부",
            "사회학과",
        ),
        "의료바이오": ("의학과", "간호학과", "생명공학과", "화학공학과"),
        "디자인": ("응용미술교육과", "실내건축디자인학과", "대중문화·시나리오학과"),
        "컴퓨터공학": ("컴퓨터소프트웨어학부",),
        "예체능": (
            "응용미술교육과",
            "실내건축디자인학과",
            "대중문화·시나리오학과",
            "시각디자인학과",
            "스포츠산업과학부 스포츠사이언스전공",
            "스포츠산업과학부 스포츠매니지먼트전공",
            "연극영화학과",
            "무용학과",
        ),
        "전기전자공학": ("전기ㆍ생체공학부",),
        "재료공학": ("신소재공학부",),
        "생물학": ("생명공학과",),
        "창업": ("창업 경험",),
    }
)

# Sentinel meaning "any major is acceptable"
UNSPECIFIED = "무관"


# =============================================================================
# LOOKUP HELPERS
# =============================================================================


def all_majors() -> tuple[str, ...]:
    """
    Deduplicated pool of every known major.

    College majors come first, then majors that only appear in special
    categories, both in declaration order.

    Returns:
        Tuple of unique major names
    """
    pool = {}
    for majors in COLLEGES.values():
        pool.update(dict.fromkeys(majors))
    for majors in SPECIAL_CATEGORIES.values():
        pool.update(dict.fromkeys(majors))
    return tuple(pool)


def majors_for_colleges(college_names) -> list[str]:
    """
    Majors of the given colleges, in the order the colleges are listed.

    Unknown college names are ignored.
    """
    return [major for name in college_names for major in COLLEGES.get(name, ())]
