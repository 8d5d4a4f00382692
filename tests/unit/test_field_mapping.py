"""Unit tests for the field mapping config."""

from pathlib import Path
from typing import Optional, get_type_hints

import pytest

from practicum.contexts.transform.field_mapping import (
    DEFAULT_FIELD_MAPPING_PATH,
    load_field_mapping,
)


@pytest.mark.unit
def test_default_mapping_file_exists():
    assert DEFAULT_FIELD_MAPPING_PATH.exists()


@pytest.mark.unit
def test_load_default_mapping():
    """Bundled mapping renames the portal labels."""
    mapping = load_field_mapping(DEFAULT_FIELD_MAPPING_PATH)

    assert mapping.canonical_key("모집전공") == "majors"
    assert mapping.canonical_key("실습기관 진행상태") == "status"
    assert mapping.canonical_key("근무시간") == "workingHours"
    assert mapping.canonical_key("면접정보") == "interviewInfo"


@pytest.mark.unit
def test_unmapped_label_is_kept():
    mapping = load_field_mapping(DEFAULT_FIELD_MAPPING_PATH)
    assert mapping.canonical_key("새로운항목") == "새로운항목"


@pytest.mark.unit
def test_excluded_keys():
    mapping = load_field_mapping(DEFAULT_FIELD_MAPPING_PATH)

    assert mapping.is_excluded("number")
    assert mapping.is_excluded("progressStatus")
    assert not mapping.is_excluded("majors")


@pytest.mark.unit
def test_invalid_values_are_strings_only():
    """Placeholders are matched on strings; other types never are."""
    mapping = load_field_mapping(DEFAULT_FIELD_MAPPING_PATH)

    assert mapping.is_invalid("")
    assert mapping.is_invalid("-")
    assert not mapping.is_invalid("접수중")
    assert not mapping.is_invalid(0)
    assert not mapping.is_invalid(None)


@pytest.mark.unit
def test_mapping_is_cached_per_path():
    assert load_field_mapping(DEFAULT_FIELD_MAPPING_PATH) is load_field_mapping(
        DEFAULT_FIELD_MAPPING_PATH
    )


@pytest.mark.unit
def test_load_custom_mapping(tmp_path):
    """Another portal's labels can be mapped with a custom YAML."""
    config_path = tmp_path / "mapping.yaml"
    config_path.write_text(
        "key_mapping:\n  기관명: organizationName\nexclude_keys:\n  - memo\n",
        encoding="utf-8",
    )

    mapping = load_field_mapping(config_path)

    assert mapping.canonical_key("기관명") == "organizationName"
    assert mapping.is_excluded("memo")
    assert not mapping.is_invalid("-")


@pytest.mark.unit
def test_missing_key_mapping_raises(tmp_path):
    config_path = tmp_path / "broken.yaml"
    config_path.write_text("exclude_keys:\n  - memo\n", encoding="utf-8")

    with pytest.raises(ValueError, match="key_mapping"):
        load_field_mapping(config_path)


@pytest.mark.unit
def test_config_path_is_optional():
    """Calling without a path loads the configured default."""
    hints = get_type_hints(load_field_mapping.__wrapped__)
    assert hints["config_path"] == Optional[Path]
    assert load_field_mapping().canonical_key("모집전공") == "majors"
