"""
Field mapping configuration for the Transform context.

Loads field_mapping.yaml (raw label -> canonical key, excluded keys, placeholder
values). The path can be overridden with the FIELD_MAPPING_PATH environment
variable, e.g. to point at a mapping for another campus portal.

Examples:
    >>> mapping = load_field_mapping()
    >>> mapping.canonical_key("모집전공")
    'majors'
"""

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping, Optional

from dotenv import load_dotenv
from omegaconf import OmegaConf

load_dotenv()
DEFAULT_FIELD_MAPPING_PATH = Path(__file__).with_name("field_mapping.yaml")
FIELD_MAPPING_PATH = Path(os.getenv("FIELD_MAPPING_PATH", DEFAULT_FIELD_MAPPING_PATH))


@dataclass(frozen=True)
class FieldMapping:
    """
    Read-only view of the field mapping config.

    Attributes:
        key_mapping: Raw portal label -> canonical key
        exclude_keys: Canonical keys dropped from output
        invalid_values: Raw values meaning "not provided"
    """

    key_mapping: Mapping[str, str]
    exclude_keys: frozenset
    invalid_values: frozenset

    def canonical_key(self, raw_key: str) -> str:
        """Canonical key for a raw label; unmapped labels are returned unchanged."""
        return self.key_mapping.get(raw_key, raw_key)

    def is_excluded(self, key: str) -> bool:
        return key in self.exclude_keys

    def is_invalid(self, value: Any) -> bool:
        """Placeholder check; only strings can be placeholders."""
        return isinstance(value, str) and value in self.invalid_values


@lru_cache(maxsize=None)
def load_field_mapping(config_path: Optional[Path] = None) -> FieldMapping:
    """
    Load the field mapping config.

    Args:
        config_path: Optional path to a mapping YAML (defaults to FIELD_MAPPING_PATH)

    Returns:
        FieldMapping, cached per path

    Raises:
        ValueError: If the YAML lacks the key_mapping section
    """
    if config_path is None:
        config_path = FIELD_MAPPING_PATH

    config = OmegaConf.to_container(OmegaConf.load(config_path), resolve=True)

    if not config or "key_mapping" not in config:
        raise ValueError(f"Field mapping at {config_path} must contain a 'key_mapping' section")

    return FieldMapping(
        key_mapping=MappingProxyType(
            {str(raw): str(canonical) for raw, canonical in config["key_mapping"].items()}
        ),
        exclude_keys=frozenset(config.get("exclude_keys") or ()),
        invalid_values=frozenset(config.get("invalid_values") or ()),
    )
