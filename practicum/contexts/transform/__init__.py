"""
Transform Context

Responsibilities:
- Maps raw Korean field labels to canonical record keys
- Drops excluded fields and placeholder values
- Routes each value to the matching parser and merges the results

Owns: Field mapping configuration and routing table
Never: Fetches raw postings or persists transformed records
"""

from practicum.contexts.transform.field_mapping import FieldMapping, load_field_mapping
from practicum.contexts.transform.record_transformer import (
    transform_record,
    transform_records,
)

__all__ = [
    "FieldMapping",
    "load_field_mapping",
    "transform_record",
    "transform_records",
]
