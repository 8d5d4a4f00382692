"""
Majors Context

Responsibilities:
- Holds the canonical college / major / field-group taxonomy
- Cleans free-text major selections into candidate tokens
- Resolves candidate tokens to canonical major names

Owns: Major taxonomy and matching rules
Never: Parses other posting fields or touches storage
"""

from practicum.contexts.majors.matcher import handle_majors, resolve_majors
from practicum.contexts.majors.selection_normalizer import normalize_selection

__all__ = [
    "handle_majors",
    "normalize_selection",
    "resolve_majors",
]
