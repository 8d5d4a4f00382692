"""
practicum - field-practice (현장실습) posting normalization

Turns scraped, semi-structured Korean internship postings into normalized records
ready for storage and search.

Architecture:
- Majors Context: Major taxonomy and free-text major resolution
- Extraction Context: Section extraction, date normalization, field parsers
- Transform Context: Raw posting key mapping and field routing
"""

__version__ = "0.1.0"
