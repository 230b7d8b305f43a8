"""
Notation parsing for light characteristics.

Provides the chart-abbreviation parser and group parameter helpers.
"""

from .parser import (
    parse_light_code,
    group_counts,
    normalize_code,
    normalize_color,
    LIGHT_CODE_RE,
)

__all__ = [
    "parse_light_code",
    "group_counts",
    "normalize_code",
    "normalize_color",
    "LIGHT_CODE_RE",
]
