"""
Core types for light characteristics.

Provides fundamental data structures:
- LightType: Canonical light-type tokens
- Descriptor: Parsed light characteristic
- Segment: Timed step of a compiled sequence
"""

from .types import LightType, Descriptor, Segment, total_duration

__all__ = [
    "LightType",
    "Descriptor",
    "Segment",
    "total_duration",
]
