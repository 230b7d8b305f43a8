"""
Core data structures for light characteristics.

This module contains the value types shared by the parser and compiler:
- LightType: The closed set of light-type tokens (canonical spellings)
- Descriptor: A parsed light characteristic (type, group, colors, period)
- Segment: One timed on/off step of a compiled sequence
"""

from dataclasses import dataclass
from enum import Enum


class LightType(str, Enum):
    """
    Canonical light-type tokens.

    Values are the normalized spelling: uppercase, compound tokens
    joined by a single space (e.g. "Gp Fl" -> "GP FL").
    """
    FIXED = "F"
    DIRECTIONAL = "DIR"
    DIRECTIONAL_FIXED = "DIR F"
    FLASH = "FL"
    GROUP_FLASH = "GP FL"
    LONG_FLASH = "LFL"
    QUICK = "Q"
    VERY_QUICK = "VQ"
    ULTRA_QUICK = "UQ"
    INTERRUPTED_QUICK = "IQ"
    OCCULTING = "OC"
    GROUP_OCCULTING = "GP OC"
    ISOPHASE = "ISO"
    ALTERNATING = "AL"
    ALTERNATING_FLASH = "AL FL"
    ALTERNATING_OCCULTING = "AL OC"
    ALTERNATING_ISOPHASE = "AL ISO"
    FIXED_AND_FLASHING = "FFL"
    FLASH_FIXED = "FL F"
    MORSE = "MO"

    @classmethod
    def from_token(cls, token: str) -> "LightType | None":
        """
        Resolve a raw type token to its canonical member.

        Whitespace inside the token is ignored, so "GpFl", "Gp Fl" and
        "gp  fl" all resolve to GROUP_FLASH. Returns None if unknown.
        """
        key = "".join(token.split()).upper()
        return _COMPACT_LOOKUP.get(key)

    @property
    def is_continuous_family(self) -> bool:
        """True for the "always on" types (fixed / directional)."""
        return self in (LightType.FIXED, LightType.DIRECTIONAL, LightType.DIRECTIONAL_FIXED)

    def __str__(self) -> str:
        return self.value


_COMPACT_LOOKUP: dict[str, LightType] = {
    member.value.replace(" ", ""): member for member in LightType
}


@dataclass(frozen=True)
class Descriptor:
    """
    A parsed light characteristic.

    Attributes:
        type: Canonical light type
        group_param: Raw text inside the parentheses ("2+1", "3", "A"), or None
        colors: Ordered color tokens; order drives color-to-group assignment
        period: Cycle length in seconds, or None when the code has none

    Examples:
        Descriptor(LightType.FLASH, "2+1", ("W", "G"), 10.0)  # "Fl(2+1) W G 10s"
        Descriptor(LightType.FIXED, None, ("R",), None)        # "F R"
    """
    type: LightType
    group_param: str | None
    colors: tuple[str, ...]
    period: float | None = None

    def __post_init__(self):
        # Accept any iterable of colors for convenience
        object.__setattr__(self, 'colors', tuple(self.colors))


@dataclass(frozen=True)
class Segment:
    """
    One step of a compiled light sequence.

    Attributes:
        on: True when illuminated
        duration: Length of this step in seconds (always > 0)
        color: Color token ("W", "R", ...) or composite token ("W/R")
        intensity: Brightness while on; 1.0 except the dim fixed
                   background of fixed-and-flashing lights
    """
    on: bool
    duration: float
    color: str
    intensity: float = 1.0

    @property
    def level(self) -> float:
        """Rendered brightness: intensity when on, 0.0 when dark."""
        return self.intensity if self.on else 0.0

    def __repr__(self) -> str:
        state = "on" if self.on else "off"
        return f"Segment({state}, {self.duration:.3f}s, {self.color}, {self.intensity:g})"


def total_duration(sequence: list[Segment]) -> float:
    """Sum of all segment durations in a sequence."""
    return sum(segment.duration for segment in sequence)
