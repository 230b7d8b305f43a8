"""Lighthouse catalog records."""

import math
import re
from dataclasses import dataclass, field
from typing import Optional, Union

from ..characteristic.color import extract_color
from ..characteristic.core.types import Descriptor
from ..characteristic.dsl.parser import parse_light_code


NM_TO_METERS = 1852

# Leading number of a range string ("18", "18.5 NM")
_RANGE_RE = re.compile(r"\s*([-+]?(?:\d+(?:\.\d*)?|\.\d+))")


def parse_range_meters(range_nm: Union[float, int, str, None]) -> Optional[float]:
    """
    Convert a nominal range in nautical miles to meters.

    Accepts numbers or strings that start with a number ("18", "18.5 NM").
    Returns None for missing, non-numeric, non-finite or non-positive ranges.
    """
    if range_nm is None or isinstance(range_nm, bool):
        return None
    if isinstance(range_nm, str):
        match = _RANGE_RE.match(range_nm)
        if match is None:
            return None
        value = float(match.group(1))
    else:
        value = float(range_nm)
    if not math.isfinite(value) or value <= 0:
        return None
    return value * NM_TO_METERS


@dataclass
class SectorArc:
    """Visible sector of a light, bearings in degrees."""
    start: float
    end: float
    color: str = "W"


@dataclass
class Lighthouse:
    """A charted light and its characteristic."""
    name: str
    lat: float
    lon: float
    code: str
    range_nm: Optional[Union[float, str]] = None
    arcs: list[SectorArc] = field(default_factory=list)

    @property
    def descriptor(self) -> Optional[Descriptor]:
        """Parsed characteristic, or None if the code does not parse."""
        return parse_light_code(self.code)

    @property
    def color(self) -> str:
        """Representative color token for marker tinting."""
        return extract_color(self.code)

    @property
    def range_meters(self) -> Optional[float]:
        return parse_range_meters(self.range_nm)
