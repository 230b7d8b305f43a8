"""Configuration dataclasses."""

from dataclasses import dataclass, field
from typing import Optional

from ..characteristic.color import COLOR_MAP
from ..characteristic.compiler import CONTINUOUS_DWELL, FALLBACK_PERIOD


@dataclass
class SimConfig:
    """Main simulator configuration."""
    colors: dict[str, str] = field(default_factory=dict)  # Token -> renderable color
    morse: dict[str, str] = field(default_factory=dict)  # Overrides for the Morse table
    fallback_period: float = FALLBACK_PERIOD
    continuous_dwell: float = CONTINUOUS_DWELL
    default_morse_char: str = "A"
    catalog: Optional[str] = None  # Path to a lighthouse catalog YAML

    def color_map(self) -> dict[str, str]:
        """Built-in color map with configured overrides applied."""
        return {**COLOR_MAP, **self.colors}

    @classmethod
    def with_defaults(cls) -> "SimConfig":
        """Create config with the built-in color map spelled out."""
        return cls(colors=dict(COLOR_MAP))
