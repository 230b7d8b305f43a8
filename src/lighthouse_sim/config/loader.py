"""Configuration file loading and saving."""

from pathlib import Path
from typing import Any
import yaml

from .schema import SimConfig


def load_config(config_path: Path) -> SimConfig:
    """Load configuration from YAML file."""
    with open(config_path) as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Config must be a mapping: {config_path}")

    # Color and Morse keys are tokens; YAML may read digits as ints
    colors = {str(k): str(v) for k, v in (data.get("colors") or {}).items()}
    morse = {str(k): str(v) for k, v in (data.get("morse") or {}).items()}

    return SimConfig(
        colors=colors,
        morse=morse,
        fallback_period=float(data.get("fallback_period", SimConfig.fallback_period)),
        continuous_dwell=float(data.get("continuous_dwell", SimConfig.continuous_dwell)),
        default_morse_char=str(data.get("default_morse_char", SimConfig.default_morse_char)),
        catalog=data.get("catalog"),
    )


def save_config(config: SimConfig, config_path: Path) -> None:
    """Save configuration to YAML file."""
    data: dict[str, Any] = {
        "colors": dict(config.colors),
        "morse": dict(config.morse),
        "fallback_period": config.fallback_period,
        "continuous_dwell": config.continuous_dwell,
        "default_morse_char": config.default_morse_char,
    }

    if config.catalog:
        data["catalog"] = config.catalog

    with open(config_path, "w") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)
