"""Configuration schema and loading."""

from .schema import SimConfig
from .loader import load_config, save_config

__all__ = [
    "SimConfig",
    "load_config",
    "save_config",
]
