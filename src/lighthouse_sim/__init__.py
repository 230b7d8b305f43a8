"""
Lighthouse light characteristic simulator.

Parses chart light characteristics ("Fl(2) W R 10s") and compiles them
into looping on/off timelines for playback.

Example:
    from lighthouse_sim import parse_light_code, compile_sequence, extract_color

    sequence = compile_sequence(parse_light_code("Iso W 6s"))
    # [Segment(on, 3.000s, W, 1), Segment(off, 3.000s, W, 1)]

    extract_color("Fl W R 5s")  # "W/R"
"""

from .characteristic import (
    LightType,
    Descriptor,
    Segment,
    total_duration,
    parse_light_code,
    parse,
    group_counts,
    SequenceCompiler,
    compile_sequence,
    compile,
    compile_code,
    extract_color,
    resolve_color,
    COLOR_MAP,
    MORSE_CODES,
    SequencePlayer,
    PlaybackManager,
    sample_at,
)
from .catalog import Lighthouse, SectorArc, load_catalog, save_catalog, parse_range_meters
from .config import SimConfig, load_config, save_config

__all__ = [
    # Characteristics
    "LightType",
    "Descriptor",
    "Segment",
    "total_duration",
    "parse_light_code",
    "parse",
    "group_counts",
    "SequenceCompiler",
    "compile_sequence",
    "compile",
    "compile_code",
    "extract_color",
    "resolve_color",
    "COLOR_MAP",
    "MORSE_CODES",
    "SequencePlayer",
    "PlaybackManager",
    "sample_at",
    # Catalog
    "Lighthouse",
    "SectorArc",
    "load_catalog",
    "save_catalog",
    "parse_range_meters",
    # Config
    "SimConfig",
    "load_config",
    "save_config",
]
