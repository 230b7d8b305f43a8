"""
Light characteristic language for lighthouse-sim.

Parses the chart shorthand for aid-to-navigation lights and compiles
it into a looping timeline of on/off segments.

Example:
    from lighthouse_sim.characteristic import parse_light_code, compile_sequence

    descriptor = parse_light_code("Fl(2+1) W G 10s")
    # Descriptor(type=FL, group_param="2+1", colors=("W", "G"), period=10.0)

    sequence = compile_sequence(descriptor)
    # [Segment(on, 0.300s, W, 1), Segment(off, 0.700s, W, 1), ...]

    # Unparseable codes give None / an empty sequence
    parse_light_code("Xyz W")  # None
"""

# Core types
from .core.types import LightType, Descriptor, Segment, total_duration

# Parser
from .dsl.parser import parse_light_code, group_counts, normalize_code

# Compiler
from .compiler import (
    SequenceCompiler,
    CompileContext,
    compile_sequence,
    compile_code,
    CONTINUOUS_DWELL,
    FALLBACK_PERIOD,
)

# Colors
from .color import (
    HSV,
    COLOR_TOKENS,
    COLOR_MAP,
    extract_color,
    resolve_color,
    composite_token,
    color_to_hsv,
    hex_to_hsv,
    hsv_to_hex,
    dim,
)

# Morse table
from .morse import MORSE_CODES, get_morse, register_morse, list_morse

# Playback
from .scheduler import SequencePlayer, PlaybackManager, sample_at

# Short aliases
parse = parse_light_code
compile = compile_sequence

__all__ = [
    # Core types
    "LightType",
    "Descriptor",
    "Segment",
    "total_duration",
    # Parser
    "parse_light_code",
    "parse",
    "group_counts",
    "normalize_code",
    # Compiler
    "SequenceCompiler",
    "CompileContext",
    "compile_sequence",
    "compile",
    "compile_code",
    "CONTINUOUS_DWELL",
    "FALLBACK_PERIOD",
    # Colors
    "HSV",
    "COLOR_TOKENS",
    "COLOR_MAP",
    "extract_color",
    "resolve_color",
    "composite_token",
    "color_to_hsv",
    "hex_to_hsv",
    "hsv_to_hex",
    "dim",
    # Morse
    "MORSE_CODES",
    "get_morse",
    "register_morse",
    "list_morse",
    # Playback
    "SequencePlayer",
    "PlaybackManager",
    "sample_at",
]
