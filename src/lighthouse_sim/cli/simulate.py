"""Simulate a light characteristic in the terminal.

Prints the parsed descriptor and compiled timeline for a chart code,
optionally playing it back as a colored bar.

Usage:
    lighthouse-sim "Fl(2+1) W G 10s"
    lighthouse-sim "Mo(U) W 15s" --play 30
    lighthouse-sim --catalog lights.yaml
"""

import argparse
import colorsys
import json
import time
from pathlib import Path

import yaml

from ..catalog import load_catalog
from ..characteristic import (
    SequenceCompiler,
    SequencePlayer,
    Segment,
    color_to_hsv,
    dim,
    parse_light_code,
    resolve_color,
    total_duration,
)
from ..config import SimConfig, load_config


BAR_WIDTH = 20


def ansi_bar(segment: Segment, color_map: dict[str, str]) -> str:
    """Render a segment as a truecolor ANSI block."""
    if not segment.on:
        return "\x1b[48;2;0;0;0m" + " " * BAR_WIDTH + "\x1b[0m"

    try:
        hsv = color_to_hsv(resolve_color(segment.color, color_map))
    except ValueError:
        hsv = color_to_hsv("white")
    hsv = dim(hsv, segment.level)
    r, g, b = colorsys.hsv_to_rgb(hsv.hue, hsv.saturation, hsv.value)
    return f"\x1b[48;2;{int(r * 255)};{int(g * 255)};{int(b * 255)}m" + " " * BAR_WIDTH + "\x1b[0m"


def print_timeline(code: str, compiler: SequenceCompiler, as_json: bool = False) -> int:
    """Print descriptor and segments for one code. Returns exit status."""
    descriptor = parse_light_code(code)
    if descriptor is None:
        print(f"Error: could not parse light characteristic: {code!r}")
        return 1

    sequence = compiler.compile(descriptor)

    if as_json:
        print(json.dumps({
            "type": descriptor.type.value,
            "group_param": descriptor.group_param,
            "colors": list(descriptor.colors),
            "period": descriptor.period,
            "segments": [
                {
                    "on": s.on,
                    "duration": s.duration,
                    "color": s.color,
                    "intensity": s.intensity,
                }
                for s in sequence
            ],
        }, indent=2))
        return 0

    period = f"{descriptor.period:g}s" if descriptor.period is not None else "none"
    print(f"Code:   {code}")
    print(f"Type:   {descriptor.type.value}")
    print(f"Group:  {descriptor.group_param or '-'}")
    print(f"Colors: {' '.join(descriptor.colors)}")
    print(f"Period: {period}")
    print()
    print(f"TIMELINE ({len(sequence)} segments, {total_duration(sequence):.3f}s cycle):")
    print("-" * 50)
    for i, s in enumerate(sequence):
        state = "ON " if s.on else "off"
        intensity = f"  x{s.intensity:g}" if s.on and s.intensity != 1.0 else ""
        print(f"  [{i:2d}] {state} {s.duration:8.3f}s  {s.color}{intensity}")
    return 0


def play(code: str, compiler: SequenceCompiler, color_map: dict[str, str], seconds: float) -> int:
    """Play a code in the terminal for a number of seconds."""
    sequence = compiler.compile(parse_light_code(code))
    if not sequence:
        print(f"Error: could not parse light characteristic: {code!r}")
        return 1

    def on_step(segment: Segment, index: int) -> None:
        print(f"{ansi_bar(segment, color_map)} [{index:2d}] {segment.color}", end="\r", flush=True)

    def on_reset() -> None:
        print(" " * (BAR_WIDTH + 12), end="\r", flush=True)

    player = SequencePlayer(sequence, on_step, on_reset, name=code)
    player.start()
    try:
        time.sleep(seconds)
    except KeyboardInterrupt:
        print("\n[PLAYER] Interrupted")
    finally:
        player.stop()
    return 0


def list_catalog(catalog_path: Path, compiler: SequenceCompiler) -> int:
    """List every catalog light with its color and cycle length."""
    lighthouses = load_catalog(catalog_path)
    if not lighthouses:
        print("No lighthouses found in catalog.")
        return 0

    print(f"CATALOG: {catalog_path} ({len(lighthouses)} lights)")
    print("-" * 60)
    for lh in lighthouses:
        sequence = compiler.compile(lh.descriptor)
        cycle = f"{total_duration(sequence):6.2f}s" if sequence else "  (unparsed)"
        range_str = f"{lh.range_meters / 1000:.1f} km" if lh.range_meters else "-"
        print(f"  {lh.name:<24} {lh.code:<20} {lh.color:<6} {cycle}  {range_str}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the lighthouse-sim command."""
    parser = argparse.ArgumentParser(
        description="Compile and play aid-to-navigation light characteristics"
    )
    parser.add_argument(
        "code",
        nargs="?",
        help='Light characteristic, e.g. "Fl(2+1) W G 10s"',
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="YAML config with color/Morse overrides",
    )
    parser.add_argument(
        "--catalog",
        type=Path,
        help="List lights from a catalog YAML instead of a single code",
    )
    parser.add_argument(
        "--play",
        type=float,
        metavar="SECONDS",
        help="Play the timeline in the terminal for SECONDS",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the descriptor and timeline as JSON",
    )

    args = parser.parse_args(argv)

    try:
        config = load_config(args.config) if args.config else SimConfig()
        compiler = SequenceCompiler.from_config(config)

        catalog = args.catalog or (Path(config.catalog) if config.catalog else None)
        if args.code is None:
            if catalog is None:
                parser.error("a light code or --catalog is required")
            return list_catalog(catalog, compiler)

        if args.play:
            return play(args.code, compiler, config.color_map(), args.play)
        return print_timeline(args.code, compiler, as_json=args.json)
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    exit(main())
