"""
Sequence compiler for light characteristics.

Turns a parsed Descriptor into a finite list of Segments that a
renderer plays back in a loop. Each light type has its own synthesis
rule; the rules encode chart conventions (flash clamps, occulting and
isophase ratios, group gaps, Morse unit timing, alternating colors).

Example:
    from lighthouse_sim.characteristic import parse_light_code, compile_sequence

    sequence = compile_sequence(parse_light_code("Fl(2+1) W G 10s"))
    for segment in sequence:
        print(segment)
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Callable

from .color import composite_token
from .core.types import Descriptor, LightType, Segment
from .dsl.parser import group_counts, parse_light_code
from .morse import MORSE_CODES, get_morse

if TYPE_CHECKING:
    from ..config.schema import SimConfig


# Segments at or below this length are not emitted
EPSILON = 1e-9

# Cycle length used when a type needs one and the code has no period
FALLBACK_PERIOD = 10.0

# Presentation policy: fixed/directional lights with no period never go
# dark, so multi-color ones cycle through their colors at this dwell.
CONTINUOUS_DWELL = 3.0

# Flash pattern weights (1 weight unit ~ 1 second unless scaled down)
FLASH_WEIGHT = 0.3
FLASH_GAP_WEIGHT = 0.7
GROUP_GAP_WEIGHT = 2.0

MAX_FLASH_ON = 0.3
MIN_FLASH_ON = 0.05

LONG_FLASH_FRACTION = 0.8

QUICK_CYCLES: dict[LightType, float] = {
    LightType.QUICK: 1.0,
    LightType.VERY_QUICK: 0.5,
    LightType.ULTRA_QUICK: 0.25,
}
QUICK_ON_FRACTION = 0.6
DEFAULT_ECLIPSE_CYCLES = 4

INTERRUPTED_QUICK_REPEATS = 9
INTERRUPTED_QUICK_CYCLE = 1.0

# Occulting keeps the light on for the minority of each slot
OCCULTING_ON_FRACTION = 0.25

ALTERNATING_GAP_FRACTION = 0.1
ALTERNATING_MAX_GAP = 0.2

FIXED_FLASH_FRACTION = 0.1
FIXED_BACKGROUND_INTENSITY = 0.4

MORSE_DOT_UNITS = 1
MORSE_DASH_UNITS = 3
MORSE_TRAILING_UNITS = 6  # plus the symbol gap = 7-unit character gap
MORSE_MIN_UNIT = 0.05


@dataclass(frozen=True)
class CompileContext:
    """
    Values shared by every synthesis rule for one descriptor.

    Attributes:
        descriptor: The descriptor being compiled
        safe_period: The period, or the fallback when none was given
        is_continuous: True for fixed/directional lights with no period
    """
    descriptor: Descriptor
    safe_period: float
    is_continuous: bool

    @property
    def type(self) -> LightType:
        return self.descriptor.type

    @property
    def param(self) -> str | None:
        return self.descriptor.group_param

    @property
    def colors(self) -> tuple[str, ...]:
        return self.descriptor.colors

    @property
    def period(self) -> float | None:
        # A zero period carries no timing information
        return self.descriptor.period or None

    @property
    def counts(self) -> list[int]:
        return group_counts(self.param)


Handler = Callable[[CompileContext], list[Segment]]


def _emit(
    sequence: list[Segment],
    on: bool,
    duration: float,
    color: str,
    intensity: float = 1.0,
) -> None:
    """Append a segment unless its duration is not positive."""
    if duration > EPSILON:
        sequence.append(Segment(on=on, duration=duration, color=color, intensity=intensity))


class SequenceCompiler:
    """
    Compiles Descriptors into playable Sequences.

    Lookup tables are injected at construction so a compiler can be
    built from configuration and tested without global state.
    """

    def __init__(
        self,
        morse_codes: dict[str, str] | None = None,
        fallback_period: float = FALLBACK_PERIOD,
        continuous_dwell: float = CONTINUOUS_DWELL,
        default_morse_char: str = "A",
    ):
        """
        Initialize the compiler.

        Args:
            morse_codes: Character -> dot/dash table (defaults to the built-in table)
            fallback_period: Cycle length used when a code has no period
            continuous_dwell: Seconds per color for continuous fixed lights
            default_morse_char: Character used by "Mo" codes with no parameter
        """
        self.morse_codes = MORSE_CODES if morse_codes is None else dict(morse_codes)
        self.fallback_period = fallback_period
        self.continuous_dwell = continuous_dwell
        self.default_morse_char = default_morse_char

        self.handlers: dict[LightType, Handler] = {
            LightType.FIXED: self._fixed,
            LightType.DIRECTIONAL: self._fixed,
            LightType.DIRECTIONAL_FIXED: self._fixed,
            LightType.FLASH: self._flash,
            LightType.GROUP_FLASH: self._flash,
            LightType.LONG_FLASH: self._long_flash,
            LightType.QUICK: self._quick,
            LightType.VERY_QUICK: self._quick,
            LightType.ULTRA_QUICK: self._quick,
            LightType.INTERRUPTED_QUICK: self._interrupted_quick,
            LightType.OCCULTING: self._occulting,
            LightType.GROUP_OCCULTING: self._occulting,
            LightType.ISOPHASE: self._isophase,
            LightType.ALTERNATING: self._alternating,
            LightType.ALTERNATING_FLASH: self._alternating,
            LightType.ALTERNATING_OCCULTING: self._alternating,
            LightType.ALTERNATING_ISOPHASE: self._alternating,
            LightType.FIXED_AND_FLASHING: self._fixed_flashing,
            LightType.FLASH_FIXED: self._fixed_flashing,
            LightType.MORSE: self._morse,
        }

    @classmethod
    def from_config(cls, config: "SimConfig") -> "SequenceCompiler":
        """Build a compiler from a SimConfig (Morse overrides merged onto built-ins)."""
        return cls(
            morse_codes={**MORSE_CODES, **config.morse},
            fallback_period=config.fallback_period,
            continuous_dwell=config.continuous_dwell,
            default_morse_char=config.default_morse_char,
        )

    def context(self, descriptor: Descriptor) -> CompileContext:
        """Resolve the shared preliminaries for a descriptor."""
        period = descriptor.period or None
        return CompileContext(
            descriptor=descriptor,
            safe_period=period if period is not None else self.fallback_period,
            is_continuous=descriptor.type.is_continuous_family and period is None,
        )

    def compile(self, descriptor: Descriptor | None) -> list[Segment]:
        """
        Compile a descriptor into a sequence.

        Never fails: types without a synthesis rule fall back to a single
        steady-on segment of the resolved period in the first color.
        A None descriptor (unparseable code) compiles to an empty list.
        """
        if descriptor is None:
            return []

        ctx = self.context(descriptor)
        handler = self.handlers.get(descriptor.type)
        if handler is None:
            return [Segment(on=True, duration=ctx.safe_period, color=ctx.colors[0])]
        return handler(ctx)

    # ========== Synthesis rules ==========

    def _fixed(self, ctx: CompileContext) -> list[Segment]:
        sequence: list[Segment] = []
        if ctx.is_continuous:
            duration = self.continuous_dwell
        else:
            duration = ctx.safe_period / len(ctx.colors)
        for color in ctx.colors:
            _emit(sequence, True, duration, color)
        return sequence

    def _flash(self, ctx: CompileContext) -> list[Segment]:
        counts = ctx.counts
        total_flashes = sum(counts)
        base_color = ctx.colors[0]

        effective_colors = list(ctx.colors)
        if ctx.type is LightType.FLASH and total_flashes == 1 and len(ctx.colors) > 1:
            # One flash showing every color at once
            effective_colors = [composite_token(ctx.colors)]

        # (on, weight, color)
        pattern: list[tuple[bool, float, str]] = []
        for idx, count in enumerate(counts):
            color = effective_colors[idx % len(effective_colors)]
            for i in range(count):
                pattern.append((True, FLASH_WEIGHT, color))
                if i < count - 1:
                    pattern.append((False, FLASH_GAP_WEIGHT, base_color))
            if idx < len(counts) - 1:
                pattern.append((False, GROUP_GAP_WEIGHT, base_color))

        total_weight = sum(weight for _, weight, _ in pattern)
        time_scale = 1.0
        if ctx.period and total_weight > ctx.period:
            time_scale = ctx.period / total_weight

        sequence: list[Segment] = []
        for on, weight, color in pattern:
            _emit(sequence, on, weight * time_scale, color)

        used = total_weight * time_scale
        if ctx.period and ctx.period > used:
            _emit(sequence, False, ctx.period - used, base_color)
        return sequence

    def _long_flash(self, ctx: CompileContext) -> list[Segment]:
        color = ctx.colors[0]
        on_dur = ctx.safe_period * LONG_FLASH_FRACTION
        sequence: list[Segment] = []
        _emit(sequence, True, on_dur, color)
        _emit(sequence, False, ctx.safe_period - on_dur, color)
        return sequence

    def _quick(self, ctx: CompileContext) -> list[Segment]:
        color = ctx.colors[0]
        cycle = QUICK_CYCLES[ctx.type]
        on_dur = min(MAX_FLASH_ON, cycle * QUICK_ON_FRACTION)
        off_dur = cycle - on_dur

        sequence: list[Segment] = []
        if not ctx.param:
            # Caller loops the single cycle
            _emit(sequence, True, on_dur, color)
            _emit(sequence, False, off_dur, color)
            return sequence

        count = ctx.counts[0]
        if ctx.period:
            eclipse = max(0.0, ctx.period - count * cycle)
        else:
            eclipse = cycle * DEFAULT_ECLIPSE_CYCLES

        for _ in range(count):
            _emit(sequence, True, on_dur, color)
            _emit(sequence, False, off_dur, color)
        _emit(sequence, False, eclipse, color)
        return sequence

    def _interrupted_quick(self, ctx: CompileContext) -> list[Segment]:
        color = ctx.colors[0]
        count = ctx.counts[0] if ctx.param else INTERRUPTED_QUICK_REPEATS
        cycle = INTERRUPTED_QUICK_CYCLE
        on_dur = cycle * QUICK_ON_FRACTION
        off_dur = cycle - on_dur

        sequence: list[Segment] = []
        for _ in range(count):
            _emit(sequence, True, on_dur, color)
            _emit(sequence, False, off_dur, color)

        used = count * cycle
        if ctx.period and ctx.period > used:
            eclipse = ctx.period - used
        else:
            eclipse = cycle * DEFAULT_ECLIPSE_CYCLES
        _emit(sequence, False, eclipse, color)
        return sequence

    def _occulting(self, ctx: CompileContext) -> list[Segment]:
        color = ctx.colors[0]
        counts = ctx.counts

        # One reserved gap slot per group
        total_slots = sum(counts) + len(counts)
        slot_dur = ctx.safe_period / total_slots
        on_dur = slot_dur * OCCULTING_ON_FRACTION
        off_dur = slot_dur - on_dur

        sequence: list[Segment] = []
        for idx, count in enumerate(counts):
            for _ in range(count):
                _emit(sequence, True, on_dur, color)
                _emit(sequence, False, off_dur, color)
            if idx < len(counts) - 1 or (len(counts) == 1 and ctx.param):
                _emit(sequence, False, slot_dur, color)

        # Reserved slot of the final group
        used = sum(segment.duration for segment in sequence)
        if ctx.safe_period > used:
            _emit(sequence, False, ctx.safe_period - used, color)
        return sequence

    def _isophase(self, ctx: CompileContext) -> list[Segment]:
        color = ctx.colors[0]
        half = ctx.safe_period / 2
        sequence: list[Segment] = []
        _emit(sequence, True, half, color)
        _emit(sequence, False, ctx.safe_period - half, color)
        return sequence

    def _alternating(self, ctx: CompileContext) -> list[Segment]:
        sub_type = ctx.type.value[len("AL"):].strip() or "ISO"
        counts = ctx.counts

        slots = counts if len(counts) > 1 else [1] * len(ctx.colors)
        slot_dur = ctx.safe_period / len(slots)

        sequence: list[Segment] = []
        for idx, count in enumerate(slots):
            color = ctx.colors[idx % len(ctx.colors)]

            if sub_type == "FL":
                on_dur = min(MAX_FLASH_ON, max(MIN_FLASH_ON, (slot_dur / count) * QUICK_ON_FRACTION))
                gap = FLASH_GAP_WEIGHT
                used = (count - 1) * (on_dur + gap) + on_dur
                if used > slot_dur and count > 1:
                    # Shrink the gaps; the on-time keeps its floor
                    gap = max(0.0, (slot_dur - count * on_dur) / (count - 1))
                    used = (count - 1) * gap + count * on_dur
                for i in range(count):
                    _emit(sequence, True, on_dur, color)
                    if i < count - 1:
                        _emit(sequence, False, gap, color)
                    else:
                        _emit(sequence, False, slot_dur - used, color)

            elif sub_type == "OC":
                cycle = slot_dur / count
                on_dur = cycle * OCCULTING_ON_FRACTION
                for _ in range(count):
                    _emit(sequence, True, on_dur, color)
                    _emit(sequence, False, cycle - on_dur, color)

            else:
                cycle = slot_dur / count
                gap = min(cycle * ALTERNATING_GAP_FRACTION, ALTERNATING_MAX_GAP)
                for _ in range(count):
                    _emit(sequence, True, cycle - gap, color)
                    _emit(sequence, False, gap, color)

        return sequence

    def _fixed_flashing(self, ctx: CompileContext) -> list[Segment]:
        color = ctx.colors[0]
        flash_dur = ctx.safe_period * FIXED_FLASH_FRACTION
        sequence: list[Segment] = []
        _emit(sequence, True, flash_dur, color)
        # Never fully dark: dim fixed background
        _emit(sequence, True, ctx.safe_period - flash_dur, color, FIXED_BACKGROUND_INTENSITY)
        return sequence

    def _morse(self, ctx: CompileContext) -> list[Segment]:
        color = ctx.colors[0]
        char = (ctx.param or "").strip() or self.default_morse_char
        code = get_morse(char, self.morse_codes)

        # (on, units)
        units: list[tuple[bool, int]] = []
        for symbol in code:
            if symbol == ".":
                units.append((True, MORSE_DOT_UNITS))
            elif symbol == "-":
                units.append((True, MORSE_DASH_UNITS))
            else:
                continue
            units.append((False, 1))

        total_units = sum(length for _, length in units) + MORSE_TRAILING_UNITS
        unit_time = max(MORSE_MIN_UNIT, ctx.safe_period / total_units)

        sequence: list[Segment] = []
        for on, length in units:
            _emit(sequence, on, length * unit_time, color)

        used = sum(length for _, length in units) * unit_time
        remainder = ctx.safe_period - used
        if remainder >= MORSE_MIN_UNIT or not sequence:
            _emit(sequence, False, remainder, color)
        elif remainder > EPSILON:
            # Too short to stand alone: stretch the final symbol gap
            last = sequence[-1]
            sequence[-1] = replace(last, duration=last.duration + remainder)
        return sequence


_DEFAULT_COMPILER = SequenceCompiler()


def compile_sequence(descriptor: Descriptor | None) -> list[Segment]:
    """Compile a descriptor with the default compiler."""
    return _DEFAULT_COMPILER.compile(descriptor)


def compile_code(code: str, compiler: SequenceCompiler | None = None) -> list[Segment]:
    """
    Parse and compile a light code in one step.

    Returns an empty list when the code does not parse, which callers
    treat as "no light characteristic" and blank their display.
    """
    return (compiler or _DEFAULT_COMPILER).compile(parse_light_code(code))
