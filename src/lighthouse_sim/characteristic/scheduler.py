"""
Playback scheduling for compiled light sequences.

Bridges a compiled Sequence with whatever displays it: each step
hands the current Segment to a callback, then schedules the next step
after that segment's duration. Several lights can play at once; each
player owns its own timer and shares nothing with the others.
"""

from __future__ import annotations

import threading
from typing import Callable

from .compiler import SequenceCompiler, compile_code
from .core.types import Segment, total_duration


StepCallback = Callable[[Segment, int], None]
ResetCallback = Callable[[], None]


def sample_at(sequence: list[Segment], t: float) -> tuple[int, Segment]:
    """
    Find the segment active at time t during looped playback.

    Args:
        sequence: Non-empty compiled sequence
        t: Seconds since playback started (wraps every cycle)

    Returns:
        (index, segment) active at that time

    Raises:
        ValueError: If the sequence is empty
    """
    if not sequence:
        raise ValueError("Cannot sample an empty sequence")

    cycle = total_duration(sequence)
    position = t % cycle if cycle > 0 else 0.0

    elapsed = 0.0
    for index, segment in enumerate(sequence):
        elapsed += segment.duration
        if position < elapsed:
            return index, segment

    # Float rounding at the very end of the cycle
    return len(sequence) - 1, sequence[-1]


class SequencePlayer:
    """
    Timer-driven playback loop for one light.

    The loop is cooperative: a step runs the callback, then arms a
    threading.Timer for the segment duration which advances the index
    (modulo the sequence length) and runs the next step. stop() must be
    called when the display goes away, otherwise the loop keeps firing.
    """

    def __init__(
        self,
        sequence: list[Segment],
        on_step: StepCallback,
        on_reset: ResetCallback | None = None,
        name: str = "light",
    ):
        """
        Initialize the player.

        Args:
            sequence: Compiled sequence to loop
            on_step: Called with (segment, index) at the start of each segment
            on_reset: Called when playback stops, to blank the display
            name: Label used in console output
        """
        self.sequence = list(sequence)
        self.on_step = on_step
        self.on_reset = on_reset
        self.name = name

        self._lock = threading.Lock()
        self._timer: threading.Timer | None = None
        self._running = False
        self._index = 0
        # Bumped on every start/stop so stale timers become no-ops
        self._generation = 0

    @property
    def is_running(self) -> bool:
        """Check if playback is active."""
        return self._running

    @property
    def index(self) -> int:
        """Index of the segment currently shown."""
        return self._index

    def start(self) -> None:
        """Start (or restart) playback from the first segment."""
        self.stop()
        if not self.sequence:
            return

        with self._lock:
            self._running = True
            self._index = 0
            self._generation += 1
            generation = self._generation

        print(
            f"[PLAYER] {self.name}: playing {len(self.sequence)} segments "
            f"({total_duration(self.sequence):.2f}s cycle)"
        )
        self._step(generation)

    def stop(self) -> None:
        """Cancel the pending step and reset the display."""
        with self._lock:
            timer = self._timer
            self._timer = None
            was_running = self._running
            self._running = False
            self._generation += 1

        if timer is not None:
            timer.cancel()
        if self.on_reset is not None:
            self.on_reset()
        if was_running:
            print(f"[PLAYER] {self.name}: stopped")

    def _step(self, generation: int) -> None:
        with self._lock:
            if not self._running or generation != self._generation:
                return
            index = self._index
            segment = self.sequence[index]

        try:
            self.on_step(segment, index)
        except Exception:
            self.stop()
            raise

        with self._lock:
            if not self._running or generation != self._generation:
                return
            self._timer = threading.Timer(segment.duration, self._advance, args=(generation,))
            self._timer.daemon = True
            self._timer.start()

    def _advance(self, generation: int) -> None:
        with self._lock:
            if not self._running or generation != self._generation:
                return
            self._index = (self._index + 1) % len(self.sequence)
        self._step(generation)


class PlaybackManager:
    """
    Keeps one player per displayed light.

    Mirrors the popup lifecycle of a map view: start() when a light's
    display opens, stop() when it closes or another light is selected.
    """

    def __init__(self, compiler: SequenceCompiler | None = None):
        self.compiler = compiler
        self._lock = threading.Lock()
        self._players: dict[str, SequencePlayer] = {}

    def start(
        self,
        light_id: str,
        code: str,
        on_step: StepCallback,
        on_reset: ResetCallback | None = None,
    ) -> bool:
        """
        Start playing a light code for a display.

        Returns:
            True if playback started, False if the code did not parse
            (the display is reset instead).
        """
        sequence = compile_code(code, self.compiler)
        if not sequence:
            self.stop(light_id)
            if on_reset is not None:
                on_reset()
            return False

        player = SequencePlayer(sequence, on_step, on_reset, name=light_id)
        # Swap in one step so a concurrent start() cannot orphan a player
        with self._lock:
            replaced = self._players.get(light_id)
            self._players[light_id] = player
        if replaced is not None:
            replaced.stop()

        player.start()

        # Another start() may have replaced this player while it started
        with self._lock:
            current = self._players.get(light_id) is player
        if not current:
            player.stop()
        return True

    def stop(self, light_id: str) -> None:
        """Stop and forget the player for a display, if any."""
        with self._lock:
            player = self._players.pop(light_id, None)
        if player is not None:
            player.stop()

    def stop_all(self) -> None:
        """Stop every running player."""
        with self._lock:
            players = list(self._players.values())
            self._players.clear()
        for player in players:
            player.stop()

    @property
    def active(self) -> list[str]:
        """IDs of displays with a player."""
        with self._lock:
            return list(self._players.keys())
