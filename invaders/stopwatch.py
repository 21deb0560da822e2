"""Tick-driven countdown timer advanced once per game update."""

from __future__ import annotations

TICKS_PER_SECOND = 60


class Stopwatch:
    """Counts game ticks up to a fixed duration while it is running.

    The stopwatch only advances when ``update`` is called, so it measures
    game time rather than wall-clock time.
    """

    def __init__(self, duration: float, tps: int = TICKS_PER_SECOND) -> None:
        if duration < 0:
            raise ValueError("duration must not be negative")
        if tps <= 0:
            raise ValueError("tps must be positive")
        self.duration = duration
        self.total_ticks = int(round(duration * tps))
        self.ticks = 0
        self._running = False

    def start(self) -> None:
        """Let subsequent updates advance the stopwatch."""
        self._running = True

    def stop(self) -> None:
        """Freeze the stopwatch where it is."""
        self._running = False

    def reset(self) -> None:
        """Rewind the elapsed ticks to zero."""
        self.ticks = 0

    def update(self) -> None:
        """Advance one tick if running and not yet finished."""
        if self._running and self.ticks < self.total_ticks:
            self.ticks += 1

    def is_running(self) -> bool:
        return self._running

    def is_done(self) -> bool:
        return self.ticks >= self.total_ticks

    def __repr__(self) -> str:
        state = "running" if self._running else "stopped"
        return f"Stopwatch({self.ticks}/{self.total_ticks} ticks, {state})"