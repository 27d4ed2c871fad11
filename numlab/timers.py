"""CPU-time instrumentation timers that accumulate over start/stop sessions."""

from __future__ import annotations

import sys
import time
from typing import Any, Callable, TextIO


class Timer:
    """A named CPU timer that accumulates elapsed time across sessions.

    Misuse (starting a running timer, stopping a stopped one) is reported
    on the timer's stream rather than raised, and the timer carries on.
    """

    def __init__(self, name: str = "timer", stream: TextIO | None = None) -> None:
        self.name = name
        self._stream = stream
        self._start = 0.0
        self._stop = 0.0
        self._elapsed = 0.0
        self._running = False

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stderr

    def start(self) -> None:
        """Start the timer; warn if it was already running."""
        if self._running:
            self.stream.write(f"Error, running timer {self.name} started.\n")
        self._running = True
        self._start = time.process_time()

    def stop(self) -> None:
        """Stop the timer and add the session to the total; warn if stopped."""
        self._stop = time.process_time()
        if not self._running:
            self.stream.write(f"Error, stopped timer {self.name} stopped again.\n")
        else:
            self._elapsed += self._stop - self._start
        self._running = False

    def reset(self) -> None:
        """Clear the accumulated elapsed time."""
        self._elapsed = 0.0

    @property
    def running(self) -> bool:
        return self._running

    @property
    def elapsed(self) -> float:
        """Accumulated CPU seconds over all completed sessions."""
        return self._elapsed

    def _ensure_stopped(self) -> None:
        if self._running:
            self.stop()

    def report(self) -> str:
        """Stop the timer if needed and write the total elapsed time."""
        self._ensure_stopped()
        line = f"Elapsed CPU Time {self.name} = '{self._elapsed:.2f}' seconds\n"
        self.stream.write(line)
        return line

    def report_per_iteration(self, repeats: int) -> str:
        """Stop the timer if needed and write the elapsed time per repetition."""
        self._ensure_stopped()
        per = self._elapsed / repeats
        line = (
            f"Elapsed CPU Time per Iteration ({self.name}, {repeats}) = "
            f"'{per:.6e}' seconds\n"
        )
        self.stream.write(line)
        return line

    def __enter__(self) -> "Timer":
        self.start()
        return self

    def __exit__(self, *args: Any) -> None:
        self.stop()


def repeat(count: int, func: Callable[..., Any], *args: Any) -> Any:
    """Call ``func(*args)`` ``count`` times and return the last result."""
    result = None
    for _ in range(count):
        result = func(*args)
    return result