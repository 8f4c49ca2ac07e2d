"""
Millisecond clocks used by the engine.
"""

import time


class SystemClock:
    """Monotonic wall clock in milliseconds."""

    def __call__(self) -> float:
        return time.monotonic() * 1000


class SimulatedClock:
    """
    Manually advanced clock.

    Used by tests and by the fast headless runner, where ticks are issued
    back-to-back and time moves by one tick interval per step.
    """

    def __init__(self, start: float = 0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> float:
        if ms < 0:
            raise ValueError(f"Cannot move a clock backwards by {ms}ms")
        self.now += ms
        return self.now
