"""
Hysteresis step counter.

A step is one full excursion of the filtered vertical acceleration: the
signal first rises above hi, then later falls below lo. A high crossing
alone, or a low crossing without a preceding high one, counts nothing.
"""

from typing import List, Sequence

STATE_ABOVE_WAITING = "ABOVE_WAITING"
STATE_BELOW_WAITING = "BELOW_WAITING"


class StepCounter:
    """
    Two-state hysteresis counter.

    Usage:
        counter = StepCounter(hi=0.1, lo=-0.1)
        for v in filtered:
            steps = counter.update(v)

    The caller supplies a consistent pair (hi > 0 > lo).
    """

    def __init__(self, hi: float, lo: float):
        self.hi = hi
        self.lo = lo

        self.state = STATE_ABOVE_WAITING
        self.steps = 0
        self.step_indices: List[int] = []
        self._index = 0

    def update(self, v: float) -> int:
        """Consume one sample and return the running step count."""
        if self.state == STATE_ABOVE_WAITING:
            if v > self.hi:
                self.state = STATE_BELOW_WAITING

        elif self.state == STATE_BELOW_WAITING:
            # completing the excursion counts the step
            if v < self.lo:
                self.state = STATE_ABOVE_WAITING
                self.steps += 1
                self.step_indices.append(self._index)

        self._index += 1
        return self.steps

    def reset(self):
        """Reset all state for a new recording."""
        self.state = STATE_ABOVE_WAITING
        self.steps = 0
        self.step_indices = []
        self._index = 0


def count_steps(values: Sequence[float], hi: float, lo: float) -> int:
    """Count completed hi/lo cycles in a series with a fresh counter."""
    counter = StepCounter(hi, lo)
    for v in values:
        counter.update(v)
    return counter.steps
