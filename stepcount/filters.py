"""
Recursive (IIR) filtering for stepcount.

Implements a linear filter in transposed direct form II, plus the fixed
4th-order Butterworth bandpass (1-3 Hz at 20 Hz) used to isolate gait
energy from the vertical acceleration signal.
"""

from typing import List, Optional, Sequence, Tuple

from .errors import EmptyInputError, FilterDesignError, InvalidOrderError

# =============================================================================
# Bandpass coefficients (4th-order Butterworth, 1-3 Hz, fs = 20 Hz)
# =============================================================================

BANDPASS_B = (
    0.00482434, 0.0, -0.01929737, 0.0, 0.02894606,
    0.0, -0.01929737, 0.0, 0.00482434,
)
BANDPASS_A = (
    1.0, -5.41823139, 13.5293587, -20.31926512, 20.07119886,
    -13.34437166, 5.83210677, -1.53473005, 0.18737949,
)

# Steady state for a constant unit input (1 g at rest). Only valid for the
# coefficients above; recompute it if they ever change.
BANDPASS_INITIAL_STATE = (
    -0.00482434, -0.00482434, 0.01447303, 0.01447303,
    -0.01447303, -0.01447303, 0.00482434, 0.00482434,
)


class RecursiveFilter:
    """
    Causal linear filter, transposed direct form II.

    Order K = len(b) - 1, with K state variables. Each call to step()
    consumes one input sample and advances the state.

    Usage:
        f = RecursiveFilter(b, a, initial_state=zi)
        y = f.step(x)
        ys = f.apply(xs)

    One instance belongs to one run. Call reset() (or build a new filter)
    before filtering an unrelated recording.
    """

    def __init__(
        self,
        b: Sequence[float],
        a: Sequence[float],
        initial_state: Optional[Sequence[float]] = None
    ):
        """
        Initialize filter.

        Args:
            b: Feed-forward coefficients b[0..K]
            a: Feedback coefficients a[0..K]. Both tables are divided by a[0]
               when it is not 1.
            initial_state: K starting state values (default: zeros)

        Raises:
            InvalidOrderError: if b is empty (negative order)
            FilterDesignError: if a, b or the state have mismatched lengths,
                               or a[0] is zero
        """
        order = len(b) - 1
        if order < 0:
            raise InvalidOrderError("filter needs at least one feed-forward coefficient")
        if len(a) != len(b):
            raise FilterDesignError(
                f"coefficient tables differ in length: len(b)={len(b)}, len(a)={len(a)}"
            )
        if a[0] == 0.0:
            raise FilterDesignError("a[0] must be nonzero")

        a0 = float(a[0])
        if a0 != 1.0:
            b = [bi / a0 for bi in b]
            a = [ai / a0 for ai in a]

        self.b: Tuple[float, ...] = tuple(float(v) for v in b)
        self.a: Tuple[float, ...] = tuple(float(v) for v in a)
        self._order = order

        if initial_state is None:
            initial_state = [0.0] * order
        if len(initial_state) != order:
            raise FilterDesignError(
                f"initial state has {len(initial_state)} values, order is {order}"
            )
        self._initial_state = tuple(float(v) for v in initial_state)
        self.z: List[float] = list(self._initial_state)

    @property
    def order(self) -> int:
        return self._order

    def step(self, x: float) -> float:
        """
        Filter one sample.

        Args:
            x: Input sample

        Returns:
            Output sample
        """
        b, a, z = self.b, self.a, self.z
        k = self._order
        if k == 0:
            return b[0] * x

        y = b[0] * x + z[0]
        # Ascending order: z[i] is read here before it is overwritten below.
        for i in range(1, k):
            z[i-1] = b[i] * x + z[i] - a[i] * y
        z[k-1] = b[k] * x - a[k] * y
        return y

    def apply(self, values: Sequence[float]) -> List[float]:
        """
        Filter a whole sequence, carrying state from sample to sample.

        Raises:
            EmptyInputError: if values is empty
        """
        if len(values) == 0:
            raise EmptyInputError("cannot filter an empty sequence")
        return [self.step(x) for x in values]

    def reset(self, state: Optional[Sequence[float]] = None):
        """Restore the initial state, or load a caller-supplied one."""
        if state is None:
            state = self._initial_state
        if len(state) != self._order:
            raise FilterDesignError(
                f"state has {len(state)} values, order is {self._order}"
            )
        self.z = [float(v) for v in state]

    def get_state(self) -> Tuple[float, ...]:
        """Return a snapshot of the internal state."""
        return tuple(self.z)


def make_bandpass_filter() -> RecursiveFilter:
    """New gait bandpass filter, pre-warmed for a 1 g resting input."""
    return RecursiveFilter(BANDPASS_B, BANDPASS_A, initial_state=BANDPASS_INITIAL_STATE)


def bandpass(values: Sequence[float]) -> List[float]:
    """Bandpass a complete series with a fresh filter."""
    return make_bandpass_filter().apply(values)


if __name__ == "__main__":
    import math

    print("Testing bandpass filter:")

    fs = 20.0
    for freq in (0.2, 2.0, 6.0):
        xs = [1.0 + 0.5 * math.sin(2 * math.pi * freq * i / fs) for i in range(400)]
        ys = bandpass(xs)
        # Skip the startup transient
        tail = ys[200:]
        amp = max(abs(v) for v in tail)
        print(f"   {freq:4.1f} Hz: in amp 0.500 -> out amp {amp:.3f}")
