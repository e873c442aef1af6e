"""
Signal statistics used to pick step-detection thresholds.
"""

import math
from typing import Sequence, Tuple

from .errors import EmptyInputError


def rms(values: Sequence[float]) -> float:
    """
    Root-mean-square of a scalar series.

    Raises:
        EmptyInputError: if values is empty
    """
    n = len(values)
    if n == 0:
        raise EmptyInputError("rms of an empty sequence is undefined")
    ss = 0.0
    for v in values:
        ss += v * v
    return math.sqrt(ss / n)


def hysteresis_thresholds(rms_value: float, ratio: float = 0.5) -> Tuple[float, float]:
    """Symmetric (hi, lo) pair at +/- ratio * rms."""
    hi = rms_value * ratio
    return (hi, -hi)
