"""
Gravity estimation for stepcount.

Finds the static "down" direction of a recording and reduces each 3D
accelerometer sample to a single vertical-acceleration value.

The estimate is the normalized sum of every sample in the recording. This
assumes the non-gravitational part of the acceleration averages out to
zero over the whole recording, motion periods included. Nothing is done
to exclude motion segments.
"""

from typing import List, Sequence

from .errors import DegenerateInputError
from .vector import Vec3, dot, magnitude, normalize, vec_sum


def estimate_gravity(samples: Sequence[Vec3]) -> Vec3:
    """
    Estimate the gravity direction of a recording.

    Args:
        samples: Accelerometer readings in acquisition order

    Returns:
        Unit vector (gx, gy, gz) pointing along the mean acceleration

    Raises:
        DegenerateInputError: if the samples sum to a zero-magnitude vector
                              (empty recording, all-zero or self-cancelling data)
    """
    total = vec_sum(samples)
    if magnitude(total) == 0.0:
        raise DegenerateInputError(
            f"gravity undefined: {len(samples)} samples sum to the zero vector"
        )
    return normalize(total)


def project_onto(samples: Sequence[Vec3], direction: Vec3) -> List[float]:
    """
    Project each sample onto a direction.

    With a unit gravity vector this yields vertical acceleration in the
    same units as the input. Output has the same length and order.
    """
    return [dot(s, direction) for s in samples]


if __name__ == "__main__":
    print("Testing estimate_gravity:")

    # Sensor lying flat, small wobble on x
    data = [(0.05, 0.0, 1.0), (-0.05, 0.0, 1.0)] * 10
    g = estimate_gravity(data)
    print(f"   Gravity: ({g[0]:.3f}, {g[1]:.3f}, {g[2]:.3f})  expected: (0, 0, 1)")

    vert = project_onto(data, g)
    print(f"   Vertical: {vert[:4]}")
