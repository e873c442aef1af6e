import math

import pytest

SAMPLE_RATE_HZ = 20.0


def walking_samples(n=400, cadence_hz=2.0, amplitude=0.3, direction=(0.0, 0.0, 1.0)):
    """Resting 1 g along `direction` plus a sinusoidal bounce along it."""
    dx, dy, dz = direction
    out = []
    for i in range(n):
        a = 1.0 + amplitude * math.sin(2 * math.pi * cadence_hz * i / SAMPLE_RATE_HZ)
        out.append((dx * a, dy * a, dz * a))
    return out


def write_csv(path, rows, header="x,y,z"):
    lines = [header] + [",".join(str(v) for v in row) for row in rows]
    path.write_text("\n".join(lines) + "\n")
    return path


@pytest.fixture
def walk_csv(tmp_path):
    return write_csv(tmp_path / "walk.csv", walking_samples())
