"""
Load accelerometer recordings from delimited text files.

File format:
    header line (skipped)
    x,y,z
    x,y,z
    ...

Only the first three fields of each row are used; anything after them is
ignored.
"""

import sys
from pathlib import Path
from typing import List, Optional

import numpy as np
import pandas as pd

from .config import MAX_SAMPLES, VERBOSE
from .errors import RecordingError
from .vector import Vec3


def load_samples(path, max_samples: Optional[int] = MAX_SAMPLES) -> List[Vec3]:
    """
    Read (x, y, z) samples from a CSV recording.

    Args:
        path: CSV file path
        max_samples: Keep at most this many rows (0 or None = no limit)

    Returns:
        List of (x, y, z) tuples in file order. Empty for a header-only file.

    Raises:
        RecordingError: if the file is missing, has fewer than three
                        columns, or contains non-numeric values
    """
    path = Path(path)
    if not path.is_file():
        raise RecordingError(f"recording not found: {path}")

    nrows = max_samples if max_samples else None

    try:
        df = pd.read_csv(
            path,
            header=None,
            skiprows=1,
            usecols=[0, 1, 2],
            nrows=nrows,
            dtype=float,
        )
    except pd.errors.EmptyDataError:
        return []
    except ValueError as e:
        raise RecordingError(f"cannot parse {path.name}: {e}") from e

    data = df.to_numpy(dtype=float)
    if not np.isfinite(data).all():
        bad_row = int(np.argmin(np.isfinite(data).all(axis=1)))
        raise RecordingError(
            f"non-numeric or missing value in {path.name}, data row {bad_row + 1}"
        )

    if VERBOSE:
        print(f"[Recording] Loaded {len(data)} samples from {path.name}", file=sys.stderr)

    return [(x, y, z) for x, y, z in data.tolist()]
