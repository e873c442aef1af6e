"""
End-to-end step counting.

raw samples -> gravity direction -> vertical projection -> bandpass
-> RMS thresholds -> hysteresis counter.

Every call builds its own filter and counter, so independent recordings
never share state.
"""

import sys
from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence

from .config import SAMPLE_RATE_HZ, THRESHOLD_RATIO, VERBOSE
from .filters import make_bandpass_filter
from .gravity import estimate_gravity, project_onto
from .metrics import hysteresis_thresholds, rms
from .step_counter import StepCounter
from .vector import Vec3


@dataclass
class StepReport:
    """Result of analyzing one recording."""
    n_samples: int
    gravity: Vec3
    rms: float
    threshold: float     # hi; lo is -threshold
    steps: int
    step_indices: List[int] = field(default_factory=list)
    filtered: List[float] = field(default_factory=list, repr=False)
    sample_rate_hz: float = SAMPLE_RATE_HZ

    @property
    def duration_sec(self) -> float:
        if self.sample_rate_hz <= 0:
            return 0.0
        return self.n_samples / self.sample_rate_hz

    @property
    def cadence_spm(self) -> float:
        """Steps per minute over the whole recording."""
        if self.duration_sec <= 0:
            return 0.0
        return self.steps * 60.0 / self.duration_sec

    def to_dict(self, include_filtered: bool = False) -> Dict[str, Any]:
        d = {
            "n_samples": self.n_samples,
            "gravity": list(self.gravity),
            "rms": self.rms,
            "threshold": self.threshold,
            "steps": self.steps,
            "step_indices": list(self.step_indices),
            "duration_sec": round(self.duration_sec, 3),
            "cadence_spm": round(self.cadence_spm, 2),
        }
        if include_filtered:
            d["filtered"] = list(self.filtered)
        return d


def analyze(
    samples: Sequence[Vec3],
    threshold_ratio: float = THRESHOLD_RATIO,
    sample_rate_hz: float = SAMPLE_RATE_HZ
) -> StepReport:
    """
    Count steps in a complete recording.

    Args:
        samples: (x, y, z) accelerometer readings in time order
        threshold_ratio: Hysteresis level as a fraction of the filtered RMS
        sample_rate_hz: Only used for duration/cadence reporting; the
                        filter itself is fixed for 20 Hz data

    Returns:
        StepReport with gravity vector, RMS, thresholds and step count

    Raises:
        DegenerateInputError: if no gravity direction can be found
    """
    gravity = estimate_gravity(samples)
    vertical = project_onto(samples, gravity)

    filtered = make_bandpass_filter().apply(vertical)

    rms_val = rms(filtered)
    hi, lo = hysteresis_thresholds(rms_val, threshold_ratio)

    counter = StepCounter(hi, lo)
    for v in filtered:
        counter.update(v)

    if VERBOSE:
        print(
            f"[Pipeline] n={len(samples)} rms={rms_val:.6f} "
            f"hi={hi:.6f} steps={counter.steps}",
            file=sys.stderr,
        )

    return StepReport(
        n_samples=len(samples),
        gravity=gravity,
        rms=rms_val,
        threshold=hi,
        steps=counter.steps,
        step_indices=counter.step_indices,
        filtered=filtered,
        sample_rate_hz=sample_rate_hz,
    )
