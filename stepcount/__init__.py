"""
stepcount - accelerometer step counting

Counts gait cycles in a complete 3-axis accelerometer recording:
- estimate_gravity: Static "down" direction from the whole recording
- project_onto: Reduce 3D samples to vertical acceleration
- RecursiveFilter: Transposed direct form II IIR filter (1-3 Hz bandpass preset)
- rms: Signal level used to set hysteresis thresholds
- StepCounter: Two-state hysteresis counter

Usage:
    from stepcount import load_samples, analyze

    samples = load_samples("walk.csv")
    report = analyze(samples)
    print(report.steps, report.rms, report.gravity)
"""

from .errors import (
    StepCountError,
    DegenerateInputError,
    EmptyInputError,
    InvalidOrderError,
    FilterDesignError,
    RecordingError,
)
from .vector import Vec3, vec_sum, magnitude, scale, dot, normalize
from .gravity import estimate_gravity, project_onto
from .filters import (
    RecursiveFilter,
    make_bandpass_filter,
    bandpass,
    BANDPASS_A,
    BANDPASS_B,
    BANDPASS_INITIAL_STATE,
)
from .metrics import rms, hysteresis_thresholds
from .step_counter import StepCounter, count_steps, STATE_ABOVE_WAITING, STATE_BELOW_WAITING
from .pipeline import StepReport, analyze
from .recording import load_samples

__all__ = [
    # Errors
    'StepCountError',
    'DegenerateInputError',
    'EmptyInputError',
    'InvalidOrderError',
    'FilterDesignError',
    'RecordingError',

    # Vectors
    'Vec3',
    'vec_sum',
    'magnitude',
    'scale',
    'dot',
    'normalize',

    # Gravity
    'estimate_gravity',
    'project_onto',

    # Filtering
    'RecursiveFilter',
    'make_bandpass_filter',
    'bandpass',
    'BANDPASS_A',
    'BANDPASS_B',
    'BANDPASS_INITIAL_STATE',

    # Thresholds
    'rms',
    'hysteresis_thresholds',

    # Counting
    'StepCounter',
    'count_steps',
    'STATE_ABOVE_WAITING',
    'STATE_BELOW_WAITING',

    # Pipeline
    'StepReport',
    'analyze',
    'load_samples',
]

__version__ = '1.0.0'
