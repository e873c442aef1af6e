"""
Error types for stepcount.

Every condition here is deterministic and input-dependent, so callers
either check ahead of time or inspect the error kind. Nothing is retried.
"""


class StepCountError(ValueError):
    """Base class for all stepcount failures."""


class DegenerateInputError(StepCountError):
    """Samples sum to a zero-magnitude vector (no usable gravity direction)."""


class EmptyInputError(StepCountError):
    """An operation that needs at least one value got an empty sequence."""


class InvalidOrderError(StepCountError):
    """Filter constructed with a negative order (empty coefficient table)."""


class FilterDesignError(StepCountError):
    """Coefficient tables or initial state do not fit together."""


class RecordingError(StepCountError):
    """A recording file is missing or cannot be parsed."""
