"""Protocol definitions for interpolation laws."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class InterpolationLaw(Protocol):
    """A pure mapping from a step position to a value between two endpoints.

    Example:
        >>> def halfway(step, steps, val1, val2):
        ...     return (val1 + val2) / 2
        >>> isinstance(halfway, InterpolationLaw)
        True
    """

    def __call__(self, step: float, steps: float, val1: float, val2: float) -> float:
        """Interpolate between two values.

        Args:
            step: Current step (0 <= step <= steps).
            steps: Total number of steps (> 0).
            val1: Value at step 0.
            val2: Value at step ``steps``.

        Returns:
            Value between val1 and val2.
        """
        ...
