"""
Bivariate solution types.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator
import numpy as np
from numpy.typing import ArrayLike, NDArray


@dataclass(frozen=True)
class LineFit:
    """
    Ordinary least-squares line y = slope * x + intercept.

    Unpacks as a pair, matching the [slope, intercept] shape callers of
    line_of_best_fit() commonly expect:

        >>> slope, intercept = LineFit(slope=2.0, intercept=0.0)
    """
    slope: float
    intercept: float

    def predict(self, x: ArrayLike) -> float | NDArray[np.floating[Any]]:
        """Evaluate the line at x (scalar or array)."""
        result = self.slope * np.asarray(x, dtype=np.float64) + self.intercept
        if result.ndim == 0:
            return float(result)
        return result

    def __iter__(self) -> Iterator[float]:
        yield self.slope
        yield self.intercept
