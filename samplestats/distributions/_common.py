"""
Shared machinery for the random variate generators.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray

from samplestats.core.exceptions import ValidationError
from samplestats.descriptive.sample import Sample

SeedLike = int | np.random.Generator | None


class VariateGenerator:
    """
    Base for generators driven by a numpy Generator.

    Subclasses implement draw(); batch helpers are built on repeated
    draw() calls so any per-draw state (such as a cached Box-Muller
    partner) is honoured.
    """

    def __init__(self, seed: SeedLike = None):
        self._rng = np.random.default_rng(seed)

    def draw(self) -> float:
        raise NotImplementedError

    def _uniform(self) -> float:
        """Uniform variate on (0, 1], safe to pass to log()."""
        return 1.0 - self._rng.random()

    def draws(self, count: int) -> NDArray[np.floating[Any]]:
        """Array of `count` successive draws."""
        if count < 0:
            raise ValidationError(f"count: must be non-negative, got {count}")
        return np.array([self.draw() for _ in range(count)], dtype=np.float64)

    def to_sample(self, count: int) -> Sample:
        """Sample filled with `count` successive draws."""
        return Sample(self.draws(count))
