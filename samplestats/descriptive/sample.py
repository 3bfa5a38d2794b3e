"""
Sample: mutable univariate data container with memoized statistics.

Statistics are computed on first read and cached until the next mutation.
The cache is a single dict: a key that is present holds the value valid
for the current data (possibly None, meaning "undefined for this data");
a key that is absent has not been computed since the last mutation.
Every mutation clears the whole dict, because several statistics derive
from others (standard deviation from variance, mean from sum) and
per-field invalidation would have to track those dependencies.
"""

from __future__ import annotations

import math
from typing import Any, Callable, Iterator, Sequence
import numpy as np
from numpy.typing import ArrayLike, NDArray

from samplestats.core.validation import check_values, check_scalar


class Sample:
    """
    Ordered, mutable collection of real numbers.

    Construction:
        Sample()                 empty
        Sample([2, 4, 4, 5])     from an initial sequence (copied)

    Statistics that are undefined for the current data return None:
    sum/mean/median/min/max of an empty sample, and the sample
    variance/standard deviation of fewer than two values.

    Examples:
        >>> s = Sample([2, 4, 4, 4, 5, 5, 7, 9])
        >>> s.mean
        5.0
        >>> s.variance_population
        4.0
    """

    def __init__(self, data: ArrayLike | None = None):
        self._values: list[float] = [] if data is None else check_values(data, "data")
        self._cache: dict[str, Any] = {}

    # --- Mutation ---

    def append(self, value: float | None) -> None:
        """Add one value. None is ignored."""
        if value is None:
            return
        self._values.append(check_scalar(value, "value"))
        self._invalidate()

    def concat(self, values: ArrayLike | None) -> None:
        """Add every value of a sequence, in order. None is ignored."""
        if values is None:
            return
        self._values.extend(check_values(values, "values"))
        self._invalidate()

    def set_at(self, index: int, value: float | None) -> None:
        """
        Replace the value at index.

        Out-of-range indices (including negative ones) and None values
        leave the sample untouched.
        """
        if not self._in_range(index) or value is None:
            return
        self._values[index] = check_scalar(value, "value")
        self._invalidate()

    def sort(self) -> None:
        """Sort the values ascending, in place."""
        self._values.sort()
        self._invalidate()
        self._cache['is_sorted'] = True

    def _reorder(self, order: Sequence[int], *, ascending: bool = False) -> None:
        """
        Apply a permutation of positions in place.

        Used by the paired and multi-dimensional containers to move every
        axis identically. Set ascending when the permutation is known to
        sort this sample.
        """
        self._values = [self._values[i] for i in order]
        self._invalidate()
        if ascending:
            self._cache['is_sorted'] = True

    def _invalidate(self) -> None:
        self._cache.clear()

    # --- Access ---

    def get_at(self, index: int) -> float | None:
        """Value at index, or None when the index is out of range."""
        if not self._in_range(index):
            return None
        return self._values[index]

    def _in_range(self, index: int) -> bool:
        return 0 <= index < len(self._values)

    @property
    def data(self) -> NDArray[np.floating[Any]]:
        """Independent copy of the values as a float64 array."""
        return np.array(self._values, dtype=np.float64)

    @property
    def n(self) -> int:
        """Number of values."""
        return len(self._values)

    def view(self) -> SampleView:
        """Read-only façade over this sample."""
        return SampleView(self)

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[float]:
        return iter(list(self._values))

    def __repr__(self) -> str:
        return f"Sample(n={len(self._values)})"

    # --- Memoized statistics ---

    def _cached(self, key: str, compute: Callable[[], Any]) -> Any:
        if key not in self._cache:
            self._cache[key] = compute()
        return self._cache[key]

    def _array(self) -> NDArray[np.floating[Any]]:
        return self._cached('array', self._compute_array)

    def _compute_array(self) -> NDArray[np.floating[Any]]:
        return np.asarray(self._values, dtype=np.float64)

    @property
    def is_sorted(self) -> bool:
        """Whether the values are in non-decreasing order."""
        return self._cached('is_sorted', self._compute_is_sorted)

    def _compute_is_sorted(self) -> bool:
        values = self._values
        return all(values[i] <= values[i + 1] for i in range(len(values) - 1))

    @property
    def sum(self) -> float | None:
        """Total of the values; None when empty."""
        return self._cached('sum', self._compute_sum)

    def _compute_sum(self) -> float | None:
        if not self._values:
            return None
        return float(np.sum(self._array()))

    @property
    def mean(self) -> float | None:
        """Arithmetic mean (sum / n); None when empty."""
        return self._cached('mean', self._compute_mean)

    def _compute_mean(self) -> float | None:
        total = self.sum
        if total is None:
            return None
        return total / len(self._values)

    @property
    def median(self) -> float | None:
        """
        Middle value, or the average of the two central values.

        When the data is not known to be sorted the median is taken from
        a sorted copy; the sample's own order is left as the caller set it.
        """
        return self._cached('median', self._compute_median)

    def _compute_median(self) -> float | None:
        n = len(self._values)
        if n == 0:
            return None
        ordered = self._values if self.is_sorted else sorted(self._values)
        mid = n // 2
        if n % 2 == 1:
            return ordered[mid]
        return (ordered[mid - 1] + ordered[mid]) / 2

    def _sum_squares(self) -> float | None:
        return self._cached('sum_squares', self._compute_sum_squares)

    def _compute_sum_squares(self) -> float | None:
        mean = self.mean
        if mean is None:
            return None
        deviations = self._array() - mean
        return float(np.sum(deviations * deviations))

    @property
    def variance(self) -> float | None:
        """Sample variance, sum((v - mean)**2) / (n - 1); None when n < 2."""
        return self._cached('variance', self._compute_variance)

    def _compute_variance(self) -> float | None:
        n = len(self._values)
        if n < 2:
            return None
        return self._sum_squares() / (n - 1)

    @property
    def standard_deviation(self) -> float | None:
        """Square root of the sample variance; None when n < 2."""
        return self._cached('standard_deviation', self._compute_standard_deviation)

    def _compute_standard_deviation(self) -> float | None:
        variance = self.variance
        return None if variance is None else math.sqrt(variance)

    @property
    def variance_population(self) -> float | None:
        """Population variance, sum((v - mean)**2) / n; None when empty."""
        return self._cached('variance_population', self._compute_variance_population)

    def _compute_variance_population(self) -> float | None:
        n = len(self._values)
        if n == 0:
            return None
        return self._sum_squares() / n

    @property
    def standard_deviation_population(self) -> float | None:
        """Square root of the population variance; None when empty."""
        return self._cached(
            'standard_deviation_population',
            self._compute_standard_deviation_population,
        )

    def _compute_standard_deviation_population(self) -> float | None:
        variance = self.variance_population
        return None if variance is None else math.sqrt(variance)

    @property
    def min(self) -> float | None:
        """Smallest value; None when empty."""
        if 'min' not in self._cache:
            self._compute_min_max()
        return self._cache['min']

    @property
    def max(self) -> float | None:
        """Largest value; None when empty."""
        if 'max' not in self._cache:
            self._compute_min_max()
        return self._cache['max']

    def _compute_min_max(self) -> None:
        # One pass fills both cache slots
        if not self._values:
            self._cache['min'] = None
            self._cache['max'] = None
            return
        low = high = self._values[0]
        for value in self._values[1:]:
            if value < low:
                low = value
            elif value > high:
                high = value
        self._cache['min'] = low
        self._cache['max'] = high


class SampleView:
    """
    Read-only view of a Sample owned by another container.

    CorrelatedPair and MultiSample hand these out for per-axis statistics
    so that no caller can resize one axis independently of the others.
    Reads go straight to the underlying Sample and share its cache.
    """

    __slots__ = ('_sample',)

    def __init__(self, sample: Sample):
        self._sample = sample

    def get_at(self, index: int) -> float | None:
        return self._sample.get_at(index)

    @property
    def data(self) -> NDArray[np.floating[Any]]:
        return self._sample.data

    @property
    def n(self) -> int:
        return self._sample.n

    @property
    def is_sorted(self) -> bool:
        return self._sample.is_sorted

    @property
    def sum(self) -> float | None:
        return self._sample.sum

    @property
    def mean(self) -> float | None:
        return self._sample.mean

    @property
    def median(self) -> float | None:
        return self._sample.median

    @property
    def variance(self) -> float | None:
        return self._sample.variance

    @property
    def standard_deviation(self) -> float | None:
        return self._sample.standard_deviation

    @property
    def variance_population(self) -> float | None:
        return self._sample.variance_population

    @property
    def standard_deviation_population(self) -> float | None:
        return self._sample.standard_deviation_population

    @property
    def min(self) -> float | None:
        return self._sample.min

    @property
    def max(self) -> float | None:
        return self._sample.max

    def __len__(self) -> int:
        return len(self._sample)

    def __iter__(self) -> Iterator[float]:
        return iter(self._sample)

    def __repr__(self) -> str:
        return f"SampleView(n={self._sample.n})"
