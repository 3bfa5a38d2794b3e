"""
CorrelatedPair: two index-aligned samples with joint statistics.

The pair owns both axes. Points are only ever added, replaced or
reordered as (x, y) pairs, so the two axes always have the same length
and position i of x belongs with position i of y. Per-axis statistics are
available through read-only views; the axis samples cache their own
statistics and the pair caches the joint ones.
"""

from __future__ import annotations

import warnings
from typing import Any, Callable
import numpy as np
from numpy.typing import ArrayLike, NDArray

from samplestats.core.exceptions import DegenerateRegressionError
from samplestats.core.validation import check_scalar, check_values
from samplestats.descriptive.sample import Sample, SampleView
from samplestats.bivariate.solution import LineFit


class CorrelatedPair:
    """
    Bivariate sample of (x, y) points.

    Construction truncates both sequences to the shorter one. If either
    sequence is None the pair starts empty.

    Joint statistics (covariance, correlation, line_of_best_fit) are
    memoized, each sample/population flavour in its own slot, and all of
    them are discarded on any mutation of the pair.

    Examples:
        >>> pair = CorrelatedPair([1, 2, 3], [2, 4, 6])
        >>> pair.covariance
        2.0
        >>> pair.line_of_best_fit
        LineFit(slope=2.0, intercept=0.0)
    """

    def __init__(self, x: ArrayLike | None = None, y: ArrayLike | None = None):
        self._x = Sample()
        self._y = Sample()
        self._cache: dict[str, Any] = {}
        self.concat(x, y)

    # --- Mutation (always pair-wise) ---

    def add_point(self, x: float | None, y: float | None) -> None:
        """Append one point. Ignored if either coordinate is None."""
        if x is None or y is None:
            return
        x_value = check_scalar(x, "x")
        y_value = check_scalar(y, "y")
        self._x.append(x_value)
        self._y.append(y_value)
        self._invalidate()

    def concat(self, x: ArrayLike | None, y: ArrayLike | None) -> None:
        """
        Append points from two coordinate sequences.

        Extra values of the longer sequence are dropped. Ignored if either
        sequence is None.
        """
        if x is None or y is None:
            return
        x_values = check_values(x, "x")
        y_values = check_values(y, "y")
        width = min(len(x_values), len(y_values))
        if width == 0:
            return
        self._x.concat(x_values[:width])
        self._y.concat(y_values[:width])
        self._invalidate()

    def set_point(self, index: int, x: float | None, y: float | None) -> None:
        """Replace both coordinates of a point; out-of-range index is a no-op."""
        if not self._in_range(index) or x is None or y is None:
            return
        x_value = check_scalar(x, "x")
        y_value = check_scalar(y, "y")
        self._x.set_at(index, x_value)
        self._y.set_at(index, y_value)
        self._invalidate()

    def set_x_at(self, index: int, x: float | None) -> None:
        """Replace the x coordinate of a point; out-of-range index is a no-op."""
        if not self._in_range(index) or x is None:
            return
        self._x.set_at(index, x)
        self._invalidate()

    def set_y_at(self, index: int, y: float | None) -> None:
        """Replace the y coordinate of a point; out-of-range index is a no-op."""
        if not self._in_range(index) or y is None:
            return
        self._y.set_at(index, y)
        self._invalidate()

    def sort(self, by_y: bool = False) -> None:
        """
        Order the points ascending by x (or by y when by_y is set).

        One stable permutation is computed on the key axis and applied to
        both axes, so no point is ever split. Ties keep their insertion
        order.
        """
        key = self._y if by_y else self._x
        order = np.argsort(key.data, kind='stable').tolist()
        self._x._reorder(order, ascending=not by_y)
        self._y._reorder(order, ascending=by_y)
        self._invalidate()

    def _invalidate(self) -> None:
        self._cache.clear()

    # --- Access ---

    def _in_range(self, index: int) -> bool:
        return 0 <= index < len(self._x)

    def get_x_at(self, index: int) -> float | None:
        return self._x.get_at(index)

    def get_y_at(self, index: int) -> float | None:
        return self._y.get_at(index)

    def get_data_at(self, index: int) -> tuple[float, float] | None:
        """The (x, y) point at index, or None when out of range."""
        if not self._in_range(index):
            return None
        return (self._x.get_at(index), self._y.get_at(index))

    @property
    def x(self) -> SampleView:
        """Read-only statistics of the x axis."""
        return self._x.view()

    @property
    def y(self) -> SampleView:
        """Read-only statistics of the y axis."""
        return self._y.view()

    @property
    def data(self) -> NDArray[np.floating[Any]]:
        """Independent copy of the points, shape (n, 2)."""
        return np.column_stack([self._x.data, self._y.data])

    @property
    def n(self) -> int:
        return len(self._x)

    def __len__(self) -> int:
        return len(self._x)

    def __repr__(self) -> str:
        return f"CorrelatedPair(n={len(self._x)})"

    # --- Memoized joint statistics ---

    def _cached(self, key: str, compute: Callable[[], Any]) -> Any:
        if key not in self._cache:
            self._cache[key] = compute()
        return self._cache[key]

    def _deviations(self) -> tuple[NDArray, NDArray] | None:
        return self._cached('deviations', self._compute_deviations)

    def _compute_deviations(self) -> tuple[NDArray, NDArray] | None:
        if len(self._x) == 0:
            return None
        dx = self._x.data - self._x.mean
        dy = self._y.data - self._y.mean
        return dx, dy

    def _co_deviation_sum(self) -> float | None:
        return self._cached('co_deviation_sum', self._compute_co_deviation_sum)

    def _compute_co_deviation_sum(self) -> float | None:
        deviations = self._deviations()
        if deviations is None:
            return None
        dx, dy = deviations
        return float(np.dot(dx, dy))

    @property
    def covariance(self) -> float | None:
        """Sample covariance, sum((x - x̄)(y - ȳ)) / (n - 1); None when n < 2."""
        return self._cached('covariance', self._compute_covariance)

    def _compute_covariance(self) -> float | None:
        n = len(self._x)
        if n < 2:
            return None
        return self._co_deviation_sum() / (n - 1)

    @property
    def covariance_population(self) -> float | None:
        """Population covariance, sum((x - x̄)(y - ȳ)) / n; None when empty."""
        return self._cached('covariance_population', self._compute_covariance_population)

    def _compute_covariance_population(self) -> float | None:
        n = len(self._x)
        if n == 0:
            return None
        return self._co_deviation_sum() / n


    @property
    def correlation(self) -> float | None:
        """
        Pearson correlation from the sample covariance and the sample
        standard deviations of both axes.

        None when it is undefined (fewer than two points, or a constant
        axis).
        """
        return self._correlation(population=False, stacklevel=2)

    @property
    def correlation_population(self) -> float | None:
        """
        Pearson correlation from the population covariance and the
        population standard deviations of both axes.
        """
        return self._correlation(population=True, stacklevel=2)

    def _correlation(self, population: bool, stacklevel: int = 1) -> float | None:
        """
        Memoized correlation of either flavour.

        stacklevel counts frames above the caller of this method, as in
        warnings.warn, and decides where the zero-variance warning points.
        """
        key = 'correlation_population' if population else 'correlation'
        return self._cached(
            key, lambda: self._compute_correlation(population, stacklevel + 4)
        )

    def _compute_correlation(self, population: bool, stacklevel: int) -> float | None:
        if population:
            covariance = self.covariance_population
            sd_x = self._x.standard_deviation_population
            sd_y = self._y.standard_deviation_population
        else:
            covariance = self.covariance
            sd_x = self._x.standard_deviation
            sd_y = self._y.standard_deviation
        if covariance is None or sd_x is None or sd_y is None:
            return None
        for axis, sample, sd in (('x', self._x, sd_x), ('y', self._y, sd_y)):
            # mean = sum / n rounds, so a constant axis can report a tiny sd
            if sample.min == sample.max or sd == 0:
                warnings.warn(
                    f"{axis} has zero variance; correlation is undefined",
                    RuntimeWarning,
                    stacklevel=stacklevel,
                )
                return None
        return covariance / (sd_x * sd_y)

    @property
    def line_of_best_fit(self) -> LineFit:
        """
        Ordinary least-squares regression of y on x.

        slope = sum((x - x̄)(y - ȳ)) / sum((x - x̄)**2)
        intercept = ȳ - slope * x̄

        Raises:
            DegenerateRegressionError: If every x is equal (or the pair is
                empty), so the slope is undefined.
        """
        return self._cached('line_of_best_fit', self._compute_line_of_best_fit)

    def _compute_line_of_best_fit(self) -> LineFit:
        n = len(self._x)
        deviations = self._deviations()
        sum_squares_x = 0.0 if deviations is None else float(np.dot(deviations[0], deviations[0]))
        if n == 0 or self._x.min == self._x.max or sum_squares_x == 0:
            raise DegenerateRegressionError(
                f"line of best fit is undefined: x has no spread "
                f"(n={n}, sum of squared x deviations={sum_squares_x})",
                n=n,
                sum_squares_x=sum_squares_x,
            )
        slope = self._co_deviation_sum() / sum_squares_x
        intercept = self._y.mean - slope * self._x.mean
        return LineFit(slope=slope, intercept=intercept)
