"""
MultiSample: N index-aligned samples, one per dimension.

Generalizes CorrelatedPair to any number of dimensions. A point is the
tuple of values at one position across every dimension; points are
added, replaced and reordered whole, so all dimensions always have the
same length.
"""

from __future__ import annotations

from typing import Any, Iterable, Sequence
import numpy as np
from numpy.typing import ArrayLike, NDArray

from samplestats.core.exceptions import DimensionError
from samplestats.core.validation import check_array, check_scalar, check_values
from samplestats.descriptive.sample import Sample, SampleView


class MultiSample:
    """
    Multi-dimensional sample stored column-wise.

    Construction:
        MultiSample([[1, 2, 3], [4, 5, 6]])   two dimensions, three points

    Columns of unequal length are truncated to the shortest. None gives
    a sample with zero dimensions.

    Per-dimension statistics are delegated to the underlying Sample of
    that dimension and return None when the dimension index is outside
    [0, n_dimensions).
    """

    def __init__(self, columns: Sequence[ArrayLike] | None = None):
        self._dims: list[Sample] = []
        if columns is None:
            return
        values = self._check_columns(columns)
        width = min((len(column) for column in values), default=0)
        self._dims = [Sample(column[:width]) for column in values]

    @staticmethod
    def _check_columns(columns: Sequence[ArrayLike]) -> list[list[float]]:
        if isinstance(columns, np.ndarray) and columns.ndim != 2:
            raise DimensionError(
                f"columns: expected 2D array, got {columns.ndim}D with shape {columns.shape}"
            )
        return [check_values(column, f"columns[{d}]") for d, column in enumerate(columns)]

    # --- Mutation (always point-wise) ---

    def append_point(self, point: Sequence[float] | None) -> None:
        """Append one point. Ignored unless it has exactly n_dimensions values."""
        if point is None or len(point) != len(self._dims):
            return
        values = [check_scalar(v, f"point[{d}]") for d, v in enumerate(point)]
        for sample, value in zip(self._dims, values):
            sample.append(value)

    def concat_points(self, points: Iterable[Sequence[float]] | None) -> None:
        """
        Append several points.

        If any point has the wrong number of values none of them are added.
        """
        if points is None:
            return
        points = list(points)
        if not points:
            return
        if any(point is None or len(point) != len(self._dims) for point in points):
            return
        array = check_array(points, "points").reshape(len(points), len(self._dims))
        for d, sample in enumerate(self._dims):
            sample.concat(array[:, d])

    def concat(self, columns: Sequence[ArrayLike] | None) -> None:
        """
        Append points given column-wise, one sequence per dimension.

        Ignored unless exactly n_dimensions sequences are given; columns of
        unequal length are truncated to the shortest.
        """
        if columns is None or len(columns) != len(self._dims):
            return
        values = self._check_columns(columns)
        width = min((len(column) for column in values), default=0)
        for sample, column in zip(self._dims, values):
            sample.concat(column[:width])

    def set_point(self, index: int, point: Sequence[float] | None) -> None:
        """Replace a whole point; out-of-range index or wrong arity is a no-op."""
        if not self._in_range(index) or point is None or len(point) != len(self._dims):
            return
        values = [check_scalar(v, f"point[{d}]") for d, v in enumerate(point)]
        for sample, value in zip(self._dims, values):
            sample.set_at(index, value)

    def sort_by_dimension(self, dimension: int) -> None:
        """
        Order the points ascending by one dimension.

        The same stable permutation is applied to every dimension. An
        out-of-range dimension leaves the sample untouched.
        """
        if not self._has_dimension(dimension):
            return
        order = np.argsort(self._dims[dimension].data, kind='stable').tolist()
        for d, sample in enumerate(self._dims):
            sample._reorder(order, ascending=(d == dimension))

    # --- Access ---

    def _in_range(self, index: int) -> bool:
        return 0 <= index < len(self)

    def _has_dimension(self, dimension: int) -> bool:
        return 0 <= dimension < len(self._dims)

    def get_point(self, index: int) -> tuple[float, ...] | None:
        """The point at index, or None when out of range."""
        if not self._in_range(index):
            return None
        return tuple(sample.get_at(index) for sample in self._dims)

    def dimension(self, dimension: int) -> SampleView | None:
        """Read-only statistics of one dimension, or None when out of range."""
        if not self._has_dimension(dimension):
            return None
        return self._dims[dimension].view()

    @property
    def n_dimensions(self) -> int:
        return len(self._dims)

    @property
    def n(self) -> int:
        """Number of points."""
        return len(self)

    @property
    def data(self) -> NDArray[np.floating[Any]]:
        """Independent copy of the points, shape (n, n_dimensions)."""
        if not self._dims:
            return np.empty((0, 0), dtype=np.float64)
        return np.column_stack([sample.data for sample in self._dims])

    def __len__(self) -> int:
        if not self._dims:
            return 0
        return len(self._dims[0])

    def __repr__(self) -> str:
        return f"MultiSample(n={len(self)}, dimensions={len(self._dims)})"

    # --- Per-dimension statistics ---

    def _statistic_of(self, dimension: int, name: str) -> float | None:
        if not self._has_dimension(dimension):
            return None
        return getattr(self._dims[dimension], name)

    def _statistics(self, name: str) -> list[float | None]:
        return [getattr(sample, name) for sample in self._dims]

    def sum_of(self, dimension: int) -> float | None:
        return self._statistic_of(dimension, 'sum')

    def mean_of(self, dimension: int) -> float | None:
        return self._statistic_of(dimension, 'mean')

    def median_of(self, dimension: int) -> float | None:
        return self._statistic_of(dimension, 'median')

    def min_of(self, dimension: int) -> float | None:
        return self._statistic_of(dimension, 'min')

    def max_of(self, dimension: int) -> float | None:
        return self._statistic_of(dimension, 'max')

    def variance_of(self, dimension: int) -> float | None:
        """Sample variance of one dimension."""
        return self._statistic_of(dimension, 'variance')

    def standard_deviation_of(self, dimension: int) -> float | None:
        """Sample standard deviation of one dimension."""
        return self._statistic_of(dimension, 'standard_deviation')

    def variance_population_of(self, dimension: int) -> float | None:
        return self._statistic_of(dimension, 'variance_population')

    def standard_deviation_population_of(self, dimension: int) -> float | None:
        return self._statistic_of(dimension, 'standard_deviation_population')

    def sums(self) -> list[float | None]:
        return self._statistics('sum')

    def means(self) -> list[float | None]:
        return self._statistics('mean')

    def medians(self) -> list[float | None]:
        return self._statistics('median')

    def mins(self) -> list[float | None]:
        return self._statistics('min')

    def maxes(self) -> list[float | None]:
        return self._statistics('max')

    def variances(self) -> list[float | None]:
        return self._statistics('variance')

    def standard_deviations(self) -> list[float | None]:
        return self._statistics('standard_deviation')

    def variances_population(self) -> list[float | None]:
        return self._statistics('variance_population')

    def standard_deviations_population(self) -> list[float | None]:
        return self._statistics('standard_deviation_population')
