"""
Input validation utilities for SampleStats.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Absent input (None) is not validated here: the containers treat it as a
no-op before calling into this module.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from samplestats.core.exceptions import ValidationError, DimensionError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with floating dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Booleans are a numpy number subtype only by accident of history
    if result.dtype == np.bool_ or not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex values are not supported")

    return result.astype(np.float64)


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 1-dimensional.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        DimensionError: If array is not 1D
    """
    if array.ndim != 1:
        raise DimensionError(
            f"{name}: expected 1D array, got {array.ndim}D with shape {array.shape}"
        )


def check_values(values: ArrayLike, name: str) -> list[float]:
    """
    Convert a sequence of sample values to a list of Python floats.

    Args:
        values: 1D array-like of real numbers
        name: Parameter name for error messages

    Returns:
        New list of floats, independent of the caller's sequence

    Raises:
        ValidationError: If values are non-numeric
        DimensionError: If values are not 1D
    """
    array = check_array(values, name)
    check_1d(array, name)
    return array.tolist()


def check_scalar(value: Any, name: str) -> float:
    """
    Validate a single real number.

    Args:
        value: Candidate value
        name: Parameter name for error messages

    Returns:
        The value as a Python float

    Raises:
        ValidationError: If value is not a real scalar
    """
    array = check_array(value, name)
    if array.ndim != 0:
        raise ValidationError(
            f"{name}: expected a scalar, got array with shape {array.shape}"
        )
    return float(array)


def check_finite(value: float, name: str) -> None:
    """
    Verify a scalar is neither NaN nor infinite.

    Raises:
        ValidationError: If value is non-finite
    """
    if not np.isfinite(value):
        raise ValidationError(f"{name}: must be finite, got {value}")


def check_non_negative(value: float, name: str) -> None:
    """
    Verify a scalar is >= 0.

    Raises:
        ValidationError: If value is negative
    """
    if value < 0:
        raise ValidationError(f"{name}: must be non-negative, got {value}")


def check_positive(value: float, name: str) -> None:
    """
    Verify a scalar is > 0.

    Raises:
        ValidationError: If value is zero or negative
    """
    if value <= 0:
        raise ValidationError(f"{name}: must be positive, got {value}")
