"""
Input validation utilities for samplestats.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from samplestats.core.exceptions import (
    ValidationError,
    DimensionError,
    DomainError,
    DomainErrorKind,
    empty_sample,
    insufficient_size,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype (always a fresh copy)

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.array(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Empty sequences come back as float64; bool is rejected with strings
    if result.size and not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype}, expected real-valued data"
        )

    return result.astype(np.float64, copy=False)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_consistent_length(
    *arrays: NDArray[np.floating[Any]],
    names: tuple[str, ...]
) -> None:
    """
    Verify all arrays have the same length (first dimension).

    Raises:
        ValueError: If number of names doesn't match number of arrays
        DimensionError: If arrays have inconsistent lengths
    """
    if len(arrays) != len(names):
        raise ValueError(
            f"Number of arrays ({len(arrays)}) must match number of names ({len(names)})"
        )

    if len(arrays) < 2:
        return

    lengths = [arr.shape[0] for arr in arrays]
    if len(set(lengths)) > 1:
        details = ", ".join(f"{name}={length}" for name, length in zip(names, lengths))
        raise DimensionError(f"Inconsistent lengths: {details}")


def check_non_empty(n: int, statistic: str) -> None:
    """
    Verify a sample has at least one observation.

    Raises:
        DomainError: EMPTY_SAMPLE
    """
    if n == 0:
        raise empty_sample(statistic)


def check_min_samples(n: int, min_samples: int, statistic: str) -> None:
    """
    Verify a sample has at least the minimum number of observations.

    An empty sample reports EMPTY_SAMPLE rather than INSUFFICIENT_SIZE.

    Raises:
        DomainError: EMPTY_SAMPLE or INSUFFICIENT_SIZE
    """
    check_non_empty(n, statistic)
    if n < min_samples:
        raise insufficient_size(statistic, n, min_samples)


def check_same_length(n_x: int, n_y: int, statistic: str) -> None:
    """
    Verify two paired samples have equal length.

    Raises:
        DomainError: LENGTH_MISMATCH
    """
    if n_x != n_y:
        raise DomainError(
            f"{statistic}: samples must have equal length, got {n_x} and {n_y}",
            kind=DomainErrorKind.LENGTH_MISMATCH,
        )


def check_moment_order(r: Any) -> int:
    """
    Validate a central moment order.

    Returns:
        The order as a Python int

    Raises:
        ValidationError: If r is not an integer >= 1
    """
    if isinstance(r, bool) or not isinstance(r, (int, np.integer)):
        raise ValidationError(f"r: moment order must be an integer, got {r!r}")
    if r < 1:
        raise ValidationError(f"r: moment order must be >= 1, got {r}")
    return int(r)
