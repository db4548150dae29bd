"""
Order statistics: median, modes, range, interquartile trimming, quantiles.

Every function sorts a private copy (np.sort returns a new array); the
caller's sequence is never reordered.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from samplestats.core.exceptions import DomainError, DomainErrorKind
from samplestats.core.validation import check_array, check_1d, check_non_empty
from samplestats.sample import UnweightedSample, as_unweighted
from samplestats.sample._dispatch import SampleLike


def _sorted_values(x: SampleLike, statistic: str) -> NDArray[np.floating[Any]]:
    return np.sort(as_unweighted(x, statistic).values)


def median(x: SampleLike) -> float:
    """
    Median of the sample.

    Odd n: the middle element of the sorted data. Even n: the mean of the
    two middle elements.

    Raises:
        DomainError: EMPTY_SAMPLE
    """
    xs = _sorted_values(x, 'median')
    n = len(xs)
    check_non_empty(n, 'median')
    if n % 2 == 1:
        return float(xs[n // 2])
    lo = float(xs[n // 2 - 1])
    hi = float(xs[n // 2])
    # running-mean form of (lo + hi) / 2, no overflow near the float max
    return lo + (hi - lo) / 2


def modes(x: SampleLike) -> list[tuple[int, float]]:
    """
    Distinct values with their occurrence counts.

    Returns
    -------
    list of (count, value)
        Sorted by count descending; equal counts by ascending value.
        Empty input gives an empty list.
    """
    values, counts = np.unique(as_unweighted(x, 'modes').values, return_counts=True)
    # np.unique is ascending by value; a stable sort on -count keeps that for ties
    order = np.argsort(-counts, kind='stable')
    return [(int(counts[i]), float(values[i])) for i in order]


def mode(x: SampleLike) -> float | None:
    """Most frequent value, or None when no value occurs more than once."""
    m = modes(x)
    if not m or m[0][0] <= 1:
        return None
    return m[0][1]


def sample_range(x: SampleLike) -> float:
    """Maximum minus minimum."""
    values = as_unweighted(x, 'sample_range').values
    check_non_empty(len(values), 'sample_range')
    return float(np.max(values) - np.min(values))


def iqr(x: SampleLike) -> NDArray[np.floating[Any]]:
    """
    Interquartile trimming of the sample.

    Returns the sorted data with (n + 1) // 4 elements removed from each
    end. This is the trimmed sequence itself, not the scalar Q3 - Q1.
    """
    xs = _sorted_values(x, 'iqr')
    q = (len(xs) + 1) // 4
    return xs[q:len(xs) - q]


def _quantile_index(n: int, q: float) -> int:
    idx = round(q * (n - 1))
    if idx < 0 or idx >= n:
        raise DomainError(
            f"quantile: computed index {idx} outside [0, {n})",
            kind=DomainErrorKind.INDEX_OUT_OF_RANGE,
            n=n,
        )
    return idx


def quantile_asc(xs: ArrayLike, q: float) -> float:
    """
    Quantile q of data that is already sorted ascending.

    The quantile q of n data points is the element whose zero-based index
    in the sorted data is closest to q (n - 1); exact halves round to even.
    The sort order is a precondition and is not checked: unsorted input
    silently gives a wrong answer.

    Raises:
        DomainError: EMPTY_SAMPLE, QUANTILE_OUT_OF_RANGE, INDEX_OUT_OF_RANGE
    """
    if isinstance(xs, UnweightedSample):
        arr = xs.values
    elif isinstance(xs, np.ndarray) and xs.dtype == np.float64 and xs.ndim == 1:
        arr = xs
    else:
        arr = check_array(xs, 'xs')
        check_1d(arr, 'xs')
    n = len(arr)
    check_non_empty(n, 'quantile')
    q = float(q)
    # NaN fails both comparisons, so test the accepted interval
    if not (0.0 <= q <= 1.0):
        raise DomainError(
            f"quantile: q must lie in [0, 1], got {q}",
            kind=DomainErrorKind.QUANTILE_OUT_OF_RANGE,
        )
    return float(arr[_quantile_index(n, q)])


def quantile(x: SampleLike, q: float) -> float:
    """
    Quantile q of an unsorted sample.

    Sorts a private copy and delegates to quantile_asc().
    """
    return quantile_asc(_sorted_values(x, 'quantile'), q)
