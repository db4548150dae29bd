"""
WeightedSample: a finite sequence of (value, weight) pairs.

The effective sample size is the total weight, not the number of pairs.
Variance is the weighted second central moment (weight-sum denominator);
there is no Bessel-style correction for weighted samples.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator
import numpy as np
from numpy.typing import ArrayLike, NDArray

from samplestats.core.exceptions import ValidationError, DimensionError
from samplestats.core.validation import (
    check_array,
    check_1d,
    check_finite,
    check_consistent_length,
    check_non_empty,
    check_moment_order,
)


@dataclass(frozen=True, eq=False)
class WeightedSample:
    """
    Immutable weighted sample.

    Construction:
        WeightedSample.from_pairs([(1.0, 2.0), (3.0, 1.0)])
        WeightedSample.from_arrays(values, weights)
    """
    _values: NDArray[np.floating[Any]]
    _weights: NDArray[np.floating[Any]]
    _total_weight: float

    @classmethod
    def from_pairs(cls, pairs: ArrayLike) -> WeightedSample:
        """
        Build WeightedSample from a sequence of (value, weight) pairs.

        Parameters
        ----------
        pairs : array-like
            Shape (n, 2). An empty sequence gives an empty sample.
        """
        arr = check_array(pairs, 'pairs')
        if arr.size == 0:
            return cls.from_arrays(np.empty(0), np.empty(0))
        if arr.ndim != 2 or arr.shape[1] != 2:
            raise DimensionError(
                f"pairs: expected shape (n, 2), got {arr.shape}"
            )
        return cls.from_arrays(arr[:, 0], arr[:, 1])

    @classmethod
    def from_arrays(cls, values: ArrayLike, weights: ArrayLike) -> WeightedSample:
        """
        Build WeightedSample from parallel value and weight arrays.

        Weights must be non-negative and, for a non-empty sample, sum to a
        strictly positive total.
        """
        v = check_array(values, 'values')
        w = check_array(weights, 'weights')
        check_1d(v, 'values')
        check_1d(w, 'weights')
        check_consistent_length(v, w, names=('values', 'weights'))
        check_finite(v, 'values')
        check_finite(w, 'weights')

        if np.any(w < 0):
            n_neg = int(np.sum(w < 0))
            raise ValidationError(
                f"weights: must be non-negative ({n_neg} negative)"
            )

        total = float(np.sum(w))
        if v.shape[0] > 0 and total <= 0:
            raise ValidationError(
                f"weights: must sum to a strictly positive total, got {total}"
            )

        v.setflags(write=False)
        w.setflags(write=False)
        return cls(_values=v, _weights=w, _total_weight=total)

    @property
    def values(self) -> NDArray[np.floating[Any]]:
        """Read-only sample values."""
        return self._values

    @property
    def weights(self) -> NDArray[np.floating[Any]]:
        """Read-only weights, aligned with values."""
        return self._weights

    @property
    def n(self) -> int:
        """Number of (value, weight) pairs."""
        return int(self._values.shape[0])

    @property
    def total_weight(self) -> float:
        """Effective sample size."""
        return self._total_weight

    def __len__(self) -> int:
        return self.n

    def __iter__(self) -> Iterator[tuple[float, float]]:
        return zip(self._values.tolist(), self._weights.tolist())

    def mean(self) -> float:
        """Weighted mean, sum(v * w) / sum(w)."""
        check_non_empty(self.n, 'mean')
        return float(np.sum(self._values * self._weights) / self._total_weight)

    def var(self) -> float:
        """Weighted variance, defined as the weighted second central moment."""
        return self.central_moment(2)

    def central_moment(self, r: int) -> float:
        """r-th weighted central moment, sum(w * (v - mean)^r) / sum(w)."""
        r = check_moment_order(r)
        if r == 1:
            return 0.0
        check_non_empty(self.n, 'central_moment')
        deviations = self._values - self.mean()
        return float(np.sum(self._weights * deviations ** r) / self._total_weight)

    def __repr__(self) -> str:
        return f"WeightedSample(n={self.n}, total_weight={self._total_weight:g})"
