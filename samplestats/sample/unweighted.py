"""
UnweightedSample: a finite sequence of real numbers.

Mean and variance use single-pass running updates so that variance is
never formed as "sum of squares minus square of sum". Higher central
moments use a two-pass scheme (mean first, then deviations).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator
import numpy as np
from numpy.typing import ArrayLike, NDArray

from samplestats.core.validation import (
    check_array,
    check_1d,
    check_finite,
    check_non_empty,
    check_min_samples,
    check_moment_order,
)


@dataclass(frozen=True, eq=False)
class UnweightedSample:
    """
    Immutable unweighted sample.

    Holds a private read-only float64 copy of the caller's values, so
    neither the caller nor any statistic can reorder or modify the data
    the sample was built from.

    Construction:
        UnweightedSample.from_array([1.0, 2.0, 3.0])
    """
    _values: NDArray[np.floating[Any]]

    @classmethod
    def from_array(cls, values: ArrayLike) -> UnweightedSample:
        """
        Build UnweightedSample from array-like data.

        Parameters
        ----------
        values : array-like
            1D numeric data. Empty input is accepted; statistics on an
            empty sample raise DomainError(EMPTY_SAMPLE).
        """
        arr = check_array(values, 'values')
        check_1d(arr, 'values')
        check_finite(arr, 'values')
        arr.setflags(write=False)
        return cls(_values=arr)

    @property
    def values(self) -> NDArray[np.floating[Any]]:
        """Read-only view of the sample values, in caller order."""
        return self._values

    @property
    def n(self) -> int:
        """Number of observations."""
        return int(self._values.shape[0])

    def __len__(self) -> int:
        return self.n

    def __iter__(self) -> Iterator[float]:
        return iter(self._values.tolist())

    def mean(self) -> float:
        """Running mean, m_k = m_{k-1} + (x_k - m_{k-1}) / k."""
        check_non_empty(self.n, 'mean')
        m = 0.0
        for k, x in enumerate(self._values.tolist(), start=1):
            m += (x - m) / k
        return m

    def var(self) -> float:
        """
        Unbiased sample variance (Bessel-corrected, n-1).

        Welford's update: the running mean and the accumulated sum of
        squared deviations are both updated per element.
        """
        check_min_samples(self.n, 2, 'var')
        m = 0.0
        s = 0.0
        for k, x in enumerate(self._values.tolist(), start=1):
            delta = x - m
            m += delta / k
            s += delta * (x - m)
        return s / (self.n - 1)

    def central_moment(self, r: int) -> float:
        """
        r-th central moment with population denominator n.

        Note the denominator is n, not the n-1 used by var().
        """
        r = check_moment_order(r)
        if r == 1:
            return 0.0
        check_non_empty(self.n, 'central_moment')
        deviations = self._values - self.mean()
        return float(np.sum(deviations ** r) / self.n)

    def __repr__(self) -> str:
        return f"UnweightedSample(n={self.n})"
