"""
Covariance and correlation between paired samples.

All statistics here use the Bessel-corrected (n-1) denominator, so the
self-covariance covar(x, x) equals var(x).
"""

from __future__ import annotations

from typing import Any, Sequence
import math
import numpy as np
from numpy.typing import NDArray

from samplestats.core.exceptions import zero_variance
from samplestats.core.validation import (
    check_min_samples,
    check_non_empty,
    check_same_length,
)
from samplestats.sample import as_unweighted
from samplestats.sample._dispatch import SampleLike


def covar(x: SampleLike, y: SampleLike) -> float:
    """
    Sample covariance, sum((x - mx)(y - my)) / (n - 1).

    Raises:
        DomainError: LENGTH_MISMATCH for unequal lengths,
            EMPTY_SAMPLE / INSUFFICIENT_SIZE for n < 2
    """
    xs = as_unweighted(x, 'covar')
    ys = as_unweighted(y, 'covar')
    check_same_length(xs.n, ys.n, 'covar')
    check_min_samples(xs.n, 2, 'covar')
    dx = xs.values - xs.mean()
    dy = ys.values - ys.mean()
    return float(np.sum(dx * dy) / (xs.n - 1))


def cov_matrix(samples: Sequence[SampleLike]) -> NDArray[np.floating[Any]]:
    """
    Covariance matrix of k equal-length samples.

    Cell [i, j] is covar(samples[i], samples[j]); the diagonal holds each
    sample's own variance.

    Returns
    -------
    NDArray
        Symmetric (k, k) matrix.
    """
    wrapped = [as_unweighted(s, 'cov_matrix') for s in samples]
    k = len(wrapped)
    check_non_empty(k, 'cov_matrix')
    cov_mat = np.empty((k, k), dtype=np.float64)
    for i in range(k):
        for j in range(k):
            cov_mat[i, j] = covar(wrapped[i], wrapped[j])
    return cov_mat


def pearson(x: SampleLike, y: SampleLike) -> float:
    """
    Pearson's product-moment correlation coefficient.

    covar(x, y) / (stddev(x) * stddev(y)), in [-1, 1] up to rounding.

    Raises:
        DomainError: as covar(), or ZERO_VARIANCE if either sample is constant
    """
    xs = as_unweighted(x, 'pearson')
    ys = as_unweighted(y, 'pearson')
    c = covar(xs, ys)
    sd_x = math.sqrt(xs.var())
    sd_y = math.sqrt(ys.var())
    if sd_x == 0 or sd_y == 0:
        raise zero_variance('pearson')
    return c / (sd_x * sd_y)


correl = pearson
