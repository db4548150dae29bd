"""
Statistics derived from the sample moments.

stddev, stddevp, pvar, skew and kurt are written against the Sample
protocol and accept weighted samples. The remaining functions are defined
on plain (unweighted) sequences only.

Zero-denominator policy: every statistic that divides by a variance or
standard deviation raises DomainError(ZERO_VARIANCE) on constant data
instead of returning inf/NaN.
"""

from __future__ import annotations

import math
import numpy as np
from scipy import stats as sp_stats

from samplestats.core.exceptions import (
    DomainError,
    DomainErrorKind,
    zero_variance,
)
from samplestats.core.validation import check_non_empty
from samplestats.sample import as_sample, as_unweighted
from samplestats.sample._dispatch import SampleLike
from samplestats.descriptive.order import median, mode


# --- Variance and standard deviation ---

def stddev(s: SampleLike) -> float:
    """Standard deviation, sqrt(var(s))."""
    return math.sqrt(as_sample(s).var())


def pvar(s: SampleLike) -> float:
    """Population variance: the second central moment (denominator n)."""
    return as_sample(s).central_moment(2)


def stddevp(s: SampleLike) -> float:
    """Population standard deviation, sqrt(pvar(s))."""
    return math.sqrt(pvar(s))


def devsq(x: SampleLike) -> float:
    """
    Sum of squared deviations from the sample mean.

    A sum, not an average: independent of either variance denominator.
    """
    sample = as_unweighted(x, 'devsq')
    check_non_empty(sample.n, 'devsq')
    deviations = sample.values - sample.mean()
    return float(np.sum(deviations ** 2))


# --- Shape ---

def skew(s: SampleLike) -> float:
    """
    Moment coefficient of skewness, m3 / m2^(3/2).

    Raises:
        DomainError: EMPTY_SAMPLE, or ZERO_VARIANCE for constant data
    """
    sample = as_sample(s)
    m2 = sample.central_moment(2)
    if m2 == 0:
        raise zero_variance('skew')
    return sample.central_moment(3) / m2 ** 1.5


def kurt(s: SampleLike) -> float:
    """
    Excess kurtosis, m4 / m2^2 - 3 (0 for a normal distribution).

    Raises:
        DomainError: EMPTY_SAMPLE, or ZERO_VARIANCE for constant data
    """
    sample = as_sample(s)
    m2 = sample.central_moment(2)
    if m2 == 0:
        raise zero_variance('kurt')
    return sample.central_moment(4) / m2 ** 2 - 3.0


def _checked_stddev(x, statistic: str) -> float:
    sd = math.sqrt(x.var())
    if sd == 0:
        raise zero_variance(statistic)
    return sd


def pearson_skew1(x: SampleLike) -> float:
    """
    First Pearson skewness coefficient, 3 (mean - mode) / stddev.

    Raises:
        DomainError: NO_MODE if no value repeats, INSUFFICIENT_SIZE for
            n < 2, ZERO_VARIANCE for constant data
    """
    sample = as_unweighted(x, 'pearson_skew1')
    mo = mode(sample)
    if mo is None:
        raise DomainError(
            "pearson_skew1: sample has no mode (no value occurs more than once)",
            kind=DomainErrorKind.NO_MODE,
            n=sample.n,
        )
    sd = _checked_stddev(sample, 'pearson_skew1')
    return 3.0 * (sample.mean() - mo) / sd


def pearson_skew2(x: SampleLike) -> float:
    """Second Pearson skewness coefficient, 3 (mean - median) / stddev."""
    sample = as_unweighted(x, 'pearson_skew2')
    sd = _checked_stddev(sample, 'pearson_skew2')
    return 3.0 * (sample.mean() - median(sample)) / sd


# --- Other parameters ---

def avgdev(x: SampleLike) -> float:
    """Average absolute deviation from the mean."""
    sample = as_unweighted(x, 'avgdev')
    m = sample.mean()
    return as_sample(np.abs(sample.values - m)).mean()


def _check_positive(values, statistic: str) -> None:
    if np.any(values <= 0):
        n_bad = int(np.sum(values <= 0))
        raise DomainError(
            f"{statistic}: requires strictly positive values ({n_bad} non-positive)",
            kind=DomainErrorKind.NON_POSITIVE_VALUE,
        )


def harmean(x: SampleLike) -> float:
    """Harmonic mean, n / sum(1/x). Values must be strictly positive."""
    sample = as_unweighted(x, 'harmean')
    check_non_empty(sample.n, 'harmean')
    _check_positive(sample.values, 'harmean')
    return sample.n / float(np.sum(1.0 / sample.values))


def geomean(x: SampleLike) -> float:
    """
    Geometric mean, (prod x)^(1/n). Values must be strictly positive.

    Evaluated in log space so long samples don't overflow the product.
    """
    sample = as_unweighted(x, 'geomean')
    check_non_empty(sample.n, 'geomean')
    _check_positive(sample.values, 'geomean')
    return float(sp_stats.gmean(sample.values))
