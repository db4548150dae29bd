"""
Conversion of caller data into samples, and the protocol-level functions.

Mirrors the _ensure_design() boundary: raw array-likes are validated once
here and trusted everywhere downstream.
"""

from __future__ import annotations

from typing import Union
from numpy.typing import ArrayLike

from samplestats.core.exceptions import ValidationError
from samplestats.core.protocols import Sample
from samplestats.sample.unweighted import UnweightedSample
from samplestats.sample.weighted import WeightedSample


SampleLike = Union[Sample, ArrayLike]


def as_sample(data: SampleLike) -> Sample:
    """Return Samples unchanged; wrap anything else as UnweightedSample."""
    if isinstance(data, (UnweightedSample, WeightedSample)):
        return data
    if isinstance(data, Sample):
        return data
    return UnweightedSample.from_array(data)


def as_unweighted(data: SampleLike, statistic: str) -> UnweightedSample:
    """
    Coerce to UnweightedSample for statistics defined only on plain sequences.

    Raises:
        ValidationError: If a weighted sample is passed
    """
    if isinstance(data, UnweightedSample):
        return data
    if isinstance(data, WeightedSample):
        raise ValidationError(
            f"{statistic}: requires an unweighted sample, got {data!r}"
        )
    return UnweightedSample.from_array(data)


def mean(s: SampleLike) -> float:
    """Mean of a sample or array-like."""
    return as_sample(s).mean()


def var(s: SampleLike) -> float:
    """
    Variance of a sample or array-like.

    Unbiased (n-1) for unweighted data; weighted second central moment
    (weight-sum denominator) for WeightedSample.
    """
    return as_sample(s).var()


def central_moment(s: SampleLike, r: int) -> float:
    """r-th central moment with population denominator; 0.0 for r == 1."""
    return as_sample(s).central_moment(r)
