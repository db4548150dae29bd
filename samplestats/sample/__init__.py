"""
Sample representations.

Two concrete types implement the core Sample protocol:

    UnweightedSample  - finite sequence of numbers
    WeightedSample    - finite sequence of (value, weight) pairs

Public API:
    as_sample(data)          - wrap array-likes, pass Samples through
    mean(s)                  - sample mean
    var(s)                   - sample variance (n-1 unweighted, weight-sum weighted)
    central_moment(s, r)     - r-th central moment (population denominator)
"""

from samplestats.sample.unweighted import UnweightedSample
from samplestats.sample.weighted import WeightedSample
from samplestats.sample._dispatch import (
    as_sample,
    as_unweighted,
    mean,
    var,
    central_moment,
)

__all__ = [
    "UnweightedSample",
    "WeightedSample",
    "as_sample",
    "as_unweighted",
    "mean",
    "var",
    "central_moment",
]
