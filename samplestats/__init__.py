"""
samplestats: descriptive statistics over finite numeric samples.

Submodules:
    sample: Unweighted and weighted sample representations
    descriptive: Moments, shape, order statistics, association
    regression: Closed-form simple linear regression
"""

__version__ = "0.1.0"

from samplestats import sample
from samplestats import descriptive
from samplestats import regression

from samplestats.core.exceptions import (
    SampleStatsError,
    ValidationError,
    DimensionError,
    DomainError,
    DomainErrorKind,
)
from samplestats.sample import (
    UnweightedSample,
    WeightedSample,
    mean,
    var,
    central_moment,
)
from samplestats.descriptive import (
    describe,
    stddev,
    stddevp,
    pvar,
    devsq,
    skew,
    kurt,
    pearson_skew1,
    pearson_skew2,
    avgdev,
    harmean,
    geomean,
    median,
    modes,
    mode,
    sample_range,
    iqr,
    quantile,
    quantile_asc,
    covar,
    cov_matrix,
    pearson,
    correl,
)
from samplestats.regression import linreg

__all__ = [
    "__version__",
    "sample",
    "descriptive",
    "regression",
    # Exceptions
    "SampleStatsError",
    "ValidationError",
    "DimensionError",
    "DomainError",
    "DomainErrorKind",
    # Samples
    "UnweightedSample",
    "WeightedSample",
    "mean",
    "var",
    "central_moment",
    # Statistics
    "describe",
    "stddev",
    "stddevp",
    "pvar",
    "devsq",
    "skew",
    "kurt",
    "pearson_skew1",
    "pearson_skew2",
    "avgdev",
    "harmean",
    "geomean",
    "median",
    "modes",
    "mode",
    "sample_range",
    "iqr",
    "quantile",
    "quantile_asc",
    "covar",
    "cov_matrix",
    "pearson",
    "correl",
    "linreg",
]
