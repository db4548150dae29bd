"""
Descriptive statistics module.

Public API:
    describe(x)              - All scalar statistics at once
    stddev, stddevp, pvar    - Standard deviation / population variance
    devsq, avgdev            - Deviation sums
    skew, kurt               - Moment skewness and excess kurtosis
    pearson_skew1/2          - Pearson skewness coefficients
    harmean, geomean         - Harmonic and geometric means
    median, mode, modes      - Order statistics
    sample_range, iqr        - Spread of the sorted data
    quantile, quantile_asc   - Nearest-rank quantiles
    covar, cov_matrix        - Covariance (Bessel-corrected)
    pearson, correl          - Pearson correlation coefficient
"""

from samplestats.descriptive.order import (
    median,
    modes,
    mode,
    sample_range,
    iqr,
    quantile,
    quantile_asc,
)
from samplestats.descriptive.moments import (
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
)
from samplestats.descriptive.association import (
    covar,
    cov_matrix,
    pearson,
    correl,
)
from samplestats.descriptive.solution import DescriptiveParams, DescriptiveSolution
from samplestats.descriptive.solvers import describe

__all__ = [
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
    "DescriptiveParams",
    "DescriptiveSolution",
]
