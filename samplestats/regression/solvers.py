"""
Solver for simple linear regression.

linreg() fits by ordinary least squares from raw sums (n, Sx, Sy, Sxx,
Sxy, Syy) with no mean-centering pass. It does not go through the
association module.
"""

from __future__ import annotations

import math
import warnings
import numpy as np
from numpy.typing import ArrayLike

from samplestats.core.exceptions import DomainError, DomainErrorKind
from samplestats.core.result import Result
from samplestats.core.timing import timed
from samplestats.core.validation import check_min_samples
from samplestats.regression.design import LinregDesign
from samplestats.regression.solution import LinregParams, LinregSolution


def _degenerate(axis: str) -> DomainError:
    return DomainError(
        f"linreg: {axis} values are constant (or too close to separate), "
        f"regression is undefined",
        kind=DomainErrorKind.DEGENERATE_INPUT,
    )


def linreg(
    xy: ArrayLike | LinregDesign,
    y: ArrayLike | None = None,
) -> LinregSolution:
    """
    Least-squares linear regression of y against x.

    Args:
        xy: Sequence of (x, y) pairs, an (n, 2) array, or a LinregDesign.
            When y is given, xy holds the x values only.
        y: Optional response values, parallel to xy.

    Returns:
        LinregSolution with intercept b0, slope b1 and Pearson r of the
        line y = b0 + b1 * x. Unpacks as (b0, b1, r).

    Raises:
        DomainError: EMPTY_SAMPLE / INSUFFICIENT_SIZE for n < 2;
            DEGENERATE_INPUT if all x (or all y) values are equal or too
            close to separate in double precision; LENGTH_MISMATCH if x
            and y lengths differ

    Example:
        >>> fit = linreg([(1, 2), (2, 4), (3, 6)])
        >>> fit.as_tuple()
        (0.0, 2.0, 1.0)
    """
    if isinstance(xy, LinregDesign):
        design = xy
    elif y is not None:
        design = LinregDesign.from_arrays(xy, y)
    else:
        design = LinregDesign.from_pairs(xy)

    n = design.n
    check_min_samples(n, 2, 'linreg')

    xs = design.x
    ys = design.y
    # exact equality on the raw data; the raw-sum denominators can come out
    # as rounding noise instead of zero for constant non-integer data
    if np.all(xs == xs[0]):
        raise _degenerate('x')
    if np.all(ys == ys[0]):
        raise _degenerate('y')

    warnings_list: list[str] = []

    with timed() as timer:
        with timer.section('sums'):
            s_x = float(np.sum(xs))
            s_y = float(np.sum(ys))
            s_xx = float(np.sum(xs * xs))
            s_xy = float(np.sum(xs * ys))
            s_yy = float(np.sum(ys * ys))

        with timer.section('coefficients'):
            numerator = n * s_xy - s_x * s_y
            denom_x = n * s_xx - s_x * s_x
            denom_y = n * s_yy - s_y * s_y
            # distinct but nearly equal values at large magnitude cancel to
            # zero or below in the raw-sum form
            if denom_x <= 0:
                raise _degenerate('x')
            if denom_y <= 0:
                raise _degenerate('y')
            slope = numerator / denom_x
            intercept = (s_y - slope * s_x) / n
            r = numerator / (math.sqrt(denom_x) * math.sqrt(denom_y))

    if n == 2:
        msg = "linreg fitted to 2 points: the line is exact and |r| = 1"
        warnings_list.append(msg)
        warnings.warn(msg, RuntimeWarning, stacklevel=2)

    result = Result(
        params=LinregParams(intercept=intercept, slope=slope, r=r, n=n),
        info={'method': 'raw_sums', 'n': n},
        timing=timer.result(),
        backend_name='cpu_raw_sums',
        warnings=tuple(warnings_list),
    )

    return LinregSolution(_result=result, _design=design)
