"""
describe(): every scalar statistic of an unweighted sample in one call.

Individual statistics raise DomainError when undefined. describe() instead
records the statistic as None and adds a warning to the result, so one
degenerate statistic doesn't hide the rest.
"""

from __future__ import annotations

from typing import Callable

from samplestats.core.exceptions import DomainError
from samplestats.core.result import Result
from samplestats.core.timing import timed
from samplestats.core.validation import check_non_empty
from samplestats.sample import as_unweighted
from samplestats.sample._dispatch import SampleLike
from samplestats.descriptive.solution import DescriptiveParams, DescriptiveSolution
from samplestats.descriptive import moments, order


def _attempt(
    name: str,
    fn: Callable[[], float],
    warnings_list: list[str],
) -> float | None:
    try:
        return fn()
    except DomainError as e:
        warnings_list.append(f"{name} undefined: {e}")
        return None


def describe(x: SampleLike) -> DescriptiveSolution:
    """
    Compute all descriptive statistics of an unweighted sample.

    Parameters
    ----------
    x : array-like or UnweightedSample
        1D numeric data.

    Returns
    -------
    DescriptiveSolution
        Statistics undefined for this sample are None; the reason is
        listed in solution.warnings.

    Raises
    ------
    DomainError
        EMPTY_SAMPLE if x has no observations.
    ValidationError
        If x is weighted, non-numeric or non-finite.
    """
    sample = as_unweighted(x, 'describe')
    check_non_empty(sample.n, 'describe')

    warnings_list: list[str] = []

    with timed() as timer:
        with timer.section('moments'):
            mean = sample.mean()
            variance = _attempt('variance', sample.var, warnings_list)
            sd = moments.stddev(sample) if variance is not None else None
            variance_population = moments.pvar(sample)
            sd_population = moments.stddevp(sample)
            devsq = moments.devsq(sample)
            avgdev = moments.avgdev(sample)
            skewness = _attempt('skewness', lambda: moments.skew(sample), warnings_list)
            kurtosis = _attempt('kurtosis', lambda: moments.kurt(sample), warnings_list)

        with timer.section('order'):
            median = order.median(sample)
            mode = order.mode(sample)
            minimum = order.quantile(sample, 0.0)
            maximum = order.quantile(sample, 1.0)
            value_range = order.sample_range(sample)

    params = DescriptiveParams(
        n=sample.n,
        mean=mean,
        minimum=minimum,
        maximum=maximum,
        range=value_range,
        median=median,
        mode=mode,
        variance=variance,
        sd=sd,
        variance_population=variance_population,
        sd_population=sd_population,
        devsq=devsq,
        avgdev=avgdev,
        skewness=skewness,
        kurtosis=kurtosis,
    )

    result = Result(
        params=params,
        info={'n': sample.n, 'method': 'welford'},
        timing=timer.result(),
        backend_name='cpu_descriptive',
        warnings=tuple(warnings_list),
    )

    return DescriptiveSolution(_result=result, _sample=sample)
