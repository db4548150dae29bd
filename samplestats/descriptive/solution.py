"""
Descriptive statistics solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, TYPE_CHECKING

from samplestats.core.result import Result

if TYPE_CHECKING:
    from samplestats.sample import UnweightedSample


@dataclass(frozen=True)
class DescriptiveParams:
    """
    Parameter payload for describe().

    Statistics that are undefined for the sample (variance of a single
    observation, skewness of constant data) are None.
    """
    n: int
    mean: float
    minimum: float
    maximum: float
    range: float
    median: float
    mode: float | None = None
    variance: float | None = None
    sd: float | None = None
    variance_population: float | None = None
    sd_population: float | None = None
    devsq: float | None = None
    avgdev: float | None = None
    skewness: float | None = None
    kurtosis: float | None = None


@dataclass
class DescriptiveSolution:
    """
    User-facing descriptive statistics results.

    Wraps Result[DescriptiveParams] and provides convenient accessors.
    """
    _result: Result[DescriptiveParams]
    _sample: 'UnweightedSample'

    @property
    def params(self) -> DescriptiveParams:
        return self._result.params

    @property
    def sample(self) -> 'UnweightedSample':
        """The sample the statistics were computed from."""
        return self._sample

    @property
    def n(self) -> int:
        return self._result.params.n

    @property
    def mean(self) -> float:
        return self._result.params.mean

    @property
    def variance(self) -> float | None:
        """Unbiased (n-1) variance; None for n < 2."""
        return self._result.params.variance

    @property
    def sd(self) -> float | None:
        return self._result.params.sd

    @property
    def variance_population(self) -> float | None:
        """Second central moment (denominator n)."""
        return self._result.params.variance_population

    @property
    def sd_population(self) -> float | None:
        return self._result.params.sd_population

    @property
    def skewness(self) -> float | None:
        return self._result.params.skewness

    @property
    def kurtosis(self) -> float | None:
        """Excess kurtosis."""
        return self._result.params.kurtosis

    @property
    def median(self) -> float:
        return self._result.params.median

    @property
    def mode(self) -> float | None:
        return self._result.params.mode

    @property
    def minimum(self) -> float:
        return self._result.params.minimum

    @property
    def maximum(self) -> float:
        return self._result.params.maximum

    @property
    def range(self) -> float:
        return self._result.params.range

    @property
    def avgdev(self) -> float | None:
        return self._result.params.avgdev

    @property
    def devsq(self) -> float | None:
        return self._result.params.devsq

    # --- Metadata ---

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def to_dict(self) -> dict[str, Any]:
        """All statistics as a plain dict, in payload field order."""
        params = self._result.params
        return {f.name: getattr(params, f.name) for f in fields(params)}

    def summary(self) -> str:
        """Two-column text summary, one statistic per line."""
        stats = self.to_dict()
        label_width = max(len(name) for name in stats)
        lines = ["Descriptive Statistics:"]
        for name, value in stats.items():
            if value is None:
                shown = "NA"
            elif name == 'n':
                shown = str(value)
            else:
                shown = f"{value:.6f}"
            lines.append(f"  {name.ljust(label_width)}  {shown}")
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        undefined = [k for k, v in self.to_dict().items() if v is None]
        extra = f", undefined=[{', '.join(undefined)}]" if undefined else ""
        return f"DescriptiveSolution(n={self.n}{extra})"
