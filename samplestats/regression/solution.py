"""
Regression solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, TYPE_CHECKING

from samplestats.core.result import Result

if TYPE_CHECKING:
    from samplestats.regression.design import LinregDesign


@dataclass(frozen=True)
class LinregParams:
    """
    Parameter payload for simple linear regression.

    The fitted line is y = intercept + slope * x, with Pearson
    coefficient r.
    """
    intercept: float
    slope: float
    r: float
    n: int


@dataclass
class LinregSolution:
    """
    User-facing regression results.

    Iterates as (intercept, slope, r), so it unpacks like a tuple:

        >>> a, b, r = linreg([(1, 2), (2, 4), (3, 6)])
    """
    _result: Result[LinregParams]
    _design: 'LinregDesign'

    @property
    def intercept(self) -> float:
        return self._result.params.intercept

    @property
    def slope(self) -> float:
        return self._result.params.slope

    @property
    def r(self) -> float:
        """Pearson correlation of x and y."""
        return self._result.params.r

    @property
    def r_squared(self) -> float:
        return self.r ** 2

    @property
    def n(self) -> int:
        return self._result.params.n

    def predict(self, x: float) -> float:
        """Fitted value at x."""
        return self.intercept + self.slope * x

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.intercept, self.slope, self.r)

    def __iter__(self) -> Iterator[float]:
        return iter(self.as_tuple())

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

    def summary(self) -> str:
        """R-style one-screen summary of the fit."""
        lines = [
            "Simple linear regression: y = b0 + b1 * x",
            "",
            f"Observations: {self.n}",
            f"Intercept (b0): {self.intercept:.6f}",
            f"Slope (b1):     {self.slope:.6f}",
            f"Pearson r:      {self.r:.6f}",
            f"R-squared:      {self.r_squared:.6f}",
        ]
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"LinregSolution(intercept={self.intercept:.6g}, "
            f"slope={self.slope:.6g}, r={self.r:.6g}, n={self.n})"
        )
