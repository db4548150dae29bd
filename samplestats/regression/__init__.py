"""
Simple linear regression.

Public API:
    linreg(xy, y=None) -> LinregSolution

Example:
    >>> from samplestats.regression import linreg
    >>> intercept, slope, r = linreg([(1, 2), (2, 4), (3, 6)])
"""

from samplestats.regression.design import LinregDesign
from samplestats.regression.solution import LinregSolution, LinregParams
from samplestats.regression.solvers import linreg

__all__ = [
    "linreg",
    "LinregDesign",
    "LinregSolution",
    "LinregParams",
]
