"""
Exception hierarchy for samplestats.

All exceptions inherit from SampleStatsError to allow catching any
library-specific error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""

from __future__ import annotations

from enum import Enum


class SampleStatsError(Exception):
    """Base exception for all samplestats errors."""
    pass


class ValidationError(SampleStatsError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks (non-numeric
    data, non-finite values, negative weights, invalid moment order).
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions or
    when multiple arrays have inconsistent shapes.
    """
    pass


class DomainErrorKind(Enum):
    """Reason a statistic is undefined for the sample it was asked of."""
    EMPTY_SAMPLE = 'empty_sample'
    INSUFFICIENT_SIZE = 'insufficient_size'
    LENGTH_MISMATCH = 'length_mismatch'
    QUANTILE_OUT_OF_RANGE = 'quantile_out_of_range'
    INDEX_OUT_OF_RANGE = 'index_out_of_range'
    NO_MODE = 'no_mode'
    ZERO_VARIANCE = 'zero_variance'
    DEGENERATE_INPUT = 'degenerate_input'
    NON_POSITIVE_VALUE = 'non_positive_value'


class DomainError(SampleStatsError):
    """
    Statistic is mathematically undefined for the given sample.

    Every zero-denominator case (constant sample, constant regressor) and
    every size precondition raises this error rather than returning an
    IEEE special value.

    Attributes:
        kind: Which precondition failed
        n: Observed sample size, if relevant
        required: Minimum sample size that would have been accepted
    """

    def __init__(
        self,
        message: str,
        kind: DomainErrorKind,
        n: int | None = None,
        required: int | None = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.n = n
        self.required = required


def empty_sample(statistic: str) -> DomainError:
    """Build the EMPTY_SAMPLE error for a named statistic."""
    return DomainError(
        f"{statistic}: sample is empty",
        kind=DomainErrorKind.EMPTY_SAMPLE,
        n=0,
        required=1,
    )


def insufficient_size(statistic: str, n: int, required: int) -> DomainError:
    """Build the INSUFFICIENT_SIZE error for a named statistic."""
    return DomainError(
        f"{statistic}: requires at least {required} observations, got {n}",
        kind=DomainErrorKind.INSUFFICIENT_SIZE,
        n=n,
        required=required,
    )


def zero_variance(statistic: str) -> DomainError:
    """Build the ZERO_VARIANCE error for a named statistic."""
    return DomainError(
        f"{statistic}: undefined for a sample with zero variance (constant data)",
        kind=DomainErrorKind.ZERO_VARIANCE,
    )
