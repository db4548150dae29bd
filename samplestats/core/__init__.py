"""
Core infrastructure for samplestats.

This module provides shared abstractions and utilities used by the sample
representations and the statistics built on top of them.

Key components:
    protocols: Sample protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    timing: Section timing for composite computations
    tolerances: Numerical comparison tiers
"""

from samplestats.core.protocols import Sample
from samplestats.core.result import Result
from samplestats.core.exceptions import (
    SampleStatsError,
    ValidationError,
    DimensionError,
    DomainError,
    DomainErrorKind,
)

__all__ = [
    # Protocols
    "Sample",
    # Result
    "Result",
    # Exceptions
    "SampleStatsError",
    "ValidationError",
    "DimensionError",
    "DomainError",
    "DomainErrorKind",
]
