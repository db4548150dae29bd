"""
Generic result container for samplestats computations.

The Result class provides a standardized envelope for the composite
computations (describe, linreg). Scalar statistics are returned as plain
floats; only operations with metadata worth carrying use the envelope.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (sample size, computed statistics)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) for reproducibility
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for statistical computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific parameters (estimates, coefficients)
        info: Structured metadata (sample size, method)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the code path that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=LinregParams(intercept=0.0, slope=2.0, r=1.0, n=3),
        ...     info={'method': 'raw_sums'},
        ...     timing={'total_seconds': 0.0001},
        ...     backend_name='cpu_raw_sums'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
