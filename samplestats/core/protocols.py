"""
Core protocols for samplestats.

Sample is the structural interface shared by the unweighted and weighted
sample representations. Every moment-derived statistic is written against
this protocol, so both representations flow through the same formulas.

We use Protocol (structural typing) rather than ABC (nominal typing) to allow
third-party sample types to participate without inheriting from us.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Sample(Protocol):
    """
    Minimal protocol for a finite numeric sample.

    Implementations must be immutable: no statistic may mutate or cache
    anything on the sample.
    """

    def mean(self) -> float:
        """
        Mean of the sample.

        Raises:
            DomainError: EMPTY_SAMPLE
        """
        ...

    def var(self) -> float:
        """
        Variance of the sample.

        Unweighted samples return the unbiased (n-1) estimate. Weighted
        samples return the order-2 central moment (weight-sum denominator).
        The two conventions are intentionally different.
        """
        ...

    def central_moment(self, r: int) -> float:
        """
        r-th central moment about the sample's own mean.

        Population-style denominator (n, or total weight). Order 1 is
        exactly 0.0 and is returned without touching the data.
        """
        ...
