"""
Tolerance tiers for numerical validation.

Defines precision expectations for different classes of input:
- well-conditioned data: machine precision match with reference values
- ill-conditioned data (large offset, tiny spread): relaxed

Used by the test suite when comparing against numpy/scipy references.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Well-conditioned double precision: must match references to machine precision
CPU_FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='cpu_fp64',
    description='CPU double precision, matches reference exactly',
)

# Large magnitude relative to spread (e.g. 1e9 + small noise)
CPU_FP64_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-6,
    atol=1e-8,
    name='cpu_fp64_ill_conditioned',
    description='CPU double precision, large offset relative to spread',
)


def select_tolerance(is_ill_conditioned: bool = False) -> ToleranceTier:
    """Select appropriate tolerance tier for a class of input."""
    if is_ill_conditioned:
        return CPU_FP64_ILL_CONDITIONED
    return CPU_FP64
