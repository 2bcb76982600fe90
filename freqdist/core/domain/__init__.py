"""
Domain models and value objects.

Contains the immutable result of a frequency distribution computation.
"""

from freqdist.core.domain.distribution import (
    BOUNDARY_OFFSET,
    ClassRecord,
    DistributionResult,
)

__all__ = [
    "BOUNDARY_OFFSET",
    "ClassRecord",
    "DistributionResult",
]
