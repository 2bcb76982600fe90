"""
freqdist — распределение частот по правилу Sturges.

Extractor → Distribution Calculator → Presenter.
"""

from freqdist.core.domain import ClassRecord, DistributionResult
from freqdist.core.math import (
    DistributionInputError,
    EmptyInputError,
    NonFiniteValueError,
    compute_frequency_distribution,
)

__all__ = [
    "ClassRecord",
    "DistributionResult",
    "DistributionInputError",
    "EmptyInputError",
    "NonFiniteValueError",
    "compute_frequency_distribution",
]
