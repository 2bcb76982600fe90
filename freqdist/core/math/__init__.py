"""
Core math modules для freqdist

Численные примитивы и расчёт распределения частот по правилу Sturges.
"""

# Numerical Safeguards
from freqdist.core.math.numerical_safeguards import (
    ceil_at_least,
    first_non_finite_index,
    is_valid_float,
)

# Frequency Distribution
from freqdist.core.math.frequency_distribution import (
    MIN_CLASS_WIDTH,
    STURGES_COEFFICIENT,
    DistributionInputError,
    EmptyInputError,
    NonFiniteValueError,
    build_classes,
    class_width_for,
    compute_frequency_distribution,
    sturges_number_of_classes,
)

__all__ = [
    # Numerical Safeguards — Functions
    "ceil_at_least",
    "first_non_finite_index",
    "is_valid_float",
    # Frequency Distribution — Constants
    "MIN_CLASS_WIDTH",
    "STURGES_COEFFICIENT",
    # Frequency Distribution — Exceptions
    "DistributionInputError",
    "EmptyInputError",
    "NonFiniteValueError",
    # Frequency Distribution — Functions
    "build_classes",
    "class_width_for",
    "compute_frequency_distribution",
    "sturges_number_of_classes",
]
