"""
Contract Validation Module

Модуль для валидации сериализованного DistributionResult по JSON Schema.
"""

from .validators import (
    ContractValidator,
    DistributionResultValidator,
    SchemaLoader,
    validate_distribution_result,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "DistributionResultValidator",
    # Functions
    "validate_distribution_result",
]
