"""
Contract Validation Module

Модуль для валидации JSON контрактов value objects numkit.
"""

from .validators import (
    AliquotProfileValidator,
    ContinuedFractionValidator,
    ContractValidator,
    FactorizationValidator,
    SchemaLoader,
    validate_aliquot_profile,
    validate_continued_fraction,
    validate_factorization,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "FactorizationValidator",
    "ContinuedFractionValidator",
    "AliquotProfileValidator",
    # Functions
    "validate_factorization",
    "validate_continued_fraction",
    "validate_aliquot_profile",
]
