"""
Domain models and value objects.

Immutable results of the numeric operations: factorizations,
continued fractions, aliquot profiles.
"""

from numkit.domain.aliquot import AliquotClass, AliquotProfile
from numkit.domain.continued_fraction import ContinuedFraction
from numkit.domain.factorization import Factorization

__all__ = [
    # Aliquot
    "AliquotClass",
    "AliquotProfile",
    # Continued fractions
    "ContinuedFraction",
    # Factorization
    "Factorization",
]
