"""
Core math modules для numkit

Теория чисел и численный анализ: простые, факторизация, суммы делителей,
цепные дроби, фигурные числа, разбиения, производные и интегралы.
"""

# Numerical Safeguards
from numkit.math.numerical_safeguards import (
    FP_COMPARE_TOL,
    iroot,
    is_close,
    is_valid_float,
    round_half_away_from_zero,
    validate_int,
    validate_non_negative_int,
    validate_positive_int,
)

# Functions
from numkit.math.func import Function, ensure_function

# Primes
from numkit.math.prime import (
    S_SIEVE_SIZE,
    TRIAL_DIVISION_LIMIT,
    atkin,
    eratosthenes,
    factorize,
    factorize_with_primes,
    is_prime,
    iter_odd_primes,
    next_prime,
    nth_prime,
    prime_sieve,
    segmented_eratosthenes,
)

# Factor
from numkit.math.factor import (
    GOOD_BYTES,
    MAX_SMALL_NUM,
    coprime,
    factorization,
    gcd,
    gcd_all,
    lcm,
    lcm_all,
    perfect_cube,
    perfect_square,
    quick_factorize,
    quick_factorize_with_primes,
    rho,
)

# Aliquot
from numkit.math.aliquot import (
    SOCIABLE_MAX_STEPS,
    abundant_number,
    aliquot_profile,
    aliquot_sum,
    amicable_number,
    deficient_number,
    divisor_sum,
    perfect_number,
    quasiperfect_number,
    sociable_number,
    superperfect_number,
)

# Continued Fractions
from numkit.math.continued_fraction import (
    e,
    expand_float,
    expand_float_ntimes,
    expand_fraction,
    expand_fraction_ntimes,
    square_root,
    to_string,
)

# Calculus
from numkit.math.derivative import (
    EPSILON,
    concavity_at,
    derivative,
    nth_derivative,
    second_derivative,
    slope_at,
)
from numkit.math.integral import (
    DEFAULT_PRECISION,
    integral,
    integrate,
    integrate_with_precision,
    nth_integral,
)

# Figurate & Partition
from numkit.math.figurate import (
    centered_figurate,
    figurate,
    general_figurate,
    general_pentagonal_number,
    hexagonal_number,
    pentagonal_number,
    square_number,
    triangular_number,
)
from numkit.math.partition import partition, partition_with_cache

# Counting Functions
from numkit.math.prime_count import (
    PI_SYMBOL,
    PrimeCountConfig,
    PrimeCounter,
    prime_count,
    prime_count_all,
)
from numkit.math.totient import PHI_SYMBOL, totient, totient_all

__all__ = [
    # Numerical Safeguards
    "FP_COMPARE_TOL",
    "iroot",
    "is_close",
    "is_valid_float",
    "round_half_away_from_zero",
    "validate_int",
    "validate_non_negative_int",
    "validate_positive_int",
    # Functions
    "Function",
    "ensure_function",
    # Primes — Constants
    "S_SIEVE_SIZE",
    "TRIAL_DIVISION_LIMIT",
    # Primes — Sieves
    "atkin",
    "eratosthenes",
    "iter_odd_primes",
    "prime_sieve",
    "segmented_eratosthenes",
    # Primes — Functions
    "factorize",
    "factorize_with_primes",
    "is_prime",
    "next_prime",
    "nth_prime",
    # Factor — Constants
    "GOOD_BYTES",
    "MAX_SMALL_NUM",
    # Factor — Functions
    "coprime",
    "factorization",
    "gcd",
    "gcd_all",
    "lcm",
    "lcm_all",
    "perfect_cube",
    "perfect_square",
    "quick_factorize",
    "quick_factorize_with_primes",
    "rho",
    # Aliquot
    "SOCIABLE_MAX_STEPS",
    "abundant_number",
    "aliquot_profile",
    "aliquot_sum",
    "amicable_number",
    "deficient_number",
    "divisor_sum",
    "perfect_number",
    "quasiperfect_number",
    "sociable_number",
    "superperfect_number",
    # Continued Fractions
    "e",
    "expand_float",
    "expand_float_ntimes",
    "expand_fraction",
    "expand_fraction_ntimes",
    "square_root",
    "to_string",
    # Derivative
    "EPSILON",
    "concavity_at",
    "derivative",
    "nth_derivative",
    "second_derivative",
    "slope_at",
    # Integral
    "DEFAULT_PRECISION",
    "integral",
    "integrate",
    "integrate_with_precision",
    "nth_integral",
    # Figurate
    "centered_figurate",
    "figurate",
    "general_figurate",
    "general_pentagonal_number",
    "hexagonal_number",
    "pentagonal_number",
    "square_number",
    "triangular_number",
    # Partition
    "partition",
    "partition_with_cache",
    # Prime Count
    "PI_SYMBOL",
    "PrimeCountConfig",
    "PrimeCounter",
    "prime_count",
    "prime_count_all",
    # Totient
    "PHI_SYMBOL",
    "totient",
    "totient_all",
]
