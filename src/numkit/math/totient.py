"""
Totient — функция Эйлера φ(n)

φ(n) — количество k в [1, n], взаимно простых с n.

Формула Эйлера по различным простым делителям p | n:
    φ(n) = n · Π (1 - 1/p)

Произведение считается в целых числах: n // p * (p - 1) на каждом шаге
делится нацело, поэтому результат точный для любого n.
"""

from typing import Final, Iterable, Optional, Sequence

from numkit.math.factor import MAX_SMALL_NUM, quick_factorize_with_primes
from numkit.math.numerical_safeguards import validate_non_negative_int
from numkit.math.prime import is_prime, prime_sieve

PHI_SYMBOL: Final[str] = "φ"


def _totient_shortcut(n: int) -> Optional[int]:
    validate_non_negative_int(n, "n")

    if n <= 2:
        return 1
    if is_prime(n):
        return n - 1
    return None


def _totient_with_primes(n: int, small_primes: Sequence[int]) -> int:
    result = n
    for p in sorted(set(quick_factorize_with_primes(n, small_primes))):
        result = result // p * (p - 1)

    return result


def totient(n: int) -> int:
    """
    φ(n).

    Для n <= 2 возвращается 1 (в том числе totient(0) == 1).
    Малые простые просеиваются только для составных n.

    Examples:
        >>> totient(9)
        6
        >>> totient(99)
        60
    """
    shortcut = _totient_shortcut(n)
    if shortcut is not None:
        return shortcut

    return _totient_with_primes(n, prime_sieve(MAX_SMALL_NUM))


def totient_all(values: Iterable[int]) -> list[int]:
    """
    φ для каждого значения с одним общим списком малых простых.

    Все значения проверяются до просеивания.

    Examples:
        >>> totient_all([10, 20, 30, 40])
        [4, 8, 8, 16]
    """
    values = list(values)
    shortcuts = [_totient_shortcut(n) for n in values]
    if all(s is not None for s in shortcuts):
        return shortcuts

    small_primes = prime_sieve(MAX_SMALL_NUM)
    return [
        s if s is not None else _totient_with_primes(n, small_primes)
        for n, s in zip(values, shortcuts)
    ]
