"""
Aliquot — суммы делителей и классификация чисел

Модуль содержит:
- Аликвотную сумму s(n) (сумма собственных делителей) и сумму делителей σ(n)
- Предикаты: избыточные, совершенные, недостаточные, суперсовершенные,
  квазисовершенные, дружественные и компанейские (sociable) числа

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все функции определены только для n >= 1 (n == 0 → ValueError)
2. aliquot_sum(1) == 0, divisor_sum(n) == aliquot_sum(n) + n
3. sociable_number() всегда завершается (детекция цикла + лимит шагов)
"""

import logging
import math
from typing import Final

from numkit.domain.aliquot import AliquotClass, AliquotProfile
from numkit.math.numerical_safeguards import validate_non_negative_int, validate_positive_int

logger = logging.getLogger(__name__)

# Максимальная длина аликвотной последовательности в sociable_number().
# Известные циклы компанейских чисел короче 30 звеньев.
SOCIABLE_MAX_STEPS: Final[int] = 1_000


# =============================================================================
# СУММЫ ДЕЛИТЕЛЕЙ
# =============================================================================


def aliquot_sum(n: int) -> int:
    """
    Аликвотная сумма n: сумма всех собственных делителей.

    Делители перебираются до isqrt(n) парами (i, n // i).

    Args:
        n: Положительное целое

    Returns:
        s(n); для n == 1 возвращается 0

    Raises:
        ValueError: если n == 0

    Examples:
        >>> aliquot_sum(28)
        28
        >>> aliquot_sum(29)
        1
    """
    validate_positive_int(n, "n")

    if n == 1:
        return 0

    total = 1
    for i in range(2, math.isqrt(n) + 1):
        if n % i == 0:
            total += i
            if n // i != i:
                total += n // i

    return total


def divisor_sum(n: int) -> int:
    """
    Сумма всех делителей n: σ(n) = s(n) + n.

    Examples:
        >>> divisor_sum(28)
        56
        >>> divisor_sum(29)
        30
    """
    return aliquot_sum(n) + n


# =============================================================================
# КЛАССИФИКАЦИЯ
# =============================================================================


def abundant_number(n: int) -> bool:
    """
    True если n избыточное: s(n) > n.

    Examples:
        >>> abundant_number(24)
        True
        >>> abundant_number(28)
        False
    """
    return aliquot_sum(n) > n


def perfect_number(n: int) -> bool:
    """
    True если n совершенное: s(n) == n.

    Examples:
        >>> perfect_number(6)
        True
        >>> perfect_number(8)
        False
    """
    return aliquot_sum(n) == n


def deficient_number(n: int) -> bool:
    """
    True если n недостаточное: s(n) < n.

    Examples:
        >>> deficient_number(7)
        True
        >>> deficient_number(28)
        False
    """
    return aliquot_sum(n) < n


def superperfect_number(n: int) -> bool:
    """
    True если n суперсовершенное: σ(σ(n)) == 2n.

    Examples:
        >>> superperfect_number(4)
        True
        >>> superperfect_number(5)
        False
    """
    return divisor_sum(divisor_sum(n)) == 2 * n


def quasiperfect_number(n: int) -> bool:
    """
    True если n квазисовершенное: s(n) == n + 1.

    Ни одного квазисовершенного числа не известно.

    Examples:
        >>> quasiperfect_number(28)
        False
    """
    return aliquot_sum(n) == n + 1


def amicable_number(n: int) -> bool:
    """
    True если n дружественное: s(s(n)) == n.

    Совершенные числа тоже проходят проверку (дружественны сами себе).
    Для n == 1 возвращается False: s(1) == 0, а s(0) не определена.

    Examples:
        >>> amicable_number(220)
        True
        >>> amicable_number(221)
        False
    """
    first = aliquot_sum(n)
    if first == 0:
        return False

    return aliquot_sum(first) == n


def sociable_number(n: int, max_steps: int = SOCIABLE_MAX_STEPS) -> bool:
    """
    True если аликвотная последовательность, начатая с n, возвращается в n.

    Последовательность n → s(n) → s(s(n)) → ... обрывается, если:
        - дошла до n (True)
        - дошла до 1 (дальше s(0) не определена) → False
        - зациклилась без n (например 25 → 6 → 6 ...) → False
        - превысила max_steps шагов → False + warning в лог

    Совершенные и дружественные числа — частный случай (цикл длины 1 и 2).

    Args:
        n: Положительное целое
        max_steps: Лимит длины последовательности

    Examples:
        >>> sociable_number(14316)
        True
        >>> sociable_number(25)
        False
    """
    validate_positive_int(n, "n")
    validate_non_negative_int(max_steps, "max_steps")

    seen: set[int] = set()
    current = n

    for _ in range(max_steps):
        current = aliquot_sum(current)

        if current == n:
            return True
        if current <= 1 or current in seen:
            return False

        seen.add(current)

    logger.warning(
        "sociable_number(%d): aliquot sequence did not close within %d steps", n, max_steps
    )
    return False


def aliquot_profile(n: int) -> AliquotProfile:
    """
    Профиль n: аликвотная сумма и класс (deficient / perfect / abundant).

    Examples:
        >>> aliquot_profile(12).classification.value
        'abundant'
    """
    total = aliquot_sum(n)
    return AliquotProfile(
        value=n,
        aliquot_sum=total,
        classification=AliquotClass.classify(n, total),
    )
