"""
Continued Fraction — цепные дроби

Цепная дробь хранится списком неотрицательных целых [a0; a1, a2, ...].
Для бесконечных периодических дробей (квадратные корни) a1, a2, ...
образуют повторяющийся блок, для конечных — просто остальные члены.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. square_root() считается в целых числах (без float), период точный
2. expand_fraction_ntimes() возвращает несократимую дробь (h, k)
3. Пустая дробь и n == 0 → ValueError
"""

import math
from typing import Sequence

from numkit.math.numerical_safeguards import validate_non_negative_int, validate_positive_int

ContinuedFractionTerms = list[int]


# =============================================================================
# ГЕНЕРАЦИЯ
# =============================================================================


def square_root(x: int) -> ContinuedFractionTerms:
    """
    Периодическая цепная дробь для √x.

    Для полного квадрата возвращается [√x]. Иначе [a0; период],
    где период заканчивается членом 2·a0.

    Рекуррентность (все величины целые):
        m' = d·a - m
        d' = (x - m'^2) / d
        a' = (a0 + m') // d'

    Examples:
        >>> square_root(19)
        [4, 2, 1, 3, 1, 2, 8]
        >>> square_root(25)
        [5]
    """
    validate_non_negative_int(x, "x")

    a0 = math.isqrt(x)
    expansion = [a0]

    if a0 * a0 == x:
        return expansion

    m = 0
    d = 1
    a = a0
    end = 2 * a0

    while a != end:
        m = d * a - m
        d = (x - m * m) // d
        a = (a0 + m) // d
        expansion.append(a)

    return expansion


def e(n: int) -> ContinuedFractionTerms:
    """
    Первые n членов цепной дроби числа e.

    Общий вид: e = [2; 1, 2, 1, 1, 4, 1, 1, 6, ...]

    Raises:
        ValueError: если n == 0

    Examples:
        >>> e(4)
        [2, 1, 2, 1]
        >>> e(8)
        [2, 1, 2, 1, 1, 4, 1, 1]
    """
    validate_positive_int(n, "n")

    terms = [2]
    even = 2
    for i in range(n - 1):
        if i % 3 == 1:
            terms.append(even)
            even += 2
        else:
            terms.append(1)

    return terms


# =============================================================================
# РАЗВЁРТКА
# =============================================================================


def _unroll(fraction: Sequence[int], n: int) -> list[int]:
    if not fraction:
        raise ValueError("cannot expand empty continued fraction")
    validate_positive_int(n, "n")

    return list(fraction) + list(fraction[1:]) * (n - 1)


def expand_fraction_ntimes(fraction: Sequence[int], n: int) -> tuple[int, int]:
    """
    Значение цепной дроби, хвост которой повторён n раз, как (h, k).

    Конечные дроби разворачиваются с n = 1, бесконечные —
    с n, достаточным для нужной точности.

    Последний член учитывается ровно один раз, поэтому результат равен
    значению развёрнутой дроби: expand_fraction([2, 1]) == (3, 1),
    expand_fraction_ntimes([1, 2], 3) == (17, 12). Реализации, которые
    прибавляют последний член дважды, дают здесь (5, 2) и (41, 29).

    Args:
        fraction: Члены [a0; a1, ...]
        n: Число повторений хвоста (>= 1)

    Returns:
        (числитель, знаменатель), несократимая дробь

    Raises:
        ValueError: пустая дробь или n == 0

    Examples:
        >>> expand_fraction_ntimes([1, 2], 3)
        (17, 12)
        >>> expand_fraction_ntimes([14], 2)
        (14, 1)
    """
    terms = _unroll(fraction, n)

    num = terms[-1]
    den = 1
    for term in reversed(terms[:-1]):
        num, den = term * num + den, num

    return num, den


def expand_fraction(fraction: Sequence[int]) -> tuple[int, int]:
    """
    expand_fraction_ntimes(fraction, 1).

    Examples:
        >>> expand_fraction([2, 1])
        (3, 1)
        >>> expand_fraction([1, 2, 2])
        (7, 5)
    """
    return expand_fraction_ntimes(fraction, 1)


def expand_float_ntimes(fraction: Sequence[int], n: int) -> float:
    """
    Значение цепной дроби (хвост повторён n раз) как float.

    Числитель и знаменатель считаются точно, деление одно.

    Examples:
        >>> expand_float_ntimes([1, 2], 1)
        1.5
    """
    num, den = expand_fraction_ntimes(fraction, n)
    return num / den


def expand_float(fraction: Sequence[int]) -> float:
    """expand_float_ntimes(fraction, 1)"""
    return expand_float_ntimes(fraction, 1)


def to_string(fraction: Sequence[int]) -> str:
    """
    Запись цепной дроби в виде "[a0; a1, a2, ...]".

    Examples:
        >>> to_string([1, 2, 3, 4])
        '[1; 2, 3, 4]'
        >>> to_string([17])
        '[17]'
        >>> to_string([])
        '[]'
    """
    if not fraction:
        return "[]"

    head = str(fraction[0])
    if len(fraction) == 1:
        return f"[{head}]"

    tail = ", ".join(str(term) for term in fraction[1:])
    return f"[{head}; {tail}]"
