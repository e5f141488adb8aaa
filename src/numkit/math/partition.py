"""
Partition — функция разбиений p(n)

p(n) — число способов записать n суммой натуральных слагаемых
без учёта порядка. Считается по пентагональной теореме Эйлера:

    p(n) = Σₖ (-1)^(k+1) · [p(n - g(2k-1)) + p(n - g(2k))]

где g — обобщённые пятиугольные числа 1, 2, 5, 7, 12, 15, ...

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. p(0) == 1, p(n) == 0 для n < 0
2. Кэш вызывающего: cache[m] == 0 означает "не вычислено"
3. Вычисление снизу вверх, без рекурсии: верхней границы n нет
"""

from typing import MutableSequence

from numkit.math.figurate import general_pentagonal_number


def _euler_step(m: int, cache: MutableSequence[int]) -> int:
    total = 0
    k = 1
    pent = general_pentagonal_number(k)

    while pent <= m:
        # знаки идут парами: + + - - + + ...
        if (k - 1) & 0x03 < 2:
            total += cache[m - pent]
        else:
            total -= cache[m - pent]

        k += 1
        pent = general_pentagonal_number(k)

    return total


def partition_with_cache(n: int, cache: MutableSequence[int]) -> int:
    """
    p(n) с кэшем, которым владеет вызывающий код.

    Кэш заполняется значениями p(0..n); уже известные (ненулевые)
    значения не пересчитываются, поэтому один кэш можно
    передавать в серию вызовов.

    Args:
        n: Аргумент (n < 0 → 0)
        cache: Список длины >= n + 1, изначально нули

    Raises:
        ValueError: если len(cache) <= n

    Examples:
        >>> cache = [0] * 101
        >>> partition_with_cache(100, cache)
        190569292
        >>> cache[5]
        7
    """
    if n < 0:
        return 0
    if n == 0:
        return 1

    if len(cache) <= n:
        raise ValueError(f"cache must hold at least {n + 1} entries, got {len(cache)}")

    cache[0] = 1
    for m in range(1, n + 1):
        if cache[m] == 0:
            cache[m] = _euler_step(m, cache)

    return cache[n]


def partition(n: int) -> int:
    """
    p(n) со свежим кэшем.

    Examples:
        >>> [partition(n) for n in range(6)]
        [1, 1, 2, 3, 5, 7]
    """
    if n < 0:
        return 0

    return partition_with_cache(n, [0] * (n + 1))
