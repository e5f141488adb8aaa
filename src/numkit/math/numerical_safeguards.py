"""
Numerical Safeguards — валидация аргументов и целочисленные примитивы

Модуль обеспечивает единые проверки входных данных для всех тематических
модулей библиотеки:
- Валидация целочисленных аргументов (неотрицательные / положительные)
- Сравнение float с абсолютной толерантностью
- Округление "half away from zero" (не банковское, как у round())
- Точный целочисленный корень k-й степени

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Невалидный аргумент никогда не доходит до алгоритма (ValueError/TypeError)
2. bool не принимается как int
3. iroot точен для произвольно больших int (без перехода через float)
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Абсолютная толерантность для сравнения оценок (производные, интегралы)
FP_COMPARE_TOL: Final[float] = 1e-3


# =============================================================================
# FLOAT
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное
    """
    return math.isfinite(value)


def is_close(a: float, b: float, tol: float = FP_COMPARE_TOL) -> bool:
    """
    Сравнение двух оценок с абсолютной толерантностью.

    Алгоритм:
        abs(a - b) < tol

    Args:
        a: Первое значение
        b: Второе значение
        tol: Абсолютная толерантность (default: FP_COMPARE_TOL)

    Returns:
        True если значения отличаются меньше чем на tol

    Examples:
        >>> is_close(1.0, 1.0005)
        True
        >>> is_close(1.0, 1.01)
        False
        >>> is_close(2.0, 2.05, tol=0.1)
        True
    """
    if tol <= 0:
        raise ValueError(f"tol must be positive, got {tol}")

    return abs(a - b) < tol


def round_half_away_from_zero(value: float) -> int:
    """
    Округление до ближайшего целого, половины — от нуля.

    Встроенный round() округляет половины к чётному: round(0.5) == 0.

    Examples:
        >>> round_half_away_from_zero(0.5)
        1
        >>> round_half_away_from_zero(2.4)
        2
        >>> round_half_away_from_zero(-2.5)
        -3
    """
    if not is_valid_float(value):
        raise ValueError(f"value must be a valid float (not NaN/Inf), got {value}")

    if value >= 0:
        return math.floor(value + 0.5)
    return math.ceil(value - 0.5)


# =============================================================================
# ВАЛИДАЦИЯ ЦЕЛЫХ
# =============================================================================


def _require_int(value: int, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")


def validate_int(value: int, name: str) -> int:
    """Валидация, что значение — целое любого знака (bool не допускается)."""
    _require_int(value, name)
    return value


def validate_non_negative_int(value: int, name: str) -> int:
    """
    Валидация, что значение — неотрицательное целое.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value без изменений

    Raises:
        TypeError: Если value не int (или bool)
        ValueError: Если value < 0
    """
    _require_int(value, name)

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")

    return value


def validate_positive_int(value: int, name: str) -> int:
    """
    Валидация, что значение — положительное целое.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value без изменений

    Raises:
        TypeError: Если value не int (или bool)
        ValueError: Если value <= 0
    """
    _require_int(value, name)

    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")

    return value


# =============================================================================
# ЦЕЛОЧИСЛЕННЫЕ КОРНИ
# =============================================================================


def iroot(n: int, k: int) -> int:
    """
    Целая часть корня k-й степени из n.

    Метод Ньютона в целых числах, начальное приближение сверху
    через битовую длину. Для k == 2 используется math.isqrt.

    Args:
        n: Неотрицательное целое
        k: Степень корня (>= 1)

    Returns:
        Наибольшее r такое, что r**k <= n

    Examples:
        >>> iroot(27, 3)
        3
        >>> iroot(26, 3)
        2
        >>> iroot(10**40, 4)
        10000000000
    """
    validate_non_negative_int(n, "n")
    validate_positive_int(k, "k")

    if k == 1 or n < 2:
        return n
    if k == 2:
        return math.isqrt(n)

    # 2**ceil(bits/k) >= n**(1/k)
    x = 1 << -(-n.bit_length() // k)
    while True:
        y = ((k - 1) * x + n // x ** (k - 1)) // k
        if y >= x:
            return x
        x = y
