"""
Integral — численное интегрирование

Составная формула Симпсона и построение первообразных.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. a == b или p == 0 → 0.0
2. integrate(f, b, a) == -integrate(f, a, b)
3. Точность растёт с длиной интервала: p = max(1, round(|b - a|)) * DEFAULT_PRECISION
"""

import logging
from typing import Final

from numkit.math.func import Function, ensure_function
from numkit.math.numerical_safeguards import (
    is_valid_float,
    round_half_away_from_zero,
    validate_non_negative_int,
    validate_positive_int,
)

logger = logging.getLogger(__name__)

# Подынтервалов на единицу длины интервала
DEFAULT_PRECISION: Final[int] = 4


# =============================================================================
# ОПРЕДЕЛЁННЫЙ ИНТЕГРАЛ
# =============================================================================


def integrate_with_precision(f: Function, a: float, b: float, p: int) -> float:
    """
    ∫ₐᵇ f(x) dx по составной формуле Симпсона с p подынтервалами.

    Формула (δ = (b - a) / p, xᵢ = a + i·δ):
        δ/3 · [f(x₀) + 4f(x₁) + 2f(x₂) + 4f(x₃) + ... + f(xₚ)]

    Для многочленов до третьей степени при чётном p результат точный.

    Args:
        f: Интегрируемая функция
        a: Нижний предел
        b: Верхний предел (b < a даёт интеграл со знаком минус)
        p: Число подынтервалов

    Returns:
        Оценка интеграла; 0.0 если a == b или p == 0

    Raises:
        ValueError: если a или b NaN/Inf

    Examples:
        >>> round(integrate_with_precision(lambda x: x * x, 0.0, 3.0, 6), 9)
        9.0
    """
    ensure_function(f)
    validate_non_negative_int(p, "p")

    if not is_valid_float(a) or not is_valid_float(b):
        raise ValueError(f"integration limits must be finite, got a={a}, b={b}")

    if a == b or p == 0:
        return 0.0

    delta = (b - a) / p

    total = f(a) + f(b)
    for i in range(1, p):
        weight = 2.0 if i % 2 == 0 else 4.0
        total += weight * f(a + i * delta)

    return total * delta / 3.0


def integrate(f: Function, a: float, b: float) -> float:
    """
    ∫ₐᵇ f(x) dx с точностью по умолчанию.

    Число подынтервалов: max(1, round(|b - a|)) * DEFAULT_PRECISION.

    Examples:
        >>> round(integrate(lambda x: x * x, 0.0, 1.0), 6)
        0.333333
    """
    p = max(1, round_half_away_from_zero(abs(b - a))) * DEFAULT_PRECISION
    logger.debug("integrate over [%s, %s] with %d subintervals", a, b, p)

    return integrate_with_precision(f, a, b, p)


# =============================================================================
# ПЕРВООБРАЗНЫЕ
# =============================================================================


def _antiderivative(f: Function, c: float, p: int) -> Function:
    def integrated(x: float) -> float:
        precision = max(1, round_half_away_from_zero(abs(x))) * p
        return integrate_with_precision(f, 0.0, x, precision) + c

    return integrated


def nth_integral(n: int, f: Function, c: float, p: int) -> Function:
    """
    n-кратная первообразная f.

    Каждый шаг строит g(x) = ∫₀ˣ f(t) dt + c, интеграл считается
    с max(1, round(|x|)) * p подынтервалами. Константа c
    добавляется на каждом шаге.

    ВАЖНО: стоимость вычисления растёт экспоненциально с n,
    так как каждый уровень вызывает предыдущий p раз.

    Args:
        n: Кратность (0 → сама f)
        f: Интегрируемая функция
        c: Константа интегрирования
        p: Подынтервалов на единицу длины (> 0)

    Raises:
        ValueError: если p == 0

    Examples:
        >>> g = nth_integral(1, lambda x: x * x, 0.0, 2)
        >>> round(g(1.0), 6)
        0.333333
    """
    validate_non_negative_int(n, "n")
    validate_positive_int(p, "p")
    ensure_function(f)

    result = f
    for _ in range(n):
        result = _antiderivative(result, c, p)

    return result


def integral(f: Function, c: float, p: int) -> Function:
    """Первообразная: nth_integral(1, f, c, p)"""
    return nth_integral(1, f, c, p)
