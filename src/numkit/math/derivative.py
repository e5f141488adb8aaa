"""
Derivative — численное дифференцирование

Оценка производных центральными разностями с шагом EPSILON,
наклон и выпуклость функции в точке.
"""

from typing import Final

from numkit.math.func import Function, ensure_function
from numkit.math.numerical_safeguards import validate_non_negative_int

# Шаг центральной разности h
EPSILON: Final[float] = 5.0e-7


def _central_difference(f: Function) -> Function:
    def derived(x: float) -> float:
        return (f(x + EPSILON) - f(x - EPSILON)) / (EPSILON * 2.0)

    return derived


def nth_derivative(n: int, f: Function) -> Function:
    """
    Оценка n-й производной f.

    Центральная разность (f(x+h) - f(x-h)) / 2h применяется n раз.
    Ошибка округления растёт с n: на практике разумно n <= 2.

    Args:
        n: Порядок производной (0 → сама f)
        f: Дифференцируемая функция

    Returns:
        Функция x → f^(n)(x)

    Examples:
        >>> d = nth_derivative(1, lambda x: x * x)
        >>> round(d(3.0), 3)
        6.0
    """
    validate_non_negative_int(n, "n")
    ensure_function(f)

    result = f
    for _ in range(n):
        result = _central_difference(result)

    return result


def derivative(f: Function) -> Function:
    """Первая производная: nth_derivative(1, f)"""
    return nth_derivative(1, f)


def second_derivative(f: Function) -> Function:
    """Вторая производная: nth_derivative(2, f)"""
    return nth_derivative(2, f)


def slope_at(f: Function, x: float) -> float:
    """
    Наклон f в точке x (центральная разность).

    Совпадает с derivative(f)(x).
    """
    ensure_function(f)
    return (f(x + EPSILON) - f(x - EPSILON)) / (EPSILON * 2.0)


def concavity_at(f: Function, x: float) -> float:
    """
    Выпуклость f в точке x: оценка второй производной.

    Формула:
        (f(x + 2h) - 2·f(x) + f(x - 2h)) / 4h^2
    """
    ensure_function(f)
    return (f(x + EPSILON * 2.0) - f(x) * 2.0 + f(x - EPSILON * 2.0)) / (
        EPSILON * 4.0 * EPSILON
    )
