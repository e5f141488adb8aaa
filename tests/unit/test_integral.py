"""
Тесты для модуля Integral

Проверяет:
1. Формулу Симпсона (точность, знак при b < a, вырожденные интервалы)
2. Выбор числа подынтервалов в integrate()
3. Первообразные nth_integral / integral
"""

import math

import pytest

from numkit.math.integral import (
    DEFAULT_PRECISION,
    integral,
    integrate,
    integrate_with_precision,
    nth_integral,
)
from numkit.math.numerical_safeguards import is_close


def square(x: float) -> float:
    return x * x


# =============================================================================
# ОПРЕДЕЛЁННЫЙ ИНТЕГРАЛ
# =============================================================================


class TestIntegrateWithPrecision:
    """Тесты для integrate_with_precision"""

    def test_degenerate_cases(self) -> None:
        assert integrate_with_precision(square, 1.0, 1.0, 10) == 0.0
        assert integrate_with_precision(square, 0.0, 1.0, 0) == 0.0

    def test_exact_for_cubics(self) -> None:
        """При чётном p формула Симпсона точна для многочленов степени <= 3"""
        result = integrate_with_precision(lambda x: x**3 - 2 * x + 1, 0.0, 2.0, 2)
        assert result == pytest.approx(2.0)

    def test_infinite_limits_rejected(self) -> None:
        with pytest.raises(ValueError, match="integration limits must be finite"):
            integrate_with_precision(square, 0.0, math.inf, 4)


class TestIntegrate:
    """Тесты для integrate"""

    def test_default_precision(self) -> None:
        assert DEFAULT_PRECISION == 4

    def test_square(self) -> None:
        assert is_close(integrate(square, 0.0, 0.0), 0.0)
        assert is_close(integrate(square, -1.0, 1.0), 2.0 / 3.0)
        assert is_close(integrate(square, 0.0, 1.0), 1.0 / 3.0)
        assert is_close(integrate(square, -1.0, 0.0), 1.0 / 3.0)
        assert is_close(integrate(square, 1.0, 0.0), -1.0 / 3.0)

    def test_symmetry(self) -> None:
        assert integrate(square, 0.0, 1000.0) == pytest.approx(integrate(square, -1000.0, 0.0))
        assert integrate(square, 13.0, 0.0) == pytest.approx(-integrate(square, 0.0, 13.0))

    def test_short_interval(self) -> None:
        """Интервал короче 0.5 всё равно получает подынтервалы"""
        assert integrate(square, 0.0, 0.25) == pytest.approx(0.25**3 / 3.0)

    def test_sine(self) -> None:
        assert is_close(integrate(math.sin, 0.0, math.pi), 2.0)


# =============================================================================
# ПЕРВООБРАЗНЫЕ
# =============================================================================


class TestNthIntegral:
    """Тесты для nth_integral / integral"""

    def test_first_integral(self) -> None:
        f_int = nth_integral(1, square, 0.0, 2)
        assert is_close(f_int(0.0), 0.0)
        assert is_close(f_int(1.0), 1.0 / 3.0)
        assert is_close(f_int(-1.0), -1.0 / 3.0)

    def test_integration_constant(self) -> None:
        f_int = integral(square, 1.0, 2)
        assert is_close(f_int(0.0), 1.0)
        assert is_close(f_int(1.0), 4.0 / 3.0)
        assert is_close(f_int(-1.0), 2.0 / 3.0)

    def test_second_integral(self) -> None:
        f_int = nth_integral(2, square, 0.0, 2)
        assert is_close(f_int(0.0), 0.0)
        assert is_close(f_int(1.0), 1.0 / 12.0)
        assert is_close(f_int(-1.0), 1.0 / 12.0)

    def test_zero_order_returns_function(self) -> None:
        assert nth_integral(0, square, 0.0, 2) is square

    def test_zero_precision_rejected(self) -> None:
        with pytest.raises(ValueError, match="p must be positive"):
            nth_integral(1, square, 1.0, 0)
