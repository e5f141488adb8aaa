"""
Тесты для модуля Derivative

Проверяет оценки первой и второй производных центральными разностями,
slope_at / concavity_at и согласованность помощников.
"""

import math

import pytest

from numkit.math.derivative import (
    EPSILON,
    concavity_at,
    derivative,
    nth_derivative,
    second_derivative,
    slope_at,
)
from numkit.math.numerical_safeguards import is_close


def cubic(x: float) -> float:
    return x * x * x + 5.0


def square(x: float) -> float:
    return x * x


class TestNthDerivative:
    """Тесты для nth_derivative"""

    def test_epsilon(self) -> None:
        assert EPSILON == 5.0e-7

    def test_zero_order_returns_function(self) -> None:
        assert nth_derivative(0, cubic) is cubic

    def test_first_derivative(self) -> None:
        f_deriv = derivative(cubic)
        assert is_close(f_deriv(0.0), 0.0, 0.001)
        assert is_close(f_deriv(4.0), 48.0, 0.001)
        assert is_close(f_deriv(-2.0), 12.0, 0.001)

    def test_second_derivative(self) -> None:
        f_s_deriv = second_derivative(cubic)
        assert is_close(f_s_deriv(0.0), 0.0, 0.1)
        assert is_close(f_s_deriv(4.0), 24.0, 0.1)
        assert is_close(f_s_deriv(-2.0), -12.0, 0.1)

    def test_helpers_match_nth(self) -> None:
        for x in (0.0, 10.4, 56.8):
            assert derivative(square)(x) == nth_derivative(1, square)(x)
            assert second_derivative(square)(x) == nth_derivative(2, square)(x)

    def test_transcendental(self) -> None:
        assert derivative(math.sin)(1.0) == pytest.approx(math.cos(1.0), abs=1e-6)
        assert derivative(math.exp)(0.0) == pytest.approx(1.0, abs=1e-6)

    def test_not_callable_rejected(self) -> None:
        with pytest.raises(TypeError, match="f must be callable"):
            derivative(5)  # type: ignore[arg-type]

    def test_negative_order_rejected(self) -> None:
        with pytest.raises(ValueError):
            nth_derivative(-1, square)


class TestSlopeAndConcavity:
    """Тесты для slope_at / concavity_at"""

    def test_slope_matches_derivative(self) -> None:
        f_deriv = derivative(square)
        for x in (0.0, 10.4, 56.8):
            assert f_deriv(x) == slope_at(square, x)

    def test_slope_values(self) -> None:
        assert is_close(slope_at(cubic, 4.0), 48.0)
        assert is_close(slope_at(square, -3.0), -6.0)

    def test_concavity_of_square(self) -> None:
        assert is_close(concavity_at(square, 0.0), 2.0, 0.1)
        assert is_close(concavity_at(square, 1.5), 2.0, 0.1)

    def test_concavity_sign(self) -> None:
        assert concavity_at(cubic, 2.0) > 0
        assert concavity_at(cubic, -2.0) < 0
