"""
Тесты для модуля Continued Fraction

Проверяет:
1. Периодические разложения квадратных корней (точная арифметика)
2. Цепную дробь числа e
3. Развёртку в обыкновенную дробь и float
4. Форматирование
"""

import math

import pytest

from numkit.math.continued_fraction import (
    e,
    expand_float,
    expand_float_ntimes,
    expand_fraction,
    expand_fraction_ntimes,
    square_root,
    to_string,
)

# =============================================================================
# ГЕНЕРАЦИЯ
# =============================================================================


class TestSquareRoot:
    """Тесты для square_root"""

    def test_perfect_squares(self) -> None:
        assert square_root(0) == [0]
        assert square_root(1) == [1]
        assert square_root(4) == [2]
        assert square_root(25) == [5]

    def test_periodic_expansions(self) -> None:
        assert square_root(2) == [1, 2]
        assert square_root(5) == [2, 4]
        assert square_root(10) == [3, 6]
        assert square_root(14) == [3, 1, 2, 1, 6]
        assert square_root(17) == [4, 8]
        assert square_root(19) == [4, 2, 1, 3, 1, 2, 8]
        assert square_root(20) == [4, 2, 8]

    def test_period_ends_with_double_first_term(self) -> None:
        for x in range(2, 200):
            terms = square_root(x)
            if len(terms) > 1:
                assert terms[-1] == 2 * terms[0], x

    def test_beyond_float_precision(self) -> None:
        """n^2 + 1 → [n; 2n] даже когда n^2 не помещается в float"""
        n = 10**20
        assert square_root(n * n + 1) == [n, 2 * n]


class TestE:
    """Тесты для e"""

    def test_prefixes(self) -> None:
        assert e(1) == [2]
        assert e(2) == [2, 1]
        assert e(3) == [2, 1, 2]
        assert e(4) == [2, 1, 2, 1]
        assert e(10) == [2, 1, 2, 1, 1, 4, 1, 1, 6, 1]

    def test_zero_terms_rejected(self) -> None:
        with pytest.raises(ValueError, match="n must be positive"):
            e(0)


# =============================================================================
# РАЗВЁРТКА
# =============================================================================


class TestExpandFraction:
    """Тесты для expand_fraction_ntimes / expand_fraction"""

    def test_single_term(self) -> None:
        assert expand_fraction_ntimes(square_root(4), 1) == (2, 1)
        assert expand_fraction_ntimes([14], 2) == (14, 1)
        assert expand_fraction([3]) == (3, 1)

    def test_sqrt2_convergents(self) -> None:
        """Подходящие дроби √2: 3/2, 7/5, 17/12, 41/29"""
        assert expand_fraction_ntimes(square_root(2), 1) == (3, 2)
        assert expand_fraction_ntimes(square_root(2), 2) == (7, 5)
        assert expand_fraction_ntimes(square_root(2), 3) == (17, 12)
        assert expand_fraction_ntimes(square_root(2), 4) == (41, 29)

    def test_sqrt5_convergent(self) -> None:
        assert expand_fraction_ntimes(square_root(5), 1) == (9, 4)
        assert expand_fraction_ntimes(square_root(5), 2) == (38, 17)

    def test_finite_fraction(self) -> None:
        assert expand_fraction([2, 1]) == (3, 1)
        assert expand_fraction([1, 2, 2]) == (7, 5)
        assert expand_fraction([0, 1, 5, 2, 2]) == (27, 32)

    def test_result_is_reduced(self) -> None:
        num, den = expand_fraction(e(15))
        assert math.gcd(num, den) == 1

    def test_empty_rejected(self) -> None:
        with pytest.raises(ValueError, match="empty continued fraction"):
            expand_fraction([])

    def test_zero_times_rejected(self) -> None:
        with pytest.raises(ValueError, match="n must be positive"):
            expand_fraction_ntimes([1, 2], 0)


class TestExpandFloat:
    """Тесты для expand_float_ntimes / expand_float"""

    def test_known_values(self) -> None:
        assert expand_float_ntimes(square_root(4), 1) == 2.0
        assert expand_float_ntimes(square_root(2), 1) == 1.5
        assert expand_float(square_root(5)) == 2.25
        assert expand_float([14]) == 14.0

    def test_converges_to_sqrt(self) -> None:
        assert expand_float_ntimes(square_root(2), 20) == pytest.approx(math.sqrt(2), abs=1e-12)
        assert expand_float_ntimes(square_root(19), 10) == pytest.approx(math.sqrt(19), abs=1e-9)

    def test_converges_to_e(self) -> None:
        assert expand_float(e(20)) == pytest.approx(math.e, abs=1e-12)

    def test_empty_rejected(self) -> None:
        with pytest.raises(ValueError):
            expand_float([])


class TestToString:
    """Тесты для to_string"""

    def test_formats(self) -> None:
        assert to_string([]) == "[]"
        assert to_string([17]) == "[17]"
        assert to_string([1, 2, 3]) == "[1; 2, 3]"
        assert to_string(square_root(19)) == "[4; 2, 1, 3, 1, 2, 8]"
