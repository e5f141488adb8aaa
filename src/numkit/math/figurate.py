"""
Figurate — фигурные числа

Обычные, обобщённые и центрированные s-угольные числа
и частные случаи (треугольные, квадратные, пятиугольные, шестиугольные).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Число сторон s >= 3, иначе ValueError
2. Результаты — точные целые (n·(n-1) всегда чётно)
"""

from numkit.math.numerical_safeguards import validate_int, validate_non_negative_int


def _validate_sides(s: int) -> None:
    validate_int(s, "s")
    if s < 3:
        raise ValueError(f"s must be >= 3 sides, got {s}")


def figurate(s: int, n: int) -> int:
    """
    n-е s-угольное число.

    Формула:
        P(s, n) = (s - 2)·n·(n - 1)/2 + n

    Допускается отрицательное n (используется в general_figurate()).

    Raises:
        TypeError: если s или n не int
        ValueError: если s < 3

    Examples:
        >>> figurate(3, 10)
        55
        >>> figurate(5, 10)
        145
    """
    _validate_sides(s)
    validate_int(n, "n")
    return (s - 2) * n * (n - 1) // 2 + n


def general_figurate(s: int, k: int) -> int:
    """
    k-е обобщённое s-угольное число.

    Индексы P(s, m) перебираются в порядке m = 0, 1, -1, 2, -2, ...

    Raises:
        ValueError: если s < 3 или k < 0

    Examples:
        >>> [general_figurate(5, k) for k in range(7)]
        [0, 1, 2, 5, 7, 12, 15]
    """
    validate_non_negative_int(k, "k")

    if k % 2 == 1:
        m = (k + 1) // 2
    else:
        m = -(k // 2)

    return figurate(s, m)


def centered_figurate(s: int, n: int) -> int:
    """
    n-е центрированное s-угольное число.

    Формула:
        C(s, n) = s·n·(n - 1)/2 + 1

    Examples:
        >>> centered_figurate(3, 4)
        19
        >>> centered_figurate(7, 4)
        43
    """
    _validate_sides(s)
    validate_int(n, "n")
    return s * n * (n - 1) // 2 + 1


def triangular_number(n: int) -> int:
    return figurate(3, n)


def square_number(n: int) -> int:
    return figurate(4, n)


def pentagonal_number(n: int) -> int:
    return figurate(5, n)


def hexagonal_number(n: int) -> int:
    return figurate(6, n)


def general_pentagonal_number(k: int) -> int:
    """Обобщённые пятиугольные числа: 0, 1, 2, 5, 7, 12, 15, ..."""
    return general_figurate(5, k)
