"""
Factor — целочисленная факторизация, НОД/НОК, полные степени

Модуль содержит:
- НОД (алгоритм Евклида) и НОК для пар и наборов чисел
- Проверки на полный квадрат и полный куб
- Ро-метод Полларда в модификации Брента
- Быструю факторизацию: trial division для малых, rho для больших

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Произведение множителей quick_factorize(n) равно n (n >= 2)
2. Каждый множитель простой, список отсортирован
3. quick_factorize(0) == quick_factorize(1) == []
"""

import logging
import math
from typing import Final, Iterable, Sequence

from numkit.domain.factorization import Factorization
from numkit.math.numerical_safeguards import iroot, validate_non_negative_int
from numkit.math.prime import factorize_with_primes, is_prime, prime_sieve

logger = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Наибольшее "малое" значение: всё меньше раскладывается перебором.
# Также верхняя граница списка малых простых в quick_factorize().
MAX_SMALL_NUM: Final[int] = 65_536

# Младшие байты, которые может иметь полный квадрат (квадратичные вычеты mod 256)
_SQUARE_RESIDUES_MOD_256: Final[frozenset[int]] = frozenset(x * x & 0xFF for x in range(256))
GOOD_BYTES: Final[tuple[bool, ...]] = tuple(b in _SQUARE_RESIDUES_MOD_256 for b in range(256))

# Цифровые корни полных кубов
_CUBE_DIGITAL_ROOTS: Final[frozenset[int]] = frozenset({1, 8, 9})


# =============================================================================
# НОД / НОК
# =============================================================================


def gcd(a: int, b: int) -> int:
    """
    НОД a и b, алгоритм Евклида.

    Возвращает 0, если оба аргумента равны нулю.

    Examples:
        >>> gcd(76, 54)
        2
        >>> gcd(18, 24)
        6
    """
    validate_non_negative_int(a, "a")
    validate_non_negative_int(b, "b")

    while b:
        a, b = b, a % b

    return a


def gcd_all(values: Iterable[int]) -> int:
    """
    НОД набора чисел.

    НОД коммутативен и ассоциативен, поэтому считается сверткой
    с накопленным значением. Для пустого набора возвращает 0.

    Examples:
        >>> gcd_all([16, 4, 32])
        4
        >>> gcd_all([3, 10, 18])
        1
    """
    result = 0
    for value in values:
        result = gcd(value, result)

    return result


def coprime(a: int, b: int) -> bool:
    """
    True если a и b взаимно просты (gcd(a, b) == 1).

    Examples:
        >>> coprime(8, 4)
        False
        >>> coprime(9, 8)
        True
    """
    return gcd(a, b) == 1


def lcm(a: int, b: int) -> int:
    """
    НОК a и b.

    Формула:
        lcm(a, b) = a * b / gcd(a, b)

    Если оба аргумента нулевые, возвращается 0.

    Examples:
        >>> lcm(5, 2)
        10
        >>> lcm(0, 15)
        0
    """
    divisor = gcd(a, b)
    if divisor == 0:
        return 0

    return a * b // divisor


def lcm_all(values: Iterable[int]) -> int:
    """
    НОК набора чисел, свёрткой. Для пустого набора возвращает 1.

    Examples:
        >>> lcm_all([8, 9, 21])
        504
        >>> lcm_all([4, 7, 12, 21, 42])
        84
    """
    result = 1
    for value in values:
        result = lcm(value, result)

    return result


# =============================================================================
# ПОЛНЫЕ СТЕПЕНИ
# =============================================================================


def perfect_square(n: int) -> bool:
    """
    True если n — полный квадрат.

    Сначала младший байт n проверяется по таблице GOOD_BYTES: большинство
    не-квадратов отсекается без извлечения корня. Затем точная проверка
    через math.isqrt.

    Examples:
        >>> perfect_square(435)
        False
        >>> perfect_square(81)
        True
    """
    validate_non_negative_int(n, "n")

    if not GOOD_BYTES[n & 0xFF]:
        return False

    root = math.isqrt(n)
    return root * root == n


def perfect_cube(n: int) -> bool:
    """
    True если n — полный куб.

    Цифровой корень куба всегда 1, 8 или 9; остальные n отсекаются
    без извлечения корня. Затем точная проверка целочисленным
    кубическим корнем.

    Examples:
        >>> perfect_cube(216)
        True
        >>> perfect_cube(9)
        False
    """
    validate_non_negative_int(n, "n")

    if n == 0:
        return True

    digital_root = 1 + (n - 1) % 9
    if digital_root not in _CUBE_DIGITAL_ROOTS:
        return False

    root = iroot(n, 3)
    return root * root * root == n


# =============================================================================
# POLLARD RHO (BRENT)
# =============================================================================


def rho(value: int, entropy: int) -> int:
    """
    Попытка выделить нетривиальный делитель value.

    Ро-метод Полларда в модификации Брента; entropy задаёт
    константу полинома x^2 + c, стартовую точку и размер батча.

    Функция используется внутри quick_factorize() для "больших" значений
    и сама по себе мало полезна.

    Args:
        value: Составное число для разложения
        entropy: Seed; при неудаче вызывающий код пробует следующий

    Returns:
        Делитель value. При неудаче seed возвращается value
        (или 1 для value == 0).
    """
    validate_non_negative_int(value, "value")
    validate_non_negative_int(entropy, "entropy")

    if value == 0:
        return 1
    if value < 4:
        return value

    entropy *= value
    c = (entropy & 0xFF) or 1
    batch = (entropy & 0x7F) or 1
    y = entropy & 0x0F

    def step(v: int) -> int:
        return (v * v + c) % value

    r = 1
    q = 1
    factor = 1
    x = y
    y_saved = y

    while factor == 1:
        x = y
        for _ in range(r):
            y = step(y)

        k = 0
        while k < r and factor == 1:
            y_saved = y
            for _ in range(min(batch, r - k)):
                y = step(y)
                q = q * abs(x - y) % value
            factor = math.gcd(q, value)
            k += batch

        r *= 2

    if factor == value:
        # Батч накрыл все множители сразу: повторяем его по одному шагу
        while True:
            y_saved = step(y_saved)
            diff = abs(x - y_saved)
            if diff == 0:
                return value
            factor = math.gcd(diff, value)
            if factor > 1:
                break

    return factor


# =============================================================================
# БЫСТРАЯ ФАКТОРИЗАЦИЯ
# =============================================================================


def quick_factorize_with_primes(value: int, small_primes: Sequence[int]) -> list[int]:
    """
    Разложение value на простые множители с заданным списком малых простых.

    small_primes должен быть отсортированным списком простых в
    [1, MAX_SMALL_NUM], иначе функция работает некорректно. Подходящий
    список даёт prime_sieve(MAX_SMALL_NUM). Для разовых разложений
    удобнее quick_factorize().

    Алгоритм:
        - value < MAX_SMALL_NUM: перебор по small_primes
        - иначе: выделение двоек, затем rho с увеличивающимся seed,
          составные делители раскладываются рекурсивно

    ВАЖНО: если value — большое простое или имеет очень большой
    простой множитель, rho может работать долго; результат
    при этом корректен.

    Returns:
        Отсортированный список простых множителей

    Examples:
        >>> sp = prime_sieve(MAX_SMALL_NUM)
        >>> quick_factorize_with_primes(65_536, sp) == [2] * 16
        True
        >>> quick_factorize_with_primes(9_223_372_036_854_775_807, sp)
        [7, 7, 73, 127, 337, 92737, 649657]
    """
    validate_non_negative_int(value, "value")

    if value < MAX_SMALL_NUM:
        return factorize_with_primes(value, small_primes)

    factors: list[int] = []

    while value % 2 == 0:
        value //= 2
        factors.append(2)

    seed = 2
    while value > 1:
        if value < MAX_SMALL_NUM:
            factors.extend(factorize_with_primes(value, small_primes))
            break

        if is_prime(value):
            factors.append(value)
            break

        factor = rho(value, seed)

        if factor == 1 or factor == value:
            logger.debug("rho(%d) failed with seed %d, retrying", value, seed)
            seed += 1
            continue

        if is_prime(factor):
            factors.append(factor)
        else:
            factors.extend(quick_factorize_with_primes(factor, small_primes))

        value //= factor

    factors.sort()
    return factors


def quick_factorize(value: int) -> list[int]:
    """
    Разложение value на простые множители.

    Обёртка над quick_factorize_with_primes(), которая каждый раз
    генерирует список малых простых. Для серии разложений лучше
    один раз вызвать prime_sieve(MAX_SMALL_NUM) и передавать список явно.

    Examples:
        >>> quick_factorize(65_536) == [2] * 16
        True
        >>> quick_factorize(9_223_372_036_854_775_807)
        [7, 7, 73, 127, 337, 92737, 649657]
    """
    return quick_factorize_with_primes(value, prime_sieve(MAX_SMALL_NUM))


def factorization(value: int) -> Factorization:
    """
    Разложение value в виде value object Factorization.

    Examples:
        >>> factorization(360).multiplicities()
        {2: 3, 3: 2, 5: 1}
    """
    return Factorization(value=value, factors=quick_factorize(value))
