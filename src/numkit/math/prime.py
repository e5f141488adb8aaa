"""
Prime — решёта, тесты простоты и простая факторизация

Модуль генерирует простые числа несколькими решётами и проверяет простоту:
- Решето Аткина (малые пределы, быстро)
- Решето Эратосфена (эталон для проверки остальных решёт)
- Сегментированное решето Эратосфена (большие пределы, память O(segment))
- Тест простоты: 6k±1 trial division для малых, Miller–Rabin для больших
- Факторизация перебором по списку простых

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все решёта возвращают отсортированный список простых в [1, limit]
2. Все решёта дают одинаковый результат для одного limit
3. is_prime детерминирован для value < 3.3e24
"""

import logging
import math
from itertools import compress
from typing import Final, Iterator, Sequence

from numkit.math.numerical_safeguards import validate_non_negative_int, validate_positive_int

logger = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Размер сегмента сегментированного решета.
# Также порог, с которого prime_sieve переключается с Аткина на сегменты.
S_SIEVE_SIZE: Final[int] = 65_536

# Порог trial division для is_prime; выше него используется Miller–Rabin
TRIAL_DIVISION_LIMIT: Final[int] = 1 << 20

# Основания Miller–Rabin: детерминированы для n < 3_317_044_064_679_887_385_961_981
_MILLER_RABIN_BASES: Final[tuple[int, ...]] = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41)

# Остатки по модулю 60 для трёх квадратичных форм решета Аткина
_ATKIN_FORM_4X2_Y2: Final[frozenset[int]] = frozenset({1, 13, 17, 29, 37, 41, 49, 53})
_ATKIN_FORM_3X2_Y2: Final[frozenset[int]] = frozenset({7, 19, 31, 43})
_ATKIN_FORM_3X2_MINUS_Y2: Final[frozenset[int]] = frozenset({11, 23, 47, 59})


# =============================================================================
# РЕШЁТА
# =============================================================================


def atkin(limit: int) -> list[int]:
    """
    Простые числа в [1, limit], решето Аткина.

    Лучше всего подходит для относительно малых limit: память растёт
    линейно с limit. Для больших пределов предпочтительнее
    segmented_eratosthenes(); prime_sieve() выбирает автоматически.

    Args:
        limit: Верхняя граница (включительно)

    Returns:
        Отсортированный список простых

    Examples:
        >>> atkin(20)
        [2, 3, 5, 7, 11, 13, 17, 19]
    """
    validate_non_negative_int(limit, "limit")

    if limit < 2:
        return []
    if limit == 2:
        return [2]
    if limit < 5:
        return [2, 3]

    primes = [2, 3, 5]
    if limit < 6:
        return primes

    sieve = bytearray(limit + 1)
    root = math.isqrt(limit) + 1

    for x in range(1, root + 1):
        xx = x * x
        for y in range(1, root + 1):
            yy = y * y

            n = 4 * xx + yy
            if n <= limit and n % 60 in _ATKIN_FORM_4X2_Y2:
                sieve[n] ^= 1

            n = 3 * xx + yy
            if n <= limit and n % 60 in _ATKIN_FORM_3X2_Y2:
                sieve[n] ^= 1

            if x <= y:
                continue

            n = 3 * xx - yy
            if n <= limit and n % 60 in _ATKIN_FORM_3X2_MINUS_Y2:
                sieve[n] ^= 1

    # Исключаем кратные квадратам простых
    for i in range(7, root + 1):
        if sieve[i]:
            square = i * i
            sieve[square::square] = bytes(len(range(square, limit + 1, square)))

    primes.extend(compress(range(limit + 1), sieve))
    return primes


def eratosthenes(limit: int) -> list[int]:
    """
    Простые числа в [1, limit], решето Эратосфена.

    Используется в основном как эталон при проверке остальных решёт.

    Examples:
        >>> eratosthenes(20)
        [2, 3, 5, 7, 11, 13, 17, 19]
    """
    validate_non_negative_int(limit, "limit")

    if limit < 2:
        return []

    sieve = bytearray(b"\x01") * (limit + 1)
    sieve[0] = sieve[1] = 0

    for p in range(2, math.isqrt(limit) + 1):
        if sieve[p]:
            sieve[p * p::p] = bytes(len(range(p * p, limit + 1, p)))

    return list(compress(range(limit + 1), sieve))


def iter_odd_primes(limit: int, segment_size: int = S_SIEVE_SIZE) -> Iterator[int]:
    """
    Генератор нечётных простых в [3, limit], сегментированное решето.

    Тело сегментированного решета, пригодное для операций над диапазонами
    простых, которые не помещаются в память целиком (например, сумма простых
    до 10^9 или поиск N-го простого).

    ВАЖНО: число 2 никогда не выдаётся, его нужно учитывать отдельно.

    Args:
        limit: Верхняя граница (включительно)
        segment_size: Размер сегмента (default: S_SIEVE_SIZE)

    Yields:
        Нечётные простые в порядке возрастания

    Examples:
        >>> list(iter_odd_primes(20))
        [3, 5, 7, 11, 13, 17, 19]
        >>> 2 + sum(iter_odd_primes(100))
        1060
    """
    validate_non_negative_int(limit, "limit")
    validate_positive_int(segment_size, "segment_size")

    if limit < 3:
        return

    sieving_primes = prime_sieve(math.isqrt(limit))[1:]

    for low in range(0, limit + 1, segment_size):
        high = min(low + segment_size - 1, limit)
        segment = bytearray(b"\x01") * (high - low + 1)

        for p in sieving_primes:
            square = p * p
            if square > high:
                break
            start = max(square, -(-low // p) * p)
            segment[start - low::p] = bytes(len(range(start - low, high - low + 1, p)))

        first = max(3, low | 1)
        if first > high:
            continue

        yield from compress(range(first, high + 1, 2), segment[first - low::2])


def segmented_eratosthenes(limit: int) -> list[int]:
    """
    Простые числа в [1, limit], сегментированное решето Эратосфена.

    Размер сегмента определяется S_SIEVE_SIZE.

    Examples:
        >>> segmented_eratosthenes(10)
        [2, 3, 5, 7]
    """
    validate_non_negative_int(limit, "limit")

    if limit < 2:
        return []

    primes = [2]
    primes.extend(iter_odd_primes(limit))
    return primes


def prime_sieve(limit: int) -> list[int]:
    """
    Основное решето: список простых в [1, limit].

    Если нужно сгенерировать простые, скорее всего нужна именно эта функция.
    Использует atkin() при limit < S_SIEVE_SIZE, иначе
    segmented_eratosthenes().

    Examples:
        >>> prime_sieve(20)
        [2, 3, 5, 7, 11, 13, 17, 19]
    """
    if limit < S_SIEVE_SIZE:
        return atkin(limit)

    return segmented_eratosthenes(limit)


# =============================================================================
# N-Е ПРОСТОЕ
# =============================================================================


def nth_prime(n: int) -> int:
    """
    N-е простое число, нумерация с нуля: P0 = 2.

    Просеивает диапазон до оценки Россера n·(ln n + ln ln n)
    и возвращает N-е найденное простое.

    Examples:
        >>> nth_prime(3)
        7
        >>> nth_prime(24)
        97
    """
    validate_non_negative_int(n, "n")

    if n < 4:
        return (2, 3, 5, 7)[n]

    k = n + 1
    bound = math.ceil(k * (math.log(k) + math.log(math.log(k))))
    logger.debug("nth_prime(%d): sieving up to %d", n, bound)

    count = 1
    for candidate in iter_odd_primes(bound):
        if count == n:
            return candidate
        count += 1

    raise RuntimeError(f"prime #{n} not found below bound {bound}")


# =============================================================================
# ТЕСТ ПРОСТОТЫ
# =============================================================================


def _is_strong_probable_prime(value: int, base: int) -> bool:
    d = value - 1
    s = 0
    while d % 2 == 0:
        d //= 2
        s += 1

    x = pow(base, d, value)
    if x == 1 or x == value - 1:
        return True

    for _ in range(s - 1):
        x = x * x % value
        if x == value - 1:
            return True

    return False


def is_prime(value: int) -> bool:
    """
    True если value простое, False если составное (или < 2).

    Алгоритм:
        - value < 4: ответ по таблице
        - делимость на 2 и 3
        - value < TRIAL_DIVISION_LIMIT: перебор делителей вида 6k ± 1
        - иначе Miller–Rabin по первым 13 простым основаниям
          (детерминирован для value < 3.3e24)

    Examples:
        >>> is_prime(64)
        False
        >>> is_prime(97)
        True
        >>> is_prime(2**61 - 1)
        True
    """
    validate_non_negative_int(value, "value")

    if value < 2:
        return False
    if value < 4:
        return True
    if value % 2 == 0 or value % 3 == 0:
        return False

    if value < TRIAL_DIVISION_LIMIT:
        max_factor = math.isqrt(value)
        test_factor = 5
        while test_factor <= max_factor:
            if value % test_factor == 0 or value % (test_factor + 2) == 0:
                return False
            test_factor += 6
        return True

    for base in _MILLER_RABIN_BASES:
        if value % base == 0:
            return value == base
        if not _is_strong_probable_prime(value, base):
            return False

    return True


def next_prime(n: int) -> int:
    """
    Наименьшее простое, строго большее n.

    Examples:
        >>> next_prime(5)
        7
        >>> next_prime(95)
        97
    """
    validate_non_negative_int(n, "n")

    if n < 2:
        return 2

    if n % 2 == 0:
        n += 1
        if is_prime(n):
            return n

    while True:
        n += 2
        if is_prime(n):
            return n


# =============================================================================
# ФАКТОРИЗАЦИЯ ПЕРЕБОРОМ
# =============================================================================


def factorize_with_primes(value: int, primes: Sequence[int]) -> list[int]:
    """
    Разложение value перебором по заданному списку простых.

    Подходит для серии факторизаций (список простых переиспользуется)
    или для разложения по собственному набору "простых множителей".
    Для одного значения удобнее factorize().

    ВАЖНО: primes должен быть отсортирован. Множители, отсутствующие
    в primes, в результат не попадают.

    Examples:
        >>> factorize_with_primes(200, [2, 3, 5, 7])
        [2, 2, 2, 5, 5]
    """
    validate_non_negative_int(value, "value")

    factors: list[int] = []

    if value <= 1:
        return factors

    for p in primes:
        if p > value:
            break
        while value % p == 0:
            factors.append(p)
            value //= p

    return factors


def factorize(value: int) -> list[int]:
    """
    Разложение value на простые множители.

    Генерирует список простых до value внутри себя.

    Examples:
        >>> factorize(100)
        [2, 2, 5, 5]
    """
    validate_non_negative_int(value, "value")
    return factorize_with_primes(value, prime_sieve(value))
