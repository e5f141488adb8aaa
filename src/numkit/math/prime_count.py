"""
Prime Count — функция распределения простых π(x)

π(x) — количество простых чисел, не превосходящих x.
Малые значения берутся из таблицы, большие считаются
формулой Лемера с мемоизацией φ(m, n) и π(x).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Корни x^(1/4), x^(1/3), x^(1/2) считаются точно в целых (iroot / isqrt)
2. Кэши принадлежат экземпляру PrimeCounter, глобального состояния нет
3. prime_count_all() возвращает список той же длины, что и вход
"""

import logging
import math
from bisect import bisect_right
from dataclasses import dataclass
from typing import Final, Iterable, Optional

from numkit.math.numerical_safeguards import iroot, validate_non_negative_int
from numkit.math.prime import prime_sieve

logger = logging.getLogger(__name__)

PI_SYMBOL: Final[str] = "π"

# π(x) для x < 100
SMALL_PI: Final[tuple[int, ...]] = (
    0, 0, 1, 2, 2, 3, 3, 4, 4, 4,
    4, 5, 5, 6, 6, 6, 6, 7, 7, 8,
    8, 8, 8, 9, 9, 9, 9, 9, 9, 10,
    10, 11, 11, 11, 11, 11, 11, 12, 12, 12,
    12, 13, 13, 14, 14, 14, 14, 15, 15, 15,
    15, 15, 15, 16, 16, 16, 16, 16, 16, 17,
    17, 18, 18, 18, 18, 18, 18, 19, 19, 19,
    19, 20, 20, 21, 21, 21, 21, 21, 21, 22,
    22, 22, 22, 23, 23, 23, 23, 23, 23, 24,
    24, 24, 24, 24, 24, 24, 24, 25, 25, 25,
)


# =============================================================================
# CONFIGURATION
# =============================================================================


@dataclass(frozen=True)
class PrimeCountConfig:
    """Конфигурация кэшей PrimeCounter.

    - phi_cache_limit: φ(m, n) мемоизируется только при m < limit
      (значения для больших m встречаются редко и раздувают кэш)
    """
    phi_cache_limit: int = 65_536

    def __post_init__(self) -> None:
        if self.phi_cache_limit < 0:
            raise ValueError(
                f"phi_cache_limit must be non-negative, got {self.phi_cache_limit}"
            )


# =============================================================================
# PRIME COUNTER
# =============================================================================


class PrimeCounter:
    """Счётчик π(x) для всех x <= limit.

    Владеет списком простых до √limit и кэшами φ и π; один экземпляр
    можно использовать для серии запросов. Экземпляр не потокобезопасен
    (кэши мутируются), но создаётся и используется вызывающим кодом.

    Формула Лемера (a = π(x^1/4), b = π(x^1/2), c = π(x^1/3)):

        π(x) = φ(x, a) + (b + a - 2)(b - a + 1)/2
               - Σ_{a<i<=b} π(x/pᵢ)
               - Σ_{a<i<=c} Σ_{i<=j<=bᵢ} [π(x/(pᵢpⱼ)) - (j - 1)]

    где bᵢ = π(√(x/pᵢ)).
    """

    def __init__(self, limit: int, config: Optional[PrimeCountConfig] = None):
        """
        Args:
            limit: Наибольший x, для которого будет вызываться count()
            config: Конфигурация кэшей
        """
        validate_non_negative_int(limit, "limit")

        self.limit = limit
        self.config = config or PrimeCountConfig()

        self._primes = prime_sieve(math.isqrt(limit) + 1)
        self._pi_cache: dict[int, int] = {}
        self._phi_cache: dict[tuple[int, int], int] = {}

        logger.debug(
            "PrimeCounter(limit=%d): %d sieving primes", limit, len(self._primes)
        )

    def count(self, x: int) -> int:
        """
        π(x).

        Raises:
            ValueError: если x < 0 или x > limit
        """
        validate_non_negative_int(x, "x")
        if x > self.limit:
            raise ValueError(f"x must be <= limit {self.limit}, got {x}")

        return self._lehmer(x)

    def _lehmer(self, x: int) -> int:
        if x < len(SMALL_PI):
            return SMALL_PI[x]

        primes = self._primes
        if x < primes[-1]:
            return bisect_right(primes, x)

        cached = self._pi_cache.get(x)
        if cached is not None:
            return cached

        a = self._lehmer(iroot(x, 4))
        b = self._lehmer(math.isqrt(x))
        c = self._lehmer(iroot(x, 3))

        pi = self._phi(x, a) + (b + a - 2) * (b - a + 1) // 2

        for i in range(a + 1, b + 1):
            w = x // primes[i - 1]
            pi -= self._lehmer(w)

            if i > c:
                continue

            bi = self._lehmer(math.isqrt(w))
            for j in range(i, bi + 1):
                pi -= self._lehmer(w // primes[j - 1]) - (j - 1)

        self._pi_cache[x] = pi
        return pi

    def _phi(self, m: int, n: int) -> int:
        """
        φ(m, n): количество k <= m, не делящихся ни на одно из первых n простых.

        Рекурсия по φ(m, n) = φ(m, 1) - Σ_{2<=i<=n} φ(m/pᵢ, i - 1):
        каждый вложенный вызов делит m на pᵢ >= 3, поэтому глубина
        стека ограничена log₃ m, а не n.
        """
        if n == 0 or m == 0:
            return m
        if n == 1:
            return (m + 1) // 2

        primes = self._primes
        if m <= primes[n - 1]:
            return 1

        cacheable = m < self.config.phi_cache_limit
        if cacheable:
            cached = self._phi_cache.get((m, n))
            if cached is not None:
                return cached

        value = (m + 1) // 2
        for i in range(1, n):
            q = m // primes[i]
            if q <= primes[i - 1]:
                # Дальше каждое слагаемое равно 1: q <= p_{i-1} и m > p_{n-1}
                value -= n - i
                break
            value -= self._phi(q, i)

        if cacheable:
            self._phi_cache[(m, n)] = value

        return value


# =============================================================================
# PUBLIC API
# =============================================================================


def prime_count(x: int) -> int:
    """
    π(x): количество простых <= x.

    Examples:
        >>> prime_count(100)
        25
        >>> prime_count(1_000_000)
        78498
    """
    return PrimeCounter(x).count(x)


def prime_count_all(values: Iterable[int]) -> list[int]:
    """
    π(x) для каждого значения; кэши общие для всей серии.

    Простые просеиваются один раз до √max(values).

    Examples:
        >>> prime_count_all([10, 100, 1_000])
        [4, 25, 168]
        >>> prime_count_all([])
        []
    """
    values = list(values)
    if not values:
        return []

    for value in values:
        validate_non_negative_int(value, "value")

    counter = PrimeCounter(max(values))
    return [counter.count(value) for value in values]
