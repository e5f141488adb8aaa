"""
Тесты для модуля Partition

Проверяет p(n) по рекуррентности Эйлера, кэш вызывающего кода
и отсутствие верхней границы n.
"""

import pytest

from numkit.math.partition import partition, partition_with_cache


def _partitions_brute_force(n: int) -> int:
    ways = [1] + [0] * n
    for part in range(1, n + 1):
        for total in range(part, n + 1):
            ways[total] += ways[total - part]
    return ways[n]


class TestPartition:
    """Тесты для partition"""

    def test_first_values(self) -> None:
        assert [partition(n) for n in range(6)] == [1, 1, 2, 3, 5, 7]

    def test_known_values(self) -> None:
        assert partition(100) == 190_569_292
        assert partition(200) == 3_972_999_029_388

    def test_matches_brute_force(self) -> None:
        for n in range(80):
            assert partition(n) == _partitions_brute_force(n), n

    def test_negative_is_zero(self) -> None:
        assert partition(-1) == 0

    def test_no_upper_bound(self) -> None:
        """Ни рекурсии, ни переполнения для больших n"""
        assert partition(1_000) == 24_061_467_864_032_622_473_692_149_727_991


class TestPartitionWithCache:
    """Тесты для partition_with_cache"""

    def test_shared_cache(self) -> None:
        cache = [0] * 101
        assert partition_with_cache(100, cache) == 190_569_292
        assert partition_with_cache(5, cache) == 7
        assert partition_with_cache(2, cache) == 2
        assert partition_with_cache(1, cache) == 1
        assert partition_with_cache(4, cache) == 5
        assert partition_with_cache(0, cache) == 1
        assert partition_with_cache(3, cache) == 3

    def test_cache_filled(self) -> None:
        cache = [0] * 11
        partition_with_cache(10, cache)
        assert cache == [1, 1, 2, 3, 5, 7, 11, 15, 22, 30, 42]

    def test_short_cache_rejected(self) -> None:
        with pytest.raises(ValueError, match="cache must hold at least 6 entries"):
            partition_with_cache(5, [0] * 3)
