"""
ContinuedFraction — Модель цепной дроби

Immutable Pydantic модель цепной дроби [a0; a1, a2, ...].
Для периодических разложений (корни) a1.. — повторяющийся блок.
Соответствует схеме contracts/schema/continued_fraction.json.
"""

from pydantic import BaseModel, Field, field_validator

from numkit.math.continued_fraction import (
    expand_float_ntimes,
    expand_fraction_ntimes,
    square_root,
    to_string,
)


class ContinuedFraction(BaseModel):
    """
    Цепная дробь.

    Вычисления делегируются функциям numkit.math.continued_fraction.
    """

    terms: tuple[int, ...] = Field(..., description="Члены дроби [a0; a1, a2, ...]")
    periodic: bool = Field(
        default=False, description="Члены после первого образуют период"
    )

    model_config = {"frozen": True}

    @field_validator("terms")
    @classmethod
    def validate_terms(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        """Члены неотрицательны"""
        negative = [t for t in v if t < 0]
        if negative:
            raise ValueError(f"terms must be non-negative, got {negative}")
        return v

    @classmethod
    def from_square_root(cls, n: int) -> "ContinuedFraction":
        """
        Периодическое разложение √n.

        Examples:
            >>> str(ContinuedFraction.from_square_root(7))
            '[2; 1, 1, 1, 4]'
        """
        return cls(terms=square_root(n), periodic=True)

    def _check_repeats(self, n: int) -> None:
        if n > 1 and not self.periodic:
            raise ValueError(
                f"only a periodic continued fraction can be expanded more than once, got n={n}"
            )

    def expand(self, n: int = 1) -> tuple[int, int]:
        """
        Подходящая дробь (числитель, знаменатель).

        Args:
            n: Сколько раз развернуть период (у непериодических дробей только 1)

        Raises:
            ValueError: n > 1 у непериодической дроби
        """
        self._check_repeats(n)
        return expand_fraction_ntimes(list(self.terms), n)

    def expand_float(self, n: int = 1) -> float:
        """Значение подходящей дроби как float"""
        self._check_repeats(n)
        return expand_float_ntimes(list(self.terms), n)

    def __str__(self) -> str:
        return to_string(list(self.terms))
