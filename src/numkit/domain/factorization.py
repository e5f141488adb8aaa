"""
Factorization — Модель разложения целого на простые множители

Immutable Pydantic модель результата quick_factorize().
Соответствует схеме contracts/schema/factorization.json.
"""

from collections import Counter

from pydantic import BaseModel, Field, field_validator, model_validator

from numkit.math.prime import is_prime


class Factorization(BaseModel):
    """
    Разложение value на простые множители.

    Для value == 0 и value == 1 список множителей пустой.
    Immutable модель (frozen=True).
    """

    value: int = Field(..., ge=0, description="Раскладываемое число")
    factors: tuple[int, ...] = Field(
        default=(), description="Простые множители в порядке возрастания (с повторами)"
    )

    model_config = {"frozen": True}

    @field_validator("factors")
    @classmethod
    def validate_factors(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        """Множители простые и отсортированы по возрастанию"""
        composite = [f for f in v if not is_prime(f)]
        if composite:
            raise ValueError(f"factors must be prime, got {composite}")
        if list(v) != sorted(v):
            raise ValueError(f"factors must be sorted, got {list(v)}")
        return v

    @model_validator(mode="after")
    def validate_product(self) -> "Factorization":
        """Произведение множителей равно value"""
        if self.value <= 1:
            if self.factors:
                raise ValueError(f"value {self.value} has no prime factors")
            return self

        product = 1
        for f in self.factors:
            product *= f

        if product != self.value:
            raise ValueError(
                f"product of factors {product} does not match value {self.value}"
            )
        return self

    def distinct_factors(self) -> list[int]:
        """Различные простые множители по возрастанию"""
        return sorted(set(self.factors))

    def multiplicities(self) -> dict[int, int]:
        """
        Кратности множителей.

        Returns:
            {простое: степень}, например 360 → {2: 3, 3: 2, 5: 1}
        """
        return dict(sorted(Counter(self.factors).items()))

    def is_prime(self) -> bool:
        """True если value простое (ровно один множитель)"""
        return len(self.factors) == 1
