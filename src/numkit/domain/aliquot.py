"""
AliquotProfile — Модель классификации числа по сумме собственных делителей

Immutable Pydantic модель: число, его аликвотная сумма и класс
(недостаточное / совершенное / избыточное).
Соответствует схеме contracts/schema/aliquot_profile.json.
"""

from enum import Enum

from pydantic import BaseModel, Field, model_validator


# =============================================================================
# ENUMS
# =============================================================================


class AliquotClass(str, Enum):
    """Класс числа по аликвотной сумме"""

    DEFICIENT = "deficient"
    PERFECT = "perfect"
    ABUNDANT = "abundant"

    @classmethod
    def classify(cls, value: int, aliquot_sum: int) -> "AliquotClass":
        """Класс по сравнению аликвотной суммы с самим числом"""
        if aliquot_sum > value:
            return cls.ABUNDANT
        if aliquot_sum == value:
            return cls.PERFECT
        return cls.DEFICIENT


# =============================================================================
# ALIQUOT PROFILE MODEL
# =============================================================================


class AliquotProfile(BaseModel):
    """
    Профиль числа по сумме собственных делителей.

    Immutable модель (frozen=True). Класс обязан соответствовать суммам.
    """

    value: int = Field(..., gt=0, description="Положительное целое")
    aliquot_sum: int = Field(..., ge=0, description="Сумма собственных делителей")
    classification: AliquotClass = Field(..., description="deficient / perfect / abundant")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_classification(self) -> "AliquotProfile":
        """Проверка согласованности класса с суммой"""
        expected = AliquotClass.classify(self.value, self.aliquot_sum)
        if self.classification != expected:
            raise ValueError(
                f"classification {self.classification.value} inconsistent with "
                f"aliquot_sum {self.aliquot_sum} of {self.value} (expected {expected.value})"
            )
        return self

    def divisor_sum(self) -> int:
        """Сумма всех делителей: σ(n) = s(n) + n"""
        return self.aliquot_sum + self.value
