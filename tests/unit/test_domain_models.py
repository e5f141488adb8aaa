"""
Тесты для доменных моделей: Factorization, ContinuedFraction, AliquotProfile

Проверяет:
1. Создание и валидацию моделей Pydantic
2. Вспомогательные методы
3. Immutability (frozen=True)
4. Сериализацию/десериализацию JSON
5. Невалидные данные
"""

import json

import pytest
from pydantic import ValidationError

from numkit.domain import AliquotClass, AliquotProfile, ContinuedFraction, Factorization
from numkit.math.continued_fraction import square_root


# =============================================================================
# FACTORIZATION TESTS
# =============================================================================


@pytest.fixture
def factorization_360() -> Factorization:
    """Разложение 360 = 2^3 * 3^2 * 5"""
    return Factorization(value=360, factors=(2, 2, 2, 3, 3, 5))


class TestFactorization:
    """Тесты модели Factorization"""

    def test_valid_factorization(self, factorization_360: Factorization) -> None:
        assert factorization_360.value == 360
        assert factorization_360.distinct_factors() == [2, 3, 5]
        assert factorization_360.multiplicities() == {2: 3, 3: 2, 5: 1}
        assert not factorization_360.is_prime()

    def test_prime(self) -> None:
        assert Factorization(value=97, factors=[97]).is_prime()

    def test_trivial_values(self) -> None:
        assert Factorization(value=0).factors == ()
        assert Factorization(value=1, factors=[]).factors == ()

    def test_immutable(self, factorization_360: Factorization) -> None:
        with pytest.raises(ValidationError):
            factorization_360.value = 720  # type: ignore

    def test_wrong_product_rejected(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            Factorization(value=100, factors=(2, 5, 5))
        assert "does not match value 100" in str(exc_info.value)

    def test_unsorted_rejected(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            Factorization(value=10, factors=(5, 2))
        assert "must be sorted" in str(exc_info.value)

    def test_composite_factor_rejected(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            Factorization(value=8, factors=(2, 4))
        assert "must be prime" in str(exc_info.value)

    def test_factors_of_one_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Factorization(value=1, factors=(2,))

    def test_negative_value_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Factorization(value=-4, factors=())

    def test_json_round_trip(self, factorization_360: Factorization) -> None:
        payload = factorization_360.model_dump_json()
        assert json.loads(payload) == {"value": 360, "factors": [2, 2, 2, 3, 3, 5]}
        assert Factorization.model_validate_json(payload) == factorization_360


# =============================================================================
# CONTINUED FRACTION TESTS
# =============================================================================


class TestContinuedFraction:
    """Тесты модели ContinuedFraction"""

    def test_expand(self) -> None:
        sqrt2 = ContinuedFraction(terms=square_root(2), periodic=True)
        assert sqrt2.expand() == (3, 2)
        assert sqrt2.expand(3) == (17, 12)
        assert sqrt2.expand_float(20) == pytest.approx(2**0.5, abs=1e-12)

    def test_from_square_root(self) -> None:
        sqrt7 = ContinuedFraction.from_square_root(7)
        assert sqrt7.periodic
        assert sqrt7.terms == (2, 1, 1, 1, 4)
        assert sqrt7.expand(2) == (590, 223)
        assert ContinuedFraction.from_square_root(25).terms == (5,)

    def test_finite_expands_once(self) -> None:
        finite = ContinuedFraction(terms=[1, 2, 3])
        assert finite.expand() == (10, 7)
        assert finite.expand_float() == pytest.approx(10 / 7)

    def test_finite_rejects_repeats(self) -> None:
        finite = ContinuedFraction(terms=[1, 2, 3])
        with pytest.raises(ValueError, match="only a periodic continued fraction"):
            finite.expand(3)
        with pytest.raises(ValueError, match="only a periodic continued fraction"):
            finite.expand_float(2)

    def test_str(self) -> None:
        assert str(ContinuedFraction(terms=[1, 2, 3])) == "[1; 2, 3]"
        assert str(ContinuedFraction(terms=[])) == "[]"

    def test_empty_cannot_expand(self) -> None:
        with pytest.raises(ValueError):
            ContinuedFraction(terms=[]).expand()

    def test_negative_term_rejected(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            ContinuedFraction(terms=[1, -2])
        assert "non-negative" in str(exc_info.value)

    def test_immutable(self) -> None:
        fraction = ContinuedFraction(terms=[1, 2])
        with pytest.raises(ValidationError):
            fraction.terms = (3,)  # type: ignore


# =============================================================================
# ALIQUOT PROFILE TESTS
# =============================================================================


class TestAliquotProfile:
    """Тесты модели AliquotProfile"""

    def test_classify(self) -> None:
        assert AliquotClass.classify(12, 16) == AliquotClass.ABUNDANT
        assert AliquotClass.classify(28, 28) == AliquotClass.PERFECT
        assert AliquotClass.classify(7, 1) == AliquotClass.DEFICIENT

    def test_valid_profile(self) -> None:
        profile = AliquotProfile(value=28, aliquot_sum=28, classification="perfect")
        assert profile.classification == AliquotClass.PERFECT
        assert profile.divisor_sum() == 56

    def test_inconsistent_classification_rejected(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            AliquotProfile(value=12, aliquot_sum=16, classification=AliquotClass.DEFICIENT)
        assert "inconsistent" in str(exc_info.value)

    def test_zero_value_rejected(self) -> None:
        with pytest.raises(ValidationError):
            AliquotProfile(value=0, aliquot_sum=0, classification=AliquotClass.DEFICIENT)

    def test_unknown_class_rejected(self) -> None:
        with pytest.raises(ValidationError):
            AliquotProfile(value=12, aliquot_sum=16, classification="weird")

    def test_json_serialization(self) -> None:
        profile = AliquotProfile(value=12, aliquot_sum=16, classification=AliquotClass.ABUNDANT)
        data = profile.model_dump(mode="json")
        assert data == {"value": 12, "aliquot_sum": 16, "classification": "abundant"}
