"""
Тесты для модели Value

Проверяет:
1. Конструкторы: ноль, сырое число deniers, конверсия из Moneybag
2. Точность конверсии за пределами 64 бит
3. Полный порядок против Value и сырого int
4. Десятичное представление
"""

import pytest
from pydantic import ValidationError

from src.core.domain import (
    Denier,
    Livre,
    Moneybag,
    Solidus,
    Value,
    WeakOrdering,
    moneybag_to_deniers,
)
from src.core.math import COIN_NUMBER_MAX

MAX = COIN_NUMBER_MAX


# =============================================================================
# CONSTRUCTION TESTS
# =============================================================================


class TestConstruction:
    """Тесты конструкторов Value"""

    def test_default_is_zero(self) -> None:
        assert Value() == 0
        assert Value() == Value(0)
        assert str(Value()) == "0"

    def test_from_raw_count(self) -> None:
        assert Value(253).value_in_denier == 253

    def test_raw_count_beyond_64_bit(self) -> None:
        v = Value(MAX + 1)
        assert int(v) == 2**64

    @pytest.mark.parametrize(
        "m, expected",
        [
            (Livre, 240),
            (Solidus, 12),
            (Denier, 1),
            (Moneybag(1, 1, 1), 253),
            (Moneybag(0, 0, 0), 0),
            (Moneybag(1, 0, 0), 240),
        ],
    )
    def test_from_moneybag(self, m: Moneybag, expected: int) -> None:
        assert Value(m) == expected
        assert moneybag_to_deniers(m) == expected

    def test_equal_value_different_moneybags(self) -> None:
        """Разные мешки могут иметь одинаковую стоимость"""
        assert Moneybag(1, 0, 0) != Moneybag(0, 20, 0)
        assert Value(Moneybag(1, 0, 0)) == Value(Moneybag(0, 20, 0))
        assert Value(Moneybag(0, 1, 0)) == Value(Moneybag(0, 0, 12))

    @pytest.mark.parametrize("raw", [-1, 1.5, "10", True])
    def test_invalid_raw_count(self, raw: object) -> None:
        with pytest.raises(ValidationError):
            Value(raw)  # type: ignore

    def test_immutable(self) -> None:
        """Value должен быть immutable (frozen=True)"""
        v = Value(10)
        with pytest.raises(ValidationError):
            v.value_in_denier = 20  # type: ignore


class TestLargeValues:
    """Конверсия без переполнения при максимальных счётчиках"""

    def test_all_counters_at_max(self) -> None:
        v = Value(Moneybag(MAX, MAX, MAX))
        expected = MAX * 240 + MAX * 12 + MAX
        assert v == expected
        assert str(v) == str(expected)
        assert str(v) == "4667026250648516558595"

    def test_exceeds_64_and_fits_128(self) -> None:
        v = Value(Moneybag(MAX, MAX, MAX))
        assert v > MAX
        assert v < 2**128

    def test_max_livres_only(self) -> None:
        assert str(Value(Moneybag(MAX, 0, 0))) == str(MAX * 240)


# =============================================================================
# COMPARISON TESTS
# =============================================================================


class TestComparison:
    """Тесты полного порядка"""

    def test_compare_values(self) -> None:
        assert Value(10).compare(Value(5)) == WeakOrdering.GREATER
        assert Value(5).compare(Value(10)) == WeakOrdering.LESS
        assert Value(7).compare(Value(7)) == WeakOrdering.EQUIVALENT

    def test_compare_raw_counts(self) -> None:
        assert Value(Livre).compare(240) == WeakOrdering.EQUIVALENT
        assert Value(Livre).compare(241) == WeakOrdering.LESS
        assert Value(Livre).compare(2**100) == WeakOrdering.LESS

    def test_operators_against_value(self) -> None:
        assert Value(Livre) > Value(Solidus)
        assert Value(Solidus) >= Value(Moneybag(0, 0, 12))
        assert Value(Denier) < Value(Solidus)
        assert Value(Denier) <= Value(1)
        assert Value(Denier) != Value(Solidus)

    def test_operators_against_raw_count(self) -> None:
        v = Value(Moneybag(1, 1, 1))
        assert v == 253
        assert 253 == v
        assert v > 252
        assert v >= 253
        assert v < 254
        assert v <= 253
        assert 254 > v

    def test_total_order_trichotomy(self) -> None:
        """Для Value ровно одно из <, ==, > выполняется"""
        pairs = [(Value(1), Value(2)), (Value(3), Value(3)), (Value(5), Value(4))]
        for a, b in pairs:
            assert [a < b, a == b, a > b].count(True) == 1

    def test_hash_consistent_with_raw_eq(self) -> None:
        assert hash(Value(240)) == hash(240)
        assert hash(Value(Livre)) == hash(Value(Moneybag(0, 20, 0)))

    def test_compare_unsupported_type(self) -> None:
        with pytest.raises(TypeError, match="Cannot compare"):
            Value(1).compare(1.0)  # type: ignore

        with pytest.raises(TypeError):
            Value(1) < "1"  # type: ignore

        assert Value(1) != "1"


# =============================================================================
# ARITHMETIC & RENDERING TESTS
# =============================================================================


class TestArithmetic:
    """Сложение и умножение стоимостей (без переполнения)"""

    def test_add(self) -> None:
        assert Value(240) + Value(13) == Value(253)

    def test_mul_both_sides(self) -> None:
        assert Value(12) * 20 == 240
        assert 20 * Value(12) == 240

    def test_mul_beyond_64_bit(self) -> None:
        assert Value(MAX) * MAX == MAX * MAX

    def test_negative_multiplier(self) -> None:
        with pytest.raises(ValueError, match="cannot be negative"):
            Value(1) * -1


class TestRendering:
    """Десятичное представление"""

    @pytest.mark.parametrize("raw", [0, 1, 253, MAX, 2**127 + 1])
    def test_exact_decimal(self, raw: int) -> None:
        assert str(Value(raw)) == str(raw)
