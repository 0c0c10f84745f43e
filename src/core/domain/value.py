"""
Value — Стоимость мешка монет в deniers

Immutable Pydantic модель: одно неотрицательное целое число deniers.

int Python имеет произвольную точность, поэтому конверсия
livres*240 + soliduses*12 + deniers точна даже при всех трёх счётчиках,
равных COIN_NUMBER_MAX (результат шире 64 бит).

Обратной конверсии в Moneybag нет: одной стоимости соответствует
много разных мешков.
"""

from typing import Union

from pydantic import BaseModel, Field

from src.core.domain.moneybag import Moneybag
from src.core.domain.ordering import (
    WeakOrdering,
    compare_scalars,
    is_eq,
    is_gt,
    is_gteq,
    is_lt,
    is_lteq,
)
from src.core.math.coin_arithmetic import DENIERS_PER_LIVRE, DENIERS_PER_SOLIDUS


def moneybag_to_deniers(m: Moneybag) -> int:
    """
    Точная стоимость мешка в deniers.

    Examples:
        >>> moneybag_to_deniers(Moneybag(1, 1, 1))
        253
    """
    return (
        m.livre_number() * DENIERS_PER_LIVRE
        + m.solidus_number() * DENIERS_PER_SOLIDUS
        + m.denier_number()
    )


def _raw_count(other: object) -> Union[int, None]:
    """Значение в deniers для Value или сырого int, иначе None."""
    if isinstance(other, Value):
        return other.value_in_denier
    if isinstance(other, int) and not isinstance(other, bool):
        return other
    return None


# =============================================================================
# VALUE MODEL
# =============================================================================


class Value(BaseModel):
    """
    Стоимость в deniers.

    Конструкторы:
        Value()          — ноль
        Value(n)         — n deniers (n >= 0, может превышать 64 бита)
        Value(moneybag)  — точная конверсия мешка

    Сравнение полное (WeakOrdering) как с Value, так и с сырым int.
    """

    value_in_denier: int = Field(
        0, ge=0, strict=True, description="Стоимость в deniers (без верхней границы)"
    )

    model_config = {"frozen": True}  # Immutable

    def __init__(self, source: Union[int, Moneybag] = 0) -> None:
        if isinstance(source, Moneybag):
            source = moneybag_to_deniers(source)
        super().__init__(value_in_denier=source)

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def compare(self, other: Union["Value", int]) -> WeakOrdering:
        """
        Полное сравнение с другим Value или сырым количеством deniers.

        Raises:
            TypeError: Если other не Value и не int
        """
        raw = _raw_count(other)
        if raw is None:
            raise TypeError(
                f"Cannot compare Value with {type(other).__name__}"
            )
        return compare_scalars(self.value_in_denier, raw)

    def __eq__(self, other: object) -> bool:
        raw = _raw_count(other)
        if raw is None:
            return NotImplemented
        return is_eq(compare_scalars(self.value_in_denier, raw))

    def __hash__(self) -> int:
        # Согласовано с Value(n) == n
        return hash(self.value_in_denier)

    def __lt__(self, other: object) -> bool:
        raw = _raw_count(other)
        if raw is None:
            return NotImplemented
        return is_lt(compare_scalars(self.value_in_denier, raw))

    def __le__(self, other: object) -> bool:
        raw = _raw_count(other)
        if raw is None:
            return NotImplemented
        return is_lteq(compare_scalars(self.value_in_denier, raw))

    def __gt__(self, other: object) -> bool:
        raw = _raw_count(other)
        if raw is None:
            return NotImplemented
        return is_gt(compare_scalars(self.value_in_denier, raw))

    def __ge__(self, other: object) -> bool:
        raw = _raw_count(other)
        if raw is None:
            return NotImplemented
        return is_gteq(compare_scalars(self.value_in_denier, raw))

    # -------------------------------------------------------------------------
    # Arithmetic (never overflows)
    # -------------------------------------------------------------------------

    def __add__(self, other: object) -> "Value":
        if not isinstance(other, Value):
            return NotImplemented
        return Value(self.value_in_denier + other.value_in_denier)

    def __mul__(self, times: object) -> "Value":
        if isinstance(times, bool) or not isinstance(times, int):
            return NotImplemented
        if times < 0:
            raise ValueError(f"times cannot be negative: {times}")
        return Value(self.value_in_denier * times)

    __rmul__ = __mul__

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def __int__(self) -> int:
        return self.value_in_denier

    def __str__(self) -> str:
        return str(self.value_in_denier)
