"""
Moneybag — Мешок монет трёх номиналов

Immutable Pydantic модель: количество livres, soliduses и deniers.
Соотношения: 1 livre = 20 soliduses = 240 deniers, 1 solidus = 12 deniers.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждый счётчик в [0, COIN_NUMBER_MAX] (64-bit unsigned)
2. Нормализация между номиналами НЕ выполняется:
   Moneybag(1, 0, 0) != Moneybag(0, 20, 0), хотя их Value совпадает
3. Арифметика all-or-nothing: при ошибке операнды не меняются
4. Сравнение — частичный порядок (покомпонентный), не полный
"""

from pydantic import BaseModel, Field

from src.core.domain.ordering import (
    PartialOrdering,
    compare_counters,
    is_eq,
    is_gt,
    is_gteq,
    is_lt,
    is_lteq,
)
from src.core.math.coin_arithmetic import (
    COIN_NUMBER_MAX,
    checked_add_counters,
    checked_mul_counters,
    checked_sub_counters,
)


def _plural(count: int, singular: str, plural: str) -> str:
    return f"{count} {singular if count == 1 else plural}"


# =============================================================================
# MONEYBAG MODEL
# =============================================================================


class Moneybag(BaseModel):
    """
    Мешок монет.

    Immutable модель (frozen=True). Все арифметические операции создают
    новый экземпляр; составное присваивание (+=, -=, *=) перепривязывает
    имя вызывающего к новому значению только при успехе.

    Examples:
        >>> str(Moneybag(1, 0, 2))
        '(1 livre, 0 soliduses, 2 deniers)'
        >>> Moneybag(1, 2, 3) + Moneybag(0, 1, 0)
        Moneybag(livres=1, soliduses=3, deniers=3)
    """

    livres: int = Field(
        ..., ge=0, le=COIN_NUMBER_MAX, strict=True, description="Количество livres"
    )
    soliduses: int = Field(
        ..., ge=0, le=COIN_NUMBER_MAX, strict=True, description="Количество soliduses"
    )
    deniers: int = Field(
        ..., ge=0, le=COIN_NUMBER_MAX, strict=True, description="Количество deniers"
    )

    model_config = {"frozen": True}  # Immutable

    def __init__(self, livres: int, soliduses: int, deniers: int) -> None:
        super().__init__(livres=livres, soliduses=soliduses, deniers=deniers)

    @classmethod
    def _from_counters(cls, counters: tuple[int, ...]) -> "Moneybag":
        livres, soliduses, deniers = counters
        return cls(livres, soliduses, deniers)

    def _counters(self) -> tuple[int, int, int]:
        return (self.livres, self.soliduses, self.deniers)

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    def livre_number(self) -> int:
        return self.livres

    def solidus_number(self) -> int:
        return self.soliduses

    def denier_number(self) -> int:
        return self.deniers

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def __add__(self, other: object) -> "Moneybag":
        """
        Покомпонентная сумма.

        Raises:
            MoneybagOverflowError: Если хотя бы один счётчик превысит COIN_NUMBER_MAX
        """
        if not isinstance(other, Moneybag):
            return NotImplemented
        return self._from_counters(
            checked_add_counters(self._counters(), other._counters())
        )

    def __sub__(self, other: object) -> "Moneybag":
        """
        Покомпонентная разность.

        Raises:
            MoneybagUnderflowError: Если хотя бы один счётчик станет отрицательным
        """
        if not isinstance(other, Moneybag):
            return NotImplemented
        return self._from_counters(
            checked_sub_counters(self._counters(), other._counters())
        )

    def __mul__(self, times: object) -> "Moneybag":
        """
        Умножение на неотрицательный целый скаляр (коммутативно).

        Raises:
            ValueError: Если times вне [0, COIN_NUMBER_MAX]
            MoneybagOverflowError: Если хотя бы один счётчик превысит COIN_NUMBER_MAX
        """
        if isinstance(times, bool) or not isinstance(times, int):
            return NotImplemented
        return self._from_counters(checked_mul_counters(self._counters(), times))

    __rmul__ = __mul__

    def __bool__(self) -> bool:
        """Мешок непуст, если хотя бы один счётчик > 0"""
        return self.livres > 0 or self.soliduses > 0 or self.deniers > 0

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def compare(self, other: "Moneybag") -> PartialOrdering:
        """
        Частичное сравнение мешков.

        Returns:
            EQUIVALENT — все счётчики равны
            GREATER — все счётчики self >= other
            LESS — все счётчики self <= other
            UNORDERED — иначе (например, больше livres, но меньше deniers)
        """
        return compare_counters(self._counters(), other._counters())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Moneybag):
            return NotImplemented
        return is_eq(self.compare(other))

    def __hash__(self) -> int:
        return hash(self._counters())

    # Rich comparisons как у set: для UNORDERED все четыре дают False
    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Moneybag):
            return NotImplemented
        return is_lt(self.compare(other))

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Moneybag):
            return NotImplemented
        return is_lteq(self.compare(other))

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Moneybag):
            return NotImplemented
        return is_gt(self.compare(other))

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Moneybag):
            return NotImplemented
        return is_gteq(self.compare(other))

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return (
            f"({_plural(self.livres, 'livre', 'livres')}, "
            f"{_plural(self.soliduses, 'solidus', 'soliduses')}, "
            f"{_plural(self.deniers, 'denier', 'deniers')})"
        )


# =============================================================================
# UNIT CONSTANTS
# =============================================================================

Livre = Moneybag(1, 0, 0)
Solidus = Moneybag(0, 1, 0)
Denier = Moneybag(0, 0, 1)
