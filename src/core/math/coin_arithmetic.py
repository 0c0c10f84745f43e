"""
Coin Arithmetic — Fixed-Width Counter Primitives

Модуль моделирует 64-битный беззнаковый счётчик монет поверх
неограниченного int Python:
- Границы счётчика (COIN_NUMBER_MAX) и соотношения номиналов
- Проверки переполнения/антипереполнения БЕЗ вычисления результата
- Покомпонентные checked-операции над кортежами счётчиков

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Счётчик всегда в [0, COIN_NUMBER_MAX]
2. Переполнение никогда не "заворачивается" и не насыщается — только exception
3. Операции all-or-nothing: все компоненты проверяются до вычисления результата
4. Проверка умножения делит максимум на множитель (сама проверка не переполняется)
"""

from typing import Final

# =============================================================================
# ПАРАМЕТРЫ СЧЁТЧИКА
# =============================================================================

# Разрядность счётчика монет (unsigned)
COIN_NUMBER_BITS: Final[int] = 64

# Максимальное представимое количество монет одного номинала
COIN_NUMBER_MAX: Final[int] = (1 << COIN_NUMBER_BITS) - 1

# =============================================================================
# СООТНОШЕНИЯ НОМИНАЛОВ
# =============================================================================

# 1 solidus = 12 deniers
DENIERS_PER_SOLIDUS: Final[int] = 12

# 1 livre = 20 soliduses = 240 deniers
DENIERS_PER_LIVRE: Final[int] = 240


# =============================================================================
# EXCEPTIONS
# =============================================================================


class MoneybagRangeError(ArithmeticError):
    """Базовая ошибка выхода счётчика монет за допустимый диапазон."""


class MoneybagOverflowError(MoneybagRangeError, OverflowError):
    """
    Результат сложения или умножения превышает COIN_NUMBER_MAX
    хотя бы в одном компоненте.

    Операнды при этом не изменяются.
    """


class MoneybagUnderflowError(MoneybagRangeError):
    """
    Результат вычитания отрицателен хотя бы в одном компоненте.

    Частичное вычитание не выполняется.
    """


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def is_coin_number(value: object) -> bool:
    """
    Проверка, что значение представимо счётчиком монет.

    bool формально является int, но счётчиком не считается.

    Examples:
        >>> is_coin_number(0)
        True
        >>> is_coin_number(COIN_NUMBER_MAX + 1)
        False
        >>> is_coin_number(True)
        False
    """
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return 0 <= value <= COIN_NUMBER_MAX


def validate_coin_number(value: object, name: str = "value") -> int:
    """
    Проверка значения счётчика монет.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value без изменений

    Raises:
        TypeError: Если value не int (или bool)
        ValueError: Если value вне [0, COIN_NUMBER_MAX]
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be int, got {type(value).__name__}")

    if value < 0:
        raise ValueError(f"{name} cannot be negative: {value}")

    if value > COIN_NUMBER_MAX:
        raise ValueError(f"{name} {value} exceeds maximum {COIN_NUMBER_MAX}")

    return value


# =============================================================================
# ПРОВЕРКИ ДИАПАЗОНА (без вычисления результата)
# =============================================================================


def add_would_overflow(a: int, b: int) -> bool:
    """
    a + b > COIN_NUMBER_MAX?

    Проверка через запас MAX - a, сумма не вычисляется.

    Examples:
        >>> add_would_overflow(COIN_NUMBER_MAX, 0)
        False
        >>> add_would_overflow(COIN_NUMBER_MAX, 1)
        True
    """
    return COIN_NUMBER_MAX - a < b


def sub_would_underflow(a: int, b: int) -> bool:
    """a - b < 0?"""
    return b > a


def mul_would_overflow(a: int, times: int) -> bool:
    """
    a * times > COIN_NUMBER_MAX?

    Максимум делится на множитель, произведение не вычисляется.
    times == 0 всегда безопасен.

    Examples:
        >>> mul_would_overflow(COIN_NUMBER_MAX, 0)
        False
        >>> mul_would_overflow(COIN_NUMBER_MAX // 2, 2)
        False
        >>> mul_would_overflow(COIN_NUMBER_MAX // 2 + 1, 2)
        True
    """
    if times == 0:
        return False
    return a > COIN_NUMBER_MAX // times


# =============================================================================
# ПОКОМПОНЕНТНЫЕ CHECKED-ОПЕРАЦИИ
# =============================================================================


def _check_same_arity(lhs: tuple[int, ...], rhs: tuple[int, ...]) -> None:
    if len(lhs) != len(rhs):
        raise ValueError(
            f"Counter tuples differ in length: {len(lhs)} != {len(rhs)}"
        )


def checked_add_counters(
    lhs: tuple[int, ...], rhs: tuple[int, ...]
) -> tuple[int, ...]:
    """
    Покомпонентная сумма счётчиков.

    Args:
        lhs: Счётчики левого операнда
        rhs: Счётчики правого операнда (той же длины)

    Returns:
        Новый кортеж сумм

    Raises:
        MoneybagOverflowError: Если хотя бы один компонент > COIN_NUMBER_MAX
    """
    _check_same_arity(lhs, rhs)

    if any(add_would_overflow(a, b) for a, b in zip(lhs, rhs)):
        raise MoneybagOverflowError("Out of range while adding another moneybag.")

    return tuple(a + b for a, b in zip(lhs, rhs))


def checked_sub_counters(
    lhs: tuple[int, ...], rhs: tuple[int, ...]
) -> tuple[int, ...]:
    """
    Покомпонентная разность счётчиков.

    Raises:
        MoneybagUnderflowError: Если хотя бы один компонент rhs больше lhs
    """
    _check_same_arity(lhs, rhs)

    if any(sub_would_underflow(a, b) for a, b in zip(lhs, rhs)):
        raise MoneybagUnderflowError(
            "Out of range while subtracting another moneybag."
        )

    return tuple(a - b for a, b in zip(lhs, rhs))


def checked_mul_counters(counters: tuple[int, ...], times: int) -> tuple[int, ...]:
    """
    Умножение всех счётчиков на неотрицательный скаляр.

    Args:
        counters: Счётчики
        times: Множитель в [0, COIN_NUMBER_MAX]

    Returns:
        Новый кортеж произведений

    Raises:
        TypeError / ValueError: Невалидный множитель (validate_coin_number)
        MoneybagOverflowError: Если хотя бы один компонент > COIN_NUMBER_MAX
    """
    validate_coin_number(times, "times")

    if any(mul_would_overflow(c, times) for c in counters):
        raise MoneybagOverflowError("Out of range while multiplying moneybag.")

    return tuple(c * times for c in counters)
