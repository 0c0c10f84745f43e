"""
Core math modules для Moneybag

Арифметика 64-битных счётчиков монет с гарантией отсутствия переполнения.
"""

from src.core.math.coin_arithmetic import (
    # Counter constants
    COIN_NUMBER_BITS,
    COIN_NUMBER_MAX,
    DENIERS_PER_LIVRE,
    DENIERS_PER_SOLIDUS,
    # Exceptions
    MoneybagOverflowError,
    MoneybagRangeError,
    MoneybagUnderflowError,
    # Validation
    is_coin_number,
    validate_coin_number,
    # Range checks
    add_would_overflow,
    mul_would_overflow,
    sub_would_underflow,
    # Checked operations
    checked_add_counters,
    checked_mul_counters,
    checked_sub_counters,
)

__all__ = [
    # Coin Arithmetic — Constants
    "COIN_NUMBER_BITS",
    "COIN_NUMBER_MAX",
    "DENIERS_PER_LIVRE",
    "DENIERS_PER_SOLIDUS",
    # Coin Arithmetic — Exceptions
    "MoneybagRangeError",
    "MoneybagOverflowError",
    "MoneybagUnderflowError",
    # Coin Arithmetic — Validation
    "is_coin_number",
    "validate_coin_number",
    # Coin Arithmetic — Range checks
    "add_would_overflow",
    "sub_would_underflow",
    "mul_would_overflow",
    # Coin Arithmetic — Checked operations
    "checked_add_counters",
    "checked_sub_counters",
    "checked_mul_counters",
]
