"""Numeric helpers for plural selection.

Counts arrive from loosely-typed parameter mappings: integers, floats,
Decimals or numeric strings. They are coerced once so that set membership,
interval bounds and plural rules all compare numbers with numbers.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import math
from decimal import Decimal, InvalidOperation, getcontext, localcontext
from typing import TypeAlias

from catalogtrans.diagnostics import InvalidCountError

__all__ = [
    "Number",
    "coerce_count",
    "truncated_mod",
]

Number: TypeAlias = int | float | Decimal
"""Numeric plural count."""


def coerce_count(value: object) -> Number:
    """Coerce a count parameter to a number.

    Args:
        value: Raw parameter value

    Returns:
        The value itself for int/float/Decimal, an int or Decimal for numeric strings

    Raises:
        InvalidCountError: If value is a bool, NaN or infinite, a non-numeric string, or
            any other type

    Example:
        >>> coerce_count("3")
        3
        >>> coerce_count("1.5")
        Decimal('1.5')
        >>> coerce_count(2.5)
        2.5
    """
    match value:
        case bool():
            raise InvalidCountError(value)
        case int():
            return value
        case float() if math.isfinite(value):
            return value
        case Decimal() if value.is_finite():
            return value
        case str():
            try:
                number = Decimal(value.strip())
            except InvalidOperation:
                raise InvalidCountError(value) from None
            if not number.is_finite():
                raise InvalidCountError(value)
            if number == number.to_integral_value():
                return int(number)
            return number
        case _:
            raise InvalidCountError(value)


def truncated_mod(n: Number, m: int) -> Number:
    """Remainder whose sign follows the dividend.

    Plural rule tables are written for truncating remainder, where -21 % 10
    is -1 rather than 9 as Python's floored ``%`` gives.

    Args:
        n: Dividend
        m: Positive divisor

    Returns:
        Remainder with the sign of n

    Example:
        >>> truncated_mod(-21, 10)
        -1
        >>> truncated_mod(21, 10)
        1
    """
    if isinstance(n, Decimal):
        # Decimal % truncates toward zero but needs the integer quotient to fit
        # the context precision
        with localcontext() as ctx:
            ctx.prec = max(getcontext().prec, n.adjusted() + 2)
            return n % m
    if isinstance(n, int):
        remainder = abs(n) % m
        return -remainder if n < 0 else remainder
    return math.fmod(n, m)
