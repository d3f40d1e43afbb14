"""
PremiumCore Money Helpers

Decimal conversion and rounding used by every rating step.

All monetary arithmetic is done in Decimal. Floats are converted through
their shortest repr so that 0.1 becomes Decimal("0.1") and not the
binary expansion.
"""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Union

from .exceptions import InvalidAmount

Number = Union[int, float, Decimal, str]

WHOLE_UNIT = Decimal("1")
CENT = Decimal("0.01")


def to_decimal(value: Any, field_name: str = "amount") -> Decimal:
    """
    Convert a caller-supplied number to a finite Decimal.

    Args:
        value: int, float, Decimal or numeric string
        field_name: Name used in the error details

    Returns:
        Finite Decimal

    Raises:
        InvalidAmount: If the value is not numeric or not finite
    """
    if value is None or isinstance(value, bool):
        raise InvalidAmount(
            message=f"{field_name} must be a number",
            details={"field": field_name, "value": repr(value)},
        )

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, float)):
        result = Decimal(str(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation:
            raise InvalidAmount(
                message=f"{field_name} must be a number",
                details={"field": field_name, "value": value[:64]},
            )
    else:
        raise InvalidAmount(
            message=f"{field_name} must be a number",
            details={"field": field_name, "type": type(value).__name__},
        )

    if not result.is_finite():
        raise InvalidAmount(
            message=f"{field_name} must be finite",
            details={"field": field_name, "value": str(result)},
        )
    return result


def round_half_up(value: Decimal) -> int:
    """Round to the nearest whole currency unit, halves away from zero."""
    return int(value.quantize(WHOLE_UNIT, rounding=ROUND_HALF_UP))


def round_cents(value: Decimal) -> Decimal:
    """Round to two decimal places, halves away from zero."""
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def fractional_digits(value: Decimal) -> int:
    """Number of significant digits after the decimal point."""
    normalized = value.normalize()
    exponent = normalized.as_tuple().exponent
    return max(0, -exponent) if isinstance(exponent, int) else 0
