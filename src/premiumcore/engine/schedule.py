"""
PremiumCore Premium Schedule

Splits an annual premium into equal installments.
"""
from __future__ import annotations

import calendar
from datetime import date
from typing import Any, Optional, Union

from ..exceptions import InvalidAmount, InvalidFrequency
from ..models import Installment, PaymentFrequency
from ..money import round_cents, to_decimal


def add_months(start: date, months: int) -> date:
    """
    Shift a date by whole months.

    The day is clamped to the last day of the target month, so
    Jan 31 + 1 month is Feb 28 (or 29).
    """
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    day = min(start.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def parse_frequency(frequency: Union[PaymentFrequency, str]) -> PaymentFrequency:
    try:
        return PaymentFrequency(frequency)
    except ValueError:
        raise InvalidFrequency(
            message=f"Unsupported payment frequency: {frequency!r}",
            details={
                "frequency": str(frequency),
                "allowed": [f.value for f in PaymentFrequency],
            },
        )


def generate_premium_schedule(
    total_premium: Any,
    frequency: Union[PaymentFrequency, str] = PaymentFrequency.MONTHLY,
    start_date: Optional[date] = None,
) -> list[Installment]:
    """
    Build the installment schedule for one year of premium.

    Args:
        total_premium: Annual premium to split
        frequency: monthly, quarterly, semi-annual or annual
        start_date: Due date of the first installment (default: today)

    Returns:
        Installments in due-date order, each rounded half-up to cents

    Raises:
        InvalidAmount: If total_premium is negative or not a number
        InvalidFrequency: If frequency is not supported
    """
    total = to_decimal(total_premium, field_name="total_premium")
    if total < 0:
        raise InvalidAmount(
            message="Total premium cannot be negative",
            details={"total_premium": str(total)},
        )
    freq = parse_frequency(frequency)
    first_due = start_date or date.today()

    count = freq.installments_per_year
    amount = round_cents(total / count)
    return [
        Installment(
            sequence=i + 1,
            frequency=freq,
            amount=amount,
            due_date=add_months(first_due, i * freq.months_between),
        )
        for i in range(count)
    ]
