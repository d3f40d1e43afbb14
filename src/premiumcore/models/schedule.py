"""
PremiumCore Schedule Models
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any

from .enums import PaymentFrequency


@dataclass
class Installment:
    """
    A single premium installment.

    Installments start unpaid; marking payment is the caller's concern.
    """
    sequence: int
    frequency: PaymentFrequency
    amount: Decimal
    due_date: date
    paid: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "sequence": self.sequence,
            "frequency": self.frequency.value,
            "amount": str(self.amount),
            "due_date": self.due_date.isoformat(),
            "paid": self.paid,
        }
