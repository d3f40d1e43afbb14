"""
PremiumCore Engine

Pure rating services over the coverage catalog.

Services:
- clamp: Constrain coverage amounts to a type's bounds
- PremiumCalculator / calculate: Rate one coverage
- aggregate: Total premium across selections
- PolicyDraft: Track selections while a policy is built
- calculate_risk_multiplier: Applicant risk adjustment
- calculate_risk_score / calculate_risk_factors: Risk score, category and breakdown
- generate_premium_schedule: Installment schedule

Usage:
    from premiumcore.engine import calculate, aggregate

    calculate("life", 500000, 20)  # 2083
    aggregate([{"typeId": "life", "amount": 500000, "termYears": 20}]).total
"""
from __future__ import annotations

from .aggregator import aggregate
from .calculator import (
    PremiumCalculator,
    calculate,
    quote,
    validate_amount,
    validate_term_length,
)
from .amount_clamp import clamp, clamp_amount
from .risk import (
    calculate_risk_adjusted,
    calculate_risk_factors,
    calculate_risk_multiplier,
    calculate_risk_score,
)
from .schedule import add_months, generate_premium_schedule
from .selection import PolicyDraft

__all__ = [
    "aggregate",
    "PremiumCalculator",
    "calculate",
    "quote",
    "validate_amount",
    "validate_term_length",
    "clamp",
    "clamp_amount",
    "calculate_risk_adjusted",
    "calculate_risk_multiplier",
    "calculate_risk_score",
    "calculate_risk_factors",
    "add_months",
    "generate_premium_schedule",
    "PolicyDraft",
]
