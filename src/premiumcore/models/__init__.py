"""
PremiumCore Models

All domain models for premium calculation, organized by category:

    from premiumcore.models import (
        # Enums
        PaymentFrequency, Occupation, RiskZone, RiskCategory, ALLOWED_TERM_YEARS,
        # Coverage
        CoverageType, CoverageSelection, PremiumQuote,
        PremiumLine, PolicyPremiumSummary,
        # Risk
        RiskProfile, RiskFactor,
        # Schedule
        Installment,
        # Validation
        ValidationResult,
    )
"""
from __future__ import annotations

# =============================================================================
# Enums
# =============================================================================
from .enums import (
    ALLOWED_TERM_YEARS,
    DEFAULT_TERM_YEARS,
    Occupation,
    PaymentFrequency,
    RiskCategory,
    RiskFactorCategory,
    RiskZone,
)

# =============================================================================
# Coverage
# =============================================================================
from .coverage import (
    CoverageSelection,
    CoverageType,
    PolicyPremiumSummary,
    PremiumLine,
    PremiumQuote,
)

# =============================================================================
# Risk / Schedule / Validation
# =============================================================================
from .risk import RiskFactor, RiskProfile
from .schedule import Installment
from .validation import ValidationResult

__all__ = [
    # Enums
    "ALLOWED_TERM_YEARS",
    "DEFAULT_TERM_YEARS",
    "Occupation",
    "PaymentFrequency",
    "RiskCategory",
    "RiskFactorCategory",
    "RiskZone",
    # Coverage
    "CoverageSelection",
    "CoverageType",
    "PolicyPremiumSummary",
    "PremiumLine",
    "PremiumQuote",
    # Risk
    "RiskFactor",
    "RiskProfile",
    # Schedule
    "Installment",
    # Validation
    "ValidationResult",
]
