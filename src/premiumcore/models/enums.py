"""
PremiumCore Enumerations

All enums inherit from (str, Enum) for JSON serialization compatibility.
"""
from __future__ import annotations

from enum import Enum


# =============================================================================
# Term Length
# =============================================================================

# Offered policy terms, in years. The term defines the product, so values
# outside this set are rejected rather than clamped.
ALLOWED_TERM_YEARS: tuple[int, ...] = (10, 15, 20, 25, 30)

DEFAULT_TERM_YEARS = 20


# =============================================================================
# Payment Frequency
# =============================================================================

class PaymentFrequency(str, Enum):
    """How often premium installments fall due."""
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    SEMI_ANNUAL = "semi-annual"
    ANNUAL = "annual"

    @property
    def installments_per_year(self) -> int:
        return _INSTALLMENTS[self]

    @property
    def months_between(self) -> int:
        return 12 // _INSTALLMENTS[self]


_INSTALLMENTS = {
    PaymentFrequency.MONTHLY: 12,
    PaymentFrequency.QUARTERLY: 4,
    PaymentFrequency.SEMI_ANNUAL: 2,
    PaymentFrequency.ANNUAL: 1,
}


# =============================================================================
# Risk Profile Values
# =============================================================================

class Occupation(str, Enum):
    """Occupation categories used for risk rating."""
    PROFESSIONAL = "professional"
    ADMINISTRATIVE = "administrative"
    MANUAL = "manual"
    HAZARDOUS = "hazardous"
    HEALTHCARE = "healthcare"
    EDUCATION = "education"
    TECHNOLOGY = "technology"
    FINANCE = "finance"
    UNEMPLOYED = "unemployed"


class RiskZone(str, Enum):
    """Geographic risk zone of the insured location."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class RiskCategory(str, Enum):
    """Overall risk band derived from the 0-100 risk score."""
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    VERY_HIGH = "very-high"


class RiskFactorCategory(str, Enum):
    """Grouping of individual risk factors in a breakdown."""
    HEALTH = "health"
    OCCUPATION = "occupation"
    LIFESTYLE = "lifestyle"
    FINANCIAL = "financial"
    GEOGRAPHIC = "geographic"
