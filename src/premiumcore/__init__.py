"""
PremiumCore - Insurance Premium Calculation & Coverage Validation

PremiumCore rates insurance coverage selections and validates the input
that feeds them. Everything is a pure function over a read-only coverage
catalog, safe to call from any number of request handlers at once.

Key Features:
- Coverage catalog (built-in or loaded from YAML/JSON)
- Amount clamping to each coverage type's bounds
- Annual premium calculation per coverage and per policy
- Risk multiplier, score and factor breakdown from an applicant profile
- Installment schedules
- Shared input validators (password, email, phone, currency, ids)

Quick Start:
    from premiumcore import calculate, aggregate, validate_password

    calculate("life", 500000, 20)          # 2083

    summary = aggregate([
        {"typeId": "life", "amount": 500000, "termYears": 20},
        {"typeId": "auto", "amount": 40000, "termYears": 10},
    ])
    summary.total, [line.type_id for line in summary.lines]

    validate_password("abc").errors        # one message per unmet rule

Version: 1.0.0
"""
from __future__ import annotations

__version__ = "1.0.0"

# =============================================================================
# Models
# =============================================================================
from .models import (
    ALLOWED_TERM_YEARS,
    DEFAULT_TERM_YEARS,
    CoverageSelection,
    CoverageType,
    Installment,
    Occupation,
    PaymentFrequency,
    PolicyPremiumSummary,
    PremiumLine,
    PremiumQuote,
    RiskCategory,
    RiskFactor,
    RiskProfile,
    RiskZone,
    ValidationResult,
)

# =============================================================================
# Catalog
# =============================================================================
from .catalog import (
    CatalogLoader,
    CoverageCatalog,
    get_default_catalog,
    load_catalog,
)

# =============================================================================
# Engine
# =============================================================================
from .engine import (
    PolicyDraft,
    PremiumCalculator,
    aggregate,
    calculate,
    calculate_risk_adjusted,
    calculate_risk_factors,
    calculate_risk_multiplier,
    calculate_risk_score,
    clamp,
    generate_premium_schedule,
    quote,
)

# =============================================================================
# Validation
# =============================================================================
from .validation import (
    is_valid_credit_card,
    is_valid_currency,
    is_valid_email,
    is_valid_iso_datetime,
    is_valid_object_id,
    is_valid_phone,
    normalize_phone,
    require_valid,
    sanitize_string,
    validate_age,
    validate_password,
)

# =============================================================================
# Exceptions
# =============================================================================
from .exceptions import (
    CatalogLoadError,
    CatalogValidationError,
    CatalogVersionMismatch,
    InvalidAmount,
    InvalidFrequency,
    InvalidRiskProfile,
    InvalidTermLength,
    PremiumCoreError,
    UnknownCoverageType,
    ValidationFailed,
)

__all__ = [
    "__version__",
    # Models
    "ALLOWED_TERM_YEARS",
    "DEFAULT_TERM_YEARS",
    "CoverageSelection",
    "CoverageType",
    "Installment",
    "Occupation",
    "PaymentFrequency",
    "PolicyPremiumSummary",
    "PremiumLine",
    "PremiumQuote",
    "RiskCategory",
    "RiskFactor",
    "RiskProfile",
    "RiskZone",
    "ValidationResult",
    # Catalog
    "CatalogLoader",
    "CoverageCatalog",
    "get_default_catalog",
    "load_catalog",
    # Engine
    "PolicyDraft",
    "PremiumCalculator",
    "aggregate",
    "calculate",
    "calculate_risk_adjusted",
    "calculate_risk_factors",
    "calculate_risk_multiplier",
    "calculate_risk_score",
    "clamp",
    "generate_premium_schedule",
    "quote",
    # Validation
    "is_valid_credit_card",
    "is_valid_currency",
    "is_valid_email",
    "is_valid_iso_datetime",
    "is_valid_object_id",
    "is_valid_phone",
    "normalize_phone",
    "require_valid",
    "sanitize_string",
    "validate_age",
    "validate_password",
    # Exceptions
    "CatalogLoadError",
    "CatalogValidationError",
    "CatalogVersionMismatch",
    "InvalidAmount",
    "InvalidFrequency",
    "InvalidRiskProfile",
    "InvalidTermLength",
    "PremiumCoreError",
    "UnknownCoverageType",
    "ValidationFailed",
]
