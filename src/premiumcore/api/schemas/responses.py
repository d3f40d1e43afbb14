"""Response schemas for the API."""

from decimal import Decimal
from typing import Any, Optional

from .base import CamelModel


class HealthResponse(CamelModel):
    """Liveness probe response."""
    status: str
    timestamp: str
    engine_version: str
    catalog_version: str


class CoverageTypeOut(CamelModel):
    """Catalog entry."""
    id: str
    name: str
    description: str
    base_rate: Decimal
    min_coverage: Decimal
    max_coverage: Decimal
    features: list[str]


class ClampResponse(CamelModel):
    type_id: str
    requested_amount: Decimal
    amount: Decimal
    clamped: bool


class PremiumResponse(CamelModel):
    """Rated premium for one coverage."""
    type_id: str
    requested_amount: Decimal
    effective_amount: Decimal
    term_years: int
    monthly_rate: Decimal
    annual_premium: int


class PremiumLineOut(CamelModel):
    type_id: str
    premium: int


class AggregateResponse(CamelModel):
    """Policy total with per-line breakdown in request order."""
    total: int
    lines: list[PremiumLineOut]


class RiskFactorOut(CamelModel):
    category: str
    factor: str
    level: str
    multiplier: Decimal
    description: str


class RiskQuoteResponse(CamelModel):
    """Risk-adjusted premium with the profile's score and breakdown."""
    type_id: str
    base_premium: int
    risk_multiplier: Decimal
    adjusted_premium: int
    risk_score: int
    risk_category: str
    factors: list[RiskFactorOut]


class InstallmentOut(CamelModel):
    sequence: int
    frequency: str
    amount: Decimal
    due_date: str
    paid: bool


class ScheduleResponse(CamelModel):
    frequency: str
    total_premium: Decimal
    installments: list[InstallmentOut]


class ValidationResponse(CamelModel):
    """Multi-rule validator result."""
    is_valid: bool
    errors: list[str] = []


class PredicateResponse(CamelModel):
    """Single-rule validator result."""
    is_valid: bool
    normalized: Optional[str] = None


class ErrorResponse(CamelModel):
    """Body of every domain error response."""
    error: dict[str, Any]
