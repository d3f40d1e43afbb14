"""Request schemas for the API."""

from datetime import date
from decimal import Decimal
from typing import Any, Optional

from pydantic import Field, StrictInt

from .base import CamelModel


class ClampRequest(CamelModel):
    """Clamp a requested amount to a coverage type's bounds."""
    type_id: str
    amount: Decimal


class PremiumRequest(CamelModel):
    """Rate one coverage."""
    type_id: str
    amount: Decimal
    term_years: StrictInt


class SelectionIn(CamelModel):
    """One coverage selection in an aggregate request. Term defaults to PC_DEFAULT_TERM."""
    type_id: str
    amount: Decimal
    term_years: Optional[StrictInt] = None


class AggregateRequest(CamelModel):
    """Rate every selection of a policy, in display order."""
    selections: list[SelectionIn] = Field(default_factory=list)


class RiskProfileIn(CamelModel):
    """Applicant risk attributes."""
    age: int
    annual_income: Decimal
    occupation: Optional[str] = None
    has_chronic_illness: bool = False
    smoker: bool = False
    bmi: Optional[Decimal] = None
    has_dangerous_hobbies: bool = False
    has_bankruptcy_history: bool = False
    credit_score: Optional[int] = None
    risk_zone: Optional[str] = Field(None, pattern="^(low|medium|high)$")


class RiskQuoteRequest(CamelModel):
    """Rate one coverage and apply a risk multiplier."""
    type_id: str
    amount: Decimal
    term_years: StrictInt
    profile: RiskProfileIn


class ScheduleRequest(CamelModel):
    """Split an annual premium into installments."""
    total_premium: Decimal
    frequency: str = "monthly"
    start_date: Optional[date] = None


class PasswordRequest(CamelModel):
    password: str


class EmailRequest(CamelModel):
    email: str


class PhoneRequest(CamelModel):
    phone: str


class CurrencyRequest(CamelModel):
    """Amount is taken as sent so non-numeric input can be reported as invalid."""
    amount: Any = None
    min: Optional[Decimal] = None
    max: Optional[Decimal] = None


class ObjectIdRequest(CamelModel):
    id: str
