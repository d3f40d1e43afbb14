"""
PremiumCore Premium Calculator

Rates a single coverage selection.

Algorithm:
1. Resolve the coverage type
2. Reject non-positive amounts and terms outside the offered set
3. Clamp the amount to the type's bounds
4. monthly_rate = (amount / 10,000) * base_rate
5. annual_premium = round_half_up(monthly_rate * term_years / 12)

The calculator holds no mutable state; identical inputs always give
identical quotes.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Optional

from ..catalog import CoverageCatalog, get_default_catalog
from ..exceptions import InvalidAmount, InvalidTermLength
from ..models import ALLOWED_TERM_YEARS, PremiumQuote
from ..money import round_half_up, to_decimal
from .amount_clamp import clamp_amount

logger = logging.getLogger(__name__)

RATE_UNIT = Decimal("10000")
MONTHS_PER_YEAR = Decimal("12")


# =============================================================================
# Input Checks
# =============================================================================

def validate_amount(amount: Any) -> Decimal:
    """
    Check that a requested coverage amount is a positive finite number.

    Raises:
        InvalidAmount: If the amount is missing, non-numeric, non-finite or <= 0
    """
    value = to_decimal(amount)
    if value <= 0:
        raise InvalidAmount(
            message=f"Coverage amount must be positive, got {value}",
            details={"amount": str(value)},
        )
    return value


def validate_term_length(term_years: Any) -> int:
    """
    Check that a term is one of the offered terms.

    Terms are never clamped: a different term is a different product.

    Raises:
        InvalidTermLength: If term_years is not an int in ALLOWED_TERM_YEARS
    """
    if isinstance(term_years, bool) or not isinstance(term_years, int) \
            or term_years not in ALLOWED_TERM_YEARS:
        raise InvalidTermLength(
            message=f"Term length must be one of {list(ALLOWED_TERM_YEARS)} years, got {term_years!r}",
            details={"term_years": repr(term_years), "allowed": list(ALLOWED_TERM_YEARS)},
        )
    return term_years


# =============================================================================
# Premium Calculator
# =============================================================================

@dataclass
class PremiumCalculator:
    """
    Rates coverage selections against a catalog.

    Usage:
        calculator = PremiumCalculator()
        quote = calculator.quote("life", 500000, 20)
        print(quote.annual_premium)  # 2083
    """

    catalog: CoverageCatalog = field(default_factory=get_default_catalog)

    def quote(self, type_id: str, amount: Any, term_years: Any) -> PremiumQuote:
        """
        Rate one coverage.

        Raises:
            UnknownCoverageType: type_id not in the catalog
            InvalidAmount: amount not a positive finite number
            InvalidTermLength: term not in ALLOWED_TERM_YEARS
        """
        coverage = self.catalog.lookup(type_id)
        requested = validate_amount(amount)
        term = validate_term_length(term_years)

        effective = clamp_amount(coverage, requested)
        monthly_rate = (effective / RATE_UNIT) * coverage.base_rate
        annual_premium = round_half_up(monthly_rate * term / MONTHS_PER_YEAR)

        logger.debug(
            "Rated %s: amount=%s effective=%s term=%d premium=%d",
            type_id, requested, effective, term, annual_premium,
        )
        return PremiumQuote(
            coverage_id=coverage.id,
            requested_amount=requested,
            effective_amount=effective,
            term_years=term,
            monthly_rate=monthly_rate,
            annual_premium=annual_premium,
        )

    def calculate(self, type_id: str, amount: Any, term_years: Any) -> int:
        """Rate one coverage and return only the annual premium."""
        return self.quote(type_id, amount, term_years).annual_premium


# =============================================================================
# Convenience Functions
# =============================================================================

def quote(
    type_id: str,
    amount: Any,
    term_years: Any,
    catalog: Optional[CoverageCatalog] = None,
) -> PremiumQuote:
    """Rate one coverage against the given (or built-in) catalog."""
    if catalog is None:
        return PremiumCalculator().quote(type_id, amount, term_years)
    return PremiumCalculator(catalog).quote(type_id, amount, term_years)


def calculate(
    type_id: str,
    amount: Any,
    term_years: Any,
    catalog: Optional[CoverageCatalog] = None,
) -> int:
    """
    Annual premium for one coverage.

    Example:
        calculate("life", 500000, 20)  # (500000/10000)*25 = 1250/month -> 2083
    """
    return quote(type_id, amount, term_years, catalog).annual_premium
