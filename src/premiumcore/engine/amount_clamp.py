"""
PremiumCore Coverage Amount Clamp

Constrains a requested coverage amount to a coverage type's offered
bounds. Clamping corrects amounts near the boundary; it does not judge
whether the amount is sensible (the calculator rejects non-positive
amounts before clamping).
"""
from __future__ import annotations

from decimal import Decimal
from typing import Any, Optional

from ..catalog import CoverageCatalog, resolve_catalog
from ..models import CoverageType
from ..money import to_decimal


def clamp_amount(coverage: CoverageType, amount: Decimal) -> Decimal:
    """Clamp an amount into [min_coverage, max_coverage]."""
    return max(coverage.min_coverage, min(coverage.max_coverage, amount))


def clamp(
    type_id: str,
    requested_amount: Any,
    catalog: Optional[CoverageCatalog] = None,
) -> Decimal:
    """
    Clamp a requested amount for a coverage type.

    Idempotent: clamp(t, clamp(t, x)) == clamp(t, x).

    Args:
        type_id: Coverage type id
        requested_amount: Amount entered by the user
        catalog: Catalog to resolve against (default: built-in)

    Returns:
        Amount within the type's inclusive bounds

    Raises:
        UnknownCoverageType: If type_id is not in the catalog
        InvalidAmount: If the amount is not a finite number
    """
    coverage = resolve_catalog(catalog).lookup(type_id)
    return clamp_amount(coverage, to_decimal(requested_amount))
