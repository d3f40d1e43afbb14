"""
PremiumCore Coverage Models

Key components:
- CoverageType: Catalog entry with base rate and coverage bounds
- CoverageSelection: A coverage the user has picked, with amount and term
- PremiumQuote: Rated result for a single selection
- PolicyPremiumSummary: Total across selections with a per-line breakdown

All monetary values use Decimal for precision. Premiums are whole
currency units.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Mapping

from ..exceptions import UnknownCoverageType
from ..money import to_decimal
from .enums import DEFAULT_TERM_YEARS


# =============================================================================
# Coverage Type
# =============================================================================

@dataclass(frozen=True)
class CoverageType:
    """
    A category of insurance product offered for selection.

    Attributes:
        id: Unique symbolic key (e.g., "life", "auto")
        name: Display name
        description: Short description for selection cards
        base_rate: Monthly cost per 10,000 of coverage
        min_coverage: Smallest coverage amount offered (inclusive)
        max_coverage: Largest coverage amount offered (inclusive)
        features: Marketing feature bullets
    """
    id: str
    name: str
    base_rate: Decimal
    min_coverage: Decimal
    max_coverage: Decimal
    description: str = ""
    features: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.base_rate <= 0:
            raise ValueError(f"Coverage type '{self.id}': base_rate must be positive")
        if self.min_coverage <= 0:
            raise ValueError(f"Coverage type '{self.id}': min_coverage must be positive")
        if self.min_coverage >= self.max_coverage:
            raise ValueError(
                f"Coverage type '{self.id}': min_coverage must be below max_coverage"
            )

    def contains(self, amount: Decimal) -> bool:
        """Check if an amount is within the offered bounds."""
        return self.min_coverage <= amount <= self.max_coverage

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "base_rate": str(self.base_rate),
            "min_coverage": str(self.min_coverage),
            "max_coverage": str(self.max_coverage),
            "features": list(self.features),
        }


# =============================================================================
# Coverage Selection
# =============================================================================

@dataclass
class CoverageSelection:
    """
    A coverage chosen for a policy.

    Mutated while the user adjusts amount and term; read-only once handed
    to the aggregator.
    """
    type_id: str
    amount: Decimal
    term_years: int = DEFAULT_TERM_YEARS

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CoverageSelection":
        """
        Build a selection from a request payload.

        Accepts both camelCase (typeId, termYears) and snake_case keys.
        """
        type_id = data.get("typeId", data.get("type_id"))
        if not type_id:
            raise UnknownCoverageType(
                message="Coverage selection has no type id",
                details={"selection": {k: str(v) for k, v in data.items()}},
            )
        term = data.get("termYears", data.get("term_years", DEFAULT_TERM_YEARS))
        return cls(
            type_id=str(type_id),
            amount=to_decimal(data.get("amount")),
            term_years=term,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "type_id": self.type_id,
            "amount": str(self.amount),
            "term_years": self.term_years,
        }


# =============================================================================
# Quotes
# =============================================================================

@dataclass(frozen=True)
class PremiumQuote:
    """
    Rated premium for one coverage.

    Attributes:
        coverage_id: Coverage type id
        requested_amount: Amount the caller asked for
        effective_amount: Amount after clamping to the type's bounds
        term_years: Policy term
        monthly_rate: (effective_amount / 10,000) * base_rate
        annual_premium: monthly_rate * term_years / 12, rounded half-up
    """
    coverage_id: str
    requested_amount: Decimal
    effective_amount: Decimal
    term_years: int
    monthly_rate: Decimal
    annual_premium: int

    @property
    def was_clamped(self) -> bool:
        return self.requested_amount != self.effective_amount

    def to_dict(self) -> dict[str, Any]:
        return {
            "coverage_id": self.coverage_id,
            "requested_amount": str(self.requested_amount),
            "effective_amount": str(self.effective_amount),
            "term_years": self.term_years,
            "monthly_rate": str(self.monthly_rate),
            "annual_premium": self.annual_premium,
        }


@dataclass(frozen=True)
class PremiumLine:
    """One line of a policy premium breakdown."""
    type_id: str
    premium: int


@dataclass(frozen=True)
class PolicyPremiumSummary:
    """
    Total annual premium for a set of selections.

    Lines are kept in the order the selections were given.
    """
    total: int = 0
    lines: tuple[PremiumLine, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "lines": [{"type_id": l.type_id, "premium": l.premium} for l in self.lines],
        }
