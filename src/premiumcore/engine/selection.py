"""
PremiumCore Policy Draft

Tracks the coverages a user has picked while building a policy: one
selection per coverage type, kept in the order they were selected.
Amount changes are clamped to the type's bounds as they are entered;
term changes are validated, never clamped.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from ..catalog import CoverageCatalog, get_default_catalog
from ..exceptions import UnknownCoverageType
from ..models import DEFAULT_TERM_YEARS, CoverageSelection, PolicyPremiumSummary
from .aggregator import aggregate
from .calculator import validate_amount, validate_term_length
from .amount_clamp import clamp_amount


@dataclass
class PolicyDraft:
    """
    Mutable set of coverage selections for a policy being built.

    Usage:
        draft = PolicyDraft()
        draft.select("life")                 # starts at the minimum coverage
        draft.set_amount("life", 250000)
        draft.select("auto", amount=40000, term_years=10)
        draft.deselect("auto")
        summary = draft.summary()
    """

    catalog: CoverageCatalog = field(default_factory=get_default_catalog)
    default_term: int = DEFAULT_TERM_YEARS
    _selections: dict[str, CoverageSelection] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self) -> None:
        validate_term_length(self.default_term)

    @property
    def selections(self) -> list[CoverageSelection]:
        """Selections in the order they were made."""
        return list(self._selections.values())

    def is_selected(self, type_id: str) -> bool:
        return type_id in self._selections

    def select(
        self,
        type_id: str,
        amount: Any = None,
        term_years: Optional[int] = None,
    ) -> CoverageSelection:
        """
        Add a coverage to the draft.

        Selecting a type that is already in the draft returns the existing
        selection unchanged.
        """
        if type_id in self._selections:
            return self._selections[type_id]

        coverage = self.catalog.lookup(type_id)
        if amount is None:
            effective = coverage.min_coverage
        else:
            effective = clamp_amount(coverage, validate_amount(amount))
        term = validate_term_length(self.default_term if term_years is None else term_years)

        selection = CoverageSelection(type_id=type_id, amount=effective, term_years=term)
        self._selections[type_id] = selection
        return selection

    def set_amount(self, type_id: str, amount: Any) -> CoverageSelection:
        """Change a selection's amount, clamped to the type's bounds."""
        selection = self._get(type_id)
        coverage = self.catalog.lookup(type_id)
        selection.amount = clamp_amount(coverage, validate_amount(amount))
        return selection

    def set_term(self, type_id: str, term_years: Any) -> CoverageSelection:
        """Change a selection's term."""
        selection = self._get(type_id)
        selection.term_years = validate_term_length(term_years)
        return selection

    def deselect(self, type_id: str) -> CoverageSelection:
        """Remove a coverage from the draft and return the discarded selection."""
        selection = self._get(type_id)
        del self._selections[type_id]
        return selection

    def clear(self) -> None:
        self._selections.clear()

    def summary(self) -> PolicyPremiumSummary:
        """Rate every selection; see premiumcore.engine.aggregator.aggregate."""
        return aggregate(self.selections, self.catalog)

    def _get(self, type_id: str) -> CoverageSelection:
        selection = self._selections.get(type_id)
        if selection is None:
            raise UnknownCoverageType(
                message=f"Coverage '{type_id}' is not selected",
                details={"type_id": type_id, "selected": list(self._selections)},
            )
        return selection

    def __len__(self) -> int:
        return len(self._selections)
