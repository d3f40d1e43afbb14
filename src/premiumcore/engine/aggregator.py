"""
PremiumCore Policy Coverage Aggregator

Sums premiums across a policy's selections. Fails fast: the first
selection that cannot be rated aborts the whole aggregate and its error
propagates unchanged, so a total never silently omits a coverage.
"""
from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Optional, Union

from ..catalog import CoverageCatalog
from ..models import CoverageSelection, PolicyPremiumSummary, PremiumLine
from .calculator import PremiumCalculator

logger = logging.getLogger(__name__)

SelectionInput = Union[CoverageSelection, Mapping[str, Any]]


def _as_selection(item: SelectionInput) -> CoverageSelection:
    if isinstance(item, CoverageSelection):
        return item
    return CoverageSelection.from_dict(item)


def aggregate(
    selections: Iterable[SelectionInput],
    catalog: Optional[CoverageCatalog] = None,
) -> PolicyPremiumSummary:
    """
    Total annual premium with a per-line breakdown.

    Args:
        selections: CoverageSelection objects or {typeId, amount, termYears}
            mappings, in user-selection order
        catalog: Catalog to rate against (default: built-in)

    Returns:
        PolicyPremiumSummary; total 0 and no lines for empty input
    """
    calculator = PremiumCalculator(catalog) if catalog is not None else PremiumCalculator()

    lines: list[PremiumLine] = []
    for item in selections:
        selection = _as_selection(item)
        premium = calculator.calculate(selection.type_id, selection.amount, selection.term_years)
        lines.append(PremiumLine(type_id=selection.type_id, premium=premium))

    total = sum(line.premium for line in lines)
    logger.debug("Aggregated %d selections: total=%d", len(lines), total)
    return PolicyPremiumSummary(total=total, lines=tuple(lines))
