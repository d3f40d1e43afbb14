"""
Built-in coverage types.

Base rates are monthly cost per 10,000 of coverage.
"""
from __future__ import annotations

from decimal import Decimal

from ..models import CoverageType

BUILTIN_COVERAGE_TYPES: tuple[CoverageType, ...] = (
    CoverageType(
        id="life",
        name="Life Insurance",
        description="Protect your family with comprehensive life coverage",
        base_rate=Decimal("25"),
        min_coverage=Decimal("50000"),
        max_coverage=Decimal("5000000"),
        features=(
            "Death benefit up to $1,000,000",
            "Accidental death coverage",
            "Terminal illness benefit",
            "Flexible premium options",
        ),
    ),
    CoverageType(
        id="health",
        name="Health Insurance",
        description="Complete health coverage for medical expenses",
        base_rate=Decimal("150"),
        min_coverage=Decimal("10000"),
        max_coverage=Decimal("500000"),
        features=(
            "Hospitalization coverage",
            "Outpatient treatment",
            "Prescription drugs",
            "Preventive care",
        ),
    ),
    CoverageType(
        id="property",
        name="Property Insurance",
        description="Protect your home and belongings",
        base_rate=Decimal("100"),
        min_coverage=Decimal("100000"),
        max_coverage=Decimal("2000000"),
        features=(
            "Fire and theft protection",
            "Natural disaster coverage",
            "Liability protection",
            "Temporary living expenses",
        ),
    ),
    CoverageType(
        id="auto",
        name="Auto Insurance",
        description="Comprehensive vehicle protection",
        base_rate=Decimal("75"),
        min_coverage=Decimal("25000"),
        max_coverage=Decimal("500000"),
        features=(
            "Collision coverage",
            "Liability protection",
            "Comprehensive damage",
            "Roadside assistance",
        ),
    ),
    CoverageType(
        id="disability",
        name="Disability Insurance",
        description="Income protection during disability",
        base_rate=Decimal("50"),
        min_coverage=Decimal("2000"),
        max_coverage=Decimal("10000"),
        features=(
            "Monthly income replacement",
            "Partial disability coverage",
            "Rehabilitation benefits",
            "Cost of living adjustments",
        ),
    ),
)
