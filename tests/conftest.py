"""
Pytest configuration and fixtures for PremiumCore tests.

Provides helper factories and common fixtures matching actual model definitions.
"""
import pytest
from decimal import Decimal

from premiumcore.catalog import CoverageCatalog, get_default_catalog
from premiumcore.models import (
    CoverageSelection,
    CoverageType,
    Occupation,
    RiskProfile,
)


# =============================================================================
# Factory Helpers
# =============================================================================

def make_coverage_type(
    id: str = "pet",
    base_rate="40",
    min_coverage="1000",
    max_coverage="20000",
    name: str = None,
) -> CoverageType:
    """Create a CoverageType with required fields."""
    return CoverageType(
        id=id,
        name=name or f"{id.title()} Insurance",
        base_rate=Decimal(str(base_rate)),
        min_coverage=Decimal(str(min_coverage)),
        max_coverage=Decimal(str(max_coverage)),
    )


def make_selection(type_id: str = "life", amount=500000, term_years: int = 20) -> CoverageSelection:
    """Create a CoverageSelection."""
    return CoverageSelection(type_id=type_id, amount=Decimal(str(amount)), term_years=term_years)


def make_profile(
    age: int = 30,
    annual_income=80000,
    occupation=Occupation.ADMINISTRATIVE,
    **overrides,
) -> RiskProfile:
    """Create a RiskProfile that rates at exactly 1.0 unless overridden."""
    return RiskProfile(
        age=age,
        annual_income=Decimal(str(annual_income)),
        occupation=occupation,
        **overrides,
    )


CATALOG_YAML = """
schema_version: "1.0.0"
version: "regional-2024"
coverage_types:
  - id: pet
    name: Pet Insurance
    description: Vet bills for cats and dogs
    base_rate: 40
    min_coverage: 1000
    max_coverage: 20000
    features: [Accident cover, Illness cover]
  - id: travel
    name: Travel Insurance
    base_rate: "12.5"
    min_coverage: 5000
    max_coverage: 250000
"""


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def catalog() -> CoverageCatalog:
    """The built-in catalog."""
    return get_default_catalog()


@pytest.fixture
def custom_catalog() -> CoverageCatalog:
    """Small catalog independent of the built-in rates."""
    return CoverageCatalog(
        [
            make_coverage_type("pet", "40", "1000", "20000"),
            make_coverage_type("travel", "12.5", "5000", "250000"),
        ],
        version="test",
    )


@pytest.fixture
def catalog_yaml_path(tmp_path):
    """A valid catalog file on disk."""
    path = tmp_path / "catalog.yaml"
    path.write_text(CATALOG_YAML, encoding="utf-8")
    return path
