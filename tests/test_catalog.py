"""
Tests for the coverage catalog and catalog loading.
"""
from __future__ import annotations

import json
from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest

from premiumcore.catalog import (
    CatalogLoader,
    CoverageCatalog,
    get_default_catalog,
    load_catalog,
)
from premiumcore.exceptions import (
    CatalogLoadError,
    CatalogValidationError,
    CatalogVersionMismatch,
    UnknownCoverageType,
)

from tests.conftest import CATALOG_YAML, make_coverage_type


# =============================================================================
# Built-in Catalog
# =============================================================================

class TestBuiltinCatalog:

    def test_ids_in_order(self, catalog):
        assert catalog.ids() == ["life", "health", "property", "auto", "disability"]
        assert catalog.version == "builtin"

    @pytest.mark.parametrize(
        "type_id,base_rate,min_coverage,max_coverage",
        [
            ("life", "25", "50000", "5000000"),
            ("health", "150", "10000", "500000"),
            ("property", "100", "100000", "2000000"),
            ("auto", "75", "25000", "500000"),
            ("disability", "50", "2000", "10000"),
        ],
    )
    def test_rates_and_bounds(self, catalog, type_id, base_rate, min_coverage, max_coverage):
        coverage = catalog.lookup(type_id)
        assert coverage.base_rate == Decimal(base_rate)
        assert coverage.min_coverage == Decimal(min_coverage)
        assert coverage.max_coverage == Decimal(max_coverage)

    def test_every_type_well_formed(self, catalog):
        for coverage in catalog:
            assert coverage.base_rate > 0
            assert 0 < coverage.min_coverage < coverage.max_coverage
            assert coverage.name
            assert coverage.features

    def test_shared_instance(self):
        assert get_default_catalog() is get_default_catalog()

    def test_lookup_unknown(self, catalog):
        with pytest.raises(UnknownCoverageType) as exc_info:
            catalog.lookup("pet")
        assert exc_info.value.details["type_id"] == "pet"
        assert "life" in exc_info.value.details["known"]

    def test_find(self, catalog):
        assert catalog.find("pet") is None
        assert catalog.find("auto").name == "Auto Insurance"

    def test_contains_and_len(self, catalog):
        assert "life" in catalog
        assert "pet" not in catalog
        assert len(catalog) == 5

    def test_entries_are_frozen(self, catalog):
        with pytest.raises(FrozenInstanceError):
            catalog.lookup("life").base_rate = Decimal("1")

    def test_mapping_is_read_only(self, catalog):
        with pytest.raises(TypeError):
            catalog._types["pet"] = make_coverage_type()


class TestCoverageCatalog:

    def test_duplicate_ids_rejected(self):
        with pytest.raises(ValueError):
            CoverageCatalog([make_coverage_type("pet"), make_coverage_type("pet")])

    def test_inverted_bounds_rejected(self):
        with pytest.raises(ValueError):
            make_coverage_type("pet", "40", "20000", "1000")

    def test_non_positive_rate_rejected(self):
        with pytest.raises(ValueError):
            make_coverage_type("pet", "0")

    def test_custom_catalog(self, custom_catalog):
        assert custom_catalog.ids() == ["pet", "travel"]
        assert custom_catalog.version == "test"


# =============================================================================
# Loader
# =============================================================================

class TestCatalogLoader:

    def test_load_yaml_file(self, catalog_yaml_path):
        catalog = load_catalog(catalog_yaml_path)
        assert catalog.ids() == ["pet", "travel"]
        assert catalog.version == "regional-2024"
        pet = catalog.lookup("pet")
        assert pet.base_rate == Decimal("40")
        assert pet.features == ("Accident cover", "Illness cover")
        assert catalog.lookup("travel").base_rate == Decimal("12.5")

    def test_load_json_file(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps({
            "schema_version": "1.0.0",
            "coverage_types": [
                {"id": "pet", "name": "Pet", "base_rate": 40, "min_coverage": 1000, "max_coverage": 20000},
            ],
        }))
        catalog = CatalogLoader().load(path)
        assert catalog.ids() == ["pet"]
        assert catalog.version == "1.0.0"

    def test_load_string(self):
        catalog = CatalogLoader().load_string(CATALOG_YAML)
        assert len(catalog) == 2

    def test_load_json_string(self):
        content = json.dumps({
            "version": "v2",
            "coverage_types": [
                {"id": "pet", "name": "Pet", "base_rate": "40", "min_coverage": "1000", "max_coverage": "20000"},
            ],
        })
        assert CatalogLoader().load_string(content, format="json").version == "v2"

    def test_missing_file(self, tmp_path):
        with pytest.raises(CatalogLoadError):
            CatalogLoader().load(tmp_path / "nope.yaml")

    def test_malformed_yaml(self):
        with pytest.raises(CatalogLoadError):
            CatalogLoader().load_string("coverage_types: [")

    def test_malformed_json(self):
        with pytest.raises(CatalogLoadError):
            CatalogLoader().load_string("{not json", format="json")

    def test_non_mapping_content(self):
        with pytest.raises(CatalogLoadError):
            CatalogLoader().load_string("- pet\n- travel\n")

    def test_empty_content(self):
        with pytest.raises(CatalogLoadError):
            CatalogLoader().load_string("")

    def test_inverted_bounds(self):
        content = CATALOG_YAML.replace("max_coverage: 20000", "max_coverage: 500")
        with pytest.raises(CatalogValidationError) as exc_info:
            CatalogLoader().load_string(content)
        assert exc_info.value.details["errors"]

    def test_zero_rate(self):
        content = CATALOG_YAML.replace("base_rate: 40", "base_rate: 0")
        with pytest.raises(CatalogValidationError):
            CatalogLoader().load_string(content)

    def test_duplicate_ids(self):
        content = CATALOG_YAML.replace("id: travel", "id: pet")
        with pytest.raises(CatalogValidationError):
            CatalogLoader().load_string(content)

    def test_no_coverage_types(self):
        with pytest.raises(CatalogValidationError):
            CatalogLoader().load_string("coverage_types: []")

    def test_major_version_mismatch(self):
        content = CATALOG_YAML.replace('schema_version: "1.0.0"', 'schema_version: "2.0.0"')
        with pytest.raises(CatalogVersionMismatch):
            CatalogLoader().load_string(content)

    def test_minor_version_accepted(self):
        content = CATALOG_YAML.replace('schema_version: "1.0.0"', 'schema_version: "1.4.0"')
        assert len(CatalogLoader().load_string(content)) == 2

    def test_version_mismatch_tolerated_when_not_strict(self):
        content = CATALOG_YAML.replace('schema_version: "1.0.0"', 'schema_version: "2.0.0"')
        assert len(CatalogLoader(strict_version=False).load_string(content)) == 2
