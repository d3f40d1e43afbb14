"""
PremiumCore Catalog Loader

Loads and validates coverage catalogs from YAML or JSON files.

Converts Pydantic schema models to PremiumCore domain models.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Union

import yaml
from pydantic import ValidationError

from ..exceptions import CatalogLoadError, CatalogValidationError, CatalogVersionMismatch
from ..models import CoverageType
from .catalog import CoverageCatalog
from .schema import (
    SCHEMA_VERSION,
    CatalogSchema,
    CoverageTypeSchema,
    check_schema_version,
    validate_catalog,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Schema to Model Converters
# =============================================================================

def _convert_coverage_type(schema: CoverageTypeSchema) -> CoverageType:
    """Convert CoverageTypeSchema to CoverageType model."""
    return CoverageType(
        id=schema.id,
        name=schema.name,
        description=schema.description,
        base_rate=schema.base_rate,
        min_coverage=schema.min_coverage,
        max_coverage=schema.max_coverage,
        features=tuple(schema.features),
    )


def _convert_catalog(schema: CatalogSchema) -> CoverageCatalog:
    """Convert CatalogSchema to CoverageCatalog."""
    return CoverageCatalog(
        (_convert_coverage_type(c) for c in schema.coverage_types),
        version=schema.version or schema.schema_version,
    )


# =============================================================================
# Catalog Loader
# =============================================================================

class CatalogLoader:
    """
    Loads coverage catalogs from YAML or JSON.

    Usage:
        loader = CatalogLoader()
        catalog = loader.load("catalogs/regional.yaml")
    """

    def __init__(self, strict_version: bool = True) -> None:
        self.strict_version = strict_version

    def load(self, path: Union[str, Path]) -> CoverageCatalog:
        """
        Load a catalog from a file.

        Raises:
            CatalogLoadError: File missing or unparseable
            CatalogVersionMismatch: Schema major version differs (strict mode)
            CatalogValidationError: Content fails schema validation
        """
        path = Path(path)
        if not path.exists():
            raise CatalogLoadError(
                message=f"Catalog file not found: {path}",
                details={"path": str(path)},
            )

        try:
            data = self._load_file(path)
        except (OSError, yaml.YAMLError, json.JSONDecodeError) as e:
            raise CatalogLoadError(
                message=f"Failed to load catalog: {e}",
                details={"path": str(path), "error": str(e)},
            )

        catalog = self.load_data(data, source=str(path))
        logger.info("Loaded coverage catalog %s (%d types) from %s", catalog.version, len(catalog), path)
        return catalog

    def load_string(self, content: str, format: str = "yaml") -> CoverageCatalog:
        """Load a catalog from a YAML or JSON string."""
        try:
            if format.lower() == "json":
                data = json.loads(content)
            else:
                data = yaml.safe_load(content)
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise CatalogLoadError(
                message=f"Failed to parse catalog: {e}",
                details={"format": format, "error": str(e)},
            )
        return self.load_data(data, source="<string>")

    def load_data(self, data: Any, source: str = "<data>") -> CoverageCatalog:
        """Validate already-parsed catalog data and build the catalog."""
        if not isinstance(data, dict):
            raise CatalogLoadError(
                message="Catalog content must be a mapping",
                details={"source": source, "type": type(data).__name__},
            )

        if self.strict_version and not check_schema_version(data):
            catalog_version = data.get("schema_version", "unknown")
            raise CatalogVersionMismatch(
                message=f"Schema version mismatch: catalog has {catalog_version}, expected {SCHEMA_VERSION}",
                details={
                    "catalog_version": catalog_version,
                    "expected_version": SCHEMA_VERSION,
                },
            )

        try:
            schema = validate_catalog(data)
        except ValidationError as e:
            raise CatalogValidationError(
                message=f"Catalog validation failed: {e.error_count()} errors",
                details={
                    "errors": [
                        {"loc": list(err["loc"]), "msg": err["msg"]} for err in e.errors()
                    ],
                    "source": source,
                },
            )

        return _convert_catalog(schema)

    def _load_file(self, path: Path) -> Any:
        """Load data from YAML or JSON file."""
        with open(path, "r", encoding="utf-8") as f:
            if path.suffix.lower() == ".json":
                return json.load(f)
            return yaml.safe_load(f)


# =============================================================================
# Convenience Functions
# =============================================================================

def load_catalog(path: Union[str, Path]) -> CoverageCatalog:
    """Load a catalog from a file with a default loader."""
    return CatalogLoader().load(path)
