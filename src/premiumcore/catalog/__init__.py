"""
PremiumCore Coverage Catalog

    from premiumcore.catalog import get_default_catalog, CatalogLoader

    catalog = get_default_catalog()
    life = catalog.lookup("life")

    regional = CatalogLoader().load("catalogs/regional.yaml")
"""
from __future__ import annotations

from .catalog import CoverageCatalog, get_default_catalog, resolve_catalog
from .loader import CatalogLoader, load_catalog
from .schema import SCHEMA_VERSION, CatalogSchema, CoverageTypeSchema

__all__ = [
    "CoverageCatalog",
    "get_default_catalog",
    "resolve_catalog",
    "CatalogLoader",
    "load_catalog",
    "SCHEMA_VERSION",
    "CatalogSchema",
    "CoverageTypeSchema",
]
