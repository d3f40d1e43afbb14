"""
PremiumCore Catalog Schemas

Pydantic models for validating coverage catalog YAML/JSON files.

Schema versioning:
- schema_version field tracks breaking changes
- The loader checks version compatibility when strict
"""
from __future__ import annotations

from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator, model_validator


# =============================================================================
# Schema Version
# =============================================================================

SCHEMA_VERSION = "1.0.0"


# =============================================================================
# Coverage Type
# =============================================================================

class CoverageTypeSchema(BaseModel):
    """Schema for one coverage type entry."""
    id: str = Field(..., min_length=1, description="Symbolic key (e.g., 'life')")
    name: str = Field(..., min_length=1, description="Display name")
    description: str = Field("", description="Short description")
    base_rate: Decimal = Field(..., gt=0, description="Monthly cost per 10,000 of coverage")
    min_coverage: Decimal = Field(..., gt=0, description="Inclusive lower bound")
    max_coverage: Decimal = Field(..., gt=0, description="Inclusive upper bound")
    features: list[str] = Field(default_factory=list)

    @field_validator("id")
    @classmethod
    def validate_id(cls, v: str) -> str:
        if v != v.strip() or " " in v:
            raise ValueError("Coverage type id must not contain whitespace")
        return v

    @model_validator(mode="after")
    def validate_bounds(self) -> "CoverageTypeSchema":
        if self.min_coverage >= self.max_coverage:
            raise ValueError(
                f"min_coverage ({self.min_coverage}) must be below "
                f"max_coverage ({self.max_coverage})"
            )
        return self


# =============================================================================
# Catalog
# =============================================================================

class CatalogSchema(BaseModel):
    """Schema for a complete coverage catalog file."""
    schema_version: str = Field(SCHEMA_VERSION, description="Catalog schema version")
    version: Optional[str] = Field(None, description="Catalog content version")
    coverage_types: list[CoverageTypeSchema] = Field(..., min_length=1)

    @model_validator(mode="after")
    def validate_unique_ids(self) -> "CatalogSchema":
        seen: set[str] = set()
        duplicates = []
        for coverage in self.coverage_types:
            if coverage.id in seen:
                duplicates.append(coverage.id)
            seen.add(coverage.id)
        if duplicates:
            raise ValueError(f"Duplicate coverage type ids: {sorted(set(duplicates))}")
        return self


def check_schema_version(data: dict[str, Any]) -> bool:
    """Check that the major schema version matches."""
    version = str(data.get("schema_version", SCHEMA_VERSION))
    return version.split(".")[0] == SCHEMA_VERSION.split(".")[0]


def validate_catalog(data: dict[str, Any]) -> CatalogSchema:
    """Validate raw catalog data; raises pydantic.ValidationError."""
    return CatalogSchema.model_validate(data)
