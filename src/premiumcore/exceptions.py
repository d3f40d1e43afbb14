"""
PremiumCore Exception Hierarchy

Domain-specific exceptions for premium calculation and input validation.
All exceptions carry an error code so the API layer can translate them
into responses without inspecting messages.

Exception codes follow the pattern: PC_<SPECIFIC>
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class PremiumCoreError(Exception):
    """
    Base exception for all PremiumCore errors.

    Attributes:
        message: Human-readable error description
        code: Machine-readable error code (PC_*)
        details: Additional context about the error
    """
    message: str
    code: str = "PC_INTERNAL_ERROR"
    details: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Serialize exception for logging/API responses."""
        result: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Rating Errors
# =============================================================================

@dataclass
class UnknownCoverageType(PremiumCoreError):
    """Coverage type id is not present in the catalog."""
    code: str = "PC_UNKNOWN_COVERAGE_TYPE"


@dataclass
class InvalidAmount(PremiumCoreError):
    """Coverage or premium amount is not a usable number."""
    code: str = "PC_INVALID_AMOUNT"


@dataclass
class InvalidTermLength(PremiumCoreError):
    """Term length is not one of the offered terms."""
    code: str = "PC_INVALID_TERM_LENGTH"


@dataclass
class InvalidFrequency(PremiumCoreError):
    """Payment frequency is not supported."""
    code: str = "PC_INVALID_FREQUENCY"


@dataclass
class InvalidRiskProfile(PremiumCoreError):
    """Risk profile cannot be rated."""
    code: str = "PC_INVALID_RISK_PROFILE"


# =============================================================================
# Validation Errors
# =============================================================================

@dataclass
class ValidationFailed(PremiumCoreError):
    """
    Input failed one or more validation rules.

    Attributes:
        violations: One message per rule that was not met
    """
    code: str = "PC_VALIDATION_FAILED"
    violations: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["violations"] = list(self.violations)
        return result


# =============================================================================
# Catalog Errors
# =============================================================================

@dataclass
class CatalogLoadError(PremiumCoreError):
    """Failed to read a coverage catalog file."""
    code: str = "PC_CATALOG_LOAD_ERROR"


@dataclass
class CatalogValidationError(PremiumCoreError):
    """Coverage catalog failed schema validation."""
    code: str = "PC_CATALOG_VALIDATION_ERROR"


@dataclass
class CatalogVersionMismatch(PremiumCoreError):
    """Catalog schema version doesn't match the supported version."""
    code: str = "PC_CATALOG_VERSION_MISMATCH"
