"""
PremiumCore Validation Result
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ValidationResult:
    """
    Outcome of a multi-rule validator.

    Each unmet rule contributes one message to ``errors`` so that forms can
    show every problem at once.
    """
    errors: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def __bool__(self) -> bool:
        return self.is_valid

    def to_dict(self) -> dict[str, Any]:
        """Serialize using the field names forms expect."""
        return {"isValid": self.is_valid, "errors": list(self.errors)}
