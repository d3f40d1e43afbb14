"""
PremiumCore Risk Models

Applicant attributes that adjust a base premium. A profile is rated by
premiumcore.engine.risk; it holds no rating logic itself.
"""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Mapping, Optional, Union

from ..exceptions import InvalidRiskProfile
from .enums import Occupation, RiskFactorCategory, RiskZone


def parse_risk_zone(zone: Any) -> Optional[RiskZone]:
    """
    Resolve a risk zone value, None when absent.

    Raises:
        InvalidRiskProfile: If the zone is not low, medium or high
    """
    if zone is None or zone == "":
        return None
    try:
        return RiskZone(zone)
    except ValueError:
        raise InvalidRiskProfile(
            message=f"Unknown risk zone: {zone!r}",
            details={
                "field": "risk_zone",
                "value": str(zone),
                "allowed": [z.value for z in RiskZone],
            },
        )


@dataclass(frozen=True)
class RiskProfile:
    """
    Applicant risk attributes.

    Attributes:
        age: Age in whole years
        annual_income: Gross yearly income
        occupation: Occupation category (unknown categories rate neutral)
        has_chronic_illness: Any diagnosed chronic condition
        smoker: Current tobacco use
        bmi: Body mass index, if known
        has_dangerous_hobbies: Skydiving, motor racing, etc.
        has_bankruptcy_history: Prior personal bankruptcy
        credit_score: Credit bureau score, if known
        risk_zone: Geographic risk zone of the insured location
    """
    age: int
    annual_income: Decimal
    occupation: Optional[Union[Occupation, str]] = None
    has_chronic_illness: bool = False
    smoker: bool = False
    bmi: Optional[Decimal] = None
    has_dangerous_hobbies: bool = False
    has_bankruptcy_history: bool = False
    credit_score: Optional[int] = None
    risk_zone: Optional[RiskZone] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RiskProfile":
        """Build a profile from a snake_case mapping."""
        bmi = data.get("bmi")
        return cls(
            age=int(data["age"]),
            annual_income=Decimal(str(data["annual_income"])),
            occupation=data.get("occupation"),
            has_chronic_illness=bool(data.get("has_chronic_illness", False)),
            smoker=bool(data.get("smoker", False)),
            bmi=Decimal(str(bmi)) if bmi is not None else None,
            has_dangerous_hobbies=bool(data.get("has_dangerous_hobbies", False)),
            has_bankruptcy_history=bool(data.get("has_bankruptcy_history", False)),
            credit_score=data.get("credit_score"),
            risk_zone=parse_risk_zone(data.get("risk_zone")),
        )


@dataclass(frozen=True)
class RiskFactor:
    """
    One line of a risk breakdown.

    Attributes:
        category: health, occupation, lifestyle, financial or geographic
        factor: Attribute that contributed (e.g., "smoking")
        level: low, medium, high or very-high
        multiplier: Weight of this factor in the breakdown
        description: Human-readable summary
    """
    category: RiskFactorCategory
    factor: str
    level: str
    multiplier: Decimal
    description: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "category": self.category.value,
            "factor": self.factor,
            "level": self.level,
            "multiplier": str(self.multiplier),
            "description": self.description,
        }
