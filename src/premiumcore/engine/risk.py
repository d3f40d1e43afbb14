"""
PremiumCore Risk Rating

Scales a base premium by applicant risk. Each attribute contributes a
factor; the product is bounded to [0.5, 3.0]. The same attributes also
give a 0-100 risk score with a category, and a per-factor breakdown.

Factor tables:
- Age bands: 18-25, 26-40, 41-55, 56-65, 66+
- Occupation categories (unknown categories rate at 1.0)
- Income bands, with higher income rating lower
- Health, lifestyle, financial and geographic adjustments
"""
from __future__ import annotations

import logging
from decimal import Decimal
from typing import Any, Optional

from ..catalog import CoverageCatalog
from ..exceptions import InvalidRiskProfile
from ..models import (
    Occupation,
    PremiumQuote,
    RiskCategory,
    RiskFactor,
    RiskFactorCategory,
    RiskProfile,
    RiskZone,
)
from ..models.risk import parse_risk_zone
from ..money import round_half_up
from .calculator import quote

logger = logging.getLogger(__name__)

# =============================================================================
# Factor Tables
# =============================================================================

MIN_INSURABLE_AGE = 18

# (upper age inclusive, factor); ages above the last band use AGE_FACTOR_OLDEST
AGE_BANDS: tuple[tuple[int, Decimal], ...] = (
    (25, Decimal("1.2")),
    (40, Decimal("1.0")),
    (55, Decimal("1.1")),
    (65, Decimal("1.3")),
)
AGE_FACTOR_OLDEST = Decimal("1.5")

OCCUPATION_FACTORS: dict[Occupation, Decimal] = {
    Occupation.PROFESSIONAL: Decimal("0.9"),
    Occupation.ADMINISTRATIVE: Decimal("1.0"),
    Occupation.MANUAL: Decimal("1.2"),
    Occupation.HAZARDOUS: Decimal("1.8"),
    Occupation.HEALTHCARE: Decimal("1.1"),
    Occupation.EDUCATION: Decimal("0.9"),
    Occupation.TECHNOLOGY: Decimal("0.8"),
    Occupation.FINANCE: Decimal("0.9"),
    Occupation.UNEMPLOYED: Decimal("1.3"),
}

# (upper income inclusive, factor); incomes above the last band use INCOME_FACTOR_TOP
INCOME_BANDS: tuple[tuple[Decimal, Decimal], ...] = (
    (Decimal("30000"), Decimal("1.3")),
    (Decimal("60000"), Decimal("1.1")),
    (Decimal("100000"), Decimal("1.0")),
    (Decimal("200000"), Decimal("0.9")),
)
INCOME_FACTOR_TOP = Decimal("0.8")

CHRONIC_ILLNESS_FACTOR = Decimal("1.3")
SMOKER_FACTOR = Decimal("1.5")
BMI_HEALTHY_RANGE = (Decimal("18.5"), Decimal("30"))
BMI_OUTSIDE_RANGE_FACTOR = Decimal("1.2")
DANGEROUS_HOBBIES_FACTOR = Decimal("1.4")
BANKRUPTCY_FACTOR = Decimal("1.3")

# (score strictly below, factor), checked in order
CREDIT_SCORE_PENALTIES: tuple[tuple[int, Decimal], ...] = (
    (580, Decimal("1.5")),
    (670, Decimal("1.2")),
)
CREDIT_SCORE_EXCELLENT = 740
CREDIT_SCORE_EXCELLENT_FACTOR = Decimal("0.9")

RISK_ZONE_FACTORS: dict[RiskZone, Decimal] = {
    RiskZone.HIGH: Decimal("1.3"),
    RiskZone.LOW: Decimal("0.9"),
}

MULTIPLIER_FLOOR = Decimal("0.5")
MULTIPLIER_CEILING = Decimal("3.0")


# =============================================================================
# Score Tables
# =============================================================================

SCORE_BASE = 50
SCORE_FLOOR = 0
SCORE_CEILING = 100

# (minimum age inclusive, points), checked in order
AGE_SCORE_BANDS: tuple[tuple[int, int], ...] = (
    (60, 20),
    (45, 10),
)
YOUNG_AGE_LIMIT = 25
YOUNG_AGE_SCORE = 5

OCCUPATION_SCORES: dict[Occupation, int] = {
    Occupation.HAZARDOUS: 30,
    Occupation.MANUAL: 20,
    Occupation.HEALTHCARE: 10,
    Occupation.UNEMPLOYED: 15,
    Occupation.PROFESSIONAL: -5,
    Occupation.ADMINISTRATIVE: -5,
    Occupation.EDUCATION: -10,
    Occupation.TECHNOLOGY: -10,
    Occupation.FINANCE: -5,
}

CHRONIC_ILLNESS_SCORE = 15
SMOKER_SCORE = 20
BMI_OUTSIDE_RANGE_SCORE = 10
DANGEROUS_HOBBIES_SCORE = 15
BANKRUPTCY_SCORE = 25

CREDIT_SCORE_POINTS: tuple[tuple[int, int], ...] = (
    (580, 20),
    (670, 10),
)
CREDIT_SCORE_EXCELLENT_POINTS = -10

RISK_ZONE_SCORES: dict[RiskZone, int] = {
    RiskZone.HIGH: 15,
    RiskZone.LOW: -10,
}

LOW_INCOME_LIMIT = Decimal("30000")
LOW_INCOME_SCORE = 10
HIGH_INCOME_LIMIT = Decimal("100000")
HIGH_INCOME_SCORE = -10

# (minimum score inclusive, category), checked in order
RISK_CATEGORY_THRESHOLDS: tuple[tuple[int, RiskCategory], ...] = (
    (75, RiskCategory.VERY_HIGH),
    (60, RiskCategory.HIGH),
    (40, RiskCategory.MODERATE),
)


# =============================================================================
# Breakdown Tables
# =============================================================================

OCCUPATION_LEVELS: dict[Occupation, tuple[str, Decimal]] = {
    Occupation.HAZARDOUS: ("very-high", Decimal("2.0")),
    Occupation.MANUAL: ("high", Decimal("1.5")),
    Occupation.HEALTHCARE: ("medium", Decimal("1.2")),
    Occupation.UNEMPLOYED: ("medium", Decimal("1.3")),
    Occupation.PROFESSIONAL: ("low", Decimal("0.9")),
    Occupation.ADMINISTRATIVE: ("low", Decimal("1.0")),
    Occupation.EDUCATION: ("low", Decimal("0.9")),
    Occupation.TECHNOLOGY: ("low", Decimal("0.8")),
    Occupation.FINANCE: ("low", Decimal("0.9")),
}

AGE_LEVEL_MULTIPLIERS = {"low": Decimal("1.0"), "medium": Decimal("1.2"), "high": Decimal("1.5")}
BMI_LEVEL_MULTIPLIERS = {"low": Decimal("1.0"), "medium": Decimal("1.1"), "high": Decimal("1.3")}
CREDIT_LEVEL_MULTIPLIERS = {"low": Decimal("0.9"), "medium": Decimal("1.2"), "high": Decimal("1.5")}
ZONE_LEVEL_MULTIPLIERS: dict[RiskZone, Decimal] = {
    RiskZone.LOW: Decimal("0.9"),
    RiskZone.MEDIUM: Decimal("1.0"),
    RiskZone.HIGH: Decimal("1.3"),
}
BMI_OVERWEIGHT = Decimal("25")


# =============================================================================
# Individual Factors
# =============================================================================

def age_factor(age: int) -> Decimal:
    for upper, factor in AGE_BANDS:
        if age <= upper:
            return factor
    return AGE_FACTOR_OLDEST


def _known_occupation(occupation: Any) -> Optional[Occupation]:
    if occupation is None:
        return None
    try:
        return Occupation(occupation)
    except ValueError:
        return None


def occupation_factor(occupation: Any) -> Decimal:
    known = _known_occupation(occupation)
    if known is None:
        return Decimal("1")
    return OCCUPATION_FACTORS[known]


def income_factor(annual_income: Decimal) -> Decimal:
    for upper, factor in INCOME_BANDS:
        if annual_income <= upper:
            return factor
    return INCOME_FACTOR_TOP


def credit_score_factor(credit_score: Optional[int]) -> Decimal:
    if not credit_score:
        return Decimal("1")
    for below, factor in CREDIT_SCORE_PENALTIES:
        if credit_score < below:
            return factor
    if credit_score >= CREDIT_SCORE_EXCELLENT:
        return CREDIT_SCORE_EXCELLENT_FACTOR
    return Decimal("1")


def _check_profile(profile: RiskProfile) -> None:
    if profile.age < MIN_INSURABLE_AGE:
        raise InvalidRiskProfile(
            message=f"Applicant must be at least {MIN_INSURABLE_AGE}, got {profile.age}",
            details={"field": "age", "value": profile.age},
        )
    if profile.annual_income < 0:
        raise InvalidRiskProfile(
            message="Annual income cannot be negative",
            details={"field": "annual_income", "value": str(profile.annual_income)},
        )
    if profile.bmi is not None and profile.bmi <= 0:
        raise InvalidRiskProfile(
            message="BMI must be positive",
            details={"field": "bmi", "value": str(profile.bmi)},
        )
    parse_risk_zone(profile.risk_zone)


# =============================================================================
# Multiplier
# =============================================================================

def calculate_risk_multiplier(profile: RiskProfile) -> Decimal:
    """
    Combined risk multiplier for a profile, bounded to [0.5, 3.0].

    Raises:
        InvalidRiskProfile: Under-age applicant, negative income, BMI <= 0
            or unknown risk zone
    """
    _check_profile(profile)

    multiplier = age_factor(profile.age)
    multiplier *= occupation_factor(profile.occupation)
    multiplier *= income_factor(profile.annual_income)

    if profile.has_chronic_illness:
        multiplier *= CHRONIC_ILLNESS_FACTOR
    if profile.smoker:
        multiplier *= SMOKER_FACTOR
    if profile.bmi is not None:
        low, high = BMI_HEALTHY_RANGE
        if profile.bmi < low or profile.bmi > high:
            multiplier *= BMI_OUTSIDE_RANGE_FACTOR

    if profile.has_dangerous_hobbies:
        multiplier *= DANGEROUS_HOBBIES_FACTOR
    if profile.has_bankruptcy_history:
        multiplier *= BANKRUPTCY_FACTOR
    multiplier *= credit_score_factor(profile.credit_score)

    zone = parse_risk_zone(profile.risk_zone)
    if zone is not None:
        multiplier *= RISK_ZONE_FACTORS.get(zone, Decimal("1"))

    return max(MULTIPLIER_FLOOR, min(multiplier, MULTIPLIER_CEILING))


# =============================================================================
# Score
# =============================================================================

def risk_category(score: int) -> RiskCategory:
    for minimum, category in RISK_CATEGORY_THRESHOLDS:
        if score >= minimum:
            return category
    return RiskCategory.LOW


def calculate_risk_score(profile: RiskProfile) -> tuple[int, RiskCategory]:
    """
    Overall 0-100 risk score and its category.

    Points are added to a base of 50 and the total is capped to [0, 100].
    Categories: very-high >= 75, high >= 60, moderate >= 40, else low.

    Raises:
        InvalidRiskProfile: Same checks as calculate_risk_multiplier
    """
    _check_profile(profile)

    score = SCORE_BASE
    for minimum, points in AGE_SCORE_BANDS:
        if profile.age >= minimum:
            score += points
            break
    else:
        if profile.age < YOUNG_AGE_LIMIT:
            score += YOUNG_AGE_SCORE

    occupation = _known_occupation(profile.occupation)
    if occupation is not None:
        score += OCCUPATION_SCORES[occupation]

    if profile.has_chronic_illness:
        score += CHRONIC_ILLNESS_SCORE
    if profile.smoker:
        score += SMOKER_SCORE
    if profile.bmi is not None:
        low, high = BMI_HEALTHY_RANGE
        if profile.bmi < low or profile.bmi > high:
            score += BMI_OUTSIDE_RANGE_SCORE

    if profile.has_dangerous_hobbies:
        score += DANGEROUS_HOBBIES_SCORE
    if profile.has_bankruptcy_history:
        score += BANKRUPTCY_SCORE
    if profile.credit_score:
        for below, points in CREDIT_SCORE_POINTS:
            if profile.credit_score < below:
                score += points
                break
        else:
            if profile.credit_score >= CREDIT_SCORE_EXCELLENT:
                score += CREDIT_SCORE_EXCELLENT_POINTS

    zone = parse_risk_zone(profile.risk_zone)
    if zone is not None:
        score += RISK_ZONE_SCORES.get(zone, 0)

    # zero income is treated as not reported
    if profile.annual_income:
        if profile.annual_income < LOW_INCOME_LIMIT:
            score += LOW_INCOME_SCORE
        elif profile.annual_income > HIGH_INCOME_LIMIT:
            score += HIGH_INCOME_SCORE

    score = max(SCORE_FLOOR, min(score, SCORE_CEILING))
    return score, risk_category(score)


# =============================================================================
# Breakdown
# =============================================================================

def calculate_risk_factors(profile: RiskProfile) -> list[RiskFactor]:
    """
    Per-attribute risk breakdown for display.

    Only attributes that are present (or flagged) produce a factor.
    Unknown occupations are left out.
    """
    _check_profile(profile)
    factors: list[RiskFactor] = []

    if profile.age > 60:
        age_level = "high"
    elif profile.age > 45:
        age_level = "medium"
    else:
        age_level = "low"
    factors.append(RiskFactor(
        category=RiskFactorCategory.HEALTH,
        factor="age",
        level=age_level,
        multiplier=AGE_LEVEL_MULTIPLIERS[age_level],
        description=f"Age {profile.age} - {age_level} risk",
    ))

    occupation = _known_occupation(profile.occupation)
    if occupation is not None:
        level, multiplier = OCCUPATION_LEVELS[occupation]
        factors.append(RiskFactor(
            category=RiskFactorCategory.OCCUPATION,
            factor="occupation_type",
            level=level,
            multiplier=multiplier,
            description=f"{occupation.value} occupation - {level} risk",
        ))

    if profile.has_chronic_illness:
        factors.append(RiskFactor(
            category=RiskFactorCategory.HEALTH,
            factor="chronic_illness",
            level="high",
            multiplier=Decimal("1.5"),
            description="Chronic illness present",
        ))
    if profile.smoker:
        factors.append(RiskFactor(
            category=RiskFactorCategory.LIFESTYLE,
            factor="smoking",
            level="high",
            multiplier=Decimal("1.5"),
            description="Smoker",
        ))

    if profile.bmi is not None:
        low, high = BMI_HEALTHY_RANGE
        if profile.bmi < low or profile.bmi > high:
            bmi_level = "high"
        elif profile.bmi > BMI_OVERWEIGHT:
            bmi_level = "medium"
        else:
            bmi_level = "low"
        factors.append(RiskFactor(
            category=RiskFactorCategory.HEALTH,
            factor="bmi",
            level=bmi_level,
            multiplier=BMI_LEVEL_MULTIPLIERS[bmi_level],
            description=f"BMI {profile.bmi} - {bmi_level} risk",
        ))

    if profile.has_dangerous_hobbies:
        factors.append(RiskFactor(
            category=RiskFactorCategory.LIFESTYLE,
            factor="dangerous_hobbies",
            level="high",
            multiplier=DANGEROUS_HOBBIES_FACTOR,
            description="Participates in dangerous hobbies",
        ))
    if profile.has_bankruptcy_history:
        factors.append(RiskFactor(
            category=RiskFactorCategory.FINANCIAL,
            factor="bankruptcy_history",
            level="high",
            multiplier=BANKRUPTCY_FACTOR,
            description="History of bankruptcy",
        ))

    if profile.credit_score:
        if profile.credit_score < 580:
            credit_level = "high"
        elif profile.credit_score < 670:
            credit_level = "medium"
        else:
            credit_level = "low"
        factors.append(RiskFactor(
            category=RiskFactorCategory.FINANCIAL,
            factor="credit_score",
            level=credit_level,
            multiplier=CREDIT_LEVEL_MULTIPLIERS[credit_level],
            description=f"Credit score {profile.credit_score} - {credit_level} risk",
        ))

    zone = parse_risk_zone(profile.risk_zone)
    if zone is not None:
        factors.append(RiskFactor(
            category=RiskFactorCategory.GEOGRAPHIC,
            factor="location_risk",
            level=zone.value,
            multiplier=ZONE_LEVEL_MULTIPLIERS[zone],
            description=f"{zone.value} risk location",
        ))

    return factors


# =============================================================================
# Risk-Adjusted Premium
# =============================================================================

def calculate_risk_adjusted(
    type_id: str,
    amount: Any,
    term_years: Any,
    profile: RiskProfile,
    catalog: Optional[CoverageCatalog] = None,
) -> tuple[PremiumQuote, Decimal, int]:
    """
    Rate a coverage and apply the profile's risk multiplier.

    Returns:
        (base quote, multiplier, adjusted annual premium)
    """
    base = quote(type_id, amount, term_years, catalog)
    multiplier = calculate_risk_multiplier(profile)
    adjusted = round_half_up(Decimal(base.annual_premium) * multiplier)
    logger.debug(
        "Risk-adjusted %s: base=%d multiplier=%s adjusted=%d",
        type_id, base.annual_premium, multiplier, adjusted,
    )
    return base, multiplier, adjusted
