"""
Tests for risk-adjusted rating and premium schedules.
"""
from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from premiumcore.engine import (
    add_months,
    calculate,
    calculate_risk_adjusted,
    calculate_risk_factors,
    calculate_risk_multiplier,
    calculate_risk_score,
    generate_premium_schedule,
)
from premiumcore.engine.risk import credit_score_factor, income_factor, risk_category
from premiumcore.exceptions import (
    InvalidAmount,
    InvalidFrequency,
    InvalidRiskProfile,
    InvalidTermLength,
)
from premiumcore.models import (
    Occupation,
    PaymentFrequency,
    RiskCategory,
    RiskFactorCategory,
    RiskProfile,
    RiskZone,
)

from tests.conftest import make_profile


# =============================================================================
# Risk Multiplier
# =============================================================================

class TestRiskMultiplier:

    def test_neutral_profile(self):
        assert calculate_risk_multiplier(make_profile()) == Decimal("1")

    @pytest.mark.parametrize(
        "age,expected",
        [(18, "1.2"), (25, "1.2"), (26, "1.0"), (40, "1.0"), (45, "1.1"), (60, "1.3"), (66, "1.5")],
    )
    def test_age_bands(self, age, expected):
        assert calculate_risk_multiplier(make_profile(age=age)) == Decimal(expected)

    def test_occupation(self):
        assert calculate_risk_multiplier(make_profile(occupation=Occupation.MANUAL)) == Decimal("1.2")
        assert calculate_risk_multiplier(make_profile(occupation="technology")) == Decimal("0.8")

    def test_unknown_occupation_is_neutral(self):
        assert calculate_risk_multiplier(make_profile(occupation="astronaut")) == Decimal("1")
        assert calculate_risk_multiplier(make_profile(occupation=None)) == Decimal("1")

    @pytest.mark.parametrize(
        "income,expected",
        [(20000, "1.3"), (30000, "1.3"), (45000, "1.1"), (100000, "1.0"), (150000, "0.9"), (250000, "0.8")],
    )
    def test_income_bands(self, income, expected):
        assert income_factor(Decimal(income)) == Decimal(expected)

    def test_smoker(self):
        assert calculate_risk_multiplier(make_profile(smoker=True)) == Decimal("1.5")

    def test_bmi(self):
        assert calculate_risk_multiplier(make_profile(bmi=Decimal("25"))) == Decimal("1")
        assert calculate_risk_multiplier(make_profile(bmi=Decimal("32"))) == Decimal("1.2")
        assert calculate_risk_multiplier(make_profile(bmi=Decimal("17"))) == Decimal("1.2")

    @pytest.mark.parametrize(
        "score,expected",
        [(None, "1"), (0, "1"), (500, "1.5"), (600, "1.2"), (700, "1"), (740, "0.9"), (800, "0.9")],
    )
    def test_credit_score(self, score, expected):
        assert credit_score_factor(score) == Decimal(expected)

    def test_risk_zone(self):
        assert calculate_risk_multiplier(make_profile(risk_zone=RiskZone.HIGH)) == Decimal("1.3")
        assert calculate_risk_multiplier(make_profile(risk_zone=RiskZone.LOW)) == Decimal("0.9")
        assert calculate_risk_multiplier(make_profile(risk_zone=RiskZone.MEDIUM)) == Decimal("1")

    def test_factors_multiply(self):
        profile = make_profile(age=22, smoker=True)
        assert calculate_risk_multiplier(profile) == Decimal("1.8")

    def test_capped_at_three(self):
        profile = make_profile(
            occupation=Occupation.HAZARDOUS,
            smoker=True,
            has_chronic_illness=True,
            has_dangerous_hobbies=True,
        )
        assert calculate_risk_multiplier(profile) == Decimal("3.0")

    def test_lowest_combination_stays_above_floor(self):
        profile = make_profile(
            occupation=Occupation.TECHNOLOGY,
            annual_income=500000,
            credit_score=800,
            risk_zone=RiskZone.LOW,
        )
        multiplier = calculate_risk_multiplier(profile)
        assert multiplier == Decimal("0.5184")
        assert multiplier >= Decimal("0.5")

    @pytest.mark.parametrize(
        "overrides",
        [{"age": 17}, {"annual_income": -1}, {"bmi": Decimal("0")}],
    )
    def test_invalid_profile(self, overrides):
        with pytest.raises(InvalidRiskProfile):
            calculate_risk_multiplier(make_profile(**overrides))

    def test_profile_from_dict(self):
        profile = RiskProfile.from_dict({
            "age": 30,
            "annual_income": "80000",
            "occupation": "administrative",
            "smoker": True,
            "risk_zone": "high",
        })
        assert profile.risk_zone is RiskZone.HIGH
        assert calculate_risk_multiplier(profile) == Decimal("1.95")


class TestRiskAdjustedPremium:

    def test_neutral_profile_keeps_base(self):
        base, multiplier, adjusted = calculate_risk_adjusted("life", 500000, 20, make_profile())
        assert base.annual_premium == 2083
        assert adjusted == 2083

    def test_smoker_rounds_half_up(self):
        # 2083 * 1.5 = 3124.5
        base, multiplier, adjusted = calculate_risk_adjusted(
            "life", 500000, 20, make_profile(smoker=True)
        )
        assert multiplier == Decimal("1.5")
        assert adjusted == 3125

    def test_base_matches_calculator(self):
        base, _, _ = calculate_risk_adjusted("auto", 40000, 10, make_profile())
        assert base.annual_premium == calculate("auto", 40000, 10)

    def test_base_errors_propagate(self):
        with pytest.raises(InvalidTermLength):
            calculate_risk_adjusted("life", 500000, 12, make_profile())


class TestUnknownRiskZone:

    def test_multiplier_rejects_unknown_zone(self):
        profile = RiskProfile(age=30, annual_income=Decimal("80000"), risk_zone="extreme")
        with pytest.raises(InvalidRiskProfile) as exc_info:
            calculate_risk_multiplier(profile)
        assert exc_info.value.details["field"] == "risk_zone"
        assert exc_info.value.details["value"] == "extreme"

    def test_score_and_breakdown_reject_unknown_zone(self):
        profile = make_profile(risk_zone="extreme")
        with pytest.raises(InvalidRiskProfile):
            calculate_risk_score(profile)
        with pytest.raises(InvalidRiskProfile):
            calculate_risk_factors(profile)

    def test_from_dict_rejects_unknown_zone(self):
        with pytest.raises(InvalidRiskProfile) as exc_info:
            RiskProfile.from_dict({"age": 30, "annual_income": "80000", "risk_zone": "extreme"})
        assert exc_info.value.code == "PC_INVALID_RISK_PROFILE"

    def test_zone_given_as_string(self):
        assert calculate_risk_multiplier(make_profile(risk_zone="high")) == Decimal("1.3")


# =============================================================================
# Risk Score
# =============================================================================

class TestRiskScore:

    def test_default_profile(self):
        # base 50, administrative -5
        assert calculate_risk_score(make_profile()) == (45, RiskCategory.MODERATE)

    @pytest.mark.parametrize(
        "overrides,score,category",
        [
            ({"occupation": Occupation.TECHNOLOGY}, 40, RiskCategory.MODERATE),
            ({"risk_zone": RiskZone.LOW}, 35, RiskCategory.LOW),
            ({"occupation": None, "age": 45}, 60, RiskCategory.HIGH),
            ({"age": 45}, 55, RiskCategory.MODERATE),
            ({"occupation": None, "age": 22, "smoker": True}, 75, RiskCategory.VERY_HIGH),
            ({"occupation": None, "smoker": True}, 70, RiskCategory.HIGH),
        ],
    )
    def test_category_boundaries(self, overrides, score, category):
        assert calculate_risk_score(make_profile(**overrides)) == (score, category)

    def test_capped_at_hundred(self):
        profile = make_profile(
            occupation=Occupation.HAZARDOUS,
            smoker=True,
            has_bankruptcy_history=True,
        )
        assert calculate_risk_score(profile) == (100, RiskCategory.VERY_HIGH)

    def test_lowest_combination(self):
        profile = make_profile(
            occupation=Occupation.TECHNOLOGY,
            annual_income=250000,
            credit_score=800,
            risk_zone=RiskZone.LOW,
        )
        assert calculate_risk_score(profile) == (10, RiskCategory.LOW)

    @pytest.mark.parametrize(
        "score,category",
        [
            (0, RiskCategory.LOW),
            (39, RiskCategory.LOW),
            (40, RiskCategory.MODERATE),
            (59, RiskCategory.MODERATE),
            (60, RiskCategory.HIGH),
            (74, RiskCategory.HIGH),
            (75, RiskCategory.VERY_HIGH),
            (100, RiskCategory.VERY_HIGH),
        ],
    )
    def test_category_thresholds(self, score, category):
        assert risk_category(score) is category

    @pytest.mark.parametrize(
        "overrides,score",
        [
            ({"age": 60}, 70),
            ({"age": 24}, 55),
            ({"annual_income": 20000}, 60),
            ({"annual_income": 0}, 50),
            ({"credit_score": 500}, 70),
            ({"credit_score": 600}, 60),
            ({"credit_score": 700}, 50),
            ({"credit_score": 740}, 40),
            ({"bmi": Decimal("32")}, 60),
            ({"has_chronic_illness": True}, 65),
            ({"has_dangerous_hobbies": True}, 65),
            ({"risk_zone": RiskZone.HIGH}, 65),
        ],
    )
    def test_individual_adjustments(self, overrides, score):
        assert calculate_risk_score(make_profile(occupation=None, **overrides))[0] == score

    def test_unknown_occupation_adds_nothing(self):
        assert calculate_risk_score(make_profile(occupation="astronaut"))[0] == 50

    def test_invalid_profile(self):
        with pytest.raises(InvalidRiskProfile):
            calculate_risk_score(make_profile(age=17))


# =============================================================================
# Risk Breakdown
# =============================================================================

class TestRiskFactors:

    def test_default_profile(self):
        factors = calculate_risk_factors(make_profile())
        assert [(f.factor, f.level, f.multiplier) for f in factors] == [
            ("age", "low", Decimal("1.0")),
            ("occupation_type", "low", Decimal("1.0")),
        ]
        assert factors[0].category is RiskFactorCategory.HEALTH
        assert factors[0].description == "Age 30 - low risk"

    def test_every_factor_present(self):
        profile = make_profile(
            age=62,
            occupation=Occupation.HAZARDOUS,
            has_chronic_illness=True,
            smoker=True,
            bmi=Decimal("27"),
            has_dangerous_hobbies=True,
            has_bankruptcy_history=True,
            credit_score=600,
            risk_zone=RiskZone.HIGH,
        )
        factors = calculate_risk_factors(profile)
        assert [f.factor for f in factors] == [
            "age",
            "occupation_type",
            "chronic_illness",
            "smoking",
            "bmi",
            "dangerous_hobbies",
            "bankruptcy_history",
            "credit_score",
            "location_risk",
        ]
        by_name = {f.factor: f for f in factors}
        assert by_name["age"].level == "high"
        assert by_name["age"].multiplier == Decimal("1.5")
        assert by_name["occupation_type"].level == "very-high"
        assert by_name["occupation_type"].multiplier == Decimal("2.0")
        assert by_name["bmi"].level == "medium"
        assert by_name["credit_score"].level == "medium"
        assert by_name["location_risk"].multiplier == Decimal("1.3")
        assert by_name["location_risk"].category is RiskFactorCategory.GEOGRAPHIC

    @pytest.mark.parametrize("age,level", [(45, "low"), (46, "medium"), (60, "medium"), (61, "high")])
    def test_age_levels(self, age, level):
        assert calculate_risk_factors(make_profile(age=age))[0].level == level

    def test_unknown_occupation_omitted(self):
        factors = calculate_risk_factors(make_profile(occupation="astronaut"))
        assert [f.factor for f in factors] == ["age"]

    def test_good_credit_is_low_risk(self):
        factors = calculate_risk_factors(make_profile(credit_score=700))
        assert factors[-1].level == "low"
        assert factors[-1].multiplier == Decimal("0.9")

    def test_to_dict(self):
        factor = calculate_risk_factors(make_profile(smoker=True))[-1]
        assert factor.to_dict() == {
            "category": "lifestyle",
            "factor": "smoking",
            "level": "high",
            "multiplier": "1.5",
            "description": "Smoker",
        }


# =============================================================================
# Premium Schedule
# =============================================================================

class TestAddMonths:

    def test_simple(self):
        assert add_months(date(2024, 1, 15), 3) == date(2024, 4, 15)

    def test_year_rollover(self):
        assert add_months(date(2023, 12, 15), 1) == date(2024, 1, 15)

    def test_clamps_to_month_end(self):
        assert add_months(date(2024, 1, 31), 1) == date(2024, 2, 29)
        assert add_months(date(2023, 1, 31), 1) == date(2023, 2, 28)
        assert add_months(date(2024, 3, 31), 1) == date(2024, 4, 30)


class TestPremiumSchedule:

    def test_monthly(self):
        schedule = generate_premium_schedule(1200, "monthly", date(2024, 1, 31))
        assert len(schedule) == 12
        assert all(i.amount == Decimal("100.00") for i in schedule)
        assert [i.sequence for i in schedule] == list(range(1, 13))
        assert schedule[0].due_date == date(2024, 1, 31)
        assert schedule[1].due_date == date(2024, 2, 29)
        assert schedule[2].due_date == date(2024, 3, 31)
        assert schedule[11].due_date == date(2024, 12, 31)

    def test_quarterly(self):
        schedule = generate_premium_schedule(1000, PaymentFrequency.QUARTERLY, date(2024, 1, 15))
        assert [i.amount for i in schedule] == [Decimal("250.00")] * 4
        assert [i.due_date for i in schedule] == [
            date(2024, 1, 15), date(2024, 4, 15), date(2024, 7, 15), date(2024, 10, 15),
        ]

    def test_semi_annual(self):
        schedule = generate_premium_schedule(2083, "semi-annual", date(2024, 1, 1))
        assert [i.amount for i in schedule] == [Decimal("1041.50")] * 2
        assert schedule[1].due_date == date(2024, 7, 1)

    def test_annual(self):
        schedule = generate_premium_schedule(2083, "annual", date(2024, 1, 1))
        assert len(schedule) == 1
        assert schedule[0].amount == Decimal("2083.00")

    def test_installments_rounded_to_cents(self):
        schedule = generate_premium_schedule(2083, "monthly", date(2024, 1, 1))
        assert schedule[0].amount == Decimal("173.58")

    def test_installments_start_unpaid(self):
        schedule = generate_premium_schedule(1200, "quarterly", date(2024, 1, 1))
        assert not any(i.paid for i in schedule)

    def test_defaults_to_today(self):
        schedule = generate_premium_schedule(1200, "annual")
        assert schedule[0].due_date == date.today()

    def test_zero_premium(self):
        schedule = generate_premium_schedule(0, "quarterly", date(2024, 1, 1))
        assert all(i.amount == Decimal("0.00") for i in schedule)

    def test_unknown_frequency(self):
        with pytest.raises(InvalidFrequency):
            generate_premium_schedule(1200, "weekly")

    def test_negative_total(self):
        with pytest.raises(InvalidAmount):
            generate_premium_schedule(-1, "monthly")

    def test_to_dict(self):
        installment = generate_premium_schedule(1200, "annual", date(2024, 5, 1))[0]
        assert installment.to_dict() == {
            "sequence": 1,
            "frequency": "annual",
            "amount": "1200.00",
            "due_date": "2024-05-01",
            "paid": False,
        }
