"""
Premium quote endpoints.

Thin adapters over premiumcore.engine. Domain errors propagate to the
exception handler registered in main.py.
"""

from fastapi import APIRouter

from premiumcore.api.schemas.requests import (
    AggregateRequest,
    ClampRequest,
    PremiumRequest,
    RiskQuoteRequest,
    ScheduleRequest,
)
from premiumcore.api.schemas.responses import (
    AggregateResponse,
    ClampResponse,
    InstallmentOut,
    PremiumLineOut,
    ErrorResponse,
    PremiumResponse,
    RiskFactorOut,
    RiskQuoteResponse,
    ScheduleResponse,
)
from premiumcore.catalog import CoverageCatalog, get_default_catalog
from premiumcore.engine import (
    aggregate,
    calculate_risk_adjusted,
    calculate_risk_factors,
    calculate_risk_score,
    clamp,
    generate_premium_schedule,
    quote,
    validate_term_length,
)
from premiumcore.models import DEFAULT_TERM_YEARS, CoverageSelection, RiskProfile

router = APIRouter(
    prefix="/quotes",
    tags=["Quotes"],
    responses={404: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)

catalog: CoverageCatalog = get_default_catalog()
default_term: int = DEFAULT_TERM_YEARS


def set_catalog(c: CoverageCatalog):
    global catalog
    catalog = c


def set_default_term(term_years: int):
    global default_term
    default_term = validate_term_length(term_years)


@router.post("/clamp", response_model=ClampResponse)
async def clamp_amount(request: ClampRequest):
    """Constrain an amount to the coverage type's bounds."""
    amount = clamp(request.type_id, request.amount, catalog)
    return ClampResponse(
        type_id=request.type_id,
        requested_amount=request.amount,
        amount=amount,
        clamped=amount != request.amount,
    )


@router.post("/premium", response_model=PremiumResponse)
async def premium(request: PremiumRequest):
    """Annual premium for one coverage."""
    q = quote(request.type_id, request.amount, request.term_years, catalog)
    return PremiumResponse(
        type_id=q.coverage_id,
        requested_amount=q.requested_amount,
        effective_amount=q.effective_amount,
        term_years=q.term_years,
        monthly_rate=q.monthly_rate,
        annual_premium=q.annual_premium,
    )


@router.post("/aggregate", response_model=AggregateResponse)
async def aggregate_premiums(request: AggregateRequest):
    """
    Total annual premium across selections.

    Fails as a whole if any selection cannot be rated.
    """
    selections = [
        CoverageSelection(
            type_id=s.type_id,
            amount=s.amount,
            term_years=default_term if s.term_years is None else s.term_years,
        )
        for s in request.selections
    ]
    summary = aggregate(selections, catalog)
    return AggregateResponse(
        total=summary.total,
        lines=[PremiumLineOut(type_id=l.type_id, premium=l.premium) for l in summary.lines],
    )


@router.post("/risk", response_model=RiskQuoteResponse)
async def risk_adjusted(request: RiskQuoteRequest):
    """Premium scaled by the applicant's risk multiplier, with score and breakdown."""
    profile = RiskProfile.from_dict(request.profile.model_dump())
    base, multiplier, adjusted = calculate_risk_adjusted(
        request.type_id, request.amount, request.term_years, profile, catalog,
    )
    score, category = calculate_risk_score(profile)
    return RiskQuoteResponse(
        type_id=base.coverage_id,
        base_premium=base.annual_premium,
        risk_multiplier=multiplier,
        adjusted_premium=adjusted,
        risk_score=score,
        risk_category=category.value,
        factors=[
            RiskFactorOut(
                category=f.category.value,
                factor=f.factor,
                level=f.level,
                multiplier=f.multiplier,
                description=f.description,
            )
            for f in calculate_risk_factors(profile)
        ],
    )


@router.post("/schedule", response_model=ScheduleResponse)
async def schedule(request: ScheduleRequest):
    """Installment schedule for an annual premium."""
    installments = generate_premium_schedule(
        request.total_premium, request.frequency, request.start_date,
    )
    return ScheduleResponse(
        frequency=installments[0].frequency.value,
        total_premium=request.total_premium,
        installments=[
            InstallmentOut(
                sequence=i.sequence,
                frequency=i.frequency.value,
                amount=i.amount,
                due_date=i.due_date.isoformat(),
                paid=i.paid,
            )
            for i in installments
        ],
    )
