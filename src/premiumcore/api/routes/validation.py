"""Input validation endpoints used by client-side forms."""

from decimal import Decimal

from fastapi import APIRouter

from premiumcore.api.schemas.requests import (
    CurrencyRequest,
    EmailRequest,
    ObjectIdRequest,
    PasswordRequest,
    PhoneRequest,
)
from premiumcore.api.schemas.responses import PredicateResponse, ValidationResponse
from premiumcore.validation import (
    CURRENCY_MAX,
    CURRENCY_MIN,
    is_valid_currency,
    is_valid_email,
    is_valid_object_id,
    is_valid_phone,
    normalize_phone,
    validate_password,
)

router = APIRouter(prefix="/validate", tags=["Validation"])

# Default currency bounds (set by main.py from settings)
currency_min: Decimal = CURRENCY_MIN
currency_max: Decimal = CURRENCY_MAX


def set_currency_bounds(low: Decimal, high: Decimal):
    global currency_min, currency_max
    currency_min = low
    currency_max = high


@router.post("/password", response_model=ValidationResponse)
async def password(request: PasswordRequest):
    """Every unmet password rule, one message each."""
    result = validate_password(request.password)
    return ValidationResponse(is_valid=result.is_valid, errors=list(result.errors))


@router.post("/email", response_model=PredicateResponse)
async def email(request: EmailRequest):
    return PredicateResponse(is_valid=is_valid_email(request.email))


@router.post("/phone", response_model=PredicateResponse)
async def phone(request: PhoneRequest):
    return PredicateResponse(
        is_valid=is_valid_phone(request.phone),
        normalized=normalize_phone(request.phone),
    )


@router.post("/currency", response_model=PredicateResponse)
async def currency(request: CurrencyRequest):
    low = request.min if request.min is not None else currency_min
    high = request.max if request.max is not None else currency_max
    return PredicateResponse(is_valid=is_valid_currency(request.amount, low, high))


@router.post("/object-id", response_model=PredicateResponse)
async def object_id(request: ObjectIdRequest):
    return PredicateResponse(is_valid=is_valid_object_id(request.id))
