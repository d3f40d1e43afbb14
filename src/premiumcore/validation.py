"""
PremiumCore Input Validation Module

Shared validators for everything that reaches the rating engine from the
outside: form fields, API request bodies, foreign-key-shaped ids.
The same rule set serves the request handlers and any client-side form
layer, so it is defined once here.

Predicates return bool. Multi-rule validators return a ValidationResult
with one message per unmet rule. require_valid() turns a failed result
into a ValidationFailed error for callers that prefer exceptions.
"""
from __future__ import annotations

import re
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Optional

from .exceptions import InvalidAmount, ValidationFailed
from .models import ValidationResult
from .money import fractional_digits, to_decimal

__all__ = [
    # Constants
    'PASSWORD_MIN_LENGTH',
    'PASSWORD_SPECIAL_CHARS',
    'OBJECT_ID_PATTERN',
    'EMAIL_PATTERN',
    'ISO_DATETIME_PATTERN',
    'PHONE_MIN_DIGITS',
    'CURRENCY_MIN',
    'CURRENCY_MAX',
    'SANITIZE_MAX_LENGTH',
    # Functions
    'validate_password',
    'is_valid_email',
    'normalize_phone',
    'is_valid_phone',
    'is_valid_currency',
    'is_valid_object_id',
    'is_valid_iso_datetime',
    'sanitize_string',
    'is_valid_credit_card',
    'validate_age',
    'require_valid',
]

# =============================================================================
# PRE-COMPILED REGEX PATTERNS
# =============================================================================

PASSWORD_MIN_LENGTH = 8
PASSWORD_SPECIAL_CHARS = "@$!%*?&"

_LOWERCASE = re.compile(r'[a-z]')
_UPPERCASE = re.compile(r'[A-Z]')
_DIGIT = re.compile(r'[0-9]')
_SPECIAL = re.compile(r'[@$!%*?&]')

# Database reference id: 24 hex characters
OBJECT_ID_PATTERN = re.compile(r'^[0-9a-fA-F]{24}$')

# local@domain.tld: one '@', no whitespace, a dot inside the domain
EMAIL_PATTERN = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')

# 2024-06-10T09:30:00.000Z
ISO_DATETIME_PATTERN = re.compile(r'^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$')

_NON_DIGIT = re.compile(r'\D')
_ANGLE_BRACKETS = re.compile(r'[<>]')
_WHITESPACE_RUN = re.compile(r'\s+')

PHONE_MIN_DIGITS = 10
CURRENCY_MIN = Decimal("0")
CURRENCY_MAX = Decimal("1000000000")
SANITIZE_MAX_LENGTH = 1000


# =============================================================================
# Password
# =============================================================================

def validate_password(password: Any) -> ValidationResult:
    """
    Check a password against every strength rule.

    Rules: at least 8 characters, a lowercase letter, an uppercase letter,
    a digit, and one of @$!%*?&. Each unmet rule adds one message.
    A non-string is treated as an empty password.
    """
    if not isinstance(password, str):
        password = ''
    errors = []

    if len(password) < PASSWORD_MIN_LENGTH:
        errors.append(f'Password must be at least {PASSWORD_MIN_LENGTH} characters long')
    if not _LOWERCASE.search(password):
        errors.append('Password must contain at least one lowercase letter')
    if not _UPPERCASE.search(password):
        errors.append('Password must contain at least one uppercase letter')
    if not _DIGIT.search(password):
        errors.append('Password must contain at least one number')
    if not _SPECIAL.search(password):
        errors.append(f'Password must contain at least one special character ({PASSWORD_SPECIAL_CHARS})')

    return ValidationResult(errors=tuple(errors))


# =============================================================================
# Contact Details
# =============================================================================

def is_valid_email(email: Any) -> bool:
    """
    Permissive syntactic email check.

    Not RFC 5322: one '@', non-empty local and domain parts, no
    whitespace, and a dot in the domain.
    """
    return isinstance(email, str) and EMAIL_PATTERN.match(email) is not None


def normalize_phone(phone: Any) -> str:
    """Strip everything but digits. Non-strings normalize to an empty string."""
    if not isinstance(phone, str):
        return ''
    return _NON_DIGIT.sub('', phone)


def is_valid_phone(phone: Any) -> bool:
    """A phone number is valid when it has at least 10 digits."""
    return len(normalize_phone(phone)) >= PHONE_MIN_DIGITS


# =============================================================================
# Amounts and Identifiers
# =============================================================================

def is_valid_currency(
    amount: Any,
    min_value: Any = CURRENCY_MIN,
    max_value: Any = CURRENCY_MAX,
) -> bool:
    """
    Check a currency amount.

    Valid iff numeric (bools and strings are not), finite, within
    [min_value, max_value] and with at most two fractional digits.
    """
    if isinstance(amount, (bool, str)) or amount is None:
        return False
    try:
        value = to_decimal(amount)
    except InvalidAmount:
        return False

    if value < Decimal(str(min_value)) or value > Decimal(str(max_value)):
        return False
    return fractional_digits(value) <= 2


def is_valid_object_id(value: Any) -> bool:
    """Check a database reference id: exactly 24 hexadecimal characters."""
    return isinstance(value, str) and OBJECT_ID_PATTERN.match(value) is not None


def is_valid_credit_card(number: Any) -> bool:
    """Luhn checksum over the digits of a card number."""
    digits = normalize_phone(number)
    if not digits:
        return False

    total = 0
    for i, ch in enumerate(reversed(digits)):
        digit = int(ch)
        if i % 2 == 1:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
    return total % 10 == 0


# =============================================================================
# Dates
# =============================================================================

def is_valid_iso_datetime(value: Any) -> bool:
    """Check a UTC timestamp of the form YYYY-MM-DDTHH:MM:SS.mmmZ that names a real instant."""
    if not isinstance(value, str) or not ISO_DATETIME_PATTERN.match(value):
        return False
    try:
        datetime.strptime(value, "%Y-%m-%dT%H:%M:%S.%fZ")
    except ValueError:
        return False
    return True


def validate_age(birth_date: date, min_age: int = 18, today: Optional[date] = None) -> bool:
    """Check that someone born on birth_date is at least min_age years old."""
    today = today or date.today()
    age = today.year - birth_date.year
    if (today.month, today.day) < (birth_date.month, birth_date.day):
        age -= 1
    return age >= min_age


# =============================================================================
# Free Text
# =============================================================================

def sanitize_string(value: Any) -> Any:
    """
    Normalize free text before storage or display.

    Trims, removes angle brackets, collapses whitespace runs and caps the
    length. Non-string values are returned unchanged.
    """
    if not isinstance(value, str):
        return value
    cleaned = _ANGLE_BRACKETS.sub('', value.strip())
    cleaned = _WHITESPACE_RUN.sub(' ', cleaned)
    return cleaned[:SANITIZE_MAX_LENGTH]


# =============================================================================
# Exceptions Bridge
# =============================================================================

def require_valid(result: ValidationResult, field_name: str = "input") -> ValidationResult:
    """
    Raise if a validation result has violations.

    Raises:
        ValidationFailed: Carrying every violation message
    """
    if not result.is_valid:
        raise ValidationFailed(
            message=f"Invalid {field_name}: {len(result.errors)} rule(s) not met",
            details={"field": field_name},
            violations=list(result.errors),
        )
    return result
