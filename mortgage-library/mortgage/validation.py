"""
Parameter validation for mortgage requests.

Checks run in a fixed order and the first failing check wins; messages are part
of the public API contract and are returned verbatim to clients.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from mortgage.request import SCHEDULE_CODES, MortgageRequest

PROPERTY_PRICE_INVALID = "Property price is missing or invalid."
DOWN_PAYMENT_INVALID = "Down payment is missing or invalid."
INTEREST_RATE_INVALID = "Annual interest rate is missing or invalid."
AMORTIZATION_INVALID = "Amortization period is missing or invalid."
SCHEDULE_MISSING = "Payment schedule is missing."
SCHEDULE_UNKNOWN = (
    "Payment schedule must be 'accelerated bi-weekly', 'bi-weekly', or 'monthly'."
)
NEGATIVE_AMOUNTS = "Property price, down payment, and interest rate must be positive."
INTEREST_RATE_TOO_HIGH = "Annual interest rate must be less than or equal to 100."
HIGH_PRICE_DOWN_PAYMENT = (
    "Property prices above $1 million must have at least 20% down payment."
)
AMORTIZATION_OUT_OF_RANGE = (
    "Amortization period must be in 5-year increments between 5 and 30 years."
)
DOWN_PAYMENT_EXCEEDS_PRICE = "Down payment cannot exceed property price."

MAX_INTEREST_RATE = 100
HIGH_PRICE_THRESHOLD = 1_000_000
HIGH_PRICE_MIN_DOWN_RATIO = 0.20
MIN_AMORTIZATION_YEARS = 5
MAX_AMORTIZATION_YEARS = 30
AMORTIZATION_STEP_YEARS = 5


@dataclass(frozen=True)
class Valid:
    """Request passed every check."""

    ok: bool = True


@dataclass(frozen=True)
class Invalid:
    """First violated check, with its client-facing message."""

    message: str
    ok: bool = False


ValidationResult = Union[Valid, Invalid]

VALID = Valid()


def validate(request: MortgageRequest) -> ValidationResult:
    """Return VALID or Invalid(message) for the first violated check."""
    # Presence checks treat zero as missing.
    if not request.property_price:
        return Invalid(PROPERTY_PRICE_INVALID)
    if not request.down_payment:
        return Invalid(DOWN_PAYMENT_INVALID)
    if not request.annual_interest_rate:
        return Invalid(INTEREST_RATE_INVALID)
    if not request.amortization_period_years:
        return Invalid(AMORTIZATION_INVALID)
    if not request.payment_schedule:
        return Invalid(SCHEDULE_MISSING)
    if request.payment_schedule not in SCHEDULE_CODES:
        return Invalid(SCHEDULE_UNKNOWN)

    price = request.property_price
    down = request.down_payment
    rate = request.annual_interest_rate
    years = request.amortization_period_years

    if price < 0 or down < 0 or rate < 0:
        return Invalid(NEGATIVE_AMOUNTS)
    if rate > MAX_INTEREST_RATE:
        return Invalid(INTEREST_RATE_TOO_HIGH)
    if price > HIGH_PRICE_THRESHOLD and down < price * HIGH_PRICE_MIN_DOWN_RATIO:
        return Invalid(HIGH_PRICE_DOWN_PAYMENT)
    if (
        years < MIN_AMORTIZATION_YEARS
        or years > MAX_AMORTIZATION_YEARS
        or years % AMORTIZATION_STEP_YEARS != 0
    ):
        return Invalid(AMORTIZATION_OUT_OF_RANGE)
    if down > price:
        return Invalid(DOWN_PAYMENT_EXCEEDS_PRICE)
    return VALID
