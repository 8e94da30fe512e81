"""Mortgage request value type and wire-payload parsing (data only; no validation rules)."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional

# Plain decimal literal: optional sign, digits with optional fraction, optional exponent.
_NUMBER_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")


class PaymentSchedule(str, Enum):
    """Payment frequency, keyed by the short code clients send."""

    ACCELERATED_BI_WEEKLY = "abw"
    BI_WEEKLY = "bw"
    MONTHLY = "m"

    @property
    def payments_per_year(self) -> int:
        """Number of payments actually made each year."""
        return 12 if self is PaymentSchedule.MONTHLY else 26

    @property
    def base_periods_per_year(self) -> int:
        """
        Periods per year used by the amortization formula.
        Accelerated bi-weekly is half the monthly payment, so it amortizes over 12.
        """
        return 26 if self is PaymentSchedule.BI_WEEKLY else 12


SCHEDULE_CODES = frozenset(s.value for s in PaymentSchedule)


@dataclass(frozen=True)
class MortgageRequest:
    """
    Parsed calculation request.
    Numeric fields are None when the value was missing or not a number.
    payment_schedule keeps the raw code so validation can reject unknown ones.
    """

    property_price: Optional[float]
    down_payment: Optional[float]
    annual_interest_rate: Optional[float]
    amortization_period_years: Optional[float]
    payment_schedule: Optional[str]

    @property
    def schedule(self) -> PaymentSchedule:
        """Schedule enum; only valid after the request passed validation."""
        return PaymentSchedule(self.payment_schedule)


def parse_number(value: Any) -> Optional[float]:
    """Coerce a JSON number or numeric string to float; None if it is neither."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return None
    elif isinstance(value, str):
        text = value.strip()
        if not _NUMBER_RE.match(text):
            return None
        number = float(text)
    else:
        return None
    if not math.isfinite(number):
        return None
    return number


def _parse_schedule(value: Any) -> Optional[str]:
    if not value:
        return None
    if isinstance(value, str):
        return value
    return str(value)


def parse_request(payload: Mapping[str, Any]) -> MortgageRequest:
    """Build a MortgageRequest from the camelCase request body. Never raises."""
    return MortgageRequest(
        property_price=parse_number(payload.get("propertyPrice")),
        down_payment=parse_number(payload.get("downPayment")),
        annual_interest_rate=parse_number(payload.get("annualInterestRate")),
        amortization_period_years=parse_number(payload.get("amortizationPeriod")),
        payment_schedule=_parse_schedule(payload.get("paymentSchedule")),
    )
