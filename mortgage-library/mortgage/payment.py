"""Periodic payment for a fixed-rate amortizing loan."""

from __future__ import annotations

import logging
import math
from decimal import ROUND_HALF_UP, Decimal

from mortgage.request import PaymentSchedule

logger = logging.getLogger(__name__)

_CENT = Decimal("0.01")


def round_currency(value: float) -> float:
    """Round to cents, halves away from zero (1432.085 -> 1432.09)."""
    return float(Decimal(str(value)).quantize(_CENT, rounding=ROUND_HALF_UP))


def periodic_payment(
    total_loan_amount: float,
    payment_schedule: PaymentSchedule,
    amortization_period_years: int,
    annual_interest_rate: float,
) -> float:
    """
    Level payment per period, rounded to cents.

    M = P * r(1+r)^n / ((1+r)^n - 1), with r = annual_interest_rate / 100 / periods_per_year
    and n = years * periods_per_year. Bi-weekly amortizes over 26 periods a year; monthly and
    accelerated bi-weekly over 12, the accelerated payment being half the monthly one.
    A zero rate falls back to straight-line repayment P / n.
    Raises OverflowError when the amounts are too large for the payment to be finite.
    """
    schedule = PaymentSchedule(payment_schedule)
    periods_per_year = schedule.base_periods_per_year
    total_payments = int(amortization_period_years) * periods_per_year
    r = annual_interest_rate / 100 / periods_per_year

    if r == 0:
        payment = total_loan_amount / total_payments
    else:
        growth = (1 + r) ** total_payments
        payment = total_loan_amount * (r * growth) / (growth - 1)

    if schedule is PaymentSchedule.ACCELERATED_BI_WEEKLY:
        payment /= 2

    logger.debug(
        "payment periods_per_year=%s total_payments=%s periodic_rate=%s payment=%s",
        periods_per_year,
        total_payments,
        r,
        payment,
    )
    if not math.isfinite(payment):
        raise OverflowError("periodic payment is too large to represent")
    return round_currency(payment)
