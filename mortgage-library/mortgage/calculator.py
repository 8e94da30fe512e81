"""
Calculation pipeline: validate -> insurance premium -> periodic payment.

Design intent:
- Requests are **data only**; the rules live in three pure functions.
- The calculator takes those functions as injected collaborators, so the
  transport layer can be built around any configured instance instead of a
  process-wide singleton.
- Business outcomes are returned as result variants, never raised.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from mortgage.insurance import InsufficientDownPayment, insurance_premium
from mortgage.interfaces import PaymentCalculator, PremiumCalculator, RequestValidator
from mortgage.payment import periodic_payment
from mortgage.request import MortgageRequest
from mortgage.validation import Invalid, validate


@dataclass(frozen=True)
class MortgageQuote:
    """Successful calculation."""

    payment: float
    insurance_premium: float
    total_loan_amount: float
    payments_per_year: int


@dataclass(frozen=True)
class ValidationFailure:
    """Request rejected by the validator."""

    message: str


@dataclass(frozen=True)
class InsuranceFailure:
    """Down payment below the insurable floor."""

    message: str


CalculationOutcome = Union[MortgageQuote, ValidationFailure, InsuranceFailure]


class MortgageCalculator:
    """
    Runs the pipeline with the configured collaborators.
    Stateless apart from the collaborators; safe to share across concurrent requests.
    """

    def __init__(
        self,
        validator: Optional[RequestValidator] = None,
        premium_calculator: Optional[PremiumCalculator] = None,
        payment_calculator: Optional[PaymentCalculator] = None,
    ) -> None:
        self._validate = validator or validate
        self._premium = premium_calculator or insurance_premium
        self._payment = payment_calculator or periodic_payment

    def calculate(self, request: MortgageRequest) -> CalculationOutcome:
        """Validate, then price the insured loan. Short-circuits on the first failure."""
        result = self._validate(request)
        if isinstance(result, Invalid):
            return ValidationFailure(result.message)

        premium = self._premium(request.property_price, request.down_payment)
        if isinstance(premium, InsufficientDownPayment):
            return InsuranceFailure(premium.message)

        total_loan_amount = request.property_price - request.down_payment + premium.amount
        payment = self._payment(
            total_loan_amount,
            request.schedule,
            int(request.amortization_period_years),
            request.annual_interest_rate,
        )
        return MortgageQuote(
            payment=payment,
            insurance_premium=premium.amount,
            total_loan_amount=total_loan_amount,
            payments_per_year=request.schedule.payments_per_year,
        )


def create_default_calculator() -> MortgageCalculator:
    """Factory for a calculator wired with the built-in validator and calculators."""
    return MortgageCalculator(
        validator=validate,
        premium_calculator=insurance_premium,
        payment_calculator=periodic_payment,
    )
