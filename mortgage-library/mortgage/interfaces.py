"""
Protocol-based interfaces for the collaborators of the calculation pipeline.

Using typing.Protocol enables structural subtyping: any callable with the right
signature can replace the built-in validator or calculators (e.g. a different
premium table) without modifying MortgageCalculator.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from mortgage.insurance import PremiumResult
    from mortgage.request import MortgageRequest, PaymentSchedule
    from mortgage.validation import ValidationResult


class RequestValidator(Protocol):
    """Checks a parsed request and reports the first violation."""

    def __call__(self, request: MortgageRequest) -> ValidationResult:
        ...


class PremiumCalculator(Protocol):
    """Computes the default insurance premium, or signals an uninsurable down payment."""

    def __call__(self, property_price: float, down_payment: float) -> PremiumResult:
        ...


class PaymentCalculator(Protocol):
    """Computes the rounded periodic payment for the insured loan amount."""

    def __call__(
        self,
        total_loan_amount: float,
        payment_schedule: PaymentSchedule,
        amortization_period_years: int,
        annual_interest_rate: float,
    ) -> float:
        ...
