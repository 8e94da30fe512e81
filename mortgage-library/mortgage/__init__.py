"""Mortgage library: request parsing, validation, insurance premium, payment, and pipeline."""

from mortgage.calculation import calculate_mortgage
from mortgage.calculator import (
    CalculationOutcome,
    InsuranceFailure,
    MortgageCalculator,
    MortgageQuote,
    ValidationFailure,
    create_default_calculator,
)
from mortgage.insurance import (
    InsufficientDownPayment,
    Premium,
    PremiumResult,
    insurance_premium,
)
from mortgage.interfaces import PaymentCalculator, PremiumCalculator, RequestValidator
from mortgage.payment import periodic_payment, round_currency
from mortgage.request import MortgageRequest, PaymentSchedule, parse_request
from mortgage.validation import Invalid, Valid, ValidationResult, validate

__all__ = [
    "RequestValidator",
    "PremiumCalculator",
    "PaymentCalculator",
    "MortgageRequest",
    "PaymentSchedule",
    "parse_request",
    "Valid",
    "Invalid",
    "ValidationResult",
    "validate",
    "Premium",
    "InsufficientDownPayment",
    "PremiumResult",
    "insurance_premium",
    "periodic_payment",
    "round_currency",
    "MortgageCalculator",
    "MortgageQuote",
    "ValidationFailure",
    "InsuranceFailure",
    "CalculationOutcome",
    "create_default_calculator",
    "calculate_mortgage",
]
