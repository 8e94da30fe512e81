"""Service layer: turn REST/GraphQL inputs into library calls and map outcomes back."""

from __future__ import annotations

import logging
from typing import Any

from mortgage.calculator import (
    CalculationOutcome,
    InsuranceFailure,
    MortgageCalculator,
    MortgageQuote,
    ValidationFailure,
)
from mortgage.request import parse_request

from app.types import MortgageInput, MortgageResult

logger = logging.getLogger(__name__)

# Insurance-floor failures answer 500, as existing clients of this endpoint expect.
INSURANCE_FAILURE_STATUS = 500


def _run(calculator: MortgageCalculator, payload: dict[str, Any]) -> CalculationOutcome:
    outcome = calculator.calculate(parse_request(payload))
    if isinstance(outcome, ValidationFailure):
        logger.info("Rejected mortgage request: %s", outcome.message)
    elif isinstance(outcome, InsuranceFailure):
        logger.warning("Error calculating mortgage: %s", outcome.message)
    return outcome


def calculate_mortgage_response(
    calculator: MortgageCalculator,
    payload: Any,
) -> tuple[int, dict[str, Any]]:
    """Run the pipeline for a REST body; return (status code, JSON body)."""
    if not isinstance(payload, dict):
        payload = {}
    outcome = _run(calculator, payload)
    if isinstance(outcome, MortgageQuote):
        return 200, {"payment": outcome.payment}
    if isinstance(outcome, ValidationFailure):
        return 400, {"error": outcome.message}
    return INSURANCE_FAILURE_STATUS, {"error": outcome.message}


def _input_to_payload(m: MortgageInput) -> dict[str, Any]:
    """Serialize MortgageInput to the camelCase request body the parser reads."""
    return {
        "propertyPrice": m.property_price,
        "downPayment": m.down_payment,
        "annualInterestRate": m.annual_interest_rate,
        "amortizationPeriod": m.amortization_period,
        "paymentSchedule": m.payment_schedule,
    }


def quote_mortgage(calculator: MortgageCalculator, request: MortgageInput) -> MortgageResult:
    """Run the pipeline for a GraphQL input. Failures raise ValueError with the client message."""
    outcome = _run(calculator, _input_to_payload(request))
    if not isinstance(outcome, MortgageQuote):
        raise ValueError(outcome.message)
    return MortgageResult(
        payment=outcome.payment,
        insurance_premium=outcome.insurance_premium,
        total_loan_amount=outcome.total_loan_amount,
        payments_per_year=outcome.payments_per_year,
    )
