"""GraphQL types for the mortgage calculation API."""

from __future__ import annotations

from typing import Optional

import strawberry


# --- Input types (request payloads) ---


@strawberry.input
class MortgageInput:
    """Calculation request. Fields are optional so validation can report what is missing."""

    property_price: Optional[float] = None
    down_payment: Optional[float] = None
    annual_interest_rate: Optional[float] = None
    amortization_period: Optional[int] = None
    payment_schedule: Optional[str] = None


# --- Output types (response payloads) ---


@strawberry.type
class MortgageResult:
    """Periodic payment plus the insurance premium and insured loan amount behind it."""

    payment: float
    insurance_premium: float
    total_loan_amount: float
    payments_per_year: int
