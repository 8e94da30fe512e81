"""Client-side types for the Mortgage GraphQL API (mirror API contracts)."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class MortgageInput:
    """Calculation request. paymentSchedule is 'm', 'bw' or 'abw'."""

    property_price: Optional[float] = None
    down_payment: Optional[float] = None
    annual_interest_rate: Optional[float] = None
    amortization_period: Optional[int] = None
    payment_schedule: Optional[str] = None


@dataclass
class MortgageQuote:
    """Calculation result: periodic payment, insurance premium, insured loan amount, payments a year."""

    payment: float
    insurance_premium: float
    total_loan_amount: float
    payments_per_year: int
