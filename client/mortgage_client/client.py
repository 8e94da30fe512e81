"""Mortgage API client using sgqlc."""

from __future__ import annotations

from typing import Any

from sgqlc.endpoint.http import HTTPEndpoint

from mortgage_client.types import MortgageInput, MortgageQuote


def _mortgage_to_vars(m: MortgageInput) -> dict[str, Any]:
    """Serialize MortgageInput to GraphQL variables (camelCase), leaving out unset fields."""
    fields = {
        "propertyPrice": m.property_price,
        "downPayment": m.down_payment,
        "annualInterestRate": m.annual_interest_rate,
        "amortizationPeriod": m.amortization_period,
        "paymentSchedule": m.payment_schedule,
    }
    return {key: value for key, value in fields.items() if value is not None}


class MortgageClient:
    """
    Client for the Mortgage GraphQL API.
    Use from notebooks or scripts; configurable base URL for local vs Docker.
    """

    def __init__(self, url: str = "http://api:3000/graphql", timeout: float = 30.0) -> None:
        self._url = url.rstrip("/")
        self._timeout = timeout
        self._endpoint = HTTPEndpoint(self._url, timeout=timeout)

    def _request(self, query: str, variables: dict | None = None) -> dict:
        result = self._endpoint(query, variables or {})
        if "errors" in result and result["errors"]:
            messages = [e.get("message", str(e)) for e in result["errors"]]
            raise RuntimeError(f"GraphQL errors: {messages}")
        return result.get("data", {})

    def version(self) -> str:
        """Call the version query."""
        query = """
            query Version {
                version
            }
        """
        data = self._request(query)
        return data["version"]

    def calculate_mortgage(self, mortgage: MortgageInput) -> MortgageQuote:
        """Periodic payment for a purchase. Rejected requests raise RuntimeError with the API message."""
        query = """
            query CalculateMortgage($request: MortgageInput!) {
                calculateMortgage(request: $request) {
                    payment
                    insurancePremium
                    totalLoanAmount
                    paymentsPerYear
                }
            }
        """
        data = self._request(query, {"request": _mortgage_to_vars(mortgage)})
        raw = data["calculateMortgage"]
        return MortgageQuote(
            payment=raw["payment"],
            insurance_premium=raw["insurancePremium"],
            total_loan_amount=raw["totalLoanAmount"],
            payments_per_year=raw["paymentsPerYear"],
        )
