"""
Calculation entrypoint.

Most users of the library should only need `calculate_mortgage(payload)`.
It parses the wire payload and delegates to a default `MortgageCalculator`.
Callers that need different collaborators build their own calculator.
"""

from typing import Any, Mapping

from mortgage.calculator import CalculationOutcome, create_default_calculator
from mortgage.request import parse_request

_default_calculator = create_default_calculator()


def calculate_mortgage(payload: Mapping[str, Any]) -> CalculationOutcome:
    """Parse a camelCase request body and run the default pipeline."""
    return _default_calculator.calculate(parse_request(payload))
