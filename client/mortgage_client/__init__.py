"""Python client for the Mortgage GraphQL API."""

from mortgage_client.client import MortgageClient
from mortgage_client.types import MortgageInput, MortgageQuote

__all__ = [
    "MortgageClient",
    "MortgageInput",
    "MortgageQuote",
]
