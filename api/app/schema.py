"""GraphQL schema: mortgage calculation query."""

import strawberry
from strawberry.types import Info

from app.services import quote_mortgage
from app.types import MortgageInput, MortgageResult

API_VERSION = "0.1.0"


@strawberry.type
class Query:
    @strawberry.field
    def version(self) -> str:
        return API_VERSION

    @strawberry.field
    def calculate_mortgage(self, info: Info, request: MortgageInput) -> MortgageResult:
        """Periodic payment, insurance premium and insured loan amount for a purchase."""
        calculator = info.context["request"].app.state.calculator
        return quote_mortgage(calculator, request)


schema = strawberry.Schema(query=Query)
