"""FastAPI app: REST mortgage endpoint plus Strawberry GraphQL."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from strawberry.fastapi import GraphQLRouter

from mortgage.calculator import MortgageCalculator, create_default_calculator

from app.config import configure_logging, load_settings
from app.schema import API_VERSION, schema
from app.services import calculate_mortgage_response

logger = logging.getLogger(__name__)

CALCULATE_MORTGAGE_PATH = "/api/v1/calculate-mortgage"


async def _read_json_body(request: Request) -> object:
    """Request body as JSON, or None when it is empty or not JSON."""
    try:
        return await request.json()
    except ValueError:
        return None


async def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    # Unknown paths and unsupported methods both answer as unmatched routes.
    if exc.status_code in (404, 405):
        return JSONResponse(status_code=404, content={"error": "Route not found"})
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


async def _unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


def create_app(calculator: Optional[MortgageCalculator] = None) -> FastAPI:
    """Build the API around the given calculator (default pipeline if None)."""
    app = FastAPI(title="Mortgage API", version=API_VERSION)
    app.state.calculator = calculator or create_default_calculator()

    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _unhandled_exception_handler)

    graphql_app = GraphQLRouter(schema)
    app.include_router(graphql_app, prefix="/graphql")

    @app.post(CALCULATE_MORTGAGE_PATH)
    async def calculate_mortgage(request: Request) -> JSONResponse:
        """Periodic mortgage payment, including default insurance when under 20% down."""
        payload = await _read_json_body(request)
        try:
            status_code, body = calculate_mortgage_response(
                request.app.state.calculator, payload
            )
        except Exception:
            logger.exception("Error calculating mortgage")
            return JSONResponse(status_code=500, content={"error": "Internal server error"})
        return JSONResponse(status_code=status_code, content=body)

    @app.get("/health")
    def health() -> dict[str, str]:
        """Health check for load balancers and Docker."""
        return {"status": "ok"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = load_settings()
    configure_logging(settings.log_level)
    logger.info("Server listening at http://%s:%s", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
