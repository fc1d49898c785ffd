"""
Withdrawal Gateway: validates withdrawals and routes them to Stripe or Flutterwave.

Each request is validated, charged a flat fee, sent to exactly one payment
gateway and announced on a Pusher channel. Nothing is persisted.

Start the server:
    uvicorn app.main:app --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.api.balance import router as balance_router
from app.api.banks import router as banks_router
from app.api.health import router as health_router
from app.api.transactions import router as transactions_router
from app.api.withdrawals import router as withdrawals_router
from app.config import settings
from app.dependencies import build_gateway_registry, build_http_client, build_notifier

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger("withdrawal_service.app")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the shared provider HTTP client and wire gateways + notifier."""
    async with build_http_client() as client:
        app.state.gateways = build_gateway_registry(client)
        app.state.notifier = build_notifier()
        logger.info(
            "Withdrawal service started (env=%s, currency=%s, notifications=%s)",
            settings.environment,
            settings.currency,
            "pusher" if settings.pusher_configured else "disabled",
        )
        yield


app = FastAPI(
    title="Withdrawal Gateway",
    description=(
        "Validates withdrawal requests, applies flat fees and routes each one to "
        "a card-network (Stripe) or transfer-network (Flutterwave) gateway, "
        "publishing real-time notifications on success."
    ),
    version="1.0.0",
    lifespan=lifespan,
)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    first = errors[0] if errors else {}
    field = ".".join(str(p) for p in first.get("loc", ()) if p != "body")
    detail = first.get("msg", "invalid request body")
    return JSONResponse(
        status_code=400,
        content={"success": False, "message": f"Invalid request: {field + ': ' if field else ''}{detail}"},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"success": False, "message": "Internal server error"},
    )


app.include_router(health_router, prefix="/api")
app.include_router(withdrawals_router, prefix="/api")
app.include_router(banks_router, prefix="/api")
app.include_router(transactions_router, prefix="/api")
app.include_router(balance_router, prefix="/api")
