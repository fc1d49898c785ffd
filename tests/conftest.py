"""Shared test fixtures."""

import httpx
import pytest
import pytest_asyncio

from app.dependencies import get_gateway_registry, get_notifier
from app.main import app
from app.models.enums import PaymentGateway
from app.routing.gateway_selector import GatewayRegistry

from tests.fakes import RecordingNotifier, RecordingProvider


@pytest.fixture
def stripe_provider():
    return RecordingProvider(PaymentGateway.STRIPE)


@pytest.fixture
def flutterwave_provider():
    return RecordingProvider(PaymentGateway.FLUTTERWAVE, status="success")


@pytest.fixture
def gateways(stripe_provider, flutterwave_provider):
    return GatewayRegistry.of(stripe_provider, flutterwave_provider)


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def bank_body():
    return {
        "amount": 1000,
        "withdrawalMethod": "bank",
        "paymentMethod": "stripe",
        "accountName": "John Doe",
        "accountNumber": "1234567890",
    }


@pytest.fixture
def mpesa_body():
    return {
        "amount": 500,
        "withdrawalMethod": "mpesa",
        "accountName": "Jane Wanjiku",
        "phoneNumber": "0712345678",
    }


@pytest_asyncio.fixture
async def api_client(gateways, notifier):
    """HTTP client against the app with fake gateways and notifier wired in."""
    app.dependency_overrides[get_gateway_registry] = lambda: gateways
    app.dependency_overrides[get_notifier] = lambda: notifier

    transport = httpx.ASGITransport(app=app, raise_app_exceptions=False)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client

    app.dependency_overrides.clear()
