"""
FastAPI dependency providers.

Long-lived collaborators (the shared httpx client, the Stripe client and the
notifier) are built once in the application lifespan and kept on
``app.state``; these functions hand them to route handlers. Tests replace
them via ``dependency_overrides``.
"""

import httpx
from fastapi import Request

from app.accounts.balance import BalanceService, DemoBalanceService
from app.config import settings
from app.notifications.base import Notifier
from app.notifications.pusher_notifier import LoggingNotifier, PusherNotifier, build_pusher_client
from app.providers.flutterwave_provider import FlutterwaveProvider
from app.providers.stripe_provider import StripeProvider, build_stripe_client
from app.routing.gateway_selector import GatewayRegistry


def build_http_client() -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=httpx.Timeout(settings.provider_timeout_seconds))


def build_notifier() -> Notifier:
    if settings.pusher_configured:
        return PusherNotifier(build_pusher_client())
    return LoggingNotifier()


def build_gateway_registry(client: httpx.AsyncClient) -> GatewayRegistry:
    return GatewayRegistry.of(StripeProvider(build_stripe_client()), FlutterwaveProvider(client))


def get_gateway_registry(request: Request) -> GatewayRegistry:
    return request.app.state.gateways


def get_notifier(request: Request) -> Notifier:
    return request.app.state.notifier


def get_balance_service() -> BalanceService:
    return DemoBalanceService()
