"""Liveness endpoints."""

from datetime import datetime, timezone

from fastapi import APIRouter

from app.config import settings

router = APIRouter(tags=["health"])

SERVICE_NAME = "Money Withdrawal System"
SERVICE_VERSION = "1.0.0"


@router.get("/health")
async def health():
    return {"status": "healthy", "service": SERVICE_NAME, "version": SERVICE_VERSION}


@router.get("/test")
async def smoke_test():
    return {
        "message": "Backend is running successfully!",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "env": settings.environment,
        "paymentGateways": ["Stripe", "Flutterwave", "Pusher"],
    }
