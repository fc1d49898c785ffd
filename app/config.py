"""Application configuration via environment variables."""

from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    log_level: str = "INFO"
    environment: str = "development"
    currency: str = "KES"

    stripe_secret_key: str = ""
    stripe_api_base: str = "https://api.stripe.com"

    flutterwave_secret_key: str = ""
    flutterwave_api_base: str = "https://api.flutterwave.com"
    flutterwave_default_bank_code: str = "999999"  # Flutterwave sandbox bank

    pusher_app_id: Optional[str] = None
    pusher_key: Optional[str] = None
    pusher_secret: Optional[str] = None
    pusher_cluster: str = "mt1"
    pusher_channel: str = "withdrawal-channel"
    pusher_event: str = "withdrawal-event"

    provider_timeout_seconds: float = 15.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @property
    def pusher_configured(self) -> bool:
        return bool(self.pusher_app_id and self.pusher_key and self.pusher_secret)


settings = Settings()
