"""Runtime settings for the checkout services.

Values come from environment variables; a ``.env`` file in the working
directory is loaded first when present.
"""

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

DEFAULT_COUPON_SERVICE_URL = "https://67eb7353aa794fb3222a4c0e.mockapi.io/coupons"
DEFAULT_ORDER_SERVICE_URL = "https://67eb7353aa794fb3222a4c0e.mockapi.io/order"
DEFAULT_PAYMENT_BASE_URL = "https://payment.example.com/pay"


def get_environment() -> str:
    """Return the active environment name (development, test, staging, production)."""
    return (os.getenv("CARTFLOW_ENV") or os.getenv("ENVIRONMENT") or "development").lower()


@dataclass(frozen=True)
class Settings:
    environment: str
    coupon_service_url: str
    order_service_url: str
    payment_base_url: str
    http_timeout_seconds: float

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            environment=get_environment(),
            coupon_service_url=os.getenv("COUPON_SERVICE_URL", DEFAULT_COUPON_SERVICE_URL).rstrip("/"),
            order_service_url=os.getenv("ORDER_SERVICE_URL", DEFAULT_ORDER_SERVICE_URL).rstrip("/"),
            payment_base_url=os.getenv("PAYMENT_BASE_URL", DEFAULT_PAYMENT_BASE_URL),
            http_timeout_seconds=float(os.getenv("HTTP_TIMEOUT_SECONDS", "10")),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return process-wide settings. Call ``get_settings.cache_clear()`` after changing the environment."""
    load_dotenv()
    return Settings.from_env()
