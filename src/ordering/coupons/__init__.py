"""Coupon resolver factory.

Provides get_coupon_resolver() / set_coupon_resolver() to swap implementations:
- HttpCouponResolver against the configured coupon service (default)
- FakeCouponResolver for development and testing
"""

from shared.config import get_settings

from ordering.coupons.http_adapter import HttpCouponResolver
from ordering.coupons.port import CouponResolver

_current_resolver: CouponResolver | None = None


def get_coupon_resolver() -> CouponResolver:
    """Return the current coupon resolver. Defaults to the HTTP adapter."""
    global _current_resolver
    if _current_resolver is None:
        settings = get_settings()
        _current_resolver = HttpCouponResolver(
            base_url=settings.coupon_service_url,
            timeout=settings.http_timeout_seconds,
        )
    return _current_resolver


def set_coupon_resolver(resolver: CouponResolver) -> None:
    """Override the active coupon resolver (useful for tests)."""
    global _current_resolver
    _current_resolver = resolver


def reset_coupon_resolver() -> None:
    """Reset to default resolver."""
    global _current_resolver
    _current_resolver = None
