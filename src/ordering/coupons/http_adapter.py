"""Coupon resolver backed by the remote coupon service."""

import math
from urllib.parse import quote

import httpx
import structlog

from ordering.coupons.port import CouponResolver
from ordering.exceptions import CouponError

logger = structlog.get_logger(__name__)


class HttpCouponResolver(CouponResolver):
    """Looks coupons up with ``GET {base_url}/{coupon_id}``.

    The coupon id is escaped as a single path segment. A 404, an empty body
    or a record without a finite, non-negative ``discount`` means the coupon
    does not exist. Transport failures and other error statuses are reported
    as a failed lookup.
    """

    def __init__(self, base_url: str, timeout: float = 10.0, client: httpx.AsyncClient | None = None) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = client

    async def resolve(self, coupon_id: str) -> float:
        url = f"{self.base_url}/{quote(coupon_id, safe='')}"
        try:
            if self._client is not None:
                response = await self._client.get(url, timeout=self.timeout)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await client.get(url)
        except httpx.HTTPError as exc:
            logger.warning("Coupon lookup failed", coupon_id=coupon_id, error=str(exc))
            raise CouponError("coupon lookup failed") from exc

        if response.status_code == 404:
            raise CouponError("invalid coupon")
        if response.is_error:
            logger.warning("Coupon service returned an error", coupon_id=coupon_id, status=response.status_code)
            raise CouponError("coupon lookup failed")

        try:
            coupon = response.json()
        except ValueError:
            coupon = None

        discount = coupon.get("discount") if isinstance(coupon, dict) else None
        if isinstance(discount, bool) or not isinstance(discount, int | float):
            raise CouponError("invalid coupon")
        if not math.isfinite(discount) or discount < 0:
            raise CouponError("invalid coupon")

        return float(discount)
