"""In-memory coupon resolver for development and testing."""

from ordering.coupons.port import CouponResolver
from ordering.exceptions import CouponError


class FakeCouponResolver(CouponResolver):
    """Resolves coupons from a fixed ``{coupon_id: discount}`` table."""

    def __init__(self, coupons: dict[str, float] | None = None) -> None:
        self.coupons: dict[str, float] = dict(coupons or {})
        self.calls: list[str] = []

    def add(self, coupon_id: str, discount: float) -> None:
        self.coupons[coupon_id] = discount

    async def resolve(self, coupon_id: str) -> float:
        self.calls.append(coupon_id)
        if coupon_id not in self.coupons:
            raise CouponError("invalid coupon")
        return self.coupons[coupon_id]
