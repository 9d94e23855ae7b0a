"""Coupon resolver port (abstract interface).

The checkout pipeline only needs one thing from the coupon service: the
discount a coupon is worth. Adapters turn a lookup miss into
``CouponError("invalid coupon")``.
"""

from abc import ABC, abstractmethod


class CouponResolver(ABC):
    """Abstract coupon lookup."""

    @abstractmethod
    async def resolve(self, coupon_id: str) -> float:
        """Return the non-negative discount for ``coupon_id``."""
        ...
