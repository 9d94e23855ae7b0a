"""Order value objects produced by the checkout pipeline.

A ``PricedOrder`` is a cart with its final price and primary payment method
locked in. A ``StoredOrder`` is a priced order the order store has accepted
and assigned an identifier to. Neither changes after creation.
"""

from pydantic import Field

from ordering.cart.cart import Cart
from payments.method.selector import PaymentMethod


class PricedOrder(Cart):
    total_price: float = Field(ge=0)
    payment_method: PaymentMethod

    def stored(self, order_id: str) -> "StoredOrder":
        return StoredOrder(
            id=order_id,
            items=self.items,
            coupon_id=self.coupon_id,
            total_price=self.total_price,
            payment_method=self.payment_method,
        )

    def to_payload(self) -> dict:
        """JSON-ready body in the wire format (camelCase keys, enum values)."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class StoredOrder(PricedOrder):
    id: str = Field(min_length=1)
