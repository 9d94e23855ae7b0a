"""Cart value objects: the caller-supplied, not yet priced order.

Carts are immutable. Range checks on prices and quantities are deliberately
left to ``PriceCalculator.validate`` so that a malformed cart can still be
constructed and reported with checkout error messages.
"""

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

if TYPE_CHECKING:
    from ordering.order.order import PricedOrder
    from payments.method.selector import PaymentMethod

VALUE_OBJECT_CONFIG = ConfigDict(
    frozen=True,
    alias_generator=to_camel,
    validate_by_name=True,
    validate_by_alias=True,
)


class CartItem(BaseModel):
    model_config = VALUE_OBJECT_CONFIG

    product_id: str
    unit_price: float
    quantity: int

    @property
    def subtotal(self) -> float:
        return self.unit_price * self.quantity


class Cart(BaseModel):
    """Items selected for checkout plus an optional coupon code."""

    model_config = VALUE_OBJECT_CONFIG

    items: tuple[CartItem, ...] = ()
    coupon_id: str | None = None

    def priced(self, total_price: float, payment_method: "PaymentMethod") -> "PricedOrder":
        """Derive the priced order; the cart itself is left untouched."""
        from ordering.order.order import PricedOrder

        return PricedOrder(
            items=self.items,
            coupon_id=self.coupon_id,
            total_price=total_price,
            payment_method=payment_method,
        )
