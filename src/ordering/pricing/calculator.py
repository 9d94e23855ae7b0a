"""Cart validation and price calculation."""

import math

from ordering.cart.cart import Cart
from ordering.exceptions import ValidationError


class PriceCalculator:
    """Validates cart contents and computes the total net of discount.

    Both operations are pure: they read the cart and never modify it.
    """

    def validate(self, cart: Cart) -> None:
        if not cart.items:
            raise ValidationError("items required")

        if not all(item.unit_price > 0 and item.quantity > 0 for item in cart.items):
            raise ValidationError("items invalid")

    def calculate(self, cart: Cart, discount: float = 0) -> float:
        """Return ``max(0, total - discount)``.

        The positivity guard runs on the pre-discount total, so a cart whose
        items sum to zero is rejected even when the discount would have
        clamped the result to zero anyway.
        """
        total = sum(item.subtotal for item in cart.items)
        if total <= 0:
            raise ValidationError("total must be positive", field="total_price")

        if not math.isfinite(discount) or discount < 0:
            raise ValidationError("discount invalid", field="discount")

        return max(0.0, total - discount)
