"""Checkout error taxonomy.

Every error carries ``messages``, a mapping of field name to a list of
human-readable messages, so API handlers can render them without knowing
which pipeline step failed. ``str(exc)`` is the plain message.
"""


class CheckoutError(Exception):
    """Base class for all checkout failures."""

    default_field = "checkout"

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.field = field or self.default_field

    @property
    def messages(self) -> dict[str, list[str]]:
        return {self.field: [self.message]}


class ValidationError(CheckoutError):
    """Cart is structurally invalid or its total is not positive."""

    default_field = "items"


class CouponError(CheckoutError):
    """Coupon identifier does not resolve to a valid discount."""

    default_field = "coupon_id"


class PersistenceError(CheckoutError):
    """The order store failed to create the order."""

    default_field = "order"
