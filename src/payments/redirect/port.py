"""Payment redirector port and payment link construction.

A redirector sends the buyer to the payment page for a stored order. It
fires the redirect and returns; it must not wait on the buyer.
Implementations may be plain functions or coroutines; the checkout pipeline
awaits the result only when it is awaitable.
"""

from abc import ABC, abstractmethod
from collections.abc import Awaitable
from urllib.parse import urlencode

from ordering.order.order import StoredOrder
from shared.config import get_settings


def build_payment_url(order_id: str, base_url: str | None = None) -> str:
    """Return ``{base_url}?orderId=<order_id>``."""
    base = base_url if base_url is not None else get_settings().payment_base_url
    separator = "&" if "?" in base else "?"
    return f"{base}{separator}{urlencode({'orderId': order_id})}"


class PaymentRedirector(ABC):
    """Abstract redirect to the payment endpoint of a stored order."""

    base_url: str | None = None

    def payment_url(self, order: StoredOrder) -> str:
        """The link this redirector sends the buyer to for ``order``."""
        return build_payment_url(order.id, self.base_url)

    @abstractmethod
    def redirect(self, order: StoredOrder) -> Awaitable[None] | None:
        """Initiate the redirect for ``order``."""
        ...
