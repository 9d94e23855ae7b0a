"""Redirector that opens the payment link in the buyer's browser."""

import asyncio
import webbrowser

import structlog

from ordering.order.order import StoredOrder
from payments.redirect.port import PaymentRedirector

logger = structlog.get_logger(__name__)


class BrowserRedirector(PaymentRedirector):
    """Opens the payment link in a new browser tab."""

    def __init__(self, base_url: str | None = None) -> None:
        self.base_url = base_url

    async def redirect(self, order: StoredOrder) -> None:
        url = self.payment_url(order)
        # webbrowser.open blocks until the browser process is spawned
        opened = await asyncio.to_thread(webbrowser.open, url, new=2)
        if not opened:
            logger.warning("No browser available for payment redirect", order_id=order.id, payment_url=url)
