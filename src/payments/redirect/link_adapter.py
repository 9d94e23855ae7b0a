"""Redirector that hands the payment link back to the caller.

Used behind the HTTP API: the server cannot open a browser for the buyer,
so it keeps the link it issued and the client follows it. One instance
serves one checkout.
"""

from ordering.order.order import StoredOrder
from payments.redirect.port import PaymentRedirector


class LinkRedirector(PaymentRedirector):
    def __init__(self, base_url: str | None = None) -> None:
        self.base_url = base_url
        self.link: str | None = None

    def redirect(self, order: StoredOrder) -> None:
        self.link = self.payment_url(order)
