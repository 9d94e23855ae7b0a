"""Order checkout pipeline: turns a cart into a stored, payable order.

Flow (strictly sequential, one step at a time):
    1. Validate the cart
    2. Resolve the coupon discount (only when a coupon id is present)
    3. Calculate the final price
    4. Select the primary payment method
    5. Build the priced order
    6. Persist it through the order store
    7. Redirect the buyer to the payment link

The first failing step ends the run and its error reaches the caller as
raised. Nothing is retried or rolled back: the only persistent effect is
step 6, and the redirect is attempted only after it succeeds.
"""

import inspect

import structlog

from ordering.cart.cart import Cart
from ordering.coupons.port import CouponResolver
from ordering.order.order import StoredOrder
from ordering.pricing.calculator import PriceCalculator
from ordering.store.port import OrderStore
from payments.method.selector import PaymentMethodSelector
from payments.redirect.port import PaymentRedirector

logger = structlog.get_logger(__name__)


class OrderProcessor:
    """Coordinates pricing, persistence and payment redirection for one cart.

    Holds no per-call state, so a single instance can serve concurrent
    checkouts as long as the injected collaborators can.
    """

    def __init__(
        self,
        coupon_resolver: CouponResolver,
        order_store: OrderStore,
        payment_redirector: PaymentRedirector,
        price_calculator: PriceCalculator | None = None,
        payment_method_selector: PaymentMethodSelector | None = None,
    ) -> None:
        self.coupon_resolver = coupon_resolver
        self.order_store = order_store
        self.payment_redirector = payment_redirector
        self.price_calculator = price_calculator or PriceCalculator()
        self.payment_method_selector = payment_method_selector or PaymentMethodSelector()

    async def process(self, cart: Cart) -> StoredOrder:
        log = logger.bind(coupon_id=cart.coupon_id, item_count=len(cart.items))

        self.price_calculator.validate(cart)

        discount = 0.0
        if cart.coupon_id:
            discount = await self.coupon_resolver.resolve(cart.coupon_id)
            log.debug("Coupon resolved", discount=discount)

        total_price = self.price_calculator.calculate(cart, discount)
        payment_method = self.payment_method_selector.primary(total_price)
        priced = cart.priced(total_price, payment_method)
        log.debug("Order priced", discount=discount, total_price=total_price, payment_method=payment_method.value)

        stored = await self.order_store.create(priced)
        log = log.bind(order_id=stored.id)
        log.info(
            "Order created",
            total_price=stored.total_price,
            payment_method=stored.payment_method.value,
        )

        result = self.payment_redirector.redirect(stored)
        if inspect.isawaitable(result):
            await result
        log.info("Payment redirect issued")

        return stored
