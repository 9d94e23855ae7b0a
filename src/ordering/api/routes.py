"""FastAPI routes for the Ordering domain: checkout."""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from ordering.api.schemas import (
    CheckoutRequest,
    CheckoutResponse,
    ErrorResponse,
    PaymentMethodsResponse,
)
from ordering.cart.cart import Cart, CartItem
from ordering.checkout.processor import OrderProcessor
from ordering.coupons import get_coupon_resolver
from ordering.exceptions import CheckoutError, CouponError, PersistenceError, ValidationError
from ordering.store import get_order_store
from payments.method.selector import PaymentMethodSelector
from payments.redirect import get_redirector

_ERROR_STATUS = {
    ValidationError: 422,
    CouponError: 400,
    PersistenceError: 502,
}

# ---------------------------------------------------------------------------
# Checkout Router
# ---------------------------------------------------------------------------
checkout_router = APIRouter(prefix="/checkout", tags=["checkout"])


@checkout_router.post(
    "",
    status_code=201,
    response_model=CheckoutResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid coupon"},
        422: {"model": ErrorResponse, "description": "Invalid cart"},
        502: {"model": ErrorResponse, "description": "Order service failure"},
    },
)
async def checkout(body: CheckoutRequest) -> CheckoutResponse:
    """Price, persist and start payment for a cart."""
    cart = Cart(
        items=tuple(
            CartItem(product_id=item.product_id, unit_price=item.unit_price, quantity=item.quantity)
            for item in body.items
        ),
        coupon_id=body.coupon_id,
    )
    redirector = get_redirector()
    processor = OrderProcessor(
        coupon_resolver=get_coupon_resolver(),
        order_store=get_order_store(),
        payment_redirector=redirector,
    )
    stored = await processor.process(cart)
    return CheckoutResponse(
        order_id=stored.id,
        total_price=stored.total_price,
        payment_method=stored.payment_method.value,
        payment_url=redirector.payment_url(stored),
    )


@checkout_router.get("/payment-methods", response_model=PaymentMethodsResponse)
async def payment_methods(total_price: float) -> PaymentMethodsResponse:
    """List the payment methods eligible for a total."""
    methods = PaymentMethodSelector().select(total_price)
    return PaymentMethodsResponse(
        total_price=total_price,
        payment_methods=[method.value for method in methods],
    )


async def checkout_error_handler(request: Request, exc: CheckoutError) -> JSONResponse:
    """Render checkout failures as ``{"error": ..., "messages": {...}}``."""
    status_code = next(
        (code for error_type, code in _ERROR_STATUS.items() if isinstance(exc, error_type)),
        400,
    )
    return JSONResponse(
        status_code=status_code,
        content={"error": type(exc).__name__, "messages": exc.messages},
    )
