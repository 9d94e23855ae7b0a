"""Pydantic request/response schemas for the Checkout API.

These are external contracts (anti-corruption layer), separate from
the internal cart and order value objects.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CheckoutItemSchema(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, validate_by_name=True, validate_by_alias=True)

    product_id: str
    unit_price: float
    quantity: int


class CheckoutRequest(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        validate_by_name=True,
        validate_by_alias=True,
        json_schema_extra={
            "examples": [
                {
                    "items": [{"productId": "prod-001", "unitPrice": 100, "quantity": 2}],
                    "couponId": "123",
                }
            ]
        },
    )

    items: list[CheckoutItemSchema] = Field(default_factory=list)
    coupon_id: str | None = None


class CheckoutResponse(BaseModel):
    order_id: str
    total_price: float
    payment_method: str
    payment_url: str


class PaymentMethodsResponse(BaseModel):
    total_price: float
    payment_methods: list[str]


class ErrorResponse(BaseModel):
    error: str
    messages: dict[str, list[str]]
