"""Payment method selection by order total.

Each payment method has an upper bound on the total it may settle. Bounds
are inclusive: an order of exactly 300000 can still be paid with AUPAY.
Totals of zero or below are not rejected here; they fall under every bound,
so all methods are eligible. Validating totals is the price calculator's
job.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from ordering.exceptions import ValidationError

AUPAY_MAX_TOTAL = 300000
PAYPAY_MAX_TOTAL = 500000


class PaymentMethod(Enum):
    CREDIT = "CREDIT"
    PAYPAY = "PAYPAY"
    AUPAY = "AUPAY"


@dataclass(frozen=True)
class PaymentMethodRule:
    """Eligibility rule for one payment method. ``max_total=None`` means unbounded."""

    method: PaymentMethod
    max_total: float | None = None

    def is_applicable(self, total_price: float) -> bool:
        return self.max_total is None or total_price <= self.max_total


DEFAULT_RULES: tuple[PaymentMethodRule, ...] = (
    PaymentMethodRule(PaymentMethod.CREDIT),
    PaymentMethodRule(PaymentMethod.PAYPAY, max_total=PAYPAY_MAX_TOTAL),
    PaymentMethodRule(PaymentMethod.AUPAY, max_total=AUPAY_MAX_TOTAL),
)


class PaymentMethodSelector:
    """Returns the ordered list of payment methods eligible for a total."""

    def __init__(self, rules: Sequence[PaymentMethodRule] = DEFAULT_RULES) -> None:
        self.rules = tuple(rules)

    def select(self, total_price: float) -> list[PaymentMethod]:
        return [rule.method for rule in self.rules if rule.is_applicable(total_price)]

    def primary(self, total_price: float) -> PaymentMethod:
        """The method recorded on the order: the first eligible one."""
        methods = self.select(total_price)
        if not methods:
            raise ValidationError("no eligible payment method", field="payment_method")
        return methods[0]
