"""Configurable in-memory order store for development and testing.

Works like the remote service without any network calls, and can be told to
fail so error paths are easy to exercise.
"""

from uuid import uuid4

from ordering.exceptions import PersistenceError
from ordering.order.order import PricedOrder, StoredOrder
from ordering.store.port import OrderStore


class InMemoryOrderStore(OrderStore):
    """Keeps created orders in a dict keyed by a generated id."""

    def __init__(self) -> None:
        self.should_succeed: bool = True
        self.failure_reason: str = "order store unavailable"
        self.orders: dict[str, StoredOrder] = {}
        self.calls: list[PricedOrder] = []

    def configure(self, should_succeed: bool, failure_reason: str = "order store unavailable") -> None:
        """Configure store behavior at runtime."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    async def create(self, order: PricedOrder) -> StoredOrder:
        self.calls.append(order)
        if not self.should_succeed:
            raise PersistenceError(self.failure_reason)

        stored = order.stored(f"ord_{uuid4().hex[:12]}")
        self.orders[stored.id] = stored
        return stored

    def get(self, order_id: str) -> StoredOrder | None:
        return self.orders.get(order_id)
