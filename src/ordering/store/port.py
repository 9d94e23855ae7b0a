"""Order store port (abstract interface).

Orders are persisted by a remote service; this contract is all the checkout
pipeline knows about it.
"""

from abc import ABC, abstractmethod

from ordering.order.order import PricedOrder, StoredOrder


class OrderStore(ABC):
    """Abstract order persistence."""

    @abstractmethod
    async def create(self, order: PricedOrder) -> StoredOrder:
        """Persist ``order`` and return it with a unique identifier.

        Raises ``PersistenceError`` when the order could not be stored.
        """
        ...
