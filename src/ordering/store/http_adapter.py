"""Order store backed by the remote order service."""

import httpx
import structlog

from ordering.exceptions import PersistenceError
from ordering.order.order import PricedOrder, StoredOrder
from ordering.store.port import OrderStore

logger = structlog.get_logger(__name__)


class HttpOrderStore(OrderStore):
    """Creates orders with ``POST {base_url}`` and a camelCase JSON body.

    The service echoes the created record; only its ``id`` is taken; the
    rest of the stored order is the priced order that was sent.
    """

    def __init__(self, base_url: str, timeout: float = 10.0, client: httpx.AsyncClient | None = None) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = client

    async def create(self, order: PricedOrder) -> StoredOrder:
        payload = order.to_payload()
        try:
            if self._client is not None:
                response = await self._client.post(self.base_url, json=payload, timeout=self.timeout)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    response = await client.post(self.base_url, json=payload)
            response.raise_for_status()
            body = response.json()
        except httpx.HTTPError as exc:
            logger.warning("Order creation failed", error=str(exc))
            raise PersistenceError("order could not be created") from exc
        except ValueError as exc:
            raise PersistenceError("order service returned an invalid response") from exc

        order_id = body.get("id") if isinstance(body, dict) else None
        if order_id is None or str(order_id) == "":
            raise PersistenceError("order service returned no order id")

        return order.stored(str(order_id))
