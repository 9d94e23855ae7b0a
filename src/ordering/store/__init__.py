"""Order store factory.

Provides get_order_store() / set_order_store() to swap implementations:
- HttpOrderStore against the configured order service (default)
- InMemoryOrderStore for development and testing
"""

from shared.config import get_settings

from ordering.store.http_adapter import HttpOrderStore
from ordering.store.port import OrderStore

_current_store: OrderStore | None = None


def get_order_store() -> OrderStore:
    """Return the current order store. Defaults to the HTTP adapter."""
    global _current_store
    if _current_store is None:
        settings = get_settings()
        _current_store = HttpOrderStore(
            base_url=settings.order_service_url,
            timeout=settings.http_timeout_seconds,
        )
    return _current_store


def set_order_store(store: OrderStore) -> None:
    """Override the active order store (useful for tests)."""
    global _current_store
    _current_store = store


def reset_order_store() -> None:
    """Reset to default store."""
    global _current_store
    _current_store = None
