"""Ordering domain API package."""

from ordering.api.routes import checkout_error_handler, checkout_router

__all__ = ["checkout_router", "checkout_error_handler"]
