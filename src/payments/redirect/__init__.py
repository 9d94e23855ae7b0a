"""Payment redirector factory.

Provides get_redirector() / set_redirector() to swap implementations:
- LinkRedirector, which returns the link to the caller (default, a fresh
  instance per call)
- BrowserRedirector, which opens the link locally
"""

from payments.redirect.link_adapter import LinkRedirector
from payments.redirect.port import PaymentRedirector, build_payment_url

__all__ = ["PaymentRedirector", "build_payment_url", "get_redirector", "reset_redirector", "set_redirector"]

_current_redirector: PaymentRedirector | None = None


def get_redirector() -> PaymentRedirector:
    """Return the overriding redirector, or a new LinkRedirector."""
    if _current_redirector is None:
        return LinkRedirector()
    return _current_redirector


def set_redirector(redirector: PaymentRedirector) -> None:
    """Override the active redirector (useful for tests)."""
    global _current_redirector
    _current_redirector = redirector


def reset_redirector() -> None:
    """Reset to default redirector."""
    global _current_redirector
    _current_redirector = None
