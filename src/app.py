"""cartflow FastAPI application.

Exposes the checkout pipeline over HTTP. Collaborators (coupon service,
order store, payment redirector) come from the factories in
``ordering.coupons``, ``ordering.store`` and ``payments.redirect``.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from ordering.api import checkout_error_handler, checkout_router
from ordering.exceptions import CheckoutError
from shared.config import get_settings
from shared.logging import configure_logging

configure_logging()

# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="cartflow API",
    description="Order checkout with pricing, persistence and payment redirection",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(CheckoutError, checkout_error_handler)

# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
app.include_router(checkout_router)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    settings = get_settings()
    return JSONResponse(
        content={
            "status": "ok",
            "environment": settings.environment,
        }
    )
