"""ShopFlow FastAPI application.

Multi-domain web server that processes commands synchronously via HTTP.
Each request is wrapped in the correct domain context based on URL prefix.

Usage:
    uvicorn src.app:app --host 0.0.0.0 --port 8000 --reload
"""

from shared.logging import add_context, clear_context, configure_logging

configure_logging()

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# Domains are initialized at module level so uvicorn workers share them.
# PROTEAN_ENV controls which config overlay is applied:
#   - "test"       → event_processing = "sync"  (handlers fire in the UoW)
#   - "production" → event_processing = "async" (handlers fire via Engine)
import structlog  # noqa: E402
from fastapi import FastAPI, Request  # noqa: E402
from fastapi.middleware.cors import CORSMiddleware  # noqa: E402
from fastapi.responses import JSONResponse  # noqa: E402
from fulfillment.domain import fulfillment  # noqa: E402
from notifications.domain import notifications  # noqa: E402
from ordering.domain import ordering  # noqa: E402
from payments.domain import payments  # noqa: E402
from protean.exceptions import ObjectNotFoundError, ValidationError  # noqa: E402
from shopping.domain import shopping  # noqa: E402

shopping.init()
ordering.init()
fulfillment.init()
payments.init()
notifications.init()

logger = structlog.get_logger(__name__)

# ---------------------------------------------------------------------------
# Route-to-domain mapping
# ---------------------------------------------------------------------------
_ROUTE_DOMAIN_MAP = {
    "/carts": shopping,
    "/orders": ordering,
    "/deliveries": fulfillment,
    "/couriers": fulfillment,
    "/payments": payments,
    "/notifications": notifications,
}


def _resolve_domain(path: str):
    """Return the domain for the given request path, or None."""
    for prefix, domain in _ROUTE_DOMAIN_MAP.items():
        if path.startswith(prefix):
            return domain
    return None


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="ShopFlow API",
    description="Order fulfillment — Shopping, Ordering, Fulfillment, Payments & Notifications",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the correct Protean domain context for each request."""
    domain = _resolve_domain(request.url.path)
    if domain is not None:
        add_context(domain=domain.name, path=request.url.path)
        try:
            with domain.domain_context():
                response = await call_next(request)
        finally:
            clear_context()
        return response
    # No domain match — pass through (health check, docs, etc.)
    return await call_next(request)


# ---------------------------------------------------------------------------
# Error handling
# ---------------------------------------------------------------------------
@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    """Domain rule violations are client errors."""
    logger.warning("Request rejected by domain validation", path=request.url.path, errors=exc.messages)
    return JSONResponse(status_code=400, content={"detail": exc.messages})


@app.exception_handler(ObjectNotFoundError)
async def not_found_handler(request: Request, exc: ObjectNotFoundError):
    logger.warning("Requested object not found", path=request.url.path)
    return JSONResponse(status_code=404, content={"detail": "Not found"})


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from fulfillment.api.routes import courier_router, delivery_router  # noqa: E402
from notifications.api.routes import router as notification_router  # noqa: E402
from ordering.api.routes import order_router  # noqa: E402
from payments.api.routes import payment_router  # noqa: E402
from shopping.api.routes import cart_router  # noqa: E402

app.include_router(cart_router)
app.include_router(order_router)
app.include_router(delivery_router)
app.include_router(courier_router)
app.include_router(payment_router)
app.include_router(notification_router)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(
        content={
            "status": "ok",
            "domains": {domain.name: {"name": domain.name} for domain in _ROUTE_DOMAIN_MAP.values()},
        }
    )
