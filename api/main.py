"""
Order Management API - Main FastAPI Application.

REST layer over the Order aggregate use cases (Clean Architecture).
"""
from contextlib import asynccontextmanager
import logging
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from api.errors import register_exception_handlers
from api.routes import health, orders
from core.infrastructure.logging import configure_logging
from core.settings import get_app_settings


configure_logging(get_app_settings().server.log_level)
logger = logging.getLogger(__name__)


# =============================================================================
# LIFESPAN
# =============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Order Management API starting up...")
    logger.info("Swagger UI available at: /docs")
    yield
    logger.info("Order Management API shutting down...")


# =============================================================================
# CREATE FASTAPI APP
# =============================================================================

app = FastAPI(
    title="Order Management API",
    description="""
    Order management with Domain-Driven Design.

    Features:
    - Create orders in a fixed currency
    - Add catalog-priced items (unique SKUs, up to 100 per order)
    - Order totals with cent-exact Decimal arithmetic
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)


app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)


# =============================================================================
# REQUEST LOGGING MIDDLEWARE
# =============================================================================

@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all requests with timing."""
    start_time = time.time()

    logger.info(f"→ {request.method} {request.url.path}")

    response = await call_next(request)

    duration = time.time() - start_time
    logger.info(
        f"← {request.method} {request.url.path} "
        f"[{response.status_code}] ({duration:.3f}s)"
    )

    return response


register_exception_handlers(app)


# =============================================================================
# INCLUDE ROUTERS
# =============================================================================

app.include_router(
    health.router,
    tags=["Health"]
)

app.include_router(
    orders.router,
    prefix="/api/v1/orders",
    tags=["Orders"]
)


@app.get("/", tags=["Root"])
async def root():
    """API root endpoint."""
    return {
        "message": "Order Management API",
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/health"
    }
