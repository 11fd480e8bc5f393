"""
Seed Haven - Application Entry Point
=======================================
FastAPI app initialization and router registration.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from config import settings
from config.database import Base, engine
from common.exceptions import SeedHavenError

logger = logging.getLogger("seedhaven.app")


# ==========================================
# Exception handler: business errors → 400
# ==========================================

async def business_exception_handler(request: Request, exc: SeedHavenError):
    """Business errors a route did not map itself."""
    logger.warning(f"{request.method} {request.url.path}: {exc.message}")
    return JSONResponse({"detail": exc.message}, status_code=400)


# ==========================================
# Import ALL models so Base can see them
# ==========================================
from modules.storage.models import StorageEntry  # noqa: F401

# ==========================================
# Import routers
# ==========================================
from modules.auth.routes import router as auth_router
from modules.catalog.routes import router as catalog_router
from modules.cart.routes import router as cart_router
from modules.order.routes import router as order_router
from modules.customer.routes import router as customer_router


@asynccontextmanager
async def lifespan(app):
    # Auto-create any missing tables (safe for existing tables)
    Base.metadata.create_all(bind=engine)
    logger.info("Storage ready")
    yield


# ==========================================
# Create App
# ==========================================
app = FastAPI(
    title="Seed Haven",
    description="Seed storefront: catalog, cart, checkout and accounts",
    version="1.0.0",
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url=None,
    lifespan=lifespan,
)

app.add_exception_handler(SeedHavenError, business_exception_handler)

app.include_router(auth_router)
app.include_router(catalog_router)
app.include_router(cart_router)
app.include_router(order_router)
app.include_router(customer_router)


@app.get("/health")
async def health():
    return {"status": "ok"}
