import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI

from src.api.deps import get_site_config

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    # Load site config on startup (fail-fast)
    try:
        config = get_site_config()
        logger.info(f"Serving {config.business.name} ({config.business.url})")
    except Exception as e:
        logger.critical(f"Site config load failed: {e}")
        sys.exit(1)

    yield
    # Shutdown cleanup if needed


app = FastAPI(
    title="Practice Site",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# --- Routers ---
from src.api.routes import public, public_ssr  # noqa: E402

app.include_router(public.router, prefix="/api/public", tags=["Public"])
app.include_router(public_ssr.router, prefix="", tags=["SSR"])


@app.get("/health")
def health_check() -> dict[str, Any]:
    """Health check endpoint."""
    return {"status": "ok", "service": "site"}
