"""FastAPI application entrypoint — lifespan, routers, middleware."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from redis.asyncio import Redis

from app.config import get_settings
from app.middleware.logging import RequestLoggingMiddleware, configure_structured_logging
from app.routes import crops, diagnostics, insights, reference, session
from app.store import create_redis

logger = structlog.get_logger("agrisynch")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application startup / shutdown lifecycle.

    Startup:
      1. Initialize structured logging
      2. Connect to Redis (the state store backend)

    Shutdown:
      1. Close Redis connection pool
    """
    configure_structured_logging()
    settings = get_settings()
    logger.info(
        "agrisynch_starting",
        log_level=settings.log_level,
        state_namespace=settings.state_namespace,
        gemini_configured=bool(settings.gemini_api_key),
    )

    redis: Redis | None = None
    try:
        redis = create_redis()
        await redis.ping()
        app.state.redis = redis
    except Exception as exc:
        logger.exception("startup_failure", error=str(exc))
        raise

    yield

    logger.info("agrisynch_shutting_down")
    if redis is not None:
        await redis.aclose()


app = FastAPI(
    title="AgriSynch API",
    description=(
        "Farmer advisory API — tracks registered crop fields, derives "
        "rule-based agronomic insights from growth stage, soil and a short-range "
        "forecast, and forwards symptom reports to a generative-AI diagnostic expert."
    ),
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# ── Middleware ──────────────────────────────────────────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestLoggingMiddleware)


# ── Health check ────────────────────────────────────────────────────────────
@app.get("/health", tags=["system"])
async def health_check() -> dict[str, str]:
    """Basic health check — verifies the API process is alive."""
    return {
        "status": "ok",
        "service": "agrisynch",
        "version": "0.1.0",
    }


# ── Router registration ────────────────────────────────────────────────────
app.include_router(session.router, prefix="/api/v1")
app.include_router(crops.router, prefix="/api/v1")
app.include_router(insights.router, prefix="/api/v1")
app.include_router(reference.router, prefix="/api/v1")
app.include_router(diagnostics.router, prefix="/api/v1")
