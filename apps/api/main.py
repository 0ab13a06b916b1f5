import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from apps.api.middlewares.metrics import MetricsMiddleware
from apps.api.routers import health, telegram
from apps.bot.bot import on_shutdown, on_startup
from core.config import settings

logging.basicConfig(level=settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    # Startup
    await on_startup()
    yield
    # Shutdown
    await on_shutdown()


app = FastAPI(
    title="GhostChats API",
    description="Webhook endpoint for the anonymous stranger chat bot",
    version="0.1.0",
    lifespan=lifespan,
)

# Middlewares
app.add_middleware(MetricsMiddleware)

# Include routers
app.include_router(health.router, prefix="/health", tags=["health"])
app.include_router(telegram.router, prefix="/telegram", tags=["telegram"])


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {"status": "ok", "service": "ghostchats"}


@app.get("/metrics")
async def metrics() -> Response:
    """Prometheus metrics endpoint."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("apps.api.main:app", host="0.0.0.0", port=settings.api_port, reload=settings.is_development)
