"""Health check endpoints."""

from fastapi import APIRouter

from apps.bot.bot import engine

router = APIRouter()


@router.get("/")
async def health_check() -> dict[str, str | int]:
    """Basic health check with in-memory queue and session counts."""
    return {"status": "healthy", **engine.store.snapshot()}
