"""Health check endpoint."""

from fastapi import APIRouter

router = APIRouter()


@router.get("/health")
def health_check() -> dict[str, str]:
    """Return application and game engine status."""
    from dragon_quest.main import game_engine

    if game_engine is None:
        return {"status": "ok", "engine": "not_initialized"}
    return {"status": "ok", "engine": "ready"}
