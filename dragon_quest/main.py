"""FastAPI application entrypoint."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

from dragon_quest.api.game import router as game_router
from dragon_quest.api.health import router as health_router
from dragon_quest.config import settings
from dragon_quest.core.engine import GameEngine
from dragon_quest.core.logging import get_logger, setup_logging

setup_logging(settings.LOG_LEVEL)
logger = get_logger(__name__)

# 글로벌 게임 엔진 인스턴스
game_engine: GameEngine | None = None


def get_game_engine() -> GameEngine:
    """게임 엔진 인스턴스 반환 (의존성 주입용)"""
    if game_engine is None:
        raise RuntimeError("Game engine not initialized")
    return game_engine


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup and shutdown events."""
    global game_engine

    logger.info("Initializing game engine...")
    game_engine = GameEngine()
    logger.info("Game engine initialized.")

    yield

    # 종료 시 정리 (세션은 메모리에만 존재)
    logger.info("Shutting down... %d sessions discarded", len(game_engine.players))
    game_engine = None


app = FastAPI(title=settings.GAME_TITLE, debug=settings.DEBUG, lifespan=lifespan)

app.include_router(health_router)
app.include_router(game_router)
