"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient

from dragon_quest.api.game import get_engine
from dragon_quest.core.engine import GameEngine
from dragon_quest.core.item.catalog import build_default_registry
from dragon_quest.core.item.registry import TemplateRegistry
from dragon_quest.core.player import PlayerState, new_player
from dragon_quest.main import app


@pytest.fixture()
def registry() -> TemplateRegistry:
    """Default five-item catalog."""
    return build_default_registry()


@pytest.fixture()
def player() -> PlayerState:
    """Fresh player at the starting state (health 100, gold 20, village)."""
    return new_player("hero", "Aria")


@pytest.fixture()
def engine() -> GameEngine:
    """Fresh GameEngine instance."""
    return GameEngine()


@pytest.fixture()
def client(engine: GameEngine) -> TestClient:
    """FastAPI TestClient wired to the fresh engine fixture."""
    app.dependency_overrides[get_engine] = lambda: engine
    yield TestClient(app)
    app.dependency_overrides.clear()
