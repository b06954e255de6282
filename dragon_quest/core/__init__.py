"""Dragon's Quest Core Engine"""
__version__ = "1.0.0"

from dragon_quest.core.locations import Location
from dragon_quest.core.player import GameStatus, PlayerState
from dragon_quest.core.combat import CombatOutcome, CombatReport, resolve_encounter
from dragon_quest.core.navigator import Navigator, TravelResult
from dragon_quest.core.errors import GameError
from dragon_quest.core.actions import (
    ActionResult,
    CheckStatus,
    GameAction,
    Move,
    Purchase,
    Quit,
    ShowHelp,
    UseItem,
)
from dragon_quest.core.engine import GameEngine

__all__ = [
    "Location",
    "GameStatus",
    "PlayerState",
    "CombatOutcome",
    "CombatReport",
    "resolve_encounter",
    "Navigator",
    "TravelResult",
    "GameError",
    "ActionResult",
    "CheckStatus",
    "GameAction",
    "Move",
    "Purchase",
    "Quit",
    "ShowHelp",
    "UseItem",
    "GameEngine",
]
