"""
Dragon's Quest Core Engine - Main Entry Point
=============================================
코어 통합 모듈

플레이어 세션을 보관하고, 셸이 넘긴 행동을 처리한 뒤
매 행동 후 종료 조건(체력 0 / 드래곤 처치)을 검사합니다.
"""

import threading
from typing import Any, Optional

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
from dragon_quest.core.errors import GameError
from dragon_quest.core.event_bus import EventBus, GameEvent
from dragon_quest.core.event_types import EventTypes
from dragon_quest.core.item.catalog import build_default_registry
from dragon_quest.core.item.models import ItemCategory
from dragon_quest.core.item.registry import TemplateRegistry
from dragon_quest.core.item.trade import purchase, sells
from dragon_quest.core.logging import get_logger
from dragon_quest.core.menu import MenuOption, build_menu, help_lines, resolve_choice
from dragon_quest.core.navigator import Navigator
from dragon_quest.core.player import GameStatus, PlayerState, new_player

logger = get_logger(__name__)

EVENT_SOURCE = "engine"


def _result(
    success: bool,
    action_type: str,
    lines: list[str],
    error: Optional[GameError] = None,
    data: Optional[dict] = None,
) -> ActionResult:
    return ActionResult(
        success=success,
        action_type=action_type,
        message=lines[0] if lines else "",
        lines=lines,
        error=error,
        data=data,
    )


class GameEngine:
    """
    Dragon's Quest 메인 엔진

    모든 코어 규칙은 이 엔진을 통해서만 실행됩니다.
    플레이어별 세션은 서로 독립적이며 프로세스 메모리에만 존재합니다.
    """

    VERSION = "1.0.0"

    def __init__(
        self,
        registry: Optional[TemplateRegistry] = None,
        event_bus: Optional[EventBus] = None,
    ):
        """
        엔진 초기화

        Args:
            registry: 아이템 Template 저장소 (기본: 5종 카탈로그)
            event_bus: 도메인 이벤트 버스 (기본: 새 버스)
        """
        logger.info("Initializing v%s...", self.VERSION)

        self.registry = registry if registry is not None else build_default_registry()
        self.event_bus = event_bus if event_bus is not None else EventBus()
        self.navigator = Navigator()

        # 플레이어 세션
        self.players: dict[str, PlayerState] = {}

        # 버스의 턴 로그는 엔진에 하나뿐. 턴은 한 번에 하나씩 처리한다
        self._turn_lock = threading.Lock()

        logger.info("Ready. %d item templates loaded.", self.registry.count())

    # === 플레이어 관리 ===

    def register_player(self, player_id: str, name: Optional[str] = None) -> PlayerState:
        """새 플레이어 등록. 이미 있으면 기존 세션 반환."""
        with self._turn_lock:
            if player_id in self.players:
                return self.players[player_id]

            player = new_player(player_id, name)
            self.players[player_id] = player
            self._emit(EventTypes.PLAYER_REGISTERED, {"player_id": player_id})
            self.event_bus.reset_chain()

        logger.info("Player registered: %s (%s)", player_id, player.name)
        return player

    def get_player(self, player_id: str) -> Optional[PlayerState]:
        """플레이어 상태 조회"""
        return self.players.get(player_id)

    def get_menu(self, player_id: str) -> list[MenuOption]:
        """현재 위치의 번호 메뉴. 미등록 플레이어는 빈 리스트."""
        player = self.get_player(player_id)
        if not player:
            return []
        return build_menu(player.location, self.registry)

    # === 행동 처리 ===

    def perform(self, player_id: str, action: GameAction) -> ActionResult:
        """행동 1회 처리 + 종료 조건 검사"""
        with self._turn_lock:
            return self._perform(player_id, action)

    def choose(
        self, player_id: str, choice: int, item_index: Optional[int] = None
    ) -> ActionResult:
        """메뉴 번호로 행동 처리. "use item" 번호는 item_index(0-based)를 함께 받는다."""
        with self._turn_lock:
            return self._choose(player_id, choice, item_index)

    def _perform(self, player_id: str, action: GameAction) -> ActionResult:
        action_type = action.action_type.value
        player = self.get_player(player_id)
        if not player:
            return _result(
                False, action_type, ["Player not found."], GameError.PLAYER_NOT_FOUND
            )
        if player.is_over:
            return _result(
                False,
                action_type,
                [f"The game is over ({player.status.value})."],
                GameError.GAME_OVER,
            )

        try:
            if isinstance(action, Move):
                result = self._move(player, action)
            elif isinstance(action, CheckStatus):
                result = _result(True, action_type, player.status_lines())
            elif isinstance(action, UseItem):
                result = self._use_item(player, action)
            elif isinstance(action, Purchase):
                result = self._purchase(player, action)
            elif isinstance(action, ShowHelp):
                result = _result(True, action_type, help_lines(self.registry))
            elif isinstance(action, Quit):
                result = self._quit(player)
            else:
                raise TypeError(f"Unsupported action: {action!r}")

            if result.success:
                player.turn += 1
            self._check_terminal(player, result)
            self._emit(
                EventTypes.TURN_PROCESSED,
                {"player_id": player_id, "action": action_type, "turn": player.turn},
            )

            data: dict[str, Any] = dict(result.data or {})
            data["events"] = [e.event_type for e in self.event_bus.turn_events]
            data["status"] = player.status.value
            result.data = data
        finally:
            self.event_bus.reset_chain()

        logger.debug(
            "Action processed: %s for %s (success=%s)", action_type, player_id, result.success
        )
        return result

    def _choose(
        self, player_id: str, choice: int, item_index: Optional[int]
    ) -> ActionResult:
        player = self.get_player(player_id)
        if not player:
            return _result(False, "choose", ["Player not found."], GameError.PLAYER_NOT_FOUND)
        if player.is_over:
            return _result(
                False,
                "choose",
                [f"The game is over ({player.status.value})."],
                GameError.GAME_OVER,
            )

        action = resolve_choice(player.location, choice, self.registry)
        if action is None:
            size = len(build_menu(player.location, self.registry))
            return _result(
                False,
                "choose",
                [f"Please enter a number between 1 and {size}."],
                GameError.INVALID_CHOICE,
            )

        if isinstance(action, UseItem):
            action = UseItem(item_index=item_index)
        return self._perform(player_id, action)

    # === 개별 행동 ===

    def _move(self, player: PlayerState, action: Move) -> ActionResult:
        travel = self.navigator.travel(player, action.target)
        data: dict[str, Any] = {
            "origin": travel.origin.key,
            "location": travel.location.key,
        }
        if not travel.success:
            return _result(False, "move", travel.lines, travel.error, data)

        self._emit(
            EventTypes.PLAYER_MOVED,
            {
                "player_id": player.player_id,
                "origin": travel.origin.key,
                "location": travel.location.key,
            },
        )
        if travel.encounter:
            data["combat"] = travel.encounter.to_dict()
            self._emit(
                EventTypes.COMBAT_RESOLVED,
                {
                    "player_id": player.player_id,
                    "outcome": travel.encounter.outcome.value,
                    "is_boss": travel.encounter.is_boss,
                },
            )
        return _result(True, "move", travel.lines, data=data)

    def _use_item(self, player: PlayerState, action: UseItem) -> ActionResult:
        """potion만 소모된다. 무기/방어구 사용은 자동 장비 안내만 출력."""
        inventory = player.inventory
        if len(inventory) == 0:
            return _result(
                False, "use", ["You have no items!"], GameError.INVALID_ITEM_SELECTION
            )
        if action.item_index is None:
            return _result(
                False, "use", ["You close your pack."], GameError.INVALID_ITEM_SELECTION
            )
        if not 0 <= action.item_index < len(inventory):
            return _result(
                False, "use", ["Invalid item number!"], GameError.INVALID_ITEM_SELECTION
            )

        item = inventory[action.item_index]
        data = {"template_id": item.template_id, "instance_id": item.instance_id}

        if item.category == ItemCategory.POTION:
            inventory.remove_at(action.item_index)
            change = player.update_health(item.effect)
            lines = [f"You drink the {item.name}."]
            lines.extend(change.lines())
            lines.append(f"Health restored to: {player.health}")
            data["healed"] = change.delta
            self._emit(
                EventTypes.ITEM_USED,
                {"player_id": player.player_id, "template_id": item.template_id},
            )
            logger.info(
                "Potion used: %s (+%d → %d)", player.player_id, change.delta, player.health
            )
            return _result(True, "use", lines, data=data)
        elif item.category == ItemCategory.WEAPON:
            lines = [f"You ready your {item.name} for battle. (Auto-equip uses best stats)"]
        else:
            lines = [f"You secure your {item.name}. (Auto-equip uses best stats)"]
        return _result(True, "use", lines, data=data)

    def _purchase(self, player: PlayerState, action: Purchase) -> ActionResult:
        template = self.registry.get(action.template_id)
        if template is None or not sells(player.location, action.template_id):
            return _result(
                False,
                "buy",
                ["Nobody sells that here."],
                GameError.ITEM_NOT_SOLD_HERE,
                {"template_id": action.template_id},
            )

        outcome = purchase(player, template)
        data = {"template_id": template.template_id, "gold": outcome.gold_remaining}
        if not outcome.success:
            return _result(False, "buy", outcome.lines, outcome.error, data)

        if outcome.item is not None:
            data["instance_id"] = outcome.item.instance_id
        self._emit(
            EventTypes.ITEM_PURCHASED,
            {"player_id": player.player_id, "template_id": template.template_id},
        )
        return _result(True, "buy", outcome.lines, data=data)

    def _quit(self, player: PlayerState) -> ActionResult:
        player.status = GameStatus.QUIT
        logger.info("Player quit: %s", player.player_id)
        return _result(True, "quit", ["Thanks for playing!"])

    # === 종료 조건 ===

    def _check_terminal(self, player: PlayerState, result: ActionResult) -> None:
        """체력 0 → 패배, 드래곤 처치 → 승리. 이미 종료(QUIT)면 상태만 알린다."""
        if player.status == GameStatus.IN_PROGRESS:
            if not player.is_alive:
                player.status = GameStatus.DEFEAT
                result.lines.append("Game Over! Your health reached 0!")
            elif player.dragon_slain:
                player.status = GameStatus.VICTORY
                result.lines.append("=== Final Stats ===")
                result.lines.extend(player.status_lines())
            else:
                return

        logger.info("Game ended: %s → %s", player.player_id, player.status.value)
        self._emit(
            EventTypes.GAME_ENDED,
            {"player_id": player.player_id, "status": player.status.value},
        )

    def _emit(self, event_type: str, data: dict) -> None:
        self.event_bus.emit(GameEvent(event_type=event_type, data=data, source=EVENT_SOURCE))
