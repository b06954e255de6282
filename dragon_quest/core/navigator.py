"""
Dragon's Quest Core - Navigation
================================
위치 상태 머신

이동 규칙:
- village ↔ 나머지 위치 (단순 이동)
- forest 진입 → 일반 전투 즉시 발생. 결과와 무관하게 forest에 남는다
- mountains 진입 → 장비 관문. 통과 시 보스전 즉시 발생,
  드래곤을 쓰러뜨리지 못하면 village로 자동 귀환
"""

from dataclasses import dataclass, field
from typing import List, Optional

from dragon_quest.core.combat import CombatOutcome, CombatReport, resolve_encounter
from dragon_quest.core.errors import GameError
from dragon_quest.core.locations import (
    ARRIVAL_MESSAGES,
    ENCOUNTERS,
    Location,
    is_legal_move,
)
from dragon_quest.core.logging import get_logger
from dragon_quest.core.player import PlayerState

logger = get_logger(__name__)


@dataclass
class TravelResult:
    """이동 결과"""

    success: bool
    origin: Location
    location: Location  # 처리 후 최종 위치
    lines: List[str] = field(default_factory=list)
    error: Optional[GameError] = None
    encounter: Optional[CombatReport] = None  # 진입 시 발생한 전투

    @property
    def message(self) -> str:
        return self.lines[0] if self.lines else ""


class Navigator:
    """
    이동 시스템

    합법 이동 판정, 관문 검사, 진입 전투 트리거를 담당한다.
    """

    # 관문 위치 → 거부 서술
    GATE_REFUSALS = {
        Location.MOUNTAINS: (
            "The path is too dangerous. You need a Steel Sword and some armor "
            "before facing the dragon."
        ),
    }

    def is_gate_open(self, player: PlayerState, target: Location) -> bool:
        if target not in self.GATE_REFUSALS:
            return True
        return player.inventory.has_good_equipment()

    def travel(self, player: PlayerState, target: Location) -> TravelResult:
        """이동 실행. 거부 시 상태 변화 없음."""
        origin = player.location

        if not is_legal_move(origin, target):
            logger.info(
                "Illegal move rejected: %s %s → %s",
                player.player_id,
                origin.key,
                target.key,
            )
            return TravelResult(
                success=False,
                origin=origin,
                location=origin,
                lines=[f"You can't get to the {target.key} from the {origin.key}."],
                error=GameError.ILLEGAL_TRANSITION,
            )

        if not self.is_gate_open(player, target):
            logger.info("Gate closed: %s → %s", player.player_id, target.key)
            return TravelResult(
                success=False,
                origin=origin,
                location=origin,
                lines=[self.GATE_REFUSALS[target]],
                error=GameError.ILLEGAL_TRANSITION,
            )

        player.location = target
        result = TravelResult(success=True, origin=origin, location=target)
        result.lines.append(ARRIVAL_MESSAGES[(origin, target)])
        logger.info("Player moved: %s %s → %s", player.player_id, origin.key, target.key)

        if target in ENCOUNTERS:
            result.encounter = self._trigger_encounter(player, target, result.lines)
            result.location = player.location

        return result

    def _trigger_encounter(
        self, player: PlayerState, target: Location, lines: List[str]
    ) -> CombatReport:
        is_boss = ENCOUNTERS[target]
        if not is_boss:
            lines.append("A monster appears!")

        report = resolve_encounter(player, is_boss=is_boss)
        lines.extend(report.lines)

        # 드래곤전 실패(후퇴/패배)는 village로 되돌린다. forest는 그대로 남는다.
        if is_boss and report.outcome != CombatOutcome.VICTORY_BOSS:
            player.location = Location.VILLAGE
            lines.append("You stumble back down to the village to recover.")
            logger.info("Dragon attempt failed: %s sent back to village", player.player_id)

        return report
