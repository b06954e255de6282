"""플레이어 상태 - 체력/골드 불변식의 유일한 관리 지점"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from dragon_quest.core.item.inventory import Inventory
from dragon_quest.core.item.models import ItemCategory
from dragon_quest.core.locations import Location
from dragon_quest.core.logging import get_logger

logger = get_logger(__name__)

MAX_HEALTH = 100
MIN_HEALTH = 0
STARTING_HEALTH = 100
STARTING_GOLD = 20


class GameStatus(str, Enum):
    IN_PROGRESS = "in_progress"
    VICTORY = "victory"  # 드래곤 처치
    DEFEAT = "defeat"  # 체력 0
    QUIT = "quit"


@dataclass
class HealthChange:
    """체력 변경 결과"""

    previous: int
    current: int
    capped: bool = False  # MAX_HEALTH 초과분 절삭됨
    floored: bool = False  # 0 미만 절삭됨

    @property
    def delta(self) -> int:
        return self.current - self.previous

    def lines(self) -> list[str]:
        out: list[str] = []
        if self.capped:
            out.append("You're at full health!")
        if self.floored:
            out.append("You're gravely wounded!")
        out.append(f"Health is now: {self.current}")
        return out


@dataclass
class PlayerState:
    """플레이어 세션 집합체

    체력은 변경 때마다 [0, 100]으로 절삭된다.
    골드는 0 미만이 되지 않는다 (구매는 절삭이 아니라 차단).
    """

    player_id: str
    name: str = ""
    health: int = STARTING_HEALTH
    gold: int = STARTING_GOLD
    location: Location = Location.VILLAGE
    inventory: Inventory = field(default_factory=Inventory)
    dragon_slain: bool = False
    status: GameStatus = GameStatus.IN_PROGRESS
    turn: int = 0

    def __post_init__(self) -> None:
        if not self.name:
            self.name = self.player_id

    @property
    def is_alive(self) -> bool:
        return self.health > MIN_HEALTH

    @property
    def is_over(self) -> bool:
        return self.status != GameStatus.IN_PROGRESS

    def update_health(self, amount: int) -> HealthChange:
        """amount만큼 체력 변경 (양수 회복, 음수 피해) 후 절삭."""
        previous = self.health
        raw = previous + amount
        change = HealthChange(
            previous=previous,
            current=max(MIN_HEALTH, min(MAX_HEALTH, raw)),
            capped=raw > MAX_HEALTH,
            floored=raw < MIN_HEALTH,
        )
        self.health = change.current
        logger.debug(
            "Health %s: %d → %d (%+d)", self.player_id, previous, self.health, amount
        )
        return change

    def add_gold(self, amount: int) -> int:
        """골드 증감. 0 미만은 0으로 절삭. 반환: 변경 후 골드."""
        self.gold = max(0, self.gold + amount)
        return self.gold

    def spend_gold(self, amount: int) -> bool:
        """잔액이 충분할 때만 차감. 부족하면 아무것도 바꾸지 않고 False."""
        if amount < 0 or self.gold < amount:
            return False
        self.gold -= amount
        return True

    def status_lines(self) -> list[str]:
        """상태 화면 서술 (인벤토리 + 자동 장비 포함)"""
        lines = [
            f"=== {self.name}'s Status ===",
            f"Health: {self.health}",
            f"Gold: {self.gold}",
            f"Location: {self.location.key}",
            "Inventory:",
        ]
        if len(self.inventory) == 0:
            lines.append("   Nothing in inventory")
        else:
            for number, item in enumerate(self.inventory, start=1):
                lines.append(f"   {number}. {item.name} - {item.description}")

        weapon = self.inventory.best_item(ItemCategory.WEAPON)
        armor = self.inventory.best_item(ItemCategory.ARMOR)
        lines.append(
            "Equipped (auto): "
            + (f"{weapon.name} (+{weapon.effect} dmg)" if weapon else "None")
        )
        lines.append(
            "Armor (auto): "
            + (f"{armor.name} (+{armor.effect} prot)" if armor else "None")
        )
        return lines

    def to_dict(self) -> dict:
        weapon = self.inventory.best_item(ItemCategory.WEAPON)
        armor = self.inventory.best_item(ItemCategory.ARMOR)
        return {
            "player_id": self.player_id,
            "name": self.name,
            "health": self.health,
            "gold": self.gold,
            "location": self.location.key,
            "inventory": self.inventory.to_list(),
            "best_weapon": weapon.name if weapon else None,
            "best_armor": armor.name if armor else None,
            "dragon_slain": self.dragon_slain,
            "status": self.status.value,
            "turn": self.turn,
        }


def new_player(player_id: str, name: Optional[str] = None) -> PlayerState:
    """게임 시작 상태 (체력 100, 골드 20, village)"""
    return PlayerState(player_id=player_id, name=name or player_id)
