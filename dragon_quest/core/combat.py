"""
Dragon's Quest Core - Combat Resolver
=====================================
결정론적 턴제 전투

[규칙]
1. 장비는 전투 시작 시 1회 스냅샷 (best weapon / best armor)
2. 보스전 + 장비 미달 → 20 피해 후 후퇴 (몬스터 생성 없음)
3. 무기 없음 → 20 피해 후 후퇴
4. 플레이어 선공. 몬스터가 쓰러지면 반격 없음
5. 한 타격의 피해는 최소 1 → 전투는 반드시 종료된다
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from dragon_quest.core.item.models import ItemCategory
from dragon_quest.core.logging import get_logger
from dragon_quest.core.player import PlayerState

logger = get_logger(__name__)

MONSTER_DEFENSE = 5  # 모든 몬스터 공통 방어력
RETREAT_DAMAGE = 20  # 후퇴 페널티
VICTORY_GOLD = 10  # 일반 몬스터 처치 보상
MIN_HIT_DAMAGE = 1


@dataclass(frozen=True)
class MonsterArchetype:
    """조우마다 생성되는 몬스터 원형 (영속 엔티티 아님)"""

    name: str
    max_health: int
    base_damage: int
    defense: int = MONSTER_DEFENSE
    is_boss: bool = False


NORMAL_MONSTER = MonsterArchetype(name="Snarling Beast", max_health=20, base_damage=10)
DRAGON = MonsterArchetype(name="Dragon", max_health=50, base_damage=20, is_boss=True)


class CombatOutcome(str, Enum):
    RETREATED = "retreated"
    DEFEATED = "defeated"
    VICTORY_NORMAL = "victory_normal"
    VICTORY_BOSS = "victory_boss"


@dataclass
class CombatReport:
    """전투 결과"""

    outcome: CombatOutcome
    is_boss: bool
    monster: Optional[str] = None  # 후퇴 시 None (몬스터 미생성)
    weapon: Optional[str] = None
    armor: Optional[str] = None
    rounds: int = 0  # 플레이어 공격 횟수
    damage_dealt: int = 0
    damage_taken: int = 0
    gold_earned: int = 0
    lines: list[str] = field(default_factory=list)

    @property
    def player_won(self) -> bool:
        return self.outcome in (CombatOutcome.VICTORY_NORMAL, CombatOutcome.VICTORY_BOSS)

    def to_dict(self) -> dict:
        return {
            "outcome": self.outcome.value,
            "is_boss": self.is_boss,
            "monster": self.monster,
            "weapon": self.weapon,
            "armor": self.armor,
            "rounds": self.rounds,
            "damage_dealt": self.damage_dealt,
            "damage_taken": self.damage_taken,
            "gold_earned": self.gold_earned,
        }


def archetype_for(is_boss: bool) -> MonsterArchetype:
    return DRAGON if is_boss else NORMAL_MONSTER


def player_hit_damage(weapon_effect: int, monster_defense: int = MONSTER_DEFENSE) -> int:
    """플레이어 → 몬스터 피해. 최소 1."""
    return max(MIN_HIT_DAMAGE, weapon_effect - monster_defense)


def monster_hit_damage(base_damage: int, armor_effect: int = 0) -> int:
    """몬스터 → 플레이어 피해. 최소 1."""
    return max(MIN_HIT_DAMAGE, base_damage - armor_effect)


def _retreat(player: PlayerState, report: CombatReport, reason: str) -> CombatReport:
    report.lines.append(reason)
    change = player.update_health(-RETREAT_DAMAGE)
    report.lines.extend(change.lines())
    report.damage_taken = -change.delta
    logger.info(
        "Retreat: %s (boss=%s, health=%d)", player.player_id, report.is_boss, player.health
    )
    return report


def resolve_encounter(player: PlayerState, is_boss: bool = False) -> CombatReport:
    """조우 1회를 끝까지 동기 처리.

    플레이어 체력(피해)과 골드(일반 승리 보상), dragon_slain 플래그를 변경한다.
    인벤토리는 조회만 한다.
    """
    weapon = player.inventory.best_item(ItemCategory.WEAPON)
    armor = player.inventory.best_item(ItemCategory.ARMOR)

    report = CombatReport(
        outcome=CombatOutcome.RETREATED,
        is_boss=is_boss,
        weapon=weapon.name if weapon else None,
        armor=armor.name if armor else None,
    )

    if is_boss:
        report.lines.append("The DRAGON emerges from the shadows!")
        if not player.inventory.has_good_equipment():
            return _retreat(
                player,
                report,
                "The dragon senses your weakness. You are forced to retreat!",
            )
    else:
        report.lines.append("A snarling beast lunges at you!")

    if weapon is None:
        return _retreat(player, report, "Without a weapon, you must retreat!")

    report.lines.append(f"You attack with your {weapon.name} (+{weapon.effect} dmg).")
    if armor is not None:
        report.lines.append(
            f"You brace behind your {armor.name} (+{armor.effect} protection)."
        )
    else:
        report.lines.append("You have no armor!")

    monster = archetype_for(is_boss)
    report.monster = monster.name
    monster_health = monster.max_health
    armor_protection = armor.effect if armor else 0

    while monster_health > 0 and player.is_alive:
        dealt = player_hit_damage(weapon.effect, monster.defense)
        monster_health -= dealt
        report.rounds += 1
        report.damage_dealt += dealt
        report.lines.append(
            f"You strike for {dealt} damage. (Monster HP: {max(0, monster_health)})"
        )

        if monster_health <= 0:
            break

        incoming = monster_hit_damage(monster.base_damage, armor_protection)
        report.lines.append(
            f"The enemy hits for {monster.base_damage}. Your armor reduces it by "
            f"{armor_protection} -> you take {incoming}."
        )
        change = player.update_health(-incoming)
        report.damage_taken += -change.delta
        report.lines.extend(change.lines())

        logger.debug(
            "Round %d: dealt=%d monster_hp=%d incoming=%d player_hp=%d",
            report.rounds,
            dealt,
            monster_health,
            incoming,
            player.health,
        )

    if not player.is_alive:
        report.outcome = CombatOutcome.DEFEATED
        report.lines.append("You collapse from your wounds...")
    elif is_boss:
        report.outcome = CombatOutcome.VICTORY_BOSS
        player.dragon_slain = True
        report.lines.append("You have slain the DRAGON! The realm is saved!")
    else:
        report.outcome = CombatOutcome.VICTORY_NORMAL
        player.add_gold(VICTORY_GOLD)
        report.gold_earned = VICTORY_GOLD
        report.lines.append(f"Victory! You found {VICTORY_GOLD} gold!")

    logger.info(
        "Combat resolved: %s vs %s → %s (rounds=%d, health=%d)",
        player.player_id,
        monster.name,
        report.outcome.value,
        report.rounds,
        player.health,
    )
    return report
