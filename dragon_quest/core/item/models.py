"""아이템 도메인 모델"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from enum import Enum


class ItemCategory(str, Enum):
    POTION = "potion"
    WEAPON = "weapon"
    ARMOR = "armor"


@dataclass(frozen=True)
class ItemTemplate:
    """아이템 원형 - 불변. 카탈로그 상수로 프로세스 전역에서 공유."""

    template_id: str  # "wpn_steel_sword"
    name: str  # 템플릿 간 유일
    category: ItemCategory
    cost: int  # gold, 0 이상
    effect: int  # potion: 회복량 / weapon: 공격 보너스 / armor: 피해 감소
    description: str = ""

    def __post_init__(self) -> None:
        if self.cost < 0:
            raise ValueError(f"cost must be >= 0: {self.template_id}")
        if self.effect <= 0:
            raise ValueError(f"effect must be > 0: {self.template_id}")


@dataclass
class InventoryItem:
    """플레이어 소유 아이템. Template의 값 복사본.

    구매 시 생성, potion 사용 시에만 제거된다 (내구도 없음).
    """

    instance_id: str  # UUID
    template_id: str  # ItemTemplate.template_id 참조
    name: str
    category: ItemCategory
    effect: int
    description: str = ""
    acquired_turn: int = 0

    @classmethod
    def from_template(cls, template: ItemTemplate, acquired_turn: int = 0) -> InventoryItem:
        return cls(
            instance_id=str(uuid.uuid4()),
            template_id=template.template_id,
            name=template.name,
            category=template.category,
            effect=template.effect,
            description=template.description,
            acquired_turn=acquired_turn,
        )

    def to_dict(self) -> dict:
        return {
            "instance_id": self.instance_id,
            "template_id": self.template_id,
            "name": self.name,
            "category": self.category.value,
            "effect": self.effect,
            "description": self.description,
        }
