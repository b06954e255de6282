"""기본 아이템 카탈로그 - 게임 밸런스 고정 상수"""

from __future__ import annotations

from .models import ItemCategory, ItemTemplate
from .registry import TemplateRegistry

HEALTH_POTION = ItemTemplate(
    template_id="potion_health",
    name="Health Potion",
    category=ItemCategory.POTION,
    cost=5,
    effect=30,
    description="Restores 30 health points",
)

SWORD = ItemTemplate(
    template_id="wpn_sword",
    name="Sword",
    category=ItemCategory.WEAPON,
    cost=10,
    effect=10,
    description="A sturdy blade for combat",
)

STEEL_SWORD = ItemTemplate(
    template_id="wpn_steel_sword",
    name="Steel Sword",
    category=ItemCategory.WEAPON,
    cost=25,
    effect=20,
    description="A razor-sharp blade that deals heavy damage",
)

WOODEN_SHIELD = ItemTemplate(
    template_id="arm_wooden_shield",
    name="Wooden Shield",
    category=ItemCategory.ARMOR,
    cost=8,
    effect=5,
    description="Reduces damage taken in combat",
)

IRON_SHIELD = ItemTemplate(
    template_id="arm_iron_shield",
    name="Iron Shield",
    category=ItemCategory.ARMOR,
    cost=16,
    effect=10,
    description="A sturdy shield that blocks more damage",
)

# 드래곤 관문은 효과치가 아니라 이 이름으로 판정한다
DRAGON_GATE_WEAPON_NAME = STEEL_SWORD.name

DEFAULT_TEMPLATES: tuple[ItemTemplate, ...] = (
    HEALTH_POTION,
    SWORD,
    STEEL_SWORD,
    WOODEN_SHIELD,
    IRON_SHIELD,
)


def build_default_registry() -> TemplateRegistry:
    """기본 5종 Template이 등록된 Registry 생성."""
    return TemplateRegistry(DEFAULT_TEMPLATES)
