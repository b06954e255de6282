"""상점 거래 - 골드 ↔ 아이템 교환"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from dragon_quest.core.errors import GameError
from dragon_quest.core.locations import Location
from dragon_quest.core.player import PlayerState

from .catalog import HEALTH_POTION, IRON_SHIELD, STEEL_SWORD, SWORD, WOODEN_SHIELD
from .models import InventoryItem, ItemTemplate
from .registry import TemplateRegistry

logger = logging.getLogger(__name__)

# 위치별 판매 목록 (메뉴 순서). 수량 제한/가격 변동 없음.
SHOP_STOCK: dict[Location, tuple[str, ...]] = {
    Location.BLACKSMITH: (
        SWORD.template_id,
        STEEL_SWORD.template_id,
        WOODEN_SHIELD.template_id,
        IRON_SHIELD.template_id,
    ),
    Location.MARKET: (HEALTH_POTION.template_id,),
}


@dataclass
class PurchaseResult:
    """구매 결과"""

    success: bool
    template_id: str
    gold_remaining: int
    lines: list[str] = field(default_factory=list)
    error: Optional[GameError] = None
    item: Optional[InventoryItem] = None


def stock_for(location: Location, registry: TemplateRegistry) -> list[ItemTemplate]:
    """위치에서 판매하는 Template 목록. 상점이 아니면 빈 리스트."""
    templates = []
    for template_id in SHOP_STOCK.get(location, ()):
        template = registry.get(template_id)
        if template is not None:
            templates.append(template)
    return templates


def sells(location: Location, template_id: str) -> bool:
    return template_id in SHOP_STOCK.get(location, ())


def purchase(player: PlayerState, template: ItemTemplate) -> PurchaseResult:
    """골드 >= 가격이면 차감 + 복사본 추가. 부족하면 변경 없이 INSUFFICIENT_FUNDS."""
    if not player.spend_gold(template.cost):
        logger.info(
            "Purchase failed (funds): %s wants %s (%d) has %d",
            player.player_id,
            template.template_id,
            template.cost,
            player.gold,
        )
        return PurchaseResult(
            success=False,
            template_id=template.template_id,
            gold_remaining=player.gold,
            lines=["You don't have enough gold!"],
            error=GameError.INSUFFICIENT_FUNDS,
        )

    item = player.inventory.add(template, acquired_turn=player.turn)
    logger.info(
        "Purchased: %s bought %s for %d (gold=%d)",
        player.player_id,
        template.template_id,
        template.cost,
        player.gold,
    )
    return PurchaseResult(
        success=True,
        template_id=template.template_id,
        gold_remaining=player.gold,
        lines=[
            f"Purchase: {template.name} for {template.cost} gold.",
            f"You bought a {template.name}!",
            f"Gold remaining: {player.gold}",
        ],
        item=item,
    )
