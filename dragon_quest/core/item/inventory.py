"""인벤토리 + 자동 장비 선택

장비는 수동 장착하지 않는다. 전투 시점마다 카테고리별 effect 최댓값 아이템이 선택된다.
"""

from __future__ import annotations

import logging
from typing import Iterator, Optional

from .catalog import DRAGON_GATE_WEAPON_NAME
from .models import InventoryItem, ItemCategory, ItemTemplate

logger = logging.getLogger(__name__)


class Inventory:
    """플레이어 소유 아이템 목록.

    삽입 순서 = 획득 순서. 용량 제한 없음, 동일 Template 중복 허용.
    """

    def __init__(self) -> None:
        self._items: list[InventoryItem] = []

    # === 변경 ===

    def add(self, template: ItemTemplate, acquired_turn: int = 0) -> InventoryItem:
        """Template 복사본을 맨 뒤에 추가."""
        item = InventoryItem.from_template(template, acquired_turn=acquired_turn)
        self._items.append(item)
        logger.debug("Inventory add: %s (%s)", item.name, item.instance_id)
        return item

    def remove_at(self, index: int) -> InventoryItem:
        """index 위치 아이템 제거 후 반환. 범위 밖이면 IndexError."""
        if not 0 <= index < len(self._items):
            raise IndexError(f"inventory index out of range: {index}")
        return self._items.pop(index)

    # === 조회 (부수효과 없음) ===

    def items_of_category(self, category: ItemCategory) -> list[InventoryItem]:
        """카테고리 일치 아이템 (삽입 순서)."""
        return [item for item in self._items if item.category == category]

    def best_item(self, category: ItemCategory) -> Optional[InventoryItem]:
        """effect 최댓값 아이템. 동률이면 먼저 획득한 것.

        strictly greater일 때만 교체하므로 좌→우 스캔에서 첫 최댓값이 유지된다.
        """
        best: Optional[InventoryItem] = None
        for item in self.items_of_category(category):
            if best is None or item.effect > best.effect:
                best = item
        return best

    def has_category(self, category: ItemCategory) -> bool:
        return any(item.category == category for item in self._items)

    def has_item_named(self, name: str, category: Optional[ItemCategory] = None) -> bool:
        return any(
            item.name == name and (category is None or item.category == category)
            for item in self._items
        )

    def has_good_equipment(self) -> bool:
        """드래곤 도전 자격: Steel Sword 보유 AND 방어구 1개 이상.

        무기는 이름으로 판정한다. effect가 더 높은 다른 무기가 있어도
        Steel Sword가 없으면 False (일반 전투의 best_item 선택과 의도적으로 다름).
        """
        has_gate_weapon = self.has_item_named(
            DRAGON_GATE_WEAPON_NAME, ItemCategory.WEAPON
        )
        return has_gate_weapon and self.best_item(ItemCategory.ARMOR) is not None

    def to_list(self) -> list[dict]:
        return [item.to_dict() for item in self._items]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[InventoryItem]:
        return iter(list(self._items))

    def __getitem__(self, index: int) -> InventoryItem:
        return self._items[index]

