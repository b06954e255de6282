"""인벤토리 장비 선택 + 상점 거래 테스트"""

from __future__ import annotations

import pytest

from dragon_quest.core.errors import GameError
from dragon_quest.core.item.catalog import (
    HEALTH_POTION,
    IRON_SHIELD,
    STEEL_SWORD,
    SWORD,
    WOODEN_SHIELD,
)
from dragon_quest.core.item.inventory import Inventory
from dragon_quest.core.item.models import ItemCategory, ItemTemplate
from dragon_quest.core.item.trade import purchase, sells, stock_for
from dragon_quest.core.locations import Location
from dragon_quest.core.player import PlayerState


def _weapon(template_id: str, effect: int, name: str | None = None) -> ItemTemplate:
    return ItemTemplate(
        template_id=template_id,
        name=name or template_id,
        category=ItemCategory.WEAPON,
        cost=1,
        effect=effect,
    )


# ── Inventory ─────────────────────────────────────────────────


class TestInventory:
    def test_insertion_order(self) -> None:
        inv = Inventory()
        inv.add(SWORD)
        inv.add(HEALTH_POTION)
        inv.add(WOODEN_SHIELD)
        assert [item.name for item in inv] == ["Sword", "Health Potion", "Wooden Shield"]
        assert len(inv) == 3

    def test_duplicates_allowed(self) -> None:
        inv = Inventory()
        inv.add(HEALTH_POTION)
        inv.add(HEALTH_POTION)
        assert len(inv.items_of_category(ItemCategory.POTION)) == 2

    def test_items_of_category(self) -> None:
        inv = Inventory()
        inv.add(SWORD)
        inv.add(WOODEN_SHIELD)
        inv.add(STEEL_SWORD)
        weapons = inv.items_of_category(ItemCategory.WEAPON)
        assert [w.name for w in weapons] == ["Sword", "Steel Sword"]

    def test_best_item_highest_effect(self) -> None:
        # effect [5, 10, 7] → 10
        inv = Inventory()
        inv.add(_weapon("w5", 5))
        inv.add(_weapon("w10", 10))
        inv.add(_weapon("w7", 7))
        assert inv.best_item(ItemCategory.WEAPON).template_id == "w10"

    def test_best_item_empty(self) -> None:
        assert Inventory().best_item(ItemCategory.WEAPON) is None

    def test_best_item_tie_first_acquired(self) -> None:
        inv = Inventory()
        first = inv.add(_weapon("a", 10))
        inv.add(_weapon("b", 10))
        assert inv.best_item(ItemCategory.WEAPON).instance_id == first.instance_id

    def test_best_item_ignores_other_categories(self) -> None:
        inv = Inventory()
        inv.add(HEALTH_POTION)  # effect 30
        inv.add(SWORD)
        assert inv.best_item(ItemCategory.WEAPON).name == "Sword"
        assert inv.best_item(ItemCategory.ARMOR) is None

    def test_has_category(self) -> None:
        inv = Inventory()
        assert inv.has_category(ItemCategory.POTION) is False
        inv.add(HEALTH_POTION)
        assert inv.has_category(ItemCategory.POTION) is True

    def test_remove_at(self) -> None:
        inv = Inventory()
        inv.add(SWORD)
        inv.add(HEALTH_POTION)
        removed = inv.remove_at(1)
        assert removed.name == "Health Potion"
        assert len(inv) == 1

    def test_remove_at_out_of_range(self) -> None:
        inv = Inventory()
        inv.add(SWORD)
        with pytest.raises(IndexError):
            inv.remove_at(1)
        with pytest.raises(IndexError):
            inv.remove_at(-1)


class TestDragonGate:
    def test_steel_sword_and_armor(self) -> None:
        inv = Inventory()
        inv.add(STEEL_SWORD)
        inv.add(WOODEN_SHIELD)
        assert inv.has_good_equipment() is True

    def test_steel_sword_without_armor(self) -> None:
        inv = Inventory()
        inv.add(STEEL_SWORD)
        assert inv.has_good_equipment() is False

    def test_armor_without_steel_sword(self) -> None:
        inv = Inventory()
        inv.add(SWORD)
        inv.add(IRON_SHIELD)
        assert inv.has_good_equipment() is False

    def test_stronger_weapon_does_not_open_gate(self) -> None:
        """이름 판정: effect가 Steel Sword보다 높아도 관문은 닫혀 있다"""
        inv = Inventory()
        inv.add(_weapon("wpn_legend", 99, name="Legend Blade"))
        inv.add(IRON_SHIELD)
        assert inv.has_good_equipment() is False

    def test_steel_named_non_weapon_does_not_count(self) -> None:
        inv = Inventory()
        inv.add(
            ItemTemplate(
                template_id="misc_steel",
                name="Steel Sword",
                category=ItemCategory.ARMOR,
                cost=1,
                effect=1,
            )
        )
        assert inv.has_good_equipment() is False


# ── Trade ─────────────────────────────────────────────────────


class TestShopStock:
    def test_blacksmith_stock_order(self, registry) -> None:
        assert stock_for(Location.BLACKSMITH, registry) == [
            SWORD,
            STEEL_SWORD,
            WOODEN_SHIELD,
            IRON_SHIELD,
        ]

    def test_market_sells_only_potion(self, registry) -> None:
        assert stock_for(Location.MARKET, registry) == [HEALTH_POTION]

    def test_no_shop_elsewhere(self, registry) -> None:
        assert stock_for(Location.VILLAGE, registry) == []
        assert stock_for(Location.FOREST, registry) == []

    def test_sells(self) -> None:
        assert sells(Location.MARKET, "potion_health") is True
        assert sells(Location.MARKET, "wpn_sword") is False


class TestPurchase:
    def test_success(self, player: PlayerState) -> None:
        result = purchase(player, SWORD)
        assert result.success is True
        assert result.error is None
        assert player.gold == 10
        assert len(player.inventory) == 1
        assert result.item is player.inventory[0]
        assert result.lines[-1] == "Gold remaining: 10"

    def test_insufficient_funds(self, player: PlayerState) -> None:
        # 시작 골드 20 < Steel Sword 25
        result = purchase(player, STEEL_SWORD)
        assert result.success is False
        assert result.error == GameError.INSUFFICIENT_FUNDS
        assert player.gold == 20
        assert len(player.inventory) == 0
        assert result.lines == ["You don't have enough gold!"]

    def test_exact_funds(self, player: PlayerState) -> None:
        player.gold = 8
        assert purchase(player, WOODEN_SHIELD).success is True
        assert player.gold == 0

    def test_repeated_failure_idempotent(self, player: PlayerState) -> None:
        player.gold = 4
        for _ in range(3):
            assert purchase(player, HEALTH_POTION).error == GameError.INSUFFICIENT_FUNDS
        assert player.gold == 4
        assert len(player.inventory) == 0
