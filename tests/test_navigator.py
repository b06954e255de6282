"""Tests for the location graph and navigator."""

import pytest

from dragon_quest.core.combat import CombatOutcome
from dragon_quest.core.errors import GameError
from dragon_quest.core.item.catalog import IRON_SHIELD, STEEL_SWORD, SWORD, WOODEN_SHIELD
from dragon_quest.core.locations import Location, destinations, is_legal_move
from dragon_quest.core.navigator import Navigator
from dragon_quest.core.player import PlayerState


@pytest.fixture()
def navigator() -> Navigator:
    """Create a Navigator instance."""
    return Navigator()


class TestLocationGraph:
    """Tests for the fixed transition table."""

    def test_village_is_hub(self):
        assert destinations(Location.VILLAGE) == {
            Location.BLACKSMITH,
            Location.MARKET,
            Location.FOREST,
            Location.MOUNTAINS,
        }

    @pytest.mark.parametrize(
        "origin",
        [Location.BLACKSMITH, Location.MARKET, Location.FOREST, Location.MOUNTAINS],
    )
    def test_spokes_return_only_to_village(self, origin: Location):
        assert destinations(origin) == {Location.VILLAGE}

    def test_no_spoke_to_spoke(self):
        assert not is_legal_move(Location.MARKET, Location.BLACKSMITH)
        assert not is_legal_move(Location.FOREST, Location.MOUNTAINS)

    def test_from_key(self):
        assert Location.from_key("Forest") == Location.FOREST
        assert Location.from_key(" market ") == Location.MARKET
        assert Location.from_key("castle") is None

    def test_title(self):
        assert Location.MOUNTAINS.title == "MOUNTAINS"


class TestTravel:
    """Tests for Navigator.travel."""

    def test_plain_move(self, navigator: Navigator, player: PlayerState):
        result = navigator.travel(player, Location.BLACKSMITH)

        assert result.success is True
        assert result.location == Location.BLACKSMITH
        assert player.location == Location.BLACKSMITH
        assert result.encounter is None
        assert result.message == "You enter the blacksmith's shop."

    def test_illegal_move_no_change(self, navigator: Navigator, player: PlayerState):
        player.location = Location.MARKET
        result = navigator.travel(player, Location.FOREST)

        assert result.success is False
        assert result.error == GameError.ILLEGAL_TRANSITION
        assert player.location == Location.MARKET
        assert player.health == 100
        assert result.message == "You can't get to the forest from the market."

    def test_return_to_village(self, navigator: Navigator, player: PlayerState):
        player.location = Location.MARKET
        result = navigator.travel(player, Location.VILLAGE)
        assert result.success is True
        assert player.location == Location.VILLAGE


class TestForest:
    """Entering the forest triggers a normal encounter."""

    def test_victory_stays_in_forest(self, navigator: Navigator, player: PlayerState):
        player.inventory.add(SWORD)
        result = navigator.travel(player, Location.FOREST)

        assert result.success is True
        assert result.encounter.outcome == CombatOutcome.VICTORY_NORMAL
        assert player.location == Location.FOREST
        assert result.lines[:2] == ["You venture into the forest...", "A monster appears!"]

    def test_retreat_stays_in_forest(self, navigator: Navigator, player: PlayerState):
        result = navigator.travel(player, Location.FOREST)

        assert result.encounter.outcome == CombatOutcome.RETREATED
        assert result.location == Location.FOREST
        assert player.location == Location.FOREST
        assert player.health == 80


class TestMountains:
    """The dragon gate and boss encounter."""

    def test_gate_closed_with_sword_only(
        self, navigator: Navigator, player: PlayerState
    ):
        player.inventory.add(SWORD)
        result = navigator.travel(player, Location.MOUNTAINS)

        assert result.success is False
        assert result.error == GameError.ILLEGAL_TRANSITION
        assert result.encounter is None
        assert player.location == Location.VILLAGE
        assert player.health == 100
        assert "Steel Sword" in result.message

    def test_gate_closed_without_armor(self, navigator: Navigator, player: PlayerState):
        player.inventory.add(STEEL_SWORD)
        assert navigator.is_gate_open(player, Location.MOUNTAINS) is False
        assert navigator.travel(player, Location.MOUNTAINS).success is False

    def test_gate_only_guards_mountains(self, navigator: Navigator, player: PlayerState):
        assert navigator.is_gate_open(player, Location.FOREST) is True

    def test_dragon_slain_stays(self, navigator: Navigator, player: PlayerState):
        player.inventory.add(STEEL_SWORD)
        player.inventory.add(WOODEN_SHIELD)
        result = navigator.travel(player, Location.MOUNTAINS)

        assert result.success is True
        assert result.encounter.outcome == CombatOutcome.VICTORY_BOSS
        assert player.location == Location.MOUNTAINS
        assert player.dragon_slain is True

    def test_failed_attempt_returns_to_village(
        self, navigator: Navigator, player: PlayerState
    ):
        player.health = 30
        player.inventory.add(STEEL_SWORD)
        player.inventory.add(IRON_SHIELD)
        result = navigator.travel(player, Location.MOUNTAINS)

        # 체력 30 → 20 → 10 → 0, 드래곤은 5 남음
        assert result.encounter.outcome == CombatOutcome.DEFEATED
        assert result.location == Location.VILLAGE
        assert player.location == Location.VILLAGE
        assert result.lines[-1] == "You stumble back down to the village to recover."
