"""
Dragon's Quest Core - Locations
===============================
위치 열거형과 고정 이동 그래프

village가 허브이고 나머지 4곳은 village와만 연결된다.
forest / mountains 진입은 전투를 자동으로 일으킨다 (navigator 참조).
"""

from enum import Enum
from typing import Dict, FrozenSet, Optional, Tuple


class Location(Enum):
    """위치 (키, 묘사)"""

    VILLAGE = (
        "village",
        "You're in a bustling village. The blacksmith and market are nearby. "
        "The mountains loom to the north.",
    )
    BLACKSMITH = (
        "blacksmith",
        "The heat from the forge fills the air. Weapons and armor line the walls.",
    )
    MARKET = (
        "market",
        "Merchants sell their wares from colorful stalls. "
        "A potion seller catches your eye.",
    )
    FOREST = (
        "forest",
        "The forest is dark and foreboding. You hear strange noises all around you.",
    )
    MOUNTAINS = (
        "mountains",
        "Jagged peaks pierce the sky. Sulfur hangs in the air... "
        "the dragon's lair is near.",
    )

    def __init__(self, key: str, description: str):
        self.key = key
        self.description = description

    @property
    def title(self) -> str:
        return self.key.upper()

    @classmethod
    def from_key(cls, key: str) -> Optional["Location"]:
        """문자열 키 → Location. 대소문자 무시, 없으면 None."""
        normalized = key.strip().lower()
        for location in cls:
            if location.key == normalized:
                return location
        return None


# 합법 이동 (출발지 → 도착지 집합)
TRANSITIONS: Dict[Location, FrozenSet[Location]] = {
    Location.VILLAGE: frozenset(
        {Location.BLACKSMITH, Location.MARKET, Location.FOREST, Location.MOUNTAINS}
    ),
    Location.BLACKSMITH: frozenset({Location.VILLAGE}),
    Location.MARKET: frozenset({Location.VILLAGE}),
    Location.FOREST: frozenset({Location.VILLAGE}),
    Location.MOUNTAINS: frozenset({Location.VILLAGE}),
}

# 진입 시 전투 발생 위치 → 보스 여부
ENCOUNTERS: Dict[Location, bool] = {
    Location.FOREST: False,
    Location.MOUNTAINS: True,
}

# 도착 서술 (출발지, 도착지)
ARRIVAL_MESSAGES: Dict[Tuple[Location, Location], str] = {
    (Location.VILLAGE, Location.BLACKSMITH): "You enter the blacksmith's shop.",
    (Location.VILLAGE, Location.MARKET): "You enter the market.",
    (Location.VILLAGE, Location.FOREST): "You venture into the forest...",
    (Location.VILLAGE, Location.MOUNTAINS): "You ascend into the mountains...",
    (Location.BLACKSMITH, Location.VILLAGE): "You return to the village center.",
    (Location.MARKET, Location.VILLAGE): "You return to the village center.",
    (Location.FOREST, Location.VILLAGE): "You hurry back to the safety of the village.",
    (Location.MOUNTAINS, Location.VILLAGE): "You descend from the mountains to the village.",
}


def destinations(origin: Location) -> FrozenSet[Location]:
    return TRANSITIONS.get(origin, frozenset())


def is_legal_move(origin: Location, target: Location) -> bool:
    return target in destinations(origin)
