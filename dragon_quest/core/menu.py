"""위치별 번호 메뉴 + 도움말

셸이 입력받은 번호(1부터)를 GameAction으로 바꾼다.
"use item" 항목은 UseItem()을 돌려주고, 어떤 아이템인지는 셸이 다시 묻는다.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from dragon_quest.core.actions import (
    CheckStatus,
    GameAction,
    Move,
    Purchase,
    Quit,
    ShowHelp,
    UseItem,
)
from dragon_quest.core.item.registry import TemplateRegistry
from dragon_quest.core.item.trade import stock_for
from dragon_quest.core.locations import Location


@dataclass(frozen=True)
class MenuOption:
    number: int
    label: str
    action: GameAction


# 위치별 이동 항목 라벨 (메뉴 순서)
MOVE_LABELS: Dict[Location, List[Tuple[Location, str]]] = {
    Location.VILLAGE: [
        (Location.BLACKSMITH, "Go to blacksmith"),
        (Location.MARKET, "Go to market"),
        (Location.FOREST, "Enter forest"),
        (Location.MOUNTAINS, "Travel to the mountains (Dragon)"),
    ],
    Location.BLACKSMITH: [(Location.VILLAGE, "Return to village")],
    Location.MARKET: [(Location.VILLAGE, "Return to village")],
    Location.FOREST: [(Location.VILLAGE, "Return to village")],
    Location.MOUNTAINS: [(Location.VILLAGE, "Return to village")],
}


def build_menu(location: Location, registry: TemplateRegistry) -> List[MenuOption]:
    """구매 항목 → 이동 항목 → 공통 항목(상태/아이템/도움말/종료) 순."""
    entries: List[Tuple[str, GameAction]] = []
    for template in stock_for(location, registry):
        entries.append(
            (f"Buy {template.name} ({template.cost} gold)", Purchase(template.template_id))
        )
    for target, label in MOVE_LABELS[location]:
        entries.append((label, Move(target)))
    entries.extend(
        [
            ("Check status", CheckStatus()),
            ("Use item", UseItem()),
            ("Help", ShowHelp()),
            ("Quit game", Quit()),
        ]
    )
    return [
        MenuOption(number=number, label=label, action=action)
        for number, (label, action) in enumerate(entries, start=1)
    ]


def resolve_choice(
    location: Location, choice: int, registry: TemplateRegistry
) -> Optional[GameAction]:
    """1-based 번호 → 행동. 범위 밖이면 None."""
    menu = build_menu(location, registry)
    if not 1 <= choice <= len(menu):
        return None
    return menu[choice - 1].action


def menu_lines(location: Location, registry: TemplateRegistry) -> List[str]:
    lines = [f"=== {location.title} ===", location.description, "", "What would you like to do?"]
    lines.extend(f"{option.number}: {option.label}" for option in build_menu(location, registry))
    return lines


def help_lines(registry: TemplateRegistry) -> List[str]:
    potions = stock_for(Location.MARKET, registry)
    gear = stock_for(Location.BLACKSMITH, registry)
    market_line = ", ".join(f"{t.name} for {t.cost} gold" for t in potions)
    return [
        "=== AVAILABLE COMMANDS ===",
        "",
        "Movement:",
        "- In the village, choose 1-4 to travel to locations",
        "- Return options send you back to the village",
        "",
        "Battle Information:",
        "- You need a weapon to win battles",
        "- Weapons deal damage; armor reduces incoming damage",
        "- Monsters appear in the forest",
        "- The Dragon lives in the mountains (boss battle)",
        "",
        "Equipment Progression:",
        "- Steel Sword is stronger than Sword",
        "- Iron Shield protects more than Wooden Shield",
        "- Dragon tip: Bring a Steel Sword and any armor",
        "",
        "Shopping:",
        f"- Market sells {market_line}",
        "- Blacksmith sells weapons & shields: " + ", ".join(t.name for t in gear),
        "",
        "Other:",
        "- Status shows your health, gold, and auto-equipped best gear",
        "- Help shows this message",
        "- Quit ends the game",
        "",
        "Tips:",
        "- Keep potions for tough fights",
        "- Defeat monsters to earn gold",
        "- Health can't go above 100",
    ]
