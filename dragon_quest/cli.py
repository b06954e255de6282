"""Terminal shell for The Dragon's Quest.

Reads the player's name, prints the numbered menu for the current location,
validates the typed number and renders the engine's narrative lines.
All game rules live in ``dragon_quest.core``; this module only translates input.
"""

from typing import Callable, Optional

from rich.console import Console
from rich.panel import Panel

from dragon_quest.config import settings
from dragon_quest.core.actions import ActionResult, UseItem
from dragon_quest.core.engine import GameEngine
from dragon_quest.core.logging import get_logger, setup_logging
from dragon_quest.core.menu import build_menu, menu_lines, resolve_choice
from dragon_quest.core.player import GameStatus, PlayerState

logger = get_logger(__name__)

PLAYER_ID = "local"

InputFn = Callable[[str], str]


class InvalidInput(ValueError):
    """Raised when typed text is not a usable menu number."""


def parse_choice(raw: str, max_choice: int) -> int:
    """Validate a typed menu number. Raises InvalidInput with the message to show."""
    text = raw.strip()
    if text == "":
        raise InvalidInput("Please enter a number!")
    try:
        number = int(text)
    except ValueError:
        raise InvalidInput("That's not a number! Please enter a number.")
    if not 1 <= number <= max_choice:
        raise InvalidInput(f"Please enter a number between 1 and {max_choice}.")
    return number


class TerminalShell:
    """Read loop around a single-player GameEngine session."""

    def __init__(
        self,
        engine: Optional[GameEngine] = None,
        console: Optional[Console] = None,
        input_fn: Optional[InputFn] = None,
    ):
        self.engine = engine or GameEngine()
        self.console = console or Console()
        self.input_fn = input_fn or self.console.input

    def say(self, line: str = "") -> None:
        self.console.print(line, markup=False, highlight=False)

    def render(self, result: ActionResult) -> None:
        self.say()
        for line in result.lines:
            self.say(line)

    def show_location(self, player: PlayerState) -> None:
        self.say()
        for line in menu_lines(player.location, self.engine.registry):
            self.say(line)

    def read_choice(self, player: PlayerState) -> int:
        max_choice = len(build_menu(player.location, self.engine.registry))
        while True:
            raw = self.input_fn("\nEnter choice (number): ")
            try:
                return parse_choice(raw, max_choice)
            except InvalidInput as e:
                self.say(f"\nError: {e}")
                self.say("Please try again!")

    def ask_item_index(self, player: PlayerState) -> Optional[int]:
        """Returns a 0-based index, None for cancel or an empty pack."""
        if len(player.inventory) == 0:
            return None

        self.say()
        self.say("=== Inventory ===")
        for number, item in enumerate(player.inventory, start=1):
            self.say(f"{number}. {item.name}")

        raw = self.input_fn("Use which item? (number or 'cancel'): ").strip()
        if raw.lower() == "cancel":
            return None
        try:
            return int(raw) - 1
        except ValueError:
            # non-numeric: hand the engine an out-of-range index so it rejects it
            return len(player.inventory)

    def start(self) -> PlayerState:
        self.console.print(
            Panel.fit(settings.GAME_TITLE, style="bold"), justify="center"
        )
        self.say()
        self.say("Your quest: Defeat the dragon in the mountains!")
        name = self.input_fn("\nWhat is your name, brave adventurer? ").strip()
        player = self.engine.register_player(PLAYER_ID, name or "Adventurer")
        self.say()
        self.say(f"Welcome, {player.name}!")
        self.say(f"You start with {player.gold} gold.")
        return player

    def run(self) -> GameStatus:
        player = self.start()

        while not player.is_over:
            self.show_location(player)
            choice = self.read_choice(player)

            action = resolve_choice(player.location, choice, self.engine.registry)
            item_index = None
            if isinstance(action, UseItem):
                item_index = self.ask_item_index(player)

            result = self.engine.choose(player.player_id, choice, item_index)
            self.render(result)

        logger.info("Session finished: %s", player.status.value)
        return player.status


def main() -> int:
    setup_logging(settings.CLI_LOG_LEVEL)
    shell = TerminalShell()
    try:
        shell.run()
    except (KeyboardInterrupt, EOFError):
        shell.say()
        shell.say("Thanks for playing!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
