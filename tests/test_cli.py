"""Tests for the terminal shell."""

import io

import pytest
from rich.console import Console

from dragon_quest import cli
from dragon_quest.cli import InvalidInput, TerminalShell, parse_choice
from dragon_quest.core.engine import GameEngine
from dragon_quest.core.player import GameStatus


def _shell(engine: GameEngine, answers: list[str]) -> tuple[TerminalShell, io.StringIO]:
    """Shell that reads scripted answers and writes to a buffer."""
    buffer = io.StringIO()
    console = Console(file=buffer, width=200, color_system=None)
    pending = iter(answers)
    shell = TerminalShell(engine=engine, console=console, input_fn=lambda _: next(pending))
    return shell, buffer


class TestParseChoice:
    def test_valid(self):
        assert parse_choice(" 3 ", 8) == 3

    @pytest.mark.parametrize(
        "raw, message",
        [
            ("", "Please enter a number!"),
            ("   ", "Please enter a number!"),
            ("abc", "That's not a number! Please enter a number."),
            ("0", "Please enter a number between 1 and 8."),
            ("9", "Please enter a number between 1 and 8."),
        ],
    )
    def test_invalid(self, raw, message):
        with pytest.raises(InvalidInput) as exc_info:
            parse_choice(raw, 8)
        assert str(exc_info.value) == message


class TestTerminalShell:
    def test_quit_after_bad_input(self, engine: GameEngine):
        shell, buffer = _shell(engine, ["Aria", "abc", "9", "8"])

        assert shell.run() == GameStatus.QUIT

        output = buffer.getvalue()
        assert "Welcome, Aria!" in output
        assert "You start with 20 gold." in output
        assert "=== VILLAGE ===" in output
        assert "Error: That's not a number! Please enter a number." in output
        assert "Error: Please enter a number between 1 and 8." in output
        assert output.count("Please try again!") == 2
        assert "Thanks for playing!" in output

    def test_blank_name_gets_default(self, engine: GameEngine):
        shell, _ = _shell(engine, ["", "8"])
        shell.run()
        assert engine.get_player(cli.PLAYER_ID).name == "Adventurer"

    def test_buy_and_drink_potion(self, engine: GameEngine):
        # market → buy potion → use item #1 → quit
        shell, buffer = _shell(engine, ["Aria", "2", "1", "4", "1", "6"])
        shell.run()

        player = engine.get_player(cli.PLAYER_ID)
        assert player.gold == 15
        assert len(player.inventory) == 0
        output = buffer.getvalue()
        assert "You bought a Health Potion!" in output
        assert "=== Inventory ===" in output
        assert "You're at full health!" in output

    def test_use_item_cancel(self, engine: GameEngine):
        shell, buffer = _shell(engine, ["Aria", "2", "1", "4", "cancel", "6"])
        shell.run()

        assert len(engine.get_player(cli.PLAYER_ID).inventory) == 1
        assert "You close your pack." in buffer.getvalue()

    def test_use_item_garbage_rejected(self, engine: GameEngine):
        shell, buffer = _shell(engine, ["Aria", "2", "1", "4", "potion", "6"])
        shell.run()

        assert len(engine.get_player(cli.PLAYER_ID).inventory) == 1
        assert "Invalid item number!" in buffer.getvalue()

    def test_use_item_empty_pack(self, engine: GameEngine):
        shell, buffer = _shell(engine, ["Aria", "6", "8"])
        shell.run()
        assert "You have no items!" in buffer.getvalue()

    def test_defeat_ends_loop(self, engine: GameEngine):
        # 무기 없이 숲 진입 5회 → 체력 0
        answers = ["Aria"]
        for _ in range(5):
            answers += ["3", "1"]
        shell, buffer = _shell(engine, answers[:-1])

        assert shell.run() == GameStatus.DEFEAT
        assert "Game Over! Your health reached 0!" in buffer.getvalue()


def test_main_handles_interrupt(monkeypatch: pytest.MonkeyPatch) -> None:
    def interrupted(self):
        raise KeyboardInterrupt

    monkeypatch.setattr(TerminalShell, "run", interrupted)
    assert cli.main() == 0
