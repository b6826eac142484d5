"""Text front end tying the setup menu and the game together."""

from __future__ import annotations

import argparse
import enum
import random
import sys
from collections.abc import Sequence
from pathlib import Path

from .game import Game, GameState, WordFileError, choose_words, load_word_pairs
from .menu import Menu

_MENU_HELP = "Commands: + | - | white on|off | add | remove N | edit N | name TEXT | ok | quit"
_HELP = {
    GameState.REVEAL: "Commands: reveal | next | quit",
    GameState.POLL: "Commands: vote N | yes | no | quit",
    GameState.GUESS: "Commands: guess WORD | quit",
}
_OVER_HELP = "Commands: menu | quit"


class AppState(enum.Enum):
    MENU = 0
    GAME = 1


def _position(arg: str, count: int) -> int:
    try:
        number = int(arg)
    except ValueError:
        raise ValueError(f"Expected a player number, got {arg!r}") from None
    if not 1 <= number <= count:
        raise ValueError(f"Player number must be between 1 and {count}")
    return number - 1


class Application:
    """Switches between the menu and a running game."""

    def __init__(
        self,
        word_pairs: Sequence[tuple[str, str]],
        rng: random.Random | None = None,
    ) -> None:
        self.word_pairs = list(word_pairs)
        self.rng = rng or random.Random()
        self.state = AppState.MENU
        self.menu = Menu()
        self.game: Game | None = None

    def start_game(self) -> None:
        menu = self.menu
        self.game = Game(
            list(menu.names),
            menu.citizen,
            menu.undercover,
            menu.white,
            choose_words(self.word_pairs, self.rng),
            self.rng,
        )
        self.state = AppState.GAME

    def back_to_menu(self) -> None:
        if self.game is not None:
            self.menu = Menu(self.game.player_names())
        self.state = AppState.MENU

    def render(self) -> str:
        if self.state is AppState.MENU or self.game is None:
            return f"{self.menu.render()}\n{_MENU_HELP}"
        help_line = _OVER_HELP if self.game.over else _HELP[self.game.state]
        return f"{self.game.render()}\n{help_line}"

    def handle(self, command: str) -> bool:
        """Apply one typed command; return False when the user quits."""
        verb, _, arg = command.strip().partition(" ")
        verb, arg = verb.lower(), arg.strip()
        if verb == "quit":
            return False
        if self.state is AppState.MENU or self.game is None:
            self._handle_menu(verb, arg)
        else:
            self._handle_game(self.game, verb, arg)
        return True

    def _handle_menu(self, verb: str, arg: str) -> None:
        menu = self.menu
        if verb == "+":
            menu.add_undercover()
        elif verb == "-":
            menu.remove_undercover()
        elif verb == "white" and arg in ("on", "off"):
            menu.set_white(arg == "on")
        elif verb == "add":
            menu.add_name()
        elif verb == "remove":
            menu.remove_name(_position(arg, len(menu.names)))
        elif verb == "edit":
            menu.select(_position(arg, len(menu.names)))
        elif verb == "name":
            menu.edit_name(arg)
        elif verb == "ok":
            self.start_game()
        else:
            raise ValueError(f"Unknown command: {verb} {arg}".rstrip())

    def _handle_game(self, game: Game, verb: str, arg: str) -> None:
        if game.over:
            allowed = {"menu"}
        else:
            allowed = {
                GameState.REVEAL: {"next"} if game.show else {"reveal"},
                GameState.POLL: {"yes", "no"} if game.show else {"vote"},
                GameState.GUESS: {"guess"},
            }[game.state]
        if verb not in allowed:
            raise ValueError(f"Command not available now: {verb}")
        if verb == "menu":
            self.back_to_menu()
        elif verb == "reveal":
            game.reveal()
        elif verb == "next":
            game.next()
        elif verb == "vote":
            game.select_vote(_position(arg, len(game.players)))
        elif verb in ("yes", "no"):
            game.confirm(verb == "yes")
        else:
            game.set_guess(arg)
            game.submit_guess()


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="undercover", description="Play Undercover around one screen."
    )
    parser.add_argument(
        "--words", type=Path, default=Path("undercover.txt"),
        help="file of citizen:undercover word pairs",
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    try:
        pairs = load_word_pairs(args.words)
    except WordFileError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    app = Application(pairs, random.Random(args.seed))
    while True:
        print(app.render())
        try:
            line = input("> ")
        except EOFError:
            return 0
        try:
            if not app.handle(line):
                return 0
        except (ValueError, IndexError) as exc:
            print(f"error: {exc}")