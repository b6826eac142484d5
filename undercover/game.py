"""One round of Undercover: dealing roles, revealing words, voting."""

from __future__ import annotations

import enum
import random
from collections.abc import Mapping, Sequence
from os import PathLike

from .player import Player, Role

_MIN_ALIVE = 3


class GameState(enum.Enum):
    REVEAL = 0
    POLL = 1
    GUESS = 2


class WordFileError(Exception):
    """The word list could not be read or parsed."""


def load_word_pairs(path: str | PathLike[str]) -> list[tuple[str, str]]:
    """Read ``citizen:undercover`` pairs, one per line, skipping blank lines."""
    try:
        with open(path, encoding="utf-8") as handle:
            content = handle.read()
    except OSError as exc:
        raise WordFileError(f"Cannot open file '{path}': {exc}") from exc
    pairs = []
    for number, line in enumerate(content.splitlines()):
        if not line.strip():
            continue
        parts = line.split(":")
        if len(parts) < 2:
            raise WordFileError(f"Error parsing line {number}")
        pairs.append((parts[0], parts[1]))
    if not pairs:
        raise WordFileError(f"No word pairs in '{path}'")
    return pairs


def choose_words(
    pairs: Sequence[tuple[str, str]], rng: random.Random | None = None
) -> dict[Role, str]:
    """Pick one pair at random and map it to the roles that get a word."""
    if not pairs:
        raise WordFileError("No word pairs to choose from")
    citizen_word, undercover_word = (rng or random).choice(list(pairs))
    return {Role.CITIZEN: citizen_word, Role.UNDERCOVER: undercover_word}


class Game:
    """State of a single game, driven one player action at a time."""

    def __init__(
        self,
        names: Sequence[str],
        citizen: int,
        undercover: int,
        white: bool,
        words: Mapping[Role, str],
        rng: random.Random | None = None,
    ) -> None:
        if len(names) != citizen + undercover + int(white):
            raise ValueError(
                "There's a different amount of player and roles to attribute"
            )
        missing = {Role.CITIZEN, Role.UNDERCOVER} - set(words)
        if missing:
            raise ValueError(f"Missing words for {sorted(map(str, missing))}")

        self._rng = rng or random.Random()
        remaining = {Role.CITIZEN: citizen, Role.UNDERCOVER: undercover, Role.WHITE: int(white)}
        self.players: list[Player] = []
        for name in names:
            role = self._rng.choice([r for r, n in remaining.items() if n > 0])
            remaining[role] -= 1
            self.players.append(Player(name, role))

        speakers = [i for i, p in enumerate(self.players) if p.role is not Role.WHITE]
        if not speakers:
            raise ValueError("At least one player must hold a word")

        self.words = dict(words)
        self.state = GameState.REVEAL
        self.index = 0
        self.show = False
        self.first = self._rng.choice(speakers)
        self.over = False
        self.guess = ""
        self.winner = Role.CITIZEN

    def _check_game_over(self) -> None:
        if self.guess.lower() == self.words[Role.CITIZEN].lower():
            self.over = True
            self.winner = Role.WHITE

        alive = [p for p in self.players if p.alive]
        undercover_alive = any(p.role is Role.UNDERCOVER for p in alive)
        guessed = bool(self.guess)

        if not undercover_alive and guessed:
            self.over = True
            self.winner = Role.CITIZEN
        if undercover_alive and len(alive) < _MIN_ALIVE and guessed:
            self.over = True
            self.winner = Role.UNDERCOVER
        if len(alive) < _MIN_ALIVE and not guessed:
            self.over = True
            self.winner = Role.WHITE

    def reveal(self) -> None:
        self.show = True

    def next(self) -> None:
        """Hand over to the next player; after the last one, voting begins."""
        self.index += 1
        self.show = False
        if self.index > len(self.players) - 1:
            self.state = GameState.POLL

    def select_vote(self, index: int) -> None:
        if not 0 <= index < len(self.players):
            raise IndexError(f"No player at position {index}")
        self.index = index
        self.show = True

    def confirm(self, yes: bool) -> None:
        """Confirm or cancel eliminating the selected player."""
        if yes:
            player = self.players[self.index]
            player.alive = False
            if player.role is Role.WHITE:
                self.state = GameState.GUESS
            self._check_game_over()
            candidates = [
                i
                for i, p in enumerate(self.players)
                if p.alive or p.role is not Role.WHITE
            ]
            self.first = self._rng.choice(candidates)
        self.show = False

    def set_guess(self, word: str) -> None:
        self.guess = word

    def submit_guess(self) -> None:
        self._check_game_over()
        self.state = GameState.POLL

    def player_names(self) -> list[str]:
        return [p.name for p in self.players]

    def render(self) -> str:
        if self.over:
            if self.winner is Role.WHITE:
                headline = f"{self.winner} a gagné!"
            else:
                headline = f"Les {self.winner}s ont gagné!"
            lines = [
                headline,
                f"Le mot des CIVILs: {self.words[Role.CITIZEN]}",
                f"Le mot des UNDERCOVERs: {self.words[Role.UNDERCOVER]}",
            ]
        elif self.state is GameState.REVEAL:
            player = self.players[self.index]
            lines = [player.name]
            if self.show:
                if player.role is Role.WHITE:
                    lines.append("Tu es Mr. White")
                else:
                    lines.append(f"Ton mot est: {self.words[player.role]}")
        elif self.state is GameState.POLL:
            if self.show:
                lines = [f"Exclure {self.players[self.index].name}?"]
            else:
                lines = [f"{self.players[self.first].name} commence"]
                for number, player in enumerate(self.players, start=1):
                    status = "" if player.alive else f" - {player.role}"
                    lines.append(f"{number}. {player.name}{status}")
        else:
            lines = ["Devine le mot des CIVILs:", self.guess]
        return "\n".join(lines)