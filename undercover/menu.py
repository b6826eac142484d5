"""The setup menu: player names and how roles are shared out."""

from __future__ import annotations

from collections.abc import Iterable

DEFAULT_NAMES = ("Player1", "Player2", "Player3")
NEW_PLAYER_NAME = "New Player"
MIN_PLAYERS = 3
MIN_CITIZENS = 2


class Menu:
    """Editable game setup; citizens fill whatever the other roles leave."""

    def __init__(self, names: Iterable[str] | None = None) -> None:
        self.names: list[str] = list(DEFAULT_NAMES if names is None else names)
        self.citizen = len(self.names) - 1
        self.undercover = 1
        self.white = False
        self.index = 0

    def add_undercover(self) -> None:
        if self.citizen > MIN_CITIZENS:
            self.undercover += 1
            self.citizen -= 1

    def remove_undercover(self) -> None:
        if self.undercover > 1:
            self.undercover -= 1
            self.citizen += 1

    def set_white(self, enable: bool) -> None:
        """Turn Mr. White on (taking a citizen's place) or off."""
        if enable:
            if self.citizen > MIN_CITIZENS:
                self.citizen -= 1
                self.white = True
        else:
            self.citizen += 1
            self.white = False

    def add_name(self) -> None:
        self.index = len(self.names)
        self.names.append(NEW_PLAYER_NAME)
        self.citizen += 1

    def remove_name(self, index: int) -> None:
        if len(self.names) > MIN_PLAYERS and 0 <= index < len(self.names):
            del self.names[index]
            if self.citizen < MIN_CITIZENS:
                self.undercover -= 1
            else:
                self.citizen -= 1

    def select(self, index: int) -> None:
        """Choose which name is being edited."""
        self.index = index

    def edit_name(self, name: str) -> None:
        self.names[self.index] = name

    def render(self) -> str:
        lines = [
            "Young New Undercover",
            f"Citizen: {self.citizen}",
            f"Undercover: {self.undercover}",
            f"Mr. White: {'yes' if self.white else 'no'}",
            "Players:",
        ]
        for number, name in enumerate(self.names, start=1):
            marker = ">" if number - 1 == self.index else " "
            lines.append(f" {marker} {number}. {name}")
        return "\n".join(lines)