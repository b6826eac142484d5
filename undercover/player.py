"""Players and the roles they are dealt."""

from __future__ import annotations

import enum
from dataclasses import dataclass

MAX_NAME_BYTES = 30


class Role(enum.IntEnum):
    """The secret role a player holds."""

    CITIZEN = 0
    UNDERCOVER = 1
    WHITE = 2

    def __str__(self) -> str:
        return _LABELS[self]


_LABELS = {
    Role.CITIZEN: "CIVIL",
    Role.UNDERCOVER: "UNDERCOVER",
    Role.WHITE: "MR. WHITE",
}


@dataclass
class Player:
    """A named participant with a role, alive until voted out."""

    name: str
    role: Role
    alive: bool = True

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Name cannot be empty")
        if len(self.name.encode("utf-8")) > MAX_NAME_BYTES:
            raise ValueError(
                f"Name should be less than {MAX_NAME_BYTES} bytes long"
            )