from __future__ import annotations
from dataclasses import dataclass

from tictactoe.types import Mark


@dataclass(slots=True)
class Player:
    mark: Mark
    name: str = ""
    score: int = 0

    def __post_init__(self) -> None:
        if not self.name:
            self.name = f"Player {self.mark}"
