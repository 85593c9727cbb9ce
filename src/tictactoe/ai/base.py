from __future__ import annotations
from typing import Protocol

from tictactoe.core.board import Board
from tictactoe.types import Mark, Position


class Agent(Protocol):
    name: str

    def choose_move(self, board: Board, mark: Mark) -> Position:
        ...
