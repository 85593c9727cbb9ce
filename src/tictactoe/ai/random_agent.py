from __future__ import annotations
import random
from typing import Optional

from tictactoe.core.board import Board
from tictactoe.types import Mark, Position


class RandomAgent:
    name = "Computer"

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng or random.Random()

    def choose_move(self, board: Board, mark: Mark) -> Position:
        moves = board.unmarked_keys()
        if not moves:
            raise ValueError("No valid moves.")
        return self.rng.choice(moves)
