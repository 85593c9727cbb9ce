from __future__ import annotations

from tictactoe.core.board import Board
from tictactoe.types import Mark, Position
from tictactoe.ui.console import ConsoleIO


class HumanAgent:
    name = "Player"

    def __init__(self, io: ConsoleIO) -> None:
        self.io = io

    def choose_move(self, board: Board, mark: Mark) -> Position:
        return self.io.prompt_square_choice(board.unmarked_keys())
