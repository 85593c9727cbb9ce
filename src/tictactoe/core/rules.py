from __future__ import annotations
from dataclasses import dataclass
from typing import Literal, Optional, Tuple

from tictactoe.core.board import Board
from tictactoe.types import Mark

Status = Literal["in_progress", "won", "tied"]


@dataclass(frozen=True, slots=True)
class Outcome:
    status: Status
    winner: Optional[Mark] = None
    line: Optional[Tuple[int, int, int]] = None

    @property
    def terminal(self) -> bool:
        return self.status != "in_progress"


IN_PROGRESS = Outcome("in_progress")
TIED = Outcome("tied")


def other(mark: Mark) -> Mark:
    return "O" if mark == "X" else "X"


def evaluate(board: Board) -> Outcome:
    w = board.winning_line()
    if w is not None:
        mark, line = w
        return Outcome("won", winner=mark, line=line)
    if board.full():
        return TIED
    return IN_PROGRESS
