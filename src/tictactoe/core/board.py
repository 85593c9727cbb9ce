
# src/tictactoe/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from tictactoe.config import POSITIONS, WINNING_LINES
from tictactoe.types import Cell, Mark, Position

Line = Tuple[int, int, int]


@dataclass(slots=True)
class Square:
    mark: Cell = None

    def unmarked(self) -> bool:
        return self.mark is None

    def marked(self) -> bool:
        return self.mark is not None


@dataclass(slots=True)
class Board:
    squares: Dict[int, Square] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.squares:
            self.reset()
        elif set(self.squares) != set(POSITIONS):
            raise ValueError("Board needs exactly one square per position 1..9.")

    def reset(self) -> None:
        self.squares = {p: Square() for p in POSITIONS}

    def mark_at(self, position: int) -> Cell:
        return self.squares[position].mark

    def place(self, position: Position, mark: Mark) -> None:
        p = int(position)
        if p not in self.squares:
            raise ValueError(f"Square must be between {POSITIONS[0]} and {POSITIONS[-1]}.")
        if self.squares[p].marked():
            raise ValueError(f"Square {p} is already taken.")
        self.squares[p].mark = mark

    def unmarked_keys(self) -> List[Position]:
        return [Position(p) for p, sq in self.squares.items() if sq.unmarked()]

    def full(self) -> bool:
        return not self.unmarked_keys()

    def winning_line(self) -> Optional[Tuple[Mark, Line]]:
        """
        First line (rows, then columns, then diagonals) holding three
        identical marks, together with that mark.
        """
        for line in WINNING_LINES:
            marks = [self.squares[p].mark for p in line if self.squares[p].marked()]
            if len(marks) != 3:
                continue
            if marks[0] == marks[1] == marks[2]:
                return marks[0], line
        return None

    def winning_mark(self) -> Optional[Mark]:
        res = self.winning_line()
        return res[0] if res else None

    def someone_won(self) -> bool:
        return self.winning_mark() is not None
