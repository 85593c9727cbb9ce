from __future__ import annotations

from typing import Iterable, List

from tictactoe.core.board import Board
from tictactoe.types import Position
from tictactoe.ui.render import ConsoleRenderer

# X O X / X O O / O X X, no three in a row
TIE_MOVES = [(1, "X"), (2, "O"), (3, "X"), (5, "O"), (4, "X"), (6, "O"), (8, "X"), (7, "O"), (9, "X")]


def board_with(moves) -> Board:
    b = Board()
    for pos, mark in moves:
        b.place(pos, mark)
    return b


def quiet_renderer() -> ConsoleRenderer:
    return ConsoleRenderer(use_color=False, clear_screen=False, think_delay_sec=0)


class ScriptedAgent:
    """Plays a fixed list of squares, in order."""

    def __init__(self, name: str, moves: Iterable[int]) -> None:
        self.name = name
        self.moves: List[int] = list(moves)
        self.seen: List[List[Position]] = []

    def choose_move(self, board: Board, mark: str) -> Position:
        self.seen.append(board.unmarked_keys())
        return Position(self.moves.pop(0))


class ScriptedIO:
    def __init__(self, play_again: Iterable[bool]) -> None:
        self.answers = list(play_again)
        self.continues = 0

    def prompt_square_choice(self, valid):
        raise AssertionError("human moves are scripted")

    def prompt_continue(self) -> None:
        self.continues += 1

    def prompt_play_again(self) -> bool:
        return self.answers.pop(0)
