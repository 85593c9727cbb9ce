from __future__ import annotations

import itertools
import sys
import time
from typing import Iterable, Optional, Set

import pandas as pd

from tictactoe.config import AI_THINK_DELAY_SEC, AI_THINKING_SPINNER, CLEAR_SCREEN, USE_COLOR
from tictactoe.core.board import Board
from tictactoe.core.rules import Outcome
from tictactoe.game.player import Player
from tictactoe.ui.colors import BOLD, DIM, FG_CYAN, FG_GRAY, FG_GREEN, FG_RED, FG_YELLOW, REVERSE, RESET, c

ROW_SEPARATOR = "-----+-----+-----"
SPACER = "     |     |"
SPINNER_FRAMES = "|/-\\"
SPINNER_TICK_SEC = 0.08


class ConsoleRenderer:
    def __init__(
        self,
        use_color: bool = USE_COLOR,
        clear_screen: bool = CLEAR_SCREEN,
        think_delay_sec: float = AI_THINK_DELAY_SEC,
        spinner: bool = AI_THINKING_SPINNER,
    ) -> None:
        self.use_color = use_color
        self.clear_screen = clear_screen
        self.think_delay_sec = think_delay_sec
        self.spinner = spinner

    def _c(self, s: str, code: str) -> str:
        return c(s, code, self.use_color)

    def _square(self, board: Board, position: int, hl: Set[int]) -> str:
        mark = board.mark_at(position)
        if mark is None:
            # show the square number so players know what to type
            return self._c(str(position), FG_GRAY)
        s = self._c(mark, FG_RED if mark == "X" else FG_YELLOW)
        if position in hl and self.use_color:
            s = f"{REVERSE}{s}{RESET}"
        return s

    def clear(self) -> None:
        if self.clear_screen:
            print("\033[2J\033[H", end="")

    def draw(self, board: Board, highlight: Optional[Iterable[int]] = None) -> None:
        hl: Set[int] = set(highlight) if highlight else set()
        for start in (1, 4, 7):
            if start != 1:
                print(self._c(ROW_SEPARATOR, DIM))
            cells = [self._square(board, p, hl) for p in (start, start + 1, start + 2)]
            print(self._c(SPACER, DIM))
            print("  " + "  |  ".join(cells))
            print(self._c(SPACER, DIM))

    def display_board(
        self,
        board: Board,
        human: Player,
        computer: Player,
        highlight: Optional[Iterable[int]] = None,
    ) -> None:
        self.clear()
        print(self._c(f"You're a {human.mark}. {computer.name} is a {computer.mark}.", FG_CYAN))
        print()
        self.draw(board, highlight)
        print()

    def display_score(self, human: Player, computer: Player) -> None:
        print(self._c("- - - Score Board - - -", BOLD))
        print(f"{human.name}: {human.score}, {computer.name}: {computer.score}")
        print(self._c("- - - - - - - - - - - -", BOLD))

    def display_result(self, outcome: Outcome, human: Player, computer: Player) -> None:
        if outcome.winner == human.mark:
            print(self._c("You won!", FG_GREEN))
        elif outcome.winner == computer.mark:
            print(self._c(f"{computer.name} won!", FG_RED))
        else:
            print(self._c("It's a tie!", FG_YELLOW))

    def display_welcome(self) -> None:
        self.clear()
        print(self._c("Welcome to Tic Tac Toe!", BOLD))
        print()

    def display_play_again(self) -> None:
        print("Let's play again!")
        print()

    def display_goodbye(
        self,
        summary: Optional[pd.DataFrame] = None,
        average_moves: Optional[float] = None,
    ) -> None:
        if summary is not None and not summary.empty:
            print()
            print(self._c("=== Match summary ===", BOLD))
            print(summary.to_string())
            if average_moves:
                print(self._c(f"Average moves per round: {average_moves:.1f}", DIM))
            print()
        print("Thanks for playing Tic Tac Toe! Goodbye!")

    def computer_thinking(self, name: str) -> None:
        """
        Pause before the computer moves, spinning on stdout unless the
        spinner is off.
        """
        if self.think_delay_sec <= 0:
            return
        if not self.spinner:
            time.sleep(self.think_delay_sec)
            return

        label = f"{name} is thinking..."
        frames = itertools.cycle(SPINNER_FRAMES)
        deadline = time.monotonic() + self.think_delay_sec
        while time.monotonic() < deadline:
            sys.stdout.write(f"\r{label} {next(frames)}")
            sys.stdout.flush()
            time.sleep(SPINNER_TICK_SEC)
        sys.stdout.write("\r" + " " * (len(label) + 2) + "\r")
        sys.stdout.flush()
