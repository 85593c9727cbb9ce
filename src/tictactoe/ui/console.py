from __future__ import annotations
from typing import Callable, Optional, Sequence

from tictactoe.types import Position
from tictactoe.ui.prompts import joinor, parse_square, parse_yes_no


class ConsoleIO:
    """
    Blocking prompts on stdin. Invalid answers are reported and asked
    again; EOFError from ``input`` is left to the caller.
    """

    def __init__(
        self,
        read: Optional[Callable[[str], str]] = None,
        write: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.read = read if read is not None else input
        self.write = write if write is not None else print

    def prompt_square_choice(self, valid: Sequence[Position]) -> Position:
        self.write(f"Choose a square between ({joinor(valid)}):")
        while True:
            try:
                return parse_square(self.read(""), valid)
            except ValueError as e:
                self.write(str(e))

    def prompt_play_again(self) -> bool:
        while True:
            self.write("Would you like to play again? (y/n)")
            try:
                return parse_yes_no(self.read(""))
            except ValueError as e:
                self.write(str(e))

    def prompt_continue(self) -> None:
        self.read("Press enter to continue ")
