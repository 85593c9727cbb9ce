from __future__ import annotations
from typing import Sequence

from tictactoe.types import Position

YES = {"y"}
NO = {"n"}


def joinor(items: Sequence[object], delimiter: str = ", ", word: str = "or") -> str:
    """
    Join items for a prompt: ``1, 2, or 3`` / ``1 or 2`` / ``1``.
    """
    parts = [str(i) for i in items]
    if not parts:
        return ""
    if len(parts) == 1:
        return parts[0]
    if len(parts) == 2:
        return f" {word} ".join(parts)
    return delimiter.join(parts[:-1] + [f"{word} {parts[-1]}"])


def parse_square(raw: str, valid: Sequence[int]) -> Position:
    s = raw.strip()
    if not (s.isascii() and s.isdigit()) or int(s) not in valid:
        raise ValueError("Sorry, that's not a valid choice.")
    return Position(int(s))


def parse_yes_no(raw: str) -> bool:
    s = raw.strip().lower()
    if s in YES:
        return True
    if s in NO:
        return False
    raise ValueError("Sorry, must be y or n")
