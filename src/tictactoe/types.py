# src/tictactoe/types.py

from __future__ import annotations
from typing import Literal, Optional, NewType

Mark = Literal["X", "O"]
Cell = Optional[Mark]
Position = NewType("Position", int)   # square number 1..9, row-major
