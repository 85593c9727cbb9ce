# src/tictactoe/config.py

from __future__ import annotations

HUMAN_MARK = "X"
COMPUTER_MARK = "O"
FIRST_TO_MOVE = "X"

POSITIONS = (1, 2, 3, 4, 5, 6, 7, 8, 9)

WINNING_LINES = (
    (1, 2, 3), (4, 5, 6), (7, 8, 9),  # rows
    (1, 4, 7), (2, 5, 8), (3, 6, 9),  # cols
    (1, 5, 9), (3, 5, 7),             # diagonals
)

# UI toggles
USE_COLOR = True
CLEAR_SCREEN = True

# “Computer thinking” effect
AI_THINKING_SPINNER = True
AI_THINK_DELAY_SEC = 0.6  # short pause so computer moves aren’t instant

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
