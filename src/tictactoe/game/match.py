from __future__ import annotations

import logging
from typing import Dict, List, Optional

import pandas as pd

from tictactoe.ai.base import Agent
from tictactoe.ai.random_agent import RandomAgent
from tictactoe.config import COMPUTER_MARK, HUMAN_MARK
from tictactoe.core.board import Board
from tictactoe.game.player import Player
from tictactoe.game.results import RoundRecord, average_moves, summarize
from tictactoe.game.round import Round
from tictactoe.types import Mark
from tictactoe.ui.console import ConsoleIO
from tictactoe.ui.human import HumanAgent
from tictactoe.ui.render import ConsoleRenderer

log = logging.getLogger(__name__)


class Match:
    """
    Rounds played back to back with the same two players until the user
    declines to play again. There is no score limit.
    """

    def __init__(
        self,
        io: ConsoleIO,
        renderer: ConsoleRenderer,
        computer_agent: Optional[Agent] = None,
        human_agent: Optional[Agent] = None,
    ) -> None:
        self.io = io
        self.renderer = renderer
        self.human = Player(HUMAN_MARK, "Player")
        self.computer = Player(COMPUTER_MARK, "Computer")
        self.agents: Dict[Mark, Agent] = {
            self.human.mark: human_agent or HumanAgent(io),
            self.computer.mark: computer_agent or RandomAgent(),
        }
        self.board = Board()
        self.rounds: List[RoundRecord] = []

    def start_round(self) -> RoundRecord:
        number = len(self.rounds) + 1
        log.info("Starting round %d", number)

        rnd = Round(self.human, self.computer, self.agents, self.renderer, board=self.board)
        rnd.reset()
        outcome = rnd.start()

        record = RoundRecord(
            number=number,
            winner=outcome.winner,
            moves=rnd.moves,
            human_score=self.human.score,
            computer_score=self.computer.score,
        )
        self.rounds.append(record)
        return record

    def main_game(self) -> None:
        while True:
            self.start_round()
            self.io.prompt_continue()
            if not self.io.prompt_play_again():
                break
            self.renderer.display_play_again()

    def summary(self) -> pd.DataFrame:
        labels = {
            self.human.mark: f"{self.human.name} ({self.human.mark})",
            self.computer.mark: f"{self.computer.name} ({self.computer.mark})",
        }
        return summarize(self.rounds, labels)

    def play(self) -> None:
        self.renderer.display_welcome()
        self.main_game()
        log.info(
            "Match over after %d rounds (%d-%d)",
            len(self.rounds),
            self.human.score,
            self.computer.score,
        )
        self.renderer.display_goodbye(self.summary(), average_moves(self.rounds))
