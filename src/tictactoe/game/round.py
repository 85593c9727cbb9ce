from __future__ import annotations

import logging
from typing import Dict, Mapping, Optional

from tictactoe.ai.base import Agent
from tictactoe.config import FIRST_TO_MOVE
from tictactoe.core.board import Board
from tictactoe.core.rules import IN_PROGRESS, Outcome, evaluate, other
from tictactoe.game.player import Player
from tictactoe.types import Mark
from tictactoe.ui.render import ConsoleRenderer

log = logging.getLogger(__name__)


class Round:
    """
    One game from an empty board to a win or a tie.

    The two players are borrowed from the match so their scores carry over;
    the board may be shared too and is reset by ``reset``.
    """

    def __init__(
        self,
        human: Player,
        computer: Player,
        agents: Mapping[Mark, Agent],
        renderer: ConsoleRenderer,
        board: Optional[Board] = None,
    ) -> None:
        self.human = human
        self.computer = computer
        self.agents = agents
        self.renderer = renderer
        self.board = board if board is not None else Board()
        self.current_mark: Mark = FIRST_TO_MOVE
        self.moves = 0
        self.outcome: Outcome = IN_PROGRESS

    @property
    def players(self) -> Dict[Mark, Player]:
        return {self.human.mark: self.human, self.computer.mark: self.computer}

    def human_turn(self) -> bool:
        return self.current_mark == self.human.mark

    def display_board(self) -> None:
        self.renderer.display_board(self.board, self.human, self.computer, highlight=self.outcome.line)

    def current_player_moves(self) -> None:
        mark = self.current_mark
        agent = self.agents[mark]

        if not self.human_turn():
            self.renderer.computer_thinking(agent.name)

        position = agent.choose_move(self.board, mark)
        self.board.place(position, mark)
        self.moves += 1
        log.debug("%s placed %s on square %d", agent.name, mark, int(position))

        self.current_mark = other(mark)

    def player_move(self) -> Outcome:
        while True:
            self.current_player_moves()
            self.outcome = evaluate(self.board)
            if self.outcome.terminal:
                return self.outcome
            if self.human_turn():
                self.display_board()

    def update_score(self) -> None:
        winner = self.outcome.winner
        if winner is None:
            return
        self.players[winner].score += 1

    def start(self) -> Outcome:
        self.display_board()
        self.player_move()
        self.display_board()
        self.renderer.display_result(self.outcome, self.human, self.computer)
        self.update_score()
        self.renderer.display_score(self.human, self.computer)
        log.info(
            "Round over after %d moves: %s",
            self.moves,
            f"{self.outcome.winner} won" if self.outcome.winner else "tie",
        )
        return self.outcome

    def reset(self) -> None:
        self.board.reset()
        self.current_mark = FIRST_TO_MOVE
        self.moves = 0
        self.outcome = IN_PROGRESS
