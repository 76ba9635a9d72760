from __future__ import annotations

import logging
from typing import Optional

from tictactoe.core.board import Player
from tictactoe.core.game import Game, GameOutcome
from tictactoe.core.move import MoveResult
from tictactoe.ai.config import BOARD_SIZES, MAX_LEVEL, MIN_LEVEL
from tictactoe.ai.learner import OutcomeLearner
from tictactoe.ai.robo_ai import RoboAI

logger = logging.getLogger(__name__)


class Match:
    """
    A series of rounds against the robo.

    - Human moves first every round.
    - A finished round with a winner is learned from exactly once.
    - Each human win raises the level by one (up to MAX_LEVEL).
    - reset_all() and change_size() put the level back to MIN_LEVEL.
    """

    def __init__(self, ai: RoboAI, learner: OutcomeLearner, *, size: int = 3, level: int = MIN_LEVEL) -> None:
        if size not in BOARD_SIZES:
            raise ValueError(f"size must be one of {BOARD_SIZES}")
        if not MIN_LEVEL <= level <= MAX_LEVEL:
            raise ValueError(f"level must be in {MIN_LEVEL}..{MAX_LEVEL}")
        self.ai = ai
        self.learner = learner
        self.game = Game(board_size=size, starting_player=Player.HUMAN)
        self.level = level
        self._finished: Optional[GameOutcome] = None

    @property
    def size(self) -> int:
        return self.game.size

    @property
    def finished(self) -> Optional[GameOutcome]:
        return self._finished

    # ---------- Moves ----------

    def play_human(self, index: int) -> MoveResult:
        if self.game.current_player != Player.HUMAN and not self.game.is_game_over():
            return MoveResult.fail("Not your turn.")
        result = self.game.make_move(index)
        if result.success:
            self._check_finished()
        return result

    def play_robo(self) -> Optional[int]:
        """Let the robo move. Returns the chosen index or None if it could not move."""
        if self.game.is_game_over() or self.game.current_player != Player.ROBO:
            return None
        index = self.ai.choose_move(self.game.board, self.level)
        if index is None:
            return None
        result = self.game.make_move(index)
        if not result.success:
            logger.error("Robo picked an invalid cell %d: %s", index, result.error_message)
            return None
        self._check_finished()
        return index

    # ---------- Round end ----------

    def _check_finished(self) -> None:
        if self._finished is not None:
            return
        outcome = self.game.outcome()
        if outcome is None:
            return
        self._finished = outcome
        if outcome != GameOutcome.DRAW:
            self.learner.learn(self.game.board, self.game.winner)
        if outcome == GameOutcome.HUMAN_WIN:
            self.level = min(self.level + 1, MAX_LEVEL)
            logger.info("Human won; level is now %d", self.level)

    def next_round(self) -> None:
        self.game.reset()
        self._finished = None

    def reset_all(self) -> None:
        self.next_round()
        self.level = MIN_LEVEL

    def change_size(self, size: int) -> None:
        if size not in BOARD_SIZES:
            raise ValueError(f"size must be one of {BOARD_SIZES}")
        self.game.reset(board_size=size)
        self._finished = None
        self.level = MIN_LEVEL
