"""Outcome learning: nudge pattern memory toward lines seen in won/lost games."""

import logging
from typing import Optional

from tictactoe.core.board import Board, Player
from tictactoe.ai.memory import PatternMemory

logger = logging.getLogger(__name__)


class OutcomeLearner:
    def __init__(self, memory: PatternMemory) -> None:
        self.memory = memory

    def learn(self, board: Board, winner: Optional[Player]) -> None:
        """
        +1 for every line signature of a ROBO win, -1 for a HUMAN win.

        Lines sharing a signature are counted once per line. Draws are ignored.
        """
        if winner == Player.ROBO:
            delta = 1
        elif winner == Player.HUMAN:
            delta = -1
        else:
            return

        scores = self.memory.load()
        for line in board.lines():
            key = board.signature(line)
            scores[key] = scores.get(key, 0) + delta
        self.memory.save(scores)
        logger.info("Learned %s win on %dx%d (%d patterns)", winner.name, board.size, board.size, len(scores))
