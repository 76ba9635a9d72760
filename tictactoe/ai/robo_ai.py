import logging
import math
import random
from typing import List, Optional, Tuple

from tictactoe.core.board import Board, Player
from tictactoe.ai.config import AILevelConfig, level_config
from tictactoe.ai.heuristics import Heuristic
from tictactoe.ai.memory import PatternMemory
from tictactoe.ai.minimax import MinimaxSearch

logger = logging.getLogger(__name__)


class RoboAI:
    """
    Computer opponent: alpha-beta search with deliberate mistakes.

    The level only changes search depth on 3x3 boards; on every size it
    lowers the chance of a random (mistake) move.
    """

    def __init__(
        self,
        memory: Optional[PatternMemory] = None,
        rng: Optional[random.Random] = None,
        mistakes: bool = True,
    ) -> None:
        self.memory = memory if memory is not None else PatternMemory()
        self.rng = rng if rng is not None else random.Random()
        self.mistakes = mistakes
        self.nodes_explored = 0

    def choose_move(self, board: Board, level: int) -> Optional[int]:
        """
        Pick a cell for ROBO.

        Returns:
            Board index, or None when no empty cell is left.
        """
        empty = board.empty_cells()
        if not empty:
            return None

        cfg = level_config(board.size, level)

        if self.mistakes and self.rng.random() < cfg.mistake_chance:
            move = self.rng.choice(empty)
            logger.debug("Mistake move %d (chance %.2f)", move, cfg.mistake_chance)
            return move

        best_score, best_moves = self.best_moves(board, cfg)
        move = self.rng.choice(best_moves)
        logger.debug(
            "Move %d score=%s ties=%s depth=%d nodes=%d",
            move, best_score, best_moves, cfg.max_depth, self.nodes_explored,
        )
        return move

    def best_moves(self, board: Board, cfg: AILevelConfig) -> Tuple[float, List[int]]:
        """Score every empty cell; return the best score and all cells reaching it."""
        search = MinimaxSearch(Heuristic(self.memory.load()))
        best_score = -math.inf
        best_moves: List[int] = []

        for index in board.empty_cells():
            child = board.place(index, Player.ROBO)
            score = search.search(child, cfg.max_depth, -math.inf, math.inf, False)
            if score > best_score:
                best_score = score
                best_moves = [index]
            elif score == best_score:
                best_moves.append(index)

        self.nodes_explored = search.nodes_explored
        return best_score, best_moves
