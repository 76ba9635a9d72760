"""Minimax with Alpha-Beta pruning over immutable board snapshots."""

import math

from tictactoe.core.board import Board, Player
from tictactoe.ai.config import WIN_SCORE
from tictactoe.ai.heuristics import Heuristic


class MinimaxSearch:
    """Depth-bounded alpha-beta search. ROBO maximizes, HUMAN minimizes."""

    def __init__(self, heuristic: Heuristic) -> None:
        self.heuristic = heuristic
        self.nodes_explored = 0

    def search(
        self,
        board: Board,
        depth: int,
        alpha: float = -math.inf,
        beta: float = math.inf,
        maximizing: bool = True,
    ) -> float:
        """
        Score `board` with `depth` plies of lookahead.

        Returns:
            +WIN_SCORE / -WIN_SCORE for decided boards, otherwise the best
            reachable heuristic value for the side to move.
        """
        self.nodes_explored += 1

        w = board.winner()
        if w == Player.ROBO:
            return WIN_SCORE
        if w == Player.HUMAN:
            return -WIN_SCORE
        if depth == 0 or board.is_full():
            return self.heuristic.evaluate(board)

        if maximizing:
            value = -math.inf
            for index in board.empty_cells():
                child = board.place(index, Player.ROBO)
                value = max(value, self.search(child, depth - 1, alpha, beta, False))
                alpha = max(alpha, value)
                if alpha >= beta:
                    break
            return value

        value = math.inf
        for index in board.empty_cells():
            child = board.place(index, Player.HUMAN)
            value = min(value, self.search(child, depth - 1, alpha, beta, True))
            beta = min(beta, value)
            if beta <= alpha:
                break
        return value
