"""Static evaluation of a non-terminal board (line patterns + learned memory)."""

from typing import Mapping, Optional, Sequence

from tictactoe.core.board import Board, Player
from tictactoe.ai.config import LINE_FULL_SCORE, LINE_PATTERN_BASE


def base_pattern_score(cells: Sequence[Player]) -> int:
    """
    Structural value of one line. Positive = good for ROBO.

    A line holding both marks is dead (0). A full line is worth
    +/-LINE_FULL_SCORE; otherwise k marks of one side with the rest
    empty score +/-3**k.
    """
    robo = sum(1 for c in cells if c == Player.ROBO)
    human = sum(1 for c in cells if c == Player.HUMAN)
    if robo and human:
        return 0
    # Unreachable from search: a full line is a win and is scored before evaluation.
    if robo == len(cells):
        return LINE_FULL_SCORE
    if human == len(cells):
        return -LINE_FULL_SCORE
    if robo:
        return LINE_PATTERN_BASE ** robo
    if human:
        return -(LINE_PATTERN_BASE ** human)
    return 0


class Heuristic:
    """Evaluates board state from ROBO's (maximizing) perspective."""

    def __init__(self, memory: Optional[Mapping[str, int]] = None) -> None:
        # Snapshot of the pattern memory taken once per move decision
        self.memory: Mapping[str, int] = memory if memory is not None else {}

    def evaluate(self, board: Board) -> int:
        """
        Sum over all lines of base pattern score plus learned delta.

        Args:
            board: Board to score.

        Returns:
            Heuristic score. Higher is better for ROBO.
        """
        score = 0
        for line in board.lines():
            score += base_pattern_score(board.line_cells(line))
            score += self.memory.get(board.signature(line), 0)
        return score


def evaluate(board: Board, memory: Optional[Mapping[str, int]] = None) -> int:
    return Heuristic(memory).evaluate(board)
