from __future__ import annotations
from dataclasses import dataclass

@dataclass
class MoveResult:
    """Result of executing a move."""
    success: bool
    is_winning_move: bool = False
    error_message: str = ""

    @staticmethod
    def ok(*, is_winning_move: bool = False) -> "MoveResult":
        return MoveResult(
            success=True,
            is_winning_move=is_winning_move,
            error_message="",
        )

    @staticmethod
    def fail(msg: str) -> "MoveResult":
        return MoveResult(
            success=False,
            is_winning_move=False,
            error_message=msg,
        )
