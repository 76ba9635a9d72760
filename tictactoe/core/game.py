# game.py
from __future__ import annotations

from enum import Enum
from typing import Optional

from tictactoe.core.board import Board, Player
from tictactoe.core.move import MoveResult


class GameOutcome(Enum):
    HUMAN_WIN = "human_win"
    ROBO_WIN = "robo_win"
    DRAW = "draw"


class Game:
    """
    One round on an N x N board.

    Owns:
      - Board (replaced on every move, never mutated)
      - Current turn

    The human always moves first. The round ends on the first full line
    or when the board fills up.
    """

    def __init__(self, board_size: int = 3, starting_player: Player = Player.HUMAN) -> None:
        self.board = Board(board_size)
        self.starting_player: Player = starting_player
        self.current_player: Player = starting_player

    # -------------------------
    # State helpers
    # -------------------------

    @property
    def size(self) -> int:
        return self.board.size

    @property
    def winner(self) -> Optional[Player]:
        return self.board.winner()

    def is_draw(self) -> bool:
        return self.board.is_draw()

    def is_game_over(self) -> bool:
        return self.winner is not None or self.board.is_full()

    def outcome(self) -> Optional[GameOutcome]:
        """Outcome of a finished round, None while it is still running."""
        w = self.winner
        if w == Player.HUMAN:
            return GameOutcome.HUMAN_WIN
        if w == Player.ROBO:
            return GameOutcome.ROBO_WIN
        if self.board.is_full():
            return GameOutcome.DRAW
        return None

    # -------------------------
    # Move / validation
    # -------------------------

    def make_move(self, index: int) -> MoveResult:
        """
        Place the current player's mark at `index`.

        Returns:
            MoveResult (success, error_message, is_winning_move)
        """
        if self.is_game_over():
            return MoveResult.fail("Game is over.")
        if not self.board.in_bounds(index):
            return MoveResult.fail(f"Out of bounds: {index}")
        if not self.board.is_empty(index):
            return MoveResult.fail("Cell is already taken.")

        player = self.current_player
        self.board = self.board.place(index, player)

        if self.board.winner() == player:
            return MoveResult.ok(is_winning_move=True)

        self.switch_player()
        return MoveResult.ok()

    def switch_player(self) -> None:
        self.current_player = self.current_player.opponent()

    # -------------------------
    # Reset
    # -------------------------

    def reset(self, board_size: Optional[int] = None) -> None:
        """Start a fresh round, optionally on a different board size."""
        self.board = Board(board_size or self.board.size)
        self.current_player = self.starting_player
