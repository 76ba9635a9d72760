"""
Tests for the alpha-beta search.
"""

import math

import pytest

from tictactoe.core.board import Board, Player
from tictactoe.ai.config import WIN_SCORE
from tictactoe.ai.heuristics import Heuristic
from tictactoe.ai.minimax import MinimaxSearch


def plain_minimax(board, depth, maximizing, heuristic):
    """Reference minimax without pruning."""
    w = board.winner()
    if w == Player.ROBO:
        return WIN_SCORE
    if w == Player.HUMAN:
        return -WIN_SCORE
    if depth == 0 or board.is_full():
        return heuristic.evaluate(board)
    player = Player.ROBO if maximizing else Player.HUMAN
    values = [
        plain_minimax(board.place(i, player), depth - 1, not maximizing, heuristic)
        for i in board.empty_cells()
    ]
    return max(values) if maximizing else min(values)


POSITIONS = [
    ("_________", 3, True),
    ("____X____", 3, True),
    ("X___O___X", 3, False),
    ("XX_OO____", 2, True),
    ("XX_OO____", 2, False),
    ("XO_ _X_ __O", 4, True),
]


class TestMinimaxSearch:
    def test_terminal_scores(self):
        search = MinimaxSearch(Heuristic())
        assert search.search(Board.from_string("OOO XX_ X__"), 3) == WIN_SCORE
        assert search.search(Board.from_string("XXX OO_ O__"), 3, maximizing=True) == -WIN_SCORE

    def test_depth_zero_is_heuristic(self):
        b = Board.from_string("O___X____")
        heuristic = Heuristic({"O__": 4})
        assert MinimaxSearch(heuristic).search(b, 0) == heuristic.evaluate(b)

    def test_full_board_is_heuristic(self):
        b = Board.from_string("XOX XOO OXX")
        heuristic = Heuristic()
        assert MinimaxSearch(heuristic).search(b, 5) == heuristic.evaluate(b)

    @pytest.mark.parametrize("text,depth,maximizing", POSITIONS)
    def test_matches_plain_minimax(self, text, depth, maximizing):
        b = Board.from_string(text)
        heuristic = Heuristic({"X__": 1, "_O_": -2})
        got = MinimaxSearch(heuristic).search(b, depth, -math.inf, math.inf, maximizing)
        assert got == plain_minimax(b, depth, maximizing, heuristic)

    def test_deterministic_and_pure(self):
        b = Board.from_string("X___O____")
        snapshot = b.to_string()
        first = MinimaxSearch(Heuristic()).search(b, 3, maximizing=False)
        second = MinimaxSearch(Heuristic()).search(b, 3, maximizing=False)
        assert first == second
        assert b.to_string() == snapshot

    def test_pruning_visits_fewer_nodes(self):
        b = Board(3)
        search = MinimaxSearch(Heuristic())
        search.search(b, 4)
        # full tree to depth 4: 1 + 9 + 72 + 504 + 3024 nodes
        assert 0 < search.nodes_explored < 3610

    def test_human_must_take_immediate_win(self):
        b = Board.from_string("XX_OO____")
        search = MinimaxSearch(Heuristic())
        scores = {
            i: search.search(b.place(i, Player.HUMAN), 1, maximizing=True)
            for i in b.empty_cells()
        }
        assert scores[2] == -WIN_SCORE
        assert all(scores[2] < s for i, s in scores.items() if i != 2)

    def test_robo_immediate_win_ranks_highest(self):
        b = Board.from_string("XX_OO_X__")
        search = MinimaxSearch(Heuristic())
        scores = {
            i: search.search(b.place(i, Player.ROBO), 2, maximizing=False)
            for i in b.empty_cells()
        }
        assert scores[5] == WIN_SCORE
        assert all(scores[5] >= s for s in scores.values())
