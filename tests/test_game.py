"""
Tests for a single round and the match flow around it.
"""

import pytest

from tictactoe.core.board import Player
from tictactoe.core.game import Game, GameOutcome
from tictactoe.ai.learner import OutcomeLearner
from tictactoe.ai.memory import PatternMemory
from tictactoe.app.match import Match


class ScriptedAI:
    """Plays the given cells in order."""

    def __init__(self, moves):
        self.moves = list(moves)
        self.calls = []

    def choose_move(self, board, level):
        self.calls.append(level)
        return self.moves.pop(0) if self.moves else None


def play(match, human, robo_count):
    """Alternate human moves with robo replies."""
    for index in human:
        assert match.play_human(index).success
        if match.finished is None and robo_count:
            match.play_robo()
            robo_count -= 1


class TestGame:
    def test_human_moves_first(self):
        game = Game(board_size=3)
        assert game.current_player == Player.HUMAN
        assert game.make_move(4).success
        assert game.current_player == Player.ROBO

    def test_invalid_moves(self):
        game = Game(board_size=3)
        game.make_move(0)
        result = game.make_move(0)
        assert not result.success
        assert "taken" in result.error_message
        assert not game.make_move(9).success
        assert not game.make_move(-1).success

    def test_winning_move(self):
        game = Game(board_size=3)
        for index in (0, 3, 1, 4):
            game.make_move(index)
        result = game.make_move(2)
        assert result.is_winning_move
        assert game.winner == Player.HUMAN
        assert game.outcome() == GameOutcome.HUMAN_WIN
        assert not game.make_move(8).success

    def test_draw(self):
        game = Game(board_size=3)
        for index in (0, 1, 2, 4, 3, 5, 7, 6, 8):
            assert game.make_move(index).success
        assert game.is_draw()
        assert game.outcome() == GameOutcome.DRAW

    def test_reset(self):
        game = Game(board_size=3)
        game.make_move(0)
        game.reset(board_size=5)
        assert game.size == 5
        assert game.board.is_empty_board()
        assert game.current_player == Player.HUMAN
        assert game.outcome() is None


class TestMatch:
    def make_match(self, robo_moves, **kw):
        memory = PatternMemory.in_memory()
        ai = ScriptedAI(robo_moves)
        return Match(ai, OutcomeLearner(memory), **kw), memory, ai

    def test_human_win_raises_level_and_learns(self):
        match, memory, ai = self.make_match([3, 4])
        play(match, [0, 1, 2], 2)
        assert match.finished == GameOutcome.HUMAN_WIN
        assert match.level == 2
        assert memory.get("XXX") == -1
        assert ai.calls == [1, 1]

    def test_robo_win_keeps_level(self):
        match, memory, _ = self.make_match([3, 4, 5], level=3)
        play(match, [0, 1, 8], 3)
        assert match.finished == GameOutcome.ROBO_WIN
        assert match.level == 3
        assert memory.get("OOO") == 1

    def test_draw_learns_nothing(self):
        match, memory, _ = self.make_match([1, 4, 5, 6])
        play(match, [0, 2, 3, 7, 8], 4)
        assert match.finished == GameOutcome.DRAW
        assert memory.load() == {}
        assert match.level == 1

    def test_level_capped(self):
        match, _, _ = self.make_match([3, 4], level=5)
        play(match, [0, 1, 2], 2)
        assert match.level == 5

    def test_next_round_and_resets(self):
        match, _, _ = self.make_match([3, 4, 3, 4])
        play(match, [0, 1, 2], 2)
        match.next_round()
        assert match.finished is None
        assert match.game.board.is_empty_board()
        assert match.level == 2
        match.reset_all()
        assert match.level == 1
        play(match, [0, 1, 2], 2)
        match.change_size(4)
        assert match.size == 4
        assert match.level == 1
        assert match.finished is None

    def test_turn_order_enforced(self):
        match, _, _ = self.make_match([4])
        assert match.play_human(0).success
        assert not match.play_human(1).success
        assert match.play_robo() == 4
        assert match.play_robo() is None

    def test_invalid_settings(self):
        with pytest.raises(ValueError):
            self.make_match([], size=6)
        match, _, _ = self.make_match([])
        with pytest.raises(ValueError):
            match.change_size(2)

    def test_round_finishes_with_unwritable_store(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        memory = PatternMemory.from_file(str(blocker / "mem.json"))
        match = Match(ScriptedAI([3, 4]), OutcomeLearner(memory))
        play(match, [0, 1, 2], 2)
        assert match.finished == GameOutcome.HUMAN_WIN
        assert match.level == 2
        match.next_round()
        assert match.game.board.is_empty_board()
