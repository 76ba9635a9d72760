from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from tictactoe.core.board import Player
from tictactoe.core.game import GameOutcome
from tictactoe.app.match import Match


# =========================
# Message types
# =========================

class MessageType(Enum):
    ERR = "ERR"
    INFO = "INFO"
    YOU_MOVE = "YOU MOVE"
    ROBO_MOVE = "ROBO MOVE"
    RESULT = "RESULT"
    RESTART = "RESTART"
    QUIT = "QUIT"


@dataclass(frozen=True)
class Message:
    """
    A UI message shown between board and state.
    Examples:
      [ERR] Cell is already taken.
      [ROBO MOVE] 2, 2 (B2)
    """
    type: MessageType
    text: str = ""

    def render(self) -> str:
        if self.text:
            return f"[{self.type.value}] {self.text}"
        return f"[{self.type.value}]"


def clear_screen() -> None:
    os.system("cls" if os.name == "nt" else "clear")


def cell_label(index: int, size: int) -> str:
    """Index -> 'x, y (B2)' with 1-based column x and row y."""
    y, x = divmod(index, size)
    return f"{x + 1}, {y + 1} ({chr(ord('A') + x)}{y + 1})"


RESULT_TEXT = {
    GameOutcome.HUMAN_WIN: "You won",
    GameOutcome.ROBO_WIN: "Robo won",
    GameOutcome.DRAW: "Draw",
}


class CliView:
    """
    Responsible ONLY for rendering:
      1) board
      2) message
      3) state line
    """

    def __init__(self, *, prompt: str = "> ", clear: bool = True) -> None:
        self.prompt = prompt
        self.clear = clear
        self._message: Optional[Message] = None

    # ---------- Message API ----------

    @property
    def message(self) -> Optional[Message]:
        return self._message

    def set_message(self, msg: Optional[Message]) -> None:
        self._message = msg

    def set_error(self, text: str) -> None:
        self._message = Message(MessageType.ERR, text)

    def set_move(self, index: int, size: int, is_you: bool) -> None:
        t = MessageType.YOU_MOVE if is_you else MessageType.ROBO_MOVE
        self._message = Message(t, cell_label(index, size))

    def set_result(self, outcome: GameOutcome) -> None:
        self._message = Message(MessageType.RESULT, RESULT_TEXT[outcome])

    def set_restart(self, text: str = "") -> None:
        self._message = Message(MessageType.RESTART, text)

    # ---------- Render ----------

    def render(self, match: Match) -> None:
        if self.clear:
            clear_screen()
        print(match.game.board.to_cli())
        print("")
        print(self._message.render() if self._message is not None else "")
        print(self.build_state_line(match))
        print(self.prompt, end="", flush=True)

    def build_state_line(self, match: Match) -> str:
        return (
            f"{self._turn_indicator(match)}   "
            f"You: {Player.HUMAN.symbol()}   "
            f"Robo: {Player.ROBO.symbol()} (lvl{match.level})   "
            f"Board: {match.size}x{match.size}"
        )

    @staticmethod
    def _turn_indicator(match: Match) -> str:
        outcome = match.finished
        if outcome == GameOutcome.HUMAN_WIN:
            return "☆ YOU WON ☆"
        if outcome == GameOutcome.ROBO_WIN:
            return "♨ YOU LOST ♨"
        if outcome == GameOutcome.DRAW:
            return "DRAW"
        if match.game.current_player == Player.HUMAN:
            return ">>> YOUR TURN <<<"
        return ">>> ROBO IS THINKING <<<"
