from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class CommandType(Enum):
    QUIT = "quit"
    RESTART = "restart"
    SIZE = "size"
    HELP = "help"


@dataclass(frozen=True)
class Command:
    """Parsed command from user input."""
    type: CommandType
    raw: str
    arg: Optional[int] = None


@dataclass(frozen=True)
class ParseResult:
    """
    Result of parsing one line input.
    Exactly one of (command, index) should be set on success.
    """
    command: Optional[Command] = None
    index: Optional[int] = None
    error: str = ""

    @property
    def ok(self) -> bool:
        return self.error == "" and (self.command is not None or self.index is not None)


class CommandProcessor:
    """
    Parses user input line into:
      - Command (e.g. /restart, /size 4)
      - Cell index (from 'x y' or 'B2'; x = column, y = row, 1-based)

    This class does NOT execute anything. Controllers decide what to do.
    """

    def __init__(self, board_size: int = 3) -> None:
        if board_size <= 0:
            raise ValueError("board_size must be positive")
        self.board_size = board_size

    @property
    def help_cmds(self) -> str:
        cmds = ["/help", "/quit", "/restart", "/size N"]
        return ", ".join(cmds)

    def help_text(self) -> str:
        col_end = chr(ord("A") + self.board_size - 1)
        return (
            f"Input: 'x y' (e.g. 2 2) or 'B2' (A-{col_end} + 1-{self.board_size}).\n"
            f"Commands: {self.help_cmds}"
        )

    # ---------- Public parse API ----------

    def parse(self, text: str) -> ParseResult:
        raw = (text or "").strip()
        if not raw:
            return ParseResult(error="")  # treat as no-op line

        if raw.startswith("/"):
            parts = raw[1:].strip().lower().split()
            cmd = parts[0] if parts else ""
            if cmd == "quit":
                return ParseResult(command=Command(CommandType.QUIT, raw))
            if cmd == "restart":
                return ParseResult(command=Command(CommandType.RESTART, raw))
            if cmd == "help":
                return ParseResult(command=Command(CommandType.HELP, raw))
            if cmd == "size":
                if len(parts) != 2 or not parts[1].isdigit():
                    return ParseResult(error="Usage: /size N")
                return ParseResult(command=Command(CommandType.SIZE, raw, int(parts[1])))

            return ParseResult(error=f"Unknown command: {raw}")

        # move: "x y"
        parts = raw.split()
        if len(parts) == 2 and parts[0].isdigit() and parts[1].isdigit():
            x, y = int(parts[0]), int(parts[1])
            if not self._is_in_bounds(x, y):
                return ParseResult(error=self._oob_msg(x, y))
            return ParseResult(index=self._to_index(x, y))

        # move: "B2"
        if len(raw) >= 2 and raw[0].isalpha():
            col = raw[0].upper()
            rest = raw[1:].strip()
            if rest.isdigit():
                x = ord(col) - ord("A") + 1
                y = int(rest)
                if not self._is_in_bounds(x, y):
                    return ParseResult(error=self._oob_msg(x, y))
                return ParseResult(index=self._to_index(x, y))

        return ParseResult(error="Invalid input. Use 'x y' or 'B2' or /help")

    # ---------- Helpers ----------

    def _to_index(self, x: int, y: int) -> int:
        return (y - 1) * self.board_size + (x - 1)

    def _is_in_bounds(self, x: int, y: int) -> bool:
        return 1 <= x <= self.board_size and 1 <= y <= self.board_size

    def _oob_msg(self, x: int, y: int) -> str:
        return f"Out of bounds: {x}, {y} (must be 1..{self.board_size})"
