from __future__ import annotations

from enum import Enum
from typing import Iterable, Iterator, List, Optional, Sequence, Union

import numpy as np

from tictactoe.core.lines import Line, lines


class Player(Enum):
    """Cell marks."""
    EMPTY = 0
    HUMAN = 1
    ROBO = 2

    def symbol(self) -> str:
        return {0: "_", 1: "X", 2: "O"}[self.value]

    def opponent(self) -> "Player":
        if self == Player.HUMAN:
            return Player.ROBO
        if self == Player.ROBO:
            return Player.HUMAN
        return Player.EMPTY

    @classmethod
    def from_symbol(cls, sym: Optional[str]) -> "Player":
        if sym is None or sym in ("", "_", "."):
            return cls.EMPTY
        s = sym.upper()
        if s == "X":
            return cls.HUMAN
        if s == "O":
            return cls.ROBO
        raise ValueError(f"Unknown mark: {sym!r}")

    def __str__(self) -> str:
        return self.symbol()


CellLike = Union[Player, str, None]


class Board:
    """
    Immutable N x N board.

    - Cells are addressed by row-major index: (r, c) -> r * size + c.
    - place() returns a new Board; the original is never modified, so
      search branches never share state.
    """

    __slots__ = ("_size", "_cells")

    def __init__(self, size: int = 3, cells: Optional[np.ndarray] = None) -> None:
        if not isinstance(size, int) or size <= 0:
            raise ValueError("size must be a positive integer")
        self._size: int = size
        if cells is None:
            cells = np.zeros(size * size, dtype=np.int8)
        elif cells.shape != (size * size,):
            raise ValueError(f"Board of size {size} needs {size * size} cells, got {cells.shape}")
        self._cells: np.ndarray = cells
        self._cells.setflags(write=False)

    @classmethod
    def from_cells(cls, cells: Sequence[CellLike], size: Optional[int] = None) -> "Board":
        """Build a board from Player values, 'X'/'O' symbols or None for empty."""
        if size is None:
            size = int(round(len(cells) ** 0.5))
        values = [c.value if isinstance(c, Player) else Player.from_symbol(c).value for c in cells]
        return cls(size, np.array(values, dtype=np.int8))

    @classmethod
    def from_string(cls, text: str) -> "Board":
        """'XX_OO____' -> 3x3 board (whitespace ignored)."""
        return cls.from_cells([ch for ch in text if not ch.isspace()])

    @property
    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size * self._size

    def __getitem__(self, index: int) -> Player:
        return Player(int(self._cells[index]))

    def __iter__(self) -> Iterator[Player]:
        for v in self._cells:
            yield Player(int(v))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._size == other._size and bool(np.array_equal(self._cells, other._cells))

    def __repr__(self) -> str:
        return f"Board({self._size}, {self.to_string()!r})"

    # ---------- Cell access ----------

    def in_bounds(self, index: int) -> bool:
        return 0 <= index < self._size * self._size

    def is_empty(self, index: int) -> bool:
        return self[index] == Player.EMPTY

    def place(self, index: int, player: Player) -> "Board":
        """
        Return a new board with `player` at `index`.

        Raises:
            ValueError if out of bounds, occupied, or player is EMPTY.
        """
        if player == Player.EMPTY:
            raise ValueError("Cannot place EMPTY")
        if not self.in_bounds(index):
            raise ValueError(f"Out of bounds: {index} for size={self._size}")
        if self._cells[index] != Player.EMPTY.value:
            raise ValueError(f"Cell occupied at {index}")
        cells = np.copy(self._cells)
        cells[index] = player.value
        return Board(self._size, cells)

    def empty_cells(self) -> List[int]:
        """Indices of all empty cells, ascending."""
        return [int(i) for i in np.flatnonzero(self._cells == Player.EMPTY.value)]

    def is_empty_board(self) -> bool:
        return not bool(np.any(self._cells))

    def count(self, player: Player) -> int:
        return int(np.count_nonzero(self._cells == player.value))

    # ---------- Lines ----------

    def lines(self) -> Iterable[Line]:
        return lines(self._size)

    def line_cells(self, line: Line) -> List[Player]:
        return [Player(int(v)) for v in self._cells[list(line)]]

    def signature(self, line: Line) -> str:
        """Ordered marks along a line, '_' for empty: the pattern memory key."""
        return "".join(Player(int(v)).symbol() for v in self._cells[list(line)])

    # ---------- Terminal status ----------

    def winner(self) -> Optional[Player]:
        """Mark of the first fully occupied uniform line, in line order."""
        for line in lines(self._size):
            values = self._cells[list(line)]
            first = values[0]
            if first != Player.EMPTY.value and bool(np.all(values == first)):
                return Player(int(first))
        return None

    def is_full(self) -> bool:
        return bool(np.all(self._cells != Player.EMPTY.value))

    def is_draw(self) -> bool:
        return self.is_full() and self.winner() is None

    # ---------- Rendering ----------

    def to_string(self) -> str:
        return "".join(p.symbol() for p in self)

    def to_cli(self) -> str:
        letters = [chr(ord("A") + i) for i in range(self._size)]
        rows = ["     " + " ".join(letters)]
        for r in range(self._size):
            row = [self[r * self._size + c].symbol() for c in range(self._size)]
            rows.append(f"{str(r + 1).rjust(3)}  " + " ".join(row))
        return "\n".join(rows)


def winner(board: Board) -> Optional[Player]:
    return board.winner()


def is_draw(board: Board) -> bool:
    return board.is_draw()
