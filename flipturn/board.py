"""The Reversi board and its move rules."""

from __future__ import annotations

import copy
from dataclasses import dataclass

from flipturn.config import BOARD_SIZE, EMPTY, PLAYER_O, PLAYER_X, opponent
from flipturn.zobrist import ZobristTable, default_table

_DIRECTIONS = ((-1, -1), (-1, 0), (-1, 1), (0, -1), (0, 1), (1, -1), (1, 0), (1, 1))


def _on_board(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


@dataclass(frozen=True)
class Move:
    """A board coordinate where a piece is placed."""

    row: int
    col: int


class Board:
    """An 8x8 grid of pieces with an incrementally kept Zobrist hash."""

    def __init__(self, zobrist: ZobristTable | None = None) -> None:
        self.zobrist = zobrist if zobrist is not None else default_table()
        self._cells = [[EMPTY] * BOARD_SIZE for _ in range(BOARD_SIZE)]
        self._cells[3][3] = PLAYER_O
        self._cells[3][4] = PLAYER_X
        self._cells[4][3] = PLAYER_X
        self._cells[4][4] = PLAYER_O
        self.hash = self.compute_hash()

    def copy(self) -> Board:
        """Return an independent copy sharing the same hash table."""
        other = copy.copy(self)
        other._cells = [row[:] for row in self._cells]
        return other

    def __str__(self) -> str:
        header = "  " + "".join(f"{i + 1} " for i in range(BOARD_SIZE))
        lines = [header]
        for number, row in enumerate(self._cells, start=1):
            lines.append(f"{number} " + "".join(f"{piece} " for piece in row))
        return "\n".join(lines)

    def cell(self, row: int, col: int) -> str:
        """Return the piece at a cell, or EMPTY."""
        if not _on_board(row, col):
            raise IndexError(f"cell ({row}, {col}) is off the board")
        return self._cells[row][col]

    def set(self, row: int, col: int, player: str) -> None:
        """Put a piece (or EMPTY) on a cell and rehash."""
        if not _on_board(row, col):
            raise IndexError(f"cell ({row}, {col}) is off the board")
        self._cells[row][col] = player
        self.hash = self.compute_hash()

    def compute_hash(self) -> int:
        """Hash the current position from scratch."""
        return self.zobrist.hash(self._cells)

    def flips(self, row: int, col: int, player: str) -> list[tuple[int, int]]:
        """Cells that would turn over if player placed a piece here."""
        if self.cell(row, col) != EMPTY:
            return []
        other = opponent(player)
        result: list[tuple[int, int]] = []
        for dr, dc in _DIRECTIONS:
            line = []
            r, c = row + dr, col + dc
            while _on_board(r, c) and self._cells[r][c] == other:
                line.append((r, c))
                r, c = r + dr, c + dc
            if _on_board(r, c) and self._cells[r][c] == player:
                result.extend(line)
        return result

    def is_valid_move(self, row: int, col: int, player: str) -> bool:
        return bool(self.flips(row, col, player))

    def play(self, row: int, col: int, player: str) -> bool:
        """Place a piece and turn the captured ones; False if illegal."""
        captured = self.flips(row, col, player)
        if not captured:
            return False
        self._cells[row][col] = player
        for r, c in captured:
            self._cells[r][c] = player
        self.hash = self.compute_hash()
        return True

    def valid_moves(self, player: str) -> list[Move]:
        """All legal moves for player, in row-major order."""
        return [
            Move(row, col)
            for row in range(BOARD_SIZE)
            for col in range(BOARD_SIZE)
            if self.is_valid_move(row, col, player)
        ]

    def count(self, player: str) -> int:
        return sum(row.count(player) for row in self._cells)

    def is_game_over(self) -> bool:
        """True when neither player has a legal move."""
        return not self.valid_moves(PLAYER_X) and not self.valid_moves(PLAYER_O)