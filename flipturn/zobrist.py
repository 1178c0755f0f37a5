"""Zobrist hashing of board positions and transposition-table entries."""

from __future__ import annotations

import functools
import random
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum, auto

from flipturn.config import BOARD_SIZE, PLAYER_O, PLAYER_X


class ZobristTable:
    """Random 64-bit keys, one per cell and player."""

    def __init__(self, rng: random.Random | None = None) -> None:
        rng = rng if rng is not None else random.Random()
        self._keys = tuple(
            tuple((rng.getrandbits(64), rng.getrandbits(64)) for _ in range(BOARD_SIZE))
            for _ in range(BOARD_SIZE)
        )

    def hash(self, cells: Iterable[Iterable[str]]) -> int:
        """Hash a grid of cells given row by row."""
        value = 0
        for key_row, row in zip(self._keys, cells):
            for (x_key, o_key), piece in zip(key_row, row):
                if piece == PLAYER_X:
                    value ^= x_key
                elif piece == PLAYER_O:
                    value ^= o_key
        return value


class Bound(Enum):
    """How a stored search value relates to the true value."""

    EXACT = auto()
    LOWER = auto()
    UPPER = auto()


@dataclass
class TranspositionEntry:
    """A search result remembered for a position."""

    value: float
    depth: int
    bound: Bound


@functools.lru_cache(maxsize=None)
def default_table() -> ZobristTable:
    """Return the process-wide table, creating it on first use."""
    return ZobristTable()