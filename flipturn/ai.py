"""Minimax search with alpha-beta pruning and a transposition table."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from flipturn.board import Move
from flipturn.config import BOARD_SIZE, PLAYER_O, PLAYER_X, opponent
from flipturn.zobrist import Bound, TranspositionEntry

if TYPE_CHECKING:
    from flipturn.game import Game

_CORNER_VALUE = 500
_PIECE_WEIGHT = 10
_MOBILITY_WEIGHT = 50
_ENERGY_WEIGHT = 5
_CORNERS = (
    (0, 0),
    (0, BOARD_SIZE - 1),
    (BOARD_SIZE - 1, 0),
    (BOARD_SIZE - 1, BOARD_SIZE - 1),
)


class AI:
    """Computer opponent that searches a fixed number of plies ahead.

    Leaf positions are always scored from the white (O) player's point of
    view, and finished games are worth +inf when O leads and -inf when X does.
    """

    def __init__(self, depth: int = 4) -> None:
        self.depth = depth
        self.table: dict[int, TranspositionEntry] = {}

    def best_move(self, game: Game, player: str) -> Move | None:
        """Choose a move for player, or None when no move scores above -inf."""
        self.table.clear()
        best_score = -math.inf
        best: Move | None = None
        for move in game.board.valid_moves(player):
            child = game.simulate_move(move, player)
            score = self.minimax(
                child, self.depth - 1, False, -math.inf, math.inf, opponent(player)
            )
            if score > best_score:
                best_score = score
                best = move
        return best

    def evaluate(self, game: Game, player: str) -> float:
        """Heuristic value of the position for player."""
        board = game.board
        other = opponent(player)
        score = (board.count(player) - board.count(other)) * _PIECE_WEIGHT
        for row, col in _CORNERS:
            piece = board.cell(row, col)
            if piece == player:
                score += _CORNER_VALUE
            elif piece == other:
                score -= _CORNER_VALUE
        score += len(board.valid_moves(player)) * _MOBILITY_WEIGHT
        score -= len(board.valid_moves(other)) * _MOBILITY_WEIGHT
        score += game.energy(player) * _ENERGY_WEIGHT
        return score

    def minimax(
        self,
        game: Game,
        depth: int,
        maximizing: bool,
        alpha: float,
        beta: float,
        player: str,
    ) -> float:
        """Alpha-beta search of game with player to move."""
        board = game.board
        key = board.hash
        entry = self.table.get(key)
        if entry is not None and entry.depth >= depth:
            if entry.bound is Bound.EXACT:
                return entry.value
            if entry.bound is Bound.LOWER and entry.value > alpha:
                alpha = entry.value
            if entry.bound is Bound.UPPER and entry.value < beta:
                beta = entry.value
            if alpha >= beta:
                return entry.value

        over = board.is_game_over()
        if depth == 0 or over:
            if over:
                x_count = board.count(PLAYER_X)
                o_count = board.count(PLAYER_O)
                if x_count > o_count:
                    return -math.inf
                if o_count > x_count:
                    return math.inf
                return 0
            return self.evaluate(game, PLAYER_O)

        moves = board.valid_moves(player)
        if not moves:
            return self.minimax(game, depth - 1, not maximizing, alpha, beta, opponent(player))

        bound = Bound.EXACT
        if maximizing:
            value = -math.inf
            for move in moves:
                child = game.simulate_move(move, player)
                value = max(
                    value,
                    self.minimax(child, depth - 1, False, alpha, beta, opponent(player)),
                )
                alpha = max(alpha, value)
                if alpha >= beta:
                    bound = Bound.LOWER
                    break
        else:
            value = math.inf
            for move in moves:
                child = game.simulate_move(move, player)
                value = min(
                    value,
                    self.minimax(child, depth - 1, True, alpha, beta, opponent(player)),
                )
                beta = min(beta, value)
                if alpha >= beta:
                    bound = Bound.UPPER
                    break

        self.table[key] = TranspositionEntry(value, depth, bound)
        return value