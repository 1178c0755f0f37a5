"""Turn order, scoring, energy and special abilities of a match."""

from __future__ import annotations

import copy
import logging

from flipturn.ai import AI
from flipturn.board import Board, Move
from flipturn.config import (
    BOARD_SIZE,
    ENERGY_PER_FLIP,
    PLAYER_O,
    PLAYER_X,
    GameState,
    PlayerMode,
    opponent,
)

log = logging.getLogger(__name__)

_CORNER_POINTS = 10
_CORNERS = (
    (0, 0),
    (0, BOARD_SIZE - 1),
    (BOARD_SIZE - 1, 0),
    (BOARD_SIZE - 1, BOARD_SIZE - 1),
)


def _on_board(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


class Game:
    """A match between black (X) and white (O), with optional AI for white."""

    def __init__(self, ai_depth: int = 4) -> None:
        self.ai = AI(ai_depth)
        self.mode = PlayerMode.HUMAN_VS_AI
        self.reset()

    def reset(self) -> None:
        """Start a fresh match in the current mode."""
        self.board = Board()
        self.current = PLAYER_X
        self.state = GameState.IN_PROGRESS
        self.history: list[Board] = [self.board.copy()]
        self._can_swap = {PLAYER_X: True, PLAYER_O: True}
        self.corner_points = {PLAYER_X: 0, PLAYER_O: 0}
        self._energy = {PLAYER_X: 0, PLAYER_O: 0}

    def set_mode(self, mode: PlayerMode) -> None:
        """Switch between human and AI opponent, restarting the match."""
        self.mode = mode
        self.reset()

    def _human_to_move(self) -> bool:
        return self.current == PLAYER_X or (
            self.current == PLAYER_O and self.mode is PlayerMode.HUMAN_VS_HUMAN
        )

    def try_move(self, row: int, col: int) -> bool:
        """Play a human move for the current player; False if not allowed."""
        if self.state is not GameState.IN_PROGRESS or not self._human_to_move():
            return False
        if not _on_board(row, col):
            return False
        captured = self.board.flips(row, col, self.current)
        if not captured:
            return False
        self.history.append(self.board.copy())
        self.board.play(row, col, self.current)
        self.gain_energy(self.current, len(captured))
        self.update_corners()
        self.update_state()
        if self.state is GameState.IN_PROGRESS:
            self.next_turn()
        return True

    def play_ai_turn(self) -> None:
        """Let the AI move when it is white's turn against a human."""
        if (
            self.state is not GameState.IN_PROGRESS
            or self.current != PLAYER_O
            or self.mode is not PlayerMode.HUMAN_VS_AI
        ):
            return
        log.info("AI is thinking")
        move = self.ai.best_move(self, self.current)
        if move is not None:
            captured = self.board.flips(move.row, move.col, self.current)
            self.board.play(move.row, move.col, self.current)
            self.gain_energy(self.current, len(captured))
            self.update_corners()
            log.info("AI plays at %d %d", move.row + 1, move.col + 1)
        else:
            log.info("AI has no valid moves")
        self.update_state()
        if self.state is GameState.IN_PROGRESS:
            self.next_turn()

    def next_turn(self) -> None:
        """Pass the turn to the opponent if they can move."""
        candidate = opponent(self.current)
        if self.board.valid_moves(candidate):
            self.current = candidate
        elif self.board.valid_moves(self.current):
            log.info("%s has no moves; %s plays again", candidate, self.current)
        else:
            log.info("Neither player can move; game over")

    def update_state(self) -> None:
        """Decide the outcome once neither player can move."""
        if not self.board.is_game_over():
            self.state = GameState.IN_PROGRESS
            return
        x_score = self.board.count(PLAYER_X) + self.corner_points[PLAYER_X]
        o_score = self.board.count(PLAYER_O) + self.corner_points[PLAYER_O]
        if x_score > o_score:
            self.state = GameState.X_WON
        elif o_score > x_score:
            self.state = GameState.O_WON
        else:
            self.state = GameState.DRAW

    def player_name(self, player: str) -> str:
        """Display name of a player in the current mode."""
        if player == PLAYER_X:
            return "Jugador 1 (Negro)"
        if self.mode is PlayerMode.HUMAN_VS_AI:
            return "IA (Blanco)"
        return "Jugador 2 (Blanco)"

    def can_swap_color(self, player: str) -> bool:
        return self._can_swap.get(player, False)

    def use_color_swap(self, player: str) -> None:
        if player in self._can_swap:
            self._can_swap[player] = False

    def color_swap(self, row: int, col: int, player: str) -> bool:
        """Turn one opponent piece into player's; False if it is not the opponent's."""
        if self.board.cell(row, col) != opponent(player):
            return False
        self.board.set(row, col, player)
        self.history.append(self.board.copy())
        return True

    def forced_flip(self, row: int, col: int, player: str) -> bool:
        """Flip one opponent piece; False if off the board or not the opponent's."""
        if not _on_board(row, col) or self.board.cell(row, col) != opponent(player):
            return False
        self.board.set(row, col, player)
        self.history.append(self.board.copy())
        return True

    def energy(self, player: str) -> int:
        return self._energy.get(player, 0)

    def can_afford(self, player: str, cost: int) -> bool:
        return player in self._energy and self._energy[player] >= cost

    def spend_energy(self, player: str, cost: int) -> None:
        if player in self._energy:
            self._energy[player] -= cost

    def gain_energy(self, player: str, flipped: int) -> None:
        if player in self._energy:
            self._energy[player] += flipped * ENERGY_PER_FLIP

    def update_corners(self) -> None:
        """Recount the corner bonus held by each player."""
        points = {PLAYER_X: 0, PLAYER_O: 0}
        for row, col in _CORNERS:
            piece = self.board.cell(row, col)
            if piece in points:
                points[piece] += _CORNER_POINTS
        self.corner_points = points

    def simulate_move(self, move: Move, player: str) -> Game:
        """Return a copy of the match with player's move applied."""
        child = copy.copy(self)
        child.board = self.board.copy()
        child.history = list(self.history)
        child._can_swap = dict(self._can_swap)
        child.corner_points = dict(self.corner_points)
        child._energy = dict(self._energy)
        captured = child.board.flips(move.row, move.col, player)
        child.board.play(move.row, move.col, player)
        child.gain_energy(player, len(captured))
        child.update_corners()
        return child