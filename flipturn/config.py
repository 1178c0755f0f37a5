"""Game constants, layout dimensions and state enumerations."""

from __future__ import annotations

from enum import Enum, auto

BOARD_SIZE = 8
EMPTY = "."
PLAYER_X = "X"
PLAYER_O = "O"

# Board and window layout, in view coordinates.
BOARD_OFFSET_X = 50
BOARD_OFFSET_Y = 50
CELL_SIZE = 70
SIDE_PANEL_WIDTH = 250
PANEL_MARGIN_Y = 20
WINDOW_WIDTH = SIDE_PANEL_WIDTH * 2 + BOARD_SIZE * CELL_SIZE + BOARD_OFFSET_X * 2
WINDOW_HEIGHT = BOARD_OFFSET_Y * 2 + BOARD_SIZE * CELL_SIZE + 200
SKILL_BUTTON_MARGIN_X = 20
ENERGY_TEXT_OFFSET_Y = 120

# Energy economy.
ENERGY_PER_FLIP = 1
GHOST_COST = 3
FORCED_FLIP_COST = 25
COLOR_SWAP_COST = 20


class GameState(Enum):
    """Outcome of a game, or that it is still being played."""

    IN_PROGRESS = auto()
    X_WON = auto()
    O_WON = auto()
    DRAW = auto()


class PlayerMode(Enum):
    """Who controls the second player."""

    HUMAN_VS_HUMAN = auto()
    HUMAN_VS_AI = auto()


class GuiState(Enum):
    """Screen currently shown by the interface."""

    MAIN_MENU = auto()
    PLAYING = auto()
    GAME_OVER = auto()


class SkillMode(Enum):
    """Special ability the current player has armed."""

    NONE = auto()
    GHOST = auto()
    COLOR_SWAP = auto()
    FORCED_FLIP = auto()


def opponent(player: str) -> str:
    """Return the other player's piece."""
    return PLAYER_O if player == PLAYER_X else PLAYER_X