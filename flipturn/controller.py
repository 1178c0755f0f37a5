"""Screen state, buttons and input handling, independent of rendering."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from flipturn.config import (
    BOARD_OFFSET_X,
    BOARD_OFFSET_Y,
    BOARD_SIZE,
    CELL_SIZE,
    COLOR_SWAP_COST,
    EMPTY,
    FORCED_FLIP_COST,
    GHOST_COST,
    PANEL_MARGIN_Y,
    PLAYER_O,
    PLAYER_X,
    SIDE_PANEL_WIDTH,
    SKILL_BUTTON_MARGIN_X,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    GameState,
    GuiState,
    PlayerMode,
    SkillMode,
)
from flipturn.game import Game

log = logging.getLogger(__name__)

_BOARD_LEFT = SIDE_PANEL_WIDTH + BOARD_OFFSET_X

_SKILL_COSTS = {
    SkillMode.COLOR_SWAP: COLOR_SWAP_COST,
    SkillMode.GHOST: GHOST_COST,
    SkillMode.FORCED_FLIP: FORCED_FLIP_COST,
}

_SKILL_NAMES = {
    SkillMode.COLOR_SWAP: "Intercambio de Color",
    SkillMode.GHOST: "Ficha Fantasma",
    SkillMode.FORCED_FLIP: "Volteo Forzado",
}


@dataclass
class Button:
    """An axis-aligned clickable rectangle in view coordinates."""

    x: float
    y: float
    width: float
    height: float
    label: str = ""

    @classmethod
    def centered(cls, cx: float, cy: float, width: float, height: float, label: str = "") -> Button:
        return cls(cx - width / 2, cy - height / 2, width, height, label)

    @property
    def center(self) -> tuple[float, float]:
        return (self.x + self.width / 2, self.y + self.height / 2)

    def contains(self, x: float, y: float) -> bool:
        """True if the point lies inside; the right and bottom edges are excluded."""
        return self.x <= x < self.x + self.width and self.y <= y < self.y + self.height


def cell_at(x: float, y: float) -> tuple[int, int]:
    """Board (row, col) under a view point; may lie off the board."""
    return int((y - BOARD_OFFSET_Y) / CELL_SIZE), int((x - _BOARD_LEFT) / CELL_SIZE)


def _in_board(row: int, col: int) -> bool:
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


class Controller:
    """Tracks which screen is shown and applies clicks and hovers to a game."""

    def __init__(self, game: Game) -> None:
        self.game = game
        self.gui_state = GuiState.MAIN_MENU
        self.skill = SkillMode.NONE
        self.show_ghost = False
        self.ghost_cell = (0, 0)
        self.ghost_flips: list[tuple[int, int]] = []

        self.restart_button = Button(
            WINDOW_WIDTH - BOARD_OFFSET_X - 120,
            BOARD_OFFSET_Y + BOARD_SIZE * CELL_SIZE + 5,
            120,
            40,
            "Reiniciar",
        )
        self.play_ai_button = Button.centered(
            WINDOW_WIDTH / 2, WINDOW_HEIGHT / 2 - 50, 250, 60, "Jugar vs IA"
        )
        self.play_human_button = Button.centered(
            WINDOW_WIDTH / 2, WINDOW_HEIGHT / 2 + 50, 250, 60, "Jugar 1 vs 1"
        )
        self.menu_button = Button.centered(
            WINDOW_WIDTH / 2, WINDOW_HEIGHT - 50, 200, 40, "Volver al Menu"
        )
        skills_top = PANEL_MARGIN_Y + 150
        self.color_swap_button = Button(
            SKILL_BUTTON_MARGIN_X,
            skills_top,
            180,
            40,
            f"Intercambiar Color ({COLOR_SWAP_COST} Energia)",
        )
        # The ghost ability is always on; its button has no area and takes no clicks.
        self.ghost_button = Button(0, 0, 0, 0, "")
        self.forced_flip_button = Button(
            SKILL_BUTTON_MARGIN_X,
            skills_top + self.color_swap_button.height + 10 + self.ghost_button.height + 10,
            160,
            40,
            f"Volteo Forzado ({FORCED_FLIP_COST} Energia)",
        )

    @property
    def skill_buttons(self) -> dict[SkillMode, Button]:
        return {
            SkillMode.COLOR_SWAP: self.color_swap_button,
            SkillMode.GHOST: self.ghost_button,
            SkillMode.FORCED_FLIP: self.forced_flip_button,
        }

    def _restart(self) -> None:
        self.game.reset()
        self.skill = SkillMode.NONE

    def click(self, x: float, y: float) -> None:
        """Handle a left click at a point in view coordinates."""
        if self.gui_state is GuiState.MAIN_MENU:
            if self.play_ai_button.contains(x, y):
                self.game.set_mode(PlayerMode.HUMAN_VS_AI)
                self.gui_state = GuiState.PLAYING
                log.info("Starting game: human vs AI")
            elif self.play_human_button.contains(x, y):
                self.game.set_mode(PlayerMode.HUMAN_VS_HUMAN)
                self.gui_state = GuiState.PLAYING
                log.info("Starting game: human vs human")
        elif self.gui_state is GuiState.PLAYING:
            if self.restart_button.contains(x, y):
                self._restart()
                log.info("Game restarted")
                return
            for mode, button in self.skill_buttons.items():
                if button.contains(x, y):
                    self.toggle_skill(mode)
                    return
            self.click_board(*cell_at(x, y))
        elif self.gui_state is GuiState.GAME_OVER:
            if self.menu_button.contains(x, y):
                self.gui_state = GuiState.MAIN_MENU
                self._restart()
                log.info("Back to main menu")
            elif self.restart_button.contains(x, y):
                self._restart()
                self.gui_state = GuiState.PLAYING
                log.info("Game restarted from game-over screen")

    def hover(self, x: float, y: float) -> None:
        """Update the move preview for the mouse at a view point."""
        if not (
            self.gui_state is GuiState.PLAYING
            and self.game.state is GameState.IN_PROGRESS
            and self.skill is SkillMode.NONE
        ):
            self.show_ghost = False
            return
        row, col = cell_at(x, y)
        if _in_board(row, col) and self.game.board.cell(row, col) == EMPTY:
            self.ghost_cell = (row, col)
            self.ghost_flips = self.game.board.flips(row, col, self.game.current)
            self.show_ghost = bool(self.ghost_flips)
        else:
            self.show_ghost = False

    def toggle_skill(self, mode: SkillMode) -> None:
        """Arm, disarm or switch to a skill, if the current player can pay for it."""
        name = _SKILL_NAMES[mode]
        cost = _SKILL_COSTS[mode]
        if not self.game.can_afford(self.game.current, cost):
            log.info("Not enough energy for %s (cost: %d)", name, cost)
            return
        if self.skill is SkillMode.NONE:
            self.skill = mode
            if mode is not SkillMode.GHOST:
                self.show_ghost = False
            log.info("%s armed", name)
        elif self.skill is mode:
            self.skill = SkillMode.NONE
            if mode is SkillMode.GHOST:
                self.show_ghost = False
            log.info("%s disarmed", name)
        else:
            self.skill = mode
            self.show_ghost = False
            log.info("%s armed, replacing another skill", name)

    def click_board(self, row: int, col: int) -> None:
        """Apply a click on a board cell according to the armed skill."""
        if not _in_board(row, col):
            return
        game = self.game
        player = game.current
        if self.skill is SkillMode.COLOR_SWAP:
            if not game.can_afford(player, COLOR_SWAP_COST):
                log.info("Not enough energy for color swap (cost: %d)", COLOR_SWAP_COST)
                self.skill = SkillMode.NONE
            elif game.color_swap(row, col, player):
                game.spend_energy(player, COLOR_SWAP_COST)
                game.use_color_swap(player)
                self.skill = SkillMode.NONE
                game.update_state()
                game.next_turn()
                log.info("Color swap at %d, %d", row + 1, col + 1)
            else:
                log.info("Invalid color swap: the cell must hold an opponent piece")
        elif self.skill is SkillMode.GHOST:
            self.skill = SkillMode.NONE
            self.show_ghost = False
            log.info("Ghost piece disarmed")
        elif self.skill is SkillMode.FORCED_FLIP:
            if not game.can_afford(player, FORCED_FLIP_COST):
                log.info("Not enough energy for forced flip")
                self.skill = SkillMode.NONE
            elif game.forced_flip(row, col, player):
                game.spend_energy(player, FORCED_FLIP_COST)
                self.skill = SkillMode.NONE
                game.update_state()
                game.next_turn()
                log.info("Forced flip at %d, %d", row + 1, col + 1)
            else:
                log.info("Invalid forced flip: the cell must hold an opponent piece")
        elif game.state is GameState.IN_PROGRESS and game.try_move(row, col):
            log.info("Player %s moved at %d, %d", game.current, row + 1, col + 1)

    def update(self) -> None:
        """Advance one frame: let the AI move and notice the end of the game."""
        if self.gui_state is not GuiState.PLAYING:
            return
        game = self.game
        if (
            game.current == PLAYER_O
            and game.mode is PlayerMode.HUMAN_VS_AI
            and game.state is GameState.IN_PROGRESS
        ):
            if game.board.valid_moves(PLAYER_O):
                game.play_ai_turn()
            else:
                log.info("AI has no valid moves; turn skipped")
                game.next_turn()
        if game.state is not GameState.IN_PROGRESS:
            self.gui_state = GuiState.GAME_OVER

    def status_text(self) -> str:
        """Turn or result line followed by both players' scores."""
        game = self.game
        if game.state is GameState.X_WON:
            lines = [f"¡{game.player_name(PLAYER_X)} GANA!"]
        elif game.state is GameState.O_WON:
            lines = [f"¡{game.player_name(PLAYER_O)} GANA!"]
        elif game.state is GameState.DRAW:
            lines = ["¡EMPATE!"]
        else:
            lines = [f"Turno de: {game.player_name(game.current)}"]
        for player in (PLAYER_X, PLAYER_O):
            lines.append(
                f"Puntuación {game.player_name(player)}: {game.board.count(player)}"
                f" (Bonus Esquinas: {game.corner_points[player]})"
            )
        return "\n".join(lines)

    def stats_text(self, player: str) -> str:
        """Side-panel summary: name, pieces and corners held."""
        game = self.game
        return (
            f"{game.player_name(player)}"
            f"\nFichas: {game.board.count(player)}"
            f"\nEsquinas: {game.corner_points[player] // 10}"
        )

    def energy_text(self, player: str) -> str:
        game = self.game
        return f"Energía {game.player_name(player)}: {game.energy(player)}"