"""Window, rendering and event loop of the game."""

from __future__ import annotations

import argparse
import logging
import time
from collections.abc import Sequence

import pygame

from flipturn.config import (
    BOARD_OFFSET_X,
    BOARD_OFFSET_Y,
    BOARD_SIZE,
    CELL_SIZE,
    COLOR_SWAP_COST,
    FORCED_FLIP_COST,
    GHOST_COST,
    PANEL_MARGIN_Y,
    PLAYER_O,
    PLAYER_X,
    SIDE_PANEL_WIDTH,
    SKILL_BUTTON_MARGIN_X,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    EMPTY,
    GameState,
    GuiState,
    PlayerMode,
    SkillMode,
)
from flipturn.controller import Button, Controller
from flipturn.game import Game

log = logging.getLogger(__name__)

Color = tuple[int, ...]

_BLACK: Color = (0, 0, 0)
_WHITE: Color = (255, 255, 255)
_YELLOW: Color = (255, 255, 0)
_RED: Color = (255, 0, 0)
_DISABLED_FILL: Color = (50, 50, 50)
_DISABLED_TEXT: Color = (150, 150, 150)

_BOARD_LEFT = SIDE_PANEL_WIDTH + BOARD_OFFSET_X
_PIECE_RADIUS = CELL_SIZE // 2 - 5
_FRAME_RATE = 60
_BACKGROUND_IMAGE = "fondo_fin_juego.png"

_SKILL_COLORS: dict[SkillMode, Color] = {
    SkillMode.COLOR_SWAP: (200, 100, 0),
    SkillMode.GHOST: (100, 50, 150),
    SkillMode.FORCED_FLIP: (0, 100, 200),
}
_SKILL_COSTS = {
    SkillMode.COLOR_SWAP: COLOR_SWAP_COST,
    SkillMode.GHOST: GHOST_COST,
    SkillMode.FORCED_FLIP: FORCED_FLIP_COST,
}


def _draw_rect(
    surface: pygame.Surface,
    color: Color,
    rect: tuple[float, float, float, float],
    outline: int = 0,
    outline_color: Color = _BLACK,
) -> None:
    """Fill a rectangle, with an outline drawn outside it, honouring alpha."""
    x, y, width, height = rect
    if width <= 0 or height <= 0:
        return
    layer = pygame.Surface((int(width) + 2 * outline, int(height) + 2 * outline), pygame.SRCALPHA)
    if outline:
        layer.fill(outline_color)
    layer.fill(color, pygame.Rect(outline, outline, int(width), int(height)))
    surface.blit(layer, (int(x) - outline, int(y) - outline))


def _draw_circle(
    surface: pygame.Surface,
    color: Color,
    top_left: tuple[float, float],
    radius: int,
    outline: int = 0,
    outline_color: Color = _BLACK,
) -> None:
    """Draw a circle whose bounding box starts at top_left, honouring alpha."""
    outer = radius + outline
    layer = pygame.Surface((2 * outer, 2 * outer), pygame.SRCALPHA)
    if outline:
        pygame.draw.circle(layer, outline_color, (outer, outer), outer)
    pygame.draw.circle(layer, color, (outer, outer), radius)
    x, y = top_left
    surface.blit(layer, (int(x) - outline, int(y) - outline))


def _cell_origin(row: int, col: int) -> tuple[int, int]:
    return _BOARD_LEFT + col * CELL_SIZE, BOARD_OFFSET_Y + row * CELL_SIZE


class App:
    """Pygame front end that draws a controller's game and feeds it input."""

    def __init__(self, controller: Controller) -> None:
        pygame.init()
        self.controller = controller
        self.running = False
        self.window = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT), pygame.RESIZABLE)
        pygame.display.set_caption("FlipTurn")
        self.canvas = pygame.Surface((WINDOW_WIDTH, WINDOW_HEIGHT))
        self._fonts: dict[int, pygame.font.Font] = {}
        self._clock = pygame.time.Clock()
        self.background = self._load_background()
        self.viewport: tuple[float, float, float, float] = (0.0, 0.0, float(WINDOW_WIDTH), float(WINDOW_HEIGHT))
        self.resize(WINDOW_WIDTH, WINDOW_HEIGHT)

    @staticmethod
    def _load_background() -> pygame.Surface | None:
        try:
            image = pygame.image.load(_BACKGROUND_IMAGE)
        except (pygame.error, FileNotFoundError, OSError):
            log.error("Could not load the game-over background: %s", _BACKGROUND_IMAGE)
            return None
        return pygame.transform.smoothscale(image, (WINDOW_WIDTH, WINDOW_HEIGHT))

    def _font(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    def _text(
        self,
        text: str,
        size: int,
        color: Color,
        pos: tuple[float, float],
        centered: bool = False,
    ) -> None:
        font = self._font(size)
        rendered = [font.render(line, True, color) for line in text.split("\n")]
        width = max(line.get_width() for line in rendered)
        height = sum(line.get_height() for line in rendered)
        x, y = pos
        if centered:
            x -= width / 2
            y -= height / 2
        for line in rendered:
            self.canvas.blit(line, (int(x), int(y)))
            y += line.get_height()

    # --- geometry -----------------------------------------------------

    def resize(self, width: int, height: int) -> None:
        """Fit the fixed-size view into a window, keeping its aspect ratio."""
        width = max(int(width), 1)
        height = max(int(height), 1)
        window_ratio = width / height
        base_ratio = WINDOW_WIDTH / WINDOW_HEIGHT
        if window_ratio > base_ratio:
            scale_x, scale_y = base_ratio / window_ratio, 1.0
        else:
            scale_x, scale_y = 1.0, window_ratio / base_ratio
        self.viewport = (
            (1.0 - scale_x) / 2.0 * width,
            (1.0 - scale_y) / 2.0 * height,
            scale_x * width,
            scale_y * height,
        )

    def to_view(self, px: float, py: float) -> tuple[float, float]:
        """Map a window pixel to view coordinates."""
        vx, vy, vw, vh = self.viewport
        return (px - vx) * WINDOW_WIDTH / vw, (py - vy) * WINDOW_HEIGHT / vh

    # --- input --------------------------------------------------------

    def handle_event(self, event: pygame.event.Event) -> None:
        """Apply one pygame event to the window or the controller."""
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.VIDEORESIZE:
            self.resize(event.w, event.h)
        elif event.type == pygame.MOUSEMOTION:
            self.controller.hover(*self.to_view(*event.pos))
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.controller.click(*self.to_view(*event.pos))

    def run(self) -> None:
        """Process input, advance and draw until the window is closed."""
        self.running = True
        while self.running:
            for event in pygame.event.get():
                self.handle_event(event)
                if not self.running:
                    break
            if not self.running:
                break
            started = time.perf_counter()
            game = self.controller.game
            ai_turn = (
                self.controller.gui_state is GuiState.PLAYING
                and game.current == PLAYER_O
                and game.mode is PlayerMode.HUMAN_VS_AI
                and game.state is GameState.IN_PROGRESS
            )
            self.controller.update()
            if ai_turn:
                log.info("AI took %.3f seconds", time.perf_counter() - started)
            self.draw()
            self._clock.tick(_FRAME_RATE)

    # --- rendering ----------------------------------------------------

    def draw(self) -> None:
        """Render the current screen and show it in the window."""
        self.canvas.fill(_BLACK)
        state = self.controller.gui_state
        if state is GuiState.MAIN_MENU:
            self._draw_menu()
        elif state is GuiState.PLAYING:
            self._draw_game_screen()
            self._draw_ghost()
            self._draw_side_panels()
        else:
            self._draw_game_screen()
            self._draw_game_over()
            self._draw_side_panels()

        window = pygame.display.get_surface()
        window.fill(_BLACK)
        vx, vy, vw, vh = self.viewport
        size = (max(int(vw), 1), max(int(vh), 1))
        frame = self.canvas if size == self.canvas.get_size() else pygame.transform.smoothscale(self.canvas, size)
        window.blit(frame, (int(vx), int(vy)))
        pygame.display.flip()

    def _draw_button(self, button: Button, color: Color, text_size: int, text_color: Color = _WHITE,
                     outline: int = 0, outline_color: Color = _BLACK) -> None:
        if button.width <= 0 or button.height <= 0:
            return
        _draw_rect(self.canvas, color, (button.x, button.y, button.width, button.height), outline, outline_color)
        if button.label:
            self._text(button.label, text_size, text_color, button.center, centered=True)

    def _draw_menu(self) -> None:
        c = self.controller
        self._text("FLIPTURN", 60, _WHITE, (WINDOW_WIDTH / 2, WINDOW_HEIGHT / 2 - 150), centered=True)
        self._draw_button(c.play_ai_button, (50, 150, 50), 24)
        self._draw_button(c.play_human_button, (50, 50, 150), 24)

    def _draw_game_screen(self) -> None:
        board = self.controller.game.board
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                x, y = _cell_origin(row, col)
                shade = (0, 100, 0) if (row + col) % 2 == 0 else (0, 150, 0)
                _draw_rect(self.canvas, shade, (x, y, CELL_SIZE, CELL_SIZE), 1, _BLACK)
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                piece = board.cell(row, col)
                if piece == EMPTY:
                    continue
                x, y = _cell_origin(row, col)
                color = _BLACK if piece == PLAYER_X else _WHITE
                _draw_circle(self.canvas, color, (x + 5, y + 5), _PIECE_RADIUS, 2, (150, 150, 150))
        self._text(
            self.controller.status_text(),
            24,
            _WHITE,
            (_BOARD_LEFT + BOARD_SIZE * CELL_SIZE / 2, BOARD_OFFSET_Y + BOARD_SIZE * CELL_SIZE + 50),
            centered=True,
        )
        self._draw_button(self.controller.restart_button, (100, 100, 100), 20)

    def _draw_ghost(self) -> None:
        c = self.controller
        if not c.show_ghost:
            return
        is_x = c.game.current == PLAYER_X
        row, col = c.ghost_cell
        x, y = _cell_origin(row, col)
        ghost_color = (0, 0, 0, 100) if is_x else (255, 255, 255, 100)
        _draw_circle(self.canvas, ghost_color, (x + 5, y + 5), _PIECE_RADIUS, 2, (100, 100, 100))
        flip_color = (0, 0, 0, 180) if is_x else (255, 255, 255, 180)
        for r, k in c.ghost_flips:
            fx, fy = _cell_origin(r, k)
            _draw_circle(self.canvas, flip_color, (fx + 5, fy + 5), _PIECE_RADIUS, 2, (255, 0, 0, 200))

    def _draw_game_over(self) -> None:
        c = self.controller
        if self.background is not None:
            self.canvas.blit(self.background, (0, 0))
        _draw_rect(self.canvas, (0, 0, 0, 180), (0, 0, WINDOW_WIDTH, WINDOW_HEIGHT))
        self._text(c.status_text(), 20, _RED, (WINDOW_WIDTH / 2, WINDOW_HEIGHT / 2 - 100), centered=True)
        self._draw_button(c.menu_button, (150, 50, 50), 20)
        self._draw_button(c.restart_button, (100, 100, 100), 20)

    def _draw_side_panels(self) -> None:
        c = self.controller
        game = c.game
        panel_size = (SIDE_PANEL_WIDTH - 10, WINDOW_HEIGHT - 2 * PANEL_MARGIN_Y)
        right_x = WINDOW_WIDTH - SIDE_PANEL_WIDTH

        _draw_rect(self.canvas, (40, 40, 40, 200), (5, PANEL_MARGIN_Y, *panel_size), 2, (100, 100, 100))
        for mode, button in c.skill_buttons.items():
            affordable = game.can_afford(game.current, _SKILL_COSTS[mode])
            fill = _SKILL_COLORS[mode] if affordable else _DISABLED_FILL
            text_color = _WHITE if affordable else _DISABLED_TEXT
            outline = 3 if c.skill is mode else 0
            self._draw_button(button, fill, 16, text_color, outline, _YELLOW)
        self._text(c.energy_text(PLAYER_X), 20, _YELLOW, (SKILL_BUTTON_MARGIN_X, PANEL_MARGIN_Y + 90))

        _draw_rect(self.canvas, (40, 40, 40, 200), (right_x + 5, PANEL_MARGIN_Y, *panel_size), 2, (100, 100, 100))
        self._text(c.energy_text(PLAYER_O), 20, _YELLOW, (right_x + SKILL_BUTTON_MARGIN_X, PANEL_MARGIN_Y + 90))

        self._text(c.stats_text(PLAYER_X), 20, _WHITE, (SKILL_BUTTON_MARGIN_X, PANEL_MARGIN_Y + 20))
        self._text(c.stats_text(PLAYER_O), 20, _WHITE, (right_x + SKILL_BUTTON_MARGIN_X, PANEL_MARGIN_Y + 20))

        if game.state is GameState.IN_PROGRESS:
            if game.current == PLAYER_X:
                pos = (SKILL_BUTTON_MARGIN_X + 175, PANEL_MARGIN_Y + 20)
                color = _BLACK
            else:
                pos = (right_x + SKILL_BUTTON_MARGIN_X + 180, PANEL_MARGIN_Y + 20)
                color = _WHITE
            _draw_circle(self.canvas, color, pos, 15, 3, _YELLOW)


def main(argv: Sequence[str] | None = None) -> int:
    """Open the game window and play until it is closed."""
    parser = argparse.ArgumentParser(prog="flipturn", description="Reversi with special abilities.")
    parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    try:
        App(Controller(Game())).run()
    finally:
        pygame.quit()
    return 0