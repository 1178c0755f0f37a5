import pytest

from flipturn.config import (
    BOARD_SIZE,
    COLOR_SWAP_COST,
    FORCED_FLIP_COST,
    PLAYER_O,
    PLAYER_X,
    GameState,
    GuiState,
    PlayerMode,
    SkillMode,
)
from flipturn.controller import Button, Controller, cell_at
from flipturn.game import Game


def _cell_center(row, col):
    return 300 + col * 70 + 35, 50 + row * 70 + 35


@pytest.fixture
def controller():
    return Controller(Game(ai_depth=1))


def _start(controller, button_name):
    button = getattr(controller, button_name)
    controller.click(*button.center)
    return controller


def test_button_contains_is_half_open():
    button = Button(10, 20, 30, 40)
    assert button.contains(10, 20)
    assert button.contains(39.9, 59.9)
    assert not button.contains(40, 30)
    assert not button.contains(20, 60)
    assert not button.contains(9.9, 30)


def test_zero_sized_button_contains_nothing(controller):
    assert not controller.ghost_button.contains(0, 0)


@pytest.mark.parametrize("row,col", [(0, 0), (3, 4), (7, 7)])
def test_cell_at_round_trip(row, col):
    assert cell_at(*_cell_center(row, col)) == (row, col)


def test_cell_at_off_board():
    _, left_col = cell_at(10, 100)
    assert left_col < 0
    _, right_col = cell_at(5000, 100)
    assert right_col >= BOARD_SIZE
    below_row, _ = cell_at(400, 5000)
    assert below_row >= BOARD_SIZE


def test_starts_in_menu(controller):
    assert controller.gui_state is GuiState.MAIN_MENU
    assert controller.skill is SkillMode.NONE


def test_menu_starts_ai_game(controller):
    _start(controller, "play_ai_button")
    assert controller.gui_state is GuiState.PLAYING
    assert controller.game.mode is PlayerMode.HUMAN_VS_AI


def test_menu_starts_human_game(controller):
    _start(controller, "play_human_button")
    assert controller.gui_state is GuiState.PLAYING
    assert controller.game.mode is PlayerMode.HUMAN_VS_HUMAN


def test_click_board_plays_move(controller):
    _start(controller, "play_human_button")
    controller.click(*_cell_center(2, 3))
    board = controller.game.board
    assert board.cell(2, 3) == PLAYER_X
    assert board.cell(3, 3) == PLAYER_X
    assert controller.game.current == PLAYER_O


def test_illegal_click_changes_nothing(controller):
    _start(controller, "play_human_button")
    controller.click(*_cell_center(0, 0))
    assert controller.game.board.count(PLAYER_X) == 2
    assert controller.game.current == PLAYER_X


def test_hover_shows_preview(controller):
    _start(controller, "play_human_button")
    controller.hover(*_cell_center(2, 3))
    assert controller.show_ghost
    assert controller.ghost_cell == (2, 3)
    assert controller.ghost_flips == [(3, 3)]


def test_hover_on_illegal_cell_hides_preview(controller):
    _start(controller, "play_human_button")
    controller.hover(*_cell_center(2, 3))
    controller.hover(*_cell_center(0, 0))
    assert not controller.show_ghost


def test_hover_in_menu_hides_preview(controller):
    controller.hover(*_cell_center(2, 3))
    assert not controller.show_ghost


def test_toggle_skill_needs_energy(controller):
    _start(controller, "play_human_button")
    controller.toggle_skill(SkillMode.COLOR_SWAP)
    assert controller.skill is SkillMode.NONE


def test_toggle_skill_arm_disarm_switch(controller):
    _start(controller, "play_human_button")
    controller.game.gain_energy(PLAYER_X, FORCED_FLIP_COST)
    controller.toggle_skill(SkillMode.COLOR_SWAP)
    assert controller.skill is SkillMode.COLOR_SWAP
    controller.toggle_skill(SkillMode.COLOR_SWAP)
    assert controller.skill is SkillMode.NONE
    controller.toggle_skill(SkillMode.COLOR_SWAP)
    controller.toggle_skill(SkillMode.FORCED_FLIP)
    assert controller.skill is SkillMode.FORCED_FLIP


def test_skill_button_click_arms_skill(controller):
    _start(controller, "play_human_button")
    controller.game.gain_energy(PLAYER_X, COLOR_SWAP_COST)
    controller.click(*controller.color_swap_button.center)
    assert controller.skill is SkillMode.COLOR_SWAP


def test_color_swap_on_board(controller):
    _start(controller, "play_human_button")
    game = controller.game
    game.gain_energy(PLAYER_X, COLOR_SWAP_COST + 3)
    controller.toggle_skill(SkillMode.COLOR_SWAP)
    controller.click_board(3, 3)
    assert game.board.cell(3, 3) == PLAYER_X
    assert game.energy(PLAYER_X) == 3
    assert not game.can_swap_color(PLAYER_X)
    assert controller.skill is SkillMode.NONE


def test_color_swap_on_own_piece_keeps_mode(controller):
    _start(controller, "play_human_button")
    game = controller.game
    game.gain_energy(PLAYER_X, COLOR_SWAP_COST)
    controller.toggle_skill(SkillMode.COLOR_SWAP)
    controller.click_board(3, 4)
    assert controller.skill is SkillMode.COLOR_SWAP
    assert game.energy(PLAYER_X) == COLOR_SWAP_COST


def test_forced_flip_on_board(controller):
    _start(controller, "play_human_button")
    game = controller.game
    game.gain_energy(PLAYER_X, FORCED_FLIP_COST)
    controller.toggle_skill(SkillMode.FORCED_FLIP)
    controller.click_board(4, 4)
    assert game.board.cell(4, 4) == PLAYER_X
    assert game.energy(PLAYER_X) == 0
    assert controller.skill is SkillMode.NONE


def test_ghost_mode_click_disarms(controller):
    _start(controller, "play_human_button")
    controller.game.gain_energy(PLAYER_X, 5)
    controller.toggle_skill(SkillMode.GHOST)
    assert controller.skill is SkillMode.GHOST
    controller.click_board(2, 3)
    assert controller.skill is SkillMode.NONE
    assert controller.game.board.cell(2, 3) == "."


def test_restart_button_resets(controller):
    _start(controller, "play_human_button")
    controller.click(*_cell_center(2, 3))
    controller.click(*controller.restart_button.center)
    assert controller.game.board.count(PLAYER_X) == 2
    assert controller.game.current == PLAYER_X


def test_update_lets_ai_move(controller):
    _start(controller, "play_ai_button")
    controller.click(*_cell_center(2, 3))
    assert controller.game.current == PLAYER_O
    controller.update()
    game = controller.game
    assert game.board.count(PLAYER_X) + game.board.count(PLAYER_O) == 6
    assert game.current == PLAYER_X


def _finish_with_x(controller):
    game = controller.game
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            game.board.set(row, col, PLAYER_X)
    game.update_corners()
    game.update_state()


def test_update_detects_game_over(controller):
    _start(controller, "play_human_button")
    _finish_with_x(controller)
    controller.update()
    assert controller.gui_state is GuiState.GAME_OVER
    assert controller.game.state is GameState.X_WON
    assert controller.status_text().startswith("¡Jugador 1 (Negro) GANA!")


def test_game_over_back_to_menu(controller):
    _start(controller, "play_human_button")
    _finish_with_x(controller)
    controller.update()
    controller.click(*controller.menu_button.center)
    assert controller.gui_state is GuiState.MAIN_MENU
    assert controller.game.board.count(PLAYER_O) == 2


def test_game_over_restart(controller):
    _start(controller, "play_human_button")
    _finish_with_x(controller)
    controller.update()
    controller.click(*controller.restart_button.center)
    assert controller.gui_state is GuiState.PLAYING
    assert controller.game.state is GameState.IN_PROGRESS


def test_status_text_in_progress(controller):
    _start(controller, "play_ai_button")
    lines = controller.status_text().split("\n")
    assert lines[0] == "Turno de: Jugador 1 (Negro)"
    assert lines[1] == "Puntuación Jugador 1 (Negro): 2 (Bonus Esquinas: 0)"
    assert lines[2] == "Puntuación IA (Blanco): 2 (Bonus Esquinas: 0)"


def test_stats_text(controller):
    _start(controller, "play_human_button")
    assert controller.stats_text(PLAYER_O) == "Jugador 2 (Blanco)\nFichas: 2\nEsquinas: 0"


def test_energy_text_tracks_energy(controller):
    _start(controller, "play_ai_button")
    controller.game.gain_energy(PLAYER_O, 4)
    assert controller.energy_text(PLAYER_O) == "Energía IA (Blanco): 4"