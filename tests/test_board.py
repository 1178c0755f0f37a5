import random

import pytest

from flipturn.board import Board, Move
from flipturn.config import BOARD_SIZE, EMPTY, PLAYER_O, PLAYER_X
from flipturn.zobrist import ZobristTable


@pytest.fixture
def board():
    return Board(ZobristTable(random.Random(42)))


def test_initial_layout(board):
    assert board.cell(3, 3) == PLAYER_O
    assert board.cell(3, 4) == PLAYER_X
    assert board.cell(4, 3) == PLAYER_X
    assert board.cell(4, 4) == PLAYER_O
    assert board.count(PLAYER_X) == 2
    assert board.count(PLAYER_O) == 2
    assert board.count(EMPTY) == BOARD_SIZE * BOARD_SIZE - 4


def test_initial_moves_for_x(board):
    assert board.valid_moves(PLAYER_X) == [Move(2, 3), Move(3, 2), Move(4, 5), Move(5, 4)]


def test_initial_move_counts_symmetric(board):
    assert len(board.valid_moves(PLAYER_X)) == len(board.valid_moves(PLAYER_O))


def test_every_valid_move_has_flips(board):
    for move in board.valid_moves(PLAYER_O):
        assert board.flips(move.row, move.col, PLAYER_O)


def test_play_updates_counts(board):
    captured = board.flips(2, 3, PLAYER_X)
    assert board.play(2, 3, PLAYER_X) is True
    assert board.count(PLAYER_X) == 2 + 1 + len(captured)
    assert board.count(PLAYER_O) == 2 - len(captured)
    for r, c in captured:
        assert board.cell(r, c) == PLAYER_X


def test_illegal_play_leaves_board(board):
    before = str(board)
    old_hash = board.hash
    assert board.play(0, 0, PLAYER_X) is False
    assert str(board) == before
    assert board.hash == old_hash


def test_occupied_cell_has_no_flips(board):
    assert board.flips(3, 3, PLAYER_X) == []
    assert not board.is_valid_move(3, 3, PLAYER_X)


def test_hash_tracks_position(board):
    board.play(2, 3, PLAYER_X)
    assert board.hash == board.compute_hash()
    board.set(0, 0, PLAYER_O)
    assert board.hash == board.compute_hash()


def test_same_position_same_hash():
    table = ZobristTable(random.Random(9))
    a, b = Board(table), Board(table)
    a.play(2, 3, PLAYER_X)
    b.play(2, 3, PLAYER_X)
    assert a.hash == b.hash


def test_copy_is_independent(board):
    clone = board.copy()
    clone.play(2, 3, PLAYER_X)
    assert board.cell(2, 3) == EMPTY
    assert clone.cell(2, 3) == PLAYER_X
    assert board.hash == board.compute_hash()


def test_full_board_is_game_over(board):
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            board.set(row, col, PLAYER_X)
    assert board.is_game_over()
    assert board.valid_moves(PLAYER_O) == []


def test_fresh_board_not_over(board):
    assert not board.is_game_over()


@pytest.mark.parametrize("row,col", [(-1, 0), (0, BOARD_SIZE), (BOARD_SIZE, 3)])
def test_off_board_raises(board, row, col):
    with pytest.raises(IndexError):
        board.cell(row, col)
    with pytest.raises(IndexError):
        board.set(row, col, PLAYER_X)


def test_str_layout(board):
    lines = str(board).split("\n")
    assert lines[0] == "  1 2 3 4 5 6 7 8 "
    assert len(lines) == BOARD_SIZE + 1
    assert lines[4] == "4 . . . O X . . . "


def test_move_equality():
    assert Move(1, 2) == Move(1, 2)
    assert Move(1, 2) != Move(2, 1)