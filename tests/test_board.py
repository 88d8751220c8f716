import pytest

from game.board import Board, Row, pad_list
from game.grading import Hint


def test_pad_list():
    assert pad_list([], 4) == [None, None, None, None]
    assert pad_list([1, 2, 3, 4], 4) == [1, 2, 3, 4]
    assert pad_list([1, 2], 5) == [1, 2, None, None, None]
    assert pad_list([1, 2, 3, 4], 2) == [1, 2]


def test_row_starts_empty():
    row = Row()
    assert row.colors == [None] * 4
    assert row.hints == [None] * 4


def test_fresh_board():
    board = Board(number_of_rows=12)
    assert len(board.rows) == 12
    assert board.current_row == 0
    assert all(row == Row() for row in board.rows)


def test_place_color_only_changes_current_row():
    board = Board(number_of_rows=3)
    board.place_color("blue", 1)

    assert board.rows[0].colors == [None, "blue", None, None]
    assert board.rows[1] == Row()
    assert board.rows[2] == Row()


def test_place_color_overwrites_slot():
    board = Board(number_of_rows=3)
    board.place_color("blue", 1)
    board.place_color("red", 1)
    assert board.current.colors == [None, "red", None, None]


@pytest.mark.parametrize("index", [-1, 4])
def test_place_color_rejects_bad_slot(index):
    with pytest.raises(ValueError):
        Board(number_of_rows=3).place_color("red", index)


def test_increment_turn_fills_next_row():
    board = Board(number_of_rows=3)
    board.place_color("red", 0)
    board.increment_turn()
    board.place_color("green", 0)

    assert board.current_row == 1
    assert board.rows[0].colors == ["red", None, None, None]
    assert board.rows[1].colors == ["green", None, None, None]


def test_increment_turn_stays_on_last_row():
    board = Board(number_of_rows=2)
    for _ in range(5):
        board.increment_turn()
    assert board.current_row == 1


def test_insert_hints_replaces_all_hints():
    board = Board(number_of_rows=3)
    board.insert_hints([Hint.EXACT, Hint.PRESENT, Hint.PRESENT, Hint.EXACT])
    board.insert_hints([Hint.EXACT, Hint.PRESENT])

    assert board.current.hints == [Hint.EXACT, Hint.PRESENT, None, None]
    assert board.rows[1].hints == [None] * 4


def test_insert_too_many_hints():
    with pytest.raises(ValueError):
        Board(number_of_rows=1).insert_hints([Hint.EXACT] * 5)


def test_default_board_size():
    assert len(Board().rows) == 12


@pytest.mark.parametrize("rows", [0, -3])
def test_board_needs_rows(rows):
    with pytest.raises(ValueError):
        Board(number_of_rows=rows)
