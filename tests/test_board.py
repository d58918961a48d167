import random

import pytest

from tetrobag.board import Board
from tetrobag.tetromino import Kind, Tetromino, random_tetromino


@pytest.fixture
def board():
    return Board(8, 8, 4)


def square(points=1):
    return Tetromino(Kind.O, 0, points)


@pytest.mark.parametrize("rows, cols, bag", [(0, 8, 4), (8, 0, 4), (8, 8, 0), (-1, 8, 4)])
def test_invalid_dimensions_raise(rows, cols, bag):
    with pytest.raises(ValueError):
        Board(rows, cols, bag)


def test_new_board_is_empty(board):
    assert board.score == 0
    assert board.bag == [None] * 4
    assert all(value == 0 for line in board.grid for value in line)
    assert board.reserved is None


def test_place_square_marks_cells_and_scores(board):
    piece = square(points=2)
    assert board.place(2, 1, piece) is True
    covered = {(r, c) for r, line in enumerate(board.grid) for c, v in enumerate(line) if v == piece.id}
    assert covered == {(2, 1), (1, 1), (2, 2), (1, 2)}
    assert board.score == 2
    assert board.placed == [piece]


def test_cannot_place_out_of_bounds(board):
    assert board.can_place(0, 0, square()) is False
    assert board.can_place(1, 7, square()) is False
    assert board.place(8, 0, square()) is False
    assert board.score == 0


def test_cannot_overlap(board):
    assert board.place(2, 1, square())
    assert board.can_place(2, 2, square()) is False
    assert board.can_place(2, 3, square()) is True


def test_remove_returns_min_row_and_col(board):
    piece = square()
    board.place(2, 3, piece)
    assert board.remove(piece) == (1, 3)
    assert all(value == 0 for line in board.grid for value in line)
    assert board.placed == []


def test_remove_missing_piece_returns_none(board):
    assert board.remove(square()) is None


def test_tetromino_at(board):
    piece = square()
    board.place(2, 1, piece)
    assert board.tetromino_at(1, 2) is piece
    assert board.tetromino_at(5, 5) is None
    with pytest.raises(IndexError):
        board.tetromino_at(8, 0)


def test_add_and_remove_from_bag(board):
    pieces = [square() for _ in range(4)]
    assert all(board.add_to_bag(p) for p in pieces)
    assert board.add_to_bag(square()) is False
    board.remove_from_bag(pieces[1])
    assert board.bag == [pieces[0], None, pieces[2], pieces[3]]
    extra = square()
    assert board.add_to_bag(extra)
    assert board.bag[1] is extra


def test_reserve_random_piece_succeeds(board):
    piece = random_tetromino(random.Random(1))
    assert board.reserve(piece) == 1
    assert board.reserved is piece
    assert board.score == -piece.points


def test_reserve_placed_piece_lifts_it(board):
    piece = square(points=3)
    board.place(2, 1, piece)
    assert board.reserve(piece)
    assert board.score == 0
    assert board.tetromino_at(2, 1) is None


def test_reserve_full_refuses(board):
    first, second = square(), square()
    board.reserve(first)
    assert board.reserve(second) is False
    assert board.reserved is first


def test_clear_reserve(board):
    piece = square()
    board.reserve(piece)
    assert board.clear_reserve() is piece
    assert board.reserved is None
    assert board.clear_reserve() is None


def test_rotation_after_placement(board):
    piece = random_tetromino(random.Random(3))
    board.place(3, 3, piece)
    before = piece.rotation
    piece.rotate(1)
    assert piece.rotation == (before + 1) % 4


def test_discard_reserve(board):
    board.reserve(random_tetromino(random.Random(2)))
    board.discard_reserve()
    assert board.reserved is None


def test_swap_with_empty_bag(board):
    piece = random_tetromino(random.Random(4))
    board.reserve(piece)
    board.swap_reserve_with_bag(random.Random(0))
    assert board.reserved is not piece
    assert piece in board.bag


def test_swap_with_full_bag(board):
    pieces = [square() for _ in range(4)]
    for p in pieces:
        board.add_to_bag(p)
    held = square()
    board.reserve(held)
    board.swap_reserve_with_bag(random.Random(5))
    assert board.reserved in pieces
    assert held in board.bag
    assert board.reserved not in board.bag
    assert sum(slot is not None for slot in board.bag) == 4


def test_swap_without_reserve_does_nothing(board):
    pieces = [square() for _ in range(4)]
    for p in pieces:
        board.add_to_bag(p)
    board.swap_reserve_with_bag(random.Random(0))
    assert board.bag == pieces
    assert board.reserved is None


def test_refill_bag(board):
    old = [square() for _ in range(4)]
    for p in old:
        board.add_to_bag(p)
    board.refill_bag(random.Random(7))
    new_ids = [p.id for p in board.bag if p is not None]
    assert len(new_ids) == 4
    assert min(new_ids) > max(p.id for p in old)


def test_replace_random_in_bag_changes_one_slot(board):
    old = [square() for _ in range(4)]
    for p in old:
        board.add_to_bag(p)
    board.replace_random_in_bag(random.Random(8))
    changed = [a is not b for a, b in zip(old, board.bag)]
    assert changed.count(True) == 1


def test_renew_reserve(board):
    piece = square()
    board.reserve(piece)
    board.renew_reserve(random.Random(9))
    assert board.reserved is not None
    assert board.reserved.id != piece.id


def test_renew_empty_reserve_does_nothing(board):
    board.renew_reserve(random.Random(9))
    assert board.reserved is None
    assert board.score == 0