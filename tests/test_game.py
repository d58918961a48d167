import io
import random

from tetrobag.board import Board
from tetrobag.game import Game, init_game, main
from tetrobag.interface import Console
from tetrobag.tetromino import Kind, Tetromino


def make_game(board=None):
    board = board if board is not None else Board(8, 8, 4)
    out = io.StringIO()
    game = Game(board, Console(io.StringIO(""), out), random.Random(0))
    return game, out


def feed(game, text):
    game.console = Console(io.StringIO(text), game.console.stdout)


def test_init_game_fills_bag():
    board = init_game(8, 4, random.Random(3))
    assert len(board.bag) == 4
    assert all(piece is not None for piece in board.bag)
    assert board.score == 0
    assert all(value == 0 for line in board.grid for value in line)


def test_run_ends_immediately():
    game, out = make_game()
    feed(game, "0\n")
    assert game.run() == 0
    text = out.getvalue()
    assert "Fin du jeu" in text
    assert "Score final : 0" in text


def test_run_stops_at_end_of_input():
    game, out = make_game()
    feed(game, "")
    assert game.run() == 0
    assert "Fin du jeu" in out.getvalue()


def test_reserve_is_emptied_after_two_placements():
    game, out = make_game()
    first = Tetromino(Kind.O, 0, 2)
    game.board.add_to_bag(first)
    feed(game, f"{first.id}\n2\n0\n0 1\n1\n")
    game.play_from_bag()
    assert game.board.reserved is first
    assert game.board.score == 0
    assert game.board.tetromino_at(1, 0) is None
    assert "bien réservé" in out.getvalue()

    second = Tetromino(Kind.O, 0, 1)
    game.board.bag[0] = second
    feed(game, f"{second.id}\n2\n0\n2 1\n")
    game.play_from_bag()
    assert game.board.reserved is first

    third = Tetromino(Kind.O, 0, 1)
    game.board.bag[0] = third
    feed(game, f"{third.id}\n2\n0\n4 1\n")
    game.play_from_bag()
    assert game.board.reserved is None


def test_play_from_empty_reserve():
    game, out = make_game()
    assert game.play_from_reserve() is False
    assert "la réserve est vide!!" in out.getvalue()


def test_play_from_reserve_places_piece():
    game, _ = make_game()
    piece = Tetromino(Kind.O, 0, 3)
    game.board.reserve(piece)
    score_before = game.board.score
    feed(game, "0\n0 1\n")
    assert game.play_from_reserve() is True
    assert game.board.reserved is None
    assert game.board.tetromino_at(1, 0) is piece
    assert game.board.score == score_before + piece.points


def test_move_on_grid_relocates_piece():
    game, _ = make_game()
    piece = Tetromino(Kind.O, 0, 1)
    game.board.place(1, 0, piece)
    feed(game, "0 1\n3 5\n")
    assert game.move_on_grid() is True
    assert game.board.tetromino_at(5, 3) is piece
    assert game.board.tetromino_at(1, 0) is None


def test_reserve_action_with_empty_reserve_asks_again():
    game, out = make_game()
    feed(game, "3\n0\n")
    game.run()
    text = out.getvalue()
    assert "la réserve est vide!!" in text
    assert "Score final : 0" in text


def test_main_runs_game(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("0\n"))
    assert main(["--seed", "1"]) == 0
    captured = capsys.readouterr().out
    assert "Fin du jeu" in captured
    assert "Score final : 0" in captured