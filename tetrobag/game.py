"""The interactive game loop."""

from __future__ import annotations

import argparse
import random
import time
from enum import IntEnum

from tetrobag.board import Board
from tetrobag.interface import Console
from tetrobag.tetromino import BAG_SIZE, BOARD_SIZE, random_tetromino


class Action(IntEnum):
    """Choices offered to the player each turn."""

    END = 0
    PLACE = 1
    MOVE = 2
    RESERVE = 3


def init_game(size: int, bag_size: int, rng: random.Random | None = None) -> Board:
    """Create a square board and fill its bag with random pieces."""
    board = Board(size, size, bag_size)
    for _ in range(bag_size):
        board.add_to_bag(random_tetromino(rng))
    return board


class Game:
    """One game: a board, the player's console and the reserve bookkeeping."""

    def __init__(
        self,
        board: Board | None = None,
        console: Console | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.board = board if board is not None else init_game(BOARD_SIZE, BAG_SIZE, self.rng)
        self.console = console if console is not None else Console()
        self._reserve_turns: int | None = None
        self._reserve_locked = False

    def _count_reserve_turn(self) -> None:
        if self._reserve_turns is None:
            return
        self._reserve_turns += 1
        if self._reserve_turns == 2:
            self.board.clear_reserve()
            self._reserve_turns = None

    def play_from_bag(self) -> bool:
        """Take a piece from the bag and place it; True if it was placed."""
        board, console = self.board, self.console
        piece = console.select_in_bag(board)
        console.ask_use_card(board, self.rng)
        board.remove_from_bag(piece)
        console.ask_rotation(piece)
        console.display_message(piece.render().rstrip("\n"))
        row, col = console.ask_placement(board, piece)
        if not board.place(row, col, piece):
            console.display_message("tetromino pas placé\n")
            board.add_to_bag(piece)
            return False
        self._count_reserve_turn()
        board.add_to_bag(random_tetromino(self.rng))
        if not self._reserve_locked and console.ask_yes_no(
            "voulez-vous mettre le tetromino dans la réserve? Oui(1) ou non(2)"
        ):
            if board.reserve(piece):
                console.display_message("bien réservé")
                self._reserve_turns = 0
                self._reserve_locked = True
        return True

    def move_on_grid(self) -> bool:
        """Move a piece already on the grid; True if it reached its new place."""
        board, console = self.board, self.console
        piece = console.select_on_grid(board)
        origin = board.remove(piece)
        row, col = console.ask_placement(board, piece)
        if board.place(row, col, piece):
            return True
        if origin is not None:
            board.place(*origin, piece)
        return False

    def play_from_reserve(self) -> bool:
        """Place the reserved piece; False when the reserve is empty."""
        board, console = self.board, self.console
        piece = board.reserved
        if piece is None:
            console.display_message("la réserve est vide!!")
            return False
        console.ask_rotation(piece)
        console.display_message(piece.render().rstrip("\n"))
        row, col = console.ask_placement(board, piece)
        if board.place(row, col, piece):
            board.clear_reserve()
            self._reserve_locked = False
            self._reserve_turns = None
        return True

    def _take_turn(self) -> bool:
        """Run one turn; False once the player ends the game."""
        while True:
            action = self.console.choose_action()
            if action == Action.END:
                return False
            if action == Action.PLACE:
                self.play_from_bag()
            elif action == Action.MOVE:
                self.move_on_grid()
            elif action == Action.RESERVE and not self.play_from_reserve():
                continue
            return True

    def run(self) -> int:
        """Play until the player stops or input runs out; return the final score."""
        start = time.process_time()
        try:
            while True:
                self.console.display_board(self.board)
                if not self._take_turn():
                    break
        except EOFError:
            pass
        self.console.display_end_game(self.board)
        self.console.display_message(f"Score final : {self.board.score}")
        elapsed = time.process_time() - start
        self.console.display_message(f"Temps CPU utilisé : {elapsed:f} secondes")
        return self.board.score


def main(argv: list[str] | None = None) -> int:
    """Start an interactive game on the console."""
    parser = argparse.ArgumentParser(prog="tetrobag", description="Place tetrominoes from a bag.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the random pieces")
    args = parser.parse_args(argv)
    Game(rng=random.Random(args.seed)).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())