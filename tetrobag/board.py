"""The playing board: grid, bag of pieces, reserve and score."""

from __future__ import annotations

import random

from tetrobag.tetromino import Tetromino, random_tetromino


class Board:
    """A grid of cells with a bag of pieces to play and a one-piece reserve.

    Grid cells hold 0 when empty, otherwise the id of the piece covering them.
    """

    def __init__(self, rows: int, cols: int, bag_size: int) -> None:
        if rows <= 0 or cols <= 0 or bag_size <= 0:
            raise ValueError(
                f"board dimensions and bag size must be positive, "
                f"got rows={rows!r}, cols={cols!r}, bag_size={bag_size!r}"
            )
        self.rows = rows
        self.cols = cols
        self.bag_size = bag_size
        self.score = 0
        self.bag: list[Tetromino | None] = [None] * bag_size
        self.grid: list[list[int]] = [[0] * cols for _ in range(rows)]
        self.reserved: Tetromino | None = None
        self._placed: dict[int, Tetromino] = {}

    def __repr__(self) -> str:
        return f"Board(rows={self.rows}, cols={self.cols}, bag_size={self.bag_size}, score={self.score})"

    @property
    def placed(self) -> list[Tetromino]:
        """The pieces currently on the grid, in placement order."""
        return list(self._placed.values())

    def _rng(self, rng: random.Random | None) -> random.Random:
        return rng if rng is not None else random.Random()

    def add_to_bag(self, tetromino: Tetromino) -> bool:
        """Put a piece in the first free bag slot; False if the bag is full."""
        for index, slot in enumerate(self.bag):
            if slot is None:
                self.bag[index] = tetromino
                return True
        return False

    def remove_from_bag(self, tetromino: Tetromino) -> None:
        """Empty every bag slot holding this piece."""
        for index, slot in enumerate(self.bag):
            if slot is not None and slot.id == tetromino.id:
                self.bag[index] = None

    def _in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def can_place(self, row: int, col: int, tetromino: Tetromino) -> bool:
        """Tell whether the piece fits with its reference cell at (row, col)."""
        for d_row, d_col in tetromino.cells:
            r, c = row + d_row, col + d_col
            if not self._in_bounds(r, c) or self.grid[r][c] != 0:
                return False
        return True

    def place(self, row: int, col: int, tetromino: Tetromino) -> bool:
        """Place the piece and add its points to the score; False if it does not fit."""
        if not self.can_place(row, col, tetromino):
            return False
        for d_row, d_col in tetromino.cells:
            self.grid[row + d_row][col + d_col] = tetromino.id
        self.score += tetromino.points
        self._placed[tetromino.id] = tetromino
        return True

    def remove(self, tetromino: Tetromino) -> tuple[int, int] | None:
        """Lift the piece off the grid.

        Returns the smallest row and the smallest column it covered,
        or None when the piece was not on the grid.
        """
        covered = [
            (r, c)
            for r, line in enumerate(self.grid)
            for c, value in enumerate(line)
            if value == tetromino.id
        ]
        if not covered:
            return None
        for r, c in covered:
            self.grid[r][c] = 0
        self._placed.pop(tetromino.id, None)
        return min(r for r, _ in covered), min(c for _, c in covered)

    def tetromino_at(self, row: int, col: int) -> Tetromino | None:
        """Return the piece covering (row, col), or None if the cell is empty."""
        if not self._in_bounds(row, col):
            raise IndexError(f"cell ({row}, {col}) is outside the board")
        value = self.grid[row][col]
        if value == 0:
            return None
        return self._placed.get(value)

    def reserve(self, tetromino: Tetromino) -> bool:
        """Move a piece into the reserve, taking it off the grid and its points off the score.

        Returns False, changing nothing, when the reserve is already full.
        """
        if self.reserved is not None:
            return False
        self.remove(tetromino)
        self.reserved = tetromino
        self.score -= tetromino.points
        return True

    def clear_reserve(self) -> Tetromino | None:
        """Empty the reserve and return the piece it held, if any."""
        piece, self.reserved = self.reserved, None
        return piece

    def refill_bag(self, rng: random.Random | None = None) -> None:
        """Replace every piece in the bag with a new random one."""
        rng = self._rng(rng)
        self.bag = [None] * self.bag_size
        for _ in range(self.bag_size):
            self.add_to_bag(random_tetromino(rng))

    def replace_random_in_bag(self, rng: random.Random | None = None) -> None:
        """Replace one randomly chosen bag slot with a new random piece."""
        rng = self._rng(rng)
        index = rng.randrange(self.bag_size)
        self.bag[index] = random_tetromino(rng)

    def discard_reserve(self) -> None:
        """Drop the reserved piece, if there is one."""
        if self.reserved is not None:
            self.clear_reserve()

    def renew_reserve(self, rng: random.Random | None = None) -> None:
        """Swap the reserved piece for a new random one; nothing happens if the reserve is empty."""
        if self.reserved is None:
            return
        rng = self._rng(rng)
        self.clear_reserve()
        self.reserve(random_tetromino(rng))

    def swap_reserve_with_bag(self, rng: random.Random | None = None) -> None:
        """Exchange the reserved piece with a randomly chosen bag slot.

        Nothing happens if the reserve is empty. If the chosen slot is empty,
        the reserve ends up empty and its piece goes into the bag.
        """
        if self.reserved is None:
            return
        rng = self._rng(rng)
        index = rng.randrange(self.bag_size)
        previous = self.clear_reserve()
        chosen = self.bag[index]
        if chosen is not None:
            self.reserve(chosen)
            self.remove_from_bag(chosen)
        self.add_to_bag(previous)