"""Tetromino pieces: shapes, orientations, identifiers and rendering."""

from __future__ import annotations

import itertools
import random
from enum import IntEnum

BOARD_SIZE = 8
BAG_SIZE = 4
TETROMINO_SIZE = 5

END_GAME = 0
PLACE_TETROMINO = 1
MOVE_TETROMINO = 2
ROTATE_TETROMINO = 3
ROTATE_AND_MOVE_TETROMINO = 4
NUM_ACTIONS = 5

MIN_POINTS = 1
MAX_POINTS = 3

RESET = "\x1b[0m"
BG_WHITE = "\x1b[47m"
BLOCK = "██"
ANCHOR_COLOR = 91

_PREVIEW_SIZE = 6
_ANCHOR_ROW = 4
_ANCHOR_COL = 2


class Kind(IntEnum):
    """The seven tetromino shapes."""

    I = 0  # noqa: E741
    O = 1  # noqa: E741
    T = 2
    L = 3
    J = 4
    S = 5
    Z = 6


Cells = tuple[tuple[int, int], ...]

# Cells are (row, column) offsets from the reference cell (0, 0);
# each kind lists its distinct orientations in rotation order.
_SHAPES: dict[Kind, tuple[Cells, ...]] = {
    Kind.I: (
        ((0, 0), (-1, 0), (-2, 0), (-3, 0)),
        ((0, 0), (0, 1), (0, 2), (0, 3)),
    ),
    Kind.O: (
        ((0, 0), (-1, 0), (0, 1), (-1, 1)),
    ),
    Kind.T: (
        ((0, 0), (-1, -1), (-1, 0), (-1, 1)),
        ((0, 0), (-1, -1), (-1, 0), (-2, 0)),
        ((0, 0), (0, 1), (-1, 1), (0, 2)),
        ((0, 0), (-1, 1), (-1, 0), (-2, 0)),
    ),
    Kind.L: (
        ((0, 0), (0, 1), (-1, 0), (-2, 0)),
        ((0, 0), (-1, 0), (-1, 1), (-1, 2)),
        ((0, 0), (-1, 0), (-2, 0), (-2, -1)),
        ((0, 0), (0, 1), (0, 2), (-1, 2)),
    ),
    Kind.J: (
        ((0, 0), (0, 1), (-1, 1), (-2, 1)),
        ((0, 0), (-1, 0), (0, 1), (0, 2)),
        ((0, 0), (-1, 0), (-2, 0), (-2, 1)),
        ((0, 0), (-1, 0), (-1, -1), (-1, -2)),
    ),
    Kind.S: (
        ((0, 0), (0, 1), (-1, 1), (-1, 2)),
        ((0, 0), (-1, 0), (-1, -1), (-2, -1)),
    ),
    Kind.Z: (
        ((0, 0), (0, 1), (-1, 0), (-1, -1)),
        ((0, 0), (-1, 0), (-1, 1), (-2, 1)),
    ),
}

_identifiers = itertools.count(1)


def _as_kind(kind: int) -> Kind:
    try:
        return Kind(kind)
    except ValueError:
        raise ValueError(f"invalid tetromino kind: {kind!r}") from None


def shape_cells(kind: int, orientation: int) -> Cells:
    """Return the four (row, column) offsets of a kind in an orientation."""
    shapes = _SHAPES[_as_kind(kind)]
    return shapes[orientation % len(shapes)]


class Tetromino:
    """A piece with a kind, an orientation, a point value and a unique id."""

    __slots__ = ("kind", "orientation", "points", "id")

    def __init__(self, kind: int, orientation: int = 0, points: int = MIN_POINTS) -> None:
        self.kind = _as_kind(kind)
        if not MIN_POINTS <= points <= MAX_POINTS:
            raise ValueError(
                f"points must be between {MIN_POINTS} and {MAX_POINTS}, got {points!r}"
            )
        self.orientation = orientation
        self.points = points
        self.id = next(_identifiers)

    def __repr__(self) -> str:
        return (
            f"Tetromino(id={self.id}, kind={self.kind.name}, "
            f"rotation={self.rotation}, points={self.points})"
        )

    @property
    def rotation(self) -> int:
        """The orientation reduced to a quarter-turn count in 0..3."""
        return self.orientation % 4

    @property
    def cells(self) -> Cells:
        """The offsets this piece covers in its current orientation."""
        return shape_cells(self.kind, self.orientation)

    @property
    def color_code(self) -> int:
        """The ANSI foreground colour used to draw this piece."""
        return 31 + self.id % 6

    def rotate(self, steps: int) -> None:
        """Turn the piece by the given number of quarter turns."""
        if steps == 0:
            return
        self.orientation += steps

    def _paint(self, mark: str) -> str:
        if mark == "-":
            return f"{BG_WHITE}  {RESET}"
        if mark == "X":
            return f"\x1b[{ANCHOR_COLOR}m{BLOCK}{RESET}"
        return f"\x1b[{self.color_code}m{BLOCK}{RESET}"

    def render(self) -> str:
        """Draw the piece on a 6x6 preview grid, the reference cell highlighted."""
        grid = [["-"] * _PREVIEW_SIZE for _ in range(_PREVIEW_SIZE)]
        for row, col in self.cells:
            grid[_ANCHOR_ROW + row][_ANCHOR_COL + col] = "X" if (row, col) == (0, 0) else "O"
        return "".join("".join(self._paint(mark) for mark in line) + "\n" for line in grid)


def random_tetromino(rng: random.Random | None = None) -> Tetromino:
    """Create a piece with random points (1-3), kind and orientation (0-3)."""
    rng = rng if rng is not None else random.Random()
    points = rng.randrange(MAX_POINTS) + 1
    kind = rng.randrange(len(Kind))
    orientation = rng.randrange(4)
    return Tetromino(kind, orientation, points)