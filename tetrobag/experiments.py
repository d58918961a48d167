"""Deepest-fit placement strategy and the 4n x 4n board experiments."""

from __future__ import annotations

import argparse
import itertools
import random
import time
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from tetrobag.board import Board
from tetrobag.tetromino import MAX_POINTS, Kind, Tetromino

EXPERIMENT_BAG_SIZE = 4
DEFAULT_MAX_N = 20

PRESETS: dict[str, tuple[Kind, ...]] = {
    "J_L": (Kind.J, Kind.L),
    "S_Z": (Kind.S, Kind.Z),
    "T_O_I": (Kind.I, Kind.O, Kind.T),
}


@dataclass(frozen=True)
class ExperimentResult:
    """Outcome of one experiment on a 4n x 4n board."""

    n: int
    seconds: float
    score: int

    @property
    def size(self) -> int:
        """Side length of the board used."""
        return 4 * self.n


@dataclass(frozen=True)
class _Plan:
    top: int
    row: int
    start: int
    length: int


def _deepest_row(board: Board, piece: Tetromino) -> tuple[int, list[int]] | None:
    """Return the lowest row where the piece fits and the columns where it does."""
    for row in reversed(range(board.rows)):
        columns = [col for col in range(board.cols) if board.can_place(row, col, piece)]
        if columns:
            return row, columns
    return None


def _smallest_run(columns: Iterable[int]) -> tuple[int, int]:
    """Return (start, length) of the first shortest run of consecutive columns."""
    best: tuple[int, int] | None = None
    for _, group in itertools.groupby(enumerate(columns), key=lambda pair: pair[1] - pair[0]):
        run = [col for _, col in group]
        if best is None or len(run) < best[1]:
            best = (run[0], len(run))
    if best is None:
        raise ValueError("no columns given")
    return best


def _plan(board: Board, piece: Tetromino) -> _Plan | None:
    found = _deepest_row(board, piece)
    if found is None:
        return None
    row, columns = found
    start, length = _smallest_run(columns)
    top = row + min(d_row for d_row, _ in piece.cells)
    return _Plan(top=top, row=row, start=start, length=length)


def deepest_fit(board: Board) -> int | None:
    """Place one bag piece by the deepest-fit rule and return its bag index.

    Each piece is tried at the lowest row where it fits, in the narrowest run
    of positions there; the piece whose highest cell ends up lowest is chosen.
    It goes to the left end of its run in the left half of the board, to the
    right end otherwise. The piece stays in the bag. Returns None when no
    piece of the bag fits anywhere.
    """
    best: tuple[int, Tetromino, _Plan] | None = None
    for index, piece in enumerate(board.bag):
        if piece is None:
            continue
        plan = _plan(board, piece)
        if plan is None:
            continue
        if best is None or plan.top > best[2].top:
            best = (index, piece, plan)
    if best is None:
        return None
    index, piece, plan = best
    if plan.start < board.cols // 2:
        col = plan.start
    else:
        col = plan.start + plan.length - 1
    if not board.place(plan.row, col, piece):
        raise RuntimeError("planned placement does not fit")
    return index


def _run_one(n: int, kinds: Sequence[Kind], rng: random.Random) -> ExperimentResult:
    start = time.process_time()
    board = Board(4 * n, 4 * n, EXPERIMENT_BAG_SIZE)
    while True:
        while board.add_to_bag(Tetromino(rng.choice(kinds), 0, rng.randrange(MAX_POINTS) + 1)):
            pass
        index = deepest_fit(board)
        if index is None:
            break
        piece = board.bag[index]
        if piece is not None:
            board.remove_from_bag(piece)
    return ExperimentResult(n=n, seconds=time.process_time() - start, score=board.score)


def run_experiment(
    kinds: Iterable[int],
    max_n: int = DEFAULT_MAX_N,
    rng: random.Random | None = None,
) -> list[ExperimentResult]:
    """Fill boards of side 4, 8, ..., 4*max_n by deepest fit with pieces of the given kinds."""
    kind_list = [Kind(kind) for kind in kinds]
    if not kind_list:
        raise ValueError("at least one tetromino kind is required")
    if max_n < 1:
        raise ValueError(f"max_n must be at least 1, got {max_n!r}")
    rng = rng if rng is not None else random.Random()
    return [_run_one(n, kind_list, rng) for n in range(1, max_n + 1)]


def format_results(results: Sequence[ExperimentResult]) -> str:
    """Lay the results out as the n, time and score table."""
    lines = [
        "le tableau de valeurs:",
        "n " + "".join(f"{result.n} " for result in results),
        "temps " + "".join(f"{result.seconds:f} " for result in results),
        "score " + "".join(f"{result.score} " for result in results),
    ]
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Run a 4n x 4n experiment and print its table."""
    parser = argparse.ArgumentParser(
        prog="tetrobag-experiment", description="Deepest-fit experiments on 4n x 4n boards."
    )
    parser.add_argument("--kinds", choices=sorted(PRESETS), default="T_O_I",
                        help="family of pieces to draw from")
    parser.add_argument("--max-n", type=int, default=DEFAULT_MAX_N,
                        help="largest n, the board side being 4n")
    parser.add_argument("--seed", type=int, default=None, help="seed for the random pieces")
    args = parser.parse_args(argv)
    if args.max_n < 1:
        parser.error("--max-n must be at least 1")
    print("expérience 4n*4n:")
    results = run_experiment(PRESETS[args.kinds], args.max_n, random.Random(args.seed))
    print(format_results(results))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())