# tetrobag

A turn-based tetromino puzzle for the terminal. Pieces do not fall and there is
no clock. You place pieces on a square grid, and each piece you place adds its
points to your score. The prompts are in French.

## How the game works

- The board is an 8×8 grid. Your **bag** holds 4 random tetrominoes. Each piece
  has a kind (I, O, T, L, J, S, Z), an orientation and a value of 1 to 3 points.
- On each turn you choose an action:
  - `0`: stop the game.
  - `1`: take a piece from the bag, rotate it if you want, and place it. Once
    the piece is placed, a new random piece goes into the bag. If the reserve is
    free, you can then move the piece you just placed into the **reserve**. This
    takes it off the grid and subtracts its points from your score.
  - `2`: move a piece that is already on the grid. If it does not fit at the
    new position, it goes back to where it was.
  - `3`: place the piece held in the reserve. If the reserve is empty, you are
    asked to choose an action again.
- The reserved piece is discarded if two more pieces are placed from the bag
  before you use it.
- After choosing a piece from the bag, you may draw an **effect card** and then
  decide whether to use it. A card does one of the following:
  - refills the whole bag with new random pieces;
  - replaces one randomly chosen bag slot with a new random piece;
  - discards the reserved piece;
  - replaces the reserved piece with a new random one;
  - swaps the reserved piece with a randomly chosen piece from the bag.

  The last three cards do nothing when the reserve is empty.

The board is drawn with ANSI colours, so use a terminal that supports them.

## Installation

```
pip install .
```

## Playing

```
tetrobag
tetrobag --seed 42
```

Answer every prompt with numbers. Enter coordinates as the column first and
then the row, separated by a space. With `--seed` you get the same random pieces
every time. The game ends when you choose `0` or when input runs out. It then
shows the final board, your score and the CPU time used.

## Deepest-fit experiment

`tetrobag-experiment` plays automatically with a "deepest fit" rule. For each
piece in the bag it finds the lowest row where the piece fits, and within that
row the narrowest run of positions where it fits. It picks the piece whose
highest cell ends up lowest. That piece goes at the left end of its run if the
run starts in the left half of the board, and at the right end otherwise.

The experiment fills boards of side 4, 8, …, 4n until no piece in the bag fits.
It then prints a table with the CPU time and the final score for each size.

```
tetrobag-experiment --kinds J_L --max-n 10 --seed 1
```

- `--kinds`: the family of pieces to draw from: `J_L`, `S_Z` or `T_O_I`
  (default `T_O_I`).
- `--max-n`: the largest n, where the board side is 4n (default 20).
- `--seed`: seed for the random pieces.

## Using it as a library

```python
import random

from tetrobag.board import Board
from tetrobag.tetromino import Kind, Tetromino

board = Board(8, 8, 4)
piece = Tetromino(Kind.O, orientation=0, points=1)
if board.can_place(2, 1, piece):
    board.place(2, 1, piece)
print(board.score)

board.refill_bag(random.Random(0))
```

- `tetrobag.tetromino`: `Kind`, `Tetromino` (`rotate`, `render`, `cells`),
  `shape_cells` and `random_tetromino`.
- `tetrobag.board`: `Board`, which manages the grid, the bag, the reserve and
  the score.
- `tetrobag.cards`: `Card`, `draw_card` and `apply_card`.
- `tetrobag.interface`: `render_board` and the `Console` dialogue. The console
  reads from and writes to any text streams you pass it.
- `tetrobag.game`: `init_game(size, bag_size, rng)` builds a board with a full
  bag. `Game` runs the interactive loop.
- `tetrobag.experiments`: `deepest_fit`, `run_experiment`, `ExperimentResult`
  and `format_results`.

## What it does not do

- The game does not detect when no piece can be placed any more. It runs until
  you stop it.
- `tetrobag.cards.CARDS` also describes other cards: removing or copying pieces
  on the board, a larger reserve, a larger bag, and a uniform bag. These cards
  are never drawn, and `apply_card` does nothing with them and returns `False`.
- Games cannot be saved or resumed, and there is no high-score list.

## Tests

```
pip install .[test]
pytest
```