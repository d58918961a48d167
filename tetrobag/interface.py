"""Console interaction: prompts, input parsing and board rendering."""

from __future__ import annotations

import random
import re
import sys
from typing import TextIO

from tetrobag.board import Board
from tetrobag.cards import Card, apply_card, draw_card
from tetrobag.tetromino import BG_WHITE, BLOCK, RESET, Tetromino

_INT = re.compile(r"\s*([+-]?\d+)")
_EMPTY_CELL = f"{BG_WHITE}  {RESET}"
_PREVIEW_GAP = " " * 25
_PREVIEW_SIZE = 6

_ACTION_PROMPT = (
    "Voulez-vous arrêter le jeu ? Si oui, saisissez (0). Pour prendre un tetromino dans le sac "
    "et le placer, saisissez (1). Si vous voulez déplacer un tetromino présent sur la grille, "
    "saisissez (2). Pour placer le tetromino dans la réserve (s'il y en a), saisissez (3) : "
)
_GRID_PROMPT = (
    "Veuillez choisir un tétromino de la grille. Veuillez saisir un entier naturel pour le "
    "numéro de la colonne suivi par le numéro de ligne : "
)
_BAG_PROMPT = (
    "Veuillez choisir un tetromino dans le sac. Veuillez saisir un entier naturel pour "
    "l'identifiant : "
)
_PLACE_PROMPT = (
    "Veuillez sélectionner une colonne et une ligne où placer le tétromino sur la grille. "
    "Veuillez saisir un entier naturel pour le numéro de colonne suivi par le numéro de ligne : "
)
_ROTATE_PROMPT = "Voulez-vous orienter le tetromino? Oui(Mettez de combien de fois) Non(0) "
_TWO_INTS_ERROR = "Entrée invalide. Veuillez saisir deux entiers positifs séparés par un espace."


def _scan_ints(text: str, count: int) -> tuple[int, ...] | None:
    """Read `count` leading integers separated by whitespace, or None if there are fewer."""
    values = []
    pos = 0
    for _ in range(count):
        match = _INT.match(text, pos)
        if match is None:
            return None
        values.append(int(match.group(1)))
        pos = match.end()
    return tuple(values)


def _bag_header(piece: Tetromino | None) -> str:
    if piece is None:
        return "Emplacement vide       "
    return f"Tétromino {piece.id} : Type {int(piece.kind)}, Points {piece.points}       "


def _preview_lines(piece: Tetromino | None) -> list[str]:
    if piece is None:
        return [_EMPTY_CELL * _PREVIEW_SIZE] * _PREVIEW_SIZE
    return piece.render().splitlines()


def _grid_cell(value: int) -> str:
    if value == 0:
        return _EMPTY_CELL + " "
    return f"\x1b[{31 + value % 6}m{BLOCK}{RESET} "


def render_board(board: Board) -> str:
    """Render the grid, the bag, the reserve and the score as text."""
    parts = [
        f"Le nombre de lignes : {board.rows} \n",
        f"Le nombre de colonnes : {board.cols} \n",
        "Plateau de jeu :\n",
        "   " + "".join(f"{col}  " for col in range(board.cols)) + "\n",
    ]
    for index, line in enumerate(board.grid):
        parts.append(f"\n{index} " + "".join(_grid_cell(value) for value in line) + "\n")

    parts.append("\nSac de tétrominos :\n")
    parts.append("".join(_bag_header(piece) for piece in board.bag) + "\n")
    previews = [_preview_lines(piece) for piece in board.bag]
    for rows in zip(*previews):
        parts.append("".join(row + _PREVIEW_GAP for row in rows) + "\n")
    parts.append("\n")

    parts.append("\nRéserve :\n")
    reserved = board.reserved
    if reserved is None:
        parts.append("la réserve est vide.\n")
    else:
        parts.append(
            f"Tétromino {reserved.id} : Type {int(reserved.kind)}, Points {reserved.points}\n"
        )
        parts.append(reserved.render())

    parts.append(f"\nScore actuel : {board.score}\n\n")
    return "".join(parts)


class Console:
    """Text dialogue with the player over an input and an output stream."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def _write(self, text: str) -> None:
        self.stdout.write(text)

    def _ask(self, prompt: str) -> str:
        self._write(prompt + "\n")
        line = self.stdin.readline()
        if not line:
            raise EOFError("no more input")
        return line

    def choose_action(self) -> int:
        """Ask which action to take and return its number."""
        while True:
            values = _scan_ints(self._ask(_ACTION_PROMPT), 1)
            if values is not None:
                return values[0]
            self._write("Entrée invalide. Veuillez saisir un entier.\n")

    def display_board(self, board: Board) -> None:
        """Show the whole game state."""
        self._write(render_board(board))

    def select_on_grid(self, board: Board) -> Tetromino:
        """Ask for a column and a row until they point at a piece on the grid."""
        while True:
            values = _scan_ints(self._ask(_GRID_PROMPT), 2)
            if values is None or values[0] < 0 or values[1] < 0:
                self._write(_TWO_INTS_ERROR + "\n")
                continue
            col, row = values
            piece = None
            if row < board.rows and col < board.cols:
                piece = board.tetromino_at(row, col)
            if piece is not None:
                return piece
            self._write("Aucun tétromino trouvé à cet emplacement. Veuillez réessayer.\n")

    def select_in_bag(self, board: Board) -> Tetromino:
        """Ask for an identifier until it names a piece in the bag."""
        while True:
            values = _scan_ints(self._ask(_BAG_PROMPT), 1)
            if values is None or values[0] < 0:
                self._write("Entrée invalide. Veuillez saisir un entier positif.\n")
                continue
            wanted = values[0]
            for piece in board.bag:
                if piece is not None and piece.id == wanted:
                    return piece
            self._write(
                "identifiant de tétromino non trouvé dans le sac. Veuillez réessayer.\n"
            )

    def ask_placement(self, board: Board, tetromino: Tetromino) -> tuple[int, int]:
        """Ask for a column and a row where the piece fits; return (row, column)."""
        while True:
            values = _scan_ints(self._ask(_PLACE_PROMPT), 2)
            if values is None or values[0] < 0 or values[1] < 0:
                self._write(_TWO_INTS_ERROR + "\n")
                continue
            col, row = values
            if board.can_place(row, col, tetromino):
                return row, col
            self._write(
                "Emplacement déjà occupé. Veuillez sélectionner un autre emplacement.\n"
            )

    def ask_rotation(self, tetromino: Tetromino) -> int:
        """Ask how many quarter turns to apply, apply them and return the count."""
        while True:
            values = _scan_ints(self._ask(_ROTATE_PROMPT), 1)
            if values is not None:
                tetromino.rotate(values[0])
                return values[0]
            self._write("entrée invalide!\n")

    def ask_yes_no(self, prompt: str) -> bool:
        """Ask a question answered by 1 (yes) or 2 (no)."""
        while True:
            values = _scan_ints(self._ask(prompt), 1)
            if values is not None and values[0] in (1, 2):
                return values[0] == 1
            self._write("Entrée invalide. Veuillez saisir 1 ou 2\n")

    def display_end_game(self, board: Board) -> None:
        """Announce the end of the game and show the final state."""
        self._write("Fin du jeu\n")
        self.display_board(board)

    def display_message(self, message: str) -> None:
        """Print a message on its own line."""
        self._write(f"{message}\n")

    def display_card(self, card: Card) -> None:
        """Show a card's name and effect."""
        self._write(f"{card}\n")

    def ask_use_card(self, board: Board, rng: random.Random | None = None) -> Card | None:
        """Offer to draw a card and to use it; return the drawn card, if any."""
        if not self.ask_yes_no("voulez-vous générer une carte? Oui(1) ou non(2)"):
            return None
        card = draw_card(rng)
        self.display_card(card)
        if self.ask_yes_no("voulez-vous utiliser la carte? Oui(1) ou non(2)"):
            apply_card(card, board, rng)
        return card