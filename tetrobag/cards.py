"""Bonus cards that can be drawn during a game and their effects."""

from __future__ import annotations

import random
from dataclasses import dataclass

from tetrobag.board import Board


@dataclass(frozen=True)
class Card:
    """A bonus card: its number, name and the effect it describes."""

    num: int
    name: str
    description: str

    def __str__(self) -> str:
        return f"Nom:{self.name}\nEffet:{self.description}"


CARDS: dict[int, Card] = {
    card.num: card
    for card in (
        Card(0, "Échange aléatoire",
             "Supprimez une pièce du sac, elle est remplacée par une autre pièce aléatoirement."),
        Card(1, "Réserve vidée",
             "Supprimez une pièce dans la réserve. La carte n'a pas d'effet si la réserve est vide."),
        Card(2, "Réserve renouvelée",
             "Remplacez la pièce de réserve par un nouveau tétromino choisi aléatoirement. "
             "La carte n'a pas d'effet si la réserve est vide."),
        Card(3, "Grand ménage",
             "Choisissez autant de pièces que vous souhaitez sur le plateau. Ces pièces sont supprimées. "
             "Pour chaque pièce supprimée, vous perdez un point plus le nombre de points associés à la pièce."),
        Card(5, "Troc",
             "Choisissez une pièce du sac et une pièce de la réserve et échangez les. "
             "La carte n'a pas d'effet si la réserve est vide."),
        Card(6, "Copie",
             "Choisissez une pièce du plateau, ajoutez une nouvelle pièce identique dans la réserve. "
             "Cette carte n'a pas d'effet si la réserve est pleine."),
        Card(7, "Démolition",
             "Supprimez 3 pièces du plateau. Vous ne perdez aucun points."),
        Card(8, "Nouveau sac",
             "Remplacez les 4 pièces du sac par 4 nouvelles pièces aléatoires."),
        Card(14, "Uniformité",
             "Choisissez un tétromino (n'importe lequel, pas forcément une pièce en jeu), "
             "remplacez toutes les pièces du sac par cette pièce."),
        Card(16, "Grande réserve",
             "La réserve peut contenir une pièce de plus jusqu'à la fin de la partie."),
        Card(17, "Grand sac",
             "Votre sac peut maintenant contenir une pièce de plus. "
             "Une nouvelle pièce choisie aléatoirement est ajoutée à votre sac."),
    )
}

DRAWABLE = (0, 1, 2, 5, 8)


def draw_card(rng: random.Random | None = None) -> Card:
    """Draw one of the playable cards uniformly at random."""
    rng = rng if rng is not None else random.Random()
    return CARDS[rng.choice(DRAWABLE)]


def apply_card(card: Card, board: Board, rng: random.Random | None = None) -> bool:
    """Apply the card's effect to the board; False if the card has no effect."""
    rng = rng if rng is not None else random.Random()
    if card.num == 8:
        board.refill_bag(rng)
    elif card.num == 0:
        board.replace_random_in_bag(rng)
    elif card.num == 1:
        board.discard_reserve()
    elif card.num == 2:
        board.renew_reserve(rng)
    elif card.num == 5:
        board.swap_reserve_with_bag(rng)
    else:
        return False
    return True