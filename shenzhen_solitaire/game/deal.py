"""Deck shuffling and dealing."""

from __future__ import annotations

import random
from collections.abc import Sequence

from shenzhen_solitaire.models.card import Card, create_full_deck
from shenzhen_solitaire.models.playfield import Playfield
from shenzhen_solitaire.models.position import NUM_COLUMNS

DECK_SIZE = 40
ROWS = DECK_SIZE // NUM_COLUMNS


def shuffled_deck(seed: int | None = None) -> list[Card]:
    """Create a full deck in random order."""
    rng = random.Random(seed)
    deck = create_full_deck()
    rng.shuffle(deck)
    return deck


def deal_playfield(deck: Sequence[Card]) -> Playfield:
    """Deal a 40-card deck onto an empty board.

    Card i goes to column i % 8, so each column gets five cards and the
    last card dealt to a column is its top.
    """
    if len(deck) != DECK_SIZE:
        raise ValueError(f"Invalid deck: expected {DECK_SIZE} cards, got {len(deck)}")

    columns: list[list[Card]] = [[] for _ in range(NUM_COLUMNS)]
    for row in range(ROWS):
        for col in range(NUM_COLUMNS):
            columns[col].append(deck[row * NUM_COLUMNS + col])

    return Playfield(tableau=tuple(tuple(column) for column in columns))


def deal_shuffled_playfield(seed: int | None = None) -> Playfield:
    """Shuffle a fresh deck and deal it."""
    return deal_playfield(shuffled_deck(seed))
