"""Game models."""

from .card import FLOWER, Card, CardKind, Suit, create_full_deck
from .playfield import FreeCell, FreeCellStatus, Playfield
from .position import Action, FlipDragon, InvalidPositionError, Move, Position, ZoneKind

__all__ = [
    "FLOWER",
    "Action",
    "Card",
    "CardKind",
    "FlipDragon",
    "FreeCell",
    "FreeCellStatus",
    "InvalidPositionError",
    "Move",
    "Playfield",
    "Position",
    "Suit",
    "ZoneKind",
    "create_full_deck",
]
