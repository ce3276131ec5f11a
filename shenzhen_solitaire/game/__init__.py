"""Game logic."""

from .deal import deal_playfield, deal_shuffled_playfield, shuffled_deck
from .dragon import flip_dragon
from .engine import GameEngine
from .rules import can_place_on_pile, can_place_on_top, is_coherent_run
from .validator import MoveResult, MoveValidator, RejectReason

__all__ = [
    "GameEngine",
    "MoveResult",
    "MoveValidator",
    "RejectReason",
    "can_place_on_pile",
    "can_place_on_top",
    "deal_playfield",
    "deal_shuffled_playfield",
    "flip_dragon",
    "is_coherent_run",
    "shuffled_deck",
]
