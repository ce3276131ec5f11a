"""Formatters for game log output."""

from collections.abc import Iterable
from typing import Any

from shenzhen_solitaire.models.card import Card, CardKind, Suit
from shenzhen_solitaire.models.playfield import FreeCell, FreeCellStatus, Playfield
from shenzhen_solitaire.models.position import Position, ZoneKind

# Suit codes for log output
SUIT_CODES: dict[Suit, str] = {
    Suit.RED: "R",
    Suit.GREEN: "G",
    Suit.BLACK: "B",
}

FLOWER_CODE = "F"
DRAGON_CODE = "D"


def format_card(card: Card) -> str:
    """Format a single card to string.

    Args:
        card: Card to format.

    Returns:
        Formatted string (e.g., "G3" for Green 3, "DB" for a black
        dragon, "F" for the flower).
    """
    if card.kind == CardKind.FLOWER:
        return FLOWER_CODE
    if card.kind == CardKind.DRAGON:
        return f"{DRAGON_CODE}{SUIT_CODES[card.suit]}"
    return f"{SUIT_CODES[card.suit]}{card.rank}"


def format_cards(cards: Iterable[Card]) -> str:
    """Format cards to a comma-separated string, keeping their order."""
    return ",".join(format_card(c) for c in cards)


def format_freecell(cell: FreeCell) -> str:
    """Format a free cell ("-" free, "X" flipped, else its card)."""
    if cell.status == FreeCellStatus.FREE:
        return "-"
    if cell.status == FreeCellStatus.FLIPPED:
        return "X"
    return format_card(cell.card)


def format_position(position: Position) -> str:
    """Format a position (e.g., "tableau:3", "flower")."""
    if position.kind == ZoneKind.FLOWER:
        return "flower"
    return f"{position.kind.value}:{position.index}"


def format_playfield(playfield: Playfield) -> dict[str, Any]:
    """Format the whole board to a JSON-serializable dict."""
    return {
        "freecells": [format_freecell(c) for c in playfield.freecells],
        "flower": format_card(playfield.flower) if playfield.flower else "",
        "piles": [format_card(p) if p else "" for p in playfield.piles],
        "tableau": [format_cards(column) for column in playfield.tableau],
    }
