"""Dragon collection (flip) move."""

import logging

from shenzhen_solitaire.models.card import DRAGONS_PER_SUIT, Card, Suit
from shenzhen_solitaire.models.playfield import FreeCell, FreeCellStatus, Playfield

from .validator import MoveResult, RejectReason, reject

logger = logging.getLogger(__name__)


def flip_dragon(playfield: Playfield, suit: Suit) -> MoveResult:
    """Collect the four dragons of a suit and lock one free cell.

    Every dragon must be exposed, either held in a free cell or on top
    of a tableau column. The locked cell is the highest-index free cell,
    counting cells that just gave up one of the dragons.

    Args:
        playfield: Current board
        suit: Suit of the dragons to collect

    Returns:
        MoveResult with the board after the flip and the collected
        dragons
    """
    dragon = Card.dragon(suit)

    # Working copy; only published when the flip succeeds
    freecells = list(playfield.freecells)
    tableau = [list(column) for column in playfield.tableau]
    collected: list[Card] = []
    destination: int | None = None

    for i, cell in enumerate(freecells):
        if cell.status == FreeCellStatus.IN_USE and cell.card == dragon:
            freecells[i] = FreeCell.free()
            collected.append(cell.card)
            destination = i
        elif cell.status == FreeCellStatus.FREE:
            destination = i

    for column in tableau:
        if column and column[-1] == dragon:
            collected.append(column.pop())

    if len(collected) != DRAGONS_PER_SUIT:
        logger.debug(f"Flip {suit.name}: {len(collected)} dragons exposed")
        return reject(
            RejectReason.DRAGONS_NOT_EXPOSED,
            f"Need {DRAGONS_PER_SUIT} exposed {suit.name.lower()} dragons, "
            f"found {len(collected)}",
        )
    if destination is None:
        return reject(
            RejectReason.NO_FREE_CELL,
            "No free cell available for the dragons",
        )

    freecells[destination] = FreeCell.flipped()
    return MoveResult(
        is_valid=True,
        playfield=playfield.model_copy(
            update={
                "freecells": tuple(freecells),
                "tableau": tuple(tuple(column) for column in tableau),
            }
        ),
        cards=tuple(collected),
    )
