"""Move validation and application."""

from dataclasses import dataclass
from enum import Enum

from shenzhen_solitaire.config import RulesConfig
from shenzhen_solitaire.models.card import Card
from shenzhen_solitaire.models.playfield import FreeCell, FreeCellStatus, Playfield
from shenzhen_solitaire.models.position import Move, Position, ZoneKind

from .rules import can_place_on_pile, can_place_on_top, is_coherent_run


class RejectReason(str, Enum):
    """Which check rejected an action."""

    SOURCE_NOT_PICKABLE = "source_not_pickable"  # Flower slot or pile
    BAD_COUNT = "bad_count"
    SOURCE_EMPTY = "source_empty"
    SOURCE_LOCKED = "source_locked"  # Flipped free cell
    NOT_ENOUGH_CARDS = "not_enough_cards"
    INCOHERENT_RUN = "incoherent_run"
    MULTIPLE_CARDS = "multiple_cards"
    DESTINATION_OCCUPIED = "destination_occupied"
    NOT_A_FLOWER = "not_a_flower"
    NOT_A_NUMBER = "not_a_number"
    PILE_MISMATCH = "pile_mismatch"
    TABLEAU_MISMATCH = "tableau_mismatch"
    DRAGONS_NOT_EXPOSED = "dragons_not_exposed"
    NO_FREE_CELL = "no_free_cell"


@dataclass
class MoveResult:
    """Result of a pick-up, place, move or dragon flip.

    On success `playfield` is the new board and `cards` the cards that
    moved. On rejection `playfield` is None.
    """

    is_valid: bool
    playfield: Playfield | None = None
    cards: tuple[Card, ...] = ()
    reason: RejectReason | None = None
    error_message: str = ""


def reject(reason: RejectReason, error_message: str) -> MoveResult:
    """Build a rejected result."""
    return MoveResult(is_valid=False, reason=reason, error_message=error_message)


class MoveValidator:
    """Validates and applies card moves between zones."""

    def __init__(self, rules: RulesConfig | None = None):
        """Initialize validator.

        Args:
            rules: Rules configuration (defaults if not provided)
        """
        self.rules = rules or RulesConfig()

    def pick_up(self, playfield: Playfield, count: int, source: Position) -> MoveResult:
        """Remove the top `count` cards from a zone.

        Args:
            playfield: Current board
            count: Number of cards to lift
            source: Zone to lift from

        Returns:
            MoveResult with the board minus the lifted cards and the
            lifted run ordered bottom to top

        Raises:
            InvalidPositionError: If the source index is out of range
        """
        source.require_in_range()

        if count < 1:
            return reject(RejectReason.BAD_COUNT, f"Cannot pick up {count} cards")

        if source.kind in (ZoneKind.FLOWER, ZoneKind.PILE):
            return reject(
                RejectReason.SOURCE_NOT_PICKABLE,
                f"Cards cannot be taken from {source}",
            )

        if source.kind == ZoneKind.FREECELL:
            return self._pick_up_freecell(playfield, count, source.index)

        return self._pick_up_tableau(playfield, count, source.index)

    def _pick_up_freecell(self, playfield: Playfield, count: int, index: int) -> MoveResult:
        cell = playfield.freecells[index]

        if count != 1:
            return reject(
                RejectReason.BAD_COUNT,
                f"A free cell holds one card, cannot pick up {count}",
            )
        if cell.status == FreeCellStatus.FLIPPED:
            return reject(RejectReason.SOURCE_LOCKED, f"Free cell {index} is locked")
        if cell.status == FreeCellStatus.FREE:
            return reject(RejectReason.SOURCE_EMPTY, f"Free cell {index} is empty")

        return MoveResult(
            is_valid=True,
            playfield=playfield.with_freecell(index, FreeCell.free()),
            cards=(cell.card,),
        )

    def _pick_up_tableau(self, playfield: Playfield, count: int, index: int) -> MoveResult:
        column = playfield.tableau[index]

        if count > len(column):
            return reject(
                RejectReason.NOT_ENOUGH_CARDS,
                f"Column {index} has {len(column)} cards, cannot pick up {count}",
            )

        split = len(column) - count
        run = column[split:]
        if not is_coherent_run(run):
            return reject(
                RejectReason.INCOHERENT_RUN,
                f"Top {count} cards of column {index} do not form a run",
            )

        return MoveResult(
            is_valid=True,
            playfield=playfield.with_column(index, column[:split]),
            cards=run,
        )

    def place(self, playfield: Playfield, cards: tuple[Card, ...], target: Position) -> MoveResult:
        """Put a run of cards into a zone.

        The run itself is assumed coherent; only the boundary with the
        destination is checked.

        Args:
            playfield: Current board
            cards: Run to place, bottom card first
            target: Destination zone

        Returns:
            MoveResult with the board including the placed cards

        Raises:
            InvalidPositionError: If the target index is out of range
        """
        target.require_in_range()
        cards = tuple(cards)

        if not cards:
            return reject(RejectReason.BAD_COUNT, "Nothing to place")

        if target.kind == ZoneKind.TABLEAU:
            return self._place_tableau(playfield, cards, target.index)

        # Every other zone takes a single card
        if len(cards) != 1:
            return reject(
                RejectReason.MULTIPLE_CARDS,
                f"{target} accepts one card, got {len(cards)}",
            )
        card = cards[0]

        if target.kind == ZoneKind.FREECELL:
            if not playfield.freecells[target.index].is_free:
                return reject(
                    RejectReason.DESTINATION_OCCUPIED,
                    f"Free cell {target.index} is not free",
                )
            return MoveResult(
                is_valid=True,
                playfield=playfield.with_freecell(target.index, FreeCell.in_use(card)),
                cards=cards,
            )

        if target.kind == ZoneKind.FLOWER:
            if not card.is_flower:
                return reject(RejectReason.NOT_A_FLOWER, f"{card} is not the flower")
            return MoveResult(
                is_valid=True,
                playfield=playfield.with_flower(card),
                cards=cards,
            )

        return self._place_pile(playfield, card, target.index)

    def _place_tableau(self, playfield: Playfield, cards: tuple[Card, ...], index: int) -> MoveResult:
        column = playfield.tableau[index]

        # Empty column accepts anything
        if column and not can_place_on_top(cards[0], column[-1]):
            return reject(
                RejectReason.TABLEAU_MISMATCH,
                f"{cards[0]} cannot be placed on {column[-1]}",
            )

        return MoveResult(
            is_valid=True,
            playfield=playfield.with_column(index, column + cards),
            cards=cards,
        )

    def _place_pile(self, playfield: Playfield, card: Card, index: int) -> MoveResult:
        if not card.is_number:
            return reject(RejectReason.NOT_A_NUMBER, f"{card} cannot be discarded")

        pile_top = playfield.piles[index]
        if not can_place_on_pile(card, pile_top, self.rules.empty_pile_policy):
            if pile_top is None:
                message = f"Empty pile {index} does not accept {card}"
            else:
                message = f"{card} does not follow {pile_top} on pile {index}"
            return reject(RejectReason.PILE_MISMATCH, message)

        return MoveResult(
            is_valid=True,
            playfield=playfield.with_pile(index, card),
            cards=(card,),
        )

    def apply_move(self, playfield: Playfield, move: Move) -> MoveResult:
        """Pick up and place as one all-or-nothing step.

        The board between the two phases is never returned; a rejected
        placement discards it.

        Args:
            playfield: Current board
            move: Move to apply

        Returns:
            MoveResult with the board after the move
        """
        lifted = self.pick_up(playfield, move.count, move.source)
        if not lifted.is_valid:
            return lifted

        return self.place(lifted.playfield, lifted.cards, move.target)

    def is_legal_move(self, playfield: Playfield, move: Move) -> bool:
        """Check a move without keeping the resulting board."""
        return self.apply_move(playfield, move).is_valid
