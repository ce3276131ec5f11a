"""Card placement rules."""

from collections.abc import Sequence

from shenzhen_solitaire.config import EmptyPilePolicy
from shenzhen_solitaire.models.card import MIN_RANK, Card


def can_place_on_top(upper: Card, lower: Card) -> bool:
    """Check whether `upper` may rest directly on `lower`.

    Both must be numbered cards of different suits, with `upper`
    exactly one rank below `lower`.
    """
    if not (upper.is_number and lower.is_number):
        return False
    return upper.suit != lower.suit and lower.rank == upper.rank + 1


def is_coherent_run(cards: Sequence[Card]) -> bool:
    """Check every adjacent pair of a run, bottom card first."""
    return all(
        can_place_on_top(upper, lower) for lower, upper in zip(cards, cards[1:])
    )


def can_place_on_pile(
    card: Card,
    pile_top: Card | None,
    policy: EmptyPilePolicy = EmptyPilePolicy.RANK_ONE,
) -> bool:
    """Check whether `card` may be discarded onto a pile.

    Args:
        card: Card being discarded.
        pile_top: Current top of the pile, None if empty.
        policy: What an empty pile accepts.

    Returns:
        True if the discard is allowed.
    """
    if not card.is_number:
        return False

    if pile_top is None:
        if policy == EmptyPilePolicy.ANY_RANK:
            return True
        return card.rank == MIN_RANK

    return card.suit == pile_top.suit and card.rank == pile_top.rank + 1
