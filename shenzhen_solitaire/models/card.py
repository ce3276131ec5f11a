"""Card models."""

from enum import Enum, IntEnum

from pydantic import BaseModel, model_validator


class Suit(IntEnum):
    """Card suit."""

    RED = 0
    GREEN = 1
    BLACK = 2


class CardKind(str, Enum):
    """Card variant."""

    NUMBER = "number"
    DRAGON = "dragon"
    FLOWER = "flower"


MIN_RANK = 1
MAX_RANK = 9
DRAGONS_PER_SUIT = 4

SUIT_NAMES = {
    Suit.RED: "Red",
    Suit.GREEN: "Green",
    Suit.BLACK: "Black",
}


class Card(BaseModel, frozen=True):
    """Single card representation.

    Exactly one of three shapes is valid:
    - number: suit and rank (1-9)
    - dragon: suit only
    - flower: neither suit nor rank
    """

    kind: CardKind
    suit: Suit | None = None
    rank: int | None = None

    @model_validator(mode="after")
    def check_variant(self) -> "Card":
        if self.kind == CardKind.NUMBER:
            if self.suit is None or self.rank is None:
                raise ValueError("Number card needs a suit and a rank")
            if not MIN_RANK <= self.rank <= MAX_RANK:
                raise ValueError(f"Rank must be in [{MIN_RANK}, {MAX_RANK}], got {self.rank}")
        elif self.kind == CardKind.DRAGON:
            if self.suit is None or self.rank is not None:
                raise ValueError("Dragon card needs a suit and no rank")
        elif self.suit is not None or self.rank is not None:
            raise ValueError("Flower card has neither suit nor rank")
        return self

    @classmethod
    def number(cls, suit: Suit, rank: int) -> "Card":
        """Create a numbered card."""
        return cls(kind=CardKind.NUMBER, suit=suit, rank=rank)

    @classmethod
    def dragon(cls, suit: Suit) -> "Card":
        """Create a dragon card."""
        return cls(kind=CardKind.DRAGON, suit=suit)

    @property
    def is_number(self) -> bool:
        return self.kind == CardKind.NUMBER

    @property
    def is_dragon(self) -> bool:
        return self.kind == CardKind.DRAGON

    @property
    def is_flower(self) -> bool:
        return self.kind == CardKind.FLOWER

    def __str__(self) -> str:
        if self.kind == CardKind.NUMBER:
            return f"{SUIT_NAMES[self.suit]} {self.rank}"
        if self.kind == CardKind.DRAGON:
            return f"{SUIT_NAMES[self.suit]} Dragon"
        return "Flower"

    def __repr__(self) -> str:
        return str(self)


FLOWER = Card(kind=CardKind.FLOWER)


def create_full_deck() -> list[Card]:
    """Create the ordered 40-card deck.

    The flower comes first, then for each suit the numbers 1-9
    followed by its four dragons.
    """
    deck = [FLOWER]

    for suit in Suit:
        for rank in range(MIN_RANK, MAX_RANK + 1):
            deck.append(Card.number(suit, rank))
        for _ in range(DRAGONS_PER_SUIT):
            deck.append(Card.dragon(suit))

    return deck
