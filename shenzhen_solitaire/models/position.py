"""Zone addressing and move requests."""

from enum import Enum

from pydantic import BaseModel, Field

from .card import Suit


class ZoneKind(str, Enum):
    """Kind of zone a position refers to."""

    FREECELL = "freecell"
    FLOWER = "flower"
    PILE = "pile"
    TABLEAU = "tableau"


NUM_FREECELLS = 3
NUM_PILES = 3
NUM_COLUMNS = 8

# Number of addressable slots per zone
ZONE_SIZES: dict[ZoneKind, int] = {
    ZoneKind.FREECELL: NUM_FREECELLS,
    ZoneKind.FLOWER: 1,
    ZoneKind.PILE: NUM_PILES,
    ZoneKind.TABLEAU: NUM_COLUMNS,
}


class InvalidPositionError(ValueError):
    """Raised when a position index is outside its zone.

    This is a caller error, not a rejected move.
    """

    def __init__(self, position: "Position"):
        self.position = position
        super().__init__(
            f"Index {position.index} out of range for {position.kind.value} "
            f"(size {ZONE_SIZES[position.kind]})"
        )


class Position(BaseModel, frozen=True):
    """Reference to a single slot on the playfield."""

    kind: ZoneKind
    index: int = Field(default=0, ge=0)

    @classmethod
    def freecell(cls, index: int) -> "Position":
        return cls(kind=ZoneKind.FREECELL, index=index)

    @classmethod
    def flower(cls) -> "Position":
        return cls(kind=ZoneKind.FLOWER)

    @classmethod
    def pile(cls, index: int) -> "Position":
        return cls(kind=ZoneKind.PILE, index=index)

    @classmethod
    def tableau(cls, index: int) -> "Position":
        return cls(kind=ZoneKind.TABLEAU, index=index)

    def in_range(self) -> bool:
        """Check that the index addresses an existing slot."""
        return self.index < ZONE_SIZES[self.kind]

    def require_in_range(self) -> None:
        """Raise InvalidPositionError if the index is out of range."""
        if not self.in_range():
            raise InvalidPositionError(self)

    def __str__(self) -> str:
        if self.kind == ZoneKind.FLOWER:
            return "flower"
        return f"{self.kind.value}[{self.index}]"


class Move(BaseModel, frozen=True):
    """Move `count` cards as one unit from `source` to `target`."""

    count: int = Field(gt=0)
    source: Position
    target: Position

    def __str__(self) -> str:
        return f"move {self.count} {self.source} -> {self.target}"


class FlipDragon(BaseModel, frozen=True):
    """Collect the four exposed dragons of `suit` into one free cell."""

    suit: Suit

    def __str__(self) -> str:
        return f"flip {self.suit.name.lower()} dragons"


# Any request the engine can perform
Action = Move | FlipDragon
