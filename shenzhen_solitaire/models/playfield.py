"""Playfield models."""

from enum import Enum

from pydantic import BaseModel, field_validator, model_validator

from .card import FLOWER, Card
from .position import NUM_COLUMNS, Position, ZoneKind


class FreeCellStatus(str, Enum):
    """State of a single free cell."""

    FREE = "free"
    IN_USE = "in_use"
    FLIPPED = "flipped"  # Locked by a dragon flip


class FreeCell(BaseModel, frozen=True):
    """Free cell slot. Only an IN_USE cell carries a card."""

    status: FreeCellStatus = FreeCellStatus.FREE
    card: Card | None = None

    @model_validator(mode="after")
    def check_card(self) -> "FreeCell":
        if (self.status == FreeCellStatus.IN_USE) != (self.card is not None):
            raise ValueError("A free cell holds a card exactly when it is in use")
        return self

    @classmethod
    def free(cls) -> "FreeCell":
        return cls(status=FreeCellStatus.FREE)

    @classmethod
    def in_use(cls, card: Card) -> "FreeCell":
        return cls(status=FreeCellStatus.IN_USE, card=card)

    @classmethod
    def flipped(cls) -> "FreeCell":
        return cls(status=FreeCellStatus.FLIPPED)

    @property
    def is_free(self) -> bool:
        return self.status == FreeCellStatus.FREE

    @property
    def is_flipped(self) -> bool:
        return self.status == FreeCellStatus.FLIPPED

    def __str__(self) -> str:
        if self.status == FreeCellStatus.IN_USE:
            return str(self.card)
        return f"[{self.status.value}]"


Column = tuple[Card, ...]


class Playfield(BaseModel, frozen=True):
    """Whole board state.

    Every accepted transition returns a new Playfield; instances are
    never modified after construction.
    """

    freecells: tuple[FreeCell, FreeCell, FreeCell] = (
        FreeCell(),
        FreeCell(),
        FreeCell(),
    )
    flower: Card | None = None  # None or the flower card
    piles: tuple[Card | None, Card | None, Card | None] = (None, None, None)  # Top card only
    tableau: tuple[Column, ...] = ((),) * NUM_COLUMNS  # Last card is the top

    @field_validator("flower")
    @classmethod
    def check_flower(cls, value: Card | None) -> Card | None:
        if value is not None and value != FLOWER:
            raise ValueError(f"Flower slot cannot hold {value}")
        return value

    @field_validator("piles")
    @classmethod
    def check_piles(
        cls, value: tuple[Card | None, Card | None, Card | None]
    ) -> tuple[Card | None, Card | None, Card | None]:
        for card in value:
            if card is not None and not card.is_number:
                raise ValueError(f"Pile cannot hold {card}")
        return value

    @field_validator("tableau")
    @classmethod
    def check_tableau(cls, value: tuple[Column, ...]) -> tuple[Column, ...]:
        if len(value) != NUM_COLUMNS:
            raise ValueError(f"Tableau needs {NUM_COLUMNS} columns, got {len(value)}")
        return value

    @classmethod
    def empty(cls) -> "Playfield":
        """Create a board with every zone empty."""
        return cls()

    def card_at(self, position: Position) -> Card | None:
        """Get the card visible at a position.

        Returns None for free or flipped cells, empty piles and columns,
        and indices outside the zone.
        """
        if not position.in_range():
            return None

        if position.kind == ZoneKind.FREECELL:
            return self.freecells[position.index].card
        if position.kind == ZoneKind.FLOWER:
            return self.flower
        if position.kind == ZoneKind.PILE:
            return self.piles[position.index]
        column = self.tableau[position.index]
        return column[-1] if column else None

    def with_freecell(self, index: int, cell: FreeCell) -> "Playfield":
        freecells = list(self.freecells)
        freecells[index] = cell
        return self.model_copy(update={"freecells": tuple(freecells)})

    def with_pile(self, index: int, card: Card) -> "Playfield":
        piles = list(self.piles)
        piles[index] = card
        return self.model_copy(update={"piles": tuple(piles)})

    def with_flower(self, card: Card) -> "Playfield":
        return self.model_copy(update={"flower": card})

    def with_column(self, index: int, cards: Column) -> "Playfield":
        tableau = list(self.tableau)
        tableau[index] = tuple(cards)
        return self.model_copy(update={"tableau": tuple(tableau)})

    def __str__(self) -> str:
        lines = [
            "Free cells: " + " | ".join(str(c) for c in self.freecells),
            f"Flower: {self.flower or '-'}",
            "Piles: " + " | ".join(str(p) if p else "-" for p in self.piles),
        ]
        for i, column in enumerate(self.tableau):
            lines.append(f"  {i}: " + ", ".join(str(c) for c in column))
        return "\n".join(lines)
