"""Tests for playfield and position models."""

import pytest
from pydantic import ValidationError

from shenzhen_solitaire.models.card import FLOWER, Card, Suit
from shenzhen_solitaire.models.playfield import FreeCell, FreeCellStatus, Playfield
from shenzhen_solitaire.models.position import (
    FlipDragon,
    InvalidPositionError,
    Move,
    Position,
    ZoneKind,
)

RED_4 = Card.number(Suit.RED, 4)
GREEN_3 = Card.number(Suit.GREEN, 3)


class TestFreeCell:
    """Tests for FreeCell model."""

    def test_default_is_free(self):
        """Test a new cell is free."""
        cell = FreeCell()
        assert cell.is_free
        assert cell.card is None

    def test_in_use(self):
        """Test an in-use cell carries its card."""
        cell = FreeCell.in_use(RED_4)
        assert cell.status == FreeCellStatus.IN_USE
        assert cell.card == RED_4

    def test_flipped(self):
        """Test a flipped cell carries no card."""
        cell = FreeCell.flipped()
        assert cell.is_flipped
        assert cell.card is None

    def test_card_only_when_in_use(self):
        """Test inconsistent cells are rejected."""
        with pytest.raises(ValidationError):
            FreeCell(status=FreeCellStatus.IN_USE)
        with pytest.raises(ValidationError):
            FreeCell(status=FreeCellStatus.FLIPPED, card=RED_4)


class TestPlayfield:
    """Tests for Playfield model."""

    def test_empty(self):
        """Test the empty board."""
        board = Playfield.empty()
        assert all(c.is_free for c in board.freecells)
        assert board.flower is None
        assert board.piles == (None, None, None)
        assert len(board.tableau) == 8
        assert all(column == () for column in board.tableau)

    def test_flower_slot_only_holds_flower(self):
        """Test the flower slot rejects other cards."""
        assert Playfield(flower=FLOWER).flower == FLOWER
        with pytest.raises(ValidationError):
            Playfield(flower=RED_4)

    def test_piles_only_hold_numbers(self):
        """Test piles reject dragons and the flower."""
        with pytest.raises(ValidationError):
            Playfield(piles=(Card.dragon(Suit.RED), None, None))

    def test_fixed_zone_sizes(self):
        """Test wrong numbers of cells, piles and columns are rejected."""
        with pytest.raises(ValidationError):
            Playfield(freecells=(FreeCell(), FreeCell()))
        with pytest.raises(ValidationError):
            Playfield(piles=(None, None, None, None))
        with pytest.raises(ValidationError):
            Playfield(tableau=[[] for _ in range(7)])

    def test_lists_become_tuples(self):
        """Test columns given as lists are stored as tuples."""
        columns = [[] for _ in range(8)]
        columns[2] = [RED_4, GREEN_3]
        board = Playfield(tableau=columns)
        assert board.tableau[2] == (RED_4, GREEN_3)

    def test_with_column_returns_new_board(self):
        """Test updates leave the original board alone."""
        board = Playfield.empty()
        updated = board.with_column(3, (RED_4,))
        assert updated.tableau[3] == (RED_4,)
        assert board.tableau[3] == ()

    def test_with_freecell(self):
        """Test replacing one free cell."""
        board = Playfield.empty().with_freecell(1, FreeCell.in_use(RED_4))
        assert board.freecells[1].card == RED_4
        assert board.freecells[0].is_free


class TestCardAt:
    """Tests for Playfield.card_at accessor."""

    @pytest.fixture
    def board(self):
        columns = [[] for _ in range(8)]
        columns[5] = [RED_4, GREEN_3]
        return Playfield(
            freecells=(FreeCell.in_use(RED_4), FreeCell.free(), FreeCell.flipped()),
            flower=FLOWER,
            piles=(Card.number(Suit.BLACK, 2), None, None),
            tableau=columns,
        )

    def test_freecell(self, board):
        """Test free cell reads."""
        assert board.card_at(Position.freecell(0)) == RED_4
        assert board.card_at(Position.freecell(1)) is None
        assert board.card_at(Position.freecell(2)) is None

    def test_flower(self, board):
        """Test flower slot read."""
        assert board.card_at(Position.flower()) == FLOWER
        assert Playfield.empty().card_at(Position.flower()) is None

    def test_pile(self, board):
        """Test pile reads return the top card."""
        assert board.card_at(Position.pile(0)) == Card.number(Suit.BLACK, 2)
        assert board.card_at(Position.pile(1)) is None

    def test_tableau(self, board):
        """Test tableau reads return the column top."""
        assert board.card_at(Position.tableau(5)) == GREEN_3
        assert board.card_at(Position.tableau(0)) is None

    def test_out_of_range(self, board):
        """Test out-of-range indices read as empty."""
        assert board.card_at(Position.freecell(3)) is None
        assert board.card_at(Position.tableau(8)) is None


class TestPosition:
    """Tests for Position and request models."""

    def test_constructors(self):
        """Test zone constructors."""
        assert Position.freecell(2) == Position(kind=ZoneKind.FREECELL, index=2)
        assert Position.flower().kind == ZoneKind.FLOWER
        assert Position.pile(1).index == 1
        assert Position.tableau(7).kind == ZoneKind.TABLEAU

    def test_negative_index_rejected(self):
        """Test negative indices fail construction."""
        with pytest.raises(ValidationError):
            Position.tableau(-1)

    def test_range_check(self):
        """Test range checks per zone."""
        assert Position.tableau(7).in_range()
        assert not Position.tableau(8).in_range()
        assert not Position.pile(3).in_range()
        with pytest.raises(InvalidPositionError):
            Position.freecell(3).require_in_range()

    def test_move_count_positive(self):
        """Test moves need at least one card."""
        with pytest.raises(ValidationError):
            Move(count=0, source=Position.tableau(0), target=Position.tableau(1))

    def test_string_forms(self):
        """Test readable request strings."""
        move = Move(count=2, source=Position.tableau(0), target=Position.tableau(1))
        assert str(move) == "move 2 tableau[0] -> tableau[1]"
        assert str(FlipDragon(suit=Suit.RED)) == "flip red dragons"
