"""Game engine for Shenzhen solitaire."""

from __future__ import annotations

import logging

from shenzhen_solitaire.config import Config
from shenzhen_solitaire.logging import GameLogger
from shenzhen_solitaire.models.card import Card
from shenzhen_solitaire.models.playfield import Playfield
from shenzhen_solitaire.models.position import Action, FlipDragon, Move, Position

from .deal import deal_shuffled_playfield
from .dragon import flip_dragon
from .validator import MoveResult, MoveValidator

logger = logging.getLogger(__name__)


class GameEngine:
    """Holds the current board and applies actions to it.

    The board is replaced wholesale after each accepted action; a
    rejected action leaves it as it was.
    """

    def __init__(
        self,
        config: Config | None = None,
        game_logger: GameLogger | None = None,
        playfield: Playfield | None = None,
    ):
        """Initialize game engine.

        Args:
            config: Configuration (uses defaults if not provided)
            game_logger: GameLogger instance for move logging
            playfield: Starting board (empty board if not provided)
        """
        self.config = config or Config()
        self.game_logger = game_logger
        self.validator = MoveValidator(self.config.rules)

        self.playfield = playfield if playfield is not None else Playfield.empty()
        self.move_count = 0
        self.rejected_count = 0

    def new_game(self, seed: int | None = None) -> Playfield:
        """Deal a new shuffled board.

        Args:
            seed: Shuffle seed (falls back to the configured seed)

        Returns:
            The dealt board
        """
        if seed is None:
            seed = self.config.deal.seed

        self.playfield = deal_shuffled_playfield(seed)
        self.move_count = 0
        self.rejected_count = 0
        logger.info(f"New game dealt (seed={seed})")

        if self.game_logger:
            self.game_logger.log_game_start(self.playfield, seed)
        return self.playfield

    def apply(self, playfield: Playfield, action: Action) -> MoveResult:
        """Evaluate an action against any board without touching engine state."""
        if isinstance(action, FlipDragon):
            return flip_dragon(playfield, action.suit)
        if isinstance(action, Move):
            return self.validator.apply_move(playfield, action)
        raise TypeError(f"Unknown action: {action!r}")

    def perform(self, action: Action) -> MoveResult:
        """Apply an action to the current board.

        Args:
            action: Move or dragon flip

        Returns:
            MoveResult; on success the engine's board is replaced by
            result.playfield
        """
        result = self.apply(self.playfield, action)

        if result.is_valid:
            self.playfield = result.playfield
            self.move_count += 1
            logger.debug(f"Accepted {action}")
        else:
            self.rejected_count += 1
            logger.info(f"Rejected {action}: {result.error_message}")

        if self.game_logger:
            self.game_logger.log_action(
                self.move_count,
                action,
                accepted=result.is_valid,
                cards=result.cards,
                reason=result.reason.value if result.reason else "",
                playfield=result.playfield,
            )
        return result

    def is_legal(self, action: Action) -> bool:
        """Check an action against the current board."""
        return self.apply(self.playfield, action).is_valid

    def card_at(self, position: Position) -> Card | None:
        """Get the visible card at a position on the current board."""
        return self.playfield.card_at(position)

    def end_session(self) -> None:
        """Log move totals for the session."""
        logger.info(f"Session ended after {self.move_count} moves ({self.rejected_count} rejected)")
        if self.game_logger:
            self.game_logger.log_session_end(self.move_count, self.rejected_count)
