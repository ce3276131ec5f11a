"""Move logger for game replay."""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, TextIO

from shenzhen_solitaire.config import MoveLogConfig
from shenzhen_solitaire.models.playfield import Playfield
from shenzhen_solitaire.models.position import Action, FlipDragon

from .formatters import format_cards, format_playfield, format_position


def describe_action(action: Action) -> dict[str, Any]:
    """Convert a move or flip request to a log record fragment."""
    if isinstance(action, FlipDragon):
        return {"action": "flip_dragon", "suit": action.suit.name.lower()}
    return {
        "action": "move",
        "count": action.count,
        "from": format_position(action.source),
        "to": format_position(action.target),
    }


class GameLogger:
    """Logger for game events in JSONL format.

    Each line in the output file is a JSON object representing one event,
    so a game can be replayed move by move.
    """

    def __init__(self, config: MoveLogConfig | None = None):
        """Initialize game logger.

        Args:
            config: Move log configuration. If None, logging is disabled.
        """
        self.config = config or MoveLogConfig()
        self._file: TextIO | None = None

    def __enter__(self) -> "GameLogger":
        """Context manager entry."""
        if self.config.enabled and self.config.output_path:
            path = Path(self.config.output_path)
            path.parent.mkdir(parents=True, exist_ok=True)
            self._file = open(path, "a", encoding="utf-8")
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()

    def close(self) -> None:
        """Close the log file."""
        if self._file:
            self._file.close()
            self._file = None

    def _write(self, event: dict[str, Any]) -> None:
        if self._file:
            self._file.write(json.dumps(event, ensure_ascii=False) + "\n")
            self._file.flush()

    def log_game_start(self, playfield: Playfield, seed: int | None = None) -> None:
        """Log a freshly dealt board.

        Args:
            playfield: Board after the deal.
            seed: Shuffle seed, if one was used.
        """
        self._write({
            "type": "game_start",
            "timestamp": datetime.now().isoformat(),
            "seed": seed,
            "board": format_playfield(playfield),
        })

    def log_action(
        self,
        move_num: int,
        action: Action,
        accepted: bool,
        cards: tuple = (),
        reason: str = "",
        playfield: Playfield | None = None,
    ) -> None:
        """Log one attempted action.

        Args:
            move_num: Number of accepted actions before this one.
            action: The move or flip that was attempted.
            accepted: Whether the engine accepted it.
            cards: Cards that moved (empty if rejected).
            reason: Rejection reason code (empty if accepted).
            playfield: Board after the action (only logged if accepted).
        """
        record: dict[str, Any] = {
            "type": "action",
            "move": move_num,
            **describe_action(action),
            "accepted": accepted,
        }
        if accepted:
            record["cards"] = format_cards(cards)
            if playfield is not None:
                record["board"] = format_playfield(playfield)
        else:
            record["reason"] = reason
        self._write(record)

    def log_session_end(self, total_moves: int, rejected_moves: int) -> None:
        """Log session end with move totals."""
        self._write({
            "type": "session_end",
            "total_moves": total_moves,
            "rejected_moves": rejected_moves,
        })
