"""
Knock Out! - Game Observers and Event Definitions

The game notifies a single optional observer at three points: when play
starts, at the start of every turn, and when play ends. Observers cannot
alter the game; their return values are ignored.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from src.engine.base import Player

if TYPE_CHECKING:
    from src.engine.knock_out import KnockOutGame

logger = logging.getLogger(__name__)


@runtime_checkable
class GameObserver(Protocol):
    """Receives lifecycle notifications from a game."""

    def on_start(self, game: KnockOutGame) -> None: ...

    def on_turn(self, game: KnockOutGame, player: Player, dice_roll_sum: int) -> None: ...

    def on_end(self, game: KnockOutGame) -> None: ...


class GameEvent(Enum):
    """Events that can occur during a game."""

    GAME_STARTED = auto()
    TURN_STARTED = auto()
    GAME_ENDED = auto()


@dataclass
class EventPayload:
    """A single recorded game notification."""

    event: GameEvent
    player_id: int | None = None
    data: dict[str, Any] = field(default_factory=dict)


class DiceGameTracker:
    """
    Counts turns and reports on the game it watches.

    Attributes:
        number_of_turns: Turns seen since the last start notification
        dice_sides: Side count of the die reported at start
    """

    def __init__(self) -> None:
        self.number_of_turns = 0
        self.dice_sides: int | None = None

    def on_start(self, game: KnockOutGame) -> None:
        self.number_of_turns = 0
        self.dice_sides = game.die.sides
        logger.info("Started a new game of Knock Out with %d players", len(game.players))
        logger.info("The game is using a %d-sided die", game.die.sides)

    def on_turn(self, game: KnockOutGame, player: Player, dice_roll_sum: int) -> None:
        self.number_of_turns += 1
        logger.info("Player #%d rolled a %d", player.id, dice_roll_sum)

    def on_end(self, game: KnockOutGame) -> None:
        logger.info("The game lasted for %d turns", self.number_of_turns)


class EventRecorder:
    """Keeps an ordered log of every notification as an ``EventPayload``."""

    def __init__(self) -> None:
        self.events: list[EventPayload] = []

    def on_start(self, game: KnockOutGame) -> None:
        self.events.append(
            EventPayload(
                event=GameEvent.GAME_STARTED,
                data={"num_players": len(game.players), "dice_sides": game.die.sides},
            )
        )

    def on_turn(self, game: KnockOutGame, player: Player, dice_roll_sum: int) -> None:
        self.events.append(
            EventPayload(
                event=GameEvent.TURN_STARTED,
                player_id=player.id,
                data={
                    "dice_roll_sum": dice_roll_sum,
                    "knock_out_number": player.knock_out_number,
                    "score_before": player.score,
                },
            )
        )

    def on_end(self, game: KnockOutGame) -> None:
        winner = game.winner
        self.events.append(
            EventPayload(
                event=GameEvent.GAME_ENDED,
                player_id=winner.id if winner else None,
                data={"turns_taken": game.turns_taken},
            )
        )

    def turns(self) -> list[EventPayload]:
        """Only the turn notifications, in order."""
        return [p for p in self.events if p.event == GameEvent.TURN_STARTED]

    def count(self, event: GameEvent) -> int:
        """Number of recorded notifications of one kind."""
        return sum(1 for p in self.events if p.event == event)
