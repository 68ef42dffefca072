"""
Knock Out! - Game Engine Base Classes

This module defines the foundational data structures used throughout the
game engine: the random source capability, the die that wraps it, and the
player record mutated by the game loop.
"""

import random
from dataclasses import dataclass
from enum import Enum, auto
from typing import Protocol, runtime_checkable

# Game rules
WIN_THRESHOLD = 100
KNOCK_OUT_MIN = 6
KNOCK_OUT_MAX = 9
DEFAULT_NUM_PLAYERS = 5

# Dice
DEFAULT_SIDES = 6
SOURCE_LOW = 1
SOURCE_HIGH = 10


class GameStatus(Enum):
    """Lifecycle of a single game."""
    NOT_STARTED = auto()
    RUNNING = auto()
    ENDED = auto()


@runtime_checkable
class RandomSource(Protocol):
    """Anything that can produce an integer in an inclusive range."""

    def next(self, low: int, high: int) -> int:
        """Return an integer uniformly drawn from ``[low, high]``."""
        ...


class SeededRandomSource:
    """
    Random source backed by a private ``random.Random`` engine.

    Each instance owns its engine, so two sources never share state and a
    seeded source replays the same sequence.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)

    def next(self, low: int, high: int) -> int:
        if low > high:
            raise ValueError(f"Lower bound {low} exceeds upper bound {high}.")
        return self._rng.randint(low, high)


class Die:
    """
    A die with a fixed number of sides.

    Rolls are derived from a wide source draw as ``(draw % sides) + 1``.
    When ``sides`` does not evenly divide the draw range the low faces are
    favoured (1..10 reduced mod 6 gives faces 1-4 twice as often as 5-6).

    Attributes:
        sides: Number of faces, at least 1
        source: Random source shared with any other die built on it
        low: Lower bound of the source draw
        high: Upper bound of the source draw
    """

    def __init__(
        self,
        sides: int,
        source: RandomSource,
        low: int = SOURCE_LOW,
        high: int = SOURCE_HIGH,
    ) -> None:
        if not isinstance(sides, int) or isinstance(sides, bool) or sides < 1:
            raise ValueError(f"Die must have at least 1 side, got {sides!r}.")

        self.sides = sides
        self.source = source
        self.low = low
        self.high = high

    def roll(self) -> int:
        """Roll the die once.

        Returns:
            A face value in ``[1, sides]``
        """
        return self.source.next(self.low, self.high) % self.sides + 1

    def __repr__(self) -> str:
        return f"Die(sides={self.sides})"


@dataclass
class Player:
    """
    A participant in a game of Knock Out!.

    ``id`` and ``knock_out_number`` are fixed at creation. ``score`` and
    ``eliminated`` are only changed by the game while it resolves turns.

    Attributes:
        id: Sequential player id starting at 1
        knock_out_number: Sum that eliminates this player (6-9)
        score: Running total of non-eliminating rolls
        eliminated: Whether the player has been knocked out
    """
    id: int
    knock_out_number: int
    score: int = 0
    eliminated: bool = False

    def __post_init__(self) -> None:
        """Validate identity and knock-out number."""
        if not isinstance(self.id, int) or isinstance(self.id, bool) or self.id < 1:
            raise ValueError(f"Player id must be a positive integer, got {self.id!r}.")
        if not isinstance(self.knock_out_number, int) or isinstance(self.knock_out_number, bool):
            raise ValueError(
                f"Knock-out number must be an integer, got {type(self.knock_out_number).__name__}."
            )
        if not (KNOCK_OUT_MIN <= self.knock_out_number <= KNOCK_OUT_MAX):
            raise ValueError(
                f"Invalid knock-out number {self.knock_out_number}. "
                f"Must be between {KNOCK_OUT_MIN} and {KNOCK_OUT_MAX}."
            )

    @property
    def is_active(self) -> bool:
        """Returns True while the player is still taking turns."""
        return not self.eliminated
