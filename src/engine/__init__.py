"""
Knock Out! Game Engine.

Pure Python game logic with zero UI dependencies.
Handles dice rolling, knock-outs, scoring and observer notifications.
"""

from src.engine.base import (
    WIN_THRESHOLD,
    Die,
    GameStatus,
    Player,
    RandomSource,
    SeededRandomSource,
)
from src.engine.events import (
    DiceGameTracker,
    EventPayload,
    EventRecorder,
    GameEvent,
    GameObserver,
)
from src.engine.knock_out import GameStateError, KnockOutGame

__all__ = [
    # Constants
    "WIN_THRESHOLD",
    # Dice and players
    "Die",
    "Player",
    "RandomSource",
    "SeededRandomSource",
    # Enums
    "GameEvent",
    "GameStatus",
    # Observers
    "DiceGameTracker",
    "EventPayload",
    "EventRecorder",
    "GameObserver",
    # Engine
    "GameStateError",
    "KnockOutGame",
]
