"""
Knock Out! - Test Configuration and Fixtures

Deterministic random sources and observers shared by all test modules.
"""

import os
from typing import Callable

import pytest

from src.config.settings import get_settings


# =============================================================================
# RANDOM SOURCE STUBS
# =============================================================================

class FixedSource:
    """Random source that always returns the same value, ignoring bounds."""

    def __init__(self, value: int) -> None:
        self.value = value
        self.calls: list[tuple[int, int]] = []

    def next(self, low: int, high: int) -> int:
        self.calls.append((low, high))
        return self.value


class ScriptedSource:
    """Random source that replays a fixed list of draws, then fails."""

    def __init__(self, draws: list[int]) -> None:
        self.draws = list(draws)
        self.calls: list[tuple[int, int]] = []

    def next(self, low: int, high: int) -> int:
        self.calls.append((low, high))
        if not self.draws:
            raise AssertionError("ScriptedSource ran out of draws")
        return self.draws.pop(0)


def face_draw(face: int, sides: int = 6) -> int:
    """Source draw in 1..10 that makes a die of ``sides`` show ``face``."""
    return face - 1 if face > 1 else sides


@pytest.fixture
def fixed_source() -> Callable[[int], FixedSource]:
    """Factory for sources that always return one value."""
    return FixedSource


@pytest.fixture
def scripted_faces() -> Callable[..., ScriptedSource]:
    """
    Factory for a source that makes a six-sided die show ``faces`` in order.

    Example:
        scripted_faces(3, 4, 4, 4) -> turn sums 7 then 8
    """
    def _make(*faces: int) -> ScriptedSource:
        return ScriptedSource([face_draw(f) for f in faces])

    return _make


# =============================================================================
# OBSERVERS
# =============================================================================

class SnapshotObserver:
    """Records every player's (score, eliminated) at each notification."""

    def __init__(self) -> None:
        self.snapshots: list[dict[int, tuple[int, bool]]] = []
        self.turn_players: list[int] = []
        self.starts = 0
        self.ends = 0

    def _snapshot(self, game) -> None:
        self.snapshots.append({p.id: (p.score, p.eliminated) for p in game.players})

    def on_start(self, game) -> None:
        self.starts += 1
        self._snapshot(game)

    def on_turn(self, game, player, dice_roll_sum) -> None:
        self.turn_players.append(player.id)
        self._snapshot(game)

    def on_end(self, game) -> None:
        self.ends += 1
        self._snapshot(game)


@pytest.fixture
def snapshot_observer() -> SnapshotObserver:
    return SnapshotObserver()


# =============================================================================
# SETTINGS
# =============================================================================

@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate tests from ``KNOCK_OUT_*`` variables and the settings cache."""
    for key in list(os.environ):
        if key.startswith("KNOCK_OUT_"):
            monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
