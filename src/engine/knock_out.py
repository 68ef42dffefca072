"""
Knock Out! - Game Engine

Every player has a knock-out number between 6 and 9. On each turn a player
throws the shared die twice and adds the sum to their score, unless the sum
equals their knock-out number, in which case they are knocked out. Play ends
as soon as one player reaches 100 points or every player is knocked out.

Termination is checked after every single turn, so a later player in the
same round never gets to roll once an earlier player has ended the game.
"""

import logging
from typing import Sequence

from src.engine.base import (
    DEFAULT_SIDES,
    KNOCK_OUT_MAX,
    KNOCK_OUT_MIN,
    WIN_THRESHOLD,
    Die,
    GameStatus,
    Player,
    RandomSource,
    SeededRandomSource,
)
from src.engine.events import GameObserver
from src.engine.validators import validate_knock_out_numbers, validate_player_count

logger = logging.getLogger(__name__)


class GameStateError(RuntimeError):
    """Raised when a game is asked to do something its status forbids."""


class KnockOutGame:
    """
    A single game of Knock Out!.

    The game owns its roster and resolves every turn itself. The observer is
    borrowed; the game only calls it and never keeps it alive beyond its own
    reference.

    Attributes:
        die: Die shared by every player
        players: Roster in turn order
        observer: Optional receiver of lifecycle notifications
        status: Current lifecycle status
    """

    def __init__(
        self,
        num_players: int,
        die: Die | None = None,
        random_source: RandomSource | None = None,
        knock_out_numbers: Sequence[int] | None = None,
        observer: GameObserver | None = None,
    ) -> None:
        """
        Args:
            num_players: Number of players, at least 1
            die: Die to roll; defaults to a six-sided die over ``random_source``
            random_source: Source for knock-out numbers and the default die
            knock_out_numbers: Explicit knock-out numbers in roster order
            observer: Optional observer notified during play

        Raises:
            ValueError: If the player count or knock-out numbers are invalid
        """
        num_players = validate_player_count(num_players)
        source = random_source if random_source is not None else SeededRandomSource()

        if knock_out_numbers is None:
            numbers = tuple(source.next(KNOCK_OUT_MIN, KNOCK_OUT_MAX) for _ in range(num_players))
        else:
            numbers = validate_knock_out_numbers(knock_out_numbers, num_players)

        self.die = die if die is not None else Die(DEFAULT_SIDES, source)
        self.players = [
            Player(id=i, knock_out_number=number)
            for i, number in enumerate(numbers, start=1)
        ]
        self.observer = observer
        self.status = GameStatus.NOT_STARTED
        self.turns_taken = 0
        self._winner: Player | None = None

    @property
    def winner(self) -> Player | None:
        """The player who reached the win threshold, if any."""
        return self._winner

    @property
    def active_players(self) -> list[Player]:
        """Players who have not been knocked out."""
        return [p for p in self.players if p.is_active]

    def standings(self) -> list[Player]:
        """Players still in the game first, then by score (highest first)."""
        return sorted(self.players, key=lambda p: (p.eliminated, -p.score, p.id))

    def play(self) -> None:
        """Run the game to completion.

        Raises:
            GameStateError: If the game has already been played
        """
        if self.status is not GameStatus.NOT_STARTED:
            raise GameStateError(f"Game cannot be played from status {self.status.name}.")

        self.status = GameStatus.RUNNING
        logger.debug(
            "Game started with %d players on a %d-sided die",
            len(self.players), self.die.sides,
        )
        if self.observer is not None:
            self.observer.on_start(self)

        while self.status is GameStatus.RUNNING:
            for player in self.players:
                if not player.is_active:
                    continue
                self._take_turn(player)
                if self.status is GameStatus.ENDED:
                    break

    def _take_turn(self, player: Player) -> None:
        """Roll for one player and apply the knock-out or score update."""
        dice_roll_sum = self.die.roll() + self.die.roll()
        self.turns_taken += 1
        logger.debug("Player %d rolled %d", player.id, dice_roll_sum)

        if self.observer is not None:
            self.observer.on_turn(self, player, dice_roll_sum)

        if dice_roll_sum == player.knock_out_number:
            player.eliminated = True
            logger.info(
                "Player %d is knocked out by rolling %d", player.id, player.knock_out_number
            )
            if not self.active_players:
                logger.info("All players have been knocked out")
                self._end()
            return

        player.score += dice_roll_sum
        if player.score >= WIN_THRESHOLD:
            self._winner = player
            logger.info("Player %d has won with a final score of %d", player.id, player.score)
            self._end()

    def _end(self) -> None:
        self.status = GameStatus.ENDED
        if self.observer is not None:
            self.observer.on_end(self)
