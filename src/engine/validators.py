"""
Knock Out! - Input Validation Utilities

Provides validation functions for game setup inputs. All validators
either return validated data or raise descriptive ValueError exceptions.
"""

from typing import Sequence

from src.engine.base import KNOCK_OUT_MAX, KNOCK_OUT_MIN


def validate_player_count(count: int) -> int:
    """
    Validate number of players.

    Args:
        count: Number of players

    Returns:
        Validated count

    Raises:
        ValueError: If count is not a positive integer
    """
    if not isinstance(count, int) or isinstance(count, bool):
        raise ValueError(f"Player count must be an integer, got {type(count).__name__}.")

    if count < 1:
        raise ValueError(f"Player count must be at least 1, got {count}.")

    return count


def validate_knock_out_numbers(numbers: Sequence[int], player_count: int) -> tuple[int, ...]:
    """
    Validate explicitly assigned knock-out numbers.

    Args:
        numbers: One knock-out number per player, in roster order
        player_count: Number of players in the game

    Returns:
        Validated numbers as a tuple

    Raises:
        ValueError: If the count does not match or any number is out of range
    """
    numbers_tuple = tuple(numbers)

    if len(numbers_tuple) != player_count:
        raise ValueError(
            f"Expected {player_count} knock-out numbers, got {len(numbers_tuple)}."
        )

    for i, number in enumerate(numbers_tuple):
        if not isinstance(number, int):
            raise ValueError(
                f"Knock-out number at index {i} must be an integer, got {type(number).__name__}."
            )
        if not (KNOCK_OUT_MIN <= number <= KNOCK_OUT_MAX):
            raise ValueError(
                f"Knock-out number at index {i} is {number}, "
                f"must be between {KNOCK_OUT_MIN} and {KNOCK_OUT_MAX}."
            )

    return numbers_tuple


def parse_seed(text: str) -> int | None:
    """
    Parse a user-entered seed.

    Args:
        text: Raw input; blank means no seed

    Returns:
        The seed, or None for blank input

    Raises:
        ValueError: If the text is not a whole number
    """
    text = text.strip()
    if not text:
        return None

    try:
        return int(text)
    except ValueError:
        raise ValueError(f"Seed must be a whole number, got {text!r}.") from None
