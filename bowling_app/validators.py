from __future__ import annotations

import logging

from bowling_app.exceptions import PinCountError, RollOrderError
from bowling_app.frame import ALL_PINS, Frame
from bowling_app.schemas import RollOrdinal

logger = logging.getLogger(__name__)


def max_pins(frame: Frame, ordinal: RollOrdinal) -> int:
    """Pins still standing for the given roll of ``frame``."""
    if ordinal == RollOrdinal.first:
        return ALL_PINS

    if frame.first_roll is None:
        raise RollOrderError(frame.frame_number, f"{ordinal.value} roll before first roll")

    if ordinal == RollOrdinal.second:
        if frame.is_last and frame.first_roll == ALL_PINS:
            return ALL_PINS
        return ALL_PINS - frame.first_roll

    if frame.second_roll is None:
        raise RollOrderError(frame.frame_number, "third roll before second roll")
    if frame.second_roll == ALL_PINS or (
        frame.first_roll != ALL_PINS and frame.first_roll + frame.second_roll == ALL_PINS
    ):
        return ALL_PINS
    if frame.first_roll == ALL_PINS:
        return ALL_PINS - frame.second_roll
    # Open tenth frame: there is no third roll at all.
    return 0


def validate_pins(frame: Frame, ordinal: RollOrdinal, pins: int) -> None:
    maximum = max_pins(frame, ordinal)
    if isinstance(pins, bool) or not isinstance(pins, int):
        raise PinCountError(f"Pin count must be an integer, got {pins!r}", maximum=maximum)
    if not 0 <= pins <= maximum:
        logger.warning(
            "Rejected %s roll of %d pins in frame %d (max %d)",
            ordinal.value,
            pins,
            frame.frame_number,
            maximum,
        )
        raise PinCountError(
            f"Pin count for the {ordinal.value} roll of frame {frame.frame_number} "
            f"must be between 0 and {maximum}",
            maximum=maximum,
        )


def parse_pins(raw: str, maximum: int) -> int:
    try:
        pins = int(raw.strip())
    except ValueError as exc:
        raise PinCountError(
            "Invalid input. Please enter a valid integer, 'D' to display the score, or 'Q' to quit the game.",
            maximum=maximum,
        ) from exc
    if not 0 <= pins <= maximum:
        raise PinCountError(
            f"Invalid input. Please enter a number between 0 and {maximum}, "
            "'D' to display the score, or 'Q' to quit the game.",
            maximum=maximum,
        )
    return pins
