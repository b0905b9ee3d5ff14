from __future__ import annotations

from dataclasses import dataclass, field

from bowling_app.exceptions import RollOrderError

LAST_FRAME = 10
ALL_PINS = 10


@dataclass
class Frame:
    """One frame of a game. ``None`` in a roll slot means not rolled yet."""

    frame_number: int
    first_roll: int | None = field(default=None, init=False)
    second_roll: int | None = field(default=None, init=False)
    third_roll: int | None = field(default=None, init=False)

    def __post_init__(self) -> None:
        if not 1 <= self.frame_number <= LAST_FRAME:
            raise ValueError(f"frame_number must be between 1 and {LAST_FRAME}")

    @property
    def is_last(self) -> bool:
        return self.frame_number == LAST_FRAME

    @property
    def is_strike(self) -> bool:
        return not self.is_last and self.first_roll == ALL_PINS

    @property
    def is_spare(self) -> bool:
        if self.is_last or self.first_roll is None or self.second_roll is None:
            return False
        return self.first_roll != ALL_PINS and self.first_roll + self.second_roll == ALL_PINS

    def record_first_roll(self, pins: int) -> None:
        if self.first_roll is not None:
            raise RollOrderError(self.frame_number, "first roll already recorded")
        self.first_roll = pins

    def record_second_roll(self, pins: int) -> None:
        if self.first_roll is None:
            raise RollOrderError(self.frame_number, "second roll before first roll")
        if self.second_roll is not None:
            raise RollOrderError(self.frame_number, "second roll already recorded")
        if self.is_strike:
            raise RollOrderError(self.frame_number, "no second roll after a strike")
        self.second_roll = pins

    def record_third_roll(self, pins: int) -> None:
        if not self.is_last:
            raise RollOrderError(self.frame_number, f"third roll is only allowed in frame {LAST_FRAME}")
        if self.second_roll is None:
            raise RollOrderError(self.frame_number, "third roll before second roll")
        if self.third_roll is not None:
            raise RollOrderError(self.frame_number, "third roll already recorded")
        if self.is_complete():
            raise RollOrderError(self.frame_number, "open frame has no bonus roll")
        self.third_roll = pins

    def is_complete(self) -> bool:
        if not self.is_last:
            return self.is_strike or (self.first_roll is not None and self.second_roll is not None)

        if self.first_roll == ALL_PINS:
            return self.second_roll is not None and self.third_roll is not None
        if self.first_roll is None or self.second_roll is None:
            return False
        if self.first_roll + self.second_roll == ALL_PINS:
            return self.third_roll is not None
        return True

    def display_first_roll(self) -> str:
        if self.first_roll is None:
            return "-"
        if self.first_roll == ALL_PINS and not self.is_last:
            return "X"
        return str(self.first_roll)

    def display_second_roll(self) -> str:
        if self.second_roll is None:
            return "-"
        if not self.is_last:
            if self.is_spare:
                return "/"
            if self.is_strike:
                return "-"
            return str(self.second_roll)

        first, second = self.first_roll, self.second_roll
        if first == ALL_PINS:
            if second == ALL_PINS:
                return "X"
            if first + second == ALL_PINS:
                return "/"
            return str(second)
        if first is not None and first + second == ALL_PINS:
            return "/"
        return str(second)

    def display_third_roll(self) -> str:
        if self.third_roll is None:
            return "-"
        if self.third_roll == ALL_PINS:
            return "X"
        if (
            self.second_roll is not None
            and self.second_roll != ALL_PINS
            and self.second_roll + self.third_roll == ALL_PINS
        ):
            return "/"
        return str(self.third_roll)

    def pins_total(self) -> int:
        return sum(roll for roll in (self.first_roll, self.second_roll, self.third_roll) if roll is not None)
