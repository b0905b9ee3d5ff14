from __future__ import annotations

import logging

from bowling_app.exceptions import RollOrderError
from bowling_app.frame import LAST_FRAME, Frame
from bowling_app.schemas import FrameRow, GameState, NextRoll, RollOrdinal, ScoreTable
from bowling_app.scoring import build_score_table, score_of_frame
from bowling_app.validators import max_pins, validate_pins

logger = logging.getLogger(__name__)


def announce(frame: Frame, ordinal: RollOrdinal) -> str | None:
    if ordinal == RollOrdinal.first and frame.is_strike:
        return "Strike!"
    if ordinal == RollOrdinal.second and frame.is_spare:
        return "Spare!"
    return None


class BowlingGame:
    """A single player's game: ten frames, filled in order."""

    def __init__(self) -> None:
        self._frames: list[Frame] = []
        self.total_score = 0
        logger.info("Created game")

    @property
    def frames(self) -> tuple[Frame, ...]:
        return tuple(self._frames)

    @property
    def state(self) -> GameState:
        return GameState.complete if self.is_complete() else GameState.in_progress

    def is_complete(self) -> bool:
        return len(self._frames) == LAST_FRAME and self._frames[-1].is_complete()

    def frame(self, frame_number: int) -> Frame | None:
        if 1 <= frame_number <= len(self._frames):
            return self._frames[frame_number - 1]
        return None

    def next_slot(self) -> tuple[int, RollOrdinal] | None:
        if self.is_complete():
            return None
        if not self._frames or self._frames[-1].is_complete():
            return len(self._frames) + 1, RollOrdinal.first

        current = self._frames[-1]
        if current.second_roll is None:
            return current.frame_number, RollOrdinal.second
        return current.frame_number, RollOrdinal.third

    def next_roll(self) -> NextRoll | None:
        slot = self.next_slot()
        if slot is None:
            return None
        frame_number, ordinal = slot
        frame = self.frame(frame_number) or Frame(frame_number)
        return NextRoll(frame_number=frame_number, roll=ordinal, max_pins=max_pins(frame, ordinal))

    def roll(self, pins: int) -> Frame:
        """Record ``pins`` in whichever slot comes next."""
        slot = self.next_slot()
        if slot is None:
            raise RollOrderError(None, "game is already complete")
        frame_number, ordinal = slot
        return self.record_roll(frame_number, ordinal, pins)

    def record_roll(self, frame_number: int, ordinal: RollOrdinal | str, pins: int) -> Frame:
        try:
            ordinal = RollOrdinal(ordinal)
        except ValueError as exc:
            raise RollOrderError(frame_number, f"unknown roll {ordinal!r}") from exc
        slot = self.next_slot()
        if slot is None:
            raise RollOrderError(frame_number, "game is already complete")
        if slot != (frame_number, ordinal):
            expected_frame, expected_ordinal = slot
            raise RollOrderError(
                frame_number,
                f"cannot record {ordinal.value} roll; next roll is the "
                f"{expected_ordinal.value} roll of frame {expected_frame}",
            )

        frame = self.frame(frame_number) or Frame(frame_number)
        validate_pins(frame, ordinal, pins)
        if ordinal == RollOrdinal.first:
            frame.record_first_roll(pins)
            if frame.frame_number > len(self._frames):
                self._frames.append(frame)
        elif ordinal == RollOrdinal.second:
            frame.record_second_roll(pins)
        else:
            frame.record_third_roll(pins)

        logger.debug("Recorded %s roll of %d pins in frame %d", ordinal.value, pins, frame_number)
        if self.is_complete():
            logger.info("Game complete")
        return frame

    def score_of_frame(self, index: int) -> int | None:
        return score_of_frame(self._frames, index)

    def score_table(self) -> ScoreTable:
        table = build_score_table(self._frames)
        self.total_score = table.total_score
        return table

    def frame_row(self, frame_number: int) -> FrameRow | None:
        if self.frame(frame_number) is None:
            return None
        return self.score_table().frames[frame_number - 1]
