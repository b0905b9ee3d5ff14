from __future__ import annotations

from collections.abc import Sequence

from bowling_app.frame import ALL_PINS, Frame
from bowling_app.schemas import FrameRow, ScoreTable


def _frame_at(frames: Sequence[Frame], index: int) -> Frame | None:
    if 0 <= index < len(frames):
        return frames[index]
    return None


def bonus_after_strike(frames: Sequence[Frame], index: int) -> int | None:
    """Pins from the two rolls following a strike in ``frames[index]``."""
    next_frame = _frame_at(frames, index + 1)
    if next_frame is None:
        return None

    if next_frame.is_strike:
        # Only the first roll counts here, even when the frame after next is frame 10.
        after_next = _frame_at(frames, index + 2)
        if after_next is None or after_next.first_roll is None:
            return None
        return ALL_PINS + after_next.first_roll

    if next_frame.first_roll is None or next_frame.second_roll is None:
        return None
    return next_frame.first_roll + next_frame.second_roll


def bonus_after_spare(frames: Sequence[Frame], index: int) -> int | None:
    next_frame = _frame_at(frames, index + 1)
    if next_frame is None:
        return None
    return next_frame.first_roll


def score_of_frame(frames: Sequence[Frame], index: int) -> int | None:
    """Points for ``frames[index]``, or None while a needed roll is missing."""
    frame = _frame_at(frames, index)
    if frame is None:
        return None

    if frame.is_last:
        if not frame.is_complete():
            return None
        return frame.pins_total()

    if frame.is_strike:
        bonus = bonus_after_strike(frames, index)
        return None if bonus is None else ALL_PINS + bonus
    if frame.is_spare:
        bonus = bonus_after_spare(frames, index)
        return None if bonus is None else ALL_PINS + bonus
    if frame.first_roll is None or frame.second_roll is None:
        return None
    return frame.first_roll + frame.second_roll


def build_score_table(frames: Sequence[Frame]) -> ScoreTable:
    rows: list[FrameRow] = []
    running_total = 0
    resolved = True

    for index, frame in enumerate(frames):
        frame_score = score_of_frame(frames, index)
        row = FrameRow(
            frame_number=frame.frame_number,
            first_roll=frame.display_first_roll(),
            second_roll=frame.display_second_roll(),
            third_roll=frame.display_third_roll() if frame.is_last and frame.third_roll is not None else None,
            is_strike=frame.is_strike,
            is_spare=frame.is_spare,
            is_complete=frame.is_complete(),
            score=frame_score,
        )
        if frame_score is not None and resolved:
            running_total += frame_score
            row.running_total = running_total
        else:
            # Later frames stay blank until this one resolves.
            resolved = False
            row.pending = "pending_bonus" if frame.is_strike or frame.is_spare else "not_available"
        rows.append(row)

    return ScoreTable(frames=rows, total_score=running_total)
