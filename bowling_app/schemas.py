from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, Field, conint


class GameState(str, Enum):
    in_progress = "in_progress"
    complete = "complete"


class RollOrdinal(str, Enum):
    first = "first"
    second = "second"
    third = "third"


PendingReason = Literal["pending_bonus", "not_available"]


class FrameRow(BaseModel):
    frame_number: conint(ge=1, le=10)
    first_roll: str
    second_roll: str
    third_roll: str | None = None
    is_strike: bool = False
    is_spare: bool = False
    is_complete: bool = False
    score: int | None = None
    running_total: int | None = None
    pending: PendingReason | None = None


class ScoreTable(BaseModel):
    frames: list[FrameRow] = Field(default_factory=list)
    total_score: int = 0


class NextRoll(BaseModel):
    frame_number: conint(ge=1, le=10)
    roll: RollOrdinal
    max_pins: conint(ge=0, le=10)


class RollRequest(BaseModel):
    pins: conint(ge=0, le=10)
    frame_number: conint(ge=1, le=10) | None = None
    roll: RollOrdinal | None = None


class GameResponse(BaseModel):
    game_id: UUID
    state: GameState
    created_at: datetime
    expires_at: datetime
    table: ScoreTable
    next_roll: NextRoll | None = None
    messages: list[str] = Field(default_factory=list)
