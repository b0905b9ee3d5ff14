from __future__ import annotations

from uuid import UUID

from fastapi import FastAPI, HTTPException

from bowling_app.config import settings
from bowling_app.exceptions import PinCountError, RollOrderError
from bowling_app.game import announce
from bowling_app.repository import InMemoryRepository, StoredGame
from bowling_app.schemas import FrameRow, GameResponse, RollOrdinal, RollRequest

app = FastAPI(title="Ten-Pin Bowling Scorer", version="0.1.0")
repo = InMemoryRepository(ttl_hours=settings.game_ttl_hours)


def _game_response(record: StoredGame, messages: list[str] | None = None) -> GameResponse:
    game = record.game
    return GameResponse(
        game_id=record.id,
        state=game.state,
        created_at=record.created_at,
        expires_at=record.expires_at,
        table=game.score_table(),
        next_roll=game.next_roll(),
        messages=messages or [],
    )


def _get_record(game_id: UUID) -> StoredGame:
    record = repo.get(game_id)
    if not record:
        raise HTTPException(status_code=404, detail="game not found or expired")
    return record


@app.get("/")
def root() -> dict[str, str]:
    return {
        "message": "Ten-Pin Bowling Scorer API",
        "docs": "/docs",
        "health": "/health",
    }


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post("/api/v1/games", response_model=GameResponse)
def create_game() -> GameResponse:
    return _game_response(repo.create())


@app.get("/api/v1/games/{game_id}", response_model=GameResponse)
def get_game(game_id: UUID) -> GameResponse:
    record = _get_record(game_id)
    with record.lock:
        return _game_response(record)


@app.post("/api/v1/games/{game_id}/rolls", response_model=GameResponse)
def record_roll(game_id: UUID, req: RollRequest) -> GameResponse:
    record = _get_record(game_id)
    game = record.game
    if (req.frame_number is None) != (req.roll is None):
        raise HTTPException(status_code=422, detail="frame_number and roll must be given together")

    with record.lock:
        try:
            if req.frame_number is None:
                slot = game.next_slot()
                ordinal = slot[1] if slot else RollOrdinal.first
                frame = game.roll(req.pins)
            else:
                ordinal = req.roll
                frame = game.record_roll(req.frame_number, req.roll, req.pins)
        except PinCountError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        except RollOrderError as exc:
            raise HTTPException(status_code=409, detail=str(exc)) from exc

        announcement = announce(frame, ordinal)
        return _game_response(record, [announcement] if announcement else [])


@app.get("/api/v1/games/{game_id}/frames/{frame_number}", response_model=FrameRow)
def get_frame(game_id: UUID, frame_number: int) -> FrameRow:
    record = _get_record(game_id)
    with record.lock:
        row = record.game.frame_row(frame_number)
    if row is None:
        raise HTTPException(status_code=404, detail=f"frame {frame_number} has not been played")
    return row
