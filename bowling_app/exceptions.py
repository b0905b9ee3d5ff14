from __future__ import annotations


class BowlingError(Exception):
    """Base class for errors raised by the scoring engine."""


class PinCountError(BowlingError, ValueError):
    def __init__(self, message: str, *, maximum: int | None = None) -> None:
        super().__init__(message)
        self.maximum = maximum


class RollOrderError(BowlingError, RuntimeError):
    def __init__(self, frame_number: int | None, message: str) -> None:
        if frame_number is not None:
            message = f"frame {frame_number}: {message}"
        super().__init__(message)
        self.frame_number = frame_number
