from __future__ import annotations

import logging
import sys
from collections.abc import Callable

from bowling_app.config import settings
from bowling_app.exceptions import PinCountError
from bowling_app.game import BowlingGame, announce
from bowling_app.rendering import render_score_table
from bowling_app.validators import parse_pins

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

HELP_LINE = "Enter 'Q' at any time to quit the game or 'D' to display the score at any time."


class QuitGame(Exception):
    pass


def _read_pins(game: BowlingGame, prompt: str, maximum: int, input_fn: InputFn, output_fn: OutputFn) -> int:
    while True:
        try:
            raw = input_fn(prompt).strip()
        except EOFError as exc:
            raise QuitGame from exc

        command = raw.upper()
        if command == "D":
            output_fn(render_score_table(game.score_table()))
            continue
        if command == "Q":
            raise QuitGame

        try:
            return parse_pins(raw, maximum)
        except PinCountError as exc:
            logger.debug("Rejected input %r: %s", raw, exc)
            output_fn(str(exc))


def run(input_fn: InputFn = input, output_fn: OutputFn = print, game: BowlingGame | None = None) -> int:
    """Play one game on the console. Returns the process exit code."""
    game = game or BowlingGame()
    output_fn("Happy Bowling!")
    output_fn(HELP_LINE)

    current_frame = 0
    try:
        while True:
            next_roll = game.next_roll()
            if next_roll is None:
                break
            if next_roll.frame_number != current_frame:
                current_frame = next_roll.frame_number
                output_fn(f"\nFrame {current_frame}:")

            prompt = f"Enter pins knocked down in {next_roll.roll.value} roll: "
            pins = _read_pins(game, prompt, next_roll.max_pins, input_fn, output_fn)
            frame = game.record_roll(next_roll.frame_number, next_roll.roll, pins)

            announcement = announce(frame, next_roll.roll)
            if announcement:
                output_fn(announcement)
    except QuitGame:
        output_fn("Game Terminated.")
        return 0

    output_fn(render_score_table(game.score_table()))
    output_fn(f"\nGame Over! Your total score is: {game.total_score}")
    return 0


def main() -> None:
    logging.basicConfig(level=settings.log_level)
    sys.exit(run())


if __name__ == "__main__":
    main()
