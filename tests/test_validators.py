import pytest

from bowling_app.exceptions import PinCountError, RollOrderError
from bowling_app.frame import Frame
from bowling_app.schemas import RollOrdinal
from bowling_app.validators import max_pins, parse_pins, validate_pins


def test_max_pins_regular_frame():
    frame = Frame(4)
    assert max_pins(frame, RollOrdinal.first) == 10
    frame.record_first_roll(6)
    assert max_pins(frame, RollOrdinal.second) == 4


def test_max_pins_tenth_frame():
    frame = Frame(10)
    frame.record_first_roll(10)
    assert max_pins(frame, RollOrdinal.second) == 10
    frame.record_second_roll(10)
    assert max_pins(frame, RollOrdinal.third) == 10

    frame = Frame(10)
    frame.record_first_roll(10)
    frame.record_second_roll(4)
    assert max_pins(frame, RollOrdinal.third) == 6

    frame = Frame(10)
    frame.record_first_roll(2)
    frame.record_second_roll(8)
    assert max_pins(frame, RollOrdinal.third) == 10


def test_max_pins_before_first_roll():
    with pytest.raises(RollOrderError):
        max_pins(Frame(1), RollOrdinal.second)


def test_validate_pins_rejects_non_integer():
    with pytest.raises(PinCountError, match="integer"):
        validate_pins(Frame(1), RollOrdinal.first, "5")
    with pytest.raises(PinCountError):
        validate_pins(Frame(1), RollOrdinal.first, True)


def test_parse_pins():
    assert parse_pins(" 7 ", 10) == 7
    with pytest.raises(PinCountError, match="valid integer"):
        parse_pins("seven", 10)
    with pytest.raises(PinCountError, match="between 0 and 3") as excinfo:
        parse_pins("4", 3)
    assert excinfo.value.maximum == 3
