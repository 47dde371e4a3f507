"""Tests for time positions."""
import pytest

from vidlang.values import TimePosition


def test_normalizes_overflowing_seconds():
    t = TimePosition.parse("10:75")
    assert (t.minutes, t.seconds) == (11, 15)
    assert (TimePosition(0, 125).minutes, TimePosition(0, 125).seconds) == (2, 5)


def test_normalize_is_idempotent():
    assert TimePosition.normalize(3, 59) == (3, 59)
    assert TimePosition.normalize(*TimePosition.normalize(0, 125)) == (2, 5)


def test_fields_are_read_only():
    t = TimePosition(1, 30)
    with pytest.raises(AttributeError):
        t.minutes = 5
    with pytest.raises(AttributeError):
        t.seconds = 0
    with pytest.raises(AttributeError):
        del t.minutes
    assert (t.minutes, t.seconds) == (1, 30)
    assert hash(t) == hash(TimePosition(0, 90))


def test_round_trip_through_string():
    for minutes, seconds in [(0, 0), (1, 5), (11, 15), (0, 75), (120, 59)]:
        t = TimePosition(minutes, seconds)
        back = TimePosition.parse(str(t))
        assert (back.minutes, back.seconds) == (t.minutes, t.seconds)


def test_str_pads_seconds():
    assert str(TimePosition(1, 5)) == "1:05"
    assert str(TimePosition(0, 30)) == "0:30"


def test_addition():
    assert TimePosition.parse("00:10") + TimePosition.parse("00:20") == TimePosition(0, 30)
    total = TimePosition.parse("00:50") + TimePosition.parse("00:20")
    assert (total.minutes, total.seconds) == (1, 10)


def test_scaling_by_integer():
    assert TimePosition(0, 40) * 3 == TimePosition(2, 0)
    assert 3 * TimePosition(0, 40) == TimePosition(2, 0)
    assert TimePosition(5, 0) * 0 == TimePosition(0, 0)


def test_equality_by_total_seconds():
    assert TimePosition(1, 0) == TimePosition(0, 60)
    assert TimePosition(1, 0) != TimePosition(1, 1)
    assert hash(TimePosition(1, 0)) == hash(TimePosition(0, 60))


def test_negative_is_rejected():
    with pytest.raises(ValueError):
        TimePosition(-1, 0)
    with pytest.raises(ValueError):
        TimePosition(1, -5)


@pytest.mark.parametrize("text", ["1000", ":30", "1:", "a:b", "1:2:3", "-1:30", " 1:30"])
def test_parse_rejects_malformed_literals(text):
    with pytest.raises(ValueError):
        TimePosition.parse(text)
