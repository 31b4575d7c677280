import pytest

from rpgutils.clock import Clock


def test_default_starts_at_midnight():
    clock = Clock()
    assert clock.seconds == 0.0
    assert str(clock) == "00:00:00"


def test_hours_minutes_seconds():
    assert str(Clock(3661)) == "01:01:01"


def test_wraps_after_a_day():
    assert str(Clock(86400 + 125)) == str(Clock(125))


def test_fraction_is_truncated():
    assert str(Clock(59.9)) == str(Clock(59))


def test_iadd_accumulates_and_returns_same_object():
    clock = Clock(10)
    original = clock
    clock += 5.5
    assert clock is original
    assert clock.seconds == pytest.approx(15.5)


def test_iadd_matches_direct_construction():
    clock = Clock()
    for _ in range(3600):
        clock += 1
    assert str(clock) == str(Clock(3600))


@pytest.mark.parametrize("seconds", [0, 59, 3599, 43210, 86399])
def test_format_shape(seconds):
    text = str(Clock(seconds))
    parts = text.split(":")
    assert len(parts) == 3
    assert all(len(p) == 2 and p.isdigit() for p in parts)
    hours, minutes, secs = map(int, parts)
    assert hours * 3600 + minutes * 60 + secs == seconds