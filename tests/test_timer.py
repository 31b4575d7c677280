import pytest

from rpgutils.timer import MAX_DELTA_TIME, GameTimer


def make_clock(values):
    return iter(values).__next__


def test_reports_elapsed_time():
    timer = GameTimer(0.0, make_clock([0.1, 0.25]))
    assert timer.delta_time() == pytest.approx(0.1)
    assert timer.delta_time() == pytest.approx(0.15)


def test_large_step_is_capped():
    timer = GameTimer(0.0, make_clock([5.0]))
    assert timer.delta_time() == MAX_DELTA_TIME
    assert timer.raw_delta == pytest.approx(5.0)


def test_cap_value():
    timer = GameTimer(0.0, make_clock([0.5]))
    assert timer.delta_time() == pytest.approx(0.4)


def test_frame_after_cap_measures_from_new_frame():
    timer = GameTimer(1.0, make_clock([3.0, 3.2]))
    assert timer.delta_time() == MAX_DELTA_TIME
    assert timer.delta_time() == pytest.approx(0.2)
    assert timer.prev_frame_time == 3.2


def test_default_clock_never_exceeds_cap():
    timer = GameTimer()
    for _ in range(3):
        step = timer.delta_time()
        assert 0.0 <= step <= MAX_DELTA_TIME