import pytest

from rpgutils.daynight import compute_sun_brightness


@pytest.mark.parametrize("seconds", range(0, 86400, 1800))
def test_within_unit_interval(seconds):
    value = compute_sun_brightness(seconds)
    assert 0.0 <= value <= 1.0


@pytest.mark.parametrize("seconds", [0, 12345, 40000, 70000])
def test_periodic_over_a_day(seconds):
    assert compute_sun_brightness(seconds) == pytest.approx(
        compute_sun_brightness(seconds + 86400), abs=1e-9
    )


def test_day_is_brighter_than_night():
    noon = compute_sun_brightness(12 * 3600)
    midnight = compute_sun_brightness(0)
    assert noon > midnight


def test_peak_is_full_brightness():
    assert compute_sun_brightness(23000 + 21600) == pytest.approx(1.0, abs=1e-6)


def test_trough_is_dark():
    assert compute_sun_brightness(23000 - 21600) == pytest.approx(0.0, abs=1e-5)