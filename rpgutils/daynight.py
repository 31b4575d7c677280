"""Brightness of the sun over a simulated day."""

import math


def compute_sun_brightness(seconds: float) -> float:
    """Return the sun brightness in ``[0, 1]`` for a time of day in seconds."""
    return (math.tanh(10.0 * math.sin(math.pi / 43200.0 * (seconds - 23000.0)) + 3.2) + 1.0) / 2.0