"""In-game clock that counts seconds and formats them as a time of day."""

from __future__ import annotations


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // b
    return -q if a < 0 else q


def _trunc_rem(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend."""
    r = abs(a) % b
    return -r if a < 0 else r


def _two_digits(number: int) -> str:
    return ("0" if number < 10 else "") + str(number)


class Clock:
    """A running count of seconds, shown as ``HH:MM:SS`` wrapped to a day."""

    def __init__(self, seconds: float = 0.0) -> None:
        self.seconds = float(seconds)

    def __str__(self) -> str:
        whole = int(self.seconds)
        seconds = _trunc_rem(whole, 60)
        minutes = _trunc_rem(_trunc_div(whole, 60), 60)
        hours = _trunc_rem(_trunc_div(whole, 3600), 24)
        return f"{_two_digits(hours)}:{_two_digits(minutes)}:{_two_digits(seconds)}"

    def __repr__(self) -> str:
        return f"Clock(seconds={self.seconds!r})"

    def __iadd__(self, time: float) -> Clock:
        self.seconds += time
        return self