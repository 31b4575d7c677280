"""Fractal two-dimensional OpenSimplex noise."""

from __future__ import annotations

import math
import time
from typing import List, Optional, Sequence

PSIZE = 2048
MAX_OCTAVES = 9

_U64_MASK = (1 << 64) - 1
_LCG_MULTIPLIER = 6364136223846793005
_LCG_INCREMENT = 1442695040888963407

_STRETCH_2D = -0.211324865405187
_SQUISH_2D = 0.366025403784439
_NORM_2D = 1.0 / 47.0

_GRADIENTS_2D = (
    5, 2, 2, 5,
    -5, 2, -2, 5,
    5, -2, 2, -5,
    -5, -2, -2, -5,
)


def _make_permutation(seed: int) -> List[int]:
    """Shuffle ``0..PSIZE-1`` with a 64-bit linear congruential generator."""
    source = list(range(PSIZE))
    perm = [0] * PSIZE
    for i in range(PSIZE - 1, -1, -1):
        seed = (seed * _LCG_MULTIPLIER + _LCG_INCREMENT) & _U64_MASK
        r = ((seed + 31) & _U64_MASK) % (i + 1)
        perm[i] = source[r]
        source[r] = source[i]
    return perm


def _extrapolate(perm: Sequence[int], xsb: int, ysb: int, dx: float, dy: float) -> float:
    index = perm[(perm[xsb & 0xFF] + ysb) & 0xFF] & 0x0E
    return _GRADIENTS_2D[index] * dx * _GRADIENTS_2D[index + 1] * dy


def _eval(perm: Sequence[int], x: float, y: float) -> float:
    """Evaluate a single octave of noise at ``(x, y)``."""
    stretch_offset = (x + y) * _STRETCH_2D
    xs = x + stretch_offset
    ys = y + stretch_offset

    xsb = math.floor(xs)
    ysb = math.floor(ys)

    squish_offset = (xsb + ysb) * _SQUISH_2D
    xb = xsb + squish_offset
    yb = ysb + squish_offset

    xins = xs - xsb
    yins = ys - ysb
    in_sum = xins + yins

    dx0 = x - xb
    dy0 = y - yb

    value = 0.0

    dx1 = dx0 - 1 - _SQUISH_2D
    dy1 = dy0 - 0 - _SQUISH_2D
    attn1 = 2 - dx1 * dx1 - dy1 * dy1
    if attn1 > 0:
        attn1 *= attn1
        value += attn1 * attn1 * _extrapolate(perm, xsb + 1, ysb + 0, dx1, dy1)

    dx2 = dx0 - 0 - _SQUISH_2D
    dy2 = dy0 - 1 - _SQUISH_2D
    attn2 = 2 - dx2 * dx2 - dy2 * dy2
    if attn2 > 0:
        attn2 *= attn2
        value += attn2 * attn2 * _extrapolate(perm, xsb + 0, ysb + 1, dx2, dy2)

    if in_sum <= 1:
        zins = 1 - in_sum
        if zins > xins or zins > yins:
            if xins > yins:
                xsv_ext, ysv_ext = xsb + 1, ysb - 1
                dx_ext, dy_ext = dx0 - 1, dy0 + 1
            else:
                xsv_ext, ysv_ext = xsb - 1, ysb + 1
                dx_ext, dy_ext = dx0 + 1, dy0 - 1
        else:
            xsv_ext, ysv_ext = xsb + 1, ysb + 1
            dx_ext = dx0 - 1 - 2 * _SQUISH_2D
            dy_ext = dy0 - 1 - 2 * _SQUISH_2D
    else:
        zins = 2 - in_sum
        if zins < xins or zins < yins:
            if xins > yins:
                xsv_ext, ysv_ext = xsb + 2, ysb + 0
                dx_ext = dx0 - 2 - 2 * _SQUISH_2D
                dy_ext = dy0 + 0 - 2 * _SQUISH_2D
            else:
                xsv_ext, ysv_ext = xsb + 0, ysb + 2
                dx_ext = dx0 + 0 - 2 * _SQUISH_2D
                dy_ext = dy0 - 2 - 2 * _SQUISH_2D
        else:
            dx_ext, dy_ext = dx0, dy0
            xsv_ext, ysv_ext = xsb, ysb
        xsb += 1
        ysb += 1
        dx0 = dx0 - 1 - 2 * _SQUISH_2D
        dy0 = dy0 - 1 - 2 * _SQUISH_2D

    attn0 = 2 - dx0 * dx0 - dy0 * dy0
    if attn0 > 0:
        attn0 *= attn0
        value += attn0 * attn0 * _extrapolate(perm, xsb, ysb, dx0, dy0)

    attn_ext = 2 - dx_ext * dx_ext - dy_ext * dy_ext
    if attn_ext > 0:
        attn_ext *= attn_ext
        value += attn_ext * attn_ext * _extrapolate(perm, xsv_ext, ysv_ext, dx_ext, dy_ext)

    return value * _NORM_2D


class OpenSimplexNoise:
    """Layered 2D OpenSimplex noise with a permutation table per octave.

    ``seed`` is taken as an unsigned 64-bit value; when omitted the current
    Unix time is used. ``octaves`` is clamped to ``[0, MAX_OCTAVES]``.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        octaves: int = 2,
        lacunarity: float = 2.0,
        persistence: float = 0.5,
        period: float = 32.0,
    ) -> None:
        self.lacunarity = float(lacunarity)
        self.persistence = float(persistence)
        self.period = float(period)
        self.octaves = octaves
        self._contexts: List[List[int]] = []
        self.seed = int(time.time()) if seed is None else seed

    @property
    def seed(self) -> int:
        """The 64-bit seed; setting it rebuilds every octave's table."""
        return self._seed

    @seed.setter
    def seed(self, value: int) -> None:
        self._seed = int(value) & _U64_MASK
        self._contexts = [
            _make_permutation((self._seed + i * 2) & _U64_MASK)
            for i in range(MAX_OCTAVES)
        ]

    @property
    def octaves(self) -> int:
        """Number of extra octaves layered on the base one."""
        return self._octaves

    @octaves.setter
    def octaves(self, value: int) -> None:
        self._octaves = max(0, min(int(value), MAX_OCTAVES))

    def get_noise(self, x: float, y: float) -> float:
        """Return the fractal noise value at ``(x, y)``."""
        x /= self.period
        y /= self.period

        amp = 1.0
        total_amp = 1.0
        total = _eval(self._contexts[0], x, y)

        for perm in self._contexts[: self._octaves]:
            x *= self.lacunarity
            y *= self.lacunarity
            amp *= self.persistence
            total_amp += amp
            total += _eval(perm, x, y) * amp

        return total / total_amp

    def __repr__(self) -> str:
        return (
            f"OpenSimplexNoise(seed={self._seed}, octaves={self._octaves}, "
            f"lacunarity={self.lacunarity}, persistence={self.persistence}, "
            f"period={self.period})"
        )