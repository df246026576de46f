"""Binaural panner: interaural delay, level difference and head-shadow filtering."""

from __future__ import annotations

import math

from .dsp import DelayLine, LowPassFilter

MAX_DELAY = 44
MIN_CUTOFF = 8000.0
DELTA_CUTOFF = 12000.0
MIN_AMP = 0.2512
DELTA_AMP = 0.2067
MIN_DIST = 0.333
MAX_DIST = 1.0
_DIST_SCALE = 2.22222


def cos_scale(x: float, positive_x: bool) -> float:
    """Raised-cosine weight of an angle in degrees, zero on the unselected side."""
    x /= 180.0
    y = (math.cos(2.0 * math.pi * (x + 0.5)) + 1.0) / 2.0
    if positive_x:
        return y if x > 0 else 0.0
    return y if x < 0 else 0.0


class BinauralPanner:
    """Places a mono source on a frontal half circle around the listener."""

    def __init__(self) -> None:
        self.angle = 0.0
        self.dist = MIN_DIST
        self._delay = DelayLine(MAX_DELAY + 2)
        self.filter_left = LowPassFilter()
        self.filter_right = LowPassFilter()

    def process(self, sample: float) -> tuple[float, float]:
        """Pan one mono sample and return the (left, right) pair."""
        self.dist = min(max(self.dist, MIN_DIST), MAX_DIST)
        gain = 2.0 ** (-3.0 * (self.dist - MIN_DIST))
        self._delay.write(sample)

        right_side = cos_scale(self.angle, True)
        left_side = cos_scale(self.angle, False)

        left = self.filter_left.process(
            self._delay.read(int(right_side * MAX_DELAY)) * (MIN_AMP + DELTA_AMP * left_side)
        ) * gain
        right = self.filter_right.process(
            self._delay.read(int(left_side * MAX_DELAY)) * (MIN_AMP + DELTA_AMP * right_side)
        ) * gain
        return left, right

    def update(self, angle: float) -> None:
        """Set the angle and retune both head-shadow filters."""
        self.angle = angle
        self.filter_left.update_cutoff(MIN_CUTOFF + cos_scale(angle, True) * DELTA_CUTOFF)
        self.filter_right.update_cutoff(
            MIN_CUTOFF + (1.0 - cos_scale(angle, False)) * DELTA_CUTOFF
        )

    def marker_position(self, size: float) -> tuple[float, float]:
        """Centre of the source marker relative to the top-left of a square panel."""
        theta = math.radians(self.angle)
        radius = self.dist / _DIST_SCALE
        x = (math.sin(theta) * radius + 0.5) * size
        y = math.cos(theta) * radius * size
        return x, size / 2.0 - y

    def set_from_pointer(self, x: float, y: float, size: float) -> None:
        """Move the source to a pointer position given relative to the panel's top-left."""
        span = math.floor(size)
        if span <= 0:
            raise ValueError(f"panel size must be at least 1, got {size}")
        new_x = (x - size / 2.0) / span
        new_y = max((size / 2.0 - y) / span, 0.0)
        self.angle = math.degrees(math.atan2(new_x, new_y))
        self.dist = math.hypot(new_x, new_y) * _DIST_SCALE