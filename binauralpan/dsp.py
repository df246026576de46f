"""Small signal-processing building blocks: a circular delay line and a one-pole low-pass filter."""

from __future__ import annotations

import math


class DelayLine:
    """Fixed-size circular buffer of samples."""

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError(f"delay line size must be positive, got {size}")
        self._buffer = [0.0] * size
        self._write_index = 0

    def __len__(self) -> int:
        return len(self._buffer)

    def read(self, delay_samples: int) -> float:
        """Return the sample stored ``delay_samples`` slots after the write position."""
        return self._buffer[(self._write_index + delay_samples) % len(self._buffer)]

    def write(self, value: float) -> None:
        """Store a sample and advance the write position."""
        self._buffer[self._write_index] = value
        self._write_index = (self._write_index + 1) % len(self._buffer)


class LowPassFilter:
    """Mono single-pole IIR low-pass filter."""

    def __init__(self, sample_rate: int = 44100) -> None:
        self.sample_rate = sample_rate
        self.cutoff = sample_rate / 2.0
        self._state = 0.0
        self._alpha = 0.0
        self._update_alpha()

    def _update_alpha(self) -> None:
        omega = 2.0 * math.pi * self.cutoff
        self._alpha = omega / (omega + self.sample_rate)

    def update_cutoff(self, freq: float) -> None:
        """Set a new cutoff frequency in Hz."""
        self.cutoff = freq
        self._update_alpha()

    def process(self, value: float) -> float:
        """Filter one sample."""
        self._state += self._alpha * (value - self._state)
        return self._state