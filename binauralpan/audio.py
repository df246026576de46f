"""Playback engine and the output stream that feeds it to the sound device."""

from __future__ import annotations

import logging
import threading
import time
from array import array

import pygame

from .binaural import BinauralPanner
from .filemanager import AudioFileData

FRAMES_PER_BUFFER = 256

log = logging.getLogger(__name__)


class AudioEngine:
    """Plays an audio file through a binaural panner."""

    def __init__(self, sample_rate: int, audio_data: AudioFileData, volume: float = 1.0) -> None:
        self.sample_rate = sample_rate
        self.audio_data = audio_data
        self.master_volume = volume
        self.play = False
        self.loop = False
        self.index = 0
        self.panner = BinauralPanner()
        log.debug("AudioEngine created: sampleRate = %d", sample_rate)

    def process_frame(self) -> tuple[float, float]:
        """Produce the next (left, right) output frame."""
        data = self.audio_data
        if self.play and self.index // data.channels >= data.frames:
            if not self.loop:
                self.play = False
            self.index = 0
        sample = data.samples[self.index] if self.index < data.size else 0.0
        left, right = self.panner.process(sample)
        if self.play:
            self.index += data.channels
        return left * self.master_volume, right * self.master_volume

    def render(self, frames: int, active: bool = True) -> list[float]:
        """Render interleaved stereo samples; silence when not active."""
        if not active:
            return [0.0] * (2 * frames)
        out: list[float] = []
        for _ in range(frames):
            out.extend(self.process_frame())
        return out


class AudioOutput:
    """Streams an engine's output to the default sound device."""

    def __init__(self, engine: AudioEngine, frames_per_buffer: int = FRAMES_PER_BUFFER) -> None:
        if frames_per_buffer <= 0:
            raise ValueError(f"frames per buffer must be positive, got {frames_per_buffer}")
        self.engine = engine
        self.frames_per_buffer = frames_per_buffer
        self.active = False
        self._channel = None
        self._open = False
        self._thread: threading.Thread | None = None
        self._stop_event = threading.Event()

    def __enter__(self) -> AudioOutput:
        self.start()
        return self

    def __exit__(self, *exc_info) -> None:
        if self._open:
            self.close()

    @property
    def running(self) -> bool:
        return self._thread is not None

    def _next_buffer(self) -> bytes:
        samples = self.engine.render(self.frames_per_buffer, self.active)
        pcm = array("h", (int(max(-1.0, min(1.0, s)) * 32767) for s in samples))
        return pcm.tobytes()

    def _pump(self) -> None:
        pause = self.frames_per_buffer / self.engine.sample_rate / 4
        while not self._stop_event.is_set():
            if self._channel.get_queue() is not None:
                time.sleep(pause)
                continue
            sound = pygame.mixer.Sound(buffer=self._next_buffer())
            if self._channel.get_busy():
                self._channel.queue(sound)
            else:
                self._channel.play(sound)

    def start(self) -> None:
        """Open the device if needed and begin streaming."""
        if self.running:
            raise RuntimeError("audio output is already running")
        if not self._open:
            try:
                pygame.mixer.init(
                    frequency=self.engine.sample_rate,
                    size=-16,
                    channels=2,
                    buffer=self.frames_per_buffer,
                )
                self._channel = pygame.mixer.Channel(0)
            except pygame.error as exc:
                raise RuntimeError(f"failed to open audio output: {exc}") from exc
            self._open = True
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._pump, daemon=True)
        self._thread.start()

    def stop(self) -> None:
        """Stop streaming; the device stays open."""
        if not self.running:
            raise RuntimeError("audio output is not running")
        self._stop_event.set()
        self._thread.join()
        self._thread = None
        self._channel.stop()

    def close(self) -> None:
        """Stop streaming if needed and release the device."""
        if not self._open:
            raise RuntimeError("audio output is not open")
        if self.running:
            self.stop()
        pygame.mixer.quit()
        self._channel = None
        self._open = False
        log.info("Stream Completed")