"""Decoding audio files into interleaved float samples."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from pathlib import Path

import pygame

SUPPORTED_EXTENSIONS = (".wav", ".flac", ".mp3")

_WAVE_FORMAT_PCM = 0x0001
_WAVE_FORMAT_IEEE_FLOAT = 0x0003
_WAVE_FORMAT_EXTENSIBLE = 0xFFFE


class AudioLoadError(Exception):
    """An audio file could not be opened or decoded."""


class UnsupportedFormatError(AudioLoadError):
    """The file extension is not one of the supported formats."""


@dataclass
class AudioFileData:
    """Interleaved float samples with their channel count and sample rate."""

    samples: list[float] = field(default_factory=list)
    channels: int = 1
    sample_rate: int = 44100

    def __post_init__(self) -> None:
        if self.channels < 1:
            raise ValueError(f"channel count must be at least 1, got {self.channels}")

    @property
    def size(self) -> int:
        """Number of samples over all channels."""
        return len(self.samples)

    @property
    def frames(self) -> int:
        """Number of sample frames."""
        return self.size // self.channels


def _unpack(fmt: str, data: bytes, scale: float = 1.0, shift: float = 0.0) -> list[float]:
    width = struct.calcsize(fmt)
    usable = len(data) - len(data) % width
    return [(value - shift) / scale for (value,) in struct.iter_unpack(fmt, data[:usable])]


def _decode_wav_pcm(pcm: bytes, tag: int, bits: int) -> list[float]:
    if tag == _WAVE_FORMAT_PCM:
        if bits == 8:
            return _unpack("<B", pcm, 128.0, 128.0)
        if bits == 16:
            return _unpack("<h", pcm, 32768.0)
        if bits == 24:
            usable = len(pcm) - len(pcm) % 3
            return [
                int.from_bytes(pcm[i : i + 3], "little", signed=True) / 8388608.0
                for i in range(0, usable, 3)
            ]
        if bits == 32:
            return _unpack("<i", pcm, 2147483648.0)
    elif tag == _WAVE_FORMAT_IEEE_FLOAT:
        if bits == 32:
            return _unpack("<f", pcm)
        if bits == 64:
            return _unpack("<d", pcm)
    raise AudioLoadError(f"unsupported WAV encoding: format {tag:#06x}, {bits} bits")


def _read_wav(path: Path) -> AudioFileData:
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise AudioLoadError(f"Failed to open and decode WAV file: {path}") from exc
    if len(data) < 12 or data[:4] != b"RIFF" or data[8:12] != b"WAVE":
        raise AudioLoadError(f"Failed to open and decode WAV file: {path}")

    fmt_chunk = pcm = None
    pos = 12
    while pos + 8 <= len(data):
        chunk_id = data[pos : pos + 4]
        (chunk_size,) = struct.unpack_from("<I", data, pos + 4)
        body = data[pos + 8 : pos + 8 + chunk_size]
        if chunk_id == b"fmt ":
            fmt_chunk = body
        elif chunk_id == b"data":
            pcm = body
        pos += 8 + chunk_size + (chunk_size & 1)

    if fmt_chunk is None or pcm is None or len(fmt_chunk) < 16:
        raise AudioLoadError(f"Failed to open and decode WAV file: {path}")
    tag, channels, sample_rate, _, _, bits = struct.unpack_from("<HHIIHH", fmt_chunk)
    if tag == _WAVE_FORMAT_EXTENSIBLE and len(fmt_chunk) >= 26:
        (tag,) = struct.unpack_from("<H", fmt_chunk, 24)
    if channels == 0:
        raise AudioLoadError(f"WAV file has no channels: {path}")

    samples = _decode_wav_pcm(pcm, tag, bits)
    del samples[len(samples) - len(samples) % channels :]
    return AudioFileData(samples, channels, sample_rate)


def _decode_mixer_raw(raw: bytes, fmt: int) -> list[float]:
    if fmt == 8:
        return _unpack("=B", raw, 128.0, 128.0)
    if fmt == -8:
        return _unpack("=b", raw, 128.0)
    if fmt == 16:
        return _unpack("=H", raw, 32768.0, 32768.0)
    if fmt == -16:
        return _unpack("=h", raw, 32768.0)
    if fmt == 32:
        return _unpack("=f", raw)
    if fmt == -32:
        return _unpack("=i", raw, 2147483648.0)
    raise AudioLoadError(f"unsupported mixer sample format: {fmt}")


def _read_with_mixer(path: Path, kind: str) -> AudioFileData:
    if not path.is_file():
        raise AudioLoadError(f"Failed to open and decode {kind} file: {path}")
    try:
        if pygame.mixer.get_init() is None:
            pygame.mixer.init()
        sound = pygame.mixer.Sound(str(path))
        raw = sound.get_raw()
    except pygame.error as exc:
        raise AudioLoadError(f"Failed to open and decode {kind} file: {path}") from exc
    sample_rate, fmt, channels = pygame.mixer.get_init()
    samples = _decode_mixer_raw(raw, fmt)
    del samples[len(samples) - len(samples) % channels :]
    return AudioFileData(samples, channels, sample_rate)


def load_audio_file(filename: str | Path) -> AudioFileData:
    """Decode a .wav, .flac or .mp3 file into interleaved float samples."""
    path = Path(filename)
    name = str(filename).lower()
    if name.endswith(".wav"):
        return _read_wav(path)
    if name.endswith(".flac"):
        return _read_with_mixer(path, "FLAC")
    if name.endswith(".mp3"):
        return _read_with_mixer(path, "MP3")
    raise UnsupportedFormatError(f"Unsupported audio format: {filename}")