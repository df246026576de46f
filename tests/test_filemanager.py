import struct
import wave

import pytest

from binauralpan.filemanager import (
    AudioFileData,
    AudioLoadError,
    UnsupportedFormatError,
    load_audio_file,
)


def _write_pcm16(path, channels, rate, values):
    with wave.open(str(path), "wb") as out:
        out.setnchannels(channels)
        out.setsampwidth(2)
        out.setframerate(rate)
        out.writeframes(struct.pack(f"<{len(values)}h", *values))


def _riff(fmt_body, data_body):
    chunks = b"fmt " + struct.pack("<I", len(fmt_body)) + fmt_body
    chunks += b"data" + struct.pack("<I", len(data_body)) + data_body
    return b"RIFF" + struct.pack("<I", 4 + len(chunks)) + b"WAVE" + chunks


def test_default_file_data():
    data = AudioFileData()
    assert data.channels == 1
    assert data.sample_rate == 44100
    assert data.size == 0
    assert data.frames == 0


def test_size_and_frames_follow_samples():
    data = AudioFileData([0.0] * 10, channels=2, sample_rate=22050)
    assert data.size == 10
    assert data.frames == 5


def test_file_data_rejects_zero_channels():
    with pytest.raises(ValueError):
        AudioFileData([0.0], channels=0)


def test_loads_pcm16_stereo_wav(tmp_path):
    path = tmp_path / "tone.wav"
    _write_pcm16(path, 2, 22050, [16384, -16384, 0, -32768])
    data = load_audio_file(path)
    assert data.channels == 2
    assert data.sample_rate == 22050
    assert data.frames == 2
    assert data.samples == [0.5, -0.5, 0.0, -1.0]


def test_extension_check_ignores_case(tmp_path):
    path = tmp_path / "LOUD.WAV"
    _write_pcm16(path, 1, 8000, [16384])
    assert load_audio_file(path).samples == [0.5]


def test_loads_float_wav(tmp_path):
    path = tmp_path / "float.wav"
    fmt = struct.pack("<HHIIHH", 3, 1, 8000, 32000, 4, 32)
    path.write_bytes(_riff(fmt, struct.pack("<3f", 0.5, -0.25, 1.0)))
    data = load_audio_file(path)
    assert data.samples == [0.5, -0.25, 1.0]
    assert data.sample_rate == 8000


def test_loads_unsigned_8bit_wav(tmp_path):
    path = tmp_path / "byte.wav"
    fmt = struct.pack("<HHIIHH", 1, 1, 8000, 8000, 1, 8)
    path.write_bytes(_riff(fmt, bytes([128, 0, 192])))
    assert load_audio_file(path).samples == [0.0, -1.0, 0.5]


def test_unsupported_extension(tmp_path):
    with pytest.raises(UnsupportedFormatError):
        load_audio_file(tmp_path / "notes.ogg")


def test_unsupported_format_is_a_load_error(tmp_path):
    with pytest.raises(AudioLoadError) as info:
        load_audio_file(tmp_path / "notes.ogg")
    assert isinstance(info.value, UnsupportedFormatError)


def test_missing_wav_raises(tmp_path):
    with pytest.raises(AudioLoadError):
        load_audio_file(tmp_path / "absent.wav")


def test_missing_mp3_raises(tmp_path):
    with pytest.raises(AudioLoadError):
        load_audio_file(tmp_path / "absent.mp3")


def test_corrupt_wav_raises(tmp_path):
    path = tmp_path / "broken.wav"
    path.write_bytes(b"this is not a riff file")
    with pytest.raises(AudioLoadError):
        load_audio_file(path)