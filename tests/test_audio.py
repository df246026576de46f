import pytest

from binauralpan.audio import AudioEngine, AudioOutput
from binauralpan.filemanager import AudioFileData


def _engine(samples, channels=1, volume=1.0):
    return AudioEngine(44100, AudioFileData(list(samples), channels, 44100), volume)


def test_engine_defaults():
    engine = _engine([0.1] * 4)
    assert engine.play is False
    assert engine.loop is False
    assert engine.index == 0
    assert engine.master_volume == 1.0


def test_index_holds_while_paused():
    engine = _engine([0.5] * 10)
    for _ in range(5):
        engine.process_frame()
    assert engine.index == 0


def test_index_advances_by_channel_count():
    engine = _engine([0.5] * 12, channels=2)
    engine.play = True
    for _ in range(3):
        engine.process_frame()
    assert engine.index == 3 * 2


def test_playback_stops_at_end_without_loop():
    data = [0.5] * 3
    engine = _engine(data)
    engine.play = True
    for _ in range(len(data)):
        engine.process_frame()
    assert engine.play is True
    engine.process_frame()
    assert engine.play is False
    assert engine.index == 0


def test_looping_playback_wraps():
    data = [0.5] * 3
    engine = _engine(data)
    engine.play = True
    engine.loop = True
    for _ in range(len(data) + 1):
        engine.process_frame()
    assert engine.play is True
    assert engine.index == 1


def test_render_inactive_is_silent_and_leaves_state():
    engine = _engine([0.9] * 8)
    engine.play = True
    out = engine.render(16, False)
    assert out == [0.0] * 32
    assert engine.index == 0


def test_render_length_is_interleaved_stereo():
    engine = _engine([0.9] * 100)
    engine.play = True
    out = engine.render(20)
    assert len(out) == 40
    assert engine.index == 20


def test_zero_volume_mutes_output():
    engine = _engine([1.0, -1.0] * 50, volume=0.0)
    engine.play = True
    assert all(v == 0.0 for v in engine.render(100))


def test_volume_scales_output():
    quiet = _engine([1.0] * 100, volume=0.5)
    loud = _engine([1.0] * 100, volume=1.0)
    quiet.play = loud.play = True
    q = quiet.render(60)
    lo = loud.render(60)
    assert any(v != 0.0 for v in lo)
    assert q == pytest.approx([v * 0.5 for v in lo])


def test_empty_data_renders_silence():
    engine = _engine([])
    engine.play = True
    assert engine.render(4) == [0.0] * 8


def test_output_rejects_bad_buffer_size():
    with pytest.raises(ValueError):
        AudioOutput(_engine([0.0]), 0)


def test_stop_before_start_raises():
    output = AudioOutput(_engine([0.0]))
    with pytest.raises(RuntimeError):
        output.stop()


def test_close_before_open_raises():
    output = AudioOutput(_engine([0.0]))
    with pytest.raises(RuntimeError):
        output.close()