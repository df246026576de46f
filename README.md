# binauralpan

A small binaural spatializer for headphones. A mono sound is placed at an
angle and a distance on a half circle in front of the listener, and each ear
gets its own delay, gain and low-pass filter.

## Installing

```
pip install .
```

This installs `pygame`, which the package uses for the window, for audio
output and for decoding FLAC and MP3 files.

## Running the demo

```
binauralpan
```

Add `-v` / `--verbose` to log progress messages such as the details of each
loaded file. The same program can be started with `python -m binauralpan.app`.

A 350 x 470 window opens with a prompt. Drop a `.wav`, `.flac` or `.mp3` file
onto it; other extensions are refused with a logged error. The file is loaded
in the background, and then the window shows:

- the file name and the waveform of the file, with a playhead;
- **Play/Pause** (the space bar does the same), **Stop** (which also rewinds),
  and a **Loop** checkbox;
- a semicircular field with a marker. Drag the marker to set the angle and
  distance of the source; the current angle and distance are shown below it;
- a **Volume** knob from 0 to 2, changed by dragging up or down.

Sound goes to the default output device as 16-bit stereo at 44.1 kHz. Playback
is mono: for a multichannel file, only the first channel of each frame is fed
to the panner. If a file cannot be decoded, the error is logged and the file
plays as silence.

## How the panning works

`binauralpan.binaural.BinauralPanner` has an `angle` in degrees (0 is straight
ahead, negative is to the left) and a `dist`, clipped to 0.333 (nearest)
through 1.0 (farthest) on each sample.

- **Time difference**: the ear away from the source is delayed by up to 44
  samples (about 1 ms at 44.1 kHz), at ±90°.
- **Level difference**: each ear's gain runs from 0.2512 (about -12 dBFS) up
  to 0.4579 on the side the source is on. Straight ahead both ears get 0.2512.
- **Filtering**: `update(angle)` sets the angle and retunes a one-pole
  low-pass filter on each ear, with cutoffs between 8 kHz and 20 kHz that
  depend on the angle. Setting `angle` directly does not retune the filters.
- **Distance**: an overall gain of `2 ** (-3 * (dist - 0.333))`, about -12 dB
  at the far edge.

## Using it as a library

```python
from binauralpan.binaural import BinauralPanner

panner = BinauralPanner()
panner.update(-45.0)      # angle in degrees; negative is to the left
panner.dist = 0.6         # 0.333 (nearest) .. 1.0 (farthest)

left, right = panner.process(0.5)
```

`marker_position(size)` and `set_from_pointer(x, y, size)` convert between the
panner's angle and distance and a point in a square panel of side `size`.

`binauralpan.dsp` holds the building blocks: `DelayLine`, a circular buffer,
and `LowPassFilter`, a one-pole filter with `update_cutoff(freq)` and
`process(value)`.

`binauralpan.filemanager.load_audio_file(filename)` returns an
`AudioFileData` with interleaved float `samples`, `channels`, `sample_rate`,
and the `size` and `frames` properties. WAV files are read directly (8-, 16-,
24- and 32-bit integer PCM, 32- and 64-bit float); FLAC and MP3 files are
decoded through the pygame mixer, so their samples, channel count and sample
rate are those of the mixer. It raises `UnsupportedFormatError` for an unknown
extension and `AudioLoadError` when a file cannot be opened or decoded.

`binauralpan.audio.AudioEngine(sample_rate, audio_data, volume=1.0)` plays
that data through its `panner`. Its `play`, `loop`, `index` and
`master_volume` attributes control playback; `process_frame()` returns one
`(left, right)` pair and `render(frames, active=True)` returns a list of
interleaved stereo samples, or silence when `active` is false.
`binauralpan.audio.AudioOutput(engine)` streams an engine to the sound device
with `start()`, `stop()` and `close()`, and can be used as a context manager.

## What it does not do

The demo has no file browser (files are only taken by drag and drop), no
seeking within a file, no choice of output device, and no way to save the
spatialized result to a file.

## Tests

```
pip install .[test]
pytest
```