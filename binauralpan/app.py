"""Application entry point: window, event loop, drag-and-drop loading and audio output."""

from __future__ import annotations

import argparse
import logging
import threading
import time
from dataclasses import dataclass, field
from pathlib import Path

import pygame

from .audio import AudioEngine, AudioOutput
from .filemanager import SUPPORTED_EXTENSIONS, AudioFileData, AudioLoadError, load_audio_file
from .gui import MainInterface, draw_load_screen

SAMPLE_RATE = 44100
WINDOW_TITLE = "Binaural Spatializer Demo"
WINDOW_SIZE = (350, 470)
FONT_SIZE = 18
FRAME_RATE = 60

log = logging.getLogger(__name__)


def is_supported(path: str | Path) -> bool:
    """Whether a dropped file has one of the accepted extensions."""
    return Path(path).suffix in SUPPORTED_EXTENSIONS


@dataclass
class FileState:
    """Which file is shown and whether it is loading or ready to play."""

    loaded: bool = False
    loading: bool = False
    current_file_name: str = ""
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def begin_loading(self, path: str | Path) -> None:
        """Mark a new file as being loaded."""
        with self._lock:
            self.loading = True
            self.loaded = False
            self.current_file_name = Path(path).name

    def finish_loading(self) -> None:
        """Mark the current file as ready to play."""
        with self._lock:
            self.loaded = True
            self.loading = False


def _load_file(engine: AudioEngine, state: FileState, path: str | Path) -> None:
    try:
        engine.audio_data = load_audio_file(path)
    except AudioLoadError as exc:
        log.error("%s", exc)
        engine.audio_data = AudioFileData()
    data = engine.audio_data
    log.info(
        "Audio file loaded!\n\tFile name: %s\n\tSample rate: %d\n\tChannels: %d\n\tSize (in samples): %d",
        state.current_file_name,
        data.sample_rate,
        data.channels,
        data.size,
    )
    state.finish_loading()


def _handle_drop(engine: AudioEngine, state: FileState, path: str) -> None:
    if not is_supported(path):
        log.error("Unsupported file type dropped: %s", Path(path).suffix)
        return
    engine.play = False
    state.begin_loading(path)
    threading.Thread(target=_load_file, args=(engine, state, path), daemon=True).start()


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="binauralpan",
        description="Drop an audio file on the window and place it around the listener.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="log progress messages")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run the spatializer window until it is closed."""
    args = _parse_args(argv)
    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)

    try:
        pygame.display.init()
        pygame.font.init()
        surface = pygame.display.set_mode(WINDOW_SIZE, pygame.RESIZABLE)
    except pygame.error as exc:
        print(f"Error: {exc}")
        return -1
    pygame.display.set_caption(WINDOW_TITLE)
    font = pygame.font.Font(None, FONT_SIZE)
    clock = pygame.time.Clock()

    engine = AudioEngine(SAMPLE_RATE, AudioFileData([0.0] * SAMPLE_RATE))
    state = FileState()
    interface = MainInterface(engine, font)
    output = AudioOutput(engine)
    try:
        output.start()
    except RuntimeError as exc:
        print(f"An error occurred while using the audio stream\nError message: {exc}")
        pygame.quit()
        return 1

    try:
        done = False
        while not done:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    done = True
                elif event.type == pygame.DROPFILE:
                    _handle_drop(engine, state, event.file)
                elif event.type == pygame.VIDEORESIZE:
                    surface = pygame.display.get_surface()
                elif state.loaded:
                    interface.handle_event(event)

            output.active = state.loaded
            if not pygame.display.get_active():
                time.sleep(0.01)
                continue

            if state.loaded:
                interface.draw(surface, state.current_file_name)
            else:
                draw_load_screen(surface, font, state.loading)
            pygame.display.flip()
            clock.tick(FRAME_RATE)
    finally:
        output.close()
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())