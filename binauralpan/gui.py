"""Screens of the application: the file-drop prompt and the main player interface."""

from __future__ import annotations

import math

import pygame

from .audio import AudioEngine
from .widgets import (
    BUTTON,
    FRAME_BG,
    PLOT_HISTOGRAM,
    PLOT_LINES,
    TEXT,
    WINDOW_BG,
    draw_checkbox,
    draw_playhead,
    draw_plot_lines,
)

PADDING = 8
SPACING = 4
SCOPE_HEIGHT = 100
MARKER_SIZE = 10
KNOB_SIZE = 48
VOLUME_MIN = 0.0
VOLUME_MAX = 2.0
_KNOB_DRAG_SPEED = (VOLUME_MAX - VOLUME_MIN) / 200.0
_KNOB_ANGLE_MIN = math.pi * 0.75
_KNOB_ANGLE_MAX = math.pi * 2.25

_LOADING_TEXT = "Loading file..."
_PROMPT_TEXT = (
    "Please drag and drop an audio file\n"
    "in one of the following formats:\n"
    ".wav, .flac or .mp3"
)


def load_screen_text(loading: bool) -> str:
    """Message shown while no file is playable."""
    return _LOADING_TEXT if loading else _PROMPT_TEXT


def draw_load_screen(surface: pygame.Surface, font: pygame.font.Font, loading: bool) -> pygame.Rect:
    """Draw the centred prompt; return the rect the text occupies."""
    surface.fill(WINDOW_BG)
    lines = load_screen_text(loading).split("\n")
    line_height = font.get_linesize()
    width = max(font.size(line)[0] for line in lines)
    bounds = pygame.Rect(0, 0, width, line_height * len(lines))
    bounds.center = surface.get_rect().center
    for number, line in enumerate(lines):
        surface.blit(font.render(line, True, TEXT), (bounds.x, bounds.y + number * line_height))
    return bounds


class MainInterface:
    """Waveform, transport controls, panner pad and volume knob for one engine."""

    def __init__(self, engine: AudioEngine, font: pygame.font.Font) -> None:
        self.engine = engine
        self.font = font
        self._width = 0
        self._dragging: str | None = None
        self._drag_start_y = 0
        self._drag_start_volume = 0.0
        empty = pygame.Rect(0, 0, 0, 0)
        self.header_y = 0
        self.plot_rect = empty
        self.play_button = empty
        self.stop_button = empty
        self.loop_box = empty
        self.loop_area = empty
        self.panel = empty
        self.panel_size = 0.0
        self.marker_rect = empty
        self.text_y = 0
        self.knob_rect = empty

    def _layout(self, width: int) -> None:
        self._width = width
        line = self.font.get_linesize()
        frame_height = line + 6
        content = max(width - 2 * PADDING, 1)

        y = PADDING
        self.header_y = y
        y += line + SPACING

        self.plot_rect = pygame.Rect(PADDING, y, content, SCOPE_HEIGHT)
        y += SCOPE_HEIGHT + SPACING

        play_width = self.font.size("Play/Pause")[0] + 8
        stop_width = self.font.size("Stop")[0] + 8
        self.play_button = pygame.Rect(PADDING, y, play_width, frame_height)
        self.stop_button = pygame.Rect(self.play_button.right + SPACING, y, stop_width, frame_height)
        self.loop_box = pygame.Rect(self.stop_button.right + SPACING, y, frame_height, frame_height)
        self.loop_area = pygame.Rect(
            self.loop_box.x, y, frame_height + SPACING + self.font.size("Loop")[0], frame_height
        )
        y += frame_height + SPACING

        self.panel_size = float(content)
        self.panel = pygame.Rect(PADDING, y, content, int(content * 0.55))
        marker_x, marker_y = self.engine.panner.marker_position(self.panel_size)
        self.marker_rect = pygame.Rect(0, 0, MARKER_SIZE, MARKER_SIZE)
        self.marker_rect.center = (int(self.panel.x + marker_x), int(self.panel.y + marker_y))
        y += self.panel.height + SPACING

        self.text_y = y
        y += 2 * line + SPACING

        self.knob_rect = pygame.Rect(PADDING, y + line, KNOB_SIZE, KNOB_SIZE)

    def _text(self, surface: pygame.Surface, text: str, pos: tuple[int, int]) -> None:
        surface.blit(self.font.render(text, True, TEXT), pos)

    def _button(self, surface: pygame.Surface, rect: pygame.Rect, label: str) -> None:
        pygame.draw.rect(surface, BUTTON, rect, border_radius=3)
        rendered = self.font.render(label, True, TEXT)
        surface.blit(rendered, rendered.get_rect(center=rect.center))

    def _draw_header(self, surface: pygame.Surface, file_name: str) -> None:
        rendered = self.font.render(file_name, True, TEXT)
        y_mid = self.header_y + rendered.get_height() // 2
        label_x = PADDING + 20
        pygame.draw.line(surface, FRAME_BG, (PADDING, y_mid), (label_x - SPACING, y_mid))
        surface.blit(rendered, (label_x, self.header_y))
        right_start = label_x + rendered.get_width() + SPACING
        pygame.draw.line(surface, FRAME_BG, (right_start, y_mid), (self._width - PADDING, y_mid))

    def _draw_panner(self, surface: pygame.Surface) -> None:
        panner = self.engine.panner
        size = self.panel_size
        pygame.draw.rect(surface, FRAME_BG, self.panel)
        center = (self.panel.x + size * 0.5, self.panel.y + size * 0.5)
        radius = size * 0.45
        for ring in range(1, 4):
            r = radius * ring / 3.0
            box = pygame.Rect(0, 0, int(2 * r), int(2 * r))
            box.center = (int(center[0]), int(center[1]))
            pygame.draw.arc(surface, TEXT, box, 0.0, math.pi)
        for spoke in range(5):
            angle = math.pi + spoke * math.pi / 4.0
            end = (center[0] + math.cos(angle) * radius, center[1] + math.sin(angle) * radius)
            pygame.draw.line(surface, TEXT, center, end)
        pygame.draw.rect(surface, BUTTON, self.marker_rect)
        line = self.font.get_linesize()
        self._text(surface, f"Angle: {panner.angle:.2f}°", (PADDING, self.text_y))
        self._text(surface, f"Distance: {panner.dist:.2f}", (PADDING, self.text_y + line))

    def _draw_knob(self, surface: pygame.Surface) -> None:
        volume = self.engine.master_volume
        self._text(surface, "Volume", (self.knob_rect.x, self.knob_rect.y - self.font.get_linesize()))
        center = self.knob_rect.center
        radius = KNOB_SIZE / 2
        pygame.draw.circle(surface, FRAME_BG, center, int(radius))
        t = min(max((volume - VOLUME_MIN) / (VOLUME_MAX - VOLUME_MIN), 0.0), 1.0)
        angle = _KNOB_ANGLE_MIN + t * (_KNOB_ANGLE_MAX - _KNOB_ANGLE_MIN)
        tip = (center[0] + math.cos(angle) * radius * 0.8, center[1] + math.sin(angle) * radius * 0.8)
        pygame.draw.line(surface, BUTTON, center, tip, 3)
        self._text(surface, f"{volume:.3f}", (self.knob_rect.right + SPACING, center[1]))

    def draw(self, surface: pygame.Surface, file_name: str) -> None:
        """Draw the whole interface onto ``surface``."""
        self._layout(surface.get_width())
        surface.fill(WINDOW_BG)
        self._draw_header(surface, file_name)

        data = self.engine.audio_data
        draw_plot_lines(surface, self.plot_rect, data.samples, PLOT_LINES, -1.0, 1.0)
        fraction = self.engine.index / data.size if data.size else 0.0
        draw_playhead(surface, self.plot_rect, fraction, PLOT_HISTOGRAM)

        self._button(surface, self.play_button, "Play/Pause")
        self._button(surface, self.stop_button, "Stop")
        draw_checkbox(surface, self.loop_box, self.engine.loop, "Loop", self.font)

        self._draw_panner(surface)
        self._draw_knob(surface)

    def _drag_panner(self, pos: tuple[int, int]) -> None:
        panner = self.engine.panner
        panner.set_from_pointer(pos[0] - self.panel.x, pos[1] - self.panel.y, self.panel_size)
        panner.update(panner.angle)
        self._layout(self._width)

    def _drag_knob(self, pos: tuple[int, int]) -> None:
        value = self._drag_start_volume + (self._drag_start_y - pos[1]) * _KNOB_DRAG_SPEED
        self.engine.master_volume = min(max(value, VOLUME_MIN), VOLUME_MAX)

    def handle_event(self, event: pygame.event.Event) -> bool:
        """React to one input event; return whether it was used."""
        engine = self.engine
        if event.type == pygame.KEYDOWN and event.key == pygame.K_SPACE:
            engine.play = not engine.play
            return True

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            pos = event.pos
            if self.play_button.collidepoint(pos):
                engine.play = not engine.play
            elif self.stop_button.collidepoint(pos):
                engine.play = False
                engine.index = 0
            elif self.loop_area.collidepoint(pos):
                engine.loop = not engine.loop
            elif self.marker_rect.collidepoint(pos):
                self._dragging = "panner"
            elif self.knob_rect.collidepoint(pos):
                self._dragging = "knob"
                self._drag_start_y = pos[1]
                self._drag_start_volume = engine.master_volume
            else:
                return False
            return True

        if event.type == pygame.MOUSEMOTION and self._dragging is not None:
            if self._dragging == "panner":
                self._drag_panner(event.pos)
            else:
                self._drag_knob(event.pos)
            return True

        if event.type == pygame.MOUSEBUTTONUP and event.button == 1 and self._dragging is not None:
            self._dragging = None
            return True

        return False