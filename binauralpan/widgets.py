"""Drawing helpers for the waveform plot, the playhead and the checkbox."""

from __future__ import annotations

import math
from collections.abc import Sequence

import pygame

FRAME_PADDING_X = 4
FRAME_PADDING_Y = 3
FRAME_ROUNDING = 3
ITEM_INNER_SPACING = 4
PLAYHEAD_WIDTH = 0.003

WINDOW_BG = (26, 26, 26)
FRAME_BG = (56, 71, 92)
FRAME_BG_HOVERED = (68, 85, 108)
BUTTON = (128, 166, 217)
TEXT = (255, 255, 255)
CHECK_MARK = (128, 166, 217)
PLOT_LINES = (156, 156, 156)
PLOT_HISTOGRAM = (230, 179, 0)


def _saturate(value: float) -> float:
    return min(max(value, 0.0), 1.0)


def playhead_span(fraction: float, fill_width: float = PLAYHEAD_WIDTH) -> tuple[float, float]:
    """Normalised (start, end) of the playhead bar for a playback fraction."""
    if math.isnan(fraction):
        fraction = 0.0
    start = math.fmod(fraction, 1.0) * (1.0 + fill_width) - fill_width
    return _saturate(start), _saturate(start + fill_width)


def plot_line_points(
    values: Sequence[float],
    width: float,
    height: float,
    offset: int = 0,
    scale_min: float | None = None,
    scale_max: float | None = None,
) -> list[tuple[float, float]]:
    """Points of a line plot of ``values`` inside a ``width`` x ``height`` box.

    A missing scale bound is taken from the values, ignoring NaN.
    Returns an empty list when there is nothing to draw.
    """
    count = len(values)
    if count < 2:
        return []
    if scale_min is None or scale_max is None:
        finite = [v for v in values if not math.isnan(v)]
        if scale_min is None:
            scale_min = min(finite, default=math.inf)
        if scale_max is None:
            scale_max = max(finite, default=-math.inf)

    resolution = min(int(width), count) - 1
    if resolution < 1:
        return []
    item_count = count - 1
    t_step = 1.0 / resolution
    inv_scale = 0.0 if scale_min == scale_max else 1.0 / (scale_max - scale_min)

    def point(t: float, value: float) -> tuple[float, float]:
        return t * width, (1.0 - _saturate((value - scale_min) * inv_scale)) * height

    t0 = 0.0
    points = [point(t0, values[offset % count])]
    for _ in range(resolution):
        t1 = t0 + t_step
        index = int(t0 * item_count + 0.5)
        points.append(point(t1, values[(index + offset + 1) % count]))
        t0 = t1
    return points


def draw_playhead(
    surface: pygame.Surface,
    rect: pygame.Rect,
    fraction: float,
    color=PLOT_HISTOGRAM,
) -> pygame.Rect:
    """Draw a thin vertical bar at ``fraction`` of ``rect``; return the bar's rect."""
    start, end = playhead_span(fraction)
    x0 = rect.x + start * rect.width
    x1 = rect.x + end * rect.width
    left = min(int(round(x0)), rect.right - 1)
    bar = pygame.Rect(left, rect.y, max(1, int(round(x1 - x0))), rect.height)
    bar = bar.clip(rect)
    pygame.draw.rect(surface, color, bar)
    return bar


def draw_plot_lines(
    surface: pygame.Surface,
    rect: pygame.Rect,
    values: Sequence[float],
    color=PLOT_LINES,
    scale_min: float | None = None,
    scale_max: float | None = None,
) -> list[tuple[float, float]]:
    """Draw a framed line plot of ``values``; return the points in surface coordinates."""
    pygame.draw.rect(surface, FRAME_BG, rect, border_radius=FRAME_ROUNDING)
    inner = rect.inflate(-2 * FRAME_PADDING_X, -2 * FRAME_PADDING_Y)
    points = [
        (inner.x + x, inner.y + y)
        for x, y in plot_line_points(values, inner.width, inner.height, 0, scale_min, scale_max)
    ]
    if len(points) >= 2:
        pygame.draw.lines(surface, color, False, points)
    return points


def draw_checkbox(
    surface: pygame.Surface,
    rect: pygame.Rect,
    checked: bool,
    label: str,
    font: pygame.font.Font,
) -> pygame.Rect:
    """Draw a checkbox that shows a filled square when checked; return its clickable area."""
    pygame.draw.rect(surface, FRAME_BG, rect, border_radius=FRAME_ROUNDING)
    if checked:
        pad = max(1, int(rect.height / 3.6))
        pygame.draw.rect(
            surface, CHECK_MARK, rect.inflate(-2 * pad, -2 * pad), border_radius=FRAME_ROUNDING
        )
    total = pygame.Rect(rect)
    if label:
        text = font.render(label, True, TEXT)
        label_x = rect.right + ITEM_INNER_SPACING
        surface.blit(text, (label_x, rect.y + (rect.height - text.get_height()) // 2))
        total.width = rect.width + ITEM_INNER_SPACING + text.get_width()
    return total