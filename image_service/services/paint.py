"""Fill selection for the progress region of bars and donuts."""

from __future__ import annotations

from typing import Sequence

from image_service.services.colors import Color, resolve_color
from image_service.services.gradients import FillMode, GradientSpan, map_stops
from image_service.services.svg import GradientDef, Paint


def progress_paint(
    palette: Sequence[Color],
    value: float,
    *,
    fill_mode: FillMode,
    span: GradientSpan,
    gradient_id: str,
    track_start: float,
    track_end: float,
    filled_end: float,
    axis_y: float,
) -> tuple[Paint, tuple[GradientDef, ...]]:
    """Paint for the filled region plus any gradient it references.

    Single-color palettes and SOLID mode never emit a gradient.
    """
    if len(palette) == 1 or fill_mode is FillMode.SOLID:
        return Paint.solid(resolve_color(palette, value / 100)), ()
    mapping = map_stops(palette, span, track_start, track_end, filled_end)
    return Paint.gradient(gradient_id), (GradientDef(gradient_id, mapping, axis_y),)
