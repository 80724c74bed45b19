"""Gradient stop mapping shared by the bar and donut planners.

Extents are plain scalars along the gradient's axis, so the same mapping
serves a horizontal bar (x pixels) and a donut (its horizontal diameter).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from image_service.services.colors import Color


class GradientSpan(str, Enum):
    FULL_TRACK = "bar"
    FILLED_REGION = "progress"


@dataclass(frozen=True)
class GradientStop:
    offset: float  # percent
    color: Color


@dataclass(frozen=True)
class GradientMapping:
    start: float
    end: float
    stops: tuple[GradientStop, ...]


def gradient_stops(palette: Sequence[Color]) -> tuple[GradientStop, ...]:
    """One stop per palette entry, evenly spaced from 0% to 100%."""
    if not palette:
        raise ValueError("palette must contain at least one color")
    if len(palette) == 1:
        return (GradientStop(0.0, palette[0]), GradientStop(100.0, palette[0]))
    last = len(palette) - 1
    return tuple(GradientStop(i / last * 100, c) for i, c in enumerate(palette))


def map_stops(
    palette: Sequence[Color],
    span: GradientSpan,
    track_start: float,
    track_end: float,
    filled_end: float,
) -> GradientMapping:
    """Gradient coordinates for the given span.

    FULL_TRACK keeps the gradient fixed to the track so colors don't shift
    as progress changes; FILLED_REGION stretches it over the filled part so
    the last stop always sits at the leading edge.
    """
    end = track_end if span is GradientSpan.FULL_TRACK else filled_end
    return GradientMapping(start=track_start, end=end, stops=gradient_stops(palette))


class FillMode(str, Enum):
    """GRADIENT paints multi-color palettes as a gradient; SOLID uses the
    single palette color at the current progress."""
    GRADIENT = "gradient"
    SOLID = "solid"
