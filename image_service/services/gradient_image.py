"""Plain linear-gradient images (CSS-style directions)."""

from __future__ import annotations

import math
import re
from typing import Mapping

from image_service.services.colors import parse_palette
from image_service.services.errors import RenderValidationError
from image_service.services.gradients import GradientStop
from image_service.services.params import check_range, first_param, to_float
from image_service.services.svg import BoxGradient, Paint, Rect, RenderPlan, to_svg

GRADIENT_ID = "colorGradient"

_DIRECTIONS = {
    "to right": (0, 0, 100, 0),
    "to left": (100, 0, 0, 0),
    "to bottom": (0, 0, 0, 100),
    "to top": (0, 100, 0, 0),
    "to bottom right": (0, 0, 100, 100),
    "to bottom left": (100, 0, 0, 100),
    "to top right": (0, 100, 100, 0),
    "to top left": (100, 100, 0, 0),
}
_ANGLE_RE = re.compile(r"(-?\d+(?:\.\d+)?)deg")


def _pct(value: float) -> float:
    return min(100.0, max(0.0, value))


def direction_coordinates(direction: str) -> tuple[float, float, float, float]:
    """x1, y1, x2, y2 in percent for a CSS gradient direction."""
    key = " ".join(direction.lower().split())
    if key in _DIRECTIONS:
        return _DIRECTIONS[key]
    match = _ANGLE_RE.search(key)
    if not match:
        return _DIRECTIONS["to right"]
    rad = math.radians(float(match.group(1)))
    return (
        _pct(50 - 50 * math.cos(rad)),
        _pct(50 - 50 * math.sin(rad)),
        _pct(50 + 50 * math.cos(rad)),
        _pct(50 + 50 * math.sin(rad)),
    )


def _offsets(params: Mapping[str, str], count: int) -> list[float]:
    """Stop offsets in percent: explicit `stops`, or evenly spaced."""
    raw = first_param(params, "stops")
    if raw:
        stops = [s.strip() for s in raw.split(",")]
        if len(stops) != count:
            raise RenderValidationError(
                "Number of stops must match number of colors", param="stops"
            )
        offsets = []
        for stop in stops:
            value = to_float(stop.rstrip("%"))
            if value is None or not 0 <= value <= 100:
                raise RenderValidationError(f"Invalid stop '{stop}'", param="stops")
            offsets.append(value)
        return offsets
    if count == 1:
        return [0.0, 100.0]
    return [i / (count - 1) * 100 for i in range(count)]


def plan_gradient(params: Mapping[str, str]) -> RenderPlan:
    width = to_float(first_param(params, "width")) or 500
    height = to_float(first_param(params, "height")) or 300
    check_range("width", width, 1, 2000)
    check_range("height", height, 1, 2000)

    colors = parse_palette(first_param(params, "colors", "color") or "#3B82F6", param="colors")
    offsets = _offsets(params, len(colors))
    x1, y1, x2, y2 = direction_coordinates(first_param(params, "direction") or "to right")
    stops = tuple(
        GradientStop(offset, colors[0] if len(colors) == 1 else colors[i])
        for i, offset in enumerate(offsets)
    )

    return RenderPlan(
        width=width,
        height=height,
        background=(Rect(0, 0, width, height, Paint.gradient(GRADIENT_ID)),),
        gradients=(BoxGradient(GRADIENT_ID, stops, x1, y1, x2, y2),),
        mode="gradient",
    )


def render_gradient(params: Mapping[str, str]) -> str:
    return to_svg(plan_gradient(params))
