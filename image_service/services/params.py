"""Query parameter parsing and validation.

Turns the flat `name -> string` mapping from the query string into an
immutable render request. All validation happens here, before any
geometry is computed. Unparsable numbers fall back to their defaults;
out-of-range numbers and bad colors are rejected.
"""

from __future__ import annotations

import logging
import math
import re
from typing import Mapping, Optional

from image_service.services.bar import BarRequest, Section
from image_service.services.colors import Color, parse_color, parse_palette
from image_service.services.donut import DonutRequest
from image_service.services.errors import (
    MalformedAspectRatio,
    MalformedMultiValue,
    OutOfRangeDimension,
)
from image_service.services.gradients import FillMode, GradientSpan

logger = logging.getLogger(__name__)

DEFAULT_PALETTE = "#3B82F6"
DEFAULT_BG = "#E5E7EB"

# name: (min, max)
BAR_LIMITS = {
    "width": (100, 2000),
    "aspectRatio": (1, 10),
    "padding": (0, 100),
    "radius": (0, 100),
    "segments": (1, 50),
    "gap": (0, 50),
}

DONUT_LIMITS = {
    "size": (50, 500),
    "strokeWidth": (5, 50),
    "padding": (0, 100),
}

_RATIO_RE = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*:\s*(\d+(?:\.\d+)?)\s*$")


def first_param(params: Mapping[str, str], *names: str) -> Optional[str]:
    """First non-empty value among parameter aliases."""
    for name in names:
        raw = params.get(name)
        if raw is not None and str(raw).strip() != "":
            return str(raw).strip()
    return None


def to_float(raw: Optional[str]) -> Optional[float]:
    if raw is None:
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def _number(params, name: str, default: float, limits=None) -> float:
    raw = first_param(params, name)
    value = to_float(raw)
    if value is None:
        if raw is not None:
            logger.debug("Ignoring unparsable %s=%r, using %s", name, raw, default)
        return default
    if limits and name in limits:
        check_range(name, value, *limits[name])
    return value


def check_range(name: str, value: float, lo: float, hi: float) -> None:
    if not lo <= value <= hi:
        raise OutOfRangeDimension(
            f"{name} must be between {lo:g} and {hi:g} (got {value:g})", param=name
        )


def dimension(params: Mapping[str, str], name: str, default: float, lo: float, hi: float) -> float:
    """Optional bounded number: missing or unparsable gives the default."""
    value = to_float(first_param(params, name))
    if value is None:
        return default
    check_range(name, value, lo, hi)
    return value


def clamped_float(raw: Optional[str], lo: float, hi: float, default: float) -> float:
    """Parse and clamp to lo..hi. Infinities clamp; NaN and garbage give the default."""
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    if math.isnan(value):
        return default
    return min(hi, max(lo, value))


def clamp_value(params: Mapping[str, str], default: float = 50) -> float:
    """Progress value clamped to 0..100."""
    return clamped_float(first_param(params, "value"), 0.0, 100.0, default)


def parse_aspect_ratio(raw: Optional[str], default: float = 4) -> float:
    """Accept `4`, `4.5` or `W:H`. Anything else is malformed."""
    if raw is None:
        return default
    match = _RATIO_RE.match(raw)
    if match:
        w, h = float(match.group(1)), float(match.group(2))
        if w <= 0 or h <= 0:
            raise MalformedAspectRatio(f"Invalid aspect ratio '{raw}'", param="aspectRatio")
        return w / h
    value = to_float(raw)
    if value is None or value <= 0:
        raise MalformedAspectRatio(
            f"Invalid aspect ratio '{raw}'. Use a number (4) or W:H (16:4)",
            param="aspectRatio",
        )
    return value


def parse_radius(params: Mapping[str, str]) -> Optional[float]:
    """Corner radius: empty or unparsable means auto (None); 0 is kept."""
    value = to_float(first_param(params, "radius"))
    if value is None:
        return None
    check_range("radius", value, *BAR_LIMITS["radius"])
    return value


def parse_span(params: Mapping[str, str]) -> GradientSpan:
    raw = (first_param(params, "gradientSpan", "gradientScope") or "").lower()
    if raw == GradientSpan.FILLED_REGION.value:
        return GradientSpan.FILLED_REGION
    return GradientSpan.FULL_TRACK


def parse_fill_mode(params: Mapping[str, str]) -> FillMode:
    raw = (first_param(params, "fill") or "").lower()
    return FillMode.SOLID if raw == FillMode.SOLID.value else FillMode.GRADIENT


def parse_sections(raw: str) -> tuple[Section, ...]:
    """Parse `30,20,10` or `30:#FF0000,20:#00FF00`.

    Non-positive entries are dropped. Raises MalformedMultiValue if any
    entry can't be read.
    """
    sections = []
    for token in raw.split(","):
        token = token.strip()
        if not token:
            continue
        number, _, color_text = token.partition(":")
        value = to_float(number.strip())
        if value is None:
            raise MalformedMultiValue(f"Invalid section value '{token}'", param="values")
        color: Optional[Color] = None
        if color_text.strip():
            try:
                color = parse_color(color_text, param="values")
            except ValueError as e:
                raise MalformedMultiValue(str(e), param="values") from e
        if value > 0:
            sections.append(Section(value, color))
    return tuple(sections)


def _sections_or_empty(params: Mapping[str, str]) -> Optional[tuple[Section, ...]]:
    """None when `values` is absent or blank; () when nothing in it is usable."""
    raw = first_param(params, "values")
    if raw is None:
        return None
    try:
        return parse_sections(raw)
    except MalformedMultiValue as e:
        logger.warning("Rendering empty progress for malformed values: %s", e.message)
        return ()


def _palette(params: Mapping[str, str]) -> tuple[Color, ...]:
    raw = first_param(params, "colors", "color")
    return parse_palette(raw or DEFAULT_PALETTE, param="color")


def _background(params: Mapping[str, str]) -> Color:
    return parse_color(first_param(params, "bg", "bgColor") or DEFAULT_BG, param="bg")


def parse_bar_request(params: Mapping[str, str]) -> BarRequest:
    """Validate bar parameters into a BarRequest."""
    palette = _palette(params)
    background = _background(params)

    width = _number(params, "width", 500, BAR_LIMITS)
    ratio = parse_aspect_ratio(first_param(params, "aspectRatio"))
    check_range("aspectRatio", ratio, *BAR_LIMITS["aspectRatio"])
    padding = _number(params, "padding", 20, BAR_LIMITS)
    if width - 2 * padding <= 0:
        raise OutOfRangeDimension("padding leaves no room for the bar", param="padding")

    segments = int(_number(params, "segments", 1, BAR_LIMITS))
    gap = _number(params, "gap", 4, BAR_LIMITS)

    req = BarRequest(
        value=clamp_value(params),
        palette=palette,
        background=background,
        width=width,
        aspect_ratio=ratio,
        padding=padding,
        radius=parse_radius(params),
        gradient_span=parse_span(params),
        fill_mode=parse_fill_mode(params),
        segments=segments,
        gap=gap,
        sections=_sections_or_empty(params),
    )
    if req.segments > 1 and req.cell_width <= 0:
        raise OutOfRangeDimension(
            f"gap {gap:g} leaves no room for {segments} segments", param="gap"
        )
    return req


def parse_donut_request(params: Mapping[str, str]) -> DonutRequest:
    """Validate donut parameters into a DonutRequest."""
    palette = _palette(params)
    background = _background(params)

    size = _number(params, "size", 200, DONUT_LIMITS)
    stroke = _number(params, "strokeWidth", 20, DONUT_LIMITS)
    padding = _number(params, "padding", 10, DONUT_LIMITS)
    if stroke >= size:
        raise OutOfRangeDimension("strokeWidth must be smaller than size", param="strokeWidth")

    return DonutRequest(
        value=clamp_value(params),
        palette=palette,
        background=background,
        size=size,
        stroke_width=stroke,
        padding=padding,
        gradient_span=parse_span(params),
        fill_mode=parse_fill_mode(params),
    )
