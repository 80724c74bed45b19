"""Progress bars and donuts, as SVG or PNG."""

from enum import Enum
from typing import Optional

from fastapi import APIRouter, Query

from image_service.routers.common import (
    image_response,
    present,
    render_or_400,
)
from image_service.services.renderer import render_bar, render_donut

router = APIRouter()


class ImageFormat(str, Enum):
    svg = "svg"
    png = "png"


_COLOR = "Hex color, or comma-separated hex colors for a gradient (e.g. #3B82F6,#8B5CF6)"
_SPAN = "'bar' spreads the gradient over the whole track, 'progress' over the filled part"
_FILL = "'gradient' (default) or 'solid' (the palette color at the current progress)"


# ---------------------------------------------------------------------------
# Progress bar
# ---------------------------------------------------------------------------

@router.get(
    "/progress-bar.{fmt}",
    summary="Progress bar",
    description=(
        "Horizontal progress bar, rendered as SVG or PNG. Single fill by "
        "default; `segments` > 1 splits the track into cells; `values` stacks "
        "colored sections."
    ),
    tags=["Progress"],
)
def progress_bar(
    fmt: ImageFormat,
    value: Optional[str] = Query(None, description="Progress 0-100 (clamped)"),
    color: Optional[str] = Query(None, description=_COLOR),
    colors: Optional[str] = Query(None, description="Alias of color; wins when both are given"),
    bg: Optional[str] = Query(None, description="Track color (default #E5E7EB)"),
    bg_color: Optional[str] = Query(None, alias="bgColor", description="Alias of bg"),
    width: Optional[str] = Query(None, description="Canvas width 100-2000 (default 500)"),
    aspect_ratio: Optional[str] = Query(
        None, alias="aspectRatio", description="Width/height as a number (4) or W:H (16:4), 1-10"
    ),
    padding: Optional[str] = Query(None, description="Horizontal inset 0-100 (default 20)"),
    radius: Optional[str] = Query(None, description="Corner radius 0-100; empty means auto"),
    gradient_span: Optional[str] = Query(None, alias="gradientSpan", description=_SPAN),
    gradient_scope: Optional[str] = Query(None, alias="gradientScope", description="Alias of gradientSpan"),
    fill: Optional[str] = Query(None, description=_FILL),
    segments: Optional[str] = Query(None, description="Number of cells 1-50 (default 1)"),
    gap: Optional[str] = Query(None, description="Gap between cells 0-50 (default 4)"),
    values: Optional[str] = Query(
        None, description="Stacked sections, e.g. 30,20,10 or 30:#FF0000,20:#00FF00"
    ),
):
    params = present(
        value=value, color=color, colors=colors, bg=bg, bgColor=bg_color,
        width=width, aspectRatio=aspect_ratio, padding=padding, radius=radius,
        gradientSpan=gradient_span, gradientScope=gradient_scope, fill=fill,
        segments=segments, gap=gap, values=values,
    )
    return image_response(render_or_400(render_bar, params), fmt.value)


# ---------------------------------------------------------------------------
# Progress donut
# ---------------------------------------------------------------------------

@router.get(
    "/progress-donut.{fmt}",
    summary="Progress donut",
    description="Circular progress indicator with a percentage label, as SVG or PNG.",
    tags=["Progress"],
)
def progress_donut(
    fmt: ImageFormat,
    value: Optional[str] = Query(None, description="Progress 0-100 (clamped)"),
    color: Optional[str] = Query(None, description=_COLOR),
    colors: Optional[str] = Query(None, description="Alias of color; wins when both are given"),
    bg: Optional[str] = Query(None, description="Ring color (default #E5E7EB)"),
    bg_color: Optional[str] = Query(None, alias="bgColor", description="Alias of bg"),
    size: Optional[str] = Query(None, description="Ring diameter 50-500 (default 200)"),
    stroke_width: Optional[str] = Query(
        None, alias="strokeWidth", description="Ring thickness 5-50 (default 20)"
    ),
    padding: Optional[str] = Query(None, description="Space around the ring 0-100 (default 10)"),
    gradient_span: Optional[str] = Query(None, alias="gradientSpan", description=_SPAN),
    gradient_scope: Optional[str] = Query(None, alias="gradientScope", description="Alias of gradientSpan"),
    fill: Optional[str] = Query(None, description=_FILL),
):
    params = present(
        value=value, color=color, colors=colors, bg=bg, bgColor=bg_color,
        size=size, strokeWidth=stroke_width, padding=padding,
        gradientSpan=gradient_span, gradientScope=gradient_scope, fill=fill,
    )
    return image_response(render_or_400(render_donut, params), fmt.value)
