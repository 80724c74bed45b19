"""Star ratings, badges, pills, gradients and the calendar/clock icon."""

from typing import Optional

from fastapi import APIRouter, Query

from image_service.config import DATETIME_CACHE_MAX_AGE
from image_service.routers.common import present, render_or_400, svg_response
from image_service.services.badge import render_badge
from image_service.services.datetime_icon import render_datetime
from image_service.services.gradient_image import render_gradient
from image_service.services.pill import render_pill
from image_service.services.stars import render_stars

router = APIRouter()


@router.get(
    "/stars.svg",
    summary="Star rating",
    description="Row of stars with the fractional star partially filled.",
    tags=["Shapes"],
)
def stars_svg(
    value: Optional[str] = Query(None, description="Rating 0-total (clamped, default 0)"),
    total: Optional[str] = Query(None, description="Number of stars 1-10 (default 5)"),
    color: Optional[str] = Query(None, description="Fill color (default #FFD700)"),
    size: Optional[str] = Query(None, description="Row width 32-512 (default 200)"),
    padding: Optional[str] = Query(None, description="Space around the row 0-100 (default 10)"),
):
    params = present(value=value, total=total, color=color, size=size, padding=padding)
    return svg_response(render_or_400(render_stars, params))


@router.get(
    "/badge.svg",
    summary="Text badge",
    description="Pill-shaped text badge on a light tint of the text color.",
    tags=["Shapes"],
)
def badge_svg(
    text: Optional[str] = Query(None, description="Badge text"),
    color: Optional[str] = Query(None, description="Text color (default #3B82F6)"),
    text_color: Optional[str] = Query(None, alias="textColor", description="Alias of color"),
    background_color: Optional[str] = Query(
        None, alias="backgroundColor", description="Background (default: lighter shade of color)"
    ),
    padding: Optional[str] = Query(None, description="Horizontal padding 0-200 (default 8)"),
    vertical_padding: Optional[str] = Query(
        None, alias="verticalPadding", description="Vertical padding 0-100 (default 6)"
    ),
    radius: Optional[str] = Query(None, description="Corner radius 0-100; empty means pill"),
):
    params = present(
        text=text, color=color, textColor=text_color, backgroundColor=background_color,
        padding=padding, verticalPadding=vertical_padding, radius=radius,
    )
    return svg_response(render_or_400(render_badge, params))


@router.get(
    "/pill.svg",
    summary="Pill button",
    description="Fully rounded pill with a soft vertical fade and a top sheen.",
    tags=["Shapes"],
)
def pill_svg(
    text: Optional[str] = Query(None, description="Pill text (default 'Pill')"),
    color: Optional[str] = Query(None, description="Pill color (default #3B82F6)"),
    text_color: Optional[str] = Query(None, alias="textColor", description="Text color (default #FFFFFF)"),
    padding: Optional[str] = Query(None, description="Horizontal padding 0-200 (default 20)"),
    vertical_padding: Optional[str] = Query(
        None, alias="verticalPadding", description="Vertical padding 0-100 (default 12)"
    ),
):
    params = present(
        text=text, color=color, textColor=text_color,
        padding=padding, verticalPadding=vertical_padding,
    )
    return svg_response(render_or_400(render_pill, params))


@router.get(
    "/gradient.svg",
    summary="Linear gradient",
    description="Rectangle filled with a CSS-style linear gradient.",
    tags=["Shapes"],
)
def gradient_svg(
    colors: Optional[str] = Query(None, description="Comma-separated hex colors, alpha allowed"),
    color: Optional[str] = Query(None, description="Alias of colors"),
    direction: Optional[str] = Query(
        None, description="'to right', 'to bottom left', ... or an angle such as '45deg'"
    ),
    width: Optional[str] = Query(None, description="Width 1-2000 (default 500)"),
    height: Optional[str] = Query(None, description="Height 1-2000 (default 300)"),
    stops: Optional[str] = Query(None, description="Stop offsets in percent, one per color"),
):
    params = present(
        colors=colors, color=color, direction=direction,
        width=width, height=height, stops=stops,
    )
    return svg_response(render_or_400(render_gradient, params))


@router.get(
    "/datetime.svg",
    summary="Calendar and clock icon",
    description="Calendar page with month and day, plus a small analog clock.",
    tags=["Shapes"],
)
def datetime_svg(
    date: Optional[str] = Query(
        None, description="ISO 8601 date/time or millisecond timestamp (default: now)"
    ),
    size: Optional[str] = Query(None, description="Icon size 32-512 (default 128)"),
    header: Optional[str] = Query(None, description="Month band color (default #EF5350)"),
    stroke: Optional[str] = Query(None, description="Outline and text color (default #0B0B0B)"),
):
    params = present(date=date, size=size, header=header, stroke=stroke)
    return svg_response(render_or_400(render_datetime, params), max_age=DATETIME_CACHE_MAX_AGE)
